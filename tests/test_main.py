"""End-to-end tests for the command line entry point."""

from __future__ import annotations

import json

import pytest

import main
from tests.conftest import RecordingPointer, write_csv


@pytest.fixture
def workdir(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def recorder(monkeypatch):
    rec = RecordingPointer()
    monkeypatch.setattr(main, "create_pointer", lambda backend, fail_safe=True: rec)
    monkeypatch.setattr("time.sleep", lambda s: None)
    return rec


class TestMain:
    def test_click_file(self, workdir, recorder, capsys):
        write_csv(workdir / "clicks.csv", "click,150,300,,,,")
        assert main.main(["clicks.csv"]) == 0
        assert recorder.calls == [("move_to", 150, 300), ("click", "left")]
        out = capsys.readouterr().out
        assert "Using CSV file:" in out
        assert "Automation completed successfully!" in out
        assert not (workdir / "mouse_actions.csv").exists()

    def test_missing_argument_uses_default(self, workdir, recorder, capsys):
        assert main.main(["missing.csv"]) == 0
        assert (workdir / "mouse_actions.csv").exists()
        assert ("scroll", -5) in recorder.calls
        assert "Specified file 'missing.csv' not found." in capsys.readouterr().out

    def test_malformed_row_exits_nonzero(self, workdir, recorder, capsys):
        write_csv(workdir / "bad.csv", "move,1,1,,,,", "move,one,1,,,,")
        assert main.main(["bad.csv"]) == 1
        assert recorder.calls == [("move_to", 1, 1)]
        assert "x_position" in capsys.readouterr().err

    def test_unknown_action_still_succeeds(self, workdir, recorder, capsys):
        write_csv(workdir / "odd.csv", "teleport,1,1,,,,")
        assert main.main(["odd.csv"]) == 0
        assert recorder.calls == []
        assert "WARNING: Unknown action: teleport" in capsys.readouterr().out

    def test_unmatched_drag_warning(self, workdir, recorder, capsys):
        write_csv(workdir / "drag.csv", "drag,1,1,,,,")
        assert main.main(["drag.csv"]) == 0
        assert recorder.calls == [("move_to", 1, 1), ("press", "left")]
        assert "drag on line 2 is never released" in capsys.readouterr().out

    def test_backend_error_exits_nonzero(self, workdir, monkeypatch, capsys):
        from mouse_replay import ActionError

        def fail(backend, fail_safe=True):
            raise ActionError("No mouse backend available (install pynput or pyautogui)")

        monkeypatch.setattr(main, "create_pointer", fail)
        write_csv(workdir / "a.csv", "wait,,,,,,")
        assert main.main(["a.csv"]) == 1
        assert "No mouse backend" in capsys.readouterr().err

    def test_settings_and_log_export(self, workdir, recorder):
        (workdir / "replay_settings.json").write_text(
            json.dumps({"default_csv_name": "moves.csv", "log_file": "replay.log"}),
            encoding="utf-8",
        )
        assert main.main([]) == 0
        assert (workdir / "moves.csv").exists()
        log_text = (workdir / "replay.log").read_text(encoding="utf-8")
        assert "Automation completed successfully!" in log_text

    def test_invalid_utf8_exits_nonzero(self, workdir, recorder, capsys):
        (workdir / "bad.csv").write_bytes(
            b"action,x_position,y_position,delay_ms,button,modifiers,repeat_count\nmove,1,1,,\xff,,\n"
        )
        assert main.main(["bad.csv"]) == 1
        assert "ERROR:" in capsys.readouterr().err
        assert recorder.calls == []

    def test_invalid_settings_do_not_abort(self, workdir, recorder, capsys):
        (workdir / "replay_settings.json").write_text('{"fail_safe": 3}', encoding="utf-8")
        write_csv(workdir / "a.csv", "move,1,1,,,,")
        assert main.main(["a.csv"]) == 0
        assert recorder.calls == [("move_to", 1, 1)]
        assert "Ignoring settings file" in capsys.readouterr().out
        assert (workdir / "replay_settings.bak").exists()

    def test_start_message_names_backend(self, workdir, recorder, capsys):
        write_csv(workdir / "a.csv", "wait,,,,,,")
        assert main.main(["a.csv"]) == 0
        out = capsys.readouterr().out
        assert "Starting automation with recording backend..." in out
        assert "Completed 1 row(s)" in out
