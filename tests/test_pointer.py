"""Tests for pointer backends, with the platform libraries faked out."""

from __future__ import annotations

from types import SimpleNamespace
from unittest.mock import MagicMock

import pytest

from mouse_replay import pointer as pointer_mod
from mouse_replay.actions import ActionError, MouseButton
from mouse_replay.pointer import PyAutoGuiPointer, PynputPointer, create_pointer


BUTTONS = SimpleNamespace(left="L", right="R", middle="M")


class FakeController:
    def __init__(self):
        self.position = (0, 0)
        self.calls = []

    def move(self, dx, dy):
        self.calls.append(("move", dx, dy))

    def press(self, button):
        self.calls.append(("press", button))

    def release(self, button):
        self.calls.append(("release", button))

    def click(self, button):
        self.calls.append(("click", button))

    def scroll(self, dx, dy):
        self.calls.append(("scroll", dx, dy))


class TestPynputPointer:
    def test_operations(self):
        drv = PynputPointer(FakeController, BUTTONS)
        drv.move_to(10, 20)
        drv.move_relative(5, -5)
        drv.press(MouseButton.LEFT)
        drv.release(MouseButton.LEFT)
        drv.click(MouseButton.MIDDLE)
        drv.scroll(-3)
        ctrl = drv._controller
        assert ctrl.position == (10, 20)
        assert ctrl.calls == [
            ("move", 5, -5),
            ("press", "L"),
            ("release", "L"),
            ("click", "M"),
            ("scroll", 0, -3),
        ]


class TestPyAutoGuiPointer:
    def test_operations(self):
        gui = MagicMock()
        drv = PyAutoGuiPointer(gui, fail_safe=False)
        assert gui.FAILSAFE is False
        assert gui.PAUSE == 0.0
        drv.move_to(1, 2)
        drv.move_relative(3, 4)
        drv.press(MouseButton.RIGHT)
        drv.release(MouseButton.RIGHT)
        drv.click(MouseButton.LEFT)
        drv.scroll(5)
        gui.moveTo.assert_called_with(1, 2)
        gui.moveRel.assert_called_with(3, 4)
        gui.mouseDown.assert_called_with(button="right")
        gui.mouseUp.assert_called_with(button="right")
        gui.click.assert_called_with(button="left")
        gui.scroll.assert_called_with(5)


class TestCreatePointer:
    def test_auto_prefers_pynput(self, monkeypatch):
        monkeypatch.setattr(pointer_mod, "_get_pynput_mouse", lambda: (FakeController, BUTTONS))
        monkeypatch.setattr(pointer_mod, "_get_pyautogui", lambda: MagicMock())
        assert isinstance(create_pointer("auto"), PynputPointer)

    def test_auto_falls_back_to_pyautogui(self, monkeypatch):
        monkeypatch.setattr(pointer_mod, "_get_pynput_mouse", lambda: (None, None))
        monkeypatch.setattr(pointer_mod, "_get_pyautogui", lambda: MagicMock())
        assert isinstance(create_pointer("auto"), PyAutoGuiPointer)

    def test_explicit_pyautogui(self, monkeypatch):
        monkeypatch.setattr(pointer_mod, "_get_pynput_mouse", lambda: (FakeController, BUTTONS))
        monkeypatch.setattr(pointer_mod, "_get_pyautogui", lambda: MagicMock())
        assert isinstance(create_pointer("pyautogui"), PyAutoGuiPointer)

    def test_explicit_pynput_unavailable(self, monkeypatch):
        monkeypatch.setattr(pointer_mod, "_get_pynput_mouse", lambda: (None, None))
        monkeypatch.setattr(pointer_mod, "_get_pyautogui", lambda: MagicMock())
        with pytest.raises(ActionError, match="pynput"):
            create_pointer("pynput")

    def test_nothing_available(self, monkeypatch):
        monkeypatch.setattr(pointer_mod, "_get_pynput_mouse", lambda: (None, None))
        monkeypatch.setattr(pointer_mod, "_get_pyautogui", lambda: None)
        with pytest.raises(ActionError, match="No mouse backend"):
            create_pointer()

    def test_unknown_backend(self):
        with pytest.raises(ActionError):
            create_pointer("xdotool")
