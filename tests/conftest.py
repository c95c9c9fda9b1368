"""Shared test fixtures."""

from __future__ import annotations

from pathlib import Path
from typing import Any, List, Tuple

import pytest

from mouse_replay.pointer import PointerDriver


class RecordingPointer(PointerDriver):
    """Pointer driver that records calls instead of touching the desktop."""

    name = "recording"

    def __init__(self) -> None:
        self.calls: List[Tuple[Any, ...]] = []

    def move_to(self, x, y):
        self.calls.append(("move_to", x, y))

    def move_relative(self, dx, dy):
        self.calls.append(("move_relative", dx, dy))

    def press(self, button):
        self.calls.append(("press", button.value))

    def release(self, button):
        self.calls.append(("release", button.value))

    def click(self, button):
        self.calls.append(("click", button.value))

    def scroll(self, amount):
        self.calls.append(("scroll", amount))


class FakeSleep:
    """Sleep hook that records durations (in seconds) without waiting."""

    def __init__(self) -> None:
        self.calls: List[float] = []

    def __call__(self, seconds: float) -> None:
        self.calls.append(seconds)


HEADER = "action,x_position,y_position,delay_ms,button,modifiers,repeat_count"


def write_csv(path: Path, *rows: str) -> Path:
    path.write_text("\n".join((HEADER,) + rows) + "\n", encoding="utf-8")
    return path


@pytest.fixture
def pointer() -> RecordingPointer:
    return RecordingPointer()


@pytest.fixture
def fake_sleep() -> FakeSleep:
    return FakeSleep()
