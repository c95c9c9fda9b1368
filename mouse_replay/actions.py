"""
Mouse actions: one small class per row kind of a replay file.

Supported actions (action column in CSV):
- move:          move to absolute (x, y)
- move_relative: move by (dx, dy)
- click:         click a button, optionally moving first
- double_click:  two clicks with a short pause in between
- right_click:   click the right button
- drag:          press the left button and keep it held
- release:       release the left button
- scroll:        vertical wheel scroll, direction from the modifiers column
- wait:          no-op, the row delay does the waiting

Notes
-----
- A drag leaves the button pressed until a later release row lets go of it.
  The held state belongs to the OS, the player does not track it.
- Anything not in the list above becomes an UnknownAction which only logs.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
import time
from typing import TYPE_CHECKING, Callable, ClassVar, Optional

if TYPE_CHECKING:  # pragma: no cover
    from .pointer import PointerDriver
    from .script_model import ActionRecord


class ActionError(Exception):
    pass


class MouseButton(str, Enum):
    LEFT = "left"
    RIGHT = "right"
    MIDDLE = "middle"

    @staticmethod
    def from_field(value: Optional[str]) -> "MouseButton":
        """Map the button column to a button; anything unknown means left."""
        if value == "right":
            return MouseButton.RIGHT
        if value == "middle":
            return MouseButton.MIDDLE
        return MouseButton.LEFT


class ScrollDirection(Enum):
    UP = 1
    DOWN = -1

    @staticmethod
    def from_modifiers(value: Optional[str]) -> "ScrollDirection":
        return ScrollDirection.DOWN if value == "down" else ScrollDirection.UP


@dataclass(frozen=True)
class Point:
    x: int
    y: int

    def __str__(self) -> str:
        return f"({self.x}, {self.y})"


@dataclass
class BaseAction:
    """Common interface for all actions."""

    # Scroll uses repeat_count as its magnitude instead of a loop count.
    consumes_repeat_count: ClassVar[bool] = False

    def run(self, ctx: "RunContext") -> None:  # pragma: no cover - overridden
        raise NotImplementedError

    @staticmethod
    def from_record(record: "ActionRecord") -> "BaseAction":
        kind = record.action
        point = _point(record.x_position, record.y_position)
        if kind == "move":
            return MoveAction(target=point)
        if kind == "move_relative":
            return MoveRelativeAction(offset=point)
        if kind == "click":
            return ClickAction(target=point, button=MouseButton.from_field(record.button))
        if kind == "double_click":
            return DoubleClickAction(target=point, button=MouseButton.from_field(record.button))
        if kind == "right_click":
            return RightClickAction(target=point)
        if kind == "drag":
            return DragAction(target=point)
        if kind == "release":
            return ReleaseAction(target=point)
        if kind == "scroll":
            amount = record.repeat_count if record.repeat_count is not None else 1
            return ScrollAction(
                direction=ScrollDirection.from_modifiers(record.modifiers),
                amount=amount,
            )
        if kind == "wait":
            return WaitAction()
        return UnknownAction(name=kind)


def _point(x: Optional[int], y: Optional[int]) -> Optional[Point]:
    if x is None or y is None:
        return None
    return Point(x, y)


@dataclass
class MoveAction(BaseAction):
    target: Optional[Point] = None

    def run(self, ctx: "RunContext") -> None:
        if self.target is not None:
            ctx.move_to(self.target)


@dataclass
class MoveRelativeAction(BaseAction):
    offset: Optional[Point] = None

    def run(self, ctx: "RunContext") -> None:
        if self.offset is None:
            return
        ctx.log(f"Moving relatively by: {self.offset}")
        ctx.call("move_relative", self.offset.x, self.offset.y)


@dataclass
class ClickAction(BaseAction):
    target: Optional[Point] = None
    button: MouseButton = MouseButton.LEFT

    def run(self, ctx: "RunContext") -> None:
        if self.target is not None:
            ctx.move_to(self.target)
        ctx.log(f"Clicking with {self.button.value} button")
        ctx.call("click", self.button)


@dataclass
class DoubleClickAction(BaseAction):
    target: Optional[Point] = None
    button: MouseButton = MouseButton.LEFT

    def run(self, ctx: "RunContext") -> None:
        if self.target is not None:
            ctx.move_to(self.target)
        ctx.log(f"Double-clicking with {self.button.value} button")
        ctx.call("click", self.button)
        ctx.sleep_ms(ctx.double_click_interval_ms)
        ctx.call("click", self.button)


@dataclass
class RightClickAction(BaseAction):
    target: Optional[Point] = None

    def run(self, ctx: "RunContext") -> None:
        if self.target is not None:
            ctx.move_to(self.target)
        ctx.log("Right-clicking")
        ctx.call("click", MouseButton.RIGHT)


@dataclass
class DragAction(BaseAction):
    target: Optional[Point] = None

    def run(self, ctx: "RunContext") -> None:
        if self.target is not None:
            ctx.log(f"Starting drag at: {self.target}")
            ctx.call("move_to", self.target.x, self.target.y)
        ctx.log("Pressing left button")
        ctx.call("press", MouseButton.LEFT)


@dataclass
class ReleaseAction(BaseAction):
    target: Optional[Point] = None

    def run(self, ctx: "RunContext") -> None:
        if self.target is not None:
            ctx.log(f"Releasing at: {self.target}")
            ctx.call("move_to", self.target.x, self.target.y)
        ctx.log("Releasing mouse button")
        ctx.call("release", MouseButton.LEFT)


@dataclass
class ScrollAction(BaseAction):
    direction: ScrollDirection = ScrollDirection.UP
    amount: int = 1

    consumes_repeat_count: ClassVar[bool] = True

    def run(self, ctx: "RunContext") -> None:
        ctx.log(f"Scrolling {self.direction.name.lower()} by {self.amount} units")
        ctx.call("scroll", self.direction.value * self.amount)


@dataclass
class WaitAction(BaseAction):
    def run(self, ctx: "RunContext") -> None:
        ctx.log("Waiting...")


@dataclass
class UnknownAction(BaseAction):
    name: str = ""

    def run(self, ctx: "RunContext") -> None:
        ctx.warn(f"Unknown action: {self.name}")


class RunContext:
    """Small helper object passed to actions at runtime."""

    def __init__(
        self,
        pointer: "PointerDriver",
        logger: Optional[Callable[[str], None]] = None,
        warner: Optional[Callable[[str], None]] = None,
        sleep_hook: Optional[Callable[[float], None]] = None,
        double_click_interval_ms: int = 10,
    ):
        self.pointer = pointer
        self.double_click_interval_ms = double_click_interval_ms
        self._logger = logger
        self._warner = warner
        self._sleep = sleep_hook

    def log(self, msg: str) -> None:
        if self._logger:
            self._logger(msg)

    def warn(self, msg: str) -> None:
        if self._warner:
            self._warner(msg)
        else:
            self.log(msg)

    def sleep(self, seconds: float) -> None:
        if self._sleep:
            self._sleep(seconds)
        else:
            time.sleep(seconds)

    def sleep_ms(self, ms: int) -> None:
        self.sleep(max(ms, 0) / 1000.0)

    def move_to(self, point: Point) -> None:
        self.log(f"Moving to position: {point}")
        self.call("move_to", point.x, point.y)

    def call(self, operation: str, *args) -> None:
        """Invoke a pointer operation, turning backend failures into ActionError."""
        try:
            getattr(self.pointer, operation)(*args)
        except ActionError:
            raise
        except Exception as e:
            raise ActionError(f"{operation} failed: {e}") from e
