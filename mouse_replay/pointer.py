"""
Pointer drivers: the platform side of the player.

Two backends implement the same small capability set:
- PynputPointer:    pynput.mouse.Controller (preferred, no pauses injected)
- PyAutoGuiPointer: pyautogui, with its corner fail-safe

Scroll amounts are signed wheel units; positive scrolls up on both backends.
"""

from __future__ import annotations

from typing import Any, Dict, Optional, Tuple

from .actions import ActionError, MouseButton


class PointerDriver:
    """Capability set consumed by the actions."""

    name = "base"

    def move_to(self, x: int, y: int) -> None:  # pragma: no cover - interface
        raise NotImplementedError

    def move_relative(self, dx: int, dy: int) -> None:  # pragma: no cover - interface
        raise NotImplementedError

    def press(self, button: MouseButton) -> None:  # pragma: no cover - interface
        raise NotImplementedError

    def release(self, button: MouseButton) -> None:  # pragma: no cover - interface
        raise NotImplementedError

    def click(self, button: MouseButton) -> None:  # pragma: no cover - interface
        raise NotImplementedError

    def scroll(self, amount: int) -> None:  # pragma: no cover - interface
        raise NotImplementedError


class PynputPointer(PointerDriver):
    name = "pynput"

    def __init__(self, controller_cls: Any, button_mod: Any):
        self._controller = controller_cls()
        self._buttons: Dict[MouseButton, Any] = {
            MouseButton.LEFT: button_mod.left,
            MouseButton.RIGHT: button_mod.right,
            MouseButton.MIDDLE: button_mod.middle,
        }

    def move_to(self, x: int, y: int) -> None:
        self._controller.position = (int(x), int(y))

    def move_relative(self, dx: int, dy: int) -> None:
        self._controller.move(int(dx), int(dy))

    def press(self, button: MouseButton) -> None:
        self._controller.press(self._buttons[button])

    def release(self, button: MouseButton) -> None:
        self._controller.release(self._buttons[button])

    def click(self, button: MouseButton) -> None:
        self._controller.click(self._buttons[button])

    def scroll(self, amount: int) -> None:
        self._controller.scroll(0, int(amount))


class PyAutoGuiPointer(PointerDriver):
    name = "pyautogui"

    def __init__(self, pyautogui_mod: Any, fail_safe: bool = True):
        self._gui = pyautogui_mod
        # Move mouse to a corner to abort the replay
        self._gui.FAILSAFE = fail_safe
        self._gui.PAUSE = 0.0  # row delays come from the file only

    def move_to(self, x: int, y: int) -> None:
        self._gui.moveTo(int(x), int(y))

    def move_relative(self, dx: int, dy: int) -> None:
        self._gui.moveRel(int(dx), int(dy))

    def press(self, button: MouseButton) -> None:
        self._gui.mouseDown(button=button.value)

    def release(self, button: MouseButton) -> None:
        self._gui.mouseUp(button=button.value)

    def click(self, button: MouseButton) -> None:
        self._gui.click(button=button.value)

    def scroll(self, amount: int) -> None:
        self._gui.scroll(int(amount))


def create_pointer(backend: str = "auto", fail_safe: bool = True) -> PointerDriver:
    """Build the pointer driver for ``backend`` (auto|pynput|pyautogui)."""
    backend = (backend or "auto").strip().lower()
    if backend not in ("auto", "pynput", "pyautogui"):
        raise ActionError(f"Unknown pointer backend: {backend}")

    if backend in ("auto", "pynput"):
        m_ctrl_cls, m_btn_mod = _get_pynput_mouse()
        if m_ctrl_cls is not None and m_btn_mod is not None:
            return PynputPointer(m_ctrl_cls, m_btn_mod)
        if backend == "pynput":
            raise ActionError("pynput mouse backend not available (install pynput)")

    gui = _get_pyautogui()
    if gui is not None:
        return PyAutoGuiPointer(gui, fail_safe=fail_safe)
    if backend == "pyautogui":
        raise ActionError("pyautogui backend not available (install pyautogui)")
    raise ActionError("No mouse backend available (install pynput or pyautogui)")


def _get_pynput_mouse() -> Tuple[Optional[Any], Optional[Any]]:
    """Import pynput.mouse lazily and return (MouseControllerClass, ButtonModule)."""
    try:
        from pynput.mouse import Controller as MouseController, Button as MouseButtonMod  # type: ignore
        return MouseController, MouseButtonMod
    except Exception:  # no display or platform backend
        return None, None


def _get_pyautogui() -> Optional[Any]:
    """Import pyautogui lazily; it needs a display at import time."""
    try:
        import pyautogui  # type: ignore
        return pyautogui
    except Exception:
        return None
