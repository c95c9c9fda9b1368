"""
Domain models for the Mouse Replay application.
"""

from enum import Enum
from dataclasses import dataclass
from typing import Any, Dict, Optional


class PointerBackend(Enum):
    """Which library drives the pointer."""
    AUTO = "auto"
    PYNPUT = "pynput"
    PYAUTOGUI = "pyautogui"


@dataclass
class ReplaySettings:
    """
    Replay preferences read from replay_settings.json.

    Every field has a default, so a missing settings file means a plain run
    against mouse_actions.csv.
    """
    default_csv_name: str = "mouse_actions.csv"
    pointer_backend: PointerBackend = PointerBackend.AUTO
    fail_safe: bool = True
    double_click_interval_ms: int = 10
    warn_unmatched_drag: bool = True
    log_file: Optional[str] = None

    def __post_init__(self):
        if not self.default_csv_name:
            raise ValueError("Default CSV name must not be empty")

        if self.double_click_interval_ms < 0:
            raise ValueError("Double click interval cannot be negative")

    @staticmethod
    def from_dict(data: Dict[str, Any]) -> "ReplaySettings":
        """Build settings from parsed JSON; wrong value types raise ValueError."""
        defaults = ReplaySettings()
        log_file = data.get("log_file")
        if log_file is not None and not isinstance(log_file, str):
            raise ValueError("log_file must be a string")
        return ReplaySettings(
            default_csv_name=_as_str(data, "default_csv_name", defaults.default_csv_name),
            pointer_backend=PointerBackend(_as_str(data, "pointer_backend", defaults.pointer_backend.value)),
            fail_safe=_as_bool(data, "fail_safe", defaults.fail_safe),
            double_click_interval_ms=_as_int(data, "double_click_interval_ms", defaults.double_click_interval_ms),
            warn_unmatched_drag=_as_bool(data, "warn_unmatched_drag", defaults.warn_unmatched_drag),
            log_file=log_file or None,
        )


def _as_str(data: Dict[str, Any], key: str, default: str) -> str:
    value = data.get(key, default)
    if not isinstance(value, str):
        raise ValueError(f"{key} must be a string")
    return value


def _as_bool(data: Dict[str, Any], key: str, default: bool) -> bool:
    value = data.get(key, default)
    if isinstance(value, bool):
        return value
    # Accept quoted booleans written by hand
    if isinstance(value, str) and value.lower() in ("true", "false"):
        return value.lower() == "true"
    raise ValueError(f"{key} must be true or false")


def _as_int(data: Dict[str, Any], key: str, default: int) -> int:
    value = data.get(key, default)
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{key} must be an integer")
    return value
