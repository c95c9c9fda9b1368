"""Loading of the optional replay_settings.json file."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Callable, Optional

from models import ReplaySettings

SETTINGS_FILE_NAME = "replay_settings.json"


class SettingsManager:
    """Reads replay settings from the working directory.

    An invalid file never stops a replay: it is moved aside to ``.bak``,
    reported through ``on_warning`` and the defaults are used.
    """

    def __init__(
        self,
        storage_path: Optional[Path] = None,
        on_warning: Optional[Callable[[str], None]] = None,
    ) -> None:
        self._storage_path = storage_path or Path.cwd() / SETTINGS_FILE_NAME
        self._on_warning = on_warning

    @property
    def storage_path(self) -> Path:
        return self._storage_path

    def load(self) -> ReplaySettings:
        path = self.storage_path
        if not path.exists():
            return ReplaySettings()

        try:
            raw_data = json.loads(path.read_text(encoding="utf-8"))
            if not isinstance(raw_data, dict):
                raise ValueError("expected a JSON object")
            return ReplaySettings.from_dict(raw_data)
        except (OSError, ValueError) as e:
            self._warn(f"Ignoring settings file '{path}': {e}")
            self._backup(path)
            return ReplaySettings()

    def _backup(self, path: Path) -> None:
        backup_path = path.with_suffix(".bak")
        try:
            path.replace(backup_path)
        except OSError as e:
            self._warn(f"Could not move '{path}' to '{backup_path}': {e}")
            return
        self._warn(f"Invalid settings kept at '{backup_path}'")

    def _warn(self, message: str) -> None:
        if self._on_warning:
            self._on_warning(message)
