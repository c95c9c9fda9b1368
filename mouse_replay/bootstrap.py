"""Locate the replay CSV, writing a sample file when none exists yet."""

from __future__ import annotations

from pathlib import Path
from typing import Callable, List, Optional

DEFAULT_CSV_NAME = "mouse_actions.csv"

SAMPLE_ROWS = (
    "action,x_position,y_position,delay_ms,button,modifiers,repeat_count",
    "move,100,200,500,,,",
    "click,150,300,200,left,,1",
    "double_click,150,300,150,left,,2",
    "right_click,400,500,300,right,,1",
    "drag,200,300,100,left,,",
    "release,400,500,50,,,",
    "move,500,600,300,,,",
    "scroll,500,600,200,,down,5",
    "wait,,,2000,,,",
    "move_relative,50,-30,300,,,",
)

MessageCallback = Callable[[str], None]


def candidate_paths(name: str = DEFAULT_CSV_NAME) -> List[str]:
    """Locations probed for the default file, in order."""
    return [name, f"./{name}", f"../{name}", f"data/{name}"]


def ensure_default_file(path: Path, log: Optional[MessageCallback] = None) -> bool:
    """Write the sample file at ``path`` unless it exists. Returns True if written."""
    if path.exists():
        return False
    if log:
        log(f"Default CSV file not found. Creating one at '{path}'...")
    path.write_text("\n".join(SAMPLE_ROWS) + "\n", encoding="utf-8")
    if log:
        log("Default CSV file created successfully!")
    return True


def resolve_csv_path(
    argument: Optional[str],
    default_name: str = DEFAULT_CSV_NAME,
    cwd: Optional[Path] = None,
    log: Optional[MessageCallback] = None,
    warn: Optional[MessageCallback] = None,
) -> Path:
    """Pick the CSV to replay.

    An explicit argument wins when the file exists; otherwise the default file
    is created in ``cwd`` if needed and the candidate locations are probed.
    OSError from writing the sample file propagates.
    """
    base = cwd if cwd is not None else Path.cwd()
    warn = warn or log

    if argument:
        explicit = base / argument
        if explicit.exists():
            return explicit
        if warn:
            warn(f"Specified file '{argument}' not found.")
            warn("Falling back to default locations...")

    ensure_default_file(base / default_name, log=log)

    for candidate in candidate_paths(default_name):
        path = base / candidate
        if path.exists():
            return path
    return base / default_name
