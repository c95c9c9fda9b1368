"""
Replay package: play back mouse actions described in a CSV file.

Key parts
---------
- actions:      One small action class per row kind (move, click, drag, scroll...)
- script_model: ActionRecord & lazy CSV parser
- engine:       Runner that applies delays and repeat counts in file order
- pointer:      pynput / pyautogui pointer drivers
- bootstrap:    Input file lookup and sample file creation
"""

from .actions import ActionError
from .bootstrap import resolve_csv_path
from .engine import ReplayEngine
from .pointer import create_pointer
from .script_model import ActionRecord, ActionScript, RecordError

__all__ = [
    "ActionError",
    "ActionRecord",
    "ActionScript",
    "RecordError",
    "ReplayEngine",
    "create_pointer",
    "resolve_csv_path",
]
