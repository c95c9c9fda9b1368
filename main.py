"""
Command line entry point for Mouse Replay.

Usage:
    python main.py [path/to/mouse_actions.csv]

Without an argument (or with a path that does not exist) the default
mouse_actions.csv is used, and written with sample rows if it is missing.
"""

from __future__ import annotations

import sys
from pathlib import Path
from typing import List, Optional

from logger import StatusLogger
from models import ReplaySettings
from mouse_replay import (
    ActionError,
    ActionScript,
    RecordError,
    ReplayEngine,
    create_pointer,
    resolve_csv_path,
)
from settings_manager import SettingsManager


def run(csv_argument: Optional[str], settings: ReplaySettings, logger: StatusLogger) -> int:
    """Resolve, parse and replay one CSV file. Returns the number of rows run."""
    logger.log_info(f"Current directory: {Path.cwd()}")

    csv_path = resolve_csv_path(
        csv_argument,
        default_name=settings.default_csv_name,
        log=logger.log_info,
        warn=logger.log_warning,
    )
    logger.log_info(f"Using CSV file: {csv_path}")

    script = ActionScript(csv_path)
    if settings.warn_unmatched_drag:
        for line in script.unmatched_drags():
            logger.log_warning(f"drag on line {line} is never released; the button stays held")

    pointer = create_pointer(settings.pointer_backend.value, fail_safe=settings.fail_safe)
    engine = ReplayEngine(
        script,
        pointer,
        double_click_interval_ms=settings.double_click_interval_ms,
    )
    engine.on_log(logger.log_info)
    engine.on_warning(logger.log_warning)
    engine.on_done(logger.log_outcome)

    logger.log_info(f"Starting automation with {pointer.name} backend...")
    return engine.run()


def main(argv: Optional[List[str]] = None) -> int:
    args = sys.argv[1:] if argv is None else argv
    logger = StatusLogger()
    settings: Optional[ReplaySettings] = None
    try:
        settings = SettingsManager(on_warning=logger.log_warning).load()
        run(args[0] if args else None, settings, logger)
        logger.log_info("Automation completed successfully!")
    except (RecordError, ActionError, OSError) as e:
        logger.log_error(str(e))
        return 1
    finally:
        if settings is not None and settings.log_file:
            logger.export_logs_to_file(settings.log_file)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
