"""
Replay log - timestamped console output for a replay run, kept for export.

Errors go to stderr, everything else to stdout. The run outcome reported by
the engine is logged as INFO on success and WARNING when the run stopped.
"""

import sys
from datetime import datetime
from typing import List, Optional, TextIO
from dataclasses import dataclass


@dataclass
class LogEntry:
    timestamp: datetime
    message: str
    level: str = "INFO"

    def format(self, full_date: bool = False) -> str:
        stamp = self.timestamp.strftime("%Y-%m-%d %H:%M:%S" if full_date else "%H:%M:%S")
        return f"[{stamp}] {self.level}: {self.message}"

    def __str__(self) -> str:
        return self.format()


class StatusLogger:
    """
    Echoes replay messages and keeps the last ``max_entries`` for export.

    Args:
        max_entries: Entries kept for export_logs_to_file
        echo: Print entries as they arrive
        stream: Destination for INFO and WARNING entries (default stdout)
        error_stream: Destination for ERROR entries (default stderr)
    """

    def __init__(
        self,
        max_entries: int = 1000,
        echo: bool = True,
        stream: Optional[TextIO] = None,
        error_stream: Optional[TextIO] = None,
    ):
        self._entries: List[LogEntry] = []
        self._max_entries = max_entries
        self._echo = echo
        self._stream = stream
        self._error_stream = error_stream

    def log_info(self, message: str) -> None:
        self._add_entry(message, "INFO")

    def log_warning(self, message: str) -> None:
        self._add_entry(message, "WARNING")

    def log_error(self, message: str) -> None:
        self._add_entry(message, "ERROR")

    def log_outcome(self, ok: bool, message: str) -> None:
        """Engine on_done hook."""
        self._add_entry(message, "INFO" if ok else "WARNING")

    def _add_entry(self, message: str, level: str) -> None:
        entry = LogEntry(timestamp=datetime.now(), message=message, level=level)
        self._entries.append(entry)
        del self._entries[:-self._max_entries]

        if self._echo:
            if level == "ERROR":
                out = self._error_stream or sys.stderr
            else:
                out = self._stream or sys.stdout
            print(entry, file=out)

    def export_logs_to_file(self, filepath: str) -> bool:
        """
        Write the kept entries to ``filepath``.

        Returns:
            bool: True if export was successful. Failures are printed to
            the error stream, not raised.
        """
        try:
            with open(filepath, 'w', encoding='utf-8') as f:
                f.write("Mouse Replay - Log Export\n")
                f.write(f"Generated: {datetime.now()}\n")
                f.write("=" * 50 + "\n\n")
                for entry in self._entries:
                    f.write(entry.format(full_date=True) + "\n")
            return True
        except OSError as e:
            print(f"Failed to export logs: {e}", file=self._error_stream or sys.stderr)
            return False
