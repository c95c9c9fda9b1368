"""
Replay file data model and CSV parser.
"""

from __future__ import annotations

import csv
from dataclasses import dataclass, fields
from pathlib import Path
import re
from typing import Dict, Iterator, List, Optional, Tuple, Union

from .actions import BaseAction

CSV_COLUMNS = (
    "action",
    "x_position",
    "y_position",
    "delay_ms",
    "button",
    "modifiers",
    "repeat_count",
)

_SIGNED = re.compile(r"[+-]?\d+")
_UNSIGNED = re.compile(r"\+?\d+")

_INT32 = (-(2 ** 31), 2 ** 31 - 1)
_UINT32 = (0, 2 ** 32 - 1)
_UINT64 = (0, 2 ** 64 - 1)


class RecordError(ValueError):
    """A CSV row that does not fit the replay schema."""

    def __init__(self, line: int, message: str, column: Optional[str] = None, value: Optional[str] = None):
        self.line = line
        self.column = column
        self.value = value
        where = f"line {line}"
        if column:
            where += f", column '{column}'"
        super().__init__(f"{where}: {message}")


@dataclass
class ActionRecord:
    """One decoded row of a replay file."""

    action: str
    x_position: Optional[int] = None
    y_position: Optional[int] = None
    delay_ms: Optional[int] = None
    button: Optional[str] = None
    modifiers: Optional[str] = None
    repeat_count: Optional[int] = None
    line: int = 0

    @staticmethod
    def from_row(row: Dict[str, str], line: int = 0) -> "ActionRecord":
        if "action" not in row:
            raise RecordError(line, "missing field 'action'")
        return ActionRecord(
            action=row["action"],
            x_position=_decode_int(row, "x_position", _SIGNED, _INT32, line),
            y_position=_decode_int(row, "y_position", _SIGNED, _INT32, line),
            delay_ms=_decode_int(row, "delay_ms", _UNSIGNED, _UINT64, line),
            button=_decode_str(row, "button"),
            modifiers=_decode_str(row, "modifiers"),
            repeat_count=_decode_int(row, "repeat_count", _UNSIGNED, _UINT32, line),
            line=line,
        )

    def to_row(self) -> Dict[str, str]:
        """Encode back to the CSV schema; absent values become empty fields.

        Integers come back in canonical form, so a source field of ``+5`` or
        ``007`` re-encodes as ``5`` or ``7``. Values are preserved, spelling
        is not.
        """
        row: Dict[str, str] = {}
        for f in fields(self):
            if f.name not in CSV_COLUMNS:
                continue
            value = getattr(self, f.name)
            row[f.name] = "" if value is None else str(value)
        return row

    def to_action(self) -> BaseAction:
        return BaseAction.from_record(self)

    def __str__(self) -> str:
        parts = [f"{k}={v}" for k, v in self.to_row().items() if v != ""]
        return f"line {self.line}: " + ", ".join(parts)


def _decode_str(row: Dict[str, str], column: str) -> Optional[str]:
    value = row.get(column)
    return value if value else None


def _decode_int(row: Dict[str, str], column: str, pattern, bounds, line: int) -> Optional[int]:
    raw = row.get(column)
    if not raw:
        return None
    if not pattern.fullmatch(raw):
        raise RecordError(line, f"invalid integer '{raw}'", column=column, value=raw)
    value = int(raw)
    low, high = bounds
    if value < low or value > high:
        raise RecordError(line, f"number '{raw}' out of range", column=column, value=raw)
    return value


class ActionScript:
    """A replay CSV file, read lazily row by row."""

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)

    def __iter__(self) -> Iterator[ActionRecord]:
        return self.records()

    def records(self) -> Iterator[ActionRecord]:
        """Yield decoded records in file order.

        A malformed row raises RecordError when it is reached, so rows before
        it have already been consumed by the caller.
        """
        rows = self._rows()
        first = next(rows, None)
        if first is None:
            return
        _, header = first
        if "action" not in header:
            raise RecordError(1, "header has no 'action' column")
        for line, row in rows:
            if not row:
                continue
            if len(row) != len(header):
                raise RecordError(
                    line,
                    f"found record with {len(row)} fields, but the header has {len(header)}",
                )
            yield ActionRecord.from_row(dict(zip(header, row)), line=line)

    def unmatched_drags(self) -> List[int]:
        """Line numbers of drag rows with no release row after them."""
        pending: List[int] = []
        rows = self._rows()
        first = next(rows, None)
        if first is None or "action" not in first[1]:
            return []
        idx = first[1].index("action")
        for line, row in rows:
            if len(row) <= idx:
                continue
            if row[idx] == "drag":
                pending.append(line)
            elif row[idx] == "release" and pending:
                pending.pop()
        return pending

    def _rows(self) -> Iterator[Tuple[int, List[str]]]:
        """Yield (line, fields) for each CSV row, header included.

        Undecodable bytes and rows the csv module rejects become RecordError.
        """
        with self.path.open(newline="", encoding="utf-8") as fh:
            reader = csv.reader(fh)
            while True:
                try:
                    row = next(reader)
                except StopIteration:
                    return
                except UnicodeDecodeError as e:
                    # decoding is buffered, the bad byte may sit further down
                    raise RecordError(reader.line_num + 1, f"not valid UTF-8 at or after this line ({e.reason})") from e
                except csv.Error as e:
                    raise RecordError(reader.line_num, f"unreadable CSV row ({e})") from e
                yield reader.line_num, row
