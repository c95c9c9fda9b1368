"""
Replay engine that executes action records in file order on the calling thread.
"""

from __future__ import annotations

from typing import Callable, Iterable, Optional

from .actions import RunContext
from .pointer import PointerDriver
from .script_model import ActionRecord


class ReplayEngine:
    def __init__(
        self,
        records: Iterable[ActionRecord],
        pointer: PointerDriver,
        double_click_interval_ms: int = 10,
        sleep_hook: Optional[Callable[[float], None]] = None,
    ):
        self._records = records
        self._pointer = pointer
        self._double_click_interval_ms = double_click_interval_ms
        self._sleep_hook = sleep_hook
        self._on_log: Optional[Callable[[str], None]] = None
        self._on_warning: Optional[Callable[[str], None]] = None
        self._on_done: Optional[Callable[[bool, str], None]] = None
        self._processed = 0

    def on_log(self, cb: Callable[[str], None]) -> None:
        self._on_log = cb

    def on_warning(self, cb: Callable[[str], None]) -> None:
        self._on_warning = cb

    def on_done(self, cb: Callable[[bool, str], None]) -> None:
        self._on_done = cb

    @property
    def processed(self) -> int:
        """Number of records fully executed so far."""
        return self._processed

    def run(self) -> int:
        """Execute every record; the first error is reported and re-raised."""
        ctx = RunContext(
            self._pointer,
            logger=self._log,
            warner=self._warn,
            sleep_hook=self._sleep_hook,
            double_click_interval_ms=self._double_click_interval_ms,
        )
        self._processed = 0
        try:
            for record in self._records:
                self._log(f"Executing action: {record}")
                self._execute(record, ctx)
                self._processed += 1
        except Exception:
            self._finish(False, f"Stopped after {self._processed} row(s)")
            raise
        self._finish(True, f"Completed {self._processed} row(s)")
        return self._processed

    def _execute(self, record: ActionRecord, ctx: RunContext) -> None:
        action = record.to_action()
        if record.delay_ms is not None:
            ctx.sleep_ms(record.delay_ms)
        if action.consumes_repeat_count:
            action.run(ctx)
            return
        repeat_count = record.repeat_count if record.repeat_count is not None else 1
        for _ in range(repeat_count):
            action.run(ctx)

    def _log(self, msg: str) -> None:
        if self._on_log:
            self._on_log(msg)

    def _warn(self, msg: str) -> None:
        if self._on_warning:
            self._on_warning(msg)
        else:
            self._log(msg)

    def _finish(self, ok: bool, msg: str) -> None:
        if self._on_done:
            self._on_done(ok, msg)
