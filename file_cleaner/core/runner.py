"""CleanupRunner — drives one cleanup run from logger start to summary."""

from __future__ import annotations

import logging
import time
from collections.abc import Callable
from pathlib import Path

from rich.console import Console
from rich.markup import escape

from file_cleaner.config import Settings
from file_cleaner.core.matcher import age_cutoff, matches
from file_cleaner.core.scanner import scan_directory
from file_cleaner.display.report import (
    duration_line,
    match_report,
    print_match,
    print_summary,
    summary_line,
)
from file_cleaner.logging.cleanup import sweep
from file_cleaner.logging.run_logger import RunLogger
from file_cleaner.models.file import FileRecord
from file_cleaner.models.run import RunCounters, RunResult
from file_cleaner.models.types import LogLevel, RunMode
from file_cleaner.utils.clock import Clock, SystemClock

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_TARGET_MISSING = 3

Scanner = Callable[[Path], list[FileRecord]]


class CleanupRunner:
    """One cleanup run over ``settings.target_dir``.

    Owns the run's counters and drives the RunLogger. Every collaborator
    that touches time, the filesystem listing or the terminal can be
    swapped for tests.
    """

    def __init__(
        self,
        settings: Settings,
        *,
        clock: Clock | None = None,
        scanner: Scanner = scan_directory,
        console: Console | None = None,
    ) -> None:
        self._settings = settings
        self._clock = clock or SystemClock()
        self._scanner = scanner
        self._console = console or Console()
        self.counters = RunCounters()

    @property
    def mode(self) -> RunMode:
        return self._settings.mode

    def run(self) -> RunResult:
        started = time.monotonic()
        run_start = self._clock.now()
        settings = self._settings
        target = settings.target_dir

        run_log = RunLogger(settings.log_dir, self.mode, target, clock=self._clock)

        if target is None or not target.is_dir():
            run_log.record(LogLevel.ERROR, f"Target directory does not exist: {target}")
            self._console.print(f"[red]Target directory does not exist:[/] {escape(str(target))}")
            return self._result(time.monotonic() - started, run_log, EXIT_TARGET_MISSING)

        sweep(settings.log_dir, settings.log_retention_days, run_log, run_start)

        cutoff = age_cutoff(run_start, settings.age_hours)
        try:
            records = self._scanner(target)
        except OSError as e:
            # Listing failure ends the scan, not the run: summary still follows.
            run_log.record(LogLevel.ERROR, f"Could not list {target}: {e}")
            self._console.print(f"[red]Could not list {escape(str(target))}:[/] {escape(str(e))}")
            records = []

        for record in records:
            self.counters.scanned += 1
            if not matches(record, settings.patterns, cutoff):
                continue
            self.counters.matched += 1
            report = match_report(record)
            run_log.record(LogLevel.INFO, "\n".join(report))
            print_match(self._console, report)
            self._act(record, run_log)

        duration = time.monotonic() - started
        run_log.record(LogLevel.SUMMARY, summary_line(self.counters, self.mode))
        run_log.record(LogLevel.INFO, duration_line(duration))
        print_summary(self._console, self.counters, self.mode, duration)
        return self._result(duration, run_log, EXIT_OK)

    def _act(self, record: FileRecord, run_log: RunLogger) -> None:
        path = record.full_path
        if self.mode is not RunMode.LIVE:
            run_log.record(LogLevel.INFO, f"TEST mode: would delete {path}")
            return
        try:
            path.unlink()
        except OSError as e:
            logger.debug("Delete failed for %s: %s", path, e)
            run_log.record(LogLevel.ERROR, f"Failed to delete {path}: {e}")
            self._console.print(f"  [red]Failed to delete:[/] {escape(str(path))} ({escape(str(e))})")
            return
        self.counters.deleted += 1
        run_log.record(LogLevel.INFO, f"Deleted: {path}")
        self._console.print(f"  [green]Deleted[/] {escape(str(path))}")

    def _result(self, duration: float, run_log: RunLogger, exit_code: int) -> RunResult:
        return RunResult(
            mode=self.mode,
            counters=self.counters.model_copy(),
            duration=duration,
            exit_code=exit_code,
            log_path=run_log.path,
        )
