"""RunLogger — fail-safe per-run log that degrades to a no-op sink.

The logger owns a single mutable reference to a :class:`LogSink`. It starts
on a :class:`DurableSink` bound to a fresh ``file_cleaner_<stamp>.log`` and
switches, once and for good, to a :class:`NoOpSink` on the first failure:

- at startup, after leaving an ``INIT_FAILED`` stub when possible;
- mid-run, after renaming the log to its ``PARTIAL`` name and appending the
  error that caused the switch.

Callers invoke :meth:`RunLogger.record` unconditionally; it never raises.
"""

from __future__ import annotations

import logging
from pathlib import Path

from file_cleaner.logging import artifacts
from file_cleaner.logging.sinks import DurableSink, LogSink, NoOpSink
from file_cleaner.models.types import LoggerState, LogLevel, RunMode
from file_cleaner.utils.clock import Clock, SystemClock

logger = logging.getLogger(__name__)


def _describe(exc: BaseException) -> str:
    return f"{type(exc).__name__}: {exc}"


class RunLogger:
    """Durable run log for a single cleanup run."""

    def __init__(
        self,
        log_dir: Path,
        mode: RunMode,
        target: Path,
        *,
        clock: Clock | None = None,
    ) -> None:
        self._log_dir = log_dir
        self._clock = clock or SystemClock()
        self._degraded_reason: str | None = None
        self._sink: LogSink = self._open()
        if self.state is LoggerState.DURABLE:
            self.record(LogLevel.START, f"Mode={mode} Target={target}")

    # -- State ---------------------------------------------------------------

    @property
    def state(self) -> LoggerState:
        if isinstance(self._sink, DurableSink):
            return LoggerState.DURABLE
        return LoggerState.NOOP

    @property
    def path(self) -> Path | None:
        """Artifact currently being written, None once degraded."""
        return self._sink.path

    @property
    def degraded_reason(self) -> str | None:
        return self._degraded_reason

    # -- Public API ----------------------------------------------------------

    def record(self, level: LogLevel | str, message: str) -> None:
        """Append one line to the run log. Never raises."""
        sink = self._sink
        try:
            sink.write(self._format(level, message))
        except Exception as exc:
            self._degrade(sink, exc)

    # -- Internals -----------------------------------------------------------

    def _format(self, level: LogLevel | str, message: str) -> str:
        ts = self._clock.now().isoformat(timespec="milliseconds")
        flat = " ; ".join(part for part in str(message).splitlines() if part)
        return f"{ts} | {level} | {flat}"

    def _open(self) -> LogSink:
        started = self._clock.now()
        try:
            self._log_dir.mkdir(parents=True, exist_ok=True)
            return DurableSink.create(self._log_dir / artifacts.log_name(started))
        except (OSError, ValueError) as exc:
            reason = _describe(exc)
            logger.debug("Run log unavailable, logging disabled: %s", reason)
            self._degraded_reason = reason
            self._write_init_failed_stub(artifacts.init_failed_name(started), reason)
            return NoOpSink()

    def _write_init_failed_stub(self, name: str, reason: str) -> Path | None:
        stub = self._log_dir / name
        try:
            DurableSink(stub).write(
                self._format(LogLevel.ERROR, f"Logging initialization failed: {reason}")
            )
        except (OSError, ValueError) as exc:
            logger.debug("Could not write init-failure stub %s: %s", stub, _describe(exc))
            return None
        return stub

    def _degrade(self, sink: LogSink, exc: Exception) -> None:
        reason = _describe(exc)
        logger.debug("Run log write failed, switching to no-op sink: %s", reason)

        path = sink.path
        if path is not None:
            partial = self._rename_partial(path)
            if partial is not None:
                self._append_failure(partial, reason)

        # Unconditional: no earlier step may keep the durable sink alive.
        self._sink = NoOpSink()
        self._degraded_reason = reason

    def _rename_partial(self, path: Path) -> Path | None:
        try:
            if not path.exists():
                return None
            partial = path.with_name(artifacts.partial_name_for(path.name))
            path.rename(partial)
        except (OSError, ValueError) as exc:
            logger.debug("Could not mark %s as partial: %s", path, _describe(exc))
            return None
        return partial

    def _append_failure(self, partial: Path, reason: str) -> None:
        try:
            DurableSink(partial).write(
                self._format(LogLevel.ERROR, f"Logging stopped after write failure: {reason}")
            )
        except Exception as exc:
            logger.debug("Could not annotate %s: %s", partial, _describe(exc))
