"""Enumerations shared across the cleaner."""

from __future__ import annotations

from enum import StrEnum


class RunMode(StrEnum):
    TEST = "TEST"
    LIVE = "LIVE"

    @classmethod
    def parse(cls, value: str | RunMode) -> RunMode:
        """Case-insensitive lookup: ``"live"`` -> ``RunMode.LIVE``."""
        if isinstance(value, RunMode):
            return value
        try:
            return cls(str(value).strip().upper())
        except ValueError:
            allowed = ", ".join(m.value for m in cls)
            raise ValueError(f"Unknown run mode {value!r} (expected one of: {allowed})") from None


class LogLevel(StrEnum):
    """Levels written into the run log, not Python logging levels."""

    START = "START"
    INFO = "INFO"
    WARN = "WARN"
    ERROR = "ERROR"
    SUMMARY = "SUMMARY"


class LoggerState(StrEnum):
    DURABLE = "durable"
    NOOP = "noop"
