"""Data models — patterns, file snapshots, run state."""

from file_cleaner.models.file import FileRecord, Pattern
from file_cleaner.models.run import RunCounters, RunResult
from file_cleaner.models.types import LoggerState, LogLevel, RunMode

__all__ = [
    "FileRecord",
    "LogLevel",
    "LoggerState",
    "Pattern",
    "RunCounters",
    "RunMode",
    "RunResult",
]
