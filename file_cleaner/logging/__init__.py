"""Fail-safe per-run logging and log retention."""

from __future__ import annotations

from file_cleaner.logging.cleanup import sweep
from file_cleaner.logging.run_logger import RunLogger
from file_cleaner.logging.sinks import DurableSink, LogSink, NoOpSink

__all__ = ["DurableSink", "LogSink", "NoOpSink", "RunLogger", "sweep"]
