"""Per-run state returned by the orchestrator."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel

from file_cleaner.models.types import RunMode


class RunCounters(BaseModel):
    scanned: int = 0
    matched: int = 0
    deleted: int = 0


class RunResult(BaseModel):
    """Outcome of a single cleanup run."""

    mode: RunMode
    counters: RunCounters
    duration: float = 0.0
    exit_code: int = 0
    log_path: Path | None = None
