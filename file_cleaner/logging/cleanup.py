"""Log retention — remove run-log artifacts older than a number of days."""

from __future__ import annotations

import logging
from datetime import datetime, timedelta
from pathlib import Path
from typing import TYPE_CHECKING

from file_cleaner.logging.artifacts import classify
from file_cleaner.models.types import LogLevel

if TYPE_CHECKING:
    from file_cleaner.logging.run_logger import RunLogger

logger = logging.getLogger(__name__)


def sweep(
    log_dir: Path,
    retention_days: int,
    run_logger: RunLogger,
    now: datetime,
) -> int:
    """Delete log artifacts last modified strictly before *now* - *retention_days*.

    Only files named by the artifact conventions are considered. A file that
    cannot be inspected or removed is skipped; a directory that cannot be
    listed is reported at WARN. Returns the number of artifacts removed.
    """
    if retention_days <= 0:
        return 0

    cutoff = now - timedelta(days=retention_days)
    try:
        entries = sorted(log_dir.iterdir())
    except OSError as e:
        run_logger.record(LogLevel.WARN, f"Retention sweep skipped for {log_dir}: {e}")
        return 0

    removed = 0
    for entry in entries:
        if classify(entry.name) is None:
            continue
        try:
            if not entry.is_file():
                continue
            mtime = datetime.fromtimestamp(entry.stat().st_mtime, tz=cutoff.tzinfo)
            if mtime < cutoff:
                entry.unlink()
                removed += 1
        except OSError as e:
            logger.debug("Retention: could not remove %s: %s", entry, e)
            continue

    if removed:
        run_logger.record(
            LogLevel.INFO,
            f"Retention: removed {removed} log artifact(s) older than {retention_days} days",
        )
    return removed
