"""Directory listing — one FileRecord per regular file, oldest first."""

from __future__ import annotations

import logging
from pathlib import Path

from file_cleaner.models.file import FileRecord

logger = logging.getLogger(__name__)


def scan_directory(directory: Path) -> list[FileRecord]:
    """Snapshot the direct file entries of *directory*, sorted by creation time.

    Subdirectories are not descended into. Entries that vanish or cannot be
    stat'ed between listing and snapshot are skipped.
    """
    records: list[FileRecord] = []
    for entry in directory.iterdir():
        try:
            if not entry.is_file():
                continue
            records.append(FileRecord.from_path(entry))
        except OSError as e:
            logger.debug("Skipping %s: %s", entry, e)
    records.sort(key=lambda r: (r.creation_time, r.name))
    return records
