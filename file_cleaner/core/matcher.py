"""Pattern + age selection. Pure functions, no filesystem access."""

from __future__ import annotations

from collections.abc import Iterable
from datetime import datetime, timedelta

from file_cleaner.models.file import FileRecord, Pattern


def pattern_matches(file: FileRecord, pattern: Pattern) -> bool:
    """Exact extension and substring-anywhere in the full name, both case-insensitive."""
    if file.extension.lower() != pattern.extension.lower():
        return False
    return pattern.name_substring.lower() in file.name.lower()


def first_match(file: FileRecord, patterns: Iterable[Pattern]) -> Pattern | None:
    for pattern in patterns:
        if pattern_matches(file, pattern):
            return pattern
    return None


def age_cutoff(run_start: datetime, age_hours: float) -> datetime:
    return run_start - timedelta(hours=age_hours)


def matches(file: FileRecord, patterns: Iterable[Pattern], cutoff: datetime) -> bool:
    """True when *file* matches any pattern and was created strictly before *cutoff*.

    Eligibility deliberately uses creation time, not modification time.
    """
    if first_match(file, patterns) is None:
        return False
    return file.creation_time < cutoff
