"""Shared test fixtures."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from pathlib import Path

import pytest

from file_cleaner.models.file import FileRecord

TZ = timezone(timedelta(hours=2))
NOW = datetime(2026, 3, 14, 9, 30, 0, tzinfo=TZ)


class FixedClock:
    """Clock pinned to one instant; ``advance`` moves it forward."""

    def __init__(self, moment: datetime = NOW) -> None:
        self.moment = moment

    def now(self) -> datetime:
        return self.moment

    def advance(self, **kwargs: float) -> None:
        self.moment += timedelta(**kwargs)


@pytest.fixture
def clock():
    return FixedClock()


@pytest.fixture
def make_record():
    """Build a FileRecord for *path* created ``age_hours`` before NOW."""

    def _make(path: Path, age_hours: float = 0.0) -> FileRecord:
        created = NOW - timedelta(hours=age_hours)
        return FileRecord(
            full_path=path,
            name=path.name,
            extension=path.suffix,
            creation_time=created,
            last_write_time=created,
            last_access_time=created,
        )

    return _make


@pytest.fixture
def now():
    return NOW
