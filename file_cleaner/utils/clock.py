"""Time source for cutoffs and log timestamps."""

from __future__ import annotations

from datetime import datetime
from typing import Protocol


class Clock(Protocol):
    def now(self) -> datetime: ...


class SystemClock:
    """Wall clock in local time with the UTC offset attached."""

    def now(self) -> datetime:
        return datetime.now().astimezone()
