"""Log artifact naming conventions.

Three kinds of artifact live in the log directory, all sharing one timestamp
format so alphabetical order equals chronological order within a kind:

- ``file_cleaner_<stamp>.log``: normal run log
- ``file_cleaner_PARTIAL_<stamp>.stub``: run log renamed after a write failure
- ``file_cleaner_INIT_FAILED_<stamp>.stub``: logging could not be started
"""

from __future__ import annotations

import re
from datetime import datetime
from enum import StrEnum

PREFIX = "file_cleaner_"
STAMP_FORMAT = "%Y-%m-%d_%H-%M-%S"

_STAMP = r"\d{4}-\d{2}-\d{2}_\d{2}-\d{2}-\d{2}"


class ArtifactKind(StrEnum):
    LOG = "log"
    PARTIAL = "partial"
    INIT_FAILED = "init_failed"


_PATTERNS = {
    ArtifactKind.LOG: re.compile(rf"^{PREFIX}(?P<stamp>{_STAMP})\.log$"),
    ArtifactKind.PARTIAL: re.compile(rf"^{PREFIX}PARTIAL_(?P<stamp>{_STAMP})\.stub$"),
    ArtifactKind.INIT_FAILED: re.compile(rf"^{PREFIX}INIT_FAILED_(?P<stamp>{_STAMP})\.stub$"),
}


def stamp(moment: datetime) -> str:
    return moment.strftime(STAMP_FORMAT)


def log_name(moment: datetime) -> str:
    return f"{PREFIX}{stamp(moment)}.log"


def init_failed_name(moment: datetime) -> str:
    return f"{PREFIX}INIT_FAILED_{stamp(moment)}.stub"


def partial_name_for(log_filename: str) -> str:
    """Map a normal log name to its PARTIAL name, keeping the timestamp.

    Raises ValueError if *log_filename* is not a normal log name.
    """
    m = _PATTERNS[ArtifactKind.LOG].match(log_filename)
    if m is None:
        raise ValueError(f"Not a run log name: {log_filename}")
    return f"{PREFIX}PARTIAL_{m.group('stamp')}.stub"


def classify(filename: str) -> ArtifactKind | None:
    """Return the artifact kind for *filename*, or None for foreign files."""
    for kind, pattern in _PATTERNS.items():
        if pattern.match(filename):
            return kind
    return None
