"""File selection models — patterns and scanned file snapshots."""

from __future__ import annotations

import os
from datetime import datetime
from pathlib import Path

from pydantic import BaseModel, ConfigDict, field_validator


class Pattern(BaseModel):
    """One selection rule: name substring + exact extension."""

    model_config = ConfigDict(frozen=True)

    name_substring: str = ""
    extension: str

    @field_validator("extension")
    @classmethod
    def _dotted(cls, v: str) -> str:
        v = v.strip()
        if v and not v.startswith("."):
            v = f".{v}"
        return v

    @classmethod
    def parse(cls, text: str) -> Pattern:
        """Build a pattern from ``"name:ext"`` (``":pdf"`` matches on extension alone)."""
        name, sep, ext = text.rpartition(":")
        if not sep:
            raise ValueError(f"Pattern {text!r} must look like NAME:EXT")
        return cls(name_substring=name, extension=ext)


def _creation_timestamp(st: os.stat_result) -> float:
    # st_birthtime exists on Windows, macOS and BSD; Linux only exposes ctime.
    birth = getattr(st, "st_birthtime", None)
    return birth if birth is not None else st.st_ctime


def _local(ts: float) -> datetime:
    return datetime.fromtimestamp(ts).astimezone()


class FileRecord(BaseModel):
    """Read-only snapshot of one file taken at scan time."""

    model_config = ConfigDict(frozen=True)

    full_path: Path
    name: str
    extension: str
    creation_time: datetime
    last_write_time: datetime
    last_access_time: datetime

    @classmethod
    def from_path(cls, path: Path) -> FileRecord:
        st = path.stat()
        return cls(
            full_path=path.absolute(),
            name=path.name,
            extension=path.suffix,
            creation_time=_local(_creation_timestamp(st)),
            last_write_time=_local(st.st_mtime),
            last_access_time=_local(st.st_atime),
        )
