"""Logging strategies — a durable file sink and a discard-everything sink."""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path


class LogSink(ABC):
    """Destination for formatted run-log lines."""

    @property
    @abstractmethod
    def path(self) -> Path | None:
        """Artifact backing this sink, if any."""

    @abstractmethod
    def write(self, line: str) -> None:
        """Append one line. May raise OSError."""


class DurableSink(LogSink):
    """Append-mode UTF-8 text sink, opened per write so every line hits disk."""

    def __init__(self, path: Path) -> None:
        self._path = path

    @classmethod
    def create(cls, path: Path) -> DurableSink:
        """Create the artifact on disk. An existing file is reused."""
        path.touch(exist_ok=True)
        return cls(path)

    @property
    def path(self) -> Path:
        return self._path

    def write(self, line: str) -> None:
        with open(self._path, "a", encoding="utf-8") as f:
            f.write(line + "\n")
            f.flush()


class NoOpSink(LogSink):
    """Discards every line without touching the filesystem."""

    @property
    def path(self) -> None:
        return None

    def write(self, line: str) -> None:
        return None
