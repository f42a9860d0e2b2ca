"""file_cleaner — periodic pattern-and-age based directory cleanup."""

from __future__ import annotations

__version__ = "1.0.0"
