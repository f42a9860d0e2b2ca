"""Tests for log artifact naming."""

from __future__ import annotations

from datetime import datetime

import pytest

from file_cleaner.logging.artifacts import (
    ArtifactKind,
    classify,
    init_failed_name,
    log_name,
    partial_name_for,
)

MOMENT = datetime(2026, 1, 5, 7, 8, 9)


class TestNames:
    def test_log_name(self):
        assert log_name(MOMENT) == "file_cleaner_2026-01-05_07-08-09.log"

    def test_init_failed_name(self):
        assert init_failed_name(MOMENT) == "file_cleaner_INIT_FAILED_2026-01-05_07-08-09.stub"

    def test_partial_keeps_timestamp(self):
        assert (
            partial_name_for("file_cleaner_2026-01-05_07-08-09.log")
            == "file_cleaner_PARTIAL_2026-01-05_07-08-09.stub"
        )

    def test_partial_rejects_foreign_name(self):
        with pytest.raises(ValueError):
            partial_name_for("other.log")


class TestClassify:
    def test_kinds(self):
        assert classify("file_cleaner_2026-01-05_07-08-09.log") is ArtifactKind.LOG
        assert classify("file_cleaner_PARTIAL_2026-01-05_07-08-09.stub") is ArtifactKind.PARTIAL
        assert (
            classify("file_cleaner_INIT_FAILED_2026-01-05_07-08-09.stub")
            is ArtifactKind.INIT_FAILED
        )

    def test_foreign_files(self):
        assert classify("notes.log") is None
        assert classify("file_cleaner_2026-01-05.log") is None
        assert classify("file_cleaner_2026-01-05_07-08-09.log.bak") is None
        assert classify("file_cleaner_PARTIAL_2026-01-05_07-08-09.log") is None
