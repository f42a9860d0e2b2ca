"""Tests for the directory scanner."""

from __future__ import annotations

import time

from file_cleaner.core.scanner import scan_directory


class TestScanDirectory:
    def test_snapshots_files(self, tmp_path):
        (tmp_path / "Report.PDF").write_text("x")

        records = scan_directory(tmp_path)

        assert len(records) == 1
        r = records[0]
        assert r.name == "Report.PDF"
        assert r.extension == ".PDF"
        assert r.full_path == (tmp_path / "Report.PDF").absolute()
        assert r.creation_time.tzinfo is not None
        assert r.last_write_time.tzinfo is not None
        assert r.last_access_time.tzinfo is not None

    def test_not_recursive(self, tmp_path):
        (tmp_path / "top.pdf").write_text("x")
        sub = tmp_path / "nested.pdf"
        sub.mkdir()
        (sub / "inner.pdf").write_text("x")

        names = [r.name for r in scan_directory(tmp_path)]

        assert names == ["top.pdf"]

    def test_sorted_oldest_first(self, tmp_path):
        for name in ["c.txt", "b.txt", "a.txt"]:
            (tmp_path / name).write_text("x")
            time.sleep(0.05)

        names = [r.name for r in scan_directory(tmp_path)]

        assert names == ["c.txt", "b.txt", "a.txt"]

    def test_empty_directory(self, tmp_path):
        assert scan_directory(tmp_path) == []
