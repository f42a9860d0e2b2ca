"""Console output for cleanup runs."""

from __future__ import annotations

from file_cleaner.display.report import match_report, print_match, print_summary

__all__ = ["match_report", "print_match", "print_summary"]
