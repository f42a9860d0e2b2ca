"""Human-readable match reports and the end-of-run summary."""

from __future__ import annotations

from rich.console import Console
from rich.markup import escape

from file_cleaner.models.file import FileRecord
from file_cleaner.models.run import RunCounters
from file_cleaner.models.types import RunMode

TIME_FORMAT = "%Y-%m-%d %H:%M:%S"


def match_report(record: FileRecord) -> list[str]:
    """Lines describing a matched file: path and its three timestamps."""
    return [
        f"Match: {record.full_path}",
        f"  Created:  {record.creation_time.strftime(TIME_FORMAT)}",
        f"  Modified: {record.last_write_time.strftime(TIME_FORMAT)}",
        f"  Accessed: {record.last_access_time.strftime(TIME_FORMAT)}",
    ]


def summary_line(counters: RunCounters, mode: RunMode) -> str:
    return (
        f"Scanned={counters.scanned} Matched={counters.matched} "
        f"Deleted={counters.deleted} Mode={mode}"
    )


def duration_line(seconds: float) -> str:
    return f"Duration: {seconds:.2f}s"


def print_match(console: Console, lines: list[str]) -> None:
    console.print(f"[cyan]{escape(lines[0])}[/]")
    for line in lines[1:]:
        console.print(f"[dim]{escape(line)}[/]")


def print_summary(
    console: Console,
    counters: RunCounters,
    mode: RunMode,
    duration: float,
) -> None:
    color = "red" if mode is RunMode.LIVE else "yellow"
    console.print(f"\n[bold {color}]{mode}[/] [bold]{summary_line(counters, mode)}[/]")
    console.print(f"  [dim]{duration_line(duration)}[/]")
