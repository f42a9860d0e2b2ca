"""Typer CLI — entry point invoked by the external scheduler."""

from __future__ import annotations

import logging
from pathlib import Path

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape

from file_cleaner import __version__

app = typer.Typer(
    name="file-cleaner",
    help="file-cleaner — delete aged files matching name/extension patterns",
    no_args_is_help=True,
)
console = Console()


def _setup_logging(verbose: bool = False, config_level: str | None = None) -> None:
    if verbose:
        level = logging.DEBUG
    elif config_level:
        level = getattr(logging, config_level.upper(), logging.INFO)
    else:
        level = logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )


def _load_settings(config: str | None, **overrides):
    from file_cleaner.config import Settings

    try:
        return Settings.load(config, **overrides)
    except (ValidationError, ValueError, OSError) as e:
        console.print(f"[red]Invalid configuration:[/] {escape(str(e))}")
        raise typer.Exit(1) from None


@app.command()
def run(
    config: str | None = typer.Option(None, "--config", "-c", help="Path to config YAML"),
    target: str | None = typer.Option(None, "--target", "-t", help="Directory to clean"),
    mode: str | None = typer.Option(None, "--mode", "-m", help="TEST (report) or LIVE (delete)"),
    age_hours: float | None = typer.Option(None, "--age-hours", help="Minimum age in hours"),
    log_dir: str | None = typer.Option(None, "--log-dir", help="Run log directory"),
    pattern: list[str] | None = typer.Option(
        None, "--pattern", "-p",
        help="NAME:EXT selection rule, repeatable; replaces configured patterns",
    ),
    verbose: bool = typer.Option(False, "-v", "--verbose"),
):
    """Scan the target directory and report or delete matching files."""
    from file_cleaner.core.runner import CleanupRunner
    from file_cleaner.models.file import Pattern

    patterns = None
    if pattern:
        try:
            patterns = [Pattern.parse(p) for p in pattern]
        except ValueError as e:
            console.print(f"[red]{escape(str(e))}[/]")
            raise typer.Exit(1) from None

    settings = _load_settings(
        config,
        target_dir=target,
        mode=mode,
        age_hours=age_hours,
        log_dir=log_dir,
        patterns=patterns,
    )
    _setup_logging(verbose, config_level=settings.log_level)

    if settings.target_dir is None:
        console.print("[red]No target directory configured (use --target or target_dir)[/]")
        raise typer.Exit(1)

    console.print(
        f"[bold blue]file-cleaner v{__version__}[/] — [bold]{settings.mode}[/] mode on "
        f"[bold]{escape(str(settings.target_dir))}[/]"
    )
    result = CleanupRunner(settings, console=console).run()
    if result.log_path is not None:
        console.print(f"  Log: {escape(str(result.log_path))}")
    else:
        console.print("  [yellow]Run log unavailable (logging disabled)[/]")
    raise typer.Exit(result.exit_code)


@app.command()
def sweep(
    config: str | None = typer.Option(None, "--config", "-c", help="Path to config YAML"),
    log_dir: str | None = typer.Option(None, "--log-dir", help="Run log directory"),
    retention_days: int | None = typer.Option(
        None, "--retention-days", help="Delete artifacts older than this many days",
    ),
    verbose: bool = typer.Option(False, "-v", "--verbose"),
):
    """Apply log retention only, without scanning a target directory."""
    from file_cleaner.logging.cleanup import sweep as sweep_logs
    from file_cleaner.logging.run_logger import RunLogger
    from file_cleaner.utils.clock import SystemClock

    settings = _load_settings(config, log_dir=log_dir, log_retention_days=retention_days)
    _setup_logging(verbose, config_level=settings.log_level)

    clock = SystemClock()
    run_log = RunLogger(settings.log_dir, settings.mode, settings.log_dir, clock=clock)
    removed = sweep_logs(settings.log_dir, settings.log_retention_days, run_log, clock.now())
    console.print(
        f"[green]Removed {removed} log artifact(s)[/] older than "
        f"{settings.log_retention_days} days from {escape(str(settings.log_dir))}"
    )


@app.command()
def version():
    """Show version."""
    console.print(f"file-cleaner v{__version__}")


def main() -> None:
    app()
