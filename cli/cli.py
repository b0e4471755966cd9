"""CLI for breathe.

Guided breathing exercises in the terminal: pick a pattern from the
configuration file and follow the progress bars.
"""

from pathlib import Path
from typing import NoReturn

import typer
from loguru import logger
from rich.console import Console
from rich.markup import escape

from breathe.config.settings import settings
from breathe.core.logger import setup_logger
from breathe.patterns.errors import BreatheConfigError
from breathe.patterns.loader import default_config_path, load_config
from breathe.patterns.types import BreatheConfig, Pattern, parse_pattern_length
from breathe.session.runner import SessionRunner
from breathe.session.session import BreathingSession
from breathe.tui.render import SessionProgress, print_pattern_table, print_session_summary

# Initialize Rich console for output
console = Console()

app = typer.Typer(
    name="breathe",
    help="A cli tool with breathing exercises",
    add_completion=False,
    no_args_is_help=True,
)

INTERRUPTED_EXIT_CODE = 130


def _setup_logging(debug: bool = False) -> None:
    log_level = "DEBUG" if debug else settings.log_level
    setup_logger(level=log_level, log_file=settings.log_file or None)


def _config_path(config_file: Path | None) -> Path:
    """Command line option first, then BREATHE_CONFIG, then the default location."""
    if config_file is not None:
        return config_file
    if settings.config_file:
        return Path(settings.config_file)
    return default_config_path()


def _load(config_file: Path | None) -> BreatheConfig:
    path = _config_path(config_file)
    logger.debug(f"Using configuration file {path}")
    return load_config(path)


def _resolve_pattern(config_file: Path | None, pattern_name: str, length: str | None) -> Pattern:
    config = _load(config_file)
    override = parse_pattern_length(length) if length is not None else None
    return config.compute_pattern(pattern_name, override)


def _exit_with_config_error(e: BreatheConfigError) -> NoReturn:
    logger.error(f"Configuration error: {e}")
    console.print(f"[red]Error:[/red] {escape(str(e))}", style="bold red")
    raise typer.Exit(1) from e


CONFIG_OPTION = typer.Option(None, "--config", "-c", help="Configuration file (default: BREATHE_CONFIG or ~/.config/breathe.yaml)")
LENGTH_OPTION = typer.Option(None, "--length", "-l", help="Session length override, e.g. 'time=300' or 'iterations=10'")


@app.command()
def run(
    pattern: str = typer.Option(settings.default_pattern, "--pattern", "-p", help="Breathing pattern to practice"),
    length: str | None = LENGTH_OPTION,
    config_file: Path | None = CONFIG_OPTION,
    yes: bool = typer.Option(False, "--yes", "-y", help="Start without asking for confirmation"),
    debug: bool = typer.Option(False, "--debug", help="Enable debug logging"),
) -> None:
    """Run a breathing session.

    Examples:
        # Practice the default pattern
        breathe run

        # Box breathing for five minutes
        breathe run --pattern box --length time=300
    """
    _setup_logging(debug=debug)

    try:
        resolved = _resolve_pattern(config_file, pattern, length)
    except BreatheConfigError as e:
        _exit_with_config_error(e)

    print_session_summary(console, resolved)
    if not yes and not typer.confirm("Would you like to start the breathing session?", default=True):
        console.print("[yellow]Session cancelled.[/yellow]")
        return

    session = BreathingSession.from_pattern(resolved)
    if session.is_completed():
        console.print("[yellow]Session length is zero, nothing to do.[/yellow]")
        return

    runner = SessionRunner(session, tick_seconds=settings.tick_seconds)
    try:
        with SessionProgress(console, runner.snapshot()) as progress:
            completed = runner.run(progress.update)
    except KeyboardInterrupt:
        console.print("\n[yellow]Interrupted. See you next time![/yellow]")
        raise typer.Exit(INTERRUPTED_EXIT_CODE) from None

    if completed:
        console.print(f"[bold green]✓ Breathing session completed ({session.total_ticks} seconds)[/bold green]")


@app.command("list")
def list_patterns(
    config_file: Path | None = CONFIG_OPTION,
    debug: bool = typer.Option(False, "--debug", help="Enable debug logging"),
) -> None:
    """List the breathing patterns defined in the configuration file."""
    _setup_logging(debug=debug)
    try:
        config = _load(config_file)
    except BreatheConfigError as e:
        _exit_with_config_error(e)
    print_pattern_table(console, config)


@app.command()
def show(
    pattern: str = typer.Argument(..., help="Pattern name"),
    length: str | None = LENGTH_OPTION,
    config_file: Path | None = CONFIG_OPTION,
    debug: bool = typer.Option(False, "--debug", help="Enable debug logging"),
) -> None:
    """Show a pattern and the session it would run, without starting it."""
    _setup_logging(debug=debug)
    try:
        resolved = _resolve_pattern(config_file, pattern, length)
    except BreatheConfigError as e:
        _exit_with_config_error(e)
    print_session_summary(console, resolved)


if __name__ == "__main__":
    app()
