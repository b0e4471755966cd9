"""Terminal rendering for breathing sessions.

Two progress bars are shown while a session runs: a per-phase bar whose total
is the LCM of the phase lengths (so every phase fills it exactly) and an
overall bar for the whole session.
"""

from types import TracebackType

from rich.console import Console
from rich.panel import Panel
from rich.progress import BarColumn, Progress, SpinnerColumn, TaskID, TextColumn, TimeRemainingColumn
from rich.table import Table
from rich.text import Text

from breathe.patterns.types import BreatheConfig, IterationsLength, Pattern
from breathe.session.phase import MAX_PHASE_NAME_LEN
from breathe.session.runner import SessionSnapshot


def print_session_summary(console: Console, pattern: Pattern) -> None:
    """Print the pattern and session length before a session starts."""
    length = pattern.pattern_length
    lines = [
        f"Breathe in:     {pattern.breath_in}",
        f"Hold:           {pattern.hold_in or 0}",
        f"Breathe out:    {pattern.breath_out}",
        f"Hold:           {pattern.hold_out or 0}",
    ]
    if length is not None:
        unit = "" if isinstance(length, IterationsLength) else " seconds"
        lines.append(f"Session length: {length}{unit}")
        if isinstance(length, IterationsLength):
            lines.append(f"                ({length.session_ticks(pattern.length())} seconds)")

    console.print(
        Panel(
            Text("\n".join(lines)),
            title=Text(pattern.description or pattern.short_string(), style="bold cyan"),
            border_style="cyan",
            expand=False,
        )
    )


def print_pattern_table(console: Console, config: BreatheConfig) -> None:
    """Print every configured pattern with its durations and session length."""
    table = Table(title="Breathing patterns", border_style="cyan")
    table.add_column("Name", style="bold")
    table.add_column("Pattern")
    table.add_column("Session")
    table.add_column("Description", style="dim")

    for name in config.pattern_names():
        pattern = config.patterns[name]
        table.add_row(name, pattern.short_string(), pattern.short_session_string(), pattern.description)

    console.print(table)
    console.print(f"[dim]Default session length: {config.pattern_length.short_string()}[/dim]")


class SessionProgress:
    """Phase and overall progress bars fed with session snapshots.

    Use as a context manager; `update` may be called from the runner thread.
    """

    def __init__(self, console: Console, initial: SessionSnapshot):
        self.progress = Progress(
            SpinnerColumn(),
            BarColumn(bar_width=None),
            TextColumn(f"{{task.description:<{MAX_PHASE_NAME_LEN + 1}}}"),
            TextColumn("[progress.percentage]{task.percentage:>3.0f}%"),
            TimeRemainingColumn(),
            console=console,
            transient=True,
        )
        self.phase_task: TaskID = self.progress.add_task(initial.phase, total=initial.lcm)
        self.total_task: TaskID = self.progress.add_task(
            "Session", total=initial.session_length, completed=initial.total_ticks
        )

    def __enter__(self) -> "SessionProgress":
        self.progress.start()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.progress.stop()

    def update(self, snapshot: SessionSnapshot) -> None:
        self.progress.update(self.total_task, completed=snapshot.total_ticks)
        if snapshot.phase_changed:
            self.progress.reset(self.phase_task, total=snapshot.lcm, description=snapshot.phase)
        else:
            self.progress.advance(self.phase_task, snapshot.phase_increment)
