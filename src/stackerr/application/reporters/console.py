"""Console reporter: traced error -> rich formatted string."""

from __future__ import annotations

from dataclasses import dataclass
from io import StringIO
from typing import TYPE_CHECKING

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from stackerr.application.reporters._base import display_type
from stackerr.application.traced import stack_frames

if TYPE_CHECKING:
    from stackerr.domain.frame import Frame


@dataclass(frozen=True, slots=True)
class ConsoleConfig:
    """Configuration for console reporter.

    All fields have defaults (convenience).
    Immutable (frozen dataclass).

    Attributes:
        width: Console width in columns.
        force_terminal: Emit ANSI styling even when not writing to a TTY.
        max_frames: Max frames to display. None = unlimited.
        show_header: Show the rule + exception line above the table.
    """

    width: int = 120
    force_terminal: bool = True
    max_frames: int | None = None
    show_header: bool = True

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.width < 1:
            raise ValueError(f"width must be >= 1, got {self.width}")
        if self.max_frames is not None and self.max_frames < 0:
            raise ValueError(f"max_frames must be >= 0, got {self.max_frames}")


class ConsoleReporter:
    """Console reporter: outputs rich formatted text.

    Output is str, not print(). Caller decides destination.
    """

    def __init__(self, config: ConsoleConfig | None = None) -> None:
        """Initialize reporter.

        Args:
            config: Reporter configuration. Uses defaults if None.
        """
        self._config = config or ConsoleConfig()

    def report(self, error: BaseException) -> str:
        """Format error and its captured stack as rich formatted string.

        Args:
            error: Exception to report. Need not carry a trace.

        Returns:
            Formatted string with colors and a frame table.
        """
        output = StringIO()
        console = Console(
            file=output,
            force_terminal=self._config.force_terminal,
            width=self._config.width,
        )

        if self._config.show_header:
            self._render_header(console, error)

        frames = stack_frames(error)
        if frames:
            self._render_frames(console, frames)
        else:
            console.print("[dim](no stack trace captured)[/dim]")

        return output.getvalue()

    def _render_header(self, console: Console, error: BaseException) -> None:
        """Render rule + exception type and message."""
        console.rule("[bold]STACK TRACE[/bold]")
        console.print(f"[bold red]{escape(display_type(error))}[/bold red]: {escape(str(error))}")
        console.print()

    def _render_frames(self, console: Console, frames: tuple[Frame, ...]) -> None:
        """Render frames as table, innermost first."""
        limit = self._config.max_frames
        shown = frames if limit is None else frames[:limit]

        table = Table(show_header=True, header_style="bold", box=None)
        table.add_column("#", style="dim", justify="right")
        table.add_column("Function")
        table.add_column("Location", style="cyan")

        for i, frame in enumerate(shown):
            table.add_row(str(i), escape(frame.function), escape(f"{frame.file}:{frame.line}"))

        console.print(table)

        hidden = len(frames) - len(shown)
        if hidden:
            console.print(f"[dim]... {hidden} more frame(s)[/dim]")

