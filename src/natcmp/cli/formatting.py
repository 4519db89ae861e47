"""Rich formatting helpers for the natcmp CLI.

Rich auto-detects TTY and degrades gracefully when piped (no ANSI codes).
The ``Result:`` line is printed without markup or highlighting so that its
text is stable for scripts.
"""

from __future__ import annotations

from rich.console import Console
from rich.markup import escape


def get_console() -> Console:
    """Create a Rich Console on stdout."""
    return Console(stderr=False)


def get_error_console() -> Console:
    """Create a Rich Console on stderr for warnings and errors."""
    return Console(stderr=True)


def format_result(result: int, console: Console) -> None:
    """Display a comparison result as ``Result: <n>``."""
    console.print(f"Result: {result}", markup=False, highlight=False)


def format_warning(message: str, console: Console) -> None:
    """Display a warning without stopping the command."""
    console.print(escape(message), highlight=False)


def format_error(message: str, console: Console) -> None:
    """Display an error message."""
    console.print(f"[red]Error:[/red] {escape(message)}", highlight=False)
