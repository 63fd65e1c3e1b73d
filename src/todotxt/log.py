"""Console output for the CLI and debug tracing for the library, via Rich."""

from __future__ import annotations

from rich.console import Console
from rich.markup import escape

console = Console(highlight=False)
# Diagnostics go to stderr so `todotxt ls > file` stays a clean task list.
_err_console = Console(highlight=False, stderr=True)

_verbose = False

PRIORITY_STYLES: dict[str, str] = {
    "A": "bold red",
    "B": "yellow",
    "C": "green",
}


def set_verbose(enabled: bool) -> None:
    global _verbose
    _verbose = enabled


def info(msg: str) -> None:
    console.print(f"[blue]\\[INFO][/blue] {escape(msg)}")


def success(msg: str) -> None:
    console.print(f"[green]\\[OK][/green] {escape(msg)}")


def warn(msg: str) -> None:
    _err_console.print(f"[yellow]\\[WARN][/yellow] {escape(msg)}")


def error(msg: str) -> None:
    _err_console.print(f"[red]\\[ERROR][/red] {escape(msg)}")


def debug(msg: str) -> None:
    if _verbose:
        _err_console.print(f"[dim]\\[DEBUG] {escape(msg)}[/dim]")


def task_line(task_id: int, text: str, *, priority: str = "", completed: bool = False, width: int = 0) -> None:
    """Print one rendered task prefixed by its right-aligned id.

    Completed tasks are dimmed; open tasks are colored by priority.
    """
    body = escape(text)
    if completed:
        body = f"[dim]{body}[/dim]"
    elif priority in PRIORITY_STYLES:
        style = PRIORITY_STYLES[priority]
        body = f"[{style}]{body}[/{style}]"
    console.print(f"{task_id:>{width}} {body}")


def footer(shown: int, total: int) -> None:
    console.print(f"[dim]--\n{shown} of {total} tasks shown[/dim]")
