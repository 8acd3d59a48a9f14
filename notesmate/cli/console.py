"""Rich-backed console for CLI output. Errors go to stderr, everything else to stdout."""

from typing import Any

from rich.console import Console as RichConsole
from rich.status import Status


class Console:
    def __init__(self, *, force_terminal: bool | None = None) -> None:
        self._out = RichConsole(force_terminal=force_terminal)
        self._err = RichConsole(force_terminal=force_terminal, stderr=True)

    def success(self, message: str) -> None:
        self._out.print(f"[green]✓[/green] {message}")

    def detail(self, label: str, value: Any) -> None:
        """Indented ``label: value`` line under a preceding message."""
        self._out.print(f"  [dim]{label}:[/dim] {value}", highlight=False)

    def error(self, message: str, *, hint: str | None = None) -> None:
        self._err.print(f"[red]✗[/red] {message}")
        if hint:
            self._err.print(f"  [dim]{hint}[/dim]")

    def print(self, *args: Any, **kwargs: Any) -> None:
        self._out.print(*args, **kwargs)

    def status(self, message: str) -> Status:
        """Spinner shown while the ``with`` block runs."""
        return self._out.status(message)


_console: Console | None = None


def get_console() -> Console:
    global _console
    if _console is None:
        _console = Console()
    return _console
