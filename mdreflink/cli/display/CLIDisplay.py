"""CLI display implementation using Rich library."""

import sys

from rich.console import Console
from rich.markup import escape


class CLIDisplay:
    """Diagnostics for the command line.

    Standard output carries the rewritten Markdown, so every message goes to
    standard error. Messages are never wrapped, so paths and counts stay on
    one line when the terminal is narrow.
    """

    def __init__(self) -> None:
        self.stderr_console = Console(file=sys.stderr)

    def error(self, message: str) -> None:
        self.stderr_console.print(f"[red]Error:[/red] {escape(message)}", soft_wrap=True, highlight=False)

    def warning(self, message: str) -> None:
        self.stderr_console.print(f"[yellow]Warning:[/yellow] {escape(message)}", soft_wrap=True, highlight=False)

    def info(self, message: str) -> None:
        self.stderr_console.print(escape(message), soft_wrap=True, highlight=False)
