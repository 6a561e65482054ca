"""Rich console output for the CLI."""

from __future__ import annotations

from rich.console import Console
from rich.markup import escape

from pathops.types import OperationResult


class Reporter:
    """Prints operation outcomes (non-interactive)."""

    def __init__(self, console: Console | None = None) -> None:
        """Initialize reporter.

        Args:
            console: Console to print to. Defaults to stdout.
        """
        self.console = console or Console()

    def show_success(self, message: str) -> None:
        """Show success message.

        Args:
            message: Success message.
        """
        self.console.print(f"[green]✓[/green] {message}")

    def show_error(self, message: str) -> None:
        """Show error message.

        Args:
            message: Error message.
        """
        self.console.print(f"[red]✗[/red] {message}")

    def show_result(self, result: OperationResult, as_json: bool = False) -> None:
        """Show the outcome of an operation.

        Args:
            result: Operation outcome.
            as_json: Print the result as JSON instead of a message.
        """
        if as_json:
            self.console.out(result.model_dump_json(by_alias=True), highlight=False)
        elif result.success:
            self.show_success(describe(result))
        else:
            self.show_error(
                f"{result.operation} failed: {escape(result.error or '')}"
            )


def describe(result: OperationResult) -> str:
    """Build a one-line summary of a successful operation."""
    source = escape(result.source)
    if result.destination in (None, result.source):
        return f"{result.operation}: {source}"
    return f"{result.operation}: {source} -> {escape(result.destination)}"
