"""Terminal output handling using Rich library.

This module provides the OutputHandler class for all CLI status output.
Messages go to stderr so converted Markdown written to stdout stays clean.
Supports verbosity levels and the --no-color flag.
"""

from contextlib import contextmanager
from typing import Iterator

from rich.console import Console
from rich.live import Live
from rich.spinner import Spinner

from adf2obsidian.file_mapper.models import ExportResult


class OutputHandler:
    """Handles all terminal status output using Rich library.

    Attributes:
        verbosity: Verbosity level (0=summary, 1=info, 2=debug)
        console: Rich Console instance for output (stderr)

    Example:
        >>> handler = OutputHandler(verbosity=1, no_color=False)
        >>> handler.success("Operation completed")
        >>> with handler.spinner("Converting..."):
        ...     pass
    """

    def __init__(self, verbosity: int = 0, no_color: bool = False):
        """Initialize output handler.

        Args:
            verbosity: Verbosity level (0=summary, 1=info, 2=debug)
            no_color: Disable color output if True
        """
        self.verbosity = verbosity
        self.no_color = no_color
        self.console = Console(
            stderr=True,
            no_color=no_color,
            highlight=False,
        )

    def success(self, message: str) -> None:
        """Display success message in green.

        Args:
            message: Success message to display
        """
        self.console.print(f"[green]✓[/green] {message}")

    def error(self, message: str) -> None:
        """Display error message in red.

        Args:
            message: Error message to display
        """
        self.console.print(f"[red]✗[/red] {message}", style="red")

    def warning(self, message: str) -> None:
        """Display warning message in yellow.

        Args:
            message: Warning message to display
        """
        self.console.print(f"[yellow]⚠[/yellow] {message}", style="yellow")

    def info(self, message: str) -> None:
        """Display info message (only if verbosity >= 1).

        Args:
            message: Info message to display
        """
        if self.verbosity >= 1:
            self.console.print(message)

    def debug(self, message: str) -> None:
        """Display debug message (only if verbosity >= 2).

        Args:
            message: Debug message to display
        """
        if self.verbosity >= 2:
            self.console.print(f"[dim]{message}[/dim]")

    @contextmanager
    def spinner(self, message: str) -> Iterator[None]:
        """Display spinner for long operations (skipped when not a terminal).

        Args:
            message: Message to display with spinner
        """
        if not self.console.is_terminal:
            yield
            return

        spinner = Spinner("dots", text=message)
        with Live(spinner, console=self.console, refresh_per_second=10):
            yield

    def print_export_summary(self, result: ExportResult, vault_dir: str) -> None:
        """Display vault export summary with color coding.

        Args:
            result: Result returned by VaultWriter.write
            vault_dir: Vault directory the notes were written to
        """
        self.console.print("\n[bold]Export Summary:[/bold]")

        created_count = result.page_count - len(result.overwritten_files)
        if created_count > 0:
            self.console.print(f"  [green]+[/green] Created: {created_count} note(s)")

        if result.overwritten_files:
            self.console.print(
                f"  [blue]↻[/blue] Overwritten: {len(result.overwritten_files)} note(s)"
            )

        if result.empty_pages:
            self.console.print(
                f"  [yellow]∅[/yellow] Empty: {len(result.empty_pages)} page(s) had no convertible body"
            )
            for page_id in result.empty_pages:
                self.debug(f"    empty page: {page_id}")

        if result.page_count == 0:
            self.console.print("\n[yellow]No pages to export[/yellow]")
        else:
            self.console.print(
                f"\n[green]Exported {result.page_count} page(s) to {vault_dir}[/green]"
            )
