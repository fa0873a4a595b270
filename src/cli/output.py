"""Terminal output handling using Rich library.

This module provides the OutputHandler class for all CLI terminal output:
colored status messages, spinners for remote calls, and tables for
attachment listings. Supports verbosity levels and the --no-color flag.
"""

from contextlib import contextmanager
from typing import Iterator, List

from rich.console import Console
from rich.live import Live
from rich.spinner import Spinner
from rich.table import Table

from src.confluence_session.models import Attachment, ServerInfo


class OutputHandler:
    """Handles all terminal output using Rich library.

    Attributes:
        verbosity: Verbosity level (0=summary, 1=info, 2=debug)
        console: Rich Console instance for output

    Example:
        >>> handler = OutputHandler(verbosity=1, no_color=False)
        >>> handler.success("Uploaded report.html")
    """

    def __init__(self, verbosity: int = 0, no_color: bool = False):
        self.verbosity = verbosity
        self.console = Console(
            force_terminal=not no_color,
            no_color=no_color,
            highlight=False,
        )

    def success(self, message: str) -> None:
        """Display success message with a green check mark."""
        self.console.print(f"[green]✓[/green] {message}")

    def error(self, message: str) -> None:
        """Display error message in red."""
        self.console.print(f"[red]✗[/red] {message}", style="red")

    def warning(self, message: str) -> None:
        """Display warning message in yellow."""
        self.console.print(f"[yellow]⚠[/yellow] {message}", style="yellow")

    def info(self, message: str) -> None:
        """Display info message (only if verbosity >= 1)."""
        if self.verbosity >= 1:
            self.console.print(message)

    def debug(self, message: str) -> None:
        """Display debug message (only if verbosity >= 2)."""
        if self.verbosity >= 2:
            self.console.print(f"[dim]{message}[/dim]")

    @contextmanager
    def spinner(self, message: str) -> Iterator[None]:
        """Display spinner while a remote call is running.

        Example:
            >>> with handler.spinner("Fetching page..."):
            ...     session.get_page_summary("TEAM", "Home")
        """
        spinner = Spinner("dots", text=message)
        with Live(spinner, console=self.console, refresh_per_second=10):
            yield

    def print_server_info(self, server_info: ServerInfo, version4: bool) -> None:
        """Display server identity."""
        self.console.print(f"[bold]Confluence {server_info.version_string}[/bold]")
        if server_info.base_url:
            self.console.print(f"  Base URL: {server_info.base_url}")
        if server_info.build_id:
            self.console.print(f"  Build: {server_info.build_id}")
        if server_info.development_build:
            self.console.print("  [yellow]Development build[/yellow]")
        api = "4.x (page summaries)" if version4 else "pre-4.0 (legacy page retrieval)"
        self.console.print(f"  Remote API rules: {api}")

    def print_attachments(self, page_title: str, attachments: List[Attachment]) -> None:
        """Display attachments of a page as a table."""
        if not attachments:
            self.console.print(f"[yellow]No attachments on '{page_title}'[/yellow]")
            return

        table = Table(title=f"Attachments on '{page_title}'")
        table.add_column("File name")
        table.add_column("Size", justify="right")
        table.add_column("Content type")
        table.add_column("Comment")
        for attachment in attachments:
            table.add_row(
                attachment.file_name or "",
                str(attachment.file_size),
                attachment.content_type,
                attachment.comment,
            )
        self.console.print(table)

    def print_upload_summary(self, uploaded: int, failed: int) -> None:
        """Display upload summary with color coding."""
        self.console.print("\n[bold]Upload Summary:[/bold]")
        if uploaded > 0:
            self.console.print(f"  [green]↑[/green] Uploaded: {uploaded} file(s)")
        if failed > 0:
            self.console.print(f"  [red]✗[/red] Failed: {failed} file(s)")

        if uploaded == 0 and failed == 0:
            self.console.print("\n[yellow]No files to upload[/yellow]")
        elif failed > 0:
            self.console.print("\n[red]Upload completed with errors[/red]")
        else:
            self.console.print("\n[green]Upload completed successfully[/green]")
