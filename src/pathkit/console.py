"""Rich output helpers for the command line."""

from __future__ import annotations

from typing import TYPE_CHECKING

from rich.console import Console
from rich.table import Table

if TYPE_CHECKING:
    from pathkit.config import FsConfig
    from pathkit.path import FsPath


class TUI:
    """Text output for pathkit commands (non-interactive)."""

    def __init__(self) -> None:
        """Initialize TUI."""
        self.console = Console()

    def show_entry(self, path: FsPath, is_directory: bool) -> None:
        """Print one walked entry, marking directories with a trailing separator.

        Args:
            path: Entry location.
            is_directory: True if the entry is a directory.
        """
        suffix = "/" if is_directory else ""
        style = "bold blue" if is_directory else ""
        self.console.print(
            f"{path}{suffix}", style=style, markup=False, highlight=False, soft_wrap=True
        )

    def show_config(self, config: FsConfig) -> None:
        """Display effective modes and flags.

        Args:
            config: Configuration to show.
        """
        table = Table(title="Configuration")
        table.add_column("Setting", style="cyan")
        table.add_column("Value")

        table.add_row("File mode", f"{config.file_mode:04o}")
        table.add_row("Directory mode", f"{config.dir_mode:04o}")
        table.add_row("Copy read mode", f"{config.read_mode:04o}")
        table.add_row("Open flags", hex(config.open_flags))
        table.add_row("Create flags", hex(config.create_flags))
        table.add_row("Append flags", hex(config.append_flags))

        self.console.print(table)

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

