"""CLI commands using Typer."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console

from pathkit import __version__
from pathkit.config import FsConfig
from pathkit.console import TUI
from pathkit.context import FsContext, create_context
from pathkit.errors import PathError
from pathkit.path import FsPath
from pathkit.types import WalkFilter

app = typer.Typer(
    name="pathkit",
    help="Copy, walk and inspect filesystem paths",
    no_args_is_help=True,
)

config_app = typer.Typer(help="Configuration commands")

app.add_typer(config_app, name="config")

console = Console()
tui = TUI()


def version_callback(value: bool) -> None:
    """Show version and exit."""
    if value:
        console.print(f"pathkit v{__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Annotated[
        bool,
        typer.Option(
            "--version",
            "-V",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit",
        ),
    ] = False,
    verbose: Annotated[
        bool, typer.Option("--verbose", "-v", help="Log every filesystem action")
    ] = False,
) -> None:
    """Copy, walk and inspect filesystem paths."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")


def _fail(message: str) -> typer.Exit:
    """Report an error and build the matching exit."""
    tui.show_error(message)
    return typer.Exit(1)


# ============================================================================
# Path Commands
# ============================================================================


@app.command("cp")
def cp(
    source: Annotated[str, typer.Argument(help="File or directory to copy")],
    destination: Annotated[str, typer.Argument(help="Destination path")],
    _context=None,
) -> None:
    """Copy a file or a directory tree."""
    ctx: FsContext = _context or create_context()

    try:
        ctx.copier.copy_to(FsPath(source), FsPath(destination))
    except PathError as e:
        raise _fail(str(e)) from e
    except OSError as e:
        raise _fail(f"Copy failed: {e}") from e
    tui.show_success(f"Copied '{source}' to '{destination}'")


@app.command()
def walk(
    root: Annotated[str, typer.Argument(help="Directory to walk")],
    walk_type: Annotated[
        WalkFilter, typer.Option("--type", "-t", help="Entries to list")
    ] = WalkFilter.BOTH,
    _context=None,
) -> None:
    """List the entries below a directory."""
    ctx: FsContext = _context or create_context()

    try:
        ctx.walker.walk(FsPath(root), walk_type, tui.show_entry)
    except PathError as e:
        raise _fail(str(e)) from e
    except OSError as e:
        raise _fail(f"Walk failed: {e}") from e


@app.command()
def count(
    root: Annotated[str, typer.Argument(help="Directory to count")],
    walk_type: Annotated[
        WalkFilter, typer.Option("--type", "-t", help="Entries to count")
    ] = WalkFilter.BOTH,
    _context=None,
) -> None:
    """Count the entries below a directory (0 if it cannot be walked)."""
    ctx: FsContext = _context or create_context()
    typer.echo(ctx.walker.count(FsPath(root), walk_type))


@app.command()
def cat(
    path: Annotated[str, typer.Argument(help="File to print")],
    _context=None,
) -> None:
    """Write a file's bytes to standard output."""
    ctx: FsContext = _context or create_context()

    try:
        data = ctx.file_access.read_all(FsPath(path))
    except PathError as e:
        raise _fail(str(e)) from e
    except OSError as e:
        raise _fail(f"Read failed: {e}") from e
    typer.echo(data, nl=False)


# ============================================================================
# Config Commands
# ============================================================================


@config_app.command("show")
def config_show(
    file: Annotated[
        Path | None, typer.Option("--file", "-f", help="JSON file to load instead of defaults")
    ] = None,
    _context=None,
) -> None:
    """Show the effective modes and flags."""
    if file is not None:
        try:
            config = FsConfig.from_file(file)
        except (OSError, ValueError) as e:
            raise _fail(f"Invalid config: {e}") from e
    else:
        ctx: FsContext = _context or create_context()
        config = ctx.config
    tui.show_config(config)


if __name__ == "__main__":
    app()
