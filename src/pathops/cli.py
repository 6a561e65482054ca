"""CLI commands using Typer."""

from __future__ import annotations

import logging
from collections.abc import Callable
from pathlib import Path
from typing import TYPE_CHECKING, Annotated

if TYPE_CHECKING:
    from pathops.context import AppContext

import typer

from pathops import __version__
from pathops.console import Reporter
from pathops.context import create_context
from pathops.errors import FileOpsError
from pathops.types import MakeDirectoryOptions, OperationResult

app = typer.Typer(
    name="pathops",
    help="Idempotent file operations",
    no_args_is_help=True,
)

reporter = Reporter()

JsonOption = Annotated[
    bool, typer.Option("--json", help="Print the result as JSON")
]
OverwriteOption = Annotated[
    bool, typer.Option("--overwrite", "-f", help="Replace an existing destination file")
]
IntoOption = Annotated[
    bool, typer.Option("--into", "-t", help="Treat DEST as a directory to place SRC in")
]


def version_callback(value: bool) -> None:
    """Show version and exit."""
    if value:
        reporter.console.print(f"pathops v{__version__}")
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
        bool, typer.Option("--verbose", "-v", help="Enable debug logging")
    ] = False,
) -> None:
    """Idempotent file operations."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")


def _run(
    operation: str,
    source: Path,
    action: Callable[[], Path | None],
    as_json: bool,
) -> Path | None:
    """Run one operation and report its outcome.

    Args:
        operation: Operation name for the report.
        source: Path the operation acts on.
        action: Performs the operation and returns the resulting path.
        as_json: Report as JSON.

    Returns:
        The resulting path.

    Raises:
        typer.Exit: If the operation fails.
    """
    try:
        destination = action()
    except FileOpsError as e:
        reporter.show_result(
            OperationResult(
                operation=operation,
                source=str(source),
                success=False,
                error_kind=e.kind,
                error=e.message,
            ),
            as_json,
        )
        raise typer.Exit(1) from e
    except ValueError as e:
        reporter.show_result(
            OperationResult(
                operation=operation, source=str(source), success=False, error=str(e)
            ),
            as_json,
        )
        raise typer.Exit(1) from e

    reporter.show_result(
        OperationResult(
            operation=operation,
            source=str(source),
            destination=str(destination) if destination is not None else None,
        ),
        as_json,
    )
    return destination


@app.command("copy")
def copy(
    src: Annotated[Path, typer.Argument(help="File or directory to copy")],
    dest: Annotated[Path, typer.Argument(help="Destination path")],
    into: IntoOption = False,
    overwrite: OverwriteOption = False,
    json_output: JsonOption = False,
    _context=None,
) -> None:
    """Copy a file or directory."""
    ctx: AppContext = _context or create_context()
    action = ctx.fileops.copy_into if into else ctx.fileops.copy_to
    _run("copy", src, lambda: action(src, dest, overwrite=overwrite), json_output)


@app.command("move")
def move(
    src: Annotated[Path, typer.Argument(help="File or directory to move")],
    dest: Annotated[Path, typer.Argument(help="Destination path")],
    into: IntoOption = False,
    overwrite: OverwriteOption = False,
    json_output: JsonOption = False,
    _context=None,
) -> None:
    """Move a file or directory."""
    ctx: AppContext = _context or create_context()
    action = ctx.fileops.move_into if into else ctx.fileops.move_to
    _run("move", src, lambda: action(src, dest, overwrite=overwrite), json_output)


@app.command("delete")
def delete(
    paths: Annotated[list[Path], typer.Argument(help="Paths to delete")],
    json_output: JsonOption = False,
    _context=None,
) -> None:
    """Delete files or directory trees. Missing paths are ignored."""
    ctx: AppContext = _context or create_context()
    for path in paths:
        _run("delete", path, lambda: ctx.fileops.delete(path), json_output)


@app.command("touch")
def touch(
    paths: Annotated[list[Path], typer.Argument(help="Files to create")],
    json_output: JsonOption = False,
    _context=None,
) -> None:
    """Create empty files, truncating existing ones."""
    ctx: AppContext = _context or create_context()
    for path in paths:
        _run("touch", path, lambda: ctx.fileops.touch(path), json_output)


@app.command("mkdir")
def mkdir(
    paths: Annotated[list[Path], typer.Argument(help="Directories to create")],
    parents: Annotated[
        bool, typer.Option("--parents", "-p", help="Create intermediate directories")
    ] = False,
    json_output: JsonOption = False,
    _context=None,
) -> None:
    """Create directories. Existing directories are ignored."""
    ctx: AppContext = _context or create_context()
    options = MakeDirectoryOptions.P if parents else None
    for path in paths:
        _run("mkdir", path, lambda: ctx.fileops.mkdir(path, options), json_output)


@app.command("rename")
def rename(
    path: Annotated[Path, typer.Argument(help="File or directory to rename")],
    new_name: Annotated[str, typer.Argument(help="New basename")],
    json_output: JsonOption = False,
    _context=None,
) -> None:
    """Rename a file or directory within its parent directory."""
    ctx: AppContext = _context or create_context()
    _run("rename", path, lambda: ctx.fileops.rename(path, new_name), json_output)


if __name__ == "__main__":
    app()
