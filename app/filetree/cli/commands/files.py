"""Single-file commands.

Provides commands to print, inspect, copy and move individual files.
"""

from pathlib import Path
from typing import Annotated

import typer
from rich.markup import escape
from rich.table import Table

from filetree.cli.context import get_config
from filetree.core.errors import FiletreeError, MoveError
from filetree.files.handle import FileHandle
from filetree.utils.formatting import (
    console,
    format_size,
    print_error,
    print_success,
    print_warning,
)

app = typer.Typer(
    help="Read, copy and move individual files.",
    no_args_is_help=True,
)

SourceArg = Annotated[Path, typer.Argument(help="File to operate on.")]
DestArg = Annotated[Path, typer.Argument(help="Destination directory.")]
NameOpt = Annotated[
    str | None,
    typer.Option("--name", "-n", help="New file name at the destination."),
]


@app.command()
def cat(source: SourceArg) -> None:
    """Print the contents of a file."""
    handle = _handle_for(source)
    try:
        data = handle.read_all()
    except FiletreeError as e:
        print_error(escape(str(e)))
        raise typer.Exit(code=1) from e
    typer.echo(data, nl=False)


@app.command()
def stat(source: SourceArg) -> None:
    """Show the decomposed path and metadata of a file."""
    handle = _handle_for(source)
    try:
        info = handle.stat()
    except FiletreeError as e:
        print_error(escape(str(e)))
        raise typer.Exit(code=1) from e

    table = Table(title=escape(handle.name), show_header=False, border_style="border")
    table.add_column("Field", style="bold_header")
    table.add_column("Value")
    table.add_row("Directory", escape(handle.dir))
    table.add_row("Base", escape(handle.base))
    table.add_row("Extension", escape(handle.ext) or "-")
    table.add_row("Size", format_size(info.size_bytes))
    table.add_row("Modified", info.mtime)
    console.print(table)


@app.command()
def copy(
    ctx: typer.Context,
    source: SourceArg,
    dest_dir: DestArg,
    name: NameOpt = None,
) -> None:
    """Copy a file into a directory, optionally under a new name."""
    config = get_config(ctx)
    handle = _handle_for(source)
    try:
        if name is None:
            destination = handle.copy(str(dest_dir), chunk_size=config.copy_chunk_size)
        else:
            destination = handle.copy_and_rename(
                str(dest_dir), name, chunk_size=config.copy_chunk_size
            )
    except FiletreeError as e:
        print_error(escape(str(e)))
        raise typer.Exit(code=1) from e

    print_success(f"Copied {escape(handle.full_path)} -> {escape(destination.full_path)}")


@app.command()
def move(
    ctx: typer.Context,
    source: SourceArg,
    dest_dir: DestArg,
    name: NameOpt = None,
) -> None:
    """Move a file into a directory (copy, then delete the source)."""
    config = get_config(ctx)
    handle = _handle_for(source)
    try:
        if name is None:
            destination = handle.move(str(dest_dir), chunk_size=config.copy_chunk_size)
        else:
            destination = handle.move_and_rename(
                str(dest_dir), name, chunk_size=config.copy_chunk_size
            )
    except MoveError as e:
        print_error(escape(str(e)))
        print_warning(f"A copy now exists at {escape(e.destination.full_path)}")
        raise typer.Exit(code=1) from e
    except FiletreeError as e:
        print_error(escape(str(e)))
        raise typer.Exit(code=1) from e

    print_success(f"Moved {escape(handle.full_path)} -> {escape(destination.full_path)}")


def _handle_for(path: Path) -> FileHandle:
    """Build a handle for a CLI path argument or exit with an error message."""
    try:
        return FileHandle.from_path(str(path))
    except FiletreeError as e:
        print_error(escape(str(e)))
        raise typer.Exit(code=1) from e
