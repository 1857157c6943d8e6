"""Directory tree commands.

Provides commands to render a populated tree, list a single directory
level and register new files in a directory.
"""

import json
from enum import Enum
from pathlib import Path
from typing import Annotated

import typer
from rich.markup import escape

from filetree.cli.context import get_config, normalize_extension
from filetree.core.errors import FiletreeError, WalkError
from filetree.files.handle import FileHandle
from filetree.files.tree import DirectoryNode
from filetree.utils.formatting import (
    build_rich_tree,
    console,
    count_visible,
    create_listing_table,
    format_file_label,
    format_size,
    print_error,
    print_info,
    print_success,
)

app = typer.Typer(
    help="Inspect directory trees.",
    no_args_is_help=True,
)


class OutputFormat(str, Enum):
    """Output format options for directory listings."""

    TABLE = "table"
    JSON = "json"


@app.command()
def tree(
    ctx: typer.Context,
    root: Annotated[
        Path,
        typer.Argument(help="Directory to walk."),
    ] = Path("."),
    ext: Annotated[
        str | None,
        typer.Option("--ext", "-e", help="Only show files with this extension."),
    ] = None,
    depth: Annotated[
        int | None,
        typer.Option("--depth", "-d", min=0, help="Limit rendered subdirectory levels."),
    ] = None,
) -> None:
    """Walk a directory and render it as a sorted tree."""
    config = get_config(ctx)
    node = _populate(root)
    wanted = normalize_extension(ext)

    console.print(build_rich_tree(node, ext=wanted, max_depth=depth, show_hidden=config.show_hidden))

    directories, file_count = count_visible(
        node, ext=wanted, max_depth=depth, show_hidden=config.show_hidden
    )
    console.print(f"\n[muted]{directories} directories, {file_count} files[/muted]")


@app.command("ls")
def list_directory(
    ctx: typer.Context,
    directory: Annotated[
        Path,
        typer.Argument(help="Directory to list."),
    ] = Path("."),
    ext: Annotated[
        str | None,
        typer.Option("--ext", "-e", help="Only list files with this extension."),
    ] = None,
    output_format: Annotated[
        OutputFormat,
        typer.Option(
            "--format",
            "-f",
            help="Output format.",
            case_sensitive=False,
        ),
    ] = OutputFormat.TABLE,
) -> None:
    """List the subdirectories and files of a single directory."""
    config = get_config(ctx)
    node = _populate(directory)
    wanted = normalize_extension(ext)

    # An extension filter selects files only
    subdirectories = node.subdirectories if wanted is None else []
    handles = node.files if wanted is None else node.filter_by_extension(wanted)
    if not config.show_hidden:
        subdirectories = [d for d in subdirectories if not d.name.startswith(".")]
        handles = [h for h in handles if not h.name.startswith(".")]

    if output_format == OutputFormat.JSON:
        _print_json(subdirectories, handles)
        return

    if not subdirectories and not handles:
        print_info(f"Nothing to list in {escape(node.path)}")
        return

    table = create_listing_table(f"Contents of {escape(node.path)}")
    for sub in subdirectories:
        table.add_row(f"[directory]{escape(sub.name)}/[/]", "directory", "-", "-")
    for handle in handles:
        table.add_row(
            format_file_label(handle),
            "file",
            escape(handle.ext) or "-",
            format_size(_size_or_none(handle)),
        )
    console.print(table)


@app.command()
def new(
    ctx: typer.Context,
    directory: Annotated[
        Path,
        typer.Argument(help="Directory to create the file in."),
    ],
    name: Annotated[
        str,
        typer.Argument(help="Name of the new file."),
    ],
    content: Annotated[
        str,
        typer.Option("--content", "-c", help="Text to write into the file."),
    ] = "",
    force: Annotated[
        bool,
        typer.Option("--force", help="Overwrite an existing file."),
    ] = False,
) -> None:
    """Register a new file in a directory and write it to disk."""
    config = get_config(ctx)
    node = _populate(directory)

    if not force and any(f.name == name for f in node.files):
        print_error(f"File already exists: {escape(name)} (use --force to overwrite)")
        raise typer.Exit(code=1)

    try:
        handle = node.create_file(name)
        handle.write_string(content, sync=config.sync_writes)
    except FiletreeError as e:
        print_error(escape(str(e)))
        raise typer.Exit(code=1) from e

    print_success(f"Created {escape(handle.full_path)}")


# === Private helper functions ===


def _populate(path: Path) -> DirectoryNode:
    """Populate a tree or exit with an error message."""
    try:
        return DirectoryNode.populate(str(path))
    except WalkError as e:
        print_error(escape(str(e)))
        raise typer.Exit(code=1) from e


def _size_or_none(handle: FileHandle) -> int | None:
    """Return a file's size, or None when it cannot be stat'ed (e.g. dangling symlink)."""
    try:
        return handle.stat().size_bytes
    except FiletreeError:
        return None


def _print_json(subdirectories: list[DirectoryNode], handles: list[FileHandle]) -> None:
    """Display a listing as JSON."""
    data = [
        {"name": sub.name, "type": "directory", "path": sub.path, "ext": None, "size_bytes": None}
        for sub in subdirectories
    ]
    data.extend(
        {
            "name": handle.name,
            "type": "file",
            "path": handle.full_path,
            "ext": handle.ext,
            "size_bytes": _size_or_none(handle),
        }
        for handle in handles
    )
    console.print_json(json.dumps(data))
