"""Rich console formatting utilities.

Provides consistent formatting for CLI output using Rich.
"""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING

from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.tree import Tree

from filetree.core.theme import get_theme

if TYPE_CHECKING:
    from filetree.files.handle import FileHandle
    from filetree.files.tree import DirectoryNode


def _detect_color_system() -> str | None:
    """Detect the best color system for the current terminal.

    Returns "truecolor" for interactive terminals to enable full hex color support,
    None otherwise to let Rich auto-detect.
    """
    if sys.stdout.isatty():
        return "truecolor"
    return None


# Shared console instances (theme loaded once at import)
console = Console(theme=get_theme(), color_system=_detect_color_system())
err_console = Console(theme=get_theme(), stderr=True, color_system=_detect_color_system())


def format_file_label(handle: FileHandle) -> str:
    """Format a file name with its extension highlighted."""
    if handle.ext:
        return f"[file]{escape(handle.base)}[/][extension]{escape(handle.ext)}[/]"
    return f"[file]{escape(handle.base)}[/]"


def build_rich_tree(
    node: DirectoryNode,
    *,
    ext: str | None = None,
    max_depth: int | None = None,
    show_hidden: bool = True,
) -> Tree:
    """Render a directory node and its descendants as a Rich Tree.

    Args:
        node: Root of the tree to render.
        ext: Only show files with this extension (without the dot).
        max_depth: Number of subdirectory levels to render below the root.
            None renders everything.
        show_hidden: Render entries whose names start with a dot.

    Returns:
        Rich Tree ready for printing.
    """
    tree = Tree(f"[directory]{escape(node.path)}[/]", guide_style="border")
    _add_children(tree, node, ext, max_depth, show_hidden)
    return tree


def count_visible(
    node: DirectoryNode,
    *,
    ext: str | None = None,
    max_depth: int | None = None,
    show_hidden: bool = True,
) -> tuple[int, int]:
    """Count the directories and files build_rich_tree would render.

    The root itself is not counted.

    Returns:
        Tuple of (directory count, file count).
    """
    directories, files = 0, 0
    subdirectories, handles = _visible_children(node, ext, max_depth, show_hidden)
    files += len(handles)
    next_depth = None if max_depth is None else max_depth - 1
    for child in subdirectories:
        child_dirs, child_files = count_visible(
            child, ext=ext, max_depth=next_depth, show_hidden=show_hidden
        )
        directories += 1 + child_dirs
        files += child_files
    return directories, files


def _visible_children(
    node: DirectoryNode,
    ext: str | None,
    depth_left: int | None,
    show_hidden: bool,
) -> tuple[list[DirectoryNode], list[FileHandle]]:
    subdirectories = node.subdirectories if depth_left is None or depth_left > 0 else []
    files = node.files if ext is None else node.filter_by_extension(ext)
    if not show_hidden:
        subdirectories = [d for d in subdirectories if not d.name.startswith(".")]
        files = [f for f in files if not f.name.startswith(".")]
    return subdirectories, files


def _add_children(
    branch: Tree,
    node: DirectoryNode,
    ext: str | None,
    depth_left: int | None,
    show_hidden: bool,
) -> None:
    subdirectories, files = _visible_children(node, ext, depth_left, show_hidden)
    next_depth = None if depth_left is None else depth_left - 1
    for child in subdirectories:
        sub = branch.add(f"[directory]{escape(child.name)}/[/]")
        _add_children(sub, child, ext, next_depth, show_hidden)
    for handle in files:
        branch.add(format_file_label(handle))


def create_listing_table(title: str) -> Table:
    """Create a pre-configured table for a single-level directory listing.

    Args:
        title: Table title.

    Returns:
        Rich Table with Name, Type, Extension and Size columns.
    """
    table = Table(
        title=title,
        show_header=True,
        header_style="bold_header",
        border_style="border",
    )
    table.add_column("Name", no_wrap=True)
    table.add_column("Type", style="muted", width=10)
    table.add_column("Extension", style="extension")
    table.add_column("Size", style="info", justify="right")
    return table


def format_size(size_bytes: int | None) -> str:
    """Format byte count as human-readable string."""
    if size_bytes is None:
        return "-"
    size = float(size_bytes)
    for unit in ("B", "KB", "MB", "GB"):
        if size < 1024:
            return f"{int(size)} {unit}" if unit == "B" else f"{size:.1f} {unit}"
        size /= 1024
    return f"{size:.1f} TB"


def print_info(message: str) -> None:
    """Print an info message."""
    console.print(f"[info]{message}[/]")


def print_warning(message: str) -> None:
    """Print a warning message."""
    err_console.print(f"[warning]Warning:[/] {message}")


def print_error(message: str) -> None:
    """Print an error message."""
    err_console.print(f"[error]Error:[/] {message}")


def print_success(message: str) -> None:
    """Print a success message."""
    console.print(f"[success]{message}[/]")
