"""Utility modules for filetree.

This module exports commonly used utility functions.
"""

from filetree.utils.formatting import (
    build_rich_tree,
    console,
    count_visible,
    create_listing_table,
    err_console,
    format_file_label,
    format_size,
    print_error,
    print_info,
    print_success,
    print_warning,
)

__all__ = [
    "build_rich_tree",
    "console",
    "count_visible",
    "create_listing_table",
    "err_console",
    "format_file_label",
    "format_size",
    "print_error",
    "print_info",
    "print_success",
    "print_warning",
]
