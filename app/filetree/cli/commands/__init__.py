"""CLI commands for filetree.

This package contains all subcommand implementations.
"""

from filetree.cli.commands import config, directory, files

__all__ = ["config", "directory", "files"]
