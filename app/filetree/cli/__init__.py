"""CLI package for filetree.

This package contains the Typer application and all subcommands.
"""

from filetree.cli.main import app

__all__ = ["app"]
