"""Shared helpers for reading global CLI state from the Typer context."""

import typer

from filetree.core.config import FiletreeConfig


def get_config(ctx: typer.Context) -> FiletreeConfig:
    """Return the configuration loaded by the main callback.

    Falls back to defaults when a command runs without the main callback
    (e.g. when its sub-app is invoked directly in tests).
    """
    obj = ctx.obj if isinstance(ctx.obj, dict) else {}
    config = obj.get("config")
    if isinstance(config, FiletreeConfig):
        return config
    return FiletreeConfig()


def normalize_extension(ext: str | None) -> str | None:
    """Strip a leading dot so both "txt" and ".txt" select the same files."""
    if ext is None:
        return None
    return ext[1:] if ext.startswith(".") else ext
