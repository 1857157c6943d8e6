"""Main CLI application entry point.

Defines the Typer application and global options.
"""

import logging
from pathlib import Path
from typing import Annotated

import typer
from rich.logging import RichHandler
from rich.markup import escape

from filetree import __version__
from filetree.cli.commands import config, directory, files
from filetree.core.config import ConfigError, load_config_or_default
from filetree.utils.formatting import err_console, print_error

# Create main Typer app
app = typer.Typer(
    name="filetree",
    help="Inspect directory trees and copy, move, read and write files.",
    no_args_is_help=True,
    rich_markup_mode="rich",
    context_settings={"help_option_names": ["-h", "--help"]},
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"filetree version {__version__}")
        raise typer.Exit()


def configure_logging(level: int) -> None:
    """Route the filetree loggers through a Rich handler on stderr."""
    handler = RichHandler(
        console=err_console,
        show_level=True,
        show_path=False,
        rich_tracebacks=True,
    )
    package_logger = logging.getLogger("filetree")
    package_logger.handlers = [handler]
    package_logger.setLevel(level)


@app.callback()
def main(
    ctx: typer.Context,
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-V",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit.",
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Enable debug logging.",
        ),
    ] = False,
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="Only log errors.",
        ),
    ] = False,
    config_path: Annotated[
        Path | None,
        typer.Option(
            "--config",
            "-c",
            help="Path to config file (default: ~/.config/filetree/config.toml).",
        ),
    ] = None,
) -> None:
    """filetree - ordered views of directory trees.

    Walk a directory into a sorted tree, filter files by extension and
    copy, move, read or write individual files.
    """
    try:
        settings = load_config_or_default(config_path)
    except ConfigError as e:
        print_error(escape(str(e)))
        raise typer.Exit(code=1) from e

    if verbose:
        level = logging.DEBUG
    elif quiet:
        level = logging.ERROR
    else:
        level = logging.getLevelName(settings.log_level)
    configure_logging(level)

    # Store options in context for subcommands
    ctx.ensure_object(dict)
    ctx.obj["config"] = settings
    ctx.obj["config_path"] = config_path


# Register commands
app.add_typer(directory.app, name="dir")
app.add_typer(files.app, name="file")
app.add_typer(config.app, name="config")


if __name__ == "__main__":
    app()
