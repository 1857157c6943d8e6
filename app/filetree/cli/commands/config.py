"""Configuration commands.

Provides commands to show the effective configuration and write a
default config file.
"""

from typing import Annotated

import typer
from rich.markup import escape

from filetree.cli.context import get_config
from filetree.core.config import ConfigError, FiletreeConfig, save_config
from filetree.core.paths import get_config_path
from filetree.utils.formatting import console, print_error, print_info, print_success

app = typer.Typer(
    help="Show or initialize the filetree configuration.",
    no_args_is_help=True,
)


@app.command()
def show(ctx: typer.Context) -> None:
    """Print the effective configuration as JSON."""
    config = get_config(ctx)
    console.print_json(config.model_dump_json())


@app.command()
def init(
    ctx: typer.Context,
    force: Annotated[
        bool,
        typer.Option("--force", help="Overwrite an existing config file."),
    ] = False,
) -> None:
    """Write a config file with default settings."""
    obj = ctx.obj if isinstance(ctx.obj, dict) else {}
    target = obj.get("config_path") or get_config_path()

    if target.exists() and not force:
        print_info(f"Config already exists: {escape(str(target))} (use --force to overwrite)")
        return

    try:
        written = save_config(FiletreeConfig(), target)
    except (ConfigError, RuntimeError) as e:
        print_error(escape(str(e)))
        raise typer.Exit(code=1) from e

    print_success(f"Wrote default config to {escape(str(written))}")
