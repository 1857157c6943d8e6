"""Unit tests for the main CLI callback and config commands."""

import json
import logging
from pathlib import Path
from unittest.mock import patch

from filetree import __version__
from filetree.cli.context import get_config
from filetree.cli.main import app
from filetree.core.config import FiletreeConfig
from typer.testing import CliRunner

runner = CliRunner()


class TestMainCallback:
    """Tests for global options."""

    def test_version(self) -> None:
        """--version prints the version and exits."""
        result = runner.invoke(app, ["--version"])

        assert result.exit_code == 0
        assert __version__ in result.stdout

    def test_no_args_shows_help(self) -> None:
        """Running without arguments shows help."""
        result = runner.invoke(app, [])

        assert "Usage" in result.output

    def test_verbose_enables_debug(self) -> None:
        """--verbose sets the package logger to DEBUG."""
        result = runner.invoke(app, ["--verbose", "config", "show"])

        assert result.exit_code == 0
        assert logging.getLogger("filetree").level == logging.DEBUG

    def test_quiet_sets_error_level(self) -> None:
        """--quiet sets the package logger to ERROR."""
        result = runner.invoke(app, ["--quiet", "config", "show"])

        assert result.exit_code == 0
        assert logging.getLogger("filetree").level == logging.ERROR

    def test_context_carries_config_only(self) -> None:
        """Subcommands receive the loaded config and its path; log flags stay in logging."""
        with patch("filetree.cli.commands.config.get_config", wraps=get_config) as mock_get:
            result = runner.invoke(app, ["--verbose", "config", "show"])

        assert result.exit_code == 0
        ctx = mock_get.call_args.args[0]
        assert set(ctx.obj) == {"config", "config_path"}
        assert isinstance(ctx.obj["config"], FiletreeConfig)

    def test_broken_config_exits(self, tmp_path: Path) -> None:
        """An unparseable config file aborts with an error."""
        config_path = tmp_path / "config.toml"
        config_path.write_text("[[[")

        result = runner.invoke(app, ["--config", str(config_path), "config", "show"])

        assert result.exit_code == 1


class TestConfigCommands:
    """Tests for filetree config show and init."""

    def test_show_defaults(self, tmp_path: Path) -> None:
        """show prints the effective configuration as JSON."""
        result = runner.invoke(
            app, ["--config", str(tmp_path / "absent.toml"), "config", "show"]
        )

        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data["sync_writes"] is True

    def test_init_writes_file(self, tmp_path: Path) -> None:
        """init writes a default config file."""
        config_path = tmp_path / "config.toml"

        result = runner.invoke(app, ["--config", str(config_path), "config", "init"])

        assert result.exit_code == 0
        assert config_path.exists()

    def test_init_keeps_existing(self, tmp_path: Path) -> None:
        """init without --force leaves an existing file alone."""
        config_path = tmp_path / "config.toml"
        config_path.write_text("show_hidden = false\n")

        result = runner.invoke(app, ["--config", str(config_path), "config", "init"])

        assert result.exit_code == 0
        assert config_path.read_text() == "show_hidden = false\n"
        assert "already exists" in result.stdout
