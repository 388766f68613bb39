"""Unit tests for frontkit_cli.main module."""

from __future__ import annotations

import click
import pytest
from click.testing import CliRunner

from frontkit_cli import __version__
from frontkit_cli.main import LAZY_COMMANDS, _import_command, cli


class TestCLIHelp:
    """Tests for CLI help output."""

    def test_help_shows_options(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--help"])

        assert result.exit_code == 0
        assert "--version" in result.output
        assert "--no-color" in result.output

    def test_help_shows_all_commands(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--help"])

        assert result.exit_code == 0
        assert "compile" in result.output
        assert "serve-config" in result.output
        assert "validate" in result.output

    def test_help_shows_description(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--help"])

        assert result.exit_code == 0
        assert "frontkit" in result.output


class TestCLIVersion:
    def test_version_output(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--version"])

        assert result.exit_code == 0
        assert "frontkit" in result.output
        assert __version__ in result.output


class TestLazyGroup:
    """Tests for lazy command loading."""

    def test_list_commands_is_sorted(self) -> None:
        ctx = click.Context(cli)
        assert cli.list_commands(ctx) == sorted(LAZY_COMMANDS)

    def test_get_command_loads_module(self) -> None:
        ctx = click.Context(cli)
        command = cli.get_command(ctx, "serve-config")

        assert command is not None
        assert command.name == "serve-config"

    def test_get_command_unknown_name(self) -> None:
        assert cli.get_command(click.Context(cli), "deploy") is None

    def test_import_command_rejects_non_command(self) -> None:
        with pytest.raises(TypeError, match="not a click command"):
            _import_command("frontkit_cli.main.LAZY_COMMANDS")

    def test_unknown_command(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["deploy"])
        assert result.exit_code != 0
