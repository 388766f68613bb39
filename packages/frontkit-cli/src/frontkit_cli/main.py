"""CLI entry point for frontkit.

Commands are registered by import path and loaded on first use, so
`frontkit --help` never imports frontkit_core.
"""

from __future__ import annotations

import importlib
from typing import Any

import click
import rich_click as rclick

from frontkit_cli import __version__
from frontkit_cli.output import set_no_color

rclick.rich_click.TEXT_MARKUP = "markdown"
rclick.rich_click.SHOW_ARGUMENTS = True
rclick.rich_click.GROUP_ARGUMENTS_OPTIONS = True

# Command name -> "module.attribute" of the click command
LAZY_COMMANDS = {
    "compile": "frontkit_cli.commands.compile.compile_cmd",
    "serve-config": "frontkit_cli.commands.serve_config.serve_config",
    "validate": "frontkit_cli.commands.validate.validate",
}


def _import_command(target: str) -> click.Command:
    module_name, attr_name = target.rsplit(".", 1)
    command = getattr(importlib.import_module(module_name), attr_name)
    if not isinstance(command, click.Command):
        raise TypeError(f"{target} is not a click command")
    return command


class LazyGroup(rclick.RichGroup):
    """Rich group whose subcommands are imported on first lookup."""

    def __init__(self, *args: Any, lazy_subcommands: dict[str, str] | None = None, **kwargs: Any):
        super().__init__(*args, **kwargs)
        self.lazy_subcommands = dict(lazy_subcommands or {})

    def list_commands(self, ctx: click.Context) -> list[str]:
        return sorted({*super().list_commands(ctx), *self.lazy_subcommands})

    def get_command(self, ctx: click.Context, cmd_name: str) -> click.Command | None:
        target = self.lazy_subcommands.get(cmd_name)
        if target is None:
            return super().get_command(ctx, cmd_name)  # type: ignore[arg-type]
        return _import_command(target)


@click.command(cls=LazyGroup, lazy_subcommands=LAZY_COMMANDS)
@click.version_option(version=__version__, prog_name="frontkit")
@click.option(
    "--no-color",
    is_flag=True,
    default=False,
    help="Disable colored output.",
    is_eager=True,
    expose_value=False,
    callback=lambda ctx, param, value: set_no_color(value) if value else None,
)
def cli() -> None:
    """frontkit - Bundler configuration compiler.

    Turn build-config.json into a complete bundler configuration.

    - `frontkit validate` - Check the build description and report warnings
    - `frontkit compile` - Emit the bundler configuration (`--mode analyze` for a report)
    - `frontkit serve-config` - Emit bundler and dev-server settings for local serving
    """


if __name__ == "__main__":
    cli()
