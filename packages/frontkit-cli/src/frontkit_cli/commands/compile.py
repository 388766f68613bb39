"""frontkit compile command - Emit the bundler configuration."""

from __future__ import annotations

import click

from frontkit_cli.errors import handle_build_error
from frontkit_cli.project import (
    collect_project_options,
    emit_json,
    load_project,
    project_options,
)


@click.command("compile")
@project_options
@click.option(
    "-m",
    "--mode",
    "mode",
    type=click.Choice(["generate", "analyze"]),
    default="generate",
    help="Build mode; analyze adds the bundle analyzer [default: generate]",
)
@click.option(
    "-o",
    "--output",
    "output_path",
    type=click.Path(dir_okay=False),
    default=None,
    help="Write the configuration to a file instead of stdout",
)
def compile_cmd(
    root: str,
    config_file: str | None,
    env: str,
    verbose: bool,
    mode: str,
    output_path: str | None,
) -> None:
    """Compile build-config.json into a bundler configuration.

    Examples:

        frontkit compile

        frontkit compile --env production --output dist/bundler-config.json

        frontkit compile --mode analyze
    """
    options = collect_project_options(root, config_file, env, verbose)
    description, context, config_path = load_project(options, mode)

    # Import here to avoid heavy imports at CLI startup
    from frontkit_core import Compiler

    try:
        config = Compiler(context).compile(description)
    except Exception as e:
        handle_build_error(e, str(config_path))

    emit_json(config.to_bundler_dict(), output_path)
