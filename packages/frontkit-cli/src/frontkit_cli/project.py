"""Project options shared by frontkit commands.

Every command takes the same project selection options, each with an
environment variable fallback:

- --root / BUILD_ROOT: project root (default: current directory)
- --config / BUILD_CONFIG_FILE: build description file
- --env / BUILD_ENV: development or production
- --verbose: debug logging
"""

from __future__ import annotations

import json
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, Any, TypeVar

import click

from frontkit_cli.errors import handle_build_error
from frontkit_cli.output import configure_logging, success

if TYPE_CHECKING:
    from frontkit_core import BuildContext, BuildDescription

F = TypeVar("F", bound=Callable[..., Any])


@dataclass(frozen=True)
class ProjectOptions:
    root: Path
    config_file: str | None
    env: str
    verbose: bool


def project_options(func: F) -> F:
    """Add the shared project options (root, config_file, env, verbose) to a command."""
    options = [
        click.option(
            "-r",
            "--root",
            "root",
            type=click.Path(file_okay=False),
            envvar="BUILD_ROOT",
            default=".",
            help="Root path of the project [default: .]",
        ),
        click.option(
            "-c",
            "--config",
            "config_file",
            type=str,
            envvar="BUILD_CONFIG_FILE",
            default=None,
            help="Build description file, used instead of build-config.json under the root",
        ),
        click.option(
            "-e",
            "--env",
            "env",
            type=click.Choice(["development", "production"]),
            envvar="BUILD_ENV",
            default="development",
            help="Build environment [default: development]",
        ),
        click.option(
            "--verbose",
            is_flag=True,
            default=False,
            help="Output more info.",
        ),
    ]
    for option in reversed(options):
        func = option(func)
    return func


def collect_project_options(
    root: str,
    config_file: str | None,
    env: str,
    verbose: bool,
) -> ProjectOptions:
    """Normalize the shared options and configure logging."""
    configure_logging(verbose)
    return ProjectOptions(
        root=Path(root).absolute(),
        config_file=config_file,
        env=env,
        verbose=verbose,
    )


def emit_json(data: dict[str, Any], output_path: str | None) -> None:
    """Write JSON to a file, or to stdout when no file is given.

    Raises:
        PermissionError: If the output file cannot be written.
    """
    text = json.dumps(data, indent=2)
    if output_path is None:
        click.echo(text)
        return

    path = Path(output_path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text + "\n")
    success(f"Wrote {path}")


def load_project(
    options: ProjectOptions,
    mode: str = "generate",
) -> tuple[BuildDescription, BuildContext, Path]:
    """Load the build description and build the context for a command.

    Returns:
        The description, the build context and the resolved config file.

    Raises:
        CLIError: If the build description is missing or invalid.
    """
    # Import here to avoid heavy imports at CLI startup
    from frontkit_core import (
        BuildContext,
        BuildDescription,
        BuildMode,
        find_build_config_file,
        get_build_env,
    )

    config_path: Path | None = None
    try:
        config_path = find_build_config_file(options.root, options.config_file)
        description = BuildDescription.from_file(config_path)
        context = BuildContext(
            root=options.root,
            env=get_build_env(options.env),
            mode=BuildMode(mode),
        )
    except Exception as e:
        handle_build_error(e, str(config_path) if config_path else None)

    return description, context, config_path
