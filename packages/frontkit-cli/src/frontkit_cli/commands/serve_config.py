"""frontkit serve-config command - Emit the dev-server configuration."""

from __future__ import annotations

import click

from frontkit_cli.errors import handle_build_error
from frontkit_cli.project import (
    collect_project_options,
    emit_json,
    load_project,
    project_options,
)


@click.command("serve-config")
@project_options
@click.option(
    "-o",
    "--output",
    "output_path",
    type=click.Path(dir_okay=False),
    default=None,
    help="Write the configuration to a file instead of stdout",
)
def serve_config(
    root: str,
    config_file: str | None,
    env: str,
    verbose: bool,
    output_path: str | None,
) -> None:
    """Emit the bundler and dev-server configuration for local serving.

    The bundler configuration carries the hot-reload plugin; the dev-server
    block holds history fallback rewrites and proxy rules.

    Examples:

        frontkit serve-config

        frontkit serve-config --output .frontkit/serve.json
    """
    options = collect_project_options(root, config_file, env, verbose)
    description, context, config_path = load_project(options, mode="serve")

    # Import here to avoid heavy imports at CLI startup
    from frontkit_core import get_serve_config, make_dev_server_config

    try:
        bundler = get_serve_config(description, context)
        dev_server = make_dev_server_config(description)
    except Exception as e:
        handle_build_error(e, str(config_path))

    emit_json(
        {
            "bundler": bundler.to_bundler_dict(),
            "devServer": dev_server.model_dump(
                mode="json", by_alias=True, exclude_none=True
            ),
        },
        output_path,
    )
