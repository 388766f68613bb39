"""frontkit validate command - Validate the build description."""

from __future__ import annotations

import click

from frontkit_cli.errors import handle_build_error
from frontkit_cli.output import success, warning
from frontkit_cli.project import collect_project_options, load_project, project_options


@click.command()
@project_options
def validate(
    root: str,
    config_file: str | None,
    env: str,
    verbose: bool,
) -> None:
    """Validate build-config.json.

    Checks the description against the schema, then builds the loader
    chain for every transform so that unknown engines and malformed
    engine options are reported before compiling. Problems that compile
    recovers from (a static path that is not a directory, the legacy
    extractVendor string) are reported as warnings.

    Examples:

        frontkit validate

        frontkit validate --config configs/build-config.yaml
    """
    options = collect_project_options(root, config_file, env, verbose)
    description, context, config_path = load_project(options)

    # Import here to avoid heavy imports at CLI startup
    from frontkit_core import DeprecatedOptionUsage, StaticAssetPathInvalid
    from frontkit_core.compiler import build_module_rule
    from frontkit_core.compiler.plugins import make_static_copy_plugin
    from frontkit_core.compiler.splitting import make_vendor_group

    try:
        for file_type, transform in description.transforms.items():
            build_module_rule(
                file_type,
                transform,
                context=context,
                targets=description.targets.browsers,
                polyfill=description.optimization.add_polyfill,
            )
    except Exception as e:
        handle_build_error(e, str(config_path))

    warnings = 0
    extract_vendor = description.optimization.extract_vendor
    if extract_vendor is not False:
        try:
            make_vendor_group(extract_vendor)
        except DeprecatedOptionUsage as e:
            warning(f"{e.option}: {e.user_message}")
            warnings += 1
    try:
        make_static_copy_plugin(description, context)
    except StaticAssetPathInvalid as e:
        warning(f"{e.user_message}; static assets will not be copied")
        warnings += 1

    summary = f"{len(description.transforms)} transforms"
    if warnings:
        summary += f", {warnings} warnings"
    success(f"Build description valid ({summary})")
