"""Plugin assembler.

Builds the ordered plugin list for a build: HTML pages, constants, static
asset copying, stylesheet extraction and, in analyze mode, the bundle
analyzer. The hot-reload plugin is appended afterwards by the dev-server
layer (see frontkit_core.devserver).
"""

from __future__ import annotations

import json
from collections.abc import Sequence

import structlog

from frontkit_core.compiler.models import (
    BundleAnalyzerPlugin,
    CopyPattern,
    CopyPlugin,
    DefinePlugin,
    HtmlPlugin,
    MiniCssExtractPlugin,
    Plugin,
)
from frontkit_core.context import BuildContext, BuildMode
from frontkit_core.errors import StaticAssetPathInvalid
from frontkit_core.schemas import BuildDescription
from frontkit_core.urls import get_page_filename

logger = structlog.get_logger(__name__)

NODE_ENV_KEY = "process.env.NODE_ENV"
STATIC_OUTPUT_DIR = "static"


def make_html_plugins(
    description: BuildDescription,
    base_chunks: Sequence[str],
    context: BuildContext,
) -> list[HtmlPlugin]:
    """One HTML plugin per page, chunks = base chunks + page entries.

    Chunk order is kept as given (manual sort mode): base chunks must load
    before the page's own entries.
    """
    return [
        HtmlPlugin(
            template=str(context.abs(page.template)),
            filename=get_page_filename(name),
            chunks=[*base_chunks, *page.entries],
            chunks_sort_mode="manual",
        )
        for name, page in description.pages.items()
    ]


def make_define_plugin(description: BuildDescription, context: BuildContext) -> DefinePlugin:
    """Constants plugin; every value is JSON-serialized for textual substitution."""
    values = {NODE_ENV_KEY: context.env.value, **description.env_variables}
    return DefinePlugin(definitions={key: json.dumps(value) for key, value in values.items()})


def make_static_copy_plugin(
    description: BuildDescription,
    context: BuildContext,
) -> CopyPlugin | None:
    """Copy plugin for the static directory.

    Returns None when the directory does not exist.

    Raises:
        StaticAssetPathInvalid: If the path exists but is not a directory.
    """
    static_path = context.abs(description.static_dir)
    if not static_path.exists():
        return None
    if not static_path.is_dir():
        raise StaticAssetPathInvalid(str(static_path))

    return CopyPlugin(
        patterns=[CopyPattern(from_=str(static_path), to=STATIC_OUTPUT_DIR, to_type="dir")]
    )


def assemble_plugins(
    description: BuildDescription,
    base_chunks: Sequence[str],
    *,
    context: BuildContext,
) -> list[Plugin]:
    """Assemble the plugin list.

    Args:
        description: Build description.
        base_chunks: Finalized base chunk names from the splitting plan.
        context: Build context.

    Returns:
        Plugins in order: HTML pages, constants, static copy (optional),
        stylesheet extraction, bundle analyzer (analyze mode).
    """
    plugins: list[Plugin] = [*make_html_plugins(description, base_chunks, context)]
    plugins.append(make_define_plugin(description, context))

    try:
        copy_plugin = make_static_copy_plugin(description, context)
    except StaticAssetPathInvalid as e:
        logger.warning("static_dir_invalid", path=e.path, message=e.user_message)
        copy_plugin = None
    if copy_plugin is not None:
        plugins.append(copy_plugin)

    plugins.append(MiniCssExtractPlugin())

    if context.mode is BuildMode.analyze:
        plugins.append(BundleAnalyzerPlugin())

    return plugins
