"""Stylesheet loader chains."""

from __future__ import annotations

from frontkit_core.compiler.models import (
    CssExtractLoader,
    CssLoader,
    CssLoaderOptions,
    LessLoader,
    LoaderChain,
    SassLoader,
    StyleLoader,
)
from frontkit_core.context import Env
from frontkit_core.schemas import StyleTransformConfig, TransformEngine


def make_style_chain(
    engine: TransformEngine,
    config: StyleTransformConfig,
    environment: Env,
) -> LoaderChain:
    """Build a stylesheet chain in execution order.

    preprocessor (less/sass) -> css-loader -> style-loader in development,
    or the extraction loader in production.
    """
    stages: list = []
    if engine is TransformEngine.less:
        stages.append(LessLoader(options=dict(config.options)))
    elif engine is TransformEngine.sass:
        stages.append(SassLoader(options=dict(config.options)))

    stages.append(
        CssLoader(
            options=CssLoaderOptions(modules=config.modules, import_loaders=len(stages)),
        )
    )
    stages.append(StyleLoader() if environment is Env.development else CssExtractLoader())
    return LoaderChain(stages=stages)
