"""Type-compilation stage (ts-loader) options."""

from __future__ import annotations

from frontkit_core.compiler.models import TsLoader, TsLoaderOptions
from frontkit_core.context import BuildContext
from frontkit_core.schemas import TsTransformConfig

# babel/swc own syntax downgrading and polyfills; ts only lowers to ES2020.
# module follows target so module format is left to the bundler.
TS_COMPILER_OPTIONS: dict[str, str] = {
    "target": "ES2020",
    "module": "ES2020",
    "moduleResolution": "Node",
}

# Emitted by the bundler for re-exported types when ts-loader runs transpile-only
TS_TRANSPILE_ONLY_WARNING = r"export .* was not found in"


def make_ts_loader(config: TsTransformConfig, context: BuildContext) -> TsLoader:
    """Build the ts-loader stage.

    Args:
        config: Validated per-engine config.
        context: Build context (environment and project root).

    Returns:
        TsLoader with transpile-only enabled only for development builds
        that keep the transpileOnlyWhenDev default.
    """
    if config.use_project_typescript:
        compiler = str(context.abs("node_modules", "typescript"))
    else:
        compiler = "typescript"

    return TsLoader(
        options=TsLoaderOptions(
            transpile_only=context.is_dev and config.transpile_only_when_dev,
            compiler_options=dict(TS_COMPILER_OPTIONS),
            allow_ts_in_node_modules=True,
            compiler=compiler,
        )
    )
