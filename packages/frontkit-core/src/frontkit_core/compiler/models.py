"""Compiler output models for frontkit.

This module defines the output contract produced by the Compiler:
- LoaderSpec: tagged union of the known loader kinds, each with typed options
- LoaderChain: loaders in execution order
- ModuleRule: one module rule per declared file type
- CacheGroup: chunk-splitting rule
- Plugin: tagged union of the known plugin kinds
- BundlerConfig: the complete, frozen bundler configuration

Contract Rules:
- Models are immutable (frozen=True)
- Unknown fields are rejected (extra="forbid")
- Field names are snake_case in Python and camelCase when dumped
  with to_bundler_dict()
"""

from __future__ import annotations

import re
from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from frontkit_core.schemas import BabelOptions

_CONFIG = ConfigDict(
    frozen=True,
    extra="forbid",
    alias_generator=to_camel,
    populate_by_name=True,
)


# ---------------------------------------------------------------------------
# Loaders
# ---------------------------------------------------------------------------


class TsLoaderOptions(BaseModel):
    """ts-loader options.

    Attributes:
        transpile_only: Emit without type checking.
        compiler_options: tsconfig compilerOptions overrides.
        allow_ts_in_node_modules: Compile linked .ts sources under node_modules.
        compiler: typescript package name or project-local path.
    """

    model_config = _CONFIG

    transpile_only: bool
    compiler_options: dict[str, str]
    allow_ts_in_node_modules: bool = True
    compiler: str = "typescript"


class TsLoader(BaseModel):
    model_config = _CONFIG

    loader: Literal["ts-loader"] = "ts-loader"
    options: TsLoaderOptions


class BabelLoader(BaseModel):
    model_config = _CONFIG

    loader: Literal["babel-loader"] = "babel-loader"
    options: BabelOptions


class SwcParserOptions(BaseModel):
    model_config = _CONFIG

    syntax: Literal["typescript", "ecmascript"]
    jsx: bool = False
    tsx: bool = False
    dynamic_import: bool = True
    decorators: bool = True


class SwcReactOptions(BaseModel):
    model_config = _CONFIG

    development: bool
    refresh: bool


class SwcTransformOptions(BaseModel):
    model_config = _CONFIG

    legacy_decorator: bool = True
    decorator_metadata: bool = True
    react: SwcReactOptions | None = None


class SwcJscOptions(BaseModel):
    model_config = _CONFIG

    parser: SwcParserOptions
    transform: SwcTransformOptions = Field(default_factory=SwcTransformOptions)


class SwcEnvOptions(BaseModel):
    model_config = _CONFIG

    targets: list[str]
    mode: Literal["usage"] | None = None
    core_js: str | None = None


class SwcLoaderOptions(BaseModel):
    model_config = _CONFIG

    jsc: SwcJscOptions
    env: SwcEnvOptions


class SwcLoader(BaseModel):
    model_config = _CONFIG

    loader: Literal["swc-loader"] = "swc-loader"
    options: SwcLoaderOptions


class StyleLoader(BaseModel):
    """Injects stylesheets through <style> tags (development)."""

    model_config = _CONFIG

    loader: Literal["style-loader"] = "style-loader"


class CssExtractLoader(BaseModel):
    """Hands stylesheets to the extraction plugin (production)."""

    model_config = _CONFIG

    loader: Literal["mini-css-extract-loader"] = "mini-css-extract-loader"


class CssLoaderOptions(BaseModel):
    model_config = _CONFIG

    modules: bool = False
    import_loaders: int = 0


class CssLoader(BaseModel):
    model_config = _CONFIG

    loader: Literal["css-loader"] = "css-loader"
    options: CssLoaderOptions = Field(default_factory=CssLoaderOptions)


class LessLoader(BaseModel):
    model_config = _CONFIG

    loader: Literal["less-loader"] = "less-loader"
    options: dict[str, Any] = Field(default_factory=dict)


class SassLoader(BaseModel):
    model_config = _CONFIG

    loader: Literal["sass-loader"] = "sass-loader"
    options: dict[str, Any] = Field(default_factory=dict)


LoaderSpec = Annotated[
    Union[
        TsLoader,
        BabelLoader,
        SwcLoader,
        StyleLoader,
        CssExtractLoader,
        CssLoader,
        LessLoader,
        SassLoader,
    ],
    Field(discriminator="loader"),
]


class LoaderChain(BaseModel):
    """Loaders for one file type, in execution order.

    The type-compilation loader always precedes the syntax-downgrade loader.
    The bundler applies a rule's `use` list right to left, so
    ModuleRule.from_chain() stores the reversed sequence.
    """

    model_config = _CONFIG

    stages: list[LoaderSpec] = Field(default_factory=list)

    @property
    def names(self) -> list[str]:
        return [stage.loader for stage in self.stages]

    @property
    def transpile_only(self) -> bool:
        """True if the chain's type compiler skips type checking."""
        return any(
            isinstance(stage, TsLoader) and stage.options.transpile_only for stage in self.stages
        )


class ModuleRule(BaseModel):
    """Module rule for one file type.

    Attributes:
        test: Regex source matching the file type.
        use: Loaders in bundler order (last one runs first).
        type: Asset module type for asset engines.
    """

    model_config = _CONFIG

    test: str
    use: list[LoaderSpec] = Field(default_factory=list)
    type: str | None = None

    @classmethod
    def from_chain(cls, test: str, chain: LoaderChain) -> ModuleRule:
        return cls(test=test, use=list(reversed(chain.stages)))

    @property
    def chain(self) -> LoaderChain:
        return LoaderChain(stages=list(reversed(self.use)))


# ---------------------------------------------------------------------------
# Chunk splitting
# ---------------------------------------------------------------------------


class CacheGroup(BaseModel):
    """Chunk-splitting cache group.

    Attributes:
        name: Output chunk name.
        test: Regex source matched against module paths (None matches all).
        chunks: Which chunks are eligible ("all").
        priority: Group priority when a module matches several groups.
        min_size: Minimum size in bytes before extraction.
        min_chunks: Minimum number of chunks sharing the module.
    """

    model_config = _CONFIG

    name: str
    test: str | None = None
    chunks: Literal["all", "async", "initial"] = "all"
    priority: int = 0
    min_size: int = 0
    min_chunks: int = 1

    def matches(self, module_path: str, chunk_count: int = 1) -> bool:
        """Evaluate the group's predicate for one module.

        Args:
            module_path: Module path, with either path separator.
            chunk_count: Number of chunks referencing the module.

        Example:
            >>> group = CacheGroup(name="vendor", test=r"(^|[\\/])node_modules[\\/]")
            >>> group.matches("node_modules/react/index.js")
            True
        """
        if chunk_count < self.min_chunks:
            return False
        if self.test is None:
            return True
        return re.search(self.test, module_path) is not None


class SplitChunksConfig(BaseModel):
    model_config = _CONFIG

    cache_groups: dict[str, CacheGroup] = Field(default_factory=dict)


class OptimizationBlock(BaseModel):
    """Bundler optimization block.

    "..." keeps the bundler's default minimizer in place.
    """

    model_config = _CONFIG

    minimizer: list[str] = Field(default_factory=lambda: ["...", "css-minimizer"])
    split_chunks: SplitChunksConfig = Field(default_factory=SplitChunksConfig)


# ---------------------------------------------------------------------------
# Plugins
# ---------------------------------------------------------------------------


class HtmlPlugin(BaseModel):
    """Emits one HTML page including its chunks in the given order."""

    model_config = _CONFIG

    plugin: Literal["html"] = "html"
    template: str
    filename: str
    chunks: list[str]
    chunks_sort_mode: Literal["manual"] = "manual"


class DefinePlugin(BaseModel):
    """Compile-time constants; values are already JSON-serialized source text."""

    model_config = _CONFIG

    plugin: Literal["define"] = "define"
    definitions: dict[str, str]


class CopyPattern(BaseModel):
    model_config = _CONFIG

    from_: str = Field(..., alias="from")
    to: str
    to_type: Literal["dir", "file", "template"] = "dir"


class CopyPlugin(BaseModel):
    model_config = _CONFIG

    plugin: Literal["copy"] = "copy"
    patterns: list[CopyPattern]


class MiniCssExtractPlugin(BaseModel):
    model_config = _CONFIG

    plugin: Literal["mini-css-extract"] = "mini-css-extract"
    filename: str = "static/[name]-[contenthash].css"
    chunk_filename: str = "static/[id]-[chunkhash].css"


class HotReloadPlugin(BaseModel):
    """UI hot reload (react refresh). Serve mode only."""

    model_config = _CONFIG

    plugin: Literal["react-refresh"] = "react-refresh"


class BundleAnalyzerPlugin(BaseModel):
    """Static bundle analysis report. Analyze mode only."""

    model_config = _CONFIG

    plugin: Literal["bundle-analyzer"] = "bundle-analyzer"
    analyzer_mode: Literal["static"] = "static"
    report_filename: str = "report.html"
    open_analyzer: bool = False


Plugin = Annotated[
    Union[
        HtmlPlugin,
        DefinePlugin,
        CopyPlugin,
        MiniCssExtractPlugin,
        HotReloadPlugin,
        BundleAnalyzerPlugin,
    ],
    Field(discriminator="plugin"),
]


# ---------------------------------------------------------------------------
# Bundler configuration
# ---------------------------------------------------------------------------


class OutputConfig(BaseModel):
    model_config = _CONFIG

    path: str
    public_path: str
    filename: str = "static/[name]-[contenthash].js"
    chunk_filename: str = "static/[id]-[chunkhash].js"
    asset_module_filename: str = "static/[name]-[contenthash][ext]"


class ResolveConfig(BaseModel):
    model_config = _CONFIG

    extensions: list[str]
    modules: list[str]


class ResolveLoaderConfig(BaseModel):
    model_config = _CONFIG

    modules: list[str] = Field(default_factory=lambda: ["node_modules"])


class ModuleConfig(BaseModel):
    model_config = _CONFIG

    rules: list[ModuleRule] = Field(default_factory=list)


class BundlerConfig(BaseModel):
    """Immutable, self-contained bundler configuration.

    The only supported change after compilation is appending one plugin
    through with_plugin(), which the dev-server layer uses for hot reload.

    Example:
        >>> config = Compiler(context).compile(description)
        >>> json.dumps(config.to_bundler_dict())
    """

    model_config = _CONFIG

    mode: Literal["development", "production"]
    context: str
    entry: dict[str, str]
    output: OutputConfig
    resolve: ResolveConfig
    resolve_loader: ResolveLoaderConfig = Field(default_factory=ResolveLoaderConfig)
    module: ModuleConfig = Field(default_factory=ModuleConfig)
    optimization: OptimizationBlock = Field(default_factory=OptimizationBlock)
    plugins: list[Plugin] = Field(default_factory=list)
    ignore_warnings: list[str] = Field(default_factory=list)

    @property
    def cache_groups(self) -> dict[str, CacheGroup]:
        return self.optimization.split_chunks.cache_groups

    def with_plugin(self, plugin: Plugin) -> BundlerConfig:
        """Return a copy with one plugin appended."""
        return self.model_copy(update={"plugins": [*self.plugins, plugin]})

    def to_bundler_dict(self) -> dict[str, Any]:
        """Dump to JSON-compatible data with bundler (camelCase) keys."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)
