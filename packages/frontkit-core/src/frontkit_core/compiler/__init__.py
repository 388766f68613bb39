"""Compiler module for frontkit.

This module exports the Compiler class, its building blocks and output models:
- Compiler: BuildDescription -> BundlerConfig
- build_chain / build_module_rule: per-file-type loader chains
- merge_options / capability_name: idempotent capability merging
- plan_splitting: cache groups and base chunks
- assemble_plugins: plugin list
- BundlerConfig and the loader/plugin/cache-group models
"""

from __future__ import annotations

from frontkit_core.compiler.babel import babel_injections, make_babel_loader
from frontkit_core.compiler.capabilities import (
    InjectPosition,
    Injection,
    capability_name,
    includes_capability,
    merge_options,
)
from frontkit_core.compiler.chain_builder import (
    UI_FRAMEWORK_FILE_TYPES,
    build_chain,
    build_module_rule,
)
from frontkit_core.compiler.compiler import Compiler
from frontkit_core.compiler.models import (
    BabelLoader,
    BundleAnalyzerPlugin,
    BundlerConfig,
    CacheGroup,
    CopyPlugin,
    CssExtractLoader,
    CssLoader,
    DefinePlugin,
    HotReloadPlugin,
    HtmlPlugin,
    LessLoader,
    LoaderChain,
    MiniCssExtractPlugin,
    ModuleRule,
    SassLoader,
    StyleLoader,
    SwcLoader,
    TsLoader,
)
from frontkit_core.compiler.plugins import assemble_plugins
from frontkit_core.compiler.splitting import (
    COMMON_CHUNK,
    VENDOR_CHUNK,
    SplittingPlan,
    plan_splitting,
)
from frontkit_core.compiler.swc import make_swc_loader
from frontkit_core.compiler.typescript import TS_TRANSPILE_ONLY_WARNING, make_ts_loader

__all__: list[str] = [
    # Compiler class
    "Compiler",
    # Transform chains
    "build_chain",
    "build_module_rule",
    "UI_FRAMEWORK_FILE_TYPES",
    "make_ts_loader",
    "make_babel_loader",
    "make_swc_loader",
    "babel_injections",
    "TS_TRANSPILE_ONLY_WARNING",
    # Option merging
    "merge_options",
    "capability_name",
    "includes_capability",
    "Injection",
    "InjectPosition",
    # Chunk splitting
    "plan_splitting",
    "SplittingPlan",
    "VENDOR_CHUNK",
    "COMMON_CHUNK",
    # Plugins
    "assemble_plugins",
    # Output models
    "BundlerConfig",
    "LoaderChain",
    "ModuleRule",
    "CacheGroup",
    "TsLoader",
    "BabelLoader",
    "SwcLoader",
    "StyleLoader",
    "CssExtractLoader",
    "CssLoader",
    "LessLoader",
    "SassLoader",
    "HtmlPlugin",
    "DefinePlugin",
    "CopyPlugin",
    "MiniCssExtractPlugin",
    "HotReloadPlugin",
    "BundleAnalyzerPlugin",
]
