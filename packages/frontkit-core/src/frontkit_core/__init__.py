"""frontkit-core: Build description schemas and configuration compiler.

This package provides:
- BuildDescription: Pydantic schema for build-config.json
- Compiler: Transform BuildDescription -> BundlerConfig
- Dev-server layer: serve configuration and fallback routing
"""

from __future__ import annotations

__version__ = "0.1.0"

from frontkit_core.compiler import (
    BundlerConfig,
    Compiler,
    build_chain,
    capability_name,
    merge_options,
    plan_splitting,
)
from frontkit_core.context import BuildContext, BuildMode, Env, get_build_env
from frontkit_core.devserver import (
    DevServerConfig,
    get_history_fallback_rewrites,
    get_serve_config,
    make_dev_server_config,
)

# Error types
from frontkit_core.errors import (
    ConfigurationError,
    DeprecatedOptionUsage,
    FrontkitError,
    InvalidTransformConfig,
    StaticAssetPathInvalid,
)
from frontkit_core.loader import find_build_config_file, load_build_description

# Schema models
from frontkit_core.schemas import (
    AddPolyfill,
    BuildDescription,
    OptimizationConfig,
    PageConfig,
    TransformEngine,
    TransformSpec,
)

__all__ = [
    "__version__",
    # Compiler
    "Compiler",
    "BundlerConfig",
    "build_chain",
    "merge_options",
    "capability_name",
    "plan_splitting",
    # Context
    "BuildContext",
    "BuildMode",
    "Env",
    "get_build_env",
    # Dev server
    "DevServerConfig",
    "get_serve_config",
    "make_dev_server_config",
    "get_history_fallback_rewrites",
    # Loading
    "find_build_config_file",
    "load_build_description",
    # Errors
    "FrontkitError",
    "InvalidTransformConfig",
    "StaticAssetPathInvalid",
    "DeprecatedOptionUsage",
    "ConfigurationError",
    # Schema models
    "BuildDescription",
    "PageConfig",
    "TransformSpec",
    "TransformEngine",
    "OptimizationConfig",
    "AddPolyfill",
]
