"""Build description schemas for frontkit."""

from __future__ import annotations

from frontkit_core.schemas.build_description import (
    DEFAULT_BROWSERS,
    BuildDescription,
    PageConfig,
    TargetsConfig,
)
from frontkit_core.schemas.optimization import (
    AddPolyfill,
    OptimizationConfig,
    should_add_global_polyfill,
    should_add_runtime_polyfill,
)
from frontkit_core.schemas.transforms import (
    ASSET_ENGINES,
    SCRIPT_ENGINES,
    STYLE_ENGINES,
    AssetTransformConfig,
    BabelOptions,
    BabelTransformConfig,
    StyleTransformConfig,
    SwcTransformConfig,
    TransformEngine,
    TransformSpec,
    TsTransformConfig,
)

__all__: list[str] = [
    # Root model
    "BuildDescription",
    "PageConfig",
    "TargetsConfig",
    "DEFAULT_BROWSERS",
    # Optimization
    "AddPolyfill",
    "OptimizationConfig",
    "should_add_global_polyfill",
    "should_add_runtime_polyfill",
    # Transforms
    "TransformEngine",
    "TransformSpec",
    "SCRIPT_ENGINES",
    "STYLE_ENGINES",
    "ASSET_ENGINES",
    "BabelOptions",
    "TsTransformConfig",
    "BabelTransformConfig",
    "SwcTransformConfig",
    "StyleTransformConfig",
    "AssetTransformConfig",
]
