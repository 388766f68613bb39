"""Transform configuration models for frontkit.

This module defines TransformSpec, the per-file-type transform declaration
of a build description, and the typed per-engine config models that the
chain builder validates TransformSpec.config into.

The engine is kept as a plain string on TransformSpec so that an unknown
engine is reported by the chain builder as InvalidTransformConfig rather
than by schema validation.
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class TransformEngine(str, Enum):
    """Supported transform engines.

    ts_babel and ts_swc run the TypeScript compiler first and hand its
    ES2020 output to a syntax-downgrading transpiler.
    """

    ts_babel = "ts-babel"
    ts_swc = "ts-swc"
    babel = "babel"
    swc = "swc"
    css = "css"
    less = "less"
    sass = "sass"
    file = "file"
    raw = "raw"


SCRIPT_ENGINES = frozenset(
    {TransformEngine.ts_babel, TransformEngine.ts_swc, TransformEngine.babel, TransformEngine.swc}
)
STYLE_ENGINES = frozenset({TransformEngine.css, TransformEngine.less, TransformEngine.sass})
ASSET_ENGINES = frozenset({TransformEngine.file, TransformEngine.raw})


class TransformSpec(BaseModel):
    """Transform declaration for one file type.

    Attributes:
        engine: Engine name (see TransformEngine).
        config: Opaque per-engine options, validated by the chain builder.

    Example:
        >>> spec = TransformSpec(engine="ts-babel", config={"transpileOnlyWhenDev": False})
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    engine: str = Field(
        ...,
        min_length=1,
        description="Transform engine name",
    )
    config: dict[str, Any] = Field(
        default_factory=dict,
        description="Per-engine options",
    )


class BabelOptions(BaseModel):
    """babel-loader options (same shape as babel options).

    Presets and plugins are either a name or a [name, options, ...] list.
    Unknown babel keys are passed through untouched.
    """

    model_config = ConfigDict(
        frozen=True,
        extra="allow",
        alias_generator=to_camel,
        populate_by_name=True,
    )

    presets: list[str | list[Any]] = Field(default_factory=list)
    plugins: list[str | list[Any]] = Field(default_factory=list)
    source_type: str | None = Field(
        default=None,
        description="Expected module type; defaults to 'unambiguous'",
    )


class TsTransformConfig(BaseModel):
    """Options shared by engines that run the TypeScript compiler.

    Attributes:
        transpile_only_when_dev: Skip type checking in development builds.
        use_project_typescript: Use the project's own typescript package.
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        alias_generator=to_camel,
        populate_by_name=True,
    )

    transpile_only_when_dev: bool = True
    use_project_typescript: bool = Field(default=False, alias="useProjectTypeScript")


class BabelTransformConfig(TsTransformConfig):
    """Config for the ts-babel and babel engines."""

    babel_options: BabelOptions = Field(default_factory=BabelOptions)


class SwcTransformConfig(TsTransformConfig):
    """Config for the ts-swc and swc engines."""


class StyleTransformConfig(BaseModel):
    """Config for stylesheet engines.

    Attributes:
        modules: Enable CSS modules in css-loader.
        options: Options passed to the preprocessor loader (less/sass).
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        alias_generator=to_camel,
        populate_by_name=True,
    )

    modules: bool = False
    options: dict[str, Any] = Field(default_factory=dict)


class AssetTransformConfig(BaseModel):
    """Config for asset engines (no options)."""

    model_config = ConfigDict(frozen=True, extra="forbid")
