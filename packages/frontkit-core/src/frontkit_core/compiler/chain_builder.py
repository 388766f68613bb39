"""Transform-chain builder.

Turns one declared transform (file type + TransformSpec) into an ordered
LoaderChain, and wraps chains into ModuleRules. The caller's TransformSpec
and its config dict are never mutated; every stage is built fresh.
"""

from __future__ import annotations

import re
from typing import TypeVar

import structlog
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from frontkit_core.compiler.babel import make_babel_loader
from frontkit_core.compiler.models import LoaderChain, ModuleRule
from frontkit_core.compiler.styles import make_style_chain
from frontkit_core.compiler.swc import make_swc_loader
from frontkit_core.compiler.typescript import make_ts_loader
from frontkit_core.context import BuildContext
from frontkit_core.errors import InvalidTransformConfig
from frontkit_core.schemas import (
    ASSET_ENGINES,
    STYLE_ENGINES,
    AddPolyfill,
    AssetTransformConfig,
    BabelTransformConfig,
    StyleTransformConfig,
    SwcTransformConfig,
    TransformEngine,
    TransformSpec,
)

logger = structlog.get_logger(__name__)

# File types whose transforms enable UI framework (JSX) support by default
UI_FRAMEWORK_FILE_TYPES = frozenset({"jsx", "tsx"})

ASSET_MODULE_TYPES: dict[TransformEngine, str] = {
    TransformEngine.file: "asset/resource",
    TransformEngine.raw: "asset/source",
}

_ConfigT = TypeVar("_ConfigT", bound=BaseModel)


def resolve_engine(file_type: str, transform: TransformSpec) -> TransformEngine:
    """Map a declared engine name to TransformEngine.

    Raises:
        InvalidTransformConfig: If the engine name is unknown.
    """
    try:
        return TransformEngine(transform.engine)
    except ValueError:
        known = ", ".join(e.value for e in TransformEngine)
        raise InvalidTransformConfig(
            file_type,
            transform.engine,
            f"unknown engine, expected one of: {known}",
        ) from None


def _parse_config(
    model: type[_ConfigT],
    file_type: str,
    transform: TransformSpec,
) -> _ConfigT:
    try:
        return model.model_validate(transform.config)
    except PydanticValidationError as e:
        issues = "; ".join(
            f"{'.'.join(str(x) for x in err['loc'])}: {err['msg']}" for err in e.errors()
        )
        raise InvalidTransformConfig(
            file_type,
            transform.engine,
            f"invalid config ({issues})",
        ) from None


def build_chain(
    file_type: str,
    transform: TransformSpec,
    *,
    context: BuildContext,
    targets: list[str],
    polyfill: AddPolyfill,
    ui_framework_enabled: bool = False,
) -> LoaderChain:
    """Build the loader chain for one file type.

    Args:
        file_type: Extension without dot (e.g. "tsx").
        transform: Declared transform.
        context: Build context (environment, project root).
        targets: Browser targets for the syntax-downgrade stage.
        polyfill: Polyfill policy for the syntax-downgrade stage.
        ui_framework_enabled: Enable JSX / UI framework support.

    Returns:
        LoaderChain in execution order. Script engines that run the type
        compiler put it first.

    Raises:
        InvalidTransformConfig: Unknown engine, malformed config, or an
            asset engine (which has no loader chain).

    Example:
        >>> chain = build_chain(
        ...     "ts",
        ...     TransformSpec(engine="ts-babel"),
        ...     context=BuildContext(root=Path("."), env=Env.production),
        ...     targets=["defaults"],
        ...     polyfill=AddPolyfill.global_,
        ... )
        >>> chain.names
        ['ts-loader', 'babel-loader']
    """
    engine = resolve_engine(file_type, transform)
    env = context.env

    if engine in (TransformEngine.ts_babel, TransformEngine.babel):
        config = _parse_config(BabelTransformConfig, file_type, transform)
        try:
            babel = make_babel_loader(
                config.babel_options, targets, polyfill, env, with_react=ui_framework_enabled
            )
        except ValueError as e:
            raise InvalidTransformConfig(file_type, transform.engine, str(e)) from None
        if engine is TransformEngine.babel:
            return LoaderChain(stages=[babel])
        return LoaderChain(stages=[make_ts_loader(config, context), babel])

    if engine in (TransformEngine.ts_swc, TransformEngine.swc):
        swc_config = _parse_config(SwcTransformConfig, file_type, transform)
        is_ts = engine is TransformEngine.ts_swc
        swc = make_swc_loader(
            targets, polyfill, env, with_react=ui_framework_enabled, is_ts_syntax=is_ts
        )
        if not is_ts:
            return LoaderChain(stages=[swc])
        return LoaderChain(stages=[make_ts_loader(swc_config, context), swc])

    if engine in STYLE_ENGINES:
        style_config = _parse_config(StyleTransformConfig, file_type, transform)
        return make_style_chain(engine, style_config, env)

    raise InvalidTransformConfig(
        file_type,
        transform.engine,
        "asset engines are compiled to asset modules, not loader chains",
    )


def file_type_test(file_type: str) -> str:
    """Regex source matching files of the given type."""
    return rf"\.{re.escape(file_type)}$"


def build_module_rule(
    file_type: str,
    transform: TransformSpec,
    *,
    context: BuildContext,
    targets: list[str],
    polyfill: AddPolyfill,
    ui_framework_enabled: bool | None = None,
) -> ModuleRule:
    """Build the module rule for one declared transform.

    Args:
        ui_framework_enabled: Override UI framework support; defaults to
            enabled for jsx/tsx file types.

    Raises:
        InvalidTransformConfig: See build_chain().
    """
    engine = resolve_engine(file_type, transform)
    test = file_type_test(file_type)

    if engine in ASSET_ENGINES:
        _parse_config(AssetTransformConfig, file_type, transform)
        return ModuleRule(test=test, type=ASSET_MODULE_TYPES[engine])

    if ui_framework_enabled is None:
        ui_framework_enabled = file_type in UI_FRAMEWORK_FILE_TYPES

    chain = build_chain(
        file_type,
        transform,
        context=context,
        targets=targets,
        polyfill=polyfill,
        ui_framework_enabled=ui_framework_enabled,
    )
    logger.debug("module_rule_built", file_type=file_type, engine=engine.value, loaders=chain.names)
    return ModuleRule.from_chain(test, chain)
