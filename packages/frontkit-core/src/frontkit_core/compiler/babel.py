"""Legacy transpiler stage (babel-loader) options.

Builds the capabilities babel must carry for a given environment,
polyfill policy and UI framework setting, and merges them into the
caller's babel options with merge_options().
"""

from __future__ import annotations

from typing import Any

from frontkit_core.compiler.capabilities import InjectPosition, Injection, merge_options
from frontkit_core.compiler.models import BabelLoader
from frontkit_core.context import Env
from frontkit_core.schemas import (
    AddPolyfill,
    BabelOptions,
    should_add_global_polyfill,
    should_add_runtime_polyfill,
)

PRESET_ENV = "@babel/preset-env"
PRESET_REACT = "@babel/preset-react"
PLUGIN_TRANSFORM_RUNTIME = "@babel/plugin-transform-runtime"
PLUGIN_REACT_REFRESH = "react-refresh/babel"

COREJS_OPTIONS: dict[str, Any] = {"version": 3, "proposals": False}

_PRODUCTION_ONLY = frozenset({Env.production})
_DEVELOPMENT_ONLY = frozenset({Env.development})


def preset_env_options(targets: list[str], polyfill: AddPolyfill) -> dict[str, Any]:
    """Options for @babel/preset-env.

    modules is disabled so the bundler handles module format and can
    tree-shake.
    """
    options: dict[str, Any] = {"modules": False, "targets": list(targets)}
    if should_add_global_polyfill(polyfill):
        options["useBuiltIns"] = "usage"
        options["corejs"] = dict(COREJS_OPTIONS)
    return options


def babel_injections(
    targets: list[str],
    polyfill: AddPolyfill,
    environment: Env,
    with_react: bool = False,
) -> list[Injection]:
    """Capabilities babel must carry.

    Args:
        targets: Browser queries for preset-env.
        polyfill: Polyfill policy.
        environment: Build environment.
        with_react: UI framework support.

    Returns:
        Injections in declaration order. Development builds skip
        preset-env and transform-runtime entirely.
    """
    injections = [
        Injection(
            group="presets",
            name=PRESET_ENV,
            options=preset_env_options(targets, polyfill),
            position=InjectPosition.prepend,
            environments=_PRODUCTION_ONLY,
        ),
    ]
    if should_add_runtime_polyfill(polyfill):
        injections.append(
            Injection(
                group="plugins",
                name=PLUGIN_TRANSFORM_RUNTIME,
                options={"corejs": dict(COREJS_OPTIONS)},
                position=InjectPosition.prepend,
                environments=_PRODUCTION_ONLY,
            )
        )
    if with_react:
        injections.append(
            Injection(
                group="presets",
                name=PRESET_REACT,
                options={"development": environment is Env.development},
                position=InjectPosition.append,
            )
        )
        injections.append(
            Injection(
                group="plugins",
                name=PLUGIN_REACT_REFRESH,
                position=InjectPosition.append,
                environments=_DEVELOPMENT_ONLY,
            )
        )
    return injections


def make_babel_loader(
    options: BabelOptions,
    targets: list[str],
    polyfill: AddPolyfill,
    environment: Env,
    with_react: bool = False,
) -> BabelLoader:
    """Build the babel-loader stage from the caller's babel options.

    Raises:
        ValueError: If a caller preset or plugin entry is malformed.
    """
    injections = babel_injections(targets, polyfill, environment, with_react)
    return BabelLoader(options=merge_options(options, injections, environment))
