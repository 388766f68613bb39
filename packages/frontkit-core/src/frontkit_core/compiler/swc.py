"""Native transpiler stage (swc-loader) options.

Translates the same browser targets and polyfill policy used for babel
into swc's option schema.
"""

from __future__ import annotations

from frontkit_core.compiler.models import (
    SwcEnvOptions,
    SwcJscOptions,
    SwcLoader,
    SwcLoaderOptions,
    SwcParserOptions,
    SwcReactOptions,
    SwcTransformOptions,
)
from frontkit_core.context import Env
from frontkit_core.schemas import AddPolyfill, should_add_global_polyfill

SWC_COREJS_VERSION = "3"


def make_swc_loader(
    targets: list[str],
    polyfill: AddPolyfill,
    environment: Env,
    with_react: bool = False,
    is_ts_syntax: bool = False,
) -> SwcLoader:
    """Build the swc-loader stage.

    Args:
        targets: Browser queries (swc resolves them itself).
        polyfill: Polyfill policy; global polyfill maps to usage mode.
        environment: Build environment.
        with_react: Enable JSX and the react transform.
        is_ts_syntax: Parse TypeScript rather than ECMAScript.

    Returns:
        SwcLoader. React development behavior and refresh are enabled only
        in development.
    """
    is_dev = environment is Env.development

    react: SwcReactOptions | None = None
    if with_react:
        react = SwcReactOptions(development=is_dev, refresh=is_dev)

    if should_add_global_polyfill(polyfill):
        env = SwcEnvOptions(targets=list(targets), mode="usage", core_js=SWC_COREJS_VERSION)
    else:
        env = SwcEnvOptions(targets=list(targets))

    return SwcLoader(
        options=SwcLoaderOptions(
            jsc=SwcJscOptions(
                parser=SwcParserOptions(
                    syntax="typescript" if is_ts_syntax else "ecmascript",
                    jsx=with_react and not is_ts_syntax,
                    tsx=with_react and is_ts_syntax,
                ),
                transform=SwcTransformOptions(react=react),
            ),
            env=env,
        )
    )
