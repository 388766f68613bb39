"""Dev-server layer for frontkit.

Consumes a compiled BundlerConfig for serving. It does not run a server;
it produces:
- the serve configuration: the compiled config plus exactly one hot-reload plugin
- the dev-server options: proxy table and single-page-app fallback routing
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from frontkit_core.compiler import BundlerConfig, Compiler, HotReloadPlugin
from frontkit_core.context import BuildContext, BuildMode
from frontkit_core.schemas import BuildDescription
from frontkit_core.urls import get_page_filename, get_path_from_url

# Lets the injected client derive host and port from window.location,
# which keeps hot reload working behind port forwarding.
DEV_SERVER_PUBLIC = "0.0.0.0:0"

_CONFIG = ConfigDict(
    frozen=True,
    extra="forbid",
    alias_generator=to_camel,
    populate_by_name=True,
)


class ProxyRule(BaseModel):
    model_config = _CONFIG

    target: str
    change_origin: bool = True


class FallbackRewrite(BaseModel):
    """Routes requests matching a page's route pattern to the page file."""

    model_config = _CONFIG

    from_: str = Field(..., alias="from")
    to: str


class HistoryApiFallback(BaseModel):
    model_config = _CONFIG

    rewrites: list[FallbackRewrite] = Field(default_factory=list)


class DevServerConfig(BaseModel):
    """Dev-server options derived from the build description.

    Attributes:
        hot_only: Hot reload without full-page refresh fallback.
        public: Public host for the hot-reload client.
        public_path: Path prefix the output is served under.
        proxy: Path prefix -> proxy rule.
        history_api_fallback: Single-page-app fallback routing.
    """

    model_config = _CONFIG

    hot_only: bool = True
    public: str = DEV_SERVER_PUBLIC
    public_path: str
    proxy: dict[str, ProxyRule] = Field(default_factory=dict)
    history_api_fallback: HistoryApiFallback = Field(default_factory=HistoryApiFallback)


def get_history_fallback_rewrites(description: BuildDescription) -> list[FallbackRewrite]:
    """Fallback routing table, one rewrite per page.

    The target is the page's emitted file name, prefixed by the public
    path segment when the project is served under a sub-path.

    Example:
        >>> [r.to for r in get_history_fallback_rewrites(description)]
        ['/portal/home.html', '/portal/about.html']
    """
    prefix = get_path_from_url(description.public_url, with_slash=False)
    rewrites = []
    for name, page in description.pages.items():
        filename = get_page_filename(name)
        target = f"/{prefix}/{filename}" if prefix else f"/{filename}"
        rewrites.append(FallbackRewrite(from_=page.path, to=target))
    return rewrites


def get_proxy_config(description: BuildDescription) -> dict[str, ProxyRule]:
    return {prefix: ProxyRule(target=target) for prefix, target in description.dev_proxy.items()}


def make_dev_server_config(description: BuildDescription) -> DevServerConfig:
    """Build the dev-server options for a build description."""
    return DevServerConfig(
        public_path=get_path_from_url(description.public_url),
        proxy=get_proxy_config(description),
        history_api_fallback=HistoryApiFallback(
            rewrites=get_history_fallback_rewrites(description),
        ),
    )


def get_serve_config(description: BuildDescription, context: BuildContext) -> BundlerConfig:
    """Compile for serving and append the hot-reload plugin.

    Args:
        description: Build description.
        context: Build context; its mode is forced to serve.

    Returns:
        The compiled configuration with one HotReloadPlugin appended.
    """
    serve_context = BuildContext(root=context.root, env=context.env, mode=BuildMode.serve)
    config = Compiler(serve_context).compile(description)
    return config.with_plugin(HotReloadPlugin())
