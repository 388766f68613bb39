"""Build context for frontkit compilation.

The build environment and mode are threaded explicitly through every
compiler entry point via BuildContext; nothing reads process-wide state
during compilation. get_build_env() is the single place where the
BUILD_ENV environment variable is consulted, and only by callers
(the CLI) before compilation starts.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from frontkit_core.errors import ConfigurationError

# Environment variable for build environment selection
BUILD_ENV_VAR = "BUILD_ENV"


class Env(str, Enum):
    """Build environment."""

    development = "development"
    production = "production"


class BuildMode(str, Enum):
    """What the compiled configuration will be used for.

    - serve: dev server with hot reload
    - generate: plain build producing output files
    - analyze: build plus bundle analysis report
    """

    serve = "serve"
    generate = "generate"
    analyze = "analyze"


DEFAULT_BUILD_ENV = Env.development


def get_build_env(value: str | None = None) -> Env:
    """Resolve the build environment.

    Args:
        value: Explicit environment name. If None, reads BUILD_ENV
            or defaults to "development".

    Returns:
        Resolved Env value.

    Raises:
        ConfigurationError: If the value is not a known environment.

    Example:
        >>> get_build_env("production")
        <Env.production: 'production'>
    """
    raw = value if value is not None else os.environ.get(BUILD_ENV_VAR, DEFAULT_BUILD_ENV.value)
    try:
        return Env(raw)
    except ValueError:
        valid = ", ".join(e.value for e in Env)
        raise ConfigurationError(
            f"Invalid build environment '{raw}'. Expected one of: {valid}",
            field_path=BUILD_ENV_VAR,
        ) from None


@dataclass(frozen=True)
class BuildContext:
    """Immutable per-invocation build context.

    Attributes:
        root: Project root directory (contains the build description).
        env: Build environment.
        mode: Build mode (serve, generate, analyze).
    """

    root: Path
    env: Env = DEFAULT_BUILD_ENV
    mode: BuildMode = BuildMode.generate

    @property
    def is_dev(self) -> bool:
        return self.env is Env.development

    def abs(self, *parts: str) -> Path:
        """Join a project-relative path onto the root."""
        return self.root.joinpath(*parts)
