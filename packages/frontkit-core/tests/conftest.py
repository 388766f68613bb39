"""Shared pytest fixtures for frontkit-core tests.

This module provides the structlog test configuration, sample build
descriptions and build contexts used across the unit tests.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import pytest
import structlog

from frontkit_core import BuildContext, BuildDescription, BuildMode, Env


@pytest.fixture(autouse=True)
def configure_structlog_for_tests() -> None:
    """Configure structlog to output to stdout for test capture.

    This fixture ensures structlog outputs to stdout so that capsys
    can capture the output in tests.
    """
    structlog.configure(
        processors=[
            structlog.stdlib.add_log_level,
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.dev.ConsoleRenderer(colors=False),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        # No explicit file: sys.stdout is looked up per logger, after capsys swaps it
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=False,  # Important for test isolation
    )


@pytest.fixture
def sample_description_data() -> dict[str, Any]:
    """Return a two-page build description as it appears in build-config.json."""
    return {
        "entries": {
            "home": "src/home/index.tsx",
            "about": "src/about/index.tsx",
        },
        "pages": {
            "home": {
                "template": "src/index.html",
                "entries": ["home"],
                "path": "^/$",
            },
            "about": {
                "template": "src/index.html",
                "entries": ["about"],
                "path": "^/about",
            },
        },
        "transforms": {
            "ts": {"engine": "ts-babel"},
            "tsx": {"engine": "ts-babel"},
            "less": {"engine": "less"},
            "png": {"engine": "file"},
        },
        "optimization": {
            "addPolyfill": "global",
            "extractVendor": ["react", "react-dom"],
            "extractCommon": True,
        },
        "targets": {"browsers": ["> 1%", "not dead"]},
        "envVariables": {"API_BASE": "/api"},
        "publicUrl": "/",
    }


@pytest.fixture
def sample_description(sample_description_data: dict[str, Any]) -> BuildDescription:
    return BuildDescription.model_validate(sample_description_data)


@pytest.fixture
def project_root(tmp_path: Path) -> Path:
    """Return an empty project root (no static directory)."""
    root = tmp_path / "project"
    root.mkdir()
    return root


@pytest.fixture
def dev_context(project_root: Path) -> BuildContext:
    return BuildContext(root=project_root, env=Env.development, mode=BuildMode.serve)


@pytest.fixture
def prod_context(project_root: Path) -> BuildContext:
    return BuildContext(root=project_root, env=Env.production, mode=BuildMode.generate)
