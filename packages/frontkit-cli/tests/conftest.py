"""Shared test fixtures for frontkit-cli tests.

Provides CliRunner fixtures and a temporary project with a
build-config.json for testing CLI commands.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import pytest
import structlog
from click.testing import CliRunner

BUILD_CONFIG_FILENAME = "build-config.json"


@pytest.fixture(autouse=True)
def reset_structlog() -> None:
    """Reset structlog between tests.

    Commands configure structlog against the CliRunner streams of the
    invocation that ran them; tests must not inherit those streams.
    """
    structlog.reset_defaults()


@pytest.fixture
def cli_runner() -> CliRunner:
    """Create a Click test runner.

    Returns:
        CliRunner instance for testing CLI commands.
    """
    return CliRunner()


@pytest.fixture
def build_config_data() -> dict[str, Any]:
    """Return a valid two-page build description."""
    return {
        "entries": {"home": "src/home.tsx", "about": "src/about.tsx"},
        "pages": {
            "home": {"template": "src/index.html", "entries": ["home"], "path": "^/$"},
            "about": {"template": "src/index.html", "entries": ["about"], "path": "^/about"},
        },
        "transforms": {
            "ts": {"engine": "ts-babel"},
            "tsx": {"engine": "ts-swc"},
            "css": {"engine": "css"},
        },
        "optimization": {"extractVendor": ["react"], "extractCommon": True},
        "devProxy": {"/api": "http://localhost:8080"},
    }


@pytest.fixture
def project_dir(tmp_path: Path, build_config_data: dict[str, Any]) -> Path:
    """Return a project root containing build-config.json.

    Returns:
        Path to the project root.
    """
    root = tmp_path / "project"
    root.mkdir()
    (root / BUILD_CONFIG_FILENAME).write_text(json.dumps(build_config_data))
    return root
