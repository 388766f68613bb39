"""Build description discovery.

Finds the build description for a project root:
1. An explicit config file (BUILD_CONFIG_FILE / --config), relative to root
2. <root>/build-config.json
3. <root>/build-config.yaml, then <root>/build-config.yml
"""

from __future__ import annotations

from pathlib import Path

import structlog

from frontkit_core.schemas import BuildDescription

logger = structlog.get_logger(__name__)

# Environment variable for an explicit build config file
BUILD_CONFIG_FILE_VAR = "BUILD_CONFIG_FILE"

BUILD_CONFIG_FILE_NAMES = (
    "build-config.json",
    "build-config.yaml",
    "build-config.yml",
)


def find_build_config_file(root: Path, config_file: str | Path | None = None) -> Path:
    """Locate the build description file.

    Args:
        root: Project root.
        config_file: Explicit file; relative paths are resolved against root.

    Returns:
        Path to the build description file.

    Raises:
        FileNotFoundError: If no build description file is found.
    """
    if config_file is not None:
        path = root / Path(config_file)
        if not path.exists():
            raise FileNotFoundError(f"File not found: {path}")
        return path

    for name in BUILD_CONFIG_FILE_NAMES:
        path = root / name
        if path.exists():
            logger.debug("build_config_found", path=str(path))
            return path

    raise FileNotFoundError(f"No {' / '.join(BUILD_CONFIG_FILE_NAMES)} found in {root}")


def load_build_description(
    root: Path,
    config_file: str | Path | None = None,
) -> BuildDescription:
    """Find and validate the build description for a project.

    Raises:
        FileNotFoundError: If no build description file is found.
        pydantic.ValidationError: If validation fails.
    """
    return BuildDescription.from_file(find_build_config_file(root, config_file))
