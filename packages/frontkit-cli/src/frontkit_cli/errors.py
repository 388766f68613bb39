"""CLI error handling for frontkit-cli.

This module provides CLI-specific error handling that wraps frontkit-core
exceptions and provides user-friendly messages with appropriate exit codes.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, NoReturn

import click
import yaml
from pydantic import ValidationError as PydanticValidationError

from frontkit_cli.output import error
from frontkit_core.errors import FrontkitError

if TYPE_CHECKING:
    from pydantic_core import ErrorDetails


# Exit codes following sysexits.h convention
EXIT_SUCCESS = 0
EXIT_USER_ERROR = 1  # User error (validation, invalid transform)
EXIT_SYSTEM_ERROR = 2  # System error (missing file, permissions)


class CLIError(click.ClickException):
    """CLI-specific exception with exit code support.

    Attributes:
        message: User-facing error message.
        exit_code: Exit code for the CLI (default: 1).
    """

    def __init__(self, message: str, exit_code: int = EXIT_USER_ERROR) -> None:
        super().__init__(message)
        self.exit_code = exit_code

    def show(self, file: object = None) -> None:
        """Display the error message using Rich formatting.

        Args:
            file: Output file (unused, for Click compatibility).
        """
        error(self.format_message())


def format_pydantic_error(err: PydanticValidationError) -> str:
    """Format Pydantic validation error into user-friendly message.

    Example:
        >>> format_pydantic_error(err)
        "Validation failed:\\n  - optimization.addPolyfill: Input should be 'none'..."
    """
    errors: list[ErrorDetails] = err.errors()
    lines = ["Validation failed:"]

    for e in errors:
        loc = ".".join(str(x) for x in e["loc"])
        msg = e["msg"]
        lines.append(f"  - {loc}: {msg}" if loc else f"  - {msg}")

    return "\n".join(lines)


def handle_build_error(err: Exception, file_path: str | None = None) -> NoReturn:
    """Translate a build error into a CLIError.

    Args:
        err: Exception raised while loading or compiling.
        file_path: Build description file, when known.

    Raises:
        CLIError: Always, with an exit code matching the error kind.
        Exception: Unknown errors are re-raised unchanged.
    """
    where = f" in {file_path}" if file_path else ""

    if isinstance(err, FileNotFoundError):
        raise CLIError(
            f"{err}\n\nCreate build-config.json in the project root, or use --config.",
            exit_code=EXIT_SYSTEM_ERROR,
        )
    if isinstance(err, PermissionError):
        raise CLIError(f"Permission denied: {err.filename}", exit_code=EXIT_SYSTEM_ERROR)
    if isinstance(err, PydanticValidationError):
        raise CLIError(f"Invalid build config{where}:\n{format_pydantic_error(err)}")
    if isinstance(err, json.JSONDecodeError):
        raise CLIError(
            f"Invalid JSON{where}: line {err.lineno}, column {err.colno}: {err.msg}"
        )
    if isinstance(err, yaml.YAMLError):
        raise CLIError(f"Invalid YAML{where}: {err}")
    if isinstance(err, FrontkitError):
        message = err.user_message
        if file_path:
            message += f"\n\nBuild description: {file_path}"
        raise CLIError(message)
    raise err
