"""Custom exception hierarchy for frontkit-core.

This module defines the exception classes used by the configuration compiler:
- FrontkitError: Base exception for all frontkit errors
- InvalidTransformConfig: Unknown or malformed per-file-type transform (fatal)
- StaticAssetPathInvalid: Static directory exists but is not a directory (recovered)
- DeprecatedOptionUsage: Legacy option form that is skipped (recovered)
- ConfigurationError: Build description file or environment problems

User-facing messages are safe to display; technical details are logged
internally via structlog.
"""

from __future__ import annotations

import structlog

logger = structlog.get_logger(__name__)


class FrontkitError(Exception):
    """Base exception for frontkit.

    All frontkit exceptions inherit from this class. User-facing messages
    are safe to display; technical details are logged internally.

    Args:
        user_message: Safe message to display to the user.
        internal_details: Optional technical details for logging. This is
            logged internally but never part of the user message.

    Example:
        >>> raise FrontkitError(
        ...     "Build config invalid",
        ...     internal_details="pages.home.entries references unknown entry 'main'"
        ... )
    """

    def __init__(
        self,
        user_message: str,
        *,
        internal_details: str | None = None,
    ) -> None:
        """Initialize FrontkitError with user message and optional internal details.

        Args:
            user_message: Safe message to display to the user.
            internal_details: Technical details for internal logging only.
        """
        super().__init__(user_message)
        self.user_message = user_message

        if internal_details:
            logger.error(
                "frontkit_error",
                error_type=self.__class__.__name__,
                user_message=user_message,
                internal_details=internal_details,
            )


class InvalidTransformConfig(FrontkitError):
    """Raised when a per-file-type transform declaration cannot be compiled.

    Use this exception when:
    - The declared engine name is unknown
    - The engine's config block fails validation
    - An asset engine is asked for a loader chain

    This error is fatal: compilation aborts before any configuration
    is returned.

    Attributes:
        file_type: File type the transform was declared for (e.g. "tsx").
        engine: Engine name as declared.

    Example:
        >>> raise InvalidTransformConfig("ts", "esbuild", "unknown engine")
        # User sees: "Invalid transform for 'ts' (engine 'esbuild'): unknown engine"
    """

    def __init__(
        self,
        file_type: str,
        engine: str,
        reason: str,
        *,
        internal_details: str | None = None,
    ) -> None:
        user_message = f"Invalid transform for '{file_type}' (engine '{engine}'): {reason}"
        super().__init__(user_message, internal_details=internal_details)

        self.file_type = file_type
        self.engine = engine
        self.reason = reason


class StaticAssetPathInvalid(FrontkitError):
    """Raised when the static-assets path exists but is not a directory.

    The plugin assembler recovers from this error locally: it logs a
    warning and omits the static copy plugin.

    Attributes:
        path: The offending static-assets path.
    """

    def __init__(self, path: str) -> None:
        super().__init__(f"Static path is not a directory: {path}")
        self.path = path


class DeprecatedOptionUsage(FrontkitError):
    """Raised when a legacy option form is used.

    The splitting planner recovers from this error locally: it logs a
    warning and skips the feature. The legacy value is never converted.

    Attributes:
        option: Name of the deprecated option (e.g. "extractVendor").
    """

    def __init__(self, option: str, hint: str) -> None:
        super().__init__(f"BREAKING CHANGE: {hint}")
        self.option = option
        self.hint = hint


class ConfigurationError(FrontkitError):
    """Raised when the build description or build environment is invalid.

    Provides file path and field context for actionable error messages.

    Attributes:
        file_path: Path to the configuration file (if known).
        field_path: Dot-separated path to the invalid field (e.g. "pages.home.path").

    Example:
        >>> raise ConfigurationError(
        ...     "Invalid BUILD_ENV value 'staging'",
        ...     field_path="BUILD_ENV",
        ... )
    """

    def __init__(
        self,
        user_message: str,
        *,
        file_path: str | None = None,
        field_path: str | None = None,
        internal_details: str | None = None,
    ) -> None:
        context_parts: list[str] = []
        if file_path:
            context_parts.append(f"in {file_path}")
        if field_path:
            context_parts.append(f"field '{field_path}'")

        if context_parts:
            full_message = f"{user_message} ({', '.join(context_parts)})"
        else:
            full_message = user_message

        super().__init__(full_message, internal_details=internal_details)

        self.file_path = file_path
        self.field_path = field_path
