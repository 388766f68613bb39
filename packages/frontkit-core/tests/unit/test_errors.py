"""Unit tests for the frontkit-core exception hierarchy."""

from __future__ import annotations

import pytest

from frontkit_core.errors import (
    ConfigurationError,
    DeprecatedOptionUsage,
    FrontkitError,
    InvalidTransformConfig,
    StaticAssetPathInvalid,
)


class TestFrontkitError:
    """Tests for the base FrontkitError exception."""

    def test_stores_user_message(self) -> None:
        error = FrontkitError("Something went wrong")

        assert error.user_message == "Something went wrong"
        assert str(error) == "Something went wrong"

    def test_logs_internal_details(self, capsys: pytest.CaptureFixture[str]) -> None:
        FrontkitError("User sees this", internal_details="pages.home.entries[0]")

        captured = capsys.readouterr()
        assert "frontkit_error" in captured.out
        assert "pages.home.entries[0]" in captured.out

    def test_no_log_without_internal_details(self, capsys: pytest.CaptureFixture[str]) -> None:
        FrontkitError("Just a user message")
        assert "frontkit_error" not in capsys.readouterr().out


@pytest.mark.parametrize(
    "error",
    [
        InvalidTransformConfig("ts", "esbuild", "unknown engine"),
        StaticAssetPathInvalid("/app/static"),
        DeprecatedOptionUsage("extractVendor", "use an array"),
        ConfigurationError("bad"),
    ],
)
def test_subclasses_inherit_from_frontkit_error(error: FrontkitError) -> None:
    assert isinstance(error, FrontkitError)


def test_invalid_transform_message() -> None:
    error = InvalidTransformConfig("ts", "esbuild", "unknown engine")

    assert error.user_message == "Invalid transform for 'ts' (engine 'esbuild'): unknown engine"
    assert error.file_type == "ts"
    assert error.engine == "esbuild"
    assert error.reason == "unknown engine"


def test_static_asset_path_invalid() -> None:
    error = StaticAssetPathInvalid("/app/static")

    assert error.path == "/app/static"
    assert "not a directory" in error.user_message


def test_deprecated_option_usage() -> None:
    error = DeprecatedOptionUsage("extractVendor", "use an array")

    assert error.option == "extractVendor"
    assert error.user_message == "BREAKING CHANGE: use an array"


def test_configuration_error_context() -> None:
    error = ConfigurationError(
        "Invalid value",
        file_path="build-config.json",
        field_path="pages.home.path",
    )

    assert error.user_message == (
        "Invalid value (in build-config.json, field 'pages.home.path')"
    )
    assert error.file_path == "build-config.json"
    assert error.field_path == "pages.home.path"
