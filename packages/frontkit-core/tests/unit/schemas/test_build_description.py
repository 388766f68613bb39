"""Unit tests for BuildDescription and its nested models."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import pytest
import yaml
from pydantic import ValidationError

from frontkit_core.schemas import (
    DEFAULT_BROWSERS,
    AddPolyfill,
    BuildDescription,
    OptimizationConfig,
    TransformSpec,
)


class TestBuildDescription:
    """Tests for BuildDescription validation."""

    def test_defaults(self) -> None:
        description = BuildDescription()

        assert description.public_url == "/"
        assert description.src_dir == "src"
        assert description.dist_dir == "dist"
        assert description.static_dir == "static"
        assert description.targets.browsers == list(DEFAULT_BROWSERS)
        assert description.optimization.add_polyfill is AddPolyfill.none
        assert description.optimization.extract_vendor is False

    def test_camel_case_keys(self, sample_description: BuildDescription) -> None:
        assert sample_description.env_variables == {"API_BASE": "/api"}
        assert sample_description.optimization.add_polyfill is AddPolyfill.global_
        assert sample_description.optimization.extract_vendor == ["react", "react-dom"]

    def test_unknown_key_rejected(self, sample_description_data: dict[str, Any]) -> None:
        sample_description_data["bogus"] = True
        with pytest.raises(ValidationError):
            BuildDescription.model_validate(sample_description_data)

    def test_page_with_unknown_entry_rejected(
        self, sample_description_data: dict[str, Any]
    ) -> None:
        sample_description_data["pages"]["home"]["entries"] = ["main"]

        with pytest.raises(ValidationError, match="unknown entry 'main'"):
            BuildDescription.model_validate(sample_description_data)

    def test_duplicate_page_path_rejected(self, sample_description_data: dict[str, Any]) -> None:
        sample_description_data["pages"]["about"]["path"] = "^/$"

        with pytest.raises(ValidationError, match="share the route path"):
            BuildDescription.model_validate(sample_description_data)

    @pytest.mark.parametrize("path", [None, ""])
    def test_page_route_path_is_required(
        self, sample_description_data: dict[str, Any], path: str | None
    ) -> None:
        if path is None:
            del sample_description_data["pages"]["about"]["path"]
        else:
            sample_description_data["pages"]["about"]["path"] = path

        with pytest.raises(ValidationError, match="pages.about.path"):
            BuildDescription.model_validate(sample_description_data)

    def test_invalid_polyfill_rejected(self) -> None:
        with pytest.raises(ValidationError):
            OptimizationConfig.model_validate({"addPolyfill": "sometimes"})

    def test_legacy_vendor_string_accepted(self) -> None:
        optimization = OptimizationConfig.model_validate({"extractVendor": "react"})
        assert optimization.extract_vendor == "react"

    def test_description_is_frozen(self, sample_description: BuildDescription) -> None:
        with pytest.raises(ValidationError):
            sample_description.public_url = "/other/"  # type: ignore[misc]


class TestTransformSpec:
    def test_unknown_engine_accepted_by_schema(self) -> None:
        assert TransformSpec(engine="esbuild").engine == "esbuild"

    def test_empty_engine_rejected(self) -> None:
        with pytest.raises(ValidationError):
            TransformSpec(engine="")


class TestFromFile:
    """Tests for BuildDescription.from_file()."""

    def test_json(self, tmp_path: Path, sample_description_data: dict[str, Any]) -> None:
        path = tmp_path / "build-config.json"
        path.write_text(json.dumps(sample_description_data))

        description = BuildDescription.from_file(path)

        assert sorted(description.pages) == ["about", "home"]

    def test_yaml(self, tmp_path: Path, sample_description_data: dict[str, Any]) -> None:
        path = tmp_path / "build-config.yaml"
        path.write_text(yaml.safe_dump(sample_description_data))

        assert BuildDescription.from_file(path).entries["home"] == "src/home/index.tsx"

    def test_empty_yaml_is_default_description(self, tmp_path: Path) -> None:
        path = tmp_path / "build-config.yml"
        path.write_text("")

        assert BuildDescription.from_file(path) == BuildDescription()

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            BuildDescription.from_file(tmp_path / "build-config.json")

    def test_invalid_json(self, tmp_path: Path) -> None:
        path = tmp_path / "build-config.json"
        path.write_text("{not json")

        with pytest.raises(json.JSONDecodeError):
            BuildDescription.from_file(path)
