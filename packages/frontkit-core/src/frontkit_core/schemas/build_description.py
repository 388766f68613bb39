"""BuildDescription root model for frontkit.

This module defines the BuildDescription root configuration model that
represents a complete build-config.json (or .yaml) file. It is validated
once, before compilation, and treated as a read-only snapshot afterwards.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel
from typing_extensions import Self

from frontkit_core.schemas.optimization import OptimizationConfig
from frontkit_core.schemas.transforms import TransformSpec

DEFAULT_BROWSERS = ("> 1%", "last 2 versions", "not dead")

_CAMEL = ConfigDict(
    frozen=True,
    extra="forbid",
    alias_generator=to_camel,
    populate_by_name=True,
)


class PageConfig(BaseModel):
    """One HTML page of the project.

    Attributes:
        template: HTML template path (relative to the project root).
        entries: Ordered entry names whose chunks the page includes.
        path: Route pattern served by this page in the dev server.

    Example:
        >>> PageConfig(template="src/index.html", entries=["index"], path="^/$")
    """

    model_config = _CAMEL

    template: str = Field(..., min_length=1, description="HTML template path")
    entries: list[str] = Field(default_factory=list, description="Entry names")
    path: str = Field(..., min_length=1, description="Route pattern")


class TargetsConfig(BaseModel):
    """Compilation targets."""

    model_config = _CAMEL

    browsers: list[str] = Field(
        default_factory=lambda: list(DEFAULT_BROWSERS),
        description="Ordered browserslist queries",
    )


class BuildDescription(BaseModel):
    """Root configuration model for a frontkit project.

    Attributes:
        entries: Entry name -> source file (relative to root).
        pages: Page name -> PageConfig.
        transforms: File type (extension without dot) -> TransformSpec.
        optimization: Polyfill and chunk-splitting flags.
        targets: Browser targets.
        env_variables: Constants injected into the bundle.
        public_url: Public URL the output is served from.
        src_dir: Source root, searched first when resolving modules.
        dist_dir: Output directory.
        static_dir: Static asset directory copied verbatim into the output.
        dev_proxy: Path prefix -> proxy target for the dev server.

    Example:
        >>> desc = BuildDescription.from_file("build-config.json")
        >>> sorted(desc.pages)
        ['about', 'home']
    """

    model_config = _CAMEL

    entries: dict[str, str] = Field(default_factory=dict)
    pages: dict[str, PageConfig] = Field(default_factory=dict)
    transforms: dict[str, TransformSpec] = Field(default_factory=dict)
    optimization: OptimizationConfig = Field(default_factory=OptimizationConfig)
    targets: TargetsConfig = Field(default_factory=TargetsConfig)
    env_variables: dict[str, str] = Field(default_factory=dict)
    public_url: str = Field(default="/")
    src_dir: str = Field(default="src")
    dist_dir: str = Field(default="dist")
    static_dir: str = Field(default="static")
    dev_proxy: dict[str, str] = Field(default_factory=dict)

    @model_validator(mode="after")
    def validate_pages(self) -> Self:
        """Page entries must exist and page routes must be unique."""
        seen_paths: dict[str, str] = {}
        for name, page in self.pages.items():
            for entry in page.entries:
                if entry not in self.entries:
                    msg = f"Page '{name}' references unknown entry '{entry}'"
                    raise ValueError(msg)
            if page.path in seen_paths:
                msg = (
                    f"Pages '{seen_paths[page.path]}' and '{name}' "
                    f"share the route path '{page.path}'"
                )
                raise ValueError(msg)
            seen_paths[page.path] = name
        return self

    @classmethod
    def from_file(cls, path: str | Path) -> BuildDescription:
        """Load and validate a BuildDescription from a JSON or YAML file.

        Args:
            path: Path to build-config.json / .yaml / .yml.

        Returns:
            Validated BuildDescription instance.

        Raises:
            FileNotFoundError: If file doesn't exist.
            json.JSONDecodeError: If JSON syntax is invalid.
            yaml.YAMLError: If YAML syntax is invalid.
            pydantic.ValidationError: If schema validation fails.
        """
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"File not found: {path}")

        content = path.read_text()
        data: dict[str, Any]
        if path.suffix == ".json":
            data = json.loads(content)
        else:
            data = yaml.safe_load(content) or {}

        return cls.model_validate(data)
