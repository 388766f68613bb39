"""Optimization configuration models for frontkit."""

from __future__ import annotations

from enum import Enum
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class AddPolyfill(str, Enum):
    """Polyfill injection policy.

    - none: no polyfill
    - global: usage-based global polyfill (core-js imports)
    - runtime: non-polluting runtime helpers (transform-runtime)
    - both: global and runtime
    """

    none = "none"
    global_ = "global"
    runtime = "runtime"
    both = "both"


def should_add_global_polyfill(polyfill: AddPolyfill) -> bool:
    return polyfill in (AddPolyfill.global_, AddPolyfill.both)


def should_add_runtime_polyfill(polyfill: AddPolyfill) -> bool:
    return polyfill in (AddPolyfill.runtime, AddPolyfill.both)


class OptimizationConfig(BaseModel):
    """Optimization flags.

    Attributes:
        add_polyfill: Polyfill injection policy.
        extract_vendor: False to disable, a list of package-name patterns
            to extract into the vendor chunk (empty list means every
            node_modules module). The legacy string form is accepted here
            and skipped with a warning by the splitting planner.
        extract_common: Extract modules shared by two or more chunks.

    Example:
        >>> OptimizationConfig(extract_vendor=["react", "react-dom"])
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        alias_generator=to_camel,
        populate_by_name=True,
    )

    add_polyfill: AddPolyfill = Field(
        default=AddPolyfill.none,
        description="Polyfill injection policy",
    )
    extract_vendor: Literal[False] | list[str] | str = Field(
        default=False,
        description="Vendor extraction patterns",
    )
    extract_common: bool = Field(
        default=False,
        description="Extract common chunk",
    )
