"""Chunk-splitting planner.

Derives cache groups (vendor and common chunk extraction) and the base
chunk list every page includes ahead of its own entries. Splitting only
applies to production builds.
"""

from __future__ import annotations

from dataclasses import dataclass, field

import structlog

from frontkit_core.compiler.models import CacheGroup
from frontkit_core.context import Env
from frontkit_core.errors import DeprecatedOptionUsage
from frontkit_core.schemas import OptimizationConfig

logger = structlog.get_logger(__name__)

VENDOR_CHUNK = "vendor"
COMMON_CHUNK = "common"

VENDOR_PRIORITY = -10

_LEGACY_VENDOR_HINT = (
    "The type of extractVendor is no longer a string, "
    'please use an array, like ["react", "react-dom"]'
)


@dataclass(frozen=True)
class SplittingPlan:
    """Result of plan_splitting().

    Attributes:
        cache_groups: Group name -> CacheGroup.
        base_chunks: Chunk names included on every page, vendor before common.
    """

    cache_groups: dict[str, CacheGroup] = field(default_factory=dict)
    base_chunks: tuple[str, ...] = ()


def vendor_test(patterns: list[str]) -> str:
    """Regex source matching dependency modules of the given packages.

    An empty list matches every module under node_modules. Patterns are
    regex fragments joined as alternatives and must be followed by a path
    separator, so "react" does not match "react-dom".
    """
    base = r"(^|[\\/])node_modules[\\/]"
    if not patterns:
        return base
    return base + "(" + "|".join(patterns) + r")[\\/]"


def make_vendor_group(extract_vendor: list[str] | str) -> CacheGroup:
    """Build the vendor cache group.

    Raises:
        DeprecatedOptionUsage: For the legacy string form.
    """
    if isinstance(extract_vendor, str):
        raise DeprecatedOptionUsage("extractVendor", _LEGACY_VENDOR_HINT)
    return CacheGroup(
        name=VENDOR_CHUNK,
        test=vendor_test(extract_vendor),
        chunks="all",
        priority=VENDOR_PRIORITY,
        min_size=0,
    )


def make_common_group() -> CacheGroup:
    return CacheGroup(name=COMMON_CHUNK, chunks="all", min_size=0, min_chunks=2)


def plan_splitting(optimization: OptimizationConfig, environment: Env) -> SplittingPlan:
    """Plan chunk splitting for a build.

    Args:
        optimization: Optimization flags from the build description.
        environment: Build environment. Development builds get an empty plan.

    Returns:
        SplittingPlan with freshly built cache groups.

    Example:
        >>> plan = plan_splitting(OptimizationConfig(extract_vendor=["react"]), Env.production)
        >>> plan.base_chunks
        ('vendor',)
    """
    if environment is Env.development:
        return SplittingPlan()

    cache_groups: dict[str, CacheGroup] = {}
    base_chunks: list[str] = []

    extract_vendor = optimization.extract_vendor
    if extract_vendor is not False:
        try:
            cache_groups[VENDOR_CHUNK] = make_vendor_group(extract_vendor)
            base_chunks.append(VENDOR_CHUNK)
        except DeprecatedOptionUsage as e:
            logger.warning("deprecated_option", option=e.option, message=e.user_message)

    if optimization.extract_common:
        cache_groups[COMMON_CHUNK] = make_common_group()
        base_chunks.append(COMMON_CHUNK)

    return SplittingPlan(cache_groups=cache_groups, base_chunks=tuple(base_chunks))
