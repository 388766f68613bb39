"""Capability identity and idempotent option merging.

A capability is a named, optionally configured transpiler preset or plugin
that appears at most once in a merged list. Entries are written either as
a bare name or as a [name, options, ...] list; capability_name() is the one
identity function used everywhere, so a caller can override an injected
capability's options and still have it recognized as already present.

merge_options() never mutates its input: it works on a deep-copied draft
and validates the draft into a new BabelOptions.
"""

from __future__ import annotations

import copy
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Literal

from frontkit_core.context import Env
from frontkit_core.schemas import BabelOptions

DEFAULT_SOURCE_TYPE = "unambiguous"

CapabilityGroup = Literal["presets", "plugins"]


class InjectPosition(str, Enum):
    """Where a missing capability is inserted.

    - prepend: before every user capability (polyfill/runtime capabilities)
    - append: after every user capability (UI framework support)
    """

    prepend = "prepend"
    append = "append"


def capability_name(item: Any) -> str:
    """Return the identity of a capability entry.

    Args:
        item: "name" or [name, options, ...].

    Returns:
        The capability name.

    Raises:
        ValueError: If the entry has no recognizable name.

    Example:
        >>> capability_name(["@babel/preset-env", {"modules": False}])
        '@babel/preset-env'
    """
    if isinstance(item, str):
        return item
    if isinstance(item, (list, tuple)) and item and isinstance(item[0], str):
        return item[0]
    raise ValueError(f"Not a capability entry: {item!r}")


def includes_capability(items: Iterable[Any], name: str) -> bool:
    return any(capability_name(item) == name for item in items)


@dataclass(frozen=True)
class Injection:
    """A capability the merger must guarantee is present.

    Attributes:
        group: "presets" or "plugins".
        name: Capability name.
        options: Default options, or None for a bare-name entry.
        position: Insertion position when missing.
        environments: Environments the injection applies to.
    """

    group: CapabilityGroup
    name: str
    options: dict[str, Any] | None = None
    position: InjectPosition = InjectPosition.prepend
    environments: frozenset[Env] = field(default_factory=lambda: frozenset(Env))

    def entry(self) -> str | list[Any]:
        """Build a fresh list entry for this capability."""
        if self.options is None:
            return self.name
        return [self.name, copy.deepcopy(self.options)]


def merge_options(
    user_options: BabelOptions,
    required_injections: Sequence[Injection],
    environment: Env,
) -> BabelOptions:
    """Merge caller options with required capabilities.

    Capabilities already present (by name) are kept as the caller wrote
    them. Missing prepend-injections go before the caller's entries in
    declaration order; missing append-injections go after. sourceType
    defaults to "unambiguous".

    Args:
        user_options: Caller-supplied options. Never mutated.
        required_injections: Capabilities that must be present.
        environment: Current build environment; injections for other
            environments are skipped.

    Returns:
        New BabelOptions. Merging the result again with the same
        injections returns an equal value.

    Raises:
        ValueError: If a caller entry has no recognizable name.
    """
    draft: dict[str, Any] = copy.deepcopy(user_options.model_dump())

    for group in ("presets", "plugins"):
        existing: list[Any] = list(draft.get(group) or [])
        present = {capability_name(item) for item in existing}
        head: list[Any] = []
        tail: list[Any] = []

        for injection in required_injections:
            if injection.group != group or environment not in injection.environments:
                continue
            if injection.name in present:
                continue
            present.add(injection.name)
            if injection.position is InjectPosition.prepend:
                head.append(injection.entry())
            else:
                tail.append(injection.entry())

        draft[group] = [*head, *existing, *tail]

    if not draft.get("source_type"):
        draft["source_type"] = DEFAULT_SOURCE_TYPE

    return BabelOptions.model_validate(draft)
