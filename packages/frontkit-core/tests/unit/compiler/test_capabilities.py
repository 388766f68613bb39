"""Unit tests for capability identity and idempotent option merging."""

from __future__ import annotations

import pytest

from frontkit_core.compiler import (
    InjectPosition,
    Injection,
    capability_name,
    includes_capability,
    merge_options,
)
from frontkit_core.context import Env
from frontkit_core.schemas import BabelOptions

PRESET_A = Injection(group="presets", name="preset-a", options={"level": 1})
PRESET_B = Injection(group="presets", name="preset-b")
PLUGIN_TAIL = Injection(
    group="plugins",
    name="plugin-tail",
    position=InjectPosition.append,
)
PROD_ONLY = Injection(
    group="plugins",
    name="plugin-prod",
    environments=frozenset({Env.production}),
)


class TestCapabilityName:
    """Tests for capability_name()."""

    def test_bare_name(self) -> None:
        assert capability_name("@babel/preset-env") == "@babel/preset-env"

    def test_list_entry_uses_first_element(self) -> None:
        assert capability_name(["@babel/preset-env", {"modules": False}]) == "@babel/preset-env"

    def test_tuple_entry(self) -> None:
        assert capability_name(("plugin-x", {})) == "plugin-x"

    @pytest.mark.parametrize("entry", [[], [1, {}], {"name": "x"}, None, 3])
    def test_malformed_entry_raises(self, entry: object) -> None:
        with pytest.raises(ValueError, match="Not a capability entry"):
            capability_name(entry)

    def test_includes_capability(self) -> None:
        items = ["a", ["b", {"x": 1}]]
        assert includes_capability(items, "b")
        assert not includes_capability(items, "c")


class TestMergeOptions:
    """Tests for merge_options()."""

    def test_missing_capabilities_are_prepended_in_order(self) -> None:
        user = BabelOptions(presets=["user-preset"])

        merged = merge_options(user, [PRESET_A, PRESET_B], Env.production)

        assert merged.presets == [["preset-a", {"level": 1}], "preset-b", "user-preset"]

    def test_append_injection_goes_last(self) -> None:
        user = BabelOptions(plugins=["user-plugin"])

        merged = merge_options(user, [PLUGIN_TAIL], Env.development)

        assert merged.plugins == ["user-plugin", "plugin-tail"]

    def test_user_capability_kept_once_with_user_options(self) -> None:
        user = BabelOptions(presets=[["preset-a", {"level": 9}]])

        merged = merge_options(user, [PRESET_A], Env.production)

        assert merged.presets == [["preset-a", {"level": 9}]]

    def test_user_bare_name_counts_as_present(self) -> None:
        user = BabelOptions(presets=["preset-a"])

        merged = merge_options(user, [PRESET_A], Env.production)

        assert merged.presets == ["preset-a"]

    def test_merge_is_idempotent(self) -> None:
        user = BabelOptions(presets=["user-preset"], plugins=[["user-plugin", {"loose": True}]])
        injections = [PRESET_A, PRESET_B, PLUGIN_TAIL, PROD_ONLY]

        once = merge_options(user, injections, Env.production)
        twice = merge_options(once, injections, Env.production)

        assert twice == once

    def test_injection_for_other_environment_is_skipped(self) -> None:
        merged = merge_options(BabelOptions(), [PROD_ONLY], Env.development)
        assert merged.plugins == []

        merged = merge_options(BabelOptions(), [PROD_ONLY], Env.production)
        assert merged.plugins == ["plugin-prod"]

    def test_source_type_defaults_to_unambiguous(self) -> None:
        merged = merge_options(BabelOptions(), [], Env.development)
        assert merged.source_type == "unambiguous"

    def test_user_source_type_is_kept(self) -> None:
        merged = merge_options(BabelOptions(source_type="module"), [], Env.development)
        assert merged.source_type == "module"

    def test_user_options_are_not_mutated(self) -> None:
        user = BabelOptions(presets=[["preset-a", {"level": 9}]], plugins=["p"])
        before = user.model_dump()

        merge_options(user, [PRESET_A, PRESET_B, PLUGIN_TAIL], Env.production)

        assert user.model_dump() == before

    def test_injected_options_are_fresh_copies(self) -> None:
        first = merge_options(BabelOptions(), [PRESET_A], Env.production)
        first.presets[0][1]["level"] = 42

        second = merge_options(BabelOptions(), [PRESET_A], Env.production)

        assert second.presets[0] == ["preset-a", {"level": 1}]

    def test_unknown_babel_keys_pass_through(self) -> None:
        user = BabelOptions.model_validate({"compact": True, "presets": []})

        merged = merge_options(user, [PRESET_B], Env.production)

        assert merged.model_dump()["compact"] is True

    def test_malformed_user_entry_raises(self) -> None:
        user = BabelOptions(plugins=[[]])

        with pytest.raises(ValueError):
            merge_options(user, [PLUGIN_TAIL], Env.development)
