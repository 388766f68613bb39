"""Unit tests for babel-loader option factories."""

from __future__ import annotations

from frontkit_core.compiler import make_babel_loader
from frontkit_core.compiler.babel import (
    COREJS_OPTIONS,
    PLUGIN_REACT_REFRESH,
    PLUGIN_TRANSFORM_RUNTIME,
    PRESET_ENV,
    PRESET_REACT,
    babel_injections,
    preset_env_options,
)
from frontkit_core.compiler.capabilities import capability_name
from frontkit_core.context import Env
from frontkit_core.schemas import AddPolyfill, BabelOptions

TARGETS = ["> 1%", "not dead"]


def _names(entries: list) -> list[str]:
    return [capability_name(entry) for entry in entries]


class TestPresetEnvOptions:
    def test_without_polyfill(self) -> None:
        assert preset_env_options(TARGETS, AddPolyfill.none) == {
            "modules": False,
            "targets": TARGETS,
        }

    def test_global_polyfill_uses_usage_mode(self) -> None:
        options = preset_env_options(TARGETS, AddPolyfill.global_)
        assert options["useBuiltIns"] == "usage"
        assert options["corejs"] == COREJS_OPTIONS

    def test_runtime_polyfill_does_not_touch_preset_env(self) -> None:
        assert "useBuiltIns" not in preset_env_options(TARGETS, AddPolyfill.runtime)


class TestMakeBabelLoader:
    """Tests for make_babel_loader()."""

    def test_production_prepends_preset_env(self) -> None:
        loader = make_babel_loader(
            BabelOptions(presets=["user-preset"]), TARGETS, AddPolyfill.global_, Env.production
        )

        assert loader.loader == "babel-loader"
        assert loader.options.presets[0] == [
            PRESET_ENV,
            preset_env_options(TARGETS, AddPolyfill.global_),
        ]
        assert loader.options.presets[1] == "user-preset"

    def test_development_skips_preset_env(self) -> None:
        loader = make_babel_loader(BabelOptions(), TARGETS, AddPolyfill.both, Env.development)

        assert PRESET_ENV not in _names(loader.options.presets)
        assert PLUGIN_TRANSFORM_RUNTIME not in _names(loader.options.plugins)

    def test_runtime_polyfill_adds_transform_runtime(self) -> None:
        loader = make_babel_loader(BabelOptions(), TARGETS, AddPolyfill.runtime, Env.production)

        assert loader.options.plugins == [[PLUGIN_TRANSFORM_RUNTIME, {"corejs": COREJS_OPTIONS}]]

    def test_react_in_development(self) -> None:
        loader = make_babel_loader(
            BabelOptions(presets=["user-preset"]),
            TARGETS,
            AddPolyfill.none,
            Env.development,
            with_react=True,
        )

        assert loader.options.presets[-1] == [PRESET_REACT, {"development": True}]
        assert loader.options.plugins == [PLUGIN_REACT_REFRESH]

    def test_react_in_production_has_no_refresh(self) -> None:
        loader = make_babel_loader(
            BabelOptions(), TARGETS, AddPolyfill.none, Env.production, with_react=True
        )

        assert _names(loader.options.presets) == [PRESET_ENV, PRESET_REACT]
        assert loader.options.presets[-1][1] == {"development": False}
        assert PLUGIN_REACT_REFRESH not in _names(loader.options.plugins)

    def test_user_preset_env_overrides_injected_one(self) -> None:
        user = BabelOptions(presets=[[PRESET_ENV, {"targets": "ie 11"}]])

        loader = make_babel_loader(user, TARGETS, AddPolyfill.global_, Env.production)

        assert loader.options.presets == [[PRESET_ENV, {"targets": "ie 11"}]]

    def test_source_type_defaults(self) -> None:
        loader = make_babel_loader(BabelOptions(), TARGETS, AddPolyfill.none, Env.production)
        assert loader.options.source_type == "unambiguous"


def test_babel_injections_without_react_or_runtime() -> None:
    injections = babel_injections(TARGETS, AddPolyfill.none, Env.production)
    assert [i.name for i in injections] == [PRESET_ENV]
