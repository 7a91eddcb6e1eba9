"""Tests for the preset registry and the built-in presets."""

import pytest

import bevelkit.engine.presets  # noqa: F401  (registers the built-in presets)
from bevelkit.engine.registry import PresetRegistry, PresetSpec, get_registry
from bevelkit.models.shape import BevelConfig, ShapeConfig


def _plain() -> ShapeConfig:
    return ShapeConfig()


def test_register_and_get():
    reg = PresetRegistry()
    spec = PresetSpec(name="plain", fn=_plain)
    reg.register(spec)
    assert reg.get("plain") is spec
    assert reg.count == 1


def test_duplicate_name_rejected():
    reg = PresetRegistry()
    reg.register(PresetSpec(name="plain", fn=_plain))
    with pytest.raises(ValueError):
        reg.register(PresetSpec(name="plain", fn=_plain))


def test_unknown_name():
    with pytest.raises(KeyError):
        PresetRegistry().get("missing")


def test_with_tag_sorted():
    reg = PresetRegistry()
    reg.register(PresetSpec(name="b", fn=_plain, tags={"x"}))
    reg.register(PresetSpec(name="a", fn=_plain, tags={"x", "y"}))
    reg.register(PresetSpec(name="c", fn=_plain, tags={"y"}))
    assert [s.name for s in reg.with_tag("x")] == ["a", "b"]
    assert [s.name for s in reg.all()] == ["a", "b", "c"]


def test_builtin_presets_registered():
    names = {s.name for s in get_registry().all()}
    assert {"button-sm", "button-md", "button-lg", "button-tabbed", "card", "panel"} <= names


def test_button_presets_share_bevels():
    registry = get_registry()
    shapes = [registry.get(n).build() for n in ("button-sm", "button-md", "button-lg")]
    assert shapes[0].bevel_config == shapes[1].bevel_config == shapes[2].bevel_config
    assert shapes[0].bevel_config.corner("top_left").bevel_size == 30


def test_tabbed_button_has_top_step():
    shape = get_registry().get("button-tabbed").build()
    segments = shape.steps_config.edge("top").segments
    assert len(segments) == 1
    assert (segments[0].start, segments[0].end, segments[0].height) == (0.5, 1, 30)


def test_container_tag():
    assert [s.name for s in get_registry().with_tag("container")] == ["card", "panel"]


def test_card_is_uniform():
    bevels: BevelConfig = get_registry().get("card").build().bevel_config
    sizes = {bevels.corner(c).bevel_size for c in ("top_left", "top_right", "bottom_right", "bottom_left")}
    assert sizes == {12}
