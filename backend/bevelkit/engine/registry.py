"""Preset registry — every named shape is a factory function registered via decorator.

Usage:
    @preset(name="card", stroke_width="1px", tags={"container"})
    def card() -> ShapeConfig:
        return ShapeConfig(bevel_config=...)

Adding a new preset = writing one decorated function. Nothing else changes.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Callable

from bevelkit.models.shape import ShapeConfig

logger = logging.getLogger(__name__)


@dataclass
class PresetSpec:
    name: str
    fn: Callable[[], ShapeConfig]
    stroke_width: str | float = 0
    tags: set[str] = field(default_factory=set)
    description: str = ""

    def build(self) -> ShapeConfig:
        return self.fn()


class PresetRegistry:
    """Singleton registry of all shape presets."""

    def __init__(self) -> None:
        self._presets: dict[str, PresetSpec] = {}

    def register(self, spec: PresetSpec) -> None:
        if spec.name in self._presets:
            raise ValueError(f"Duplicate preset name: {spec.name}")
        self._presets[spec.name] = spec
        logger.debug("Registered preset %s", spec.name)

    def get(self, name: str) -> PresetSpec:
        return self._presets[name]

    def with_tag(self, tag: str) -> list[PresetSpec]:
        return sorted((s for s in self._presets.values() if tag in s.tags), key=lambda s: s.name)

    def all(self) -> list[PresetSpec]:
        return sorted(self._presets.values(), key=lambda s: s.name)

    @property
    def count(self) -> int:
        return len(self._presets)


# Module-level singleton
_registry = PresetRegistry()


def get_registry() -> PresetRegistry:
    return _registry


def preset(
    *,
    name: str,
    stroke_width: str | float = 0,
    tags: set[str] | None = None,
    description: str = "",
):
    """Decorator to register a preset factory."""

    def decorator(fn: Callable[[], ShapeConfig]):
        spec = PresetSpec(
            name=name,
            fn=fn,
            stroke_width=stroke_width,
            tags=tags or set(),
            description=description,
        )
        _registry.register(spec)
        return fn

    return decorator
