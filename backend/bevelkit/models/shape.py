"""Shape configuration models — corner bevels and edge steps.

All models are frozen value objects. Field names are snake_case; the camelCase
aliases used by front-end callers (``bevelSize``, ``topLeft``…) are accepted on
input and emitted on the HTTP boundary.
"""

from __future__ import annotations

from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel

CORNERS = ("top_left", "top_right", "bottom_right", "bottom_left")
EDGES = ("top", "right", "bottom", "left")

_FROZEN = {"frozen": True, "alias_generator": to_camel, "populate_by_name": True}


class CornerBevel(BaseModel):
    """Diagonal cut replacing one right-angle corner. ``bevel_size == 0`` keeps it sharp."""

    model_config = _FROZEN

    bevel_size: float = Field(default=0.0, description="Length of the cut")
    bevel_angle: float | None = Field(default=45.0, description="Cut angle in degrees")

    @property
    def is_cut(self) -> bool:
        return self.bevel_size > 0


NO_BEVEL = CornerBevel()


class BevelConfig(BaseModel):
    model_config = _FROZEN

    top_left: CornerBevel | None = None
    top_right: CornerBevel | None = None
    bottom_right: CornerBevel | None = None
    bottom_left: CornerBevel | None = None

    def corner(self, name: str) -> CornerBevel:
        """Bevel for ``name``, falling back to a sharp corner."""
        return getattr(self, name, None) or NO_BEVEL


class StepSegment(BaseModel):
    """Outward notch over ``[start, end]`` of an edge (0 = first endpoint, 1 = second)."""

    model_config = _FROZEN

    start: float
    end: float
    height: float


class EdgeStepConfig(BaseModel):
    model_config = _FROZEN

    segments: tuple[StepSegment, ...] | None = None

    @property
    def has_segments(self) -> bool:
        return bool(self.segments)


NO_STEPS = EdgeStepConfig()


class StepConfig(BaseModel):
    model_config = _FROZEN

    top: EdgeStepConfig | None = None
    right: EdgeStepConfig | None = None
    bottom: EdgeStepConfig | None = None
    left: EdgeStepConfig | None = None

    def edge(self, name: str) -> EdgeStepConfig:
        """Step configuration for ``name``, falling back to a straight edge."""
        return getattr(self, name, None) or NO_STEPS


class ShapeConfig(BaseModel):
    model_config = _FROZEN

    bevel_config: BevelConfig = Field(default_factory=BevelConfig)
    steps_config: StepConfig = Field(default_factory=StepConfig)
