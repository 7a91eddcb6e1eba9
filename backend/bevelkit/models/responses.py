"""API response models."""

from __future__ import annotations

from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel

from bevelkit.models.layout import InnerRect, Padding, ShadowOffset, StepBounds
from bevelkit.models.shape import ShapeConfig

_CAMEL = {"alias_generator": to_camel, "populate_by_name": True}


class HealthResponse(BaseModel):
    model_config = _CAMEL

    status: str = "ok"
    version: str = "0.1.0"
    presets_registered: int = 0


class PanelResponse(BaseModel):
    model_config = _CAMEL

    fill_path: str
    shape_path: str
    padding: Padding
    step_bounds: StepBounds
    inner_rect: InnerRect
    shape_transform: str
    border_view_box: str
    stroke_width: float = 0.0
    bounds: tuple[float, float, float, float] = (0.0, 0.0, 0.0, 0.0)
    area: float = 0.0


class ShadowResponse(BaseModel):
    offset: ShadowOffset
    filter: str


class PresetResponse(BaseModel):
    model_config = _CAMEL

    name: str
    description: str = ""
    tags: list[str] = Field(default_factory=list)
    stroke_width: str | float = 0
    shape: ShapeConfig
