"""API request models."""

from __future__ import annotations

from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel

from bevelkit.models.layout import Rect, ShadowTarget, Viewport
from bevelkit.models.shape import BevelConfig, StepConfig
from bevelkit.models.styles import ElementStyleConfig

_CAMEL = {"alias_generator": to_camel, "populate_by_name": True}


class PanelRequest(BaseModel):
    model_config = _CAMEL

    width: float = Field(..., description="Outer box width in layout pixels")
    height: float = Field(..., description="Outer box height in layout pixels")
    bevel_config: BevelConfig = Field(default_factory=BevelConfig)
    steps_config: StepConfig = Field(default_factory=StepConfig)
    stroke_width: str | float | None = Field(default=0, description="CSS stroke width (e.g. '2px', 'thin', 3)")
    precision: int | None = Field(default=None, description="Decimals in path coordinates (server default if unset)")


class PanelSvgRequest(PanelRequest):
    style_config: ElementStyleConfig | None = Field(default=None, description="Per-slot state styles")
    theme: dict[str, str] = Field(default_factory=dict, description="Values for $token style references")
    is_hovered: bool = False
    is_active: bool = False
    disabled: bool = False
    title: str = ""


class ShadowRequest(BaseModel):
    model_config = _CAMEL

    element_rect: Rect = Field(..., description="Client rectangle of the element")
    viewport: Viewport = Field(default_factory=Viewport)
    max_shadow_distance: float | None = Field(default=None, description="Largest offset in px (server default if unset)")
    target: ShadowTarget = Field(default="viewportCenter", description="Point the shadow leans away from")
