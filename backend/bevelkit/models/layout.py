"""Layout and shadow models — plain numeric results consumed by rendering code."""

from __future__ import annotations

from typing import Literal, Union

from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel

_FROZEN = {"frozen": True, "alias_generator": to_camel, "populate_by_name": True}


class Padding(BaseModel):
    model_config = _FROZEN

    padding_top: float = 0.0
    padding_right: float = 0.0
    padding_bottom: float = 0.0
    padding_left: float = 0.0
    padding: float = 0.0


class StepBounds(BaseModel):
    """Per-edge maximum step height (how far the shape reaches past its base rectangle)."""

    model_config = _FROZEN

    top: float = 0.0
    right: float = 0.0
    bottom: float = 0.0
    left: float = 0.0


class Dimensions(BaseModel):
    model_config = _FROZEN

    width: float = 0.0
    height: float = 0.0


class InnerRect(BaseModel):
    model_config = _FROZEN

    x: float = 0.0
    y: float = 0.0
    width: float = 0.0
    height: float = 0.0


class Rect(BaseModel):
    """Client rectangle of an element (same fields as a DOMRect)."""

    model_config = _FROZEN

    x: float = 0.0
    y: float = 0.0
    width: float = 0.0
    height: float = 0.0

    @property
    def center_x(self) -> float:
        return self.x + self.width / 2

    @property
    def center_y(self) -> float:
        return self.y + self.height / 2


class Viewport(BaseModel):
    model_config = _FROZEN

    width: float = 1920.0
    height: float = 1080.0


class ShadowOffset(BaseModel):
    model_config = _FROZEN

    x: int = 0
    y: int = 0


class LineElement(BaseModel):
    """One straight segment of a path, ready to render as an SVG ``<line>``."""

    model_config = _FROZEN

    x1: float
    y1: float
    x2: float
    y2: float
    key: str


# Shadow reference points

class PointTarget(BaseModel):
    model_config = _FROZEN

    x: float
    y: float


class ElementTarget(BaseModel):
    model_config = _FROZEN

    element: Rect


class PercentTarget(BaseModel):
    model_config = _FROZEN

    percent_x: float = Field(..., description="Fraction of viewport width (0-1)")
    percent_y: float = Field(..., description="Fraction of viewport height (0-1)")


ShadowTarget = Union[Literal["viewportCenter"], PointTarget, ElementTarget, PercentTarget]
