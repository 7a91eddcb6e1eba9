"""Built-in shape presets for buttons, cards and panels."""

from __future__ import annotations

from bevelkit.engine.registry import preset
from bevelkit.models.shape import (
    BevelConfig,
    CornerBevel,
    EdgeStepConfig,
    ShapeConfig,
    StepConfig,
    StepSegment,
)

# Asymmetric cut shared by every button size
_BUTTON_BEVELS = BevelConfig(
    top_left=CornerBevel(bevel_size=30, bevel_angle=45),
    top_right=CornerBevel(bevel_size=8, bevel_angle=45),
    bottom_right=CornerBevel(bevel_size=30, bevel_angle=45),
    bottom_left=CornerBevel(bevel_size=10, bevel_angle=45),
)


def _uniform(size: float) -> BevelConfig:
    corner = CornerBevel(bevel_size=size, bevel_angle=45)
    return BevelConfig(top_left=corner, top_right=corner, bottom_right=corner, bottom_left=corner)


@preset(name="button-sm", stroke_width="1px", tags={"button"}, description="Small button")
def button_sm() -> ShapeConfig:
    return ShapeConfig(bevel_config=_BUTTON_BEVELS)


@preset(name="button-md", stroke_width="2px", tags={"button"}, description="Medium button")
def button_md() -> ShapeConfig:
    return ShapeConfig(bevel_config=_BUTTON_BEVELS)


@preset(name="button-lg", stroke_width="2px", tags={"button"}, description="Large button")
def button_lg() -> ShapeConfig:
    return ShapeConfig(bevel_config=_BUTTON_BEVELS)


@preset(
    name="button-tabbed",
    stroke_width="2px",
    tags={"button"},
    description="Button with a raised tab along the right half of the top edge",
)
def button_tabbed() -> ShapeConfig:
    return ShapeConfig(
        bevel_config=_BUTTON_BEVELS,
        steps_config=StepConfig(
            top=EdgeStepConfig(segments=(StepSegment(start=0.5, end=1, height=30),)),
        ),
    )


@preset(name="card", stroke_width="1px", tags={"container"}, description="Evenly cut card")
def card() -> ShapeConfig:
    return ShapeConfig(bevel_config=_uniform(12))


@preset(name="panel", stroke_width="2px", tags={"container"}, description="Panel with a deep bottom-left cut")
def panel() -> ShapeConfig:
    corner = CornerBevel(bevel_size=16, bevel_angle=45)
    return ShapeConfig(
        bevel_config=BevelConfig(
            top_left=corner,
            top_right=corner,
            bottom_right=corner,
            bottom_left=CornerBevel(bevel_size=32, bevel_angle=45),
        )
    )
