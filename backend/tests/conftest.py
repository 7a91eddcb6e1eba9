"""Shared test fixtures."""

from __future__ import annotations

import pytest

from bevelkit.models.shape import (
    BevelConfig,
    CornerBevel,
    EdgeStepConfig,
    StepConfig,
    StepSegment,
)


# Sample shape configurations

TOP_LEFT_BEVEL = BevelConfig(top_left=CornerBevel(bevel_size=10, bevel_angle=45))

BUTTON_BEVELS = BevelConfig(
    top_left=CornerBevel(bevel_size=30, bevel_angle=45),
    top_right=CornerBevel(bevel_size=8, bevel_angle=45),
    bottom_right=CornerBevel(bevel_size=30, bevel_angle=45),
    bottom_left=CornerBevel(bevel_size=10, bevel_angle=45),
)

UNIFORM_BEVELS = BevelConfig(
    top_left=CornerBevel(bevel_size=10),
    top_right=CornerBevel(bevel_size=10),
    bottom_right=CornerBevel(bevel_size=10),
    bottom_left=CornerBevel(bevel_size=10),
)

TOP_NOTCH = StepConfig(
    top=EdgeStepConfig(segments=(StepSegment(start=0.25, end=0.75, height=10),)),
)

TOP_TAB = StepConfig(
    top=EdgeStepConfig(segments=(StepSegment(start=0.5, end=1, height=10),)),
)

ALL_EDGES_NOTCHED = StepConfig(
    top=EdgeStepConfig(segments=(StepSegment(start=0.2, end=0.4, height=6),)),
    right=EdgeStepConfig(segments=(StepSegment(start=0.3, end=0.6, height=4),)),
    bottom=EdgeStepConfig(
        segments=(
            StepSegment(start=0.6, end=0.8, height=3),
            StepSegment(start=0.1, end=0.3, height=5),
        )
    ),
    left=EdgeStepConfig(segments=(StepSegment(start=0.4, end=0.5, height=2),)),
)

RECT_PATH = "M 0 0 L 100 0 L 100 50 L 0 50 Z"


@pytest.fixture
def top_left_bevel() -> BevelConfig:
    return TOP_LEFT_BEVEL


@pytest.fixture
def button_bevels() -> BevelConfig:
    return BUTTON_BEVELS


@pytest.fixture
def top_notch() -> StepConfig:
    return TOP_NOTCH


@pytest.fixture
def all_edges_notched() -> StepConfig:
    return ALL_EDGES_NOTCHED
