"""Tests for stepped edges — boundary offsets and the segment walk."""

import pytest

from bevelkit.engine.edges import (
    ZERO_OFFSET,
    edge_end_offset,
    edge_start_offset,
    stepped_edge_path,
    walk_stepped_edge,
)
from bevelkit.models.shape import EdgeStepConfig, StepSegment
from bevelkit.svg.serializer import to_path_data
from tests.conftest import TOP_NOTCH, TOP_TAB


def _steps(*segments: tuple[float, float, float]) -> EdgeStepConfig:
    return EdgeStepConfig(segments=tuple(StepSegment(start=s, end=e, height=h) for s, e, h in segments))


def _open(points) -> str:
    return to_path_data(points, closed=False)


# ─── Boundary offsets ────────────────────────────────────────────────────────


def test_offsets_without_steps_are_zero():
    assert edge_end_offset(0, 0, 100, 0, None) == ZERO_OFFSET
    assert edge_start_offset(0, 0, 100, 0, None) == ZERO_OFFSET
    assert edge_end_offset(0, 0, 100, 0, EdgeStepConfig()) == ZERO_OFFSET


def test_end_offset_follows_normal():
    off = edge_end_offset(0, 0, 100, 0, TOP_TAB.top)
    assert off.offset_x == pytest.approx(0)
    assert off.offset_y == pytest.approx(10)


def test_end_offset_ignores_inner_segments():
    assert edge_end_offset(0, 0, 100, 0, TOP_NOTCH.top) == ZERO_OFFSET


def test_start_offset_on_vertical_edge():
    off = edge_start_offset(100, 0, 100, 50, _steps((0, 0.5, 10)))
    assert off.offset_x == pytest.approx(-10)
    assert off.offset_y == pytest.approx(0, abs=1e-9)


def test_start_offset_needs_segment_at_zero():
    assert edge_start_offset(0, 0, 100, 0, TOP_TAB.top) == ZERO_OFFSET


def test_end_offset_uses_first_matching_segment():
    off = edge_end_offset(0, 0, 100, 0, _steps((0.8, 1, 5), (0.5, 1, 8)))
    assert off.offset_y == pytest.approx(5)


def test_offset_uses_absolute_height():
    off = edge_end_offset(0, 0, 100, 0, _steps((0.5, 1, -7)))
    assert off.offset_y == pytest.approx(7)


# ─── Walk ────────────────────────────────────────────────────────────────────


def test_walk_without_steps_reaches_end():
    walk = walk_stepped_edge(0, 0, 100, 0, None)
    assert _open(walk.points) == "M 100 0"
    assert walk.pos == 1
    assert walk.height == 0


def test_walk_single_notch():
    walk = walk_stepped_edge(0, 0, 100, 0, TOP_NOTCH.top)
    assert _open(walk.points) == "M 25 0 L 35 10 L 65 10 L 75 0 L 100 0"
    assert walk.height == 0


def test_walk_segment_reaching_end_holds_height():
    walk = walk_stepped_edge(0, 0, 100, 0, TOP_TAB.top)
    assert _open(walk.points) == "M 50 0 L 60 10 L 90 10"
    assert walk.pos == 1
    assert walk.height == pytest.approx(10)


def test_walk_segment_reaching_end_joins_bevel():
    walk = walk_stepped_edge(0, 0, 100, 0, TOP_TAB.top, bevel_start=(95.0, 10.0))
    assert _open(walk.points) == "M 50 0 L 60 10 L 95 10"


def test_walk_skips_empty_segments():
    walk = walk_stepped_edge(0, 0, 100, 0, _steps((0.6, 0.4, 10), (0.5, 0.5, 3)))
    assert _open(walk.points) == "M 100 0"


def test_walk_clamps_segment_range():
    walk = walk_stepped_edge(0, 0, 100, 0, _steps((-0.5, 0.5, 10)))
    assert _open(walk.points) == "M 10 10 L 40 10 L 50 0 L 100 0"


def test_walk_sorts_segments_by_start():
    walk = walk_stepped_edge(0, 0, 100, 0, _steps((0.6, 0.8, 5), (0.1, 0.3, 5)))
    assert _open(walk.points) == (
        "M 10 0 L 15 5 L 25 5 L 30 0 L 60 0 L 65 5 L 75 5 L 80 0 L 100 0"
    )


def test_walk_adjacent_segments_skip_gap_vertex():
    walk = walk_stepped_edge(0, 0, 100, 0, _steps((0, 0.5, 4), (0.5, 1, 4)))
    # The second segment starts where the first ended, so no flat run is emitted
    assert walk.points[0] == pytest.approx((4, 4))
    assert len(walk.points) == 5


def test_walk_vertical_edge():
    walk = walk_stepped_edge(100, 0, 100, 50, _steps((0.2, 0.8, 5)))
    assert _open(walk.points) == "M 100 10 L 95 15 L 95 35 L 100 40 L 100 50"


# ─── Path builder ────────────────────────────────────────────────────────────


def test_stepped_edge_path_includes_start():
    edge = stepped_edge_path(0, 0, 100, 0, TOP_NOTCH.top)
    assert edge.points[0] == (0.0, 0.0)
    assert edge.path == "M 0 0 L 25 0 L 35 10 L 65 10 L 75 0 L 100 0"


def test_stepped_edge_path_reports_end_offset():
    edge = stepped_edge_path(0, 0, 100, 0, TOP_TAB.top)
    assert edge.end_offset.offset_y == pytest.approx(10)


def test_stepped_edge_path_precision():
    edge = stepped_edge_path(0, 0, 10, 10, None)
    assert edge.to_path_data(precision=1) == "M 0 0 L 10 10"
