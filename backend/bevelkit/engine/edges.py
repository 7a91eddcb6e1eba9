"""Stepped edges — boundary offsets and the segment walk that draws notches.

A step raises part of an edge by ``height`` along the edge normal. The walk
emits, per segment: a flat run up to the segment start, a 45° rise onto the
plateau, the plateau itself and a 45° fall back to the base line. A segment
that reaches the end of the edge either holds its raised height or, when the
caller supplies the entry point of the adjoining bevel, runs straight into it.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from functools import reduce
from typing import Callable

import numpy as np
from numpy.typing import NDArray

from bevelkit.engine.config import DEFAULT_CONFIG
from bevelkit.models.shape import EdgeStepConfig, StepSegment
from bevelkit.svg.serializer import to_path_data
from bevelkit.utils.geometry import EdgeFrame, Point, as_point

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Offset:
    """Displacement along an edge normal."""

    offset_x: float = 0.0
    offset_y: float = 0.0


ZERO_OFFSET = Offset()


def _segments(step_config: EdgeStepConfig | None) -> tuple[StepSegment, ...]:
    if step_config is None or not step_config.has_segments:
        return ()
    return step_config.segments


def _boundary_offset(
    x0: float,
    y0: float,
    x1: float,
    y1: float,
    step_config: EdgeStepConfig | None,
    touches: Callable[[StepSegment], bool],
) -> Offset:
    segments = _segments(step_config)
    if not segments:
        return ZERO_OFFSET

    segment = next((s for s in segments if touches(s)), None)
    if segment is None:
        return ZERO_OFFSET

    normal = EdgeFrame.between(x0, y0, x1, y1).normal
    height = abs(segment.height)
    return Offset(offset_x=float(height * normal[0]), offset_y=float(height * normal[1]))


def edge_end_offset(
    x0: float, y0: float, x1: float, y1: float, step_config: EdgeStepConfig | None
) -> Offset:
    """How far a step ending exactly at position 1 lifts the edge's end point."""
    return _boundary_offset(x0, y0, x1, y1, step_config, lambda s: s.end == 1)


def edge_start_offset(
    x0: float, y0: float, x1: float, y1: float, step_config: EdgeStepConfig | None
) -> Offset:
    """How far a step starting exactly at position 0 lifts the edge's start point."""
    return _boundary_offset(x0, y0, x1, y1, step_config, lambda s: s.start == 0)


# ─── Segment walk ────────────────────────────────────────────────────────────


@dataclass(frozen=True)
class EdgeWalk:
    """Accumulator of the walk: emitted vertices, position reached and current lift."""

    points: tuple[Point, ...] = ()
    pos: float = 0.0
    height: float = 0.0


def _clamp01(value: float) -> float:
    return max(0.0, min(1.0, value))


def _advance(
    frame: EdgeFrame, bevel_start: Point | None
) -> Callable[[EdgeWalk, StepSegment], EdgeWalk]:
    def step(walk: EdgeWalk, segment: StepSegment) -> EdgeWalk:
        start = _clamp01(segment.start)
        end = _clamp01(segment.end)
        if start >= end:
            logger.debug("Skipping empty step segment [%s, %s]", segment.start, segment.end)
            return walk

        emitted: list[Point] = []
        base: NDArray[np.float64] = frame.point_at(start, walk.height)
        if walk.pos < start:
            emitted.append(as_point(base))

        rise = abs(segment.height)
        emitted.append(as_point(base + rise * frame.direction + rise * frame.normal))

        if end == 1 and bevel_start is not None:
            emitted.append(bevel_start)
            height = rise
        else:
            foot = frame.point_at(end)
            emitted.append(as_point(foot - rise * frame.direction + rise * frame.normal))
            if end < 1:
                emitted.append(as_point(foot))
                height = 0.0
            else:
                height = rise

        return EdgeWalk(points=walk.points + tuple(emitted), pos=end, height=height)

    return step


def walk_stepped_edge(
    x0: float,
    y0: float,
    x1: float,
    y1: float,
    step_config: EdgeStepConfig | None,
    bevel_start: Point | None = None,
) -> EdgeWalk:
    """Fold the edge's segments (ascending ``start``) into the vertices after ``(x0, y0)``.

    The returned walk always ends on the edge's last vertex: either the true
    end point (raised by any held height), the bevel entry, or the far corner
    of a plateau that reaches position 1.
    """
    frame = EdgeFrame.between(x0, y0, x1, y1)
    ordered = sorted(_segments(step_config), key=lambda s: s.start)

    walk = reduce(_advance(frame, bevel_start), ordered, EdgeWalk())

    if walk.pos < 1:
        final = as_point(frame.point_at(1.0, walk.height))
        walk = EdgeWalk(points=walk.points + (final,), pos=1.0, height=walk.height)
    return walk


@dataclass(frozen=True)
class EdgePath:
    """Open polyline for one edge plus the lift at its end."""

    points: tuple[Point, ...]
    end_offset: Offset

    def to_path_data(self, precision: int = DEFAULT_CONFIG.path_precision) -> str:
        return to_path_data(self.points, closed=False, precision=precision)

    @property
    def path(self) -> str:
        return self.to_path_data()


def stepped_edge_path(
    x0: float,
    y0: float,
    x1: float,
    y1: float,
    step_config: EdgeStepConfig | None,
    bevel_start: Point | None = None,
) -> EdgePath:
    """Stepped polyline from ``(x0, y0)`` to ``(x1, y1)``, starting point included."""
    walk = walk_stepped_edge(x0, y0, x1, y1, step_config, bevel_start)
    return EdgePath(
        points=((float(x0), float(y0)),) + walk.points,
        end_offset=edge_end_offset(x0, y0, x1, y1, step_config),
    )
