"""Leaf-node geometry helpers. No engine imports."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np
from numpy.typing import NDArray

Point = tuple[float, float]

_DEFAULT_ANGLE = 45.0


@dataclass(frozen=True)
class BevelOffset:
    """Horizontal (x) and vertical (y) extent of a corner cut."""

    x: float = 0.0
    y: float = 0.0


def bevel_offset(size: float, angle: float | None = _DEFAULT_ANGLE) -> BevelOffset:
    """x = |size·cos(angle)|, y = |size·sin(angle)|. Angle in degrees."""
    radians = np.deg2rad(_DEFAULT_ANGLE if angle is None else angle)
    return BevelOffset(
        x=float(abs(size * np.cos(radians))),
        y=float(abs(size * np.sin(radians))),
    )


@dataclass(frozen=True)
class EdgeFrame:
    """Straight edge from ``start`` to ``end`` with its unit direction and normal.

    The normal is the direction rotated by +90°: (-sin θ, cos θ).
    """

    start: NDArray[np.float64]
    end: NDArray[np.float64]
    direction: NDArray[np.float64]
    normal: NDArray[np.float64]

    @classmethod
    def between(cls, x0: float, y0: float, x1: float, y1: float) -> EdgeFrame:
        theta = np.arctan2(y1 - y0, x1 - x0)
        return cls(
            start=np.array([x0, y0], dtype=np.float64),
            end=np.array([x1, y1], dtype=np.float64),
            direction=np.array([np.cos(theta), np.sin(theta)]),
            normal=np.array([-np.sin(theta), np.cos(theta)]),
        )

    def point_at(self, t: float, height: float = 0.0) -> NDArray[np.float64]:
        """Point at fraction ``t`` along the edge, raised ``height`` along the normal."""
        return self.start + (self.end - self.start) * t + height * self.normal


def as_point(vec: NDArray[np.float64]) -> Point:
    return (float(vec[0]), float(vec[1]))
