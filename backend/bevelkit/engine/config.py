"""Geometry configuration — constants shared by the path generators and layout helpers."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class GeometryConfig:
    """Tuning constants for path generation and layout."""

    # Corner cut angle used when a bevel omits one
    default_bevel_angle: float = 45.0

    # Decimal places kept in emitted path coordinates
    path_precision: int = 2

    # Content size assumed before the first measurement arrives
    fallback_content_width: float = 100.0
    fallback_content_height: float = 50.0

    # Drop shadow
    max_shadow_distance: float = 20.0


DEFAULT_CONFIG = GeometryConfig()
