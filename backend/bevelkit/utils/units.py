"""CSS length helpers — stroke-width normalization to pixels. No engine imports."""

from __future__ import annotations

import logging
import math
import re

logger = logging.getLogger(__name__)

# 1em = 1rem = 16px, 1pt ≈ 1.333px, 100% = 1px
EM_PX = 16.0
PT_PX = 1.333
PERCENT_BASE = 100.0

STROKE_KEYWORDS = {
    "thin": 1.0,
    "medium": 3.0,
    "thick": 5.0,
    "none": 0.0,
    "hidden": 0.0,
}

# Leading number, read the way parseFloat reads it ("1.5px" → 1.5)
_NUMBER_PREFIX_RE = re.compile(r"^[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


def _pixels(number: float, value: object) -> float:
    if not math.isfinite(number):
        logger.debug("Non-finite stroke width %r", value)
        return 0.0
    return max(0.0, number)


def stroke_width_pixels(value: str | float | int | None) -> float:
    """Normalize a CSS-like stroke width to a non-negative pixel count.

    Numbers are pixels; strings may carry ``px``, ``em``/``rem`` (×16), ``pt``
    (×1.333) or ``%`` (/100), or be one of the keywords ``thin``, ``medium``,
    ``thick``, ``none``, ``hidden``. Units are case-sensitive; an unknown unit
    keeps the bare number. Anything unparseable or non-finite yields 0.
    """
    if value is None or isinstance(value, bool):
        return 0.0

    if isinstance(value, (int, float)):
        return _pixels(float(value), value)

    if not isinstance(value, str):
        logger.debug("Unsupported stroke width type %s", type(value).__name__)
        return 0.0

    trimmed = value.strip()
    if not trimmed:
        return 0.0

    match = _NUMBER_PREFIX_RE.match(trimmed)
    if match:
        number = float(match.group(0))
        unit = trimmed[match.end():].strip()
        if unit in ("em", "rem"):
            number *= EM_PX
        elif unit == "pt":
            number *= PT_PX
        elif unit == "%":
            number /= PERCENT_BASE
        # "px", no unit and unknown units keep the number
        return _pixels(number, value)

    width = STROKE_KEYWORDS.get(trimmed.lower())
    if width is None:
        logger.debug("Unparseable stroke width %r", value)
        return 0.0
    return width
