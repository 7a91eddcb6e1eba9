"""Per-slot state style models (CSS property dicts keyed by component state)."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel

StyleDict = dict[str, Any]


class StateStyles(BaseModel):
    default: StyleDict | None = None
    hover: StyleDict | None = None
    focus: StyleDict | None = None
    active: StyleDict | None = None
    disabled: StyleDict | None = None


class ElementStyleConfig(BaseModel):
    root: StateStyles | None = None
    background: StateStyles | None = None
    shadow: StateStyles | None = None
    border: StateStyles | None = None
    content: StateStyles | None = None
