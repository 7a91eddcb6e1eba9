"""State styles — per-slot CSS properties for default/hover/active/disabled states.

Theme values are looked up through an injected ``StyleResolver`` so the
geometry core never depends on a global theme.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Protocol

from bevelkit.models.styles import ElementStyleConfig, StateStyles, StyleDict

logger = logging.getLogger(__name__)

SLOTS = ("root", "background", "shadow", "border", "content")

# Prefix marking a theme token in a style value, e.g. "$primary"
TOKEN_PREFIX = "$"


class StyleResolver(Protocol):
    def resolve(self, token: str) -> str | None: ...


class MappingStyleResolver:
    """Resolves tokens from a plain mapping (``{"primary": "#0ff"}`` answers ``$primary``)."""

    def __init__(self, tokens: Mapping[str, str] | None = None) -> None:
        self._tokens = dict(tokens or {})

    def resolve(self, token: str) -> str | None:
        return self._tokens.get(token.removeprefix(TOKEN_PREFIX))


def current_state_styles(
    styles: StateStyles | None,
    is_hovered: bool = False,
    is_active: bool = False,
    disabled: bool = False,
) -> StyleDict:
    """Default styles overlaid with the winning state: disabled > active > hover."""
    styles = styles or StateStyles()
    base = dict(styles.default or {})

    if disabled and styles.disabled:
        return {**base, **styles.disabled}
    if is_active and styles.active:
        return {**base, **styles.active}
    if is_hovered and styles.hover:
        return {**base, **styles.hover}
    return base


def process_all_styles(
    config: ElementStyleConfig | None,
    is_hovered: bool = False,
    is_active: bool = False,
    disabled: bool = False,
) -> dict[str, StyleDict]:
    """Resolve the current state for every slot."""
    config = config or ElementStyleConfig()
    return {
        slot: current_state_styles(getattr(config, slot), is_hovered, is_active, disabled)
        for slot in SLOTS
    }


def resolve_style_tokens(styles: StyleDict, resolver: StyleResolver | None) -> StyleDict:
    """Replace ``$token`` values with what ``resolver`` returns; unknown tokens are kept."""
    if resolver is None:
        return dict(styles)

    resolved: StyleDict = {}
    for prop, value in styles.items():
        if isinstance(value, str) and value.startswith(TOKEN_PREFIX):
            replacement = resolver.resolve(value)
            if replacement is None:
                logger.debug("Unresolved style token %s for %s", value, prop)
            else:
                value = replacement
        resolved[prop] = value
    return resolved
