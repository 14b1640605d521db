from __future__ import annotations

"""Canonical 12-step reference scales.

These hand-tuned scales (Radix Colors "slate" and "blue") define the
lightness/chroma progression every generated scale follows. Seeds are
anchored onto them by :mod:`colorscale.builder`.
"""

from functools import lru_cache
from typing import Dict, Tuple

from .color_types import Color, parse_hex


STEPS = 12

_NEUTRAL: Dict[str, Tuple[str, ...]] = {
    "light": (
        "#fcfcfd", "#f9f9fb", "#f0f0f3", "#e8e8ec", "#e0e1e6", "#d9d9e0",
        "#cdced6", "#b9bbc6", "#8b8d98", "#80838d", "#60646c", "#1c2024",
    ),
    "dark": (
        "#111113", "#18191b", "#212225", "#272a2d", "#2e3135", "#363a3f",
        "#43484e", "#5a6169", "#696e77", "#777b84", "#b0b4ba", "#edeef0",
    ),
}

_ACCENT: Dict[str, Tuple[str, ...]] = {
    "light": (
        "#fbfdff", "#f4faff", "#e6f4fe", "#d5efff", "#c2e5ff", "#acd8fc",
        "#8ec8f6", "#5eb1ef", "#0090ff", "#0588f0", "#0d74ce", "#113264",
    ),
    "dark": (
        "#0d1520", "#111927", "#0d2847", "#003362", "#004074", "#104d87",
        "#205d9e", "#2870bd", "#0090ff", "#3b9eff", "#70b8ff", "#c2e6ff",
    ),
}


@lru_cache(maxsize=None)
def neutral_reference(appearance: str) -> Tuple[Color, ...]:
    """Canonical gray scale for ``"light"`` or ``"dark"``."""
    return tuple(parse_hex(h) for h in _NEUTRAL[appearance])


@lru_cache(maxsize=None)
def accent_reference(appearance: str) -> Tuple[Color, ...]:
    """Canonical accent scale for ``"light"`` or ``"dark"``."""
    return tuple(parse_hex(h) for h in _ACCENT[appearance])


__all__ = ["STEPS", "neutral_reference", "accent_reference"]
