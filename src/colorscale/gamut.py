from __future__ import annotations

"""Gamut handling utilities for OKLCH colors.

Colors are mapped into sRGB or Display P3 by holding lightness and hue fixed
and binary-searching chroma down to the gamut boundary.
"""

from typing import Tuple

from .engine import OKLCH, RGB, ColorEngine, RGBSpace


GAMUT_EPSILON = 1e-6


def to_gamut_safe(
    engine: ColorEngine,
    L: float,
    C: float,
    h: float,
    space: RGBSpace = "srgb",
    max_iter: int = 24,
) -> Tuple[float, float, float, OKLCH]:
    """Convert OKLCH to in-gamut RGB, reducing C until within gamut.

    Returns (r, g, b, (L_adj, C_adj, h_adj)) where r, g, b are gamma-encoded
    values in [0, 1] of the requested space.
    """
    h_norm = engine.normalize_hue(h)
    if L >= 1.0:
        return 1.0, 1.0, 1.0, (1.0, 0.0, h_norm)
    if L <= 0.0:
        return 0.0, 0.0, 0.0, (0.0, 0.0, h_norm)

    C_curr = max(0.0, C)
    if not in_gamut(engine.oklch_to_linear_rgb(L, C_curr, h_norm, space)):
        lo, hi = 0.0, C_curr
        for _ in range(max_iter):
            mid = (lo + hi) / 2.0
            if in_gamut(engine.oklch_to_linear_rgb(L, mid, h_norm, space)):
                lo = mid
            else:
                hi = mid
        C_curr = lo

    r, g, b = engine.oklch_to_rgb(L, C_curr, h_norm, space)
    return _clip01(r), _clip01(g), _clip01(b), (L, C_curr, h_norm)


def in_gamut(rgb: RGB, eps: float = GAMUT_EPSILON) -> bool:
    return all(-eps <= c <= 1.0 + eps for c in rgb)


def _clip01(x: float) -> float:
    return max(0.0, min(1.0, x))


__all__ = ["GAMUT_EPSILON", "to_gamut_safe", "in_gamut"]
