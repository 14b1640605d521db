from __future__ import annotations

"""Translucent equivalents of solid colors.

Given a solid color and the background it sits on, find the most transparent
color that, alpha-composited over that background, reproduces the solid
color. The solver works on the integer grid browsers composite on, so the
round trip is exact up to one unit per channel.
"""

import math
from typing import Optional, Tuple

from .color_types import Color, format_p3
from .engine import RGB


RGBA = Tuple[float, float, float, float]


def blend_alpha(foreground: float, alpha: float, background: float, round_: bool = True) -> float:
    """Composite one channel the way Figma and browsers do (each term rounded)."""
    if round_:
        return _round(background * (1 - alpha)) + _round(foreground * alpha)
    return background * (1 - alpha) + foreground * alpha


def get_alpha_color(
    target_rgb: RGB,
    background_rgb: RGB,
    rgb_precision: int,
    alpha_precision: int,
    target_alpha: Optional[float] = None,
) -> RGBA:
    """Solve for (r, g, b, a) in [0, 1] that composites to ``target_rgb``.

    Parameters
    ----------
    target_rgb, background_rgb:
        Gamma-encoded channels in [0, 1] of the same RGB space.
    rgb_precision, alpha_precision:
        Grid sizes channels and alpha are quantised to.
    target_alpha:
        Force this alpha instead of the smallest one that works.
    """
    targets = [_round(c * rgb_precision) for c in target_rgb]
    backgrounds = [_round(c * rgb_precision) for c in background_rgb]

    # Each channel moves towards its own extreme: white where the target is
    # lighter than the background, black where it is darker.
    extremes = [rgb_precision if t > b else 0 for t, b in zip(targets, backgrounds)]
    alphas = [_channel_alpha(t, b, e) for t, b, e in zip(targets, backgrounds, extremes)]

    if target_alpha is None and len(set(extremes)) == 1 and alphas[0] == alphas[1] == alphas[2]:
        v = extremes[0] / rgb_precision
        return (v, v, v, alphas[0])

    max_alpha = target_alpha if target_alpha is not None else max(alphas)
    A = _clamp(math.ceil(max_alpha * alpha_precision), alpha_precision) / alpha_precision
    if A == 0:
        return (0.0, 0.0, 0.0, 0.0)

    r, g, b = (
        _solve_channel(t, bg, A, rgb_precision) / rgb_precision for t, bg in zip(targets, backgrounds)
    )
    return (r, g, b, A)


def alpha_hex(target: Color, background: Color, target_alpha: Optional[float] = None) -> str:
    """Translucent sRGB equivalent of ``target`` over ``background`` as #rrggbbaa."""
    r, g, b, a = get_alpha_color(_hex_grid(target), _hex_grid(background), 255, 255, target_alpha)
    r_i, g_i, b_i, a_i = (_round(v * 255) for v in (r, g, b, a))
    return f"#{r_i:02x}{g_i:02x}{b_i:02x}{a_i:02x}"


def alpha_p3(target: RGB, background: RGB, target_alpha: Optional[float] = None) -> str:
    """Translucent Display P3 equivalent as ``color(display-p3 r g b / a)``.

    ``target`` and ``background`` are gamma-encoded P3 coordinates.
    """
    r, g, b, a = get_alpha_color(target, background, 255, 1000, target_alpha)
    return format_p3((r, g, b), a)


def _channel_alpha(target: int, background: int, extreme: int) -> float:
    if target == background:
        return 0.0
    return (target - background) / (extreme - background)


def _solve_channel(target: int, background: int, alpha: float, precision: int) -> int:
    exact = (target - background * (1 - alpha)) / alpha
    nearest = _round(exact)
    # Stay within one unit of the exact composite, then prefer the value whose
    # rounded composite hits the target.
    candidates = [
        c for c in (nearest - 1, nearest, nearest + 1) if 0 <= c <= precision and abs(c - exact) * alpha <= 1
    ]
    if not candidates:
        return int(_clamp(nearest, precision))
    return min(candidates, key=lambda c: (abs(blend_alpha(c, alpha, background) - target), abs(c - exact)))


def _hex_grid(color: Color) -> RGB:
    # Solve against the bytes the hex output shows.
    return tuple(v / 255 for v in color.to_srgb255())  # type: ignore[return-value]


def _round(x: float) -> int:
    # Half-up like JavaScript Math.round; Python's round() is half-even.
    return int(math.floor(x + 0.5))


def _clamp(n: float, upper: int) -> float:
    if math.isnan(n):
        return 0
    return min(upper, max(0, n))


__all__ = ["RGBA", "blend_alpha", "get_alpha_color", "alpha_hex", "alpha_p3"]
