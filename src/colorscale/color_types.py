from __future__ import annotations

"""Core color types used by the colorscale library.

This module defines the immutable :class:`Color` value, hex parsing and
formatting, and the conversion into the Display P3 wide gamut.
"""

import math
import re
from dataclasses import dataclass, replace
from typing import Tuple

from .engine import OKLAB, OKLCH, RGB, ColorEngine, DefaultColorEngine, oklch_to_oklab
from .errors import InvalidColorFormat
from .gamut import to_gamut_safe


SRGB = Tuple[float, float, float]

_HEX_RE = re.compile(r"^#?(?:[0-9a-fA-F]{3}|[0-9a-fA-F]{6}|[0-9a-fA-F]{8})$")
_DEFAULT_ENGINE = DefaultColorEngine()


def _clamp01(x: float) -> float:
    return max(0.0, min(1.0, x))


def _engine(engine: ColorEngine | None) -> ColorEngine:
    return _DEFAULT_ENGINE if engine is None else engine


@dataclass(frozen=True)
class Color:
    """Concrete color representation in OKLCH and sRGB.

    Attributes
    ----------
    oklch:
        Tuple of (L, C, h). L is in [0, 1], C is non-negative,
        and h is in [0, 360). This may lie outside sRGB; it is the
        point that wide-gamut output is derived from.
    srgb:
        Gamma-encoded, gamut-mapped (r, g, b) in [0, 1] sRGB space.
    alpha:
        Opacity in [0, 1].
    """

    oklch: OKLCH
    srgb: SRGB
    alpha: float = 1.0

    def to_hex(self) -> str:
        """Return the canonical lowercase hex representation."""
        return format_hex(self)

    def to_srgb(self) -> SRGB:
        """Return sRGB representation as (r, g, b) in [0, 1]."""
        return self.srgb

    def to_srgb255(self) -> Tuple[int, int, int]:
        r, g, b = self.srgb
        return (int(round(r * 255)), int(round(g * 255)), int(round(b * 255)))

    def to_linear_srgb(self) -> RGB:
        """Return linear-light sRGB of the gamut-mapped color."""
        r, g, b = self.srgb
        return (_to_linear(r), _to_linear(g), _to_linear(b))

    def to_oklch(self) -> OKLCH:
        """Return OKLCH representation as (L, C, h)."""
        return self.oklch

    def to_oklab(self) -> OKLAB:
        return oklch_to_oklab(*self.oklch)

    def to_p3(self, engine: ColorEngine | None = None) -> RGB:
        """Return gamma-encoded Display P3 (r, g, b), gamut-mapped into P3."""
        L, C, h = self.oklch
        r, g, b, _ = to_gamut_safe(_engine(engine), L, C, h, space="p3")
        return (r, g, b)

    def with_alpha(self, alpha: float) -> "Color":
        return replace(self, alpha=_clamp01(alpha))

    @classmethod
    def from_oklch(
        cls,
        L: float,
        C: float,
        h: float,
        alpha: float = 1.0,
        engine: ColorEngine | None = None,
    ) -> "Color":
        """Create a Color from OKLCH, gamut-mapping its sRGB form.

        Parameters
        ----------
        L, C, h:
            OKLCH coordinates. L is clamped into [0, 1], h is in degrees.
        engine:
            ColorEngine used for conversion. If None, DefaultColorEngine is used.
        """
        eng = _engine(engine)
        L = _clamp01(L)
        C = max(0.0, C)
        h = eng.normalize_hue(h)
        r, g, b, _ = to_gamut_safe(eng, L, C, h, space="srgb")
        return cls(oklch=(L, C, h), srgb=(r, g, b), alpha=_clamp01(alpha))

    @classmethod
    def from_srgb(
        cls,
        r: float,
        g: float,
        b: float,
        alpha: float = 1.0,
        engine: ColorEngine | None = None,
    ) -> "Color":
        """Create a Color from sRGB values in [0, 1]."""
        for name, v in (("r", r), ("g", g), ("b", b), ("alpha", alpha)):
            if not (0.0 <= v <= 1.0):
                raise ValueError(f"{name} must be in [0, 1].")
        oklch = _engine(engine).rgb_to_oklch(r, g, b, "srgb")
        return cls(oklch=oklch, srgb=(r, g, b), alpha=alpha)

    @classmethod
    def from_hex(cls, value: str, engine: ColorEngine | None = None) -> "Color":
        """Create a Color from #rgb, #rrggbb or #rrggbbaa."""
        return parse_hex(value, engine)


def parse_hex(value: str, engine: ColorEngine | None = None) -> Color:
    """Parse a 3/6/8-digit hex string (leading '#' optional).

    Raises
    ------
    InvalidColorFormat
        If ``value`` is not a string or not a well-formed hex color.
    """
    if not isinstance(value, str):
        raise InvalidColorFormat(value, "expected a string")
    s = value.strip()
    if not _HEX_RE.match(s):
        raise InvalidColorFormat(value, "expected #rgb, #rrggbb or #rrggbbaa")
    s = s.lstrip("#").lower()
    if len(s) == 3:
        s = "".join(ch * 2 for ch in s)
    r = int(s[0:2], 16) / 255.0
    g = int(s[2:4], 16) / 255.0
    b = int(s[4:6], 16) / 255.0
    a = int(s[6:8], 16) / 255.0 if len(s) == 8 else 1.0
    return Color.from_srgb(r, g, b, a, engine)


def format_hex(color: Color) -> str:
    """Format as lowercase #rrggbb, or #rrggbbaa when not fully opaque."""
    r_i, g_i, b_i = (int(round(_clamp01(c) * 255)) for c in color.srgb)
    a_i = int(round(_clamp01(color.alpha) * 255))
    if a_i == 255:
        return f"#{r_i:02x}{g_i:02x}{b_i:02x}"
    return f"#{r_i:02x}{g_i:02x}{b_i:02x}{a_i:02x}"


def to_wide_gamut(color: Color, engine: ColorEngine | None = None) -> Color:
    """Map a color into Display P3.

    Lightness and hue are held fixed while chroma is reduced to the P3
    boundary. Colors already inside P3 are returned with the same OKLCH.
    """
    eng = _engine(engine)
    L, C, h = color.oklch
    _, _, _, (L_adj, C_adj, h_adj) = to_gamut_safe(eng, L, C, h, space="p3")
    return Color.from_oklch(L_adj, C_adj, h_adj, color.alpha, eng)


def format_p3(rgb: RGB, alpha: float | None = None) -> str:
    """Serialise Display P3 coordinates as a CSS ``color()`` value."""
    body = " ".join(_format_number(_clamp01(c)) for c in rgb)
    if alpha is None:
        return f"color(display-p3 {body})"
    return f"color(display-p3 {body} / {_format_number(_clamp01(alpha))})"


def _format_number(x: float, digits: int = 4) -> str:
    if x == 0.0:
        return "0"
    decimals = max(0, digits - 1 - int(math.floor(math.log10(abs(x)))))
    text = f"{round(x, decimals):.{decimals}f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def _to_linear(c: float) -> float:
    if c <= 0.04045:
        return c / 12.92
    return ((c + 0.055) / 1.055) ** 2.4


__all__ = [
    "Color",
    "SRGB",
    "parse_hex",
    "format_hex",
    "format_p3",
    "to_wide_gamut",
]
