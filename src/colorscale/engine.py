from __future__ import annotations

"""Color conversion engine for OKLCH, sRGB and Display P3.

This module defines the :class:`ColorEngine` protocol and a default
implementation that converts between gamma-encoded RGB (sRGB or Display P3,
both D65) and OKLCH via OKLab. RGB results are *not* clipped here; gamut
handling lives in :mod:`colorscale.gamut`.
"""

import math
from typing import Literal, Protocol, Tuple

import numpy as np


OKLCH = Tuple[float, float, float]
OKLAB = Tuple[float, float, float]
RGB = Tuple[float, float, float]
RGBSpace = Literal["srgb", "p3"]


# Linear sRGB -> LMS and LMS' -> OKLab (Björn Ottosson).
_SRGB_TO_LMS = np.array(
    [
        [0.4122214708, 0.5363325363, 0.0514459929],
        [0.2119034982, 0.6806995451, 0.1073969566],
        [0.0883024619, 0.2817188376, 0.6299787005],
    ]
)
_LMS_TO_OKLAB = np.array(
    [
        [0.2104542553, 0.7936177850, -0.0040720468],
        [1.9779984951, -2.4285922050, 0.4505937099],
        [0.0259040371, 0.7827717662, -0.8086757660],
    ]
)
_OKLAB_TO_LMS = np.array(
    [
        [1.0, 0.3963377774, 0.2158037573],
        [1.0, -0.1055613458, -0.0638541728],
        [1.0, -0.0894841775, -1.2914855480],
    ]
)
_LMS_TO_SRGB = np.array(
    [
        [4.0767416621, -3.3077115913, 0.2309699292],
        [-1.2684380046, 2.6097574011, -0.3413193965],
        [-0.0041960863, -0.7034186147, 1.7076147010],
    ]
)

# RGB -> XYZ (D65) for both spaces; P3 <-> sRGB is derived from them.
_SRGB_TO_XYZ = np.array(
    [
        [0.41239079926595934, 0.357584339383878, 0.1804807884018343],
        [0.21263900587151027, 0.715168678767756, 0.07219231536073371],
        [0.01933081871559182, 0.11919477979462598, 0.9505321522496607],
    ]
)
_P3_TO_XYZ = np.array(
    [
        [0.4865709486482162, 0.26566769316909306, 0.1982172852343625],
        [0.2289745640697488, 0.6917385218365064, 0.079286914093745],
        [0.0, 0.04511338185890264, 1.043944368900976],
    ]
)
_P3_TO_SRGB = np.linalg.inv(_SRGB_TO_XYZ) @ _P3_TO_XYZ
_SRGB_TO_P3 = np.linalg.inv(_P3_TO_SRGB)


class ColorEngine(Protocol):
    """Protocol abstracting color space conversions."""

    def normalize_hue(self, h: float) -> float: ...

    def rgb_to_oklch(self, r: float, g: float, b: float, space: RGBSpace = "srgb") -> OKLCH: ...

    def oklch_to_rgb(self, L: float, C: float, h: float, space: RGBSpace = "srgb") -> RGB: ...

    def oklch_to_linear_rgb(self, L: float, C: float, h: float, space: RGBSpace = "srgb") -> RGB: ...

    def srgb_to_p3(self, r: float, g: float, b: float) -> RGB: ...

    def delta_eok(self, a: OKLCH, b: OKLCH) -> float: ...


class DefaultColorEngine:
    """Default implementation based on OKLab/OKLCH with sRGB and Display P3 (D65).

    Lightness is expressed in ``[0, 1]`` and hue in degrees ``[0, 360)``.
    """

    def normalize_hue(self, h: float) -> float:
        """Normalize hue angle into [0, 360)."""
        if math.isnan(h):
            return 0.0
        return (h % 360.0 + 360.0) % 360.0

    def rgb_to_oklch(self, r: float, g: float, b: float, space: RGBSpace = "srgb") -> OKLCH:
        """Convert gamma-encoded RGB in [0, 1] to OKLCH."""
        linear = _decode(np.array([r, g, b], dtype=float))
        if space == "p3":
            linear = _P3_TO_SRGB @ linear
        elif space != "srgb":
            raise ValueError(f"Unknown RGB space: {space}")
        L, a, b_ = _linear_srgb_to_oklab(linear)
        return oklab_to_oklch(L, a, b_, self)

    def oklch_to_linear_rgb(self, L: float, C: float, h: float, space: RGBSpace = "srgb") -> RGB:
        """Convert OKLCH to linear RGB without any clipping."""
        linear = _oklab_to_linear_srgb(*oklch_to_oklab(L, C, h))
        if space == "p3":
            linear = _SRGB_TO_P3 @ linear
        elif space != "srgb":
            raise ValueError(f"Unknown RGB space: {space}")
        return (float(linear[0]), float(linear[1]), float(linear[2]))

    def oklch_to_rgb(self, L: float, C: float, h: float, space: RGBSpace = "srgb") -> RGB:
        """Convert OKLCH to gamma-encoded RGB without any clipping."""
        encoded = _encode(np.array(self.oklch_to_linear_rgb(L, C, h, space)))
        return (float(encoded[0]), float(encoded[1]), float(encoded[2]))

    def srgb_to_p3(self, r: float, g: float, b: float) -> RGB:
        """Re-express a gamma-encoded sRGB color in gamma-encoded Display P3."""
        p3 = _encode(_SRGB_TO_P3 @ _decode(np.array([r, g, b], dtype=float)))
        return (float(p3[0]), float(p3[1]), float(p3[2]))

    def delta_eok(self, a: OKLCH, b: OKLCH) -> float:
        """Euclidean distance between two OKLCH colors, measured in OKLab."""
        La, aa, ba = oklch_to_oklab(*a)
        Lb, ab, bb = oklch_to_oklab(*b)
        return math.sqrt((La - Lb) ** 2 + (aa - ab) ** 2 + (ba - bb) ** 2)


def oklch_to_oklab(L: float, C: float, h: float) -> OKLAB:
    h_rad = math.radians(h)
    return (L, C * math.cos(h_rad), C * math.sin(h_rad))


def oklab_to_oklch(L: float, a: float, b: float, engine: ColorEngine | None = None) -> OKLCH:
    C = math.sqrt(a * a + b * b)
    if C < 1e-9:
        # Achromatic: hue is meaningless, pin it to 0 for stable output.
        return (L, 0.0, 0.0)
    h = math.degrees(math.atan2(b, a))
    h = engine.normalize_hue(h) if engine is not None else h % 360.0
    return (L, C, h)


def _linear_srgb_to_oklab(linear: np.ndarray) -> OKLAB:
    lms = _SRGB_TO_LMS @ linear
    lms_ = np.cbrt(lms)
    L, a, b = _LMS_TO_OKLAB @ lms_
    return (float(L), float(a), float(b))


def _oklab_to_linear_srgb(L: float, a: float, b: float) -> np.ndarray:
    lms_ = _OKLAB_TO_LMS @ np.array([L, a, b], dtype=float)
    return _LMS_TO_SRGB @ (lms_**3)


def _decode(c: np.ndarray) -> np.ndarray:
    """sRGB transfer function (shared by Display P3), extended to negatives."""
    abs_c = np.abs(c)
    linear = np.where(abs_c <= 0.04045, abs_c / 12.92, ((abs_c + 0.055) / 1.055) ** 2.4)
    return np.sign(c) * linear


def _encode(c: np.ndarray) -> np.ndarray:
    abs_c = np.abs(c)
    encoded = np.where(abs_c <= 0.0031308, 12.92 * abs_c, 1.055 * abs_c ** (1 / 2.4) - 0.055)
    return np.sign(c) * encoded


__all__ = [
    "OKLCH",
    "OKLAB",
    "RGB",
    "RGBSpace",
    "ColorEngine",
    "DefaultColorEngine",
    "oklch_to_oklab",
    "oklab_to_oklch",
]
