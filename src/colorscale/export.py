from __future__ import annotations

"""Color-space selection for consumers of generated scales.

This module exposes the :class:`ScaleFormat` enumeration (with label/enum
pairs for UIs) and :func:`export_scale`, which pulls the solid, alpha and
surface values of one color space out of a :class:`ColorScale` into an
explicit record.
"""

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, List, Optional, Tuple

from .errors import UnsupportedFormat

if TYPE_CHECKING:
    from .scale import ColorScale


class ScaleFormat(Enum):
    """Supported color spaces for exported values."""

    HEX = "hex"
    P3 = "p3"

    @classmethod
    def from_value(cls, value: "ScaleFormat | str") -> "ScaleFormat":
        if isinstance(value, ScaleFormat):
            return value
        for fmt in cls:
            if fmt.value == value:
                return fmt
        raise UnsupportedFormat(value)


SCALE_FORMAT_OPTIONS: List[tuple[str, ScaleFormat]] = [
    ("HEX (sRGB)", ScaleFormat.HEX),
    ("Display P3", ScaleFormat.P3),
]


@dataclass(frozen=True)
class ScaleExport:
    """Values of one color space taken from a ColorScale.

    Fields disabled by the generation config are ``None``.
    """

    format: ScaleFormat
    accent: Tuple[str, ...]
    accent_alpha: Optional[Tuple[str, ...]]
    accent_surface: str
    accent_contrast: str
    gray: Optional[Tuple[str, ...]]
    gray_alpha: Optional[Tuple[str, ...]]
    gray_surface: Optional[str]
    background: str


def export_scale(scale: "ColorScale", fmt: ScaleFormat | str) -> ScaleExport:
    """Select the ``fmt`` flavour of every color in ``scale``.

    Raises
    ------
    UnsupportedFormat
        If ``fmt`` is not a known format, or if P3 output is requested from a
        scale generated without wide-gamut values.
    """
    scale_fmt = ScaleFormat.from_value(fmt)
    if scale_fmt is ScaleFormat.HEX:
        return ScaleExport(
            format=scale_fmt,
            accent=scale.accent_scale,
            accent_alpha=scale.accent_scale_alpha,
            accent_surface=scale.accent_surface,
            accent_contrast=scale.accent_contrast,
            gray=scale.gray_scale,
            gray_alpha=scale.gray_scale_alpha,
            gray_surface=scale.gray_surface,
            background=scale.background,
        )
    if scale.accent_scale_wide_gamut is None or scale.accent_surface_wide_gamut is None:
        raise UnsupportedFormat(f"{scale_fmt.value} (wide gamut disabled for this scale)")
    return ScaleExport(
        format=scale_fmt,
        accent=scale.accent_scale_wide_gamut,
        accent_alpha=scale.accent_scale_alpha_wide_gamut,
        accent_surface=scale.accent_surface_wide_gamut,
        accent_contrast=scale.accent_contrast,
        gray=scale.gray_scale_wide_gamut,
        gray_alpha=scale.gray_scale_alpha_wide_gamut,
        gray_surface=scale.gray_surface_wide_gamut,
        background=scale.background,
    )


__all__ = ["ScaleFormat", "SCALE_FORMAT_OPTIONS", "ScaleExport", "export_scale"]
