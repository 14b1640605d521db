from __future__ import annotations

"""Container types for generated color scales.

This module defines :class:`Appearance`, the :class:`GenerationConfig`
toggles, and the :class:`ColorScale` result record.
"""

from dataclasses import asdict, dataclass, fields
from enum import Enum
from typing import Any, Dict, Optional, Tuple

from common import settings

from .contrast import CONTRAST_DARK, CONTRAST_LIGHT
from .overlay import OverlayColors


class Appearance(Enum):
    """Light or dark page appearance."""

    LIGHT = "light"
    DARK = "dark"

    @classmethod
    def from_value(cls, value: "Appearance | str") -> "Appearance":
        if isinstance(value, Appearance):
            return value
        try:
            return cls(str(value).lower())
        except ValueError as exc:
            raise ValueError(f"Unknown appearance: {value!r} (expected 'light' or 'dark')") from exc


@dataclass(frozen=True)
class GenerationConfig:
    """Which optional parts of a ColorScale to populate.

    The toggles never change the values of the fields that are populated.
    """

    include_alpha: bool = True
    include_wide_gamut: bool = True
    include_gray_scale: bool = True
    include_overlays: bool = True

    @classmethod
    def from_settings(cls) -> "GenerationConfig":
        """Build the defaults from the COLORSCALE_INCLUDE_* environment settings."""
        s = settings.get()
        return cls(
            include_alpha=s.INCLUDE_ALPHA,
            include_wide_gamut=s.INCLUDE_WIDE_GAMUT,
            include_gray_scale=s.INCLUDE_GRAY_SCALE,
            include_overlays=s.INCLUDE_OVERLAYS,
        )

    def to_dict(self) -> Dict[str, bool]:
        return asdict(self)


Scale12 = Tuple[str, ...]

_SCALE_FIELDS = (
    "accent_scale",
    "accent_scale_alpha",
    "accent_scale_wide_gamut",
    "accent_scale_alpha_wide_gamut",
    "gray_scale",
    "gray_scale_alpha",
    "gray_scale_wide_gamut",
    "gray_scale_alpha_wide_gamut",
)


@dataclass(frozen=True)
class ColorScale:
    """Generated scale of one color in one appearance.

    Attributes
    ----------
    appearance:
        Appearance the scale was generated for.
    accent_scale:
        12 solid sRGB hex colors, step 1 first.
    accent_scale_alpha:
        12 translucent hex colors that composite over ``background`` into
        ``accent_scale``.
    accent_scale_wide_gamut, accent_scale_alpha_wide_gamut:
        The same in Display P3 (``color(display-p3 ...)``).
    accent_contrast:
        Readable text color on step 9; one of ``CONTRAST_LIGHT`` /
        ``CONTRAST_DARK``.
    gray_*:
        Neutral counterparts of the accent fields.
    accent_surface, gray_surface:
        Translucent step 1 used for raised surfaces.
    background:
        Background color as sRGB hex.
    overlays:
        Fixed black/white overlay ramps.

    Optional fields are ``None`` when disabled by GenerationConfig.
    """

    appearance: Appearance
    accent_scale: Scale12
    accent_contrast: str
    accent_surface: str
    background: str
    accent_scale_alpha: Optional[Scale12] = None
    accent_scale_wide_gamut: Optional[Scale12] = None
    accent_scale_alpha_wide_gamut: Optional[Scale12] = None
    accent_surface_wide_gamut: Optional[str] = None
    gray_scale: Optional[Scale12] = None
    gray_scale_alpha: Optional[Scale12] = None
    gray_scale_wide_gamut: Optional[Scale12] = None
    gray_scale_alpha_wide_gamut: Optional[Scale12] = None
    gray_surface: Optional[str] = None
    gray_surface_wide_gamut: Optional[str] = None
    overlays: Optional[OverlayColors] = None

    def __post_init__(self) -> None:
        for name in _SCALE_FIELDS:
            value = getattr(self, name)
            if value is not None and len(value) != 12:
                raise ValueError(f"{name} must have 12 steps, got {len(value)}")
        if self.accent_contrast not in (CONTRAST_LIGHT, CONTRAST_DARK):
            raise ValueError(f"accent_contrast must be a contrast sentinel, got {self.accent_contrast!r}")

    def to_dict(self) -> Dict[str, Any]:
        """Plain, JSON-serialisable mapping of all fields."""
        out: Dict[str, Any] = {}
        for f in fields(self):
            value = getattr(self, f.name)
            if isinstance(value, Appearance):
                value = value.value
            elif isinstance(value, OverlayColors):
                value = value.to_dict()
            elif isinstance(value, tuple):
                value = list(value)
            out[f.name] = value
        return out


__all__ = [
    "Appearance",
    "GenerationConfig",
    "ColorScale",
]
