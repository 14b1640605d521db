from __future__ import annotations

"""Universal black and white overlay ramps.

The overlays are the same for both appearances and do not depend on any
seed color.
"""

from dataclasses import dataclass
from typing import Dict, Tuple

from .color_types import format_p3
from .errors import OutOfRangeStep
from .export import ScaleFormat


_BLACK_ALPHAS = ("03", "05", "0a", "12", "17", "1c", "24", "38", "6e", "78", "8f", "e8")
_WHITE_ALPHAS = ("00", "03", "08", "0d", "14", "1f", "2b", "3d", "61", "70", "96", "eb")

_BASES = {"black": ("000000", _BLACK_ALPHAS), "white": ("ffffff", _WHITE_ALPHAS)}


@dataclass(frozen=True)
class OverlayColors:
    """Black and white overlay ramps, 12 steps each."""

    black: Tuple[str, ...]
    white: Tuple[str, ...]

    def to_dict(self) -> Dict[str, list]:
        return {"black": list(self.black), "white": list(self.white)}


def get_overlay_alphas() -> Dict[str, Tuple[str, ...]]:
    """Return the raw two-digit alpha bytes of both ramps."""
    return {"black": _BLACK_ALPHAS, "white": _WHITE_ALPHAS}


def generate_overlay_colors() -> OverlayColors:
    return OverlayColors(
        black=tuple(f"#000000{a}" for a in _BLACK_ALPHAS),
        white=tuple(f"#ffffff{a}" for a in _WHITE_ALPHAS),
    )


def generate_overlay_colors_for_format(fmt: ScaleFormat | str) -> OverlayColors:
    """Return the overlay ramps serialised for the given color format."""
    scale_fmt = ScaleFormat.from_value(fmt)
    if scale_fmt is ScaleFormat.HEX:
        return generate_overlay_colors()
    ramps = {}
    for kind, (_, alphas) in _BASES.items():
        v = 0.0 if kind == "black" else 1.0
        ramps[kind] = tuple(format_p3((v, v, v), int(a, 16) / 255.0) for a in alphas)
    return OverlayColors(black=ramps["black"], white=ramps["white"])


def get_overlay_color(kind: str, step: int) -> str:
    """Return the overlay color of ``kind`` ("black"/"white") at ``step`` 1..12."""
    if kind not in _BASES:
        raise ValueError(f"Unknown overlay kind: {kind!r} (expected 'black' or 'white')")
    if isinstance(step, bool) or not isinstance(step, int) or not (1 <= step <= 12):
        raise OutOfRangeStep(step)
    base, alphas = _BASES[kind]
    return f"#{base}{alphas[step - 1]}"


__all__ = [
    "OverlayColors",
    "get_overlay_alphas",
    "generate_overlay_colors",
    "generate_overlay_colors_for_format",
    "get_overlay_color",
]
