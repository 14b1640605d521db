"""Public entrypoint for the colorscale library.

This module re-exports the main user-facing types and functions so that
applications can simply import from ``colorscale`` instead of individual
submodules.
"""

from .api import ColorSystem, generate_color_scale, generate_color_system, get_color_scale
from .color_types import Color, format_hex, parse_hex, to_wide_gamut
from .contrast import CONTRAST_DARK, CONTRAST_LIGHT, apca_contrast, select_contrast_color
from .easing import CurveSpec
from .errors import (
    ColorScaleError,
    InvalidColorFormat,
    InvalidColorInput,
    OutOfRangeStep,
    UnsupportedFormat,
)
from .export import SCALE_FORMAT_OPTIONS, ScaleFormat, export_scale
from .inputs import ColorConstants, ColorInput
from .overlay import (
    OverlayColors,
    generate_overlay_colors,
    generate_overlay_colors_for_format,
    get_overlay_alphas,
    get_overlay_color,
)
from .progression import transpose_progression_end, transpose_progression_start
from .scale import Appearance, ColorScale, GenerationConfig

__all__ = [
    "Appearance",
    "Color",
    "ColorConstants",
    "ColorInput",
    "ColorScale",
    "ColorSystem",
    "CurveSpec",
    "GenerationConfig",
    "OverlayColors",
    "generate_color_scale",
    "generate_color_system",
    "get_color_scale",
    "generate_overlay_colors",
    "generate_overlay_colors_for_format",
    "get_overlay_alphas",
    "get_overlay_color",
    "transpose_progression_start",
    "transpose_progression_end",
    "parse_hex",
    "format_hex",
    "to_wide_gamut",
    "apca_contrast",
    "select_contrast_color",
    "CONTRAST_LIGHT",
    "CONTRAST_DARK",
    "ScaleFormat",
    "SCALE_FORMAT_OPTIONS",
    "export_scale",
    "ColorScaleError",
    "InvalidColorFormat",
    "InvalidColorInput",
    "OutOfRangeStep",
    "UnsupportedFormat",
]
