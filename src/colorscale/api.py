from __future__ import annotations

"""High-level public API for generating color scales.

:func:`generate_color_scale` coordinates parsing, scale building, alpha
compositing, wide-gamut mapping and contrast selection for one seed triple.
:func:`generate_color_system` runs it for every (color, appearance) pair of a
:class:`ColorInput`.
"""

import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from datetime import datetime, timezone
from types import MappingProxyType
from typing import Dict, List, Mapping, Optional, Sequence, Tuple

from common import settings

from .alpha import alpha_hex, alpha_p3
from .builder import build_scales
from .color_types import Color, format_p3, parse_hex, to_wide_gamut
from .engine import ColorEngine, DefaultColorEngine
from .inputs import ColorInput
from .overlay import generate_overlay_colors
from .scale import Appearance, ColorScale, GenerationConfig


logger = logging.getLogger(__name__)


def generate_color_scale(
    appearance: Appearance | str,
    accent: str,
    gray: str,
    background: str,
    config: Optional[GenerationConfig] = None,
    engine: Optional[ColorEngine] = None,
) -> ColorScale:
    """Generate the 12-step scales of one accent color.

    Parameters
    ----------
    appearance:
        ``Appearance.LIGHT``/``"light"`` or ``Appearance.DARK``/``"dark"``.
    accent, gray, background:
        Hex seeds (#rgb, #rrggbb or #rrggbbaa).
    config:
        Which optional fields to populate. Defaults to all of them.
    engine:
        Optional ColorEngine for color space conversions.

    Returns
    -------
    ColorScale

    Raises
    ------
    InvalidColorFormat
        If any seed is not a well-formed hex color.
    """
    if config is None:
        config = GenerationConfig()
    if engine is None:
        engine = DefaultColorEngine()
    appearance = Appearance.from_value(appearance)

    accent_color = parse_hex(accent, engine)
    gray_color = parse_hex(gray, engine)
    background_color = parse_hex(background, engine)

    built = build_scales(appearance, accent_color, gray_color, background_color, engine)
    bg = built.background
    bg_p3 = bg.to_p3(engine)

    fields: dict = {
        "appearance": appearance,
        "accent_scale": _hex_scale(built.accent),
        "accent_contrast": built.accent_contrast,
        "accent_surface": built.accent_surface.to_hex(),
        "background": bg.to_hex(),
    }
    if config.include_alpha:
        fields["accent_scale_alpha"] = _alpha_scale(built.accent, bg)
    if config.include_wide_gamut:
        accent_wide = _wide_scale(built.accent, engine)
        fields["accent_scale_wide_gamut"] = tuple(format_p3(p3) for p3 in accent_wide)
        fields["accent_surface_wide_gamut"] = _p3_surface(built.accent_surface, engine)
        if config.include_alpha:
            fields["accent_scale_alpha_wide_gamut"] = tuple(alpha_p3(p3, bg_p3) for p3 in accent_wide)

    if config.include_gray_scale:
        fields["gray_scale"] = _hex_scale(built.gray)
        fields["gray_surface"] = built.gray_surface.to_hex()
        if config.include_alpha:
            fields["gray_scale_alpha"] = _alpha_scale(built.gray, bg)
        if config.include_wide_gamut:
            gray_wide = _wide_scale(built.gray, engine)
            fields["gray_scale_wide_gamut"] = tuple(format_p3(p3) for p3 in gray_wide)
            fields["gray_surface_wide_gamut"] = _p3_surface(built.gray_surface, engine)
            if config.include_alpha:
                fields["gray_scale_alpha_wide_gamut"] = tuple(alpha_p3(p3, bg_p3) for p3 in gray_wide)

    if config.include_overlays:
        fields["overlays"] = generate_overlay_colors()

    return ColorScale(**fields)


def _hex_scale(colors: Sequence[Color]) -> Tuple[str, ...]:
    return tuple(c.to_hex() for c in colors)


def _alpha_scale(colors: Sequence[Color], background: Color) -> Tuple[str, ...]:
    return tuple(alpha_hex(c, background) for c in colors)


def _wide_scale(colors: Sequence[Color], engine: ColorEngine) -> List[Tuple[float, float, float]]:
    return [to_wide_gamut(c, engine).to_p3(engine) for c in colors]


def _p3_surface(surface: Color, engine: ColorEngine) -> str:
    return format_p3(to_wide_gamut(surface, engine).to_p3(engine), surface.alpha)


@dataclass(frozen=True)
class SystemMetadata:
    """Bookkeeping attached to a ColorSystem; not part of any color value."""

    generated_at: str
    total_colors: int
    total_scales: int
    config: GenerationConfig


@dataclass(frozen=True)
class ColorSystem:
    """Scales of every named color in both appearances."""

    light: Mapping[str, ColorScale]
    dark: Mapping[str, ColorScale]
    color_names: Tuple[str, ...]
    source_colors: ColorInput
    metadata: SystemMetadata

    def to_dict(self) -> dict:
        return {
            "light": {name: scale.to_dict() for name, scale in self.light.items()},
            "dark": {name: scale.to_dict() for name, scale in self.dark.items()},
            "colorNames": list(self.color_names),
            "sourceColors": self.source_colors.to_dict(),
            "metadata": {
                "generatedAt": self.metadata.generated_at,
                "totalColors": self.metadata.total_colors,
                "totalScales": self.metadata.total_scales,
                "config": self.metadata.config.to_dict(),
            },
        }


def generate_color_system(
    color_input: ColorInput,
    config: Optional[GenerationConfig] = None,
    *,
    max_workers: Optional[int] = None,
) -> ColorSystem:
    """Generate scales for every color of ``color_input`` in both appearances.

    Parameters
    ----------
    color_input:
        Validated seeds; :meth:`ColorInput.validate` is called first.
    config:
        Generation toggles; defaults to :meth:`GenerationConfig.from_settings`.
    max_workers:
        Thread count for the independent (color, appearance) pairs. Defaults
        to the ``COLORSCALE_MAX_WORKERS`` setting; ``1`` runs sequentially.

    Raises
    ------
    InvalidColorInput, InvalidColorFormat
        On malformed input. No partial system is returned.
    """
    color_input.validate()
    if config is None:
        config = GenerationConfig.from_settings()
    if max_workers is None:
        max_workers = settings.get().MAX_WORKERS

    jobs = [(appearance, name) for appearance in Appearance for name in color_input.color_names]

    def run(job: Tuple[Appearance, str]) -> ColorScale:
        appearance, name = job
        constants = color_input.constants(appearance.value)
        accent = color_input.colors(appearance.value)[name]
        return generate_color_scale(appearance, accent, constants.gray, constants.background, config)

    logger.debug("generating %d scales with %d worker(s)", len(jobs), max_workers)
    if max_workers > 1:
        with ThreadPoolExecutor(max_workers=max_workers) as pool:
            results = list(pool.map(run, jobs))
    else:
        results = [run(job) for job in jobs]

    scales: Dict[Appearance, Dict[str, ColorScale]] = {a: {} for a in Appearance}
    for (appearance, name), scale in zip(jobs, results):
        scales[appearance][name] = scale

    total = len(color_input.color_names)
    return ColorSystem(
        light=MappingProxyType(scales[Appearance.LIGHT]),
        dark=MappingProxyType(scales[Appearance.DARK]),
        color_names=tuple(color_input.color_names),
        source_colors=color_input,
        metadata=SystemMetadata(
            generated_at=datetime.now(timezone.utc).isoformat(),
            total_colors=total,
            total_scales=total * 2,
            config=config,
        ),
    )


def get_color_scale(system: ColorSystem, color_name: str, appearance: Appearance | str) -> ColorScale:
    """Look up one scale of a generated system."""
    appearance = Appearance.from_value(appearance)
    scales = system.light if appearance is Appearance.LIGHT else system.dark
    try:
        return scales[color_name]
    except KeyError:
        raise KeyError(f"Color scale not found for {color_name} in {appearance.value} mode") from None


__all__ = [
    "generate_color_scale",
    "generate_color_system",
    "get_color_scale",
    "ColorSystem",
    "SystemMetadata",
]
