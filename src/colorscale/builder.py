from __future__ import annotations

"""Construction of accent and gray scales from seed colors.

Each scale starts from a canonical reference scale. The seed contributes its
hue and rescales the reference chroma; the reference lightness progression
is re-anchored on the real background lightness with
:func:`colorscale.progression.transpose_progression_start`.
"""

import logging
from dataclasses import dataclass
from typing import List, Sequence, Tuple

from .color_types import Color
from .contrast import select_contrast_color
from .easing import DARK_MODE_EASING, LIGHT_MODE_EASING, CurveSpec
from .engine import OKLCH, ColorEngine, DefaultColorEngine
from .progression import transpose_progression_start
from .reference import accent_reference, neutral_reference
from .scale import Appearance


logger = logging.getLogger(__name__)

SOLID_STEP = 9
# Below this OKLab distance (x100) from step 1 the seed is treated as
# indistinguishable from the page, and the built step 9 is kept.
MIN_SOLID_DISTANCE = 25.0
MAX_CHROMA_BOOST = 1.5
SURFACE_ALPHA = {Appearance.LIGHT: 0.8, Appearance.DARK: 0.5}


@dataclass(frozen=True)
class BuiltScales:
    """Solid colors produced for one seed triple."""

    accent: Tuple[Color, ...]
    gray: Tuple[Color, ...]
    accent_surface: Color
    gray_surface: Color
    accent_contrast: str
    background: Color


def scale_from_color(
    source: Color,
    reference: Sequence[Color],
    background: Color,
    appearance: Appearance,
    engine: ColorEngine,
) -> List[OKLCH]:
    """Anchor ``reference`` onto ``source`` and ``background``.

    Returns 12 (L, C, h) triples that may lie outside sRGB.
    """
    _, C0, h0 = source.oklch
    base = min(reference, key=lambda c: engine.delta_eok(source.oklch, c.oklch))
    base_C = base.oklch[1]
    ratio_c = C0 / base_C if base_C > 1e-9 else 0.0
    chroma = [min(C0 * MAX_CHROMA_BOOST, c.oklch[1] * ratio_c) for c in reference]

    lightness = [c.oklch[0] for c in reference]
    background_L = max(0.0, min(1.0, background.oklch[0]))
    if appearance is Appearance.LIGHT:
        # A virtual white step 0 lets the background pull step 1 as well.
        lightness = transpose_progression_start(background_L, [1.0, *lightness], LIGHT_MODE_EASING)[1:]
    else:
        ease = _dark_mode_ease(background_L / reference[0].oklch[0])
        lightness = transpose_progression_start(background_L, lightness, ease)

    return [(L, C, h0) for L, C in zip(lightness, chroma)]


def _dark_mode_ease(ratio_l: float, max_ratio: float = 1.5) -> CurveSpec:
    """Flatten the dark easing when the background is lighter than step 1."""
    params = [DARK_MODE_EASING.x1, DARK_MODE_EASING.y1, DARK_MODE_EASING.x2, DARK_MODE_EASING.y2]
    if ratio_l > 1:
        meta_ratio = (ratio_l - 1) * (max_ratio / (max_ratio - 1))
        params = [0.0 if ratio_l > max_ratio else max(0.0, p * (1 - meta_ratio)) for p in params]
    return CurveSpec(*params)


def button_hover_color(source: Color, scale: Sequence[Color], engine: ColorEngine) -> Color:
    """Step 10: nudge step 9 lightness, then borrow chroma and hue from the scale."""
    L, C, h = source.oklch
    if L > 0.4:
        new_L = L - 0.03 / (L + 0.1)
        new_C = C * 0.93
    else:
        new_L = L + 0.03 / (L + 0.1)
        new_C = C
    hover = (new_L, new_C, h)
    closest = min(scale, key=lambda c: engine.delta_eok(hover, c.oklch))
    return Color.from_oklch(new_L, closest.oklch[1], closest.oklch[2], engine=engine)


def build_scales(
    appearance: Appearance,
    accent: Color,
    gray: Color,
    background: Color,
    engine: ColorEngine | None = None,
) -> BuiltScales:
    """Build the 12-step accent and gray scales for one appearance."""
    if engine is None:
        engine = DefaultColorEngine()
    background = background.with_alpha(1.0)
    key = appearance.value

    gray_colors = [
        Color.from_oklch(*c, engine=engine)
        for c in scale_from_color(gray, neutral_reference(key), background, appearance, engine)
    ]

    if accent.to_srgb255() in ((0, 0, 0), (255, 255, 255)):
        # Pure black/white carries no hue; reuse the gray tint.
        accent_colors = list(gray_colors)
    else:
        accent_colors = [
            Color.from_oklch(*c, engine=engine)
            for c in scale_from_color(accent, accent_reference(key), background, appearance, engine)
        ]

    solid_index = SOLID_STEP - 1
    distance = engine.delta_eok(accent.oklch, accent_colors[0].oklch) * 100
    if distance < MIN_SOLID_DISTANCE:
        logger.debug("accent %s is close to step 1 (%.1f); keeping generated step 9", accent.to_hex(), distance)
    else:
        accent_colors[solid_index] = Color.from_oklch(*accent.oklch, engine=engine)
    solid = accent_colors[solid_index]
    accent_colors[solid_index + 1] = button_hover_color(solid, accent_colors, engine)

    # Keep the text steps no more saturated than the solid/border steps.
    chroma_cap = max(accent_colors[8].oklch[1], accent_colors[7].oklch[1])
    for i in (10, 11):
        L, C, h = accent_colors[i].oklch
        accent_colors[i] = Color.from_oklch(L, min(chroma_cap, C), h, engine=engine)

    surface_alpha = SURFACE_ALPHA[appearance]
    return BuiltScales(
        accent=tuple(accent_colors),
        gray=tuple(gray_colors),
        accent_surface=accent_colors[0].with_alpha(surface_alpha),
        gray_surface=gray_colors[0].with_alpha(surface_alpha),
        accent_contrast=select_contrast_color(solid),
        background=background,
    )


__all__ = [
    "SOLID_STEP",
    "BuiltScales",
    "scale_from_color",
    "button_hover_color",
    "build_scales",
]
