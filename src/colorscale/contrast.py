from __future__ import annotations

"""Readable text color selection.

Contrast is measured with the APCA-W3 lightness contrast (version 0.0.98G).
The text color on a scale's solid step is always one of two fixed sentinels.
"""

from .color_types import Color, parse_hex


CONTRAST_LIGHT = "#ffffff"
CONTRAST_DARK = "#111111"

# APCA-W3 0.0.98G constants.
_MAIN_TRC = 2.4
_R_CO, _G_CO, _B_CO = 0.2126729, 0.7151522, 0.0721750
_NORM_BG, _NORM_TXT = 0.56, 0.57
_REV_BG, _REV_TXT = 0.65, 0.62
_BLK_THRS, _BLK_CLMP = 0.022, 1.414
_SCALE = 1.14
_LO_OFFSET = 0.027
_LO_CLIP = 0.1
_DELTA_Y_MIN = 0.0005


def _luminance(color: Color) -> float:
    r, g, b = color.srgb
    y = _R_CO * r**_MAIN_TRC + _G_CO * g**_MAIN_TRC + _B_CO * b**_MAIN_TRC
    # Soft clamp near black.
    if y < _BLK_THRS:
        y += (_BLK_THRS - y) ** _BLK_CLMP
    return y


def apca_contrast(text: Color, background: Color) -> float:
    """Signed APCA lightness contrast (Lc) of ``text`` on ``background``.

    Positive for dark text on a light background, negative for light text
    on a dark background.
    """
    y_txt = _luminance(text)
    y_bg = _luminance(background)
    if abs(y_bg - y_txt) < _DELTA_Y_MIN:
        return 0.0
    if y_bg > y_txt:
        sapc = (y_bg**_NORM_BG - y_txt**_NORM_TXT) * _SCALE
        out = 0.0 if sapc < _LO_CLIP else sapc - _LO_OFFSET
    else:
        sapc = (y_bg**_REV_BG - y_txt**_REV_TXT) * _SCALE
        out = 0.0 if sapc > -_LO_CLIP else sapc + _LO_OFFSET
    return out * 100.0


def select_contrast_color(solid: Color) -> str:
    """Return the sentinel that reads best on ``solid``; ties pick the dark one."""
    light = abs(apca_contrast(parse_hex(CONTRAST_LIGHT), solid))
    dark = abs(apca_contrast(parse_hex(CONTRAST_DARK), solid))
    return CONTRAST_LIGHT if light > dark else CONTRAST_DARK


__all__ = ["CONTRAST_LIGHT", "CONTRAST_DARK", "apca_contrast", "select_contrast_color"]
