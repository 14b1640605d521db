from __future__ import annotations

"""ガマットマッピング（sRGB / Display P3）のテスト。"""

import pytest

from colorscale import Color, parse_hex, to_wide_gamut
from colorscale.engine import DefaultColorEngine
from colorscale.gamut import in_gamut, to_gamut_safe


ENGINE = DefaultColorEngine()


@pytest.mark.parametrize("h", ["#00ff00", "#ff0000", "#0000ff", "#ff00ff", "#00ffff"])
def test_saturated_srgb_to_wide_gamut_stays_in_p3(h: str) -> None:
    wide = to_wide_gamut(parse_hex(h))
    assert in_gamut(ENGINE.oklch_to_linear_rgb(*wide.oklch, space="p3"))
    assert all(0.0 <= v <= 1.0 for v in wide.to_p3())
    # sRGB is inside P3, so nothing needed reducing.
    assert wide.to_hex() == h


def test_out_of_gamut_chroma_is_reduced_at_fixed_lightness_and_hue() -> None:
    wide = to_wide_gamut(Color.from_oklch(0.7, 0.4, 145.0))
    L, C, h = wide.oklch
    assert L == pytest.approx(0.7)
    assert h == pytest.approx(145.0)
    assert 0.0 < C < 0.4
    assert in_gamut(ENGINE.oklch_to_linear_rgb(L, C, h, space="p3"))
    # Close to the boundary: a little more chroma leaves the gamut.
    assert not in_gamut(ENGINE.oklch_to_linear_rgb(L, C + 0.005, h, space="p3"))


def test_p3_holds_more_chroma_than_srgb() -> None:
    _, _, _, (_, c_srgb, _) = to_gamut_safe(ENGINE, 0.7, 0.4, 145.0, space="srgb")
    _, _, _, (_, c_p3, _) = to_gamut_safe(ENGINE, 0.7, 0.4, 145.0, space="p3")
    assert c_srgb < c_p3


def test_lightness_extremes() -> None:
    assert to_gamut_safe(ENGINE, 1.2, 0.3, 10.0)[:3] == (1.0, 1.0, 1.0)
    assert to_gamut_safe(ENGINE, -0.1, 0.3, 10.0)[:3] == (0.0, 0.0, 0.0)


def test_unknown_space_rejected() -> None:
    with pytest.raises(ValueError):
        ENGINE.oklch_to_linear_rgb(0.5, 0.1, 0.0, space="cmyk")  # type: ignore[arg-type]
