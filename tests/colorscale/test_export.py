from __future__ import annotations

"""色空間ごとの値取り出し（export_scale）のテスト。"""

import pytest

from colorscale import (
    SCALE_FORMAT_OPTIONS,
    ColorScale,
    GenerationConfig,
    ScaleFormat,
    UnsupportedFormat,
    export_scale,
    generate_color_scale,
)


def test_format_options_cover_every_format() -> None:
    assert {fmt for _, fmt in SCALE_FORMAT_OPTIONS} == set(ScaleFormat)
    assert ScaleFormat.from_value("p3") is ScaleFormat.P3


def test_export_hex(light_scale: ColorScale) -> None:
    out = export_scale(light_scale, "hex")
    assert out.format is ScaleFormat.HEX
    assert out.accent == light_scale.accent_scale
    assert out.gray_alpha == light_scale.gray_scale_alpha
    assert out.accent_surface == light_scale.accent_surface
    assert out.background == light_scale.background


def test_export_p3(dark_scale: ColorScale) -> None:
    out = export_scale(dark_scale, ScaleFormat.P3)
    assert out.accent == dark_scale.accent_scale_wide_gamut
    assert out.accent_alpha == dark_scale.accent_scale_alpha_wide_gamut
    assert out.gray_surface == dark_scale.gray_surface_wide_gamut
    assert out.accent_contrast == dark_scale.accent_contrast


def test_export_unknown_format(light_scale: ColorScale) -> None:
    with pytest.raises(UnsupportedFormat):
        export_scale(light_scale, "oklch")


def test_export_p3_without_wide_gamut() -> None:
    scale = generate_color_scale(
        "light", "#0066cc", "#6b7280", "#ffffff", config=GenerationConfig(include_wide_gamut=False)
    )
    with pytest.raises(UnsupportedFormat):
        export_scale(scale, "p3")
    assert export_scale(scale, "hex").accent == scale.accent_scale
