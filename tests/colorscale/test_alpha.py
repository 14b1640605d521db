from __future__ import annotations

"""半透明色ソルバ（alpha）のテスト。"""

import re

import pytest

from colorscale import generate_color_scale, parse_hex
from colorscale.alpha import alpha_hex, alpha_p3, blend_alpha, get_alpha_color


WHITE = parse_hex("#ffffff")
HEX8 = re.compile(r"^#[0-9a-f]{8}$")


def test_blend_alpha_rounds_half_up() -> None:
    # 255 * 0.5 = 127.5 -> 128 and 1 * 0.5 = 0.5 -> 1
    assert blend_alpha(1, 0.5, 255) == 129
    assert blend_alpha(1, 0.5, 255, round_=False) == pytest.approx(128.0)


@pytest.mark.parametrize("target", ["#0066cc", "#e54d2e", "#ccebd7", "#3e63dd", "#f0f0f3"])
def test_alpha_hex_composites_back_over_white(target: str) -> None:
    solid = parse_hex(target)
    out = alpha_hex(solid, WHITE)
    assert HEX8.match(out)
    translucent = parse_hex(out)
    a = translucent.alpha
    for s, c in zip(solid.to_srgb255(), translucent.to_srgb255()):
        assert abs(a * c + (1 - a) * 255 - s) <= 1.0 + 1e-9


def test_pure_gray_target_uses_single_channel_path() -> None:
    r, g, b, a = get_alpha_color((0.5, 0.5, 0.5), (1.0, 1.0, 1.0), 255, 255)
    assert (r, g, b) == (0.0, 0.0, 0.0)
    assert a == pytest.approx(1 - 128 / 255)


def test_lighter_target_composites_towards_white() -> None:
    r, g, b, a = get_alpha_color((0.5, 0.5, 0.5), (0.0, 0.0, 0.0), 255, 255)
    assert (r, g, b) == (1.0, 1.0, 1.0)
    assert a == pytest.approx(128 / 255)


def test_target_equal_to_background_is_fully_transparent() -> None:
    assert alpha_hex(WHITE, WHITE).endswith("00")
    r, g, b, a = get_alpha_color((0.2, 0.4, 0.6), (0.2, 0.4, 0.6), 255, 255)
    assert a == 0.0


def test_forced_alpha_is_quantised() -> None:
    _, _, _, a = get_alpha_color((0.0, 0.4, 0.8), (1.0, 1.0, 1.0), 255, 1000, target_alpha=0.9)
    assert a == pytest.approx(0.9)


def test_alpha_p3_format() -> None:
    out = alpha_p3((0.0, 0.4, 0.8), (1.0, 1.0, 1.0))
    assert out.startswith("color(display-p3 ")
    assert " / " in out


def test_mixed_direction_channels_round_trip() -> None:
    # Red is darker than the background while blue is lighter.
    target = (7 / 255, 17 / 255, 31 / 255)
    background = (17 / 255, 17 / 255, 17 / 255)
    r, g, b, a = get_alpha_color(target, background, 255, 255)
    assert all(0.0 <= v <= 1.0 for v in (r, g, b, a))
    for t, c in zip((7, 17, 31), (r, g, b)):
        assert abs(a * c * 255 + (1 - a) * 17 - t) <= 1.0


@pytest.mark.parametrize(
    "appearance, accent, gray, background",
    [
        ("dark", "#0066CC", "#6B7280", "#111111"),
        ("dark", "#FC4B32", "#6F6D66", "#0F0F0E"),
        ("dark", "#3A80E0", "#6F6D66", "#0F0F0E"),
        ("light", "#00A77F", "#878780", "#F4F1EA"),
    ],
)
def test_alpha_scales_round_trip_on_any_background(appearance: str, accent: str, gray: str, background: str) -> None:
    scale = generate_color_scale(appearance, accent, gray, background)
    bg = parse_hex(scale.background).to_srgb255()
    pairs = list(zip(scale.accent_scale, scale.accent_scale_alpha)) + list(
        zip(scale.gray_scale, scale.gray_scale_alpha)
    )
    for solid_hex, translucent_hex in pairs:
        solid = parse_hex(solid_hex).to_srgb255()
        translucent = parse_hex(translucent_hex)
        a = translucent.alpha
        for s, c, b in zip(solid, translucent.to_srgb255(), bg):
            assert abs(a * c + (1 - a) * b - s) <= 1.0, (solid_hex, translucent_hex)
