from __future__ import annotations

"""Color の解析・整形・変換の基本動作テスト。"""

import dataclasses

import pytest

from colorscale import Color, InvalidColorFormat, format_hex, parse_hex
from colorscale.color_types import format_p3
from colorscale.engine import DefaultColorEngine


def test_parse_hex_accepts_3_6_8_digits() -> None:
    assert parse_hex("#0066CC").to_hex() == "#0066cc"
    assert parse_hex("#abc").to_hex() == "#aabbcc"
    assert parse_hex("11223344").to_hex() == "#11223344"
    assert parse_hex("  #FFF ").to_hex() == "#ffffff"


def test_opaque_alpha_formats_as_six_digits() -> None:
    c = parse_hex("#112233ff")
    assert c.alpha == 1.0
    assert format_hex(c) == "#112233"


@pytest.mark.parametrize("bad", ["#abcd", "12345", "#ggg", "", "#1234567", "rgb(0,0,0)"])
def test_parse_hex_rejects_malformed(bad: str) -> None:
    with pytest.raises(InvalidColorFormat):
        parse_hex(bad)


def test_parse_hex_rejects_non_string() -> None:
    with pytest.raises(InvalidColorFormat):
        parse_hex(123)  # type: ignore[arg-type]


def test_invalid_color_format_is_value_error() -> None:
    with pytest.raises(ValueError):
        parse_hex("nope")


@pytest.mark.parametrize("h", ["#000000", "#ffffff", "#0066cc", "#fc4b32", "#6b7280", "#00a77f", "#0000ff"])
def test_hex_oklch_hex_round_trip(h: str) -> None:
    c = parse_hex(h)
    assert Color.from_oklch(*c.oklch).to_hex() == h


def test_known_oklch_values() -> None:
    L, C, h = parse_hex("#ff0000").oklch
    assert L == pytest.approx(0.628, abs=1e-3)
    assert C == pytest.approx(0.2577, abs=1e-3)
    assert h == pytest.approx(29.23, abs=0.05)

    L_w, C_w, _ = parse_hex("#ffffff").oklch
    assert L_w == pytest.approx(1.0, abs=1e-4)
    assert C_w < 1e-4

    L_b, C_b, _ = parse_hex("#000000").oklch
    assert L_b == pytest.approx(0.0, abs=1e-6)
    assert C_b == 0.0


def test_color_is_immutable() -> None:
    c = parse_hex("#0066cc")
    with pytest.raises(dataclasses.FrozenInstanceError):
        c.alpha = 0.5  # type: ignore[misc]
    assert c.with_alpha(0.5).alpha == 0.5
    assert c.alpha == 1.0


def test_from_oklch_maps_into_srgb() -> None:
    c = Color.from_oklch(0.7, 0.4, 145.0)
    assert all(0.0 <= v <= 1.0 for v in c.srgb)
    # The requested point is kept for wide-gamut output.
    assert c.oklch == (0.7, 0.4, 145.0)


def test_from_srgb_validates_range() -> None:
    with pytest.raises(ValueError):
        Color.from_srgb(1.5, 0.0, 0.0)


def test_srgb_red_in_display_p3() -> None:
    r, g, b = DefaultColorEngine().srgb_to_p3(1.0, 0.0, 0.0)
    assert r == pytest.approx(0.9175, abs=1e-3)
    assert g == pytest.approx(0.2003, abs=1e-3)
    assert b == pytest.approx(0.1386, abs=1e-3)


def test_format_p3() -> None:
    assert format_p3((1.0, 0.5, 0.0)) == "color(display-p3 1 0.5 0)"
    assert format_p3((0.123456, 0.0, 1.0), 0.8) == "color(display-p3 0.1235 0 1 / 0.8)"
