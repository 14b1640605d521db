"""共通フィクスチャ。

- 代表的なシード（light/dark）から生成した ColorScale
- 元データ相当の ColorInput
- 設定（環境変数）の後始末
"""

from __future__ import annotations

from typing import Iterator

import pytest

from colorscale import ColorInput, ColorScale, generate_color_scale
from common import settings


LIGHT_COLORS = {
    "blaze": "#FC4B32",
    "pink": "#F9486F",
    "teal": "#00A77F",
    "blue": "#286EDC",
    "yellow": "#FBB919",
}
DARK_COLORS = {
    "blaze": "#FD563D",
    "pink": "#F55776",
    "teal": "#17AD85",
    "blue": "#3A80E0",
    "yellow": "#FFBD3B",
}
LIGHT_CONSTANTS = {"gray": "#878780", "background": "#FFFFFF"}
DARK_CONSTANTS = {"gray": "#6F6D66", "background": "#0F0F0E"}


@pytest.fixture(scope="session")
def light_scale() -> ColorScale:
    return generate_color_scale("light", "#0066CC", "#6B7280", "#FFFFFF")


@pytest.fixture(scope="session")
def dark_scale() -> ColorScale:
    return generate_color_scale("dark", "#3A80E0", "#6F6D66", "#0F0F0E")


@pytest.fixture()
def sample_input() -> ColorInput:
    return ColorInput.create(LIGHT_COLORS, DARK_COLORS, LIGHT_CONSTANTS, DARK_CONSTANTS)


@pytest.fixture()
def reload_settings(monkeypatch: pytest.MonkeyPatch) -> Iterator[pytest.MonkeyPatch]:
    """環境変数を monkeypatch 経由で変更し、終了時に戻してから設定を再読込する。"""
    yield monkeypatch
    monkeypatch.undo()
    settings.reload_from_env()
