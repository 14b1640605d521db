"""
どこで: `common.settings`
何を: colorscale の環境変数を型付きで一元管理し、起動時に読み込む。
なぜ: `os.getenv` の散在を解消し、既定値/型の一貫性とテスト容易性を高めるため。
"""

from __future__ import annotations

from dataclasses import dataclass

from .env import env_bool, env_int, env_str


@dataclass
class _Settings:
    # GenerationConfig の既定値
    INCLUDE_ALPHA: bool = True
    INCLUDE_WIDE_GAMUT: bool = True
    INCLUDE_GRAY_SCALE: bool = True
    INCLUDE_OVERLAYS: bool = True

    # 並列生成（1 なら逐次）
    MAX_WORKERS: int = 1

    # Misc
    LOG_LEVEL: str = "INFO"


_settings = _Settings()


def reload_from_env() -> None:
    """環境変数から設定を再読込。

    - bool は `env_bool`、int は `env_int` を使用。
    - MAX_WORKERS は下限 1 に丸める。
    """
    _settings.INCLUDE_ALPHA = env_bool("COLORSCALE_INCLUDE_ALPHA", True)
    _settings.INCLUDE_WIDE_GAMUT = env_bool("COLORSCALE_INCLUDE_WIDE_GAMUT", True)
    _settings.INCLUDE_GRAY_SCALE = env_bool("COLORSCALE_INCLUDE_GRAY_SCALE", True)
    _settings.INCLUDE_OVERLAYS = env_bool("COLORSCALE_INCLUDE_OVERLAYS", True)

    _settings.MAX_WORKERS = env_int("COLORSCALE_MAX_WORKERS", 1, min_value=1) or 1

    _settings.LOG_LEVEL = env_str("COLORSCALE_LOG_LEVEL", "INFO").upper()


def get() -> _Settings:
    """現在の設定スナップショットを返す。"""
    return _settings


# 初期ロード
reload_from_env()


__all__ = ["get", "reload_from_env", "_Settings"]
