"""
どこで: `common` パッケージ。
何を: ロギング初期化と環境変数ベースの設定など、ライブラリ横断の軽量ユーティリティ。
なぜ: 色計算コア (`colorscale`) から周辺関心事を分離し、依存の向きを単純化するため。
"""

from .logging import setup_default_logging

__all__ = [
    "setup_default_logging",
]
