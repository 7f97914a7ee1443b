"""
どこで: `common` パッケージ。
何を: palette/api 双方で使う軽量ユーティリティ（ロギング・環境変数・設定）。
なぜ: HTTP 層から再利用する共通基盤を分離し、依存の向きを単純化するため。
"""

from .logging import setup_default_logging

__all__ = [
    "setup_default_logging",
]
