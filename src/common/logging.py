"""
どこで: `common.logging`。
何を: プロジェクト向けの軽量ロギングユーティリティ。
なぜ: サーバ起動時に一度だけ妥当な最小構成を適用するため。

要点:
- 既定では各モジュールが `logging.getLogger(__name__)` でロガーを取得する。
- uvicorn など上位で設定済みの場合は何もしない。
"""

from __future__ import annotations

import logging

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def resolve_level(level: int | str) -> int:
    """レベル名/数値を `logging` のレベル値へ変換する（不明な名前は INFO）。"""
    if isinstance(level, str):
        lvl = getattr(logging, level.upper(), logging.INFO)
        return lvl if isinstance(lvl, int) else logging.INFO
    return int(level)


def setup_default_logging(level: int | str = "INFO") -> None:
    """最小限のロギング設定を 1 度だけ適用する。

    - ルートロガーにハンドラが既にあれば何もしない（no-op）
    - `api.server.main` から呼び出す想定
    """
    lvl = resolve_level(level)

    root = logging.getLogger()
    if root.handlers:
        # Assume the app has configured logging
        return
    logging.basicConfig(level=lvl, format=LOG_FORMAT)


__all__ = ["setup_default_logging", "resolve_level", "LOG_FORMAT"]
