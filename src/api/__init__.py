"""
どこで: `api` 入口（HTTP 層）。
何を: アプリケーション生成 `create_app` と起動関数 `main` を再輸出。
なぜ: 利用者が単一名前空間からアプリ生成→サーバ起動まで完結できるようにするため。

Usage:
    from api import create_app
    from common import settings

    app = create_app(settings.get())
"""

from .app import __version__, create_app
from .server import main

__all__ = [
    "create_app",
    "main",
    "__version__",
]
