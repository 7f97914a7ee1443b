"""
どこで: `api.server`（プロセス起動）。
何を: `.env` 読込 → 設定確定 → ロギング初期化 → アプリ生成 → uvicorn 起動を順に行う。
なぜ: プロセス全体の状態（環境変数・ロガー）の扱いを起動関数 1 箇所に閉じ込めるため。

使い方:
    python -m api --port 8080
    palette-server --log-level DEBUG
"""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import Sequence

import uvicorn
from dotenv import load_dotenv
from fastapi import FastAPI

from common import settings as settings_mod
from common.logging import setup_default_logging
from common.settings import _Settings

from .app import create_app

logger = logging.getLogger(__name__)


def _parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Serve the tonal palette HTTP API.")
    parser.add_argument("--host", default=None, help="bind address (default: settings HOST)")
    parser.add_argument("--port", type=int, default=None, help="port (default: PORT or 10000)")
    parser.add_argument("--log-level", default=None, help="logging level (default: INFO)")
    parser.add_argument("--env-file", type=Path, default=None, help=".env file to load")
    return parser.parse_args(argv)


def load_settings(env_file: Path | None = None) -> _Settings:
    """`.env` を読み込んだうえで設定を再読込して返す（既存の環境変数を優先）。"""
    if env_file is not None:
        load_dotenv(env_file, override=False)
    else:
        load_dotenv(override=False)
    return settings_mod.reload_from_env()


def build_app(settings: _Settings | None = None) -> FastAPI:
    """設定（省略時は現在のスナップショット）からアプリを生成する。"""
    return create_app(settings if settings is not None else settings_mod.get())


def main(argv: Sequence[str] | None = None) -> int:
    args = _parse_args(argv)
    cfg = load_settings(args.env_file)
    if args.host is not None:
        cfg.HOST = args.host
    if args.port is not None:
        cfg.PORT = args.port
    if args.log_level is not None:
        cfg.LOG_LEVEL = args.log_level.upper()

    setup_default_logging(cfg.LOG_LEVEL)
    app = build_app(cfg)
    logger.info("API listening on %s:%d", cfg.HOST, cfg.PORT)
    uvicorn.run(
        app,
        host=cfg.HOST,
        port=cfg.PORT,
        log_level=cfg.LOG_LEVEL.lower(),
        # Requests are logged by the app middleware.
        access_log=False,
    )
    return 0


__all__ = ["main", "build_app", "load_settings"]
