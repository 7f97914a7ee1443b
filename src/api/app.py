"""
どこで: `api.app`。
何を: FastAPI アプリケーションを明示的な設定から組み立てる（ミドルウェア・例外ハンドラ・ルート）。
なぜ: 環境変数などのグローバル状態に依存せず、テストから任意の設定でアプリを生成できるようにするため。

エラー応答の対応:
- `InvalidColor` / `InvalidStep` → 400 `{"error", "detail"}`
- 未定義ルート → 404 `{"error": "Route not found"}`
- その他の未捕捉例外 → 500 `{"error": "Internal server error"}`（トレースバックはログへ）
"""

from __future__ import annotations

import logging
import time
from typing import Awaitable, Callable

from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from common.settings import _Settings
from palette import InvalidColor, InvalidStep, PaletteError

from .routes import router

logger = logging.getLogger(__name__)

__version__ = "2026.10"


def create_app(settings: _Settings) -> FastAPI:
    """設定からアプリケーションを生成する。

    Parameters
    ----------
    settings : _Settings
        サーバ設定。`app.state.settings` に保持され、ルートから参照される。
    """
    app = FastAPI(title="Tonal Palette API", version=__version__)
    app.state.settings = settings

    app.add_middleware(GZipMiddleware, minimum_size=settings.GZIP_MIN_SIZE)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(settings.CORS_ORIGINS),
        allow_credentials=True,
        allow_methods=["GET", "OPTIONS"],
        allow_headers=["*"],
    )
    if settings.ACCESS_LOG:
        app.middleware("http")(_log_request)

    app.include_router(router)
    _register_error_handlers(app)
    return app


async def _log_request(
    request: Request, call_next: Callable[[Request], Awaitable[Response]]
) -> Response:
    started = time.perf_counter()
    response = await call_next(request)
    elapsed_ms = (time.perf_counter() - started) * 1000.0
    client = request.client.host if request.client else "-"
    logger.info(
        '%s "%s %s" %d %.1fms',
        client,
        request.method,
        request.url.path,
        response.status_code,
        elapsed_ms,
    )
    return response


def _register_error_handlers(app: FastAPI) -> None:
    @app.exception_handler(PaletteError)
    async def _palette_error(request: Request, exc: PaletteError) -> JSONResponse:
        if isinstance(exc, InvalidColor):
            error = "Invalid hex color"
        elif isinstance(exc, InvalidStep):
            error = "Invalid step"
        else:
            error = "Invalid input"
        logger.info("rejected %s: %s", request.url.path, exc)
        return JSONResponse(status_code=400, content={"error": error, "detail": str(exc)})

    @app.exception_handler(StarletteHTTPException)
    async def _http_error(request: Request, exc: StarletteHTTPException) -> JSONResponse:
        if exc.status_code == 404:
            content = {"error": "Route not found"}
        else:
            content = {"error": str(exc.detail)}
        return JSONResponse(status_code=exc.status_code, content=content, headers=exc.headers)

    @app.exception_handler(Exception)
    async def _unhandled_error(request: Request, exc: Exception) -> JSONResponse:
        logger.exception("unhandled error on %s %s", request.method, request.url.path)
        return JSONResponse(status_code=500, content={"error": "Internal server error"})


__all__ = ["create_app", "__version__"]
