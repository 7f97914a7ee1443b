"""共通フィクスチャ。

- 既定値のみのサーバ設定
- FastAPI の TestClient
"""

from __future__ import annotations

from typing import Iterator

import pytest
from fastapi.testclient import TestClient

from api.app import create_app
from common import settings as settings_mod
from common.settings import _Settings


@pytest.fixture()
def settings() -> _Settings:
    """環境変数/構成ファイルに依存しない既定設定。"""
    return _Settings()


@pytest.fixture()
def client(settings: _Settings) -> Iterator[TestClient]:
    with TestClient(create_app(settings), raise_server_exceptions=False) as c:
        yield c


@pytest.fixture()
def restore_settings() -> Iterator[None]:
    """グローバル設定を書き換えるテストの後始末。

    monkeypatch より先に要求すること（環境変数が戻った後に再読込するため）。
    """
    yield
    settings_mod.reload_from_env({})
