"""
どこで: `common.settings`
何を: サーバの設定を型付きで一元管理し、起動時に読み込む。
なぜ: `os.getenv` の散在を解消し、既定値/型の一貫性とテスト容易性を高めるため。

優先順（後勝ち）:
1) `_Settings` の既定値
2) YAML 構成（`util.utils.load_config()`）の `server:` セクション
3) 環境変数（`PORT` と `PALETTE_*`）
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, fields, replace
from typing import Any, Mapping

from util.utils import load_config

from .env import env_bool, env_int, env_list, env_str

logger = logging.getLogger(__name__)


@dataclass
class _Settings:
    # HTTP サーバ
    HOST: str = "0.0.0.0"
    PORT: int = 10000

    # ロギング
    LOG_LEVEL: str = "INFO"
    ACCESS_LOG: bool = True

    # ミドルウェア
    CORS_ORIGINS: list[str] = field(default_factory=lambda: ["*"])
    GZIP_MIN_SIZE: int = 500

    # パレット
    DEFAULT_STEP: int = 100


_settings = _Settings()


def _coerce(current: Any, raw: Any) -> Any:
    if isinstance(current, bool):
        if isinstance(raw, bool):
            return raw
        return str(raw).strip().lower() in {"1", "true", "t", "yes", "y", "on"}
    if isinstance(current, int):
        return int(raw)
    if isinstance(current, list):
        if isinstance(raw, str):
            return [s.strip() for s in raw.split(",") if s.strip()]
        return [str(s) for s in raw]
    return str(raw)


def from_config(config: Mapping[str, Any]) -> _Settings:
    """YAML 構成の `server:` セクションから設定を作る（不正値は既定値のまま）。"""
    base = _Settings()
    section = config.get("server") if isinstance(config, Mapping) else None
    if not isinstance(section, Mapping):
        return base
    updates: dict[str, Any] = {}
    for f in fields(_Settings):
        key = f.name.lower()
        if key not in section:
            continue
        try:
            updates[f.name] = _coerce(getattr(base, f.name), section[key])
        except (TypeError, ValueError):
            logger.warning("ignoring invalid config value server.%s=%r", key, section[key])
    return replace(base, **updates)


def reload_from_env(config: Mapping[str, Any] | None = None) -> _Settings:
    """YAML 構成と環境変数から設定を再読込。

    - `config` 省略時は `util.utils.load_config()` を読む。
    - bool は `env_bool`、int は `env_int` を使用し、一部は下限丸めを適用。
    """
    base = from_config(load_config() if config is None else config)

    _settings.HOST = env_str("PALETTE_HOST", base.HOST)
    _settings.PORT = env_int("PORT", base.PORT, min_value=0) or 0
    _settings.LOG_LEVEL = env_str("PALETTE_LOG_LEVEL", base.LOG_LEVEL).upper()
    _settings.ACCESS_LOG = env_bool("PALETTE_ACCESS_LOG", base.ACCESS_LOG)
    _settings.CORS_ORIGINS = env_list("PALETTE_CORS_ORIGINS", base.CORS_ORIGINS)
    _settings.GZIP_MIN_SIZE = env_int("PALETTE_GZIP_MIN_SIZE", base.GZIP_MIN_SIZE, min_value=0) or 0
    _settings.DEFAULT_STEP = env_int("PALETTE_DEFAULT_STEP", max(1, base.DEFAULT_STEP), min_value=1) or 1
    return _settings


def get() -> _Settings:
    """現在の設定スナップショットを返す。"""
    return _settings


# 初期ロード
reload_from_env()


__all__ = ["get", "reload_from_env", "from_config", "_Settings"]
