"""
どこで: `api.routes`。
何を: パレット生成・コントラスト解析・ヘルスチェックの HTTP ルート。
なぜ: HTTP 層は入力の受け渡しと JSON 化のみを担い、色の計算はすべて `palette` に委譲するため。

ハンドラは通常の `def` とし、FastAPI のスレッドプールで実行させる（計算は同期・無状態）。
"""

from __future__ import annotations

from typing import Any, Literal, Optional

from fastapi import APIRouter, Depends, Query, Request

from common.settings import _Settings
from palette import (
    analyze_contrast,
    generate_palette,
    is_accessible_combination,
    normalize_hex,
    palette_to_dict,
    parsed_hsl,
)

router = APIRouter()


def get_settings(request: Request) -> _Settings:
    """アプリに束縛された設定を返す。"""
    return request.app.state.settings


@router.get("/api/health")
def health() -> dict[str, str]:
    return {"status": "ok", "message": "API running"}


@router.get("/gen-palette/{hex_digits}")
def gen_palette(
    hex_digits: str,
    step: Optional[int] = Query(None, description="Tone index spacing (default from settings)"),
    settings: _Settings = Depends(get_settings),
) -> dict[str, Any]:
    """`#<hex_digits>` を基準色とするトーンパレットを返す。"""
    palette = generate_palette(f"#{hex_digits}", settings.DEFAULT_STEP if step is None else step)
    return {
        "parsed": parsed_hsl(palette.base.hex),
        "colorPalette": palette_to_dict(palette),
    }


@router.get("/contrast/{hex_digits}")
def contrast(
    hex_digits: str,
    text: Optional[str] = Query(None, description="Text color to check against the background"),
    level: Literal["AA", "AAA"] = Query("AA"),
) -> dict[str, Any]:
    """背景色に対する最適な文字色と WCAG 適合レベルを返す。"""
    background = normalize_hex(f"#{hex_digits}")
    analysis = analyze_contrast(background)
    body: dict[str, Any] = {
        "background": background,
        "textColor": analysis.text_color,
        "contrastRatio": analysis.contrast_ratio,
        "isAccessible": analysis.is_accessible,
        "wcagLevel": analysis.wcag_level.value,
    }
    if text is not None:
        body["text"] = normalize_hex(text)
        body["level"] = level
        body["accessible"] = is_accessible_combination(background, text, level)
    return body


__all__ = ["router", "get_settings"]
