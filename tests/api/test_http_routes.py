from __future__ import annotations

from fastapi.testclient import TestClient

from api.app import create_app
from common.settings import _Settings


def test_health(client: TestClient) -> None:
    res = client.get("/api/health")
    assert res.status_code == 200
    assert res.json() == {"status": "ok", "message": "API running"}


def test_gen_palette(client: TestClient) -> None:
    res = client.get("/gen-palette/3498db", params={"step": 100})
    assert res.status_code == 200
    body = res.json()
    assert body["parsed"] == {"hue": 204, "saturation": 70, "lightness": 53}
    palette = body["colorPalette"]
    assert len(palette["colors"]["hex"]) == 9
    assert palette["colors"]["hex"]["500"]["hex"] == "#3498db"
    assert palette["mainColor"]["index"] == 500
    assert palette["mainColor"]["hex"]["value"] == "#3498db"


def test_gen_palette_uses_default_step_from_settings(client: TestClient) -> None:
    res = client.get("/gen-palette/3498db")
    assert res.status_code == 200
    assert len(res.json()["colorPalette"]["colors"]["hex"]) == 9

    app = create_app(_Settings(DEFAULT_STEP=50))
    with TestClient(app) as c:
        res = c.get("/gen-palette/3498db")
    assert len(res.json()["colorPalette"]["colors"]["hex"]) == 19


def test_gen_palette_short_hex(client: TestClient) -> None:
    res = client.get("/gen-palette/fff", params={"step": 250})
    assert res.status_code == 200
    main = res.json()["colorPalette"]["mainColor"]
    assert main["index"] == 0
    assert main["hex"]["value"] == "#ffffff"


def test_invalid_color_is_client_error(client: TestClient) -> None:
    res = client.get("/gen-palette/zzz")
    assert res.status_code == 400
    body = res.json()
    assert body["error"] == "Invalid hex color"
    assert "#zzz" in body["detail"]


def test_invalid_step(client: TestClient) -> None:
    res = client.get("/gen-palette/3498db", params={"step": 0})
    assert res.status_code == 400
    assert res.json()["error"] == "Invalid step"

    res = client.get("/gen-palette/3498db", params={"step": "abc"})
    assert res.status_code == 422


def test_unknown_route(client: TestClient) -> None:
    res = client.get("/does-not-exist")
    assert res.status_code == 404
    assert res.json() == {"error": "Route not found"}


def test_unexpected_error_is_500(client: TestClient, monkeypatch) -> None:
    def boom(*args, **kwargs):
        raise RuntimeError("boom")

    monkeypatch.setattr("api.routes.generate_palette", boom)
    res = client.get("/gen-palette/3498db")
    assert res.status_code == 500
    assert res.json() == {"error": "Internal server error"}


def test_contrast(client: TestClient) -> None:
    res = client.get("/contrast/000000")
    assert res.status_code == 200
    assert res.json() == {
        "background": "#000000",
        "textColor": "#ffffff",
        "contrastRatio": 21.0,
        "isAccessible": True,
        "wcagLevel": "AAA",
    }


def test_contrast_with_text_color(client: TestClient) -> None:
    res = client.get("/contrast/777777", params={"text": "ffffff", "level": "AA"})
    assert res.status_code == 200
    body = res.json()
    assert body["textColor"] == "#000000"
    assert body["text"] == "#ffffff"
    assert body["level"] == "AA"
    assert body["accessible"] is False

    res = client.get("/contrast/777777", params={"level": "A"})
    assert res.status_code == 422

    res = client.get("/contrast/777777", params={"text": "nope"})
    assert res.status_code == 400


def test_cors_header(client: TestClient) -> None:
    origin = "http://example.com"
    res = client.get("/api/health", headers={"Origin": origin})
    assert res.headers["access-control-allow-origin"] in ("*", origin)


def test_gzip_for_large_responses(client: TestClient) -> None:
    res = client.get("/gen-palette/3498db", params={"step": 10}, headers={"Accept-Encoding": "gzip"})
    assert res.status_code == 200
    assert res.headers.get("content-encoding") == "gzip"
    assert len(res.json()["colorPalette"]["colors"]["hex"]) == 99


def test_access_log(client: TestClient, caplog) -> None:
    with caplog.at_level("INFO", logger="api.app"):
        client.get("/api/health")
    assert any("/api/health" in r.getMessage() and "200" in r.getMessage() for r in caplog.records)
