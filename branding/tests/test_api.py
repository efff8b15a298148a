from __future__ import annotations

from fastapi.testclient import TestClient

from branding import api
from branding.src.palette_engine.io import DecodeError
from branding.src.palette_engine.pipeline import build_palette_result


def test_extract_endpoint_returns_palette_fields(monkeypatch):
    class FakePipeline:
        def __init__(self, options):
            self.options = options

        def run_path(self, image_path: str):
            assert image_path == "https://example.com/logo.png"
            assert self.options.cluster_count == 4
            assert self.options.max_dimension == 200
            return build_palette_result("#2563eb", "#10b981", "#f59e0b")

    monkeypatch.setattr(api, "_build_pipeline", lambda options: FakePipeline(options))

    client = TestClient(api.app)
    response = client.post(
        "/extract",
        json={"image_url": "https://example.com/logo.png", "cluster_count": 4},
    )

    assert response.status_code == 200
    payload = response.json()
    assert payload["palette"]["primary"] == "#2563eb"
    assert payload["palette"]["text_on_accent"] == "#000000"
    assert payload["dominant_colors"] == ["#2563eb", "#10b981", "#f59e0b"]
    assert payload["wcag_compliant"] is True
    assert set(payload["contrast_ratios"]) == {"primary", "secondary", "accent"}
    assert "--primary-color: #2563eb;" in payload["css"]


def test_extract_endpoint_reports_decode_failures(monkeypatch):
    class BrokenPipeline:
        def run_path(self, image_path: str):
            raise DecodeError("unable to decode image")

    monkeypatch.setattr(api, "_build_pipeline", lambda options: BrokenPipeline())

    client = TestClient(api.app)
    response = client.post("/extract", json={"image_url": "https://example.com/x.png"})

    assert response.status_code == 400
    assert response.json()["detail"].startswith("failed_to_extract_colors")


def test_extract_endpoint_rejects_local_paths():
    client = TestClient(api.app)
    response = client.post("/extract", json={"image_url": "/etc/passwd"})

    assert response.status_code == 400
    assert response.json()["detail"].startswith("invalid_image_url")


def test_extract_endpoint_rejects_inverted_brightness_bounds():
    client = TestClient(api.app)
    response = client.post(
        "/extract",
        json={
            "image_url": "https://example.com/logo.png",
            "min_brightness": 0.9,
            "max_brightness": 0.1,
        },
    )

    assert response.status_code == 400
    assert response.json()["detail"].startswith("invalid_options")


def test_palette_endpoint_builds_manual_palette():
    client = TestClient(api.app)
    response = client.post("/palette", json={"primary": "#000000"})

    assert response.status_code == 200
    payload = response.json()
    assert payload["palette"]["text_on_primary"] == "#ffffff"
    assert abs(payload["contrast_ratios"]["primary"] - 21.0) < 1e-9
    assert payload["auto_extracted"] is False


def test_palette_endpoint_rejects_invalid_color():
    client = TestClient(api.app)
    response = client.post("/palette", json={"primary": "not-a-color"})

    assert response.status_code == 400
    assert response.json()["detail"].startswith("invalid_color")
