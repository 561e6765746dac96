"""Tests for the FastAPI application endpoints."""
import io
import json

import numpy as np
import pytest
from fastapi.testclient import TestClient
from PIL import Image

from print_guard.app import app
from print_guard.phash import phash_from_gray


def png_bytes(img):
    buf = io.BytesIO()
    img.save(buf, format="PNG")
    return buf.getvalue()


@pytest.fixture
def client(monkeypatch):
    """Create a test client; startup builds the guard from the environment."""
    for name in ("HASH_LIST_PATH", "MODERATION_STRICT", "MOD_BLOCK_HATE", "MOD_EXPLICIT_THRESHOLD"):
        monkeypatch.delenv(name, raising=False)
    with TestClient(app) as c:
        yield c


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_version(client):
    response = client.get("/version")
    assert response.status_code == 200
    assert "version" in response.json()


def test_thresholds(client):
    response = client.get("/thresholds")
    assert response.status_code == 200
    data = response.json()
    assert data["explicit_threshold"] == 0.75
    assert data["block_hate"] is True
    assert "Pacific" in data["geo_keywords"]


class TestModerate:
    def test_block(self, client):
        response = client.post("/moderate", json={"scores": {"sexual_explicit": 0.8}})
        assert response.status_code == 200
        assert response.json() == {"action": "block", "reason": "sexual_explicit"}

    def test_allow(self, client):
        response = client.post(
            "/moderate", json={"labels": ["hentai"], "scores": {"sexual_explicit": 0.95}}
        )
        assert response.json() == {"action": "allow", "reason": ""}

    def test_provider_error(self, client):
        response = client.post("/moderate", json={"labels": ["provider_error", "nudity_minor"]})
        assert response.json() == {"action": "warn", "reason": "provider_error"}

    def test_overrides(self, client):
        response = client.post(
            "/moderate",
            json={"scores": {"hate_symbol": 0.7}, "overrides": {"block_hate": False}},
        )
        assert response.json() == {"action": "allow", "reason": ""}

    def test_out_of_range_score(self, client):
        response = client.post("/moderate", json={"scores": {"nudity_adult": 1.5}})
        assert response.status_code == 422

    def test_non_numeric_score(self, client):
        response = client.post("/moderate", json={"scores": {"nudity_adult": "high"}})
        assert response.status_code == 422

    def test_provider_scan(self, client):
        response = client.post(
            "/moderate",
            json={
                "categories": {"sexual": True, "hate": False},
                "category_scores": {"sexual": 0.91, "hate": 0.02},
            },
        )
        assert response.status_code == 200
        assert response.json() == {"action": "block", "reason": "sexual_explicit"}

    def test_provider_scan_with_camel_case_override(self, client):
        response = client.post(
            "/moderate",
            json={
                "category_scores": {"sexual": 0.8},
                "overrides": {"explicitThreshold": 0.95},
            },
        )
        assert response.json() == {"action": "allow", "reason": ""}

    def test_provider_failure(self, client):
        response = client.post("/moderate", json={"provider_error": True})
        assert response.json() == {"action": "warn", "reason": "provider_error"}

    def test_text_gate(self, client):
        response = client.post(
            "/moderate",
            json={"filename": "tee.png", "design_name": "Blut und Boden", "scores": {}},
        )
        assert response.json() == {"action": "block", "reason": "text_hate"}

    def test_text_gate_on_scan(self, client):
        response = client.post(
            "/moderate",
            json={"category_scores": {}, "text_hints": ["Ocean", "14/88"]},
        )
        assert response.json() == {"action": "block", "reason": "text_hate"}


class TestFingerprint:
    def test_solid_image(self, client):
        data = png_bytes(Image.new("RGB", (64, 64), "white"))
        response = client.post("/fingerprint", files={"file": ("a.png", data, "image/png")})
        assert response.status_code == 200
        assert response.json() == {
            "phash": "0000000000000000",
            "min_distance": None,
            "duplicate": False,
        }

    def test_gradient_image(self, client):
        arr = np.tile(np.arange(0, 256, 4, dtype=np.uint8), (32, 1))
        data = png_bytes(Image.fromarray(arr, "L"))
        response = client.post("/fingerprint", files={"file": ("g.png", data, "image/png")})
        assert response.status_code == 200
        assert response.json()["phash"] == phash_from_gray(arr, 64, 32)

    def test_unsupported_media_type(self, client):
        response = client.post("/fingerprint", files={"file": ("a.txt", b"hello", "text/plain")})
        assert response.status_code == 415

    def test_file_too_large(self, client):
        response = client.post(
            "/fingerprint", files={"file": ("a.jpg", b"a" * 10000001, "image/jpeg")}
        )
        assert response.status_code == 413

    def test_undecodable_image(self, client):
        response = client.post(
            "/fingerprint", files={"file": ("a.png", b"not really a png", "image/png")}
        )
        assert response.status_code == 400


def test_known_hashes_loaded_at_startup(tmp_path, monkeypatch):
    path = tmp_path / "hashes.json"
    path.write_text(json.dumps({"known_phashes": ["0000000000000003"]}), encoding="utf-8")
    monkeypatch.setenv("HASH_LIST_PATH", str(path))
    data = png_bytes(Image.new("L", (16, 16), 40))
    with TestClient(app) as c:
        response = c.post("/fingerprint", files={"file": ("a.png", data, "image/png")})
    assert response.json() == {
        "phash": "0000000000000000",
        "min_distance": 2,
        "duplicate": True,
    }


def test_broken_hash_list_is_ignored(tmp_path, monkeypatch):
    path = tmp_path / "hashes.json"
    path.write_text("{not json", encoding="utf-8")
    monkeypatch.setenv("HASH_LIST_PATH", str(path))
    with TestClient(app) as c:
        assert c.get("/health").status_code == 200
        assert app.state.guard.known_phashes == []
