"""Tests for the ImageGuard service object."""
import io
import json
import logging
from concurrent.futures import ThreadPoolExecutor

import numpy as np
import pytest
from PIL import Image

from print_guard.guard import (
    DEFAULT_CONFIG,
    ImageGuard,
    Metrics,
    load_grayscale,
    log_entry,
)
from print_guard.phash import InvalidInputError, phash_from_gray
from print_guard.policy import Verdict


def encode(img, fmt="PNG"):
    buf = io.BytesIO()
    img.save(buf, format=fmt)
    return buf.getvalue()


def gradient_array(width=64, height=48):
    row = np.arange(width, dtype=np.uint16) * 255 // (width - 1)
    return np.tile(row.astype(np.uint8), (height, 1))


@pytest.fixture
def guard(monkeypatch):
    """Create an ImageGuard with a clean moderation environment."""
    for name in ("MODERATION_STRICT", "MOD_BLOCK_HATE", "MOD_EXPLICIT_THRESHOLD", "MOD_HATE_THRESHOLD"):
        monkeypatch.delenv(name, raising=False)
    return ImageGuard(DEFAULT_CONFIG.copy())


def test_config_validation():
    with pytest.raises(ValueError, match="known_phashes"):
        ImageGuard({"phash_match_thresh": 10})


class TestModerate:
    def test_verdicts(self, guard):
        assert guard.moderate([], {"sexual_explicit": 0.8}) == Verdict("block", "sexual_explicit")
        assert guard.moderate(["hentai"], {"sexual_explicit": 0.95}) == Verdict("allow", "")
        assert guard.moderate(["provider_error", "nudity_minor"], {}) == Verdict(
            "warn", "provider_error"
        )

    def test_request_overrides(self, guard):
        verdict = guard.moderate([], {"hate_symbol": 0.7}, overrides={"block_hate": False})
        assert verdict.allowed

    def test_configured_overrides(self):
        conf = DEFAULT_CONFIG.copy()
        conf["threshold_overrides"] = {"explicit_threshold": 0.5}
        g = ImageGuard(conf)
        assert g.moderate([], {"sexual_explicit": 0.6}).reason == "sexual_explicit"
        # Per-request values win over configured ones.
        assert g.moderate([], {"sexual_explicit": 0.6}, {"explicit_threshold": 0.9}).allowed

    def test_environment_is_read_per_call(self, guard, monkeypatch):
        assert guard.moderate([], {"hate_symbol": 0.7}).action == "block"
        monkeypatch.setenv("MOD_BLOCK_HATE", "off")
        assert guard.moderate([], {"hate_symbol": 0.7}).action == "allow"

    def test_invalid_scores_raise(self, guard):
        with pytest.raises(ValueError):
            guard.moderate([], {"nudity_adult": 2})

    def test_metrics(self, guard):
        guard.moderate([], {"sexual_explicit": 0.9})
        guard.moderate([], {"nudity_adult": 0.6})
        guard.moderate([], {})
        summary = guard.metrics.summary()
        assert summary["total"] == 3
        assert summary["blocks"] == 1
        assert summary["warns"] == 1
        assert summary["allows"] == 1
        assert summary["top_reasons"] == {"sexual_explicit": 1, "nudity_adult": 1}

    def test_verbose_logs_thresholds(self, guard, caplog):
        with caplog.at_level(logging.INFO):
            guard.moderate([], {}, verbose=True)
        assert "explicit_threshold" in caplog.text

    def test_text_gate_runs_before_policy(self, guard):
        verdict = guard.moderate([], {}, filename="heil_hitler.png")
        assert verdict == Verdict("block", "text_hate")
        verdict = guard.moderate(["hentai"], {}, text_hints=["sieg heil"])
        assert verdict.reason == "text_hate"
        assert guard.metrics.summary()["top_reasons"] == {"text_hate": 2}

    def test_clean_metadata_falls_through(self, guard):
        verdict = guard.moderate([], {"nudity_adult": 0.6}, design_name="Pacific sunset")
        assert verdict == Verdict("warn", "nudity_adult")


class TestModerateScan:
    def test_provider_categories_are_normalized(self, guard):
        verdict = guard.moderate_scan(
            {"sexual": True, "hate": False}, {"sexual": 0.9, "hate": 0.1}
        )
        assert verdict == Verdict("block", "sexual_explicit")

    def test_minor_category(self, guard):
        verdict = guard.moderate_scan({"sexual/minors": True}, {"sexual/minors": 0.2})
        assert verdict == Verdict("block", "nudity_minor")

    def test_scores_are_clamped(self, guard):
        verdict = guard.moderate_scan({}, {"extremist": 4.0, "violence": "n/a"})
        assert verdict == Verdict("block", "hate_symbol")

    def test_clean_scan_allows(self, guard):
        assert guard.moderate_scan({}, {}).allowed

    def test_provider_failure_warns(self, guard):
        verdict = guard.moderate_scan({"sexual": True}, {"sexual": 0.99}, provider_failed=True)
        assert verdict == Verdict("warn", "provider_error")

    def test_text_gate_wins_over_provider_failure(self, guard):
        verdict = guard.moderate_scan(provider_failed=True, design_name="White Power tee")
        assert verdict == Verdict("block", "text_hate")

    def test_overrides_apply(self, guard):
        verdict = guard.moderate_scan({}, {"sexual": 0.8}, overrides={"explicitThreshold": 0.9})
        assert verdict.allowed


def test_metrics_block_rate():
    m = Metrics()
    assert m.summary()["block_rate"] == 0
    m.record(Verdict("block", "hate_symbol"))
    m.record(Verdict("allow"))
    assert m.summary()["block_rate"] == 0.5


def test_metrics_concurrent_records():
    m = Metrics()
    verdicts = [Verdict("block", "hate_symbol"), Verdict("warn", "nudity_adult"), Verdict("allow")]

    def worker(i):
        for _ in range(500):
            m.record(verdicts[i % 3])

    with ThreadPoolExecutor(max_workers=6) as pool:
        list(pool.map(worker, range(6)))
    summary = m.summary()
    assert summary["total"] == 3000
    assert summary["blocks"] == summary["warns"] == summary["allows"] == 1000
    assert summary["top_reasons"] == {"hate_symbol": 1000, "nudity_adult": 1000}


class TestImages:
    def test_load_grayscale(self):
        arr = gradient_array()
        pixels, width, height = load_grayscale(encode(Image.fromarray(arr, "L")))
        assert (width, height) == (64, 48)
        assert np.array_equal(pixels, arr)

    def test_load_grayscale_converts_color(self):
        pixels, width, height = load_grayscale(encode(Image.new("RGB", (20, 10), "white")))
        assert (width, height) == (20, 10)
        assert pixels.shape == (10, 20)
        assert int(pixels.min()) == 255

    @pytest.mark.parametrize("data", [b"", b"not an image"])
    def test_load_grayscale_rejects_garbage(self, data):
        with pytest.raises(InvalidInputError):
            load_grayscale(data)

    def test_fingerprint_matches_buffer_hash(self, guard):
        arr = gradient_array()
        expected = phash_from_gray(arr, 64, 48)
        assert guard.fingerprint(encode(Image.fromarray(arr, "L"))) == expected

    @pytest.mark.parametrize("color", ["white", "black", "red"])
    def test_solid_images_hash_to_zero(self, guard, color):
        data = encode(Image.new("RGB", (100, 100), color=color))
        assert guard.fingerprint(data) == "0000000000000000"

    def test_fingerprint_of_gif_uses_first_frame(self, guard):
        frames = [Image.new("L", (40, 40), 0), Image.fromarray(gradient_array(40, 40), "L")]
        buf = io.BytesIO()
        frames[0].save(buf, format="GIF", save_all=True, append_images=frames[1:])
        assert guard.fingerprint(buf.getvalue()) == "0000000000000000"

    def test_fingerprint_rejects_garbage(self, guard):
        with pytest.raises(InvalidInputError):
            guard.fingerprint(b"definitely not an image")


class TestKnownHashes:
    def test_no_known_hashes(self, guard):
        result = guard.match_known("0123456789abcdef")
        assert result.min_distance is None
        assert result.matches == []
        assert not result.duplicate

    def test_duplicate_detection(self):
        conf = DEFAULT_CONFIG.copy()
        conf["known_phashes"] = ["FFFFFFFFFFFFFFFF", "000000000000000f"]
        g = ImageGuard(conf)
        result = g.match_known("0000000000000000")
        assert result.min_distance == 4
        assert result.duplicate
        assert {"known": "ffffffffffffffff", "dist": 64} in result.matches

    def test_threshold_boundary(self):
        conf = DEFAULT_CONFIG.copy()
        conf["known_phashes"] = ["00000000000007ff"]
        conf["phash_match_thresh"] = 10
        result = ImageGuard(conf).match_known("0000000000000000")
        assert result.min_distance == 11
        assert not result.duplicate

    def test_malformed_known_hashes_are_skipped(self, caplog):
        conf = DEFAULT_CONFIG.copy()
        conf["known_phashes"] = ["nothex", 42, "0000000000000000"]
        with caplog.at_level(logging.WARNING):
            g = ImageGuard(conf)
        assert g.known_phashes == ["0000000000000000"]
        assert "nothex" in caplog.text

    def test_malformed_query_raises(self, guard):
        with pytest.raises(InvalidInputError):
            guard.match_known("xyz")

    def test_assess_image(self):
        conf = DEFAULT_CONFIG.copy()
        conf["known_phashes"] = ["0000000000000000"]
        result = ImageGuard(conf).assess_image(encode(Image.new("L", (30, 30), 90)))
        assert result.phash == "0000000000000000"
        assert result.min_distance == 0
        assert result.duplicate


def test_log_entry(tmp_path):
    path = tmp_path / "decisions.jsonl"
    logger = logging.getLogger("test")
    log_entry("2026-01-01T00:00:00", "req-1", Verdict("warn", "nudity_adult"), None, str(path), logger)
    log_entry("2026-01-01T00:00:01", "req-2", Verdict("allow"), "0000000000000000", str(path), logger)
    lines = [json.loads(line) for line in path.read_text(encoding="utf-8").splitlines()]
    assert lines[0]["reason"] == "nudity_adult"
    assert lines[0]["phash"] is None
    assert lines[1]["action"] == "allow"
    assert lines[1]["phash"] == "0000000000000000"
