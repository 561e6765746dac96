"""Tests for provider label normalization and the text hate gate."""
import pytest

from print_guard.config import resolve
from print_guard.labels import (
    hate_text_check,
    normalize_label,
    provider_error_input,
    scan_to_input,
)
from print_guard.policy import decide


@pytest.mark.parametrize(
    "raw,expected",
    [
        ("sexual", "sexual_explicit"),
        ("Adult", "sexual_explicit"),
        ("explicit-nudity", "sexual_explicit"),
        ("nudity", "nudity_adult"),
        ("sexual/minors", "nudity_minor"),
        ("Sexual Minor", "nudity_minor"),
        ("hate", "hate_symbol"),
        ("hate_symbols", "hate_symbol"),
        ("extremist", "hate_symbol"),
        ("racy", "sexy"),
        ("hentai", "hentai"),
        ("  Violence ", "violence"),
        ("self-harm/intent", "self_harm_intent"),
    ],
)
def test_normalize_label(raw, expected):
    assert normalize_label(raw) == expected


@pytest.mark.parametrize("raw", [None, "", "  ", "---", "x" * 65])
def test_normalize_label_rejects_empty_or_long(raw):
    assert normalize_label(raw) is None


def test_scan_to_input():
    inp = scan_to_input(
        {"sexual": True, "hate": False, "sexual/minors": True},
        {"sexual": 0.9, "hate": 1.2, "violence": "x", "nudity": float("nan")},
    )
    assert inp.labels == frozenset({"sexual_explicit", "nudity_minor"})
    assert inp.scores.sexual_explicit == 0.9
    assert inp.scores.hate_symbol == 1.0
    assert inp.scores.nudity_adult == 0.0
    assert decide(inp, resolve(env={})).reason == "nudity_minor"


def test_scan_to_input_keeps_highest_colliding_score():
    inp = scan_to_input({}, {"hate": 0.2, "extremist": 0.7, "hate_symbols": 0.4})
    assert inp.scores.hate_symbol == 0.7


def test_scan_to_input_clamps_negative_scores():
    assert scan_to_input({}, {"nudity": -3}).scores.nudity_adult == 0.0


def test_provider_error_input():
    verdict = decide(provider_error_input(), resolve(env={}))
    assert (verdict.action, verdict.reason) == ("warn", "provider_error")


class TestHateTextCheck:
    def test_filename_match(self):
        result = hate_text_check(filename="Hitler_poster.png")
        assert result.blocked
        assert result.reason == "text_hate"
        assert result.term == "hitler"

    def test_accents_are_folded(self):
        assert hate_text_check(design_name="Esvástica roja").blocked
        assert hate_text_check(text_hints="der FÜHRER").term == "fuhrer"

    def test_multiple_hints(self):
        result = hate_text_check(text_hints=["happy birthday", "blood and soil"])
        assert result.blocked
        assert result.term == "blood and soil"

    def test_clean_metadata(self):
        result = hate_text_check(
            filename="beach.jpg", design_name="Summer", text_hints=["Pacific Ocean"]
        )
        assert not result.blocked
        assert result.term is None

    def test_no_metadata(self):
        assert not hate_text_check().blocked
