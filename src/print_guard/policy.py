"""Moderation decision engine.

The verdict comes from an ordered chain of rules; the first rule that
returns a Verdict wins and later rules are never consulted.
"""

from __future__ import annotations
import json
import math
from dataclasses import dataclass, asdict, fields
from typing import Any, Callable, Dict, FrozenSet, Iterable, Mapping, NamedTuple, Optional, Tuple

from .config import ThresholdSet

ALLOW = "allow"
WARN = "warn"
BLOCK = "block"

REASON_PROVIDER_ERROR = "provider_error"
REASON_NUDITY_MINOR = "nudity_minor"
REASON_SEXUAL_EXPLICIT = "sexual_explicit"
REASON_HATE_SYMBOL = "hate_symbol"
REASON_NUDITY_ADULT = "nudity_adult"
REASON_TEXT_HATE = "text_hate"

MINOR_LABELS = frozenset({"nudity_minor", "sexual_minor"})
STYLIZED_LABELS = frozenset({"hentai", "drawing"})
NUDITY_ADULT_WARN_BAND = (0.5, 0.7)


@dataclass(frozen=True)
class Scores:
    """Classifier scores the policy reads; absent scores are 0."""

    sexual_explicit: float = 0.0
    hate_symbol: float = 0.0
    extremist_content: float = 0.0
    nudity_adult: float = 0.0

    def __post_init__(self):
        for f in fields(self):
            value = getattr(self, f.name)
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise ValueError(f"Score {f.name} must be a number, got {value!r}")
            if not math.isfinite(value) or not 0.0 <= value <= 1.0:
                raise ValueError(f"Score {f.name} must be within [0, 1], got {value!r}")
            object.__setattr__(self, f.name, float(value))

    @classmethod
    def from_mapping(cls, scores: Optional[Mapping[str, Any]]) -> "Scores":
        """Builds a Scores record, ignoring keys the policy does not read."""
        known = {f.name for f in fields(cls)}
        return cls(**{k: v for k, v in (scores or {}).items() if k in known and v is not None})


@dataclass(frozen=True)
class ModerationInput:
    labels: FrozenSet[str] = frozenset()
    scores: Scores = Scores()

    @classmethod
    def from_raw(
        cls,
        labels: Optional[Iterable[str]] = None,
        scores: Optional[Mapping[str, Any]] = None,
    ) -> "ModerationInput":
        return cls(frozenset(labels or ()), Scores.from_mapping(scores))


@dataclass(frozen=True)
class Verdict:
    """The outcome of a moderation decision.

    Attributes:
        action: One of "allow", "warn" or "block".
        reason: A short machine-readable code, empty for "allow".
    """

    action: str
    reason: str = ""

    @property
    def allowed(self) -> bool:
        return self.action == ALLOW

    def to_dict(self) -> Dict[str, str]:
        return asdict(self)

    def to_json(self) -> str:
        """Serializes the verdict to a JSON string."""
        return json.dumps(asdict(self), ensure_ascii=False, separators=(",", ":"))


class Rule(NamedTuple):
    name: str
    check: Callable[[ModerationInput, ThresholdSet], Optional[Verdict]]


def is_stylized(inp: ModerationInput) -> bool:
    """True for drawn or hentai content, which is exempt from the nudity rules."""
    return bool(inp.labels & STYLIZED_LABELS)


def provider_error_rule(inp: ModerationInput, thresholds: ThresholdSet) -> Optional[Verdict]:
    if REASON_PROVIDER_ERROR in inp.labels:
        return Verdict(WARN, REASON_PROVIDER_ERROR)
    return None


def minor_rule(inp: ModerationInput, thresholds: ThresholdSet) -> Optional[Verdict]:
    if inp.labels & MINOR_LABELS:
        return Verdict(BLOCK, REASON_NUDITY_MINOR)
    return None


def explicit_rule(inp: ModerationInput, thresholds: ThresholdSet) -> Optional[Verdict]:
    if inp.scores.sexual_explicit >= thresholds.explicit_threshold and not is_stylized(inp):
        return Verdict(BLOCK, REASON_SEXUAL_EXPLICIT)
    return None


def hate_rule(inp: ModerationInput, thresholds: ThresholdSet) -> Optional[Verdict]:
    hate_score = max(inp.scores.hate_symbol, inp.scores.extremist_content)
    if thresholds.block_hate and hate_score >= thresholds.hate_threshold:
        return Verdict(BLOCK, REASON_HATE_SYMBOL)
    return None


def adult_nudity_rule(inp: ModerationInput, thresholds: ThresholdSet) -> Optional[Verdict]:
    low, high = NUDITY_ADULT_WARN_BAND
    if low <= inp.scores.nudity_adult <= high and not is_stylized(inp):
        return Verdict(WARN, REASON_NUDITY_ADULT)
    return None


# Order is the precedence: infrastructure failure, then minors, then content.
RULES: Tuple[Rule, ...] = (
    Rule("provider_error", provider_error_rule),
    Rule("nudity_minor", minor_rule),
    Rule("sexual_explicit", explicit_rule),
    Rule("hate_symbol", hate_rule),
    Rule("nudity_adult", adult_nudity_rule),
)

ALLOW_VERDICT = Verdict(ALLOW, "")


def decide(inp: ModerationInput, thresholds: ThresholdSet) -> Verdict:
    """Returns the verdict of the first matching rule, or allow.

    Args:
        inp: Classifier labels and scores for one image.
        thresholds: The resolved threshold set.

    Returns:
        The Verdict. This function never raises for a well-formed input.
    """
    for rule in RULES:
        verdict = rule.check(inp, thresholds)
        if verdict is not None:
            return verdict
    return ALLOW_VERDICT
