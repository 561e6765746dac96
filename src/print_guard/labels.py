"""Normalization of classifier output into the policy vocabulary."""

from __future__ import annotations
import re
import math
import unicodedata
from dataclasses import dataclass
from typing import Any, Dict, Iterable, Mapping, Optional, Union

from .policy import ModerationInput, REASON_PROVIDER_ERROR, REASON_TEXT_HATE

MAX_LABEL_LENGTH = 64
NON_ALNUM_RE = re.compile(r"[^a-z0-9]+")
COMBINING_MARKS_RE = re.compile(r"[\u0300-\u036f]")

LABEL_ALIASES: Dict[str, str] = {
    "sexual": "sexual_explicit",
    "adult": "sexual_explicit",
    "explicit_nudity": "sexual_explicit",
    "nudity": "nudity_adult",
    "sexual_minor": "nudity_minor",
    "sexual_minors": "nudity_minor",
    "hate": "hate_symbol",
    "hate_symbols": "hate_symbol",
    "extremist": "hate_symbol",
    "racy": "sexy",
}

HATE_TERMS = (
    "nazi",
    "nazis",
    "nazismo",
    "nazism",
    "nazista",
    "nacionalsocialista",
    "neonazi",
    "neo nazi",
    "neo-nazi",
    "hitler",
    "adolf hitler",
    "adolfhitler",
    "heil hitler",
    "heilhitler",
    "sieg heil",
    "siegheil",
    "swastika",
    "swastica",
    "svastica",
    "svastika",
    "esvastica",
    "esvasticas",
    "esvastika",
    "esvastikas",
    "esvástica",
    "esvásticas",
    "führer",
    "fuhrer",
    "third reich",
    "thirdreich",
    "white power",
    "whitepower",
    "reichsadler",
    "schutzstaffel",
    "hitlerjugend",
    "1488",
    "14/88",
    "fourteen words",
    "14 words",
    "stormfront",
    "blood and soil",
    "blut und boden",
    "white pride worldwide",
    "wpww",
    "aryan brotherhood",
)


def normalize_label(raw: Any) -> Optional[str]:
    """Maps a provider category name onto the policy label vocabulary.

    Returns:
        The canonical label, or None if nothing usable remains.
    """
    if raw is None:
        return None
    label = NON_ALNUM_RE.sub("_", str(raw).strip().lower()).strip("_")
    if not label or len(label) > MAX_LABEL_LENGTH:
        return None
    return LABEL_ALIASES.get(label, label)


def scan_to_input(
    categories: Optional[Mapping[str, Any]] = None,
    category_scores: Optional[Mapping[str, Any]] = None,
) -> ModerationInput:
    """Builds a ModerationInput from a provider's flagged categories and scores.

    Categories with a truthy flag become labels. Scores are keyed by their
    normalized name; colliding names keep the highest score, values are
    clamped into [0, 1] and non-numeric values are dropped.
    """
    labels = set()
    for name, flagged in (categories or {}).items():
        label = normalize_label(name)
        if flagged and label:
            labels.add(label)
    scores: Dict[str, float] = {}
    for name, value in (category_scores or {}).items():
        label = normalize_label(name)
        if not label or isinstance(value, bool):
            continue
        try:
            score = float(value)
        except (TypeError, ValueError):
            continue
        if not math.isfinite(score):
            continue
        score = min(1.0, max(0.0, score))
        scores[label] = max(score, scores.get(label, 0.0))
    return ModerationInput.from_raw(labels, scores)


def provider_error_input() -> ModerationInput:
    """The input to decide on when the upstream classifier failed."""
    return ModerationInput.from_raw([REASON_PROVIDER_ERROR])


def _fold(text: Optional[str]) -> str:
    text = unicodedata.normalize("NFD", str(text or "").lower())
    return COMBINING_MARKS_RE.sub("", text).replace("ß", "ss")


FOLDED_HATE_TERMS = tuple(dict.fromkeys(_fold(t) for t in HATE_TERMS))


@dataclass(frozen=True)
class HateTextResult:
    blocked: bool
    reason: str = ""
    term: Optional[str] = None


def hate_text_check(
    filename: Optional[str] = None,
    design_name: Optional[str] = None,
    text_hints: Optional[Union[str, Iterable[str]]] = None,
) -> HateTextResult:
    """Checks upload metadata and OCR hints for extremist terms.

    Matching is a case- and accent-insensitive substring search.

    Args:
        filename: The uploaded file name.
        design_name: The user-supplied design title.
        text_hints: OCR text, as one string or several.

    Returns:
        A HateTextResult naming the first matched term, if any.
    """
    if isinstance(text_hints, str) or text_hints is None:
        hints = [text_hints]
    else:
        hints = list(text_hints)
    haystack = " ".join(f for f in (_fold(v) for v in [filename, design_name, *hints]) if f)
    for term in FOLDED_HATE_TERMS:
        if term in haystack:
            return HateTextResult(blocked=True, reason=REASON_TEXT_HATE, term=term)
    return HateTextResult(blocked=False)
