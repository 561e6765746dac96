"""This module provides the service object for the Print Guard screening flow.

It includes the `ImageGuard` class, which resolves thresholds and moderates
classifier output or raw provider scans behind a metadata text gate,
decodes uploaded images into grayscale buffers, computes their perceptual
hash and compares it against a list of known fingerprints.
The module also defines the data structures for duplicate matches and
metrics, and a structured decision logger.
"""

from __future__ import annotations
import os
import json
import logging
import threading
from collections import Counter
from dataclasses import dataclass, field
from io import BytesIO
from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple, Union

import numpy as np
from PIL import Image, ImageFile, ImageOps

from prometheus_client import Counter as PromCounter

from . import config as threshold_config
from .phash import InvalidInputError, hamming, hash_to_int, phash_from_gray
from .labels import hate_text_check, provider_error_input, scan_to_input
from .policy import BLOCK, ModerationInput, Verdict, decide

# Safety settings for Pillow
ImageFile.LOAD_TRUNCATED_IMAGES = True
Image.MAX_IMAGE_PIXELS = 64_000_000

# Prometheus metrics (opt-in via env in app.py)
PROMETHEUS_ENABLED = os.getenv("PROMETHEUS_ENABLED", "0") == "1"
if PROMETHEUS_ENABLED:
    print_guard_requests_total = PromCounter(
        "print_guard_requests_total", "Total requests processed", ["endpoint"]
    )
    print_guard_decisions_total = PromCounter(
        "print_guard_decisions_total", "Total decisions made", ["action", "reason"]
    )
    print_guard_duplicates_total = PromCounter(
        "print_guard_duplicates_total", "Uploads matching a known fingerprint"
    )

ALLOWED_IMAGE_CT = {"image/png", "image/jpeg", "image/webp", "image/gif"}

# --- Default Configuration ---
DEFAULT_CONFIG: Dict[str, Any] = {
    "known_phashes": [],
    "phash_match_thresh": 10,
    "threshold_overrides": {},
    "strict_default": True,
}


@dataclass
class MatchResult:
    """The comparison of one fingerprint against the known list.

    Attributes:
        phash: The fingerprint that was compared.
        min_distance: The smallest Hamming distance found, or None when the
            known list is empty.
        matches: Every known fingerprint with its distance.
        duplicate: True if ``min_distance`` is within the match threshold.
    """

    phash: str
    min_distance: Optional[int] = None
    matches: List[Dict[str, Any]] = field(default_factory=list)
    duplicate: bool = False


@dataclass
class Metrics:
    """A class to track metrics related to moderation decisions.

    Updates are serialized with a lock; sync endpoints record from the
    threadpool.
    """

    total_requests: int = 0
    blocks: int = 0
    warns: int = 0
    allows: int = 0
    reasons: Counter = field(default_factory=Counter)
    _lock: threading.Lock = field(
        default_factory=threading.Lock, init=False, repr=False, compare=False
    )

    def record(self, verdict: Verdict):
        """Records a verdict, updating the metrics."""
        with self._lock:
            self.total_requests += 1
            if verdict.action == "block":
                self.blocks += 1
            elif verdict.action == "warn":
                self.warns += 1
            else:
                self.allows += 1
            if verdict.reason:
                self.reasons[verdict.reason] += 1
        if PROMETHEUS_ENABLED:
            print_guard_decisions_total.labels(
                action=verdict.action, reason=verdict.reason or "none"
            ).inc()

    def summary(self) -> Dict:
        """Returns a summary of the metrics as a dictionary."""
        with self._lock:
            return {
                "total": self.total_requests,
                "blocks": self.blocks,
                "warns": self.warns,
                "allows": self.allows,
                "block_rate": self.blocks / max(1, self.total_requests),
                "top_reasons": dict(self.reasons.most_common(5)),
            }


def load_grayscale(image_data: bytes) -> Tuple[np.ndarray, int, int]:
    """Decodes an image into a grayscale pixel buffer.

    Animated images contribute their first frame; EXIF orientation is applied.

    Args:
        image_data: The encoded image.

    Returns:
        A tuple of the ``(height, width)`` uint8 array, width and height.

    Raises:
        InvalidInputError: If the data cannot be decoded.
    """
    if not image_data:
        raise InvalidInputError("Empty image data")
    try:
        img = Image.open(BytesIO(image_data))
        if getattr(img, "is_animated", False):
            img.seek(0)
        img = ImageOps.exif_transpose(img).convert("L")
    except Image.DecompressionBombError as e:
        raise InvalidInputError("Image exceeds decompression limits") from e
    except (OSError, ValueError, SyntaxError) as e:
        raise InvalidInputError(f"Image processing error: {e}") from e
    pixels = np.asarray(img, dtype=np.uint8)
    height, width = pixels.shape
    return pixels, width, height


class ImageGuard:
    """The main class for the Print Guard service."""

    def __init__(self, config: Dict):
        """Initializes the ImageGuard instance.

        Args:
            config: A dictionary containing the configuration for the guard.
        """
        self._validate_config(config)
        self.config = config
        self.logger = logging.getLogger(self.__class__.__name__)
        self.metrics = Metrics()
        self.known_phashes: List[str] = self._load_known(config["known_phashes"])

    def _validate_config(self, config: Dict):
        """Validates the configuration dictionary."""
        required = ["known_phashes", "phash_match_thresh"]
        missing = [k for k in required if k not in config]
        if missing:
            raise ValueError(f"Config missing keys: {missing}")

    def _load_known(self, known: Iterable[Any]) -> List[str]:
        """Keeps the well-formed fingerprints, lowercased."""
        valid = []
        for value in known:
            try:
                hash_to_int(value)
            except InvalidInputError:
                self.logger.warning(f"Skipping malformed known phash: {value!r}")
                continue
            valid.append(value.lower())
        return valid

    def thresholds(
        self, overrides: Optional[Mapping[str, Any]] = None
    ) -> threshold_config.ThresholdSet:
        """Resolves the thresholds for one request.

        Per-request overrides are layered over the configured overrides.
        """
        merged = dict(self.config.get("threshold_overrides") or {})
        merged.update(overrides or {})
        return threshold_config.resolve(
            merged, strict_default=self.config.get("strict_default", True)
        )

    def moderate(
        self,
        labels: Optional[Iterable[str]] = None,
        scores: Optional[Mapping[str, Any]] = None,
        overrides: Optional[Mapping[str, Any]] = None,
        verbose: bool = False,
        filename: Optional[str] = None,
        design_name: Optional[str] = None,
        text_hints: Optional[Union[str, Iterable[str]]] = None,
    ) -> Verdict:
        """Decides on classifier output for one image.

        Args:
            labels: Classifier labels.
            scores: Classifier scores in [0, 1]; absent scores count as 0.
            overrides: Optional per-request threshold overrides.
            verbose: Whether to log the resolved thresholds.
            filename: The uploaded file name, checked by the text gate.
            design_name: The design title, checked by the text gate.
            text_hints: OCR text, checked by the text gate.

        Returns:
            The Verdict.

        Raises:
            ValueError: If a score is not a number in [0, 1].
        """
        inp = ModerationInput.from_raw(labels, scores)
        return self._decide(inp, overrides, verbose, filename, design_name, text_hints)

    def moderate_scan(
        self,
        categories: Optional[Mapping[str, Any]] = None,
        category_scores: Optional[Mapping[str, Any]] = None,
        overrides: Optional[Mapping[str, Any]] = None,
        provider_failed: bool = False,
        verbose: bool = False,
        filename: Optional[str] = None,
        design_name: Optional[str] = None,
        text_hints: Optional[Union[str, Iterable[str]]] = None,
    ) -> Verdict:
        """Decides on a raw provider scan.

        Provider category names are normalized onto the policy labels and
        their scores clamped into [0, 1]. When ``provider_failed`` is set the
        scan is ignored and the decision is made on a provider error.
        """
        if provider_failed:
            inp = provider_error_input()
        else:
            inp = scan_to_input(categories, category_scores)
        return self._decide(inp, overrides, verbose, filename, design_name, text_hints)

    def _decide(
        self,
        inp: ModerationInput,
        overrides: Optional[Mapping[str, Any]],
        verbose: bool,
        filename: Optional[str],
        design_name: Optional[str],
        text_hints: Optional[Union[str, Iterable[str]]],
    ) -> Verdict:
        """Runs the text gate, then the policy, and records the verdict."""
        if PROMETHEUS_ENABLED:
            print_guard_requests_total.labels(endpoint="moderate").inc()
        gate = hate_text_check(filename, design_name, text_hints)
        if gate.blocked:
            self.logger.info(f"Text gate matched term: {gate.term!r}")
            verdict = Verdict(BLOCK, gate.reason)
        else:
            thresholds = self.thresholds(overrides)
            if verbose:
                self.logger.info(f"[DEBUG] Thresholds: {thresholds.to_dict()}")
            verdict = decide(inp, thresholds)
        self.metrics.record(verdict)
        self.logger.info(
            f"Moderation verdict: {verdict.action} ({verdict.reason or 'no reason'})"
        )
        return verdict

    def fingerprint(self, image_data: bytes) -> str:
        """Computes the perceptual hash of an encoded image.

        Raises:
            InvalidInputError: If the image cannot be decoded.
        """
        try:
            pixels, width, height = load_grayscale(image_data)
        except InvalidInputError as e:
            self.logger.error(f"Image processing failed: {e}")
            raise
        return phash_from_gray(pixels, width, height)

    def match_known(self, phash: str) -> MatchResult:
        """Compares a fingerprint with every known fingerprint.

        Raises:
            InvalidInputError: If ``phash`` is malformed.
        """
        hash_to_int(phash)
        result = MatchResult(phash=phash.lower())
        for known in self.known_phashes:
            dist = hamming(phash, known)
            result.matches.append({"known": known, "dist": dist})
            if result.min_distance is None or dist < result.min_distance:
                result.min_distance = dist
        result.duplicate = (
            result.min_distance is not None
            and result.min_distance <= self.config["phash_match_thresh"]
        )
        if result.duplicate:
            self.logger.info(
                f"Known fingerprint match (min hamming distance: {result.min_distance})"
            )
            if PROMETHEUS_ENABLED:
                print_guard_duplicates_total.inc()
        return result

    def assess_image(self, image_data: bytes) -> MatchResult:
        """Fingerprints an encoded image and checks it against the known list."""
        if PROMETHEUS_ENABLED:
            print_guard_requests_total.labels(endpoint="fingerprint").inc()
        return self.match_known(self.fingerprint(image_data))


def log_entry(
    ts: str,
    request_id: str,
    verdict: Verdict,
    phash: Optional[str],
    log_path: Optional[str],
    logger: logging.Logger,
):
    """Logs a decision to a file and the console.

    Args:
        ts: The timestamp of the request.
        request_id: The unique ID of the request.
        verdict: The moderation verdict.
        phash: The perceptual hash of the image, if the caller has one.
        log_path: The path to the log file.
        logger: The logger instance.
    """
    try:
        log_data = {
            "timestamp": ts,
            "request_id": request_id,
            "action": verdict.action,
            "reason": verdict.reason,
            "phash": phash,
        }
        logger.info(json.dumps(log_data))
        if log_path:
            with open(log_path, "a", encoding="utf-8") as f:
                f.write(json.dumps(log_data) + "\n")
    except OSError as e:
        logger.error(f"Log fail: {e}")
