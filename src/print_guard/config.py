"""Threshold configuration for the moderation policy.

Thresholds are resolved from built-in defaults, caller overrides and
``MOD_*`` environment variables. Resolution never raises: a value that does
not parse to a finite number is discarded and the previous value is kept.
"""

from __future__ import annotations
import math
import os
import re
import logging
from dataclasses import dataclass, fields
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional, Tuple

logger = logging.getLogger(__name__)

DEFAULT_THRESHOLDS: Mapping[str, Any] = MappingProxyType(
    {
        "explicit_threshold": 0.75,
        "hate_threshold": 0.6,
        "swastika_det_thresh": 0.6,
        "realness_thresh": 0.6,
        "person_det_thresh": 0.5,
        "nsfw_thresh": 0.7,
        "skin_ratio_in_person": 0.12,
        "skin_large_region": 20000,
        "skin_intersection": 0.6,
        "pink_dominance": 0.55,
        "ocr_token_min": 100,
        "ocr_geos_min": 5,
        "block_hate": True,
    }
)

GEO_KEYWORDS: Tuple[str, ...] = (
    "Argentina",
    "Brazil",
    "Canada",
    "United",
    "Ocean",
    "Pacific",
    "Atlantic",
    "Africa",
    "Europe",
    "Asia",
    "Oceania",
)

ENV_MAP: Mapping[str, str] = MappingProxyType(
    {
        "explicit_threshold": "MOD_EXPLICIT_THRESHOLD",
        "hate_threshold": "MOD_HATE_THRESHOLD",
        "swastika_det_thresh": "MOD_SWASTIKA_DET_THRESH",
        "realness_thresh": "MOD_REALNESS_THRESH",
        "person_det_thresh": "MOD_PERSON_DET_THRESH",
        "nsfw_thresh": "MOD_NSFW_THRESH",
        "skin_ratio_in_person": "MOD_SKIN_RATIO_IN_PERSON",
        "skin_large_region": "MOD_SKIN_LARGE_REGION",
        "skin_intersection": "MOD_SKIN_INTERSECTION",
        "pink_dominance": "MOD_PINK_DOMINANCE",
        "ocr_token_min": "MOD_OCR_TOKEN_MIN",
        "ocr_geos_min": "MOD_OCR_GEOS_MIN",
    }
)

BLOCK_HATE_ENV = "MOD_BLOCK_HATE"
STRICT_ENV = "MODERATION_STRICT"
RELAXED_NSFW_FLOOR = 0.75

CAMEL_BOUNDARY_RE = re.compile(r"(?<=[a-z0-9])(?=[A-Z])")

TRUE_VALUES = frozenset({"1", "true", "yes", "on"})
FALSE_VALUES = frozenset({"0", "false", "no", "off"})


@dataclass(frozen=True)
class ThresholdSet:
    """An immutable snapshot of the active moderation thresholds."""

    explicit_threshold: float
    hate_threshold: float
    swastika_det_thresh: float
    realness_thresh: float
    person_det_thresh: float
    nsfw_thresh: float
    skin_ratio_in_person: float
    skin_large_region: float
    skin_intersection: float
    pink_dominance: float
    ocr_token_min: float
    ocr_geos_min: float
    strict: bool
    block_hate: bool
    geo_keywords: Tuple[str, ...] = GEO_KEYWORDS

    def to_dict(self) -> Dict[str, Any]:
        """Returns the thresholds as a plain dictionary."""
        data = {f.name: getattr(self, f.name) for f in fields(self)}
        data["geo_keywords"] = list(self.geo_keywords)
        return data


def parse_bool(value: Any, default: bool = True) -> bool:
    """Parses a permissive boolean flag.

    Args:
        value: The raw value, usually an environment string.
        default: Returned when the value is absent or not recognized.

    Returns:
        The parsed boolean.
    """
    if value is None:
        return default
    if isinstance(value, bool):
        return value
    normalized = str(value).strip().lower()
    if normalized in TRUE_VALUES:
        return True
    if normalized in FALSE_VALUES:
        return False
    return default


def parse_number(value: Any, fallback: Optional[float]) -> Optional[float]:
    """Parses a finite float, returning ``fallback`` on any failure."""
    if value is None or isinstance(value, bool):
        return fallback
    try:
        n = float(value)
    except (TypeError, ValueError):
        return fallback
    return n if math.isfinite(n) else fallback


def override_key(raw_key: Any) -> str:
    """Maps an override key such as ``explicitThreshold`` to ``explicit_threshold``."""
    return CAMEL_BOUNDARY_RE.sub("_", str(raw_key).strip()).lower()


def resolve(
    overrides: Optional[Mapping[str, Any]] = None,
    env: Optional[Mapping[str, str]] = None,
    strict_default: bool = True,
) -> ThresholdSet:
    """Resolves the active threshold set.

    Precedence, lowest first: built-in defaults, ``overrides``, environment.
    Invalid values at any layer are ignored in favor of the layer below.

    Args:
        overrides: Per-call overrides keyed by threshold name. Keys may be
            snake_case in any case or camelCase, so ``NSFW_THRESH``,
            ``nsfwThresh`` and ``nsfw_thresh`` all match.
            ``strict`` here replaces ``strict_default``.
        env: Environment mapping; defaults to ``os.environ``.
        strict_default: Strictness used when ``MODERATION_STRICT`` is absent
            or not recognized.

    Returns:
        A fresh ThresholdSet.
    """
    env = os.environ if env is None else env
    config: Dict[str, Any] = dict(DEFAULT_THRESHOLDS)
    geo_keywords = GEO_KEYWORDS

    for raw_key, value in (overrides or {}).items():
        key = override_key(raw_key)
        if key == "geo_keywords":
            if isinstance(value, str):
                value = [value]
            if value:
                geo_keywords = tuple(str(k) for k in value)
        elif key == "strict":
            strict_default = parse_bool(value, strict_default)
        elif key == "block_hate":
            config[key] = parse_bool(value, config[key])
        elif key in config:
            parsed = parse_number(value, None)
            if parsed is None:
                logger.warning(f"Ignoring invalid override for {key}: {value!r}")
            else:
                config[key] = parsed
        else:
            logger.warning(f"Ignoring unknown threshold override: {raw_key}")

    for key, env_name in ENV_MAP.items():
        env_value = env.get(env_name)
        if env_value is None:
            continue
        parsed = parse_number(env_value, None)
        if parsed is None:
            logger.warning(f"Ignoring invalid {env_name}: {env_value!r}")
        else:
            config[key] = parsed

    config["block_hate"] = parse_bool(env.get(BLOCK_HATE_ENV), config["block_hate"])
    strict = parse_bool(env.get(STRICT_ENV), strict_default)
    if not strict:
        config["nsfw_thresh"] = max(config["nsfw_thresh"], RELAXED_NSFW_FLOOR)

    return ThresholdSet(strict=strict, geo_keywords=geo_keywords, **config)
