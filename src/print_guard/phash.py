"""Perceptual hashing of grayscale pixel buffers.

The fingerprint is a 64-bit DCT pHash rendered as 16 lowercase hex
characters. Fingerprints are persisted by the duplicate store, so the
transform below is kept as a direct O(n^2) DCT with a sequential sum over the
pinned cosine basis in `dct_table`: a different summation order or a
different libm rounding can flip bits that sit on the median. Upsampled
sources (narrower or shorter than 32 px) are the sensitive case, since many
of their coefficients are zero up to rounding.
"""

from __future__ import annotations
import math
import re
from functools import lru_cache
from typing import Any, List, Sequence, Tuple

import numpy as np

from .dct_table import COS32

GRID = 32
BLOCK = 8
HASH_HEX_LEN = 16
SQRT1_2 = math.sqrt(0.5)
FLAT_HASH = "0" * HASH_HEX_LEN

HEX_HASH_RE = re.compile(r"[0-9a-fA-F]{16}")


class InvalidInputError(ValueError):
    """Raised for malformed pixel buffers, images or hash strings."""


@lru_cache(maxsize=8)
def _cos_table(n: int) -> Tuple[Tuple[float, ...], ...]:
    """Returns ``table[k][i] = cos(((i + 0.5) * k) * (pi / n))``."""
    if n == GRID:
        return COS32
    factor = math.pi / n
    return tuple(
        tuple(math.cos(((i + 0.5) * k) * factor) for i in range(n))
        for k in range(n)
    )


def dct_1d(vec: Sequence[float]) -> List[float]:
    """Computes an orthonormally scaled type-II DCT of ``vec``.

    Args:
        vec: The input samples.

    Returns:
        ``out[k] = sum(vec[i] * cos((i + 0.5) * k * pi / n)) * c_k`` with
        ``c_0 = 1/sqrt(2)`` and ``c_k = 1`` for ``k > 0``.
    """
    n = len(vec)
    table = _cos_table(n)
    out = []
    for k in range(n):
        row = table[k]
        s = 0.0
        for i in range(n):
            s += vec[i] * row[i]
        out.append(s * SQRT1_2 if k == 0 else s)
    return out


def dct_2d(grid: np.ndarray) -> np.ndarray:
    """Applies ``dct_1d`` to every row, then to every column."""
    grid = np.asarray(grid, dtype=np.float64)
    if grid.ndim != 2:
        raise InvalidInputError(f"Expected a 2D grid, got shape {grid.shape}")
    rows = np.array([dct_1d(row.tolist()) for row in grid], dtype=np.float64)
    cols = np.array([dct_1d(col.tolist()) for col in rows.T], dtype=np.float64)
    return cols.T


def _as_pixel_array(pixels: Any, width: int, height: int) -> np.ndarray:
    """Validates a grayscale buffer and returns it as a ``(height, width)`` array."""
    for name, dim in (("width", width), ("height", height)):
        if isinstance(dim, bool) or not isinstance(dim, (int, np.integer)) or dim <= 0:
            raise InvalidInputError(f"{name} must be a positive integer, got {dim!r}")
    if isinstance(pixels, (bytes, bytearray, memoryview)):
        arr = np.frombuffer(bytes(pixels), dtype=np.uint8)
    else:
        try:
            arr = np.asarray(pixels, dtype=np.float64)
        except (TypeError, ValueError) as e:
            raise InvalidInputError(f"Pixel buffer is not numeric: {e}") from e
    if not np.all(np.isfinite(arr)):
        raise InvalidInputError("Pixel buffer contains non-finite values")
    if arr.ndim == 2 and arr.shape == (height, width):
        return arr.astype(np.float64)
    if arr.ndim != 1 or arr.size != width * height:
        raise InvalidInputError(
            f"Pixel buffer has {arr.size} values, expected {width}x{height}={width * height}"
        )
    return arr.astype(np.float64).reshape(height, width)


def resample(pixels: Any, width: int, height: int) -> np.ndarray:
    """Nearest-neighbor resamples a grayscale buffer to a 32x32 grid.

    Target cell ``(x, y)`` samples source ``(floor(x*width/32), floor(y*height/32))``.
    """
    src = _as_pixel_array(pixels, width, height)
    xs = (np.arange(GRID) * width) // GRID
    ys = (np.arange(GRID) * height) // GRID
    return src[np.ix_(ys, xs)]


def phash_from_gray(pixels: Any, width: int, height: int) -> str:
    """Computes the 64-bit perceptual hash of a grayscale buffer.

    Args:
        pixels: Row-major grayscale values, ``width * height`` of them. Bytes,
            flat sequences and numpy arrays (flat or ``(height, width)``) are
            accepted.
        width: Source width in pixels.
        height: Source height in pixels.

    Returns:
        The fingerprint as 16 lowercase hex characters.

    Raises:
        InvalidInputError: If the dimensions or buffer length are invalid.
    """
    small = resample(pixels, width, height)
    # A flat grid has no frequency content.
    if np.all(small == small.flat[0]):
        return FLAT_HASH
    low = dct_2d(small)[:BLOCK, :BLOCK].flatten()
    med = np.median(low[1:])
    bits = [int(b) for b in low > med]
    return "".join(
        f"{(bits[i] << 3) | (bits[i + 1] << 2) | (bits[i + 2] << 1) | bits[i + 3]:x}"
        for i in range(0, BLOCK * BLOCK, 4)
    )


def hash_to_int(value: Any) -> int:
    """Parses a 16-hex-character fingerprint into its 64-bit value."""
    if not isinstance(value, str) or not HEX_HASH_RE.fullmatch(value):
        raise InvalidInputError(f"Expected 16 hex characters, got {value!r}")
    return int(value, 16)


def hamming(a: str, b: str) -> int:
    """Counts the differing bits between two hex fingerprints.

    Raises:
        InvalidInputError: If either value is not exactly 16 hex characters.
    """
    return bin(hash_to_int(a) ^ hash_to_int(b)).count("1")
