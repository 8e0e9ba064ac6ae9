"""
Character counting - requires numpy for the vectorized path.

Two interchangeable strategies that always agree:

- a scalar scan comparing one character at a time,
- a data-parallel scan that compares fixed-width chunks of code points
  with numpy and reduces per-lane partial sums, finishing the remainder
  with the scalar scan.
"""

__all__ = [
    "count_char",
    "count_char_scalar",
    "count_char_vectorized",
    "is_vector_accelerated",
]

from functools import lru_cache
from typing import Optional, Tuple

import numpy as np
from loguru import logger

from ..config import CONFIG
from .args import require_char


@lru_cache(maxsize=1)
def _simd_baseline() -> Tuple[str, ...]:
    """SIMD extensions numpy was built to rely on (empty when none)."""
    build = np.show_config(mode="dicts") or {}
    return tuple(build.get("SIMD Extensions", {}).get("baseline", ()))


def is_vector_accelerated() -> bool:
    """
    Check whether the vectorized counting path should be used.

    Returns:
        True if the path is enabled in CONFIG and numpy was built with a
        SIMD baseline for this platform

    Example:
        >>> is_vector_accelerated()  # doctest: +SKIP
        True
    """
    return bool(CONFIG["vector_enabled"]) and bool(_simd_baseline())


def count_char_scalar(text: str, target: str) -> int:
    """Count occurrences of target in text one character at a time."""
    target = require_char(target, "target")
    return sum(1 for ch in text if ch == target)


def count_char_vectorized(
    text: str,
    target: str,
    width: Optional[int] = None,
) -> int:
    """
    Count occurrences of target in text using chunked numpy comparisons.

    The text is viewed as UTF-32 code points. The largest prefix that is a
    multiple of ``width`` is compared chunk by chunk against the target,
    matches are accumulated per lane, and the lanes are summed with a dot
    product. Leftover characters go through the scalar scan.

    Args:
        text: Text to scan
        target: Single character to count
        width: Lanes per chunk (defaults to CONFIG["vector_width"])

    Returns:
        Number of occurrences of target

    Example:
        >>> count_char_vectorized("a;b;c;d", ";", width=4)
        3
    """
    target = require_char(target, "target")
    if width is None:
        width = CONFIG["vector_width"]
    if width < 1:
        raise ValueError(f"width must be positive, got {width}")

    codes = np.frombuffer(
        text.encode("utf-32-le", errors="surrogatepass"), dtype="<u4"
    )
    end = len(codes) - len(codes) % width

    lanes = np.ones(width, dtype=np.int64)
    partials = np.zeros(width, dtype=np.int64)
    if end:
        chunks = codes[:end].reshape(-1, width)
        partials += (chunks == np.uint32(ord(target))).sum(axis=0)
    result = int(np.dot(partials, lanes))

    return result + count_char_scalar(text[end:], target)


def count_char(
    text: str,
    target: str,
    vectorized: Optional[bool] = None,
) -> int:
    """
    Count occurrences of a single character in text.

    Args:
        text: Text to scan (may be empty)
        target: Single character to count
        vectorized: Force the vector (True) or scalar (False) path;
                    None picks automatically based on text length

    Returns:
        Exact, non-negative count

    Raises:
        NullInputError: target is None
        EmptyArgumentError: target is empty
        NotACharacterError: target is longer than one character

    Example:
        >>> count_char("a=1;b=2", "=")
        2
        >>> count_char("", "=")
        0
    """
    target = require_char(target, "target")

    if vectorized is None:
        vectorized = len(text) >= CONFIG["vector_min_length"]
    if vectorized and not is_vector_accelerated():
        logger.debug("Vector counting unavailable, using scalar scan")
        vectorized = False

    if vectorized:
        return count_char_vectorized(text, target)
    return count_char_scalar(text, target)
