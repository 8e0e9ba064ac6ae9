"""
Substring extraction relative to a delimiter, and fixed-width slicing.

All functions return None when the source string is None.
"""

__all__ = [
    "from_",
    "from_last",
    "to",
    "to_last",
    "left",
    "right",
]

import re
from typing import Optional

from ..errors import EmptyArgumentError, LengthOutOfRangeError, NullInputError


def _index_of(s: str, text: str, ignore_case: bool) -> int:
    """Index of the first occurrence of text in s, or -1."""
    if not ignore_case:
        return s.find(text)
    match = re.search(re.escape(text), s, re.IGNORECASE)
    return match.start() if match else -1


def _last_index_of(s: str, text: str, ignore_case: bool) -> int:
    """Index of the last occurrence of text in s, or -1."""
    if not ignore_case:
        return s.rfind(text)
    # Lookahead so overlapping occurrences are all seen
    starts = [
        m.start() for m in re.finditer(f"(?={re.escape(text)})", s, re.IGNORECASE)
    ]
    return starts[-1] if starts else -1


def from_(
    s: Optional[str],
    text: str,
    inclusive: bool = False,
    ignore_case: bool = False,
) -> Optional[str]:
    """
    Return the part of s after the first occurrence of text.

    Args:
        s: Source string
        text: Delimiter to look for
        inclusive: Keep the delimiter at the start of the result
        ignore_case: Match the delimiter case-insensitively

    Returns:
        Substring after the delimiter, s itself if the delimiter is absent,
        or None if s is None

    Raises:
        EmptyArgumentError: text is None or empty

    Example:
        >>> from_("hello-world", "-")
        'world'
        >>> from_("hello-world", "-", inclusive=True)
        '-world'
        >>> from_("hello", "-")
        'hello'
    """
    if s is None:
        return None
    if not text:
        raise EmptyArgumentError("text")

    i = _index_of(s, text, ignore_case)
    if i < 0:
        return s
    return s[i:] if inclusive else s[i + len(text) :]


def from_last(
    s: Optional[str],
    text: str,
    ignore_case: bool = True,
) -> Optional[str]:
    """
    Return the part of s after the last occurrence of text.

    Matching is case-insensitive unless ignore_case is False.

    Example:
        >>> from_last("a.b.c", ".")
        'c'
        >>> from_last("fooXbarxbaz", "x")
        'baz'
    """
    if s is None:
        return None
    if text is None:
        raise NullInputError("text")

    i = _last_index_of(s, text, ignore_case)
    return s[i + len(text) :] if i >= 0 else s


def to(
    s: Optional[str],
    text: str,
    inclusive: bool = False,
    ignore_case: bool = False,
) -> Optional[str]:
    """
    Return the part of s before the first occurrence of text.

    Args:
        s: Source string
        text: Delimiter to look for
        inclusive: Keep the delimiter at the end of the result
        ignore_case: Match the delimiter case-insensitively

    Returns:
        Substring before the delimiter, s itself if the delimiter is absent,
        or None if s is None

    Raises:
        EmptyArgumentError: text is None or empty

    Example:
        >>> to("hello-world", "-")
        'hello'
        >>> to("hello-world", "-", inclusive=True)
        'hello-'
    """
    if s is None:
        return None
    if not text:
        raise EmptyArgumentError("text")

    i = _index_of(s, text, ignore_case)
    if i < 0:
        return s
    return s[: i + len(text)] if inclusive else s[:i]


def to_last(
    s: Optional[str],
    text: str,
    inclusive: bool = False,
    ignore_case: bool = False,
) -> Optional[str]:
    """
    Return the part of s before the last occurrence of text.

    Example:
        >>> to_last("a.b.c", ".")
        'a.b'
        >>> to_last("a.b.c", ".", inclusive=True)
        'a.b.'
    """
    if s is None:
        return None
    if text is None:
        raise NullInputError("text")

    i = _last_index_of(s, text, ignore_case)
    if i < 0:
        return s
    return s[: i + len(text)] if inclusive else s[:i]


def left(s: Optional[str], count: int) -> Optional[str]:
    """
    Return the first count characters of s.

    Raises:
        LengthOutOfRangeError: count is negative or longer than s

    Example:
        >>> left("hello", 3)
        'hel'
    """
    if s is None:
        return None
    if count < 0 or count > len(s):
        raise LengthOutOfRangeError(count, len(s))
    return s[:count]


def right(s: Optional[str], count: int) -> Optional[str]:
    """Return the last count characters of s."""
    if s is None:
        return None
    if count < 0 or count > len(s):
        raise LengthOutOfRangeError(count, len(s))
    return s[len(s) - count :]
