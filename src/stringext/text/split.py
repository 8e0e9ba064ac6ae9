"""Splitting on substrings and on camel-case boundaries."""

__all__ = [
    "split",
    "split_camel_case",
]

from typing import List, Optional

from ..errors import NullInputError


def split(
    s: Optional[str],
    on: str,
    preserve: bool = False,
    remove_empty: bool = False,
    trim: bool = False,
) -> Optional[List[str]]:
    """
    Split s on a substring.

    Args:
        s: Source string
        on: Substring to split on; an empty value leaves s whole
        preserve: Prefix every piece with the delimiter again
        remove_empty: Drop empty pieces
        trim: Strip surrounding whitespace from each piece

    Returns:
        List of pieces, or None if s is None

    Raises:
        NullInputError: on is None

    Example:
        >>> split("a,b,c", ",")
        ['a', 'b', 'c']
        >>> split("-x-y", "-", preserve=True)
        ['-', '-x', '-y']
    """
    if s is None:
        return None
    if on is None:
        raise NullInputError("on")

    pieces = s.split(on) if on else [s]
    if trim:
        pieces = [piece.strip() for piece in pieces]
    if remove_empty:
        pieces = [piece for piece in pieces if piece]
    if preserve:
        pieces = [on + piece for piece in pieces]
    return pieces


def split_camel_case(s: Optional[str]) -> Optional[str]:
    """
    Insert a space before every uppercase letter after the first character.

    Example:
        >>> split_camel_case("HelloWorld")
        'Hello World'
        >>> split_camel_case("parseHTTP")
        'parse H T T P'
    """
    if s is None:
        return None
    return s[:1] + "".join(f" {ch}" if ch.isupper() else ch for ch in s[1:])
