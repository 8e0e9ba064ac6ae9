"""
Delimited key-value strings.

Parses strings like ``"a=1;b=2"`` into dictionaries and formats them back.

Validation before parsing is a character-count heuristic, not a grammar:
N pairs must be joined by N-1 or N delimiters. Values that themselves
contain the delimiter or separator can fool it.
"""

__all__ = [
    "parse_pairs",
    "format_pairs",
]

from typing import Dict, Mapping, Optional

from loguru import logger

from ..config import CONFIG
from ..errors import DuplicateKeyError, MalformedPairError, NullInputError
from .args import require_char
from .count import count_char


def parse_pairs(
    source: Optional[str],
    delimiter: Optional[str] = None,
    separator: Optional[str] = None,
) -> Dict[str, str]:
    """
    Split a delimited key-value string into a dictionary.

    Strings that do not look like key-value data (no separator, or
    separator and delimiter counts that do not line up) give an empty
    dictionary rather than an error.

    Args:
        source: String to parse
        delimiter: Character between pairs (defaults to ";")
        separator: Character between key and value (defaults to "=")

    Returns:
        Dictionary of keys to values, in input order

    Raises:
        NullInputError: source is None
        MalformedPairError: a pair has no separator
        DuplicateKeyError: a key appears twice

    Example:
        >>> parse_pairs("a=1;b=2")
        {'a': '1', 'b': '2'}
        >>> parse_pairs("a=1;b=2;")
        {'a': '1', 'b': '2'}
        >>> parse_pairs("novalue")
        {}
    """
    if source is None:
        raise NullInputError("source")

    delimiter = require_char(
        CONFIG["default_delimiter"] if delimiter is None else delimiter,
        "delimiter",
    )
    separator = require_char(
        CONFIG["default_separator"] if separator is None else separator,
        "separator",
    )

    if separator not in source:
        return {}

    eq = count_char(source, separator)
    sc = count_char(source, delimiter)

    if sc != eq - 1 and sc != eq:
        logger.debug(
            "Not key-value formatted: {} separators, {} delimiters", eq, sc
        )
        return {}

    result: Dict[str, str] = {}
    for pair in source.strip(delimiter).split(delimiter):
        if separator not in pair:
            raise MalformedPairError(pair, separator)
        key, value = pair.split(separator, 1)
        if key in result:
            raise DuplicateKeyError(key)
        result[key] = value

    return result


def format_pairs(
    pairs: Mapping[str, str],
    delimiter: Optional[str] = None,
    separator: Optional[str] = None,
) -> str:
    """
    Join a mapping into a delimited key-value string.

    Args:
        pairs: Keys and values to join, in iteration order
        delimiter: Character between pairs (defaults to ";")
        separator: Character between key and value (defaults to "=")

    Returns:
        Formatted string, empty for an empty mapping

    Example:
        >>> format_pairs({"a": "1", "b": "2"})
        'a=1;b=2'
    """
    delimiter = require_char(
        CONFIG["default_delimiter"] if delimiter is None else delimiter,
        "delimiter",
    )
    separator = require_char(
        CONFIG["default_separator"] if separator is None else separator,
        "separator",
    )
    return delimiter.join(f"{key}{separator}{value}" for key, value in pairs.items())
