"""
stringext - Minimal, reusable string helpers.

This package is organized into focused modules:

- text/     String helpers
            - slicing: from_, from_last, to, to_last, left, right
            - split: split, split_camel_case
            - count: count_char (scalar or numpy-vectorized)
            - pairs: parse_pairs, format_pairs

- errors    Error types (all subclass StringExtError)
- config    CONFIG defaults and tuning knobs
- cli       Command-line front end (fire)

Null handling is not uniform: every helper returns None for a None source,
except parse_pairs, which raises NullInputError.

Usage:
    from stringext import parse_pairs, from_, split_camel_case
    from stringext.text import count_char
    from stringext.errors import MalformedPairError
"""

__version__ = "0.0.1"

from loguru import logger

from stringext.errors import (
    StringExtError,
    NullInputError,
    EmptyArgumentError,
    NotACharacterError,
    MalformedPairError,
    DuplicateKeyError,
    LengthOutOfRangeError,
)

from stringext.text import (
    from_,
    from_last,
    to,
    to_last,
    left,
    right,
    split,
    split_camel_case,
    count_char,
    parse_pairs,
    format_pairs,
)

# Silent inside host applications; the CLI turns this back on
logger.disable("stringext")

__all__ = [
    "__version__",
    # errors
    "StringExtError",
    "NullInputError",
    "EmptyArgumentError",
    "NotACharacterError",
    "MalformedPairError",
    "DuplicateKeyError",
    "LengthOutOfRangeError",
    # text.slicing
    "from_",
    "from_last",
    "to",
    "to_last",
    "left",
    "right",
    # text.split
    "split",
    "split_camel_case",
    # text.count
    "count_char",
    # text.pairs
    "parse_pairs",
    "format_pairs",
]
