"""
Text utilities subpackage.

Pure functions for slicing, splitting, counting and key-value parsing.
Only the vectorized counter needs numpy.
"""

from stringext.text.slicing import (
    from_,
    from_last,
    to,
    to_last,
    left,
    right,
)

from stringext.text.split import (
    split,
    split_camel_case,
)

from stringext.text.count import (
    count_char,
    count_char_scalar,
    count_char_vectorized,
    is_vector_accelerated,
)

from stringext.text.pairs import (
    parse_pairs,
    format_pairs,
)

__all__ = [
    # slicing
    "from_",
    "from_last",
    "to",
    "to_last",
    "left",
    "right",
    # split
    "split",
    "split_camel_case",
    # count
    "count_char",
    "count_char_scalar",
    "count_char_vectorized",
    "is_vector_accelerated",
    # pairs
    "parse_pairs",
    "format_pairs",
]
