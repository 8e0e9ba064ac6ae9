"""
Command-line front end.

Exposes the string helpers as sub-commands:

    stringext parse_pairs "a=1;b=2"
    stringext from_last "a.b.c" .
    stringext left hello 3 --verbose
"""

__all__ = ["StringExtCli", "main"]

from typing import Dict, List, Optional

import fire
from fire import decorators
from loguru import logger

from stringext.text import (
    count_char,
    format_pairs,
    from_,
    from_last,
    left,
    parse_pairs,
    right,
    split,
    split_camel_case,
    to,
    to_last,
)


class StringExtCli:
    """String helpers from the command line."""

    def __init__(self, verbose: bool = False):
        """
        Args:
            verbose: Show debug logging on stderr
        """
        if verbose:
            logger.enable("stringext")

    # Text arguments are parsed as plain strings, never as Python literals

    @decorators.SetParseFn(str, "s", "text")
    def from_(
        self, s, text, inclusive: bool = False, ignore_case: bool = False
    ) -> Optional[str]:
        """Part of s after the first occurrence of text."""
        return from_(s, text, inclusive=inclusive, ignore_case=ignore_case)

    @decorators.SetParseFn(str, "s", "text")
    def from_last(self, s, text, ignore_case: bool = True) -> Optional[str]:
        """Part of s after the last occurrence of text."""
        return from_last(s, text, ignore_case=ignore_case)

    @decorators.SetParseFn(str, "s", "text")
    def to(
        self, s, text, inclusive: bool = False, ignore_case: bool = False
    ) -> Optional[str]:
        """Part of s before the first occurrence of text."""
        return to(s, text, inclusive=inclusive, ignore_case=ignore_case)

    @decorators.SetParseFn(str, "s", "text")
    def to_last(
        self, s, text, inclusive: bool = False, ignore_case: bool = False
    ) -> Optional[str]:
        """Part of s before the last occurrence of text."""
        return to_last(s, text, inclusive=inclusive, ignore_case=ignore_case)

    @decorators.SetParseFn(str, "s")
    def left(self, s, count: int) -> Optional[str]:
        """First count characters of s."""
        return left(s, int(count))

    @decorators.SetParseFn(str, "s")
    def right(self, s, count: int) -> Optional[str]:
        """Last count characters of s."""
        return right(s, int(count))

    @decorators.SetParseFn(str, "s", "on")
    def split(
        self,
        s,
        on,
        preserve: bool = False,
        remove_empty: bool = False,
        trim: bool = False,
    ) -> Optional[List[str]]:
        """Split s on a substring."""
        return split(s, on, preserve=preserve, remove_empty=remove_empty, trim=trim)

    @decorators.SetParseFn(str, "s")
    def split_camel_case(self, s) -> Optional[str]:
        """Insert spaces before uppercase letters."""
        return split_camel_case(s)

    @decorators.SetParseFn(str, "text", "target")
    def count(self, text, target, vectorized: Optional[bool] = None) -> int:
        """Count occurrences of a single character."""
        return count_char(text, target, vectorized=vectorized)

    @decorators.SetParseFn(str, "source", "delimiter", "separator")
    def parse_pairs(
        self,
        source,
        delimiter: Optional[str] = None,
        separator: Optional[str] = None,
    ) -> Dict[str, str]:
        """Parse a delimited key-value string."""
        return parse_pairs(source, delimiter=delimiter, separator=separator)

    @decorators.SetParseFn(str)
    def format_pairs(
        self,
        *keys_and_values: str,
        delimiter: Optional[str] = None,
        separator: Optional[str] = None,
    ) -> str:
        """
        Join alternating keys and values into a delimited key-value string.

        Example:
            stringext format_pairs host db1 port 5432 --delimiter=,
        """
        items = len(keys_and_values)
        if items % 2:
            raise ValueError(f"Expected keys and values in pairs, got {items} items")
        pairs = dict(zip(keys_and_values[::2], keys_and_values[1::2]))
        return format_pairs(pairs, delimiter=delimiter, separator=separator)


def main() -> None:
    """Entry point for the stringext console script."""
    fire.Fire(StringExtCli, name="stringext")
