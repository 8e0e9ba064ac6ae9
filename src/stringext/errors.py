"""
Error types raised by the string helpers.

Every error derives from StringExtError and from the closest built-in
exception, so callers may catch either.
"""

__all__ = [
    "StringExtError",
    "NullInputError",
    "EmptyArgumentError",
    "NotACharacterError",
    "MalformedPairError",
    "DuplicateKeyError",
    "LengthOutOfRangeError",
]


class StringExtError(Exception):
    """Base class for stringext errors."""


# ============================================================================
#                           Argument errors
# ============================================================================


class NullInputError(StringExtError, TypeError):
    """Raised when a required string argument is None."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Argument '{name}' may not be None.")
        self.name = name


class EmptyArgumentError(StringExtError, ValueError):
    """Raised when an argument that must be non-empty is empty or None."""

    def __init__(self, name: str) -> None:
        super().__init__(f"The string to find may not be empty ('{name}').")
        self.name = name


class NotACharacterError(StringExtError, ValueError):
    """Raised when a single character is expected but a longer string is given."""

    def __init__(self, name: str, value: str) -> None:
        super().__init__(
            f"Argument '{name}' must be a single character, got {value!r}."
        )
        self.name = name
        self.value = value


class LengthOutOfRangeError(StringExtError, IndexError):
    """Raised when more characters are requested than the string holds."""

    def __init__(self, count: int, length: int) -> None:
        super().__init__(
            f"Cannot take {count} characters from a string of length {length}."
        )
        self.count = count
        self.length = length


# ============================================================================
#                           Key-value parsing errors
# ============================================================================


class MalformedPairError(StringExtError, ValueError):
    """Raised when a pair substring does not contain the separator."""

    def __init__(self, pair: str, separator: str) -> None:
        super().__init__(f"Pair {pair!r} does not contain separator {separator!r}.")
        self.pair = pair
        self.separator = separator


class DuplicateKeyError(StringExtError, ValueError):
    """Raised when the same key appears twice in a key-value string."""

    def __init__(self, key: str) -> None:
        super().__init__(f"An item with the key {key!r} has already been added.")
        self.key = key
