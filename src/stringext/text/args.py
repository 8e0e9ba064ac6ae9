"""Argument checks shared by the text helpers."""

__all__ = ["require_char"]

from ..errors import EmptyArgumentError, NotACharacterError, NullInputError


def require_char(value: str | None, name: str) -> str:
    """Return value if it is exactly one character, else raise."""
    if value is None:
        raise NullInputError(name)
    if not value:
        raise EmptyArgumentError(name)
    if len(value) != 1:
        raise NotACharacterError(name, value)
    return value
