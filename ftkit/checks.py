"""Character classification limited to the ASCII range."""

from __future__ import annotations

__all__ = ["isalnum", "isalpha", "isascii", "isdigit", "isprint"]


def _code(c: int | str) -> int:
    """Return the integer code of a one-character string or an integer."""
    if isinstance(c, str):
        if len(c) != 1:
            raise TypeError(f"expected a single character, got {c!r}")
        return ord(c)
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected an int or a single character, got {type(c).__name__}")
    return c


def isdigit(c: int | str) -> bool:
    """True if ``c`` is an ASCII decimal digit."""
    return ord("0") <= _code(c) <= ord("9")


def isalpha(c: int | str) -> bool:
    """True if ``c`` is an ASCII letter."""
    code = _code(c)
    return ord("a") <= code <= ord("z") or ord("A") <= code <= ord("Z")


def isalnum(c: int | str) -> bool:
    """True if ``c`` is an ASCII letter or digit."""
    return isdigit(c) or isalpha(c)


def isascii(c: int | str) -> bool:
    """True if ``c`` lies in the 7-bit ASCII table (0 to 127)."""
    return 0 <= _code(c) <= 127


def isprint(c: int | str) -> bool:
    """True if ``c`` is a printable ASCII character (space to tilde)."""
    return 32 <= _code(c) <= 126