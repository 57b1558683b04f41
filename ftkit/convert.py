"""Conversions between integers and text, and ASCII case mapping."""

from __future__ import annotations

__all__ = ["atoi", "itoa", "tolower", "toupper"]

_WHITESPACE = " \t\n\r\f\v"
_DIGITS = "0123456789"


def atoi(text: str) -> int:
    """Parse a leading decimal integer, skipping leading whitespace.

    One optional sign is accepted; parsing stops at the first non-digit.
    Text with no digits gives 0.
    """
    rest = text.lstrip(_WHITESPACE)
    sign = 1
    if rest[:1] == "+":
        rest = rest[1:]
    elif rest[:1] == "-":
        sign = -1
        rest = rest[1:]
    result = 0
    for ch in rest:
        if ch not in _DIGITS:
            break
        result = result * 10 + (ord(ch) - ord("0"))
    return sign * result


def itoa(n: int) -> str:
    """Return the decimal representation of ``n``."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected an int, got {type(n).__name__}")
    return str(n)


def _map_case(c: int | str, low: str, high: str, delta: int) -> int | str:
    if isinstance(c, str):
        if len(c) != 1:
            raise TypeError(f"expected a single character, got {c!r}")
        return chr(ord(c) + delta) if low <= c <= high else c
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected an int or a single character, got {type(c).__name__}")
    return c + delta if ord(low) <= c <= ord(high) else c


def tolower(c: int | str) -> int | str:
    """Map an ASCII uppercase letter to lowercase; anything else is unchanged."""
    return _map_case(c, "A", "Z", 32)


def toupper(c: int | str) -> int | str:
    """Map an ASCII lowercase letter to uppercase; anything else is unchanged."""
    return _map_case(c, "a", "z", -32)