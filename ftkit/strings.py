"""Searching, comparing and measuring text with NUL-terminated semantics.

A string is read only up to its first NUL character, if it has one. Search
functions return an index into the string, or None when nothing is found.
"""

from __future__ import annotations

from typing import Optional

__all__ = ["strchr", "strrchr", "strcmp", "strncmp", "strnstr", "strlen", "strdup"]

_NUL = "\0"


def _text(s: str) -> str:
    """Return ``s`` cut at its first NUL character."""
    if not isinstance(s, str):
        raise TypeError(f"expected a str, got {type(s).__name__}")
    head, _, _ = s.partition(_NUL)
    return head


def _char(c: int | str) -> str:
    """Turn an integer code (taken modulo 256) or a one-character string into a character."""
    if isinstance(c, str):
        if len(c) != 1:
            raise TypeError(f"expected a single character, got {c!r}")
        return c
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected an int or a single character, got {type(c).__name__}")
    return chr(c % 256)


def _sign(a: str, b: str) -> int:
    return (a > b) - (a < b)


def strlen(s: str) -> int:
    """Number of characters before the first NUL."""
    return len(_text(s))


def strdup(s: str) -> str:
    """Return a copy of ``s`` up to its first NUL."""
    return _text(s)


def strchr(s: str, c: int | str) -> Optional[int]:
    """Index of the first ``c`` in ``s``, or None.

    Searching for NUL finds the terminator, at index ``strlen(s)``.
    """
    text = _text(s)
    ch = _char(c)
    if ch == _NUL:
        return len(text)
    index = text.find(ch)
    return index if index >= 0 else None


def strrchr(s: str, c: int | str) -> Optional[int]:
    """Index of the last ``c`` in ``s``, or None.

    Searching for NUL finds the terminator, at index ``strlen(s)``.
    """
    text = _text(s)
    ch = _char(c)
    if ch == _NUL:
        return len(text)
    index = text.rfind(ch)
    return index if index >= 0 else None


def strcmp(s1: str, s2: str) -> int:
    """Compare two strings: -1, 0 or 1 as ``s1`` is less than, equal to or greater than ``s2``."""
    return _sign(_text(s1), _text(s2))


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most the first ``n`` characters of two strings: -1, 0 or 1."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected an int, got {type(n).__name__}")
    if n < 0:
        raise ValueError("n must not be negative")
    return _sign(_text(s1)[:n], _text(s2)[:n])


def strnstr(haystack: str, needle: str, n: int) -> Optional[int]:
    """Index of the first ``needle`` lying wholly within the first ``n`` characters of ``haystack``.

    An empty needle is found at index 0; otherwise None when it is absent.
    """
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected an int, got {type(n).__name__}")
    if n < 0:
        raise ValueError("n must not be negative")
    text = _text(haystack)
    pattern = _text(needle)
    if not pattern:
        return 0
    if n == 0:
        return None
    index = text[:n].find(pattern)
    return index if index >= 0 else None