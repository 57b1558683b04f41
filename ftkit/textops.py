"""Building new strings from old: splitting, trimming, slicing, joining, mapping.

Input strings are read only up to their first NUL character.
"""

from __future__ import annotations

from typing import Callable, MutableSequence, Optional, Tuple

from .strings import strdup

__all__ = ["split", "striteri", "strmapi", "strtrim", "substr", "strlcat", "strlcpy", "strjoin"]


def _count(n: int, name: str) -> int:
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"{name} must be an int, got {type(n).__name__}")
    if n < 0:
        raise ValueError(f"{name} must not be negative")
    return n


def split(s: str, sep: str) -> list[str]:
    """Split ``s`` on the character ``sep``, dropping empty pieces."""
    if not isinstance(sep, str) or len(sep) != 1:
        raise TypeError(f"sep must be a single character, got {sep!r}")
    return [piece for piece in strdup(s).split(sep) if piece]


def _is_nul(item: object) -> bool:
    return item == "\0" or item == 0


def striteri(s: Optional[MutableSequence], f: Optional[Callable[[int, object], object]]) -> None:
    """Call ``f(index, item)`` on each item of ``s`` up to its first NUL.

    ``s`` is a mutable sequence such as a list of characters or a bytearray.
    When ``f`` returns something other than None, that value replaces the
    item in place. Nothing happens when ``s`` or ``f`` is None.
    """
    if s is None or f is None:
        return
    if isinstance(s, (str, bytes)):
        raise TypeError("striteri needs a mutable sequence, such as a list of characters")
    for index in range(len(s)):
        item = s[index]
        if _is_nul(item):
            break
        replacement = f(index, item)
        if replacement is not None:
            s[index] = replacement


def strmapi(s: str, f: Callable[[int, str], str]) -> str:
    """Return a new string made of ``f(index, char)`` for each character of ``s``."""
    return "".join(f(index, ch) for index, ch in enumerate(strdup(s)))


def strtrim(s: str, chars: str) -> str:
    """Remove characters found in ``chars`` from both ends of ``s``."""
    text = strdup(s)
    if not isinstance(chars, str):
        raise TypeError(f"chars must be a str, got {type(chars).__name__}")
    return text.strip(strdup(chars)) if chars else text


def substr(s: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``s`` starting at ``start``.

    A start past the end gives an empty string.
    """
    text = strdup(s)
    start = _count(start, "start")
    length = _count(length, "length")
    if length == 0 or start >= len(text):
        return ""
    return text[start : start + length]


def strlcat(dest: str, src: str, size: int) -> Tuple[str, int]:
    """Append ``src`` to ``dest`` within a total buffer of ``size`` characters.

    At most ``size - len(dest) - 1`` characters are appended. Returns the new
    string and the length the full concatenation would have had; when
    ``dest`` already fills the buffer it comes back unchanged with
    ``size + len(src)``.
    """
    size = _count(size, "size")
    text = strdup(dest)
    extra = strdup(src)
    if size == 0:
        return text, len(extra)
    if len(text) >= size:
        return text, size + len(extra)
    return text + extra[: size - len(text) - 1], len(text) + len(extra)


def strlcpy(src: str, size: int) -> Tuple[str, int]:
    """Copy at most ``size - 1`` characters of ``src``.

    Returns the copy and the full length of ``src``.
    """
    size = _count(size, "size")
    text = strdup(src)
    if size == 0:
        return "", len(text)
    return text[: size - 1], len(text)


def strjoin(s1: str, s2: str) -> str:
    """Return the concatenation of ``s1`` and ``s2``."""
    return strdup(s1) + strdup(s2)