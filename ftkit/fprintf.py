"""printf-style formatting written to a chosen stream.

The formatter understands the conversions ``%c``, ``%s``, ``%p``, ``%d``,
``%i``, ``%u``, ``%x``, ``%X`` and ``%%``. Any other character after ``%``
is dropped, produces no output and uses no argument. A lone ``%`` at the end
of the format ends the output. Integer conversions follow 32-bit semantics;
``%p`` treats its argument as a 64-bit address.
"""

from __future__ import annotations

from typing import Any, Callable, Iterator, TextIO

from .strings import strdup

__all__ = ["format_fprintf", "fprintf"]

_HEX_LOWER = "0123456789abcdef"
_HEX_UPPER = "0123456789ABCDEF"
_MASK32 = 0xFFFFFFFF
_MASK64 = 0xFFFFFFFFFFFFFFFF


def _integer(value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"expected an int, got {type(value).__name__}")
    return value


def _to_char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise TypeError(f"expected a single character, got {value!r}")
        return value
    return chr(_integer(value) % 256)


def _to_int32(value: Any) -> int:
    wrapped = _integer(value) & _MASK32
    return wrapped - (1 << 32) if wrapped >= (1 << 31) else wrapped


def _to_uint32(value: Any) -> int:
    return _integer(value) & _MASK32


def _in_base16(value: int, digits: str) -> str:
    if value < 16:
        return digits[value]
    high, low = divmod(value, 16)
    return _in_base16(high, digits) + digits[low]


def _to_string(value: Any) -> str:
    return "(null)" if value is None else strdup(value)


def _to_pointer(value: Any) -> str:
    address = _integer(value) & _MASK64
    if address == 0:
        return "(nil)"
    return "0x" + _in_base16(address, _HEX_LOWER)


_CONVERSIONS: dict[str, Callable[[Any], str]] = {
    "c": _to_char,
    "s": _to_string,
    "p": _to_pointer,
    "d": lambda v: str(_to_int32(v)),
    "i": lambda v: str(_to_int32(v)),
    "u": lambda v: str(_to_uint32(v)),
    "x": lambda v: _in_base16(_to_uint32(v), _HEX_LOWER),
    "X": lambda v: _in_base16(_to_uint32(v), _HEX_UPPER),
}


def _take(values: Iterator[Any], spec: str) -> Any:
    try:
        return next(values)
    except StopIteration:
        raise TypeError(f"not enough arguments for %{spec}") from None


def format_fprintf(fmt: str, *args: Any) -> str:
    """Return ``fmt`` with its conversions replaced by the formatted ``args``."""
    pieces: list[str] = []
    values = iter(args)
    chars = iter(strdup(fmt))
    for ch in chars:
        if ch != "%":
            pieces.append(ch)
            continue
        spec = next(chars, None)
        if spec is None:
            break
        if spec == "%":
            pieces.append("%")
        elif spec in _CONVERSIONS:
            pieces.append(_CONVERSIONS[spec](_take(values, spec)))
    return "".join(pieces)


def fprintf(stream: TextIO, fmt: str, *args: Any) -> int:
    """Write ``fmt`` formatted with ``args`` to ``stream``; return the number of characters written."""
    text = format_fprintf(fmt, *args)
    stream.write(text)
    return len(text)