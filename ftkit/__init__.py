"""ASCII text, byte-buffer, buffered line-reading and printf-style formatting helpers."""

__version__ = "0.1.0"

__all__ = [
    "checks",
    "convert",
    "fprintf",
    "memory",
    "next_line",
    "strings",
    "textops",
]