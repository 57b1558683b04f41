# ftkit

Small helpers for ASCII text, byte buffers, buffered line reading and
printf-style formatting. The functions keep the familiar C-library names and
edge cases (NUL-terminated strings, 32-bit integer formatting, `strlcpy`-style
return values) but work on Python strings, `bytearray` buffers and streams,
and raise `TypeError` or `ValueError` on bad arguments. There are no
dependencies outside the standard library.

## Installation

```
pip install .
```

With the test dependencies:

```
pip install ".[test]"
```

## Modules

- `ftkit.checks`: ASCII character classification: `isalnum`, `isalpha`,
  `isascii`, `isdigit`, `isprint`. Each takes an integer code or a
  one-character string and returns a `bool`.
- `ftkit.convert`: `atoi` (skips leading whitespace, accepts one sign, stops
  at the first non-digit, gives 0 when there are no digits), `itoa`, and
  `tolower` / `toupper`, which map only ASCII letters and return the same
  kind of value they were given (int or character).
- `ftkit.strings`: `strchr`, `strrchr`, `strcmp`, `strncmp`, `strnstr`,
  `strlen`, `strdup`. Strings are read up to their first NUL character;
  searches return an index or `None`, comparisons return -1, 0 or 1.
- `ftkit.textops`: `split` (drops empty pieces), `striteri` (calls a function
  on each item of a mutable sequence, replacing items in place when it
  returns a value), `strmapi`, `strtrim`, `substr`, `strlcat`, `strlcpy` and
  `strjoin`. `strlcat` and `strlcpy` return a `(string, length)` pair.
- `ftkit.memory`: `bzero`, `calloc`, `memchr`, `memcmp`, `memcpy`, `memmove`
  and `memset` on bytes-like objects. Writing functions change a `bytearray`
  in place; asking for more bytes than a buffer holds raises `ValueError`.
  `memmove` moves a span between two offsets of one buffer.
- `ftkit.next_line`: `LineReader`, which reads a text or binary stream a fixed
  number of items at a time (42 by default) and hands back one line per call
  to `next_line()`, or per step when iterated. Lines keep their newline; the
  last one may lack it. `next_line()` returns `None` at the end.
- `ftkit.fprintf`: `format_fprintf` returns formatted text and `fprintf`
  writes it to a stream you pass in, returning the number of characters
  written. Supported conversions are `%c %s %p %d %i %u %x %X %%`. Integers
  wrap to 32 bits, `%p` prints `0x…` or `(nil)`, `%s` of `None` prints
  `(null)`, an unknown conversion character is dropped without using an
  argument, and too few arguments raise `TypeError`.

## Examples

```python
import io
import sys

from ftkit.convert import atoi, itoa
from ftkit.textops import split, strlcpy
from ftkit.memory import memmove
from ftkit.next_line import LineReader
from ftkit.fprintf import format_fprintf, fprintf

atoi("   -42abc")          # -42
itoa(-2147483648)          # "-2147483648"
split("  a b  c ", " ")    # ["a", "b", "c"]
strlcpy("hello", 3)        # ("he", 5)

buf = bytearray(b"abcdef")
memmove(buf, 2, 0, 4)      # bytearray(b"ababcd")

for line in LineReader(io.StringIO("one\ntwo\n"), 42):
    print(line, end="")

format_fprintf("%d items, %x hex, %s", 10, 255, "done")
# "10 items, ff hex, done"
format_fprintf("%d %p", 4294967295, 0)
# "-1 (nil)"

fprintf(sys.stdout, "%s\n", "hello")   # writes "hello\n", returns 6
```

## What it does not include

ftkit is a library only: it has no command-line program, and it has no
linked-list type or separate print-to-standard-output helpers. To print to
the terminal, pass `sys.stdout` to `fprintf`.

## Running the tests

```
pytest
```