"""Line-by-line reading from a stream through a fixed-size read buffer."""

from __future__ import annotations

from typing import AnyStr, Generic, IO, Iterator, Optional

__all__ = ["LineReader"]

DEFAULT_BUFFER_SIZE = 42


class LineReader(Generic[AnyStr]):
    """Read lines from a text or binary stream, ``buffer_size`` items at a time.

    Each line keeps its trailing newline; the final line may lack one.
    """

    def __init__(self, stream: IO[AnyStr], buffer_size: int = DEFAULT_BUFFER_SIZE) -> None:
        if isinstance(buffer_size, bool) or not isinstance(buffer_size, int):
            raise TypeError("buffer_size must be an int")
        if buffer_size <= 0:
            raise ValueError("buffer_size must be positive")
        self._stream = stream
        self._buffer_size = buffer_size
        self._pending: Optional[AnyStr] = None

    @staticmethod
    def _newline(sample: AnyStr) -> AnyStr:
        return b"\n" if isinstance(sample, bytes) else "\n"  # type: ignore[return-value]

    def _fill(self) -> None:
        while self._pending is None or self._newline(self._pending) not in self._pending:
            try:
                chunk = self._stream.read(self._buffer_size)
            except OSError:
                self._pending = None
                raise
            if not chunk:
                return
            self._pending = chunk if self._pending is None else self._pending + chunk

    def next_line(self) -> Optional[AnyStr]:
        """Return the next line, or None once the stream has nothing left."""
        self._fill()
        pending = self._pending
        if not pending:
            self._pending = None
            return None
        cut = pending.find(self._newline(pending))
        if cut < 0:
            self._pending = None
            return pending
        line, rest = pending[: cut + 1], pending[cut + 1 :]
        self._pending = rest if rest else None
        return line

    def __iter__(self) -> Iterator[AnyStr]:
        return self

    def __next__(self) -> AnyStr:
        line = self.next_line()
        if line is None:
            raise StopIteration
        return line