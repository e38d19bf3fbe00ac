"""Line-by-line reading from a stream in fixed-size chunks."""

from __future__ import annotations

from typing import IO, AnyStr, Generic, Iterator, Optional, Tuple

DEFAULT_BUFFER_SIZE = 42


def _find_newline(buffer: AnyStr) -> int:
    """Return the index of the first newline in ``buffer``, or -1."""
    if isinstance(buffer, bytes):
        return buffer.find(b"\n")
    return buffer.find("\n")


def _split_line(buffer: AnyStr) -> Tuple[AnyStr, AnyStr]:
    """Split ``buffer`` after its first newline, or at its end if there is none."""
    end = _find_newline(buffer)
    cut = len(buffer) if end < 0 else end + 1
    return buffer[:cut], buffer[cut:]


class LineReader(Generic[AnyStr]):
    """Read lines from a text or binary stream, ``buffer_size`` units at a time.

    Each line keeps its trailing newline; the last line may lack one.
    """

    def __init__(self, stream: IO[AnyStr], buffer_size: int = DEFAULT_BUFFER_SIZE) -> None:
        if buffer_size <= 0:
            raise ValueError("buffer_size must be positive")
        self.stream = stream
        self.buffer_size = buffer_size
        self._buffer: Optional[AnyStr] = None

    def readline(self) -> Optional[AnyStr]:
        """Return the next line, or None once the stream is exhausted."""
        buffer = self._buffer
        while buffer is None or _find_newline(buffer) < 0:
            chunk = self.stream.read(self.buffer_size)
            if not chunk:
                break
            buffer = chunk if buffer is None else buffer + chunk
        if not buffer:
            self._buffer = None
            return None
        line, rest = _split_line(buffer)
        self._buffer = rest or None
        return line

    def __iter__(self) -> Iterator[AnyStr]:
        while (line := self.readline()) is not None:
            yield line