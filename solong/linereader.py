"""Line-by-line reading from a stream that is consumed in fixed-size chunks."""

from __future__ import annotations

from typing import IO, AnyStr, Generic, Iterator, Optional, Union

BUFFER_SIZE = 42

Line = Union[str, bytes]


class LineReader(Generic[AnyStr]):
    """Split a text or binary stream into lines, reading buffer_size units at a time.

    Each line keeps its terminating newline; the last line may lack one.
    Text read past a line ending is kept for the next call, so every reader
    has its own pending data and several streams can be read side by side.
    """

    def __init__(self, stream: IO[AnyStr], buffer_size: int = BUFFER_SIZE) -> None:
        if buffer_size < 1:
            raise ValueError(f"buffer size must be at least 1, got {buffer_size}")
        self._stream = stream
        self.buffer_size = buffer_size
        self._pending: Optional[AnyStr] = None
        self._newline: Optional[AnyStr] = None

    def _fill(self) -> Optional[AnyStr]:
        """Read chunks until the pending data holds a newline or the stream ends."""
        pending = self._pending
        while pending is None or self._newline not in pending:
            chunk = self._stream.read(self.buffer_size)
            if not chunk:
                break
            if self._newline is None:
                self._newline = "\n" if isinstance(chunk, str) else b"\n"  # type: ignore[assignment]
            pending = chunk if pending is None else pending + chunk
        return pending

    def readline(self) -> Optional[AnyStr]:
        """Return the next line, or None once the stream has nothing left."""
        pending = self._fill()
        if not pending:
            self._pending = None
            return None
        index = pending.find(self._newline)  # type: ignore[arg-type]
        if index < 0:
            self._pending = None
            return pending
        self._pending = pending[index + 1:]
        return pending[:index + 1]

    def __iter__(self) -> Iterator[AnyStr]:
        while True:
            line = self.readline()
            if line is None:
                return
            yield line


def read_lines(path: str, buffer_size: int = BUFFER_SIZE) -> Iterator[str]:
    """Yield the lines of the file at path, line endings left as they are."""
    if buffer_size < 1:
        raise ValueError(f"buffer size must be at least 1, got {buffer_size}")
    with open(path, encoding="utf-8", errors="surrogateescape", newline="") as stream:
        yield from LineReader(stream, buffer_size)