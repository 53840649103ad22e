"""Buffered byte input for the ',' command."""

from typing import BinaryIO, Callable, Optional

from .config import INPUT_BUFFER_SIZE


class InputBuffer:
    """Hands out one byte at a time, refilling from `stream` when exhausted.

    A refill reads at most `capacity` bytes, one line at a time when the
    stream supports `readline`, otherwise a plain chunked `read`. An empty
    refill means end of input and `read_byte` returns None.
    """

    def __init__(self, stream: BinaryIO, capacity: int = INPUT_BUFFER_SIZE,
                 prompt: Optional[Callable[[], None]] = None):
        if capacity < 1:
            raise ValueError("input buffer capacity must be at least 1")
        self.stream = stream
        self.capacity = capacity
        self.prompt = prompt
        self.buffer = b""
        self.pos = 0
        self.refills = 0

    @property
    def size(self) -> int:
        return len(self.buffer)

    @property
    def pending(self) -> int:
        """Number of buffered bytes not yet consumed."""
        return self.size - self.pos

    def reset(self) -> None:
        self.buffer = b""
        self.pos = 0

    def _refill(self) -> None:
        self.reset()
        if self.prompt is not None:
            self.prompt()
        reader = getattr(self.stream, "readline", None)
        if reader is not None:
            data = reader(self.capacity)
        else:
            data = self.stream.read(self.capacity)
        if isinstance(data, str):
            data = data.encode("utf-8")
        self.buffer = bytes(data or b"")
        self.refills += 1

    def read_byte(self) -> Optional[int]:
        """Next input byte, or None once the stream is exhausted."""
        if self.pos >= self.size:
            self._refill()
        if self.pos < self.size:
            value = self.buffer[self.pos]
            self.pos += 1
            return value
        return None
