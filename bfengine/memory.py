"""
Memory tape and data pointer.

The tape is a fixed length numpy array of unsigned bytes. The pointer moves
one cell at a time and either wraps around at the edges or refuses to leave
the tape, depending on the configuration.
"""

from typing import List, Tuple

import numpy as np

from .errors import AllocationFailureError, OutOfBoundsError


class Tape:
    """Fixed-size byte tape with a single cursor."""

    def __init__(self, size: int, wrap: bool = False):
        if size < 1:
            raise ValueError("tape size must be at least 1")
        try:
            self.cells = np.zeros(size, dtype=np.uint8)
        except (MemoryError, ValueError, OverflowError):
            raise AllocationFailureError("memory tape") from None
        self.size = size
        self.wrap = wrap
        self.pointer = 0

    def move_right(self, position: int) -> None:
        """Move one cell right; `position` is reported if the move is illegal."""
        if self.pointer < self.size - 1:
            self.pointer += 1
        elif self.wrap:
            self.pointer = 0
        else:
            raise OutOfBoundsError(position)

    def move_left(self, position: int) -> None:
        if self.pointer > 0:
            self.pointer -= 1
        elif self.wrap:
            self.pointer = self.size - 1
        else:
            raise OutOfBoundsError(position)

    def read(self) -> int:
        return int(self.cells[self.pointer])

    def write(self, value: int) -> None:
        self.cells[self.pointer] = value & 0xFF

    # Arithmetic goes through Python ints so that 255 + 1 wraps silently
    # instead of tripping numpy's scalar overflow warning.
    def increment(self) -> None:
        self.cells[self.pointer] = (int(self.cells[self.pointer]) + 1) & 0xFF

    def decrement(self) -> None:
        self.cells[self.pointer] = (int(self.cells[self.pointer]) - 1) & 0xFF

    def window(self, radius: int) -> Tuple[int, int, List[int]]:
        """Return (start, end, values) for the cells within `radius` of the pointer.

        Both ends are inclusive and clamped to the tape.
        """
        start = max(0, self.pointer - radius)
        end = min(self.size - 1, self.pointer + radius)
        return start, end, self.cells[start:end + 1].tolist()

    def reset(self) -> None:
        self.cells.fill(0)
        self.pointer = 0

    def __len__(self):
        return self.size
