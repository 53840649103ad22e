"""Errors raised by the interpreter.

Every fatal condition halts the run at the point of detection. The
`.position` attribute is the program counter of the offending instruction
(None when the error is not tied to one).
"""

from typing import Optional


class BrainfuckError(Exception):
    """Base class for all engine errors."""

    def __init__(self, message: str, position: Optional[int] = None) -> None:
        super().__init__(message)
        self.message = message
        self.position = position


class OutOfBoundsError(BrainfuckError):
    """Pointer moved past either end of the tape with wrapping disabled."""

    def __init__(self, position: int) -> None:
        super().__init__(f"Data pointer out of bounds at position {position}", position)


class UnmatchedOpenError(BrainfuckError):
    """Forward skip for '[' ran off the end of the program."""

    def __init__(self, position: int) -> None:
        super().__init__(f"Unmatched '[' at position {position}", position)


class UnmatchedCloseError(BrainfuckError):
    """']' reached with no open loop on the stack."""

    def __init__(self, position: int) -> None:
        super().__init__(f"Unmatched ']' at position {position}", position)


class LoopStackOverflowError(BrainfuckError):
    def __init__(self, capacity: int, position: Optional[int] = None) -> None:
        super().__init__(f"Too many nested loops (max {capacity})", position)
        self.capacity = capacity


class AllocationFailureError(BrainfuckError):
    def __init__(self, what: str) -> None:
        super().__init__(f"Memory allocation failed for {what}")


class SourceLoadError(BrainfuckError):
    """Program file could not be read."""

    def __init__(self, path: str) -> None:
        super().__init__(f"Could not open file {path}")
        self.path = path
