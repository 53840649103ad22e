"""
Debug introspection.

When debug mode is on the interpreter hands a `DebugSnapshot` to its debug
hook before executing each instruction. Snapshots are copies: nothing done
with them reaches back into the running engine.
"""

import sys
from dataclasses import dataclass
from typing import List, TextIO


@dataclass(frozen=True)
class DebugSnapshot:
    """Read-only view of the engine just before an instruction runs."""
    pc: int
    instruction: str
    pointer: int
    window_start: int
    window_end: int          # inclusive
    cells: List[int]         # tape[window_start:window_end + 1]

    @property
    def current_cell(self) -> int:
        return self.cells[self.pointer - self.window_start]

    def format(self) -> str:
        """Render the snapshot in the two-line trace format."""
        values = []
        for addr, value in enumerate(self.cells, start=self.window_start):
            if addr == self.pointer:
                values.append(f"[{value}]")
            else:
                values.append(str(value))
        return (f"\n[DEBUG] PC: {self.pc}, Instruction: {self.instruction}\n"
                f"Memory[{self.window_start}-{self.window_end}]: " + " ".join(values) + " ")


class DebugPrinter:
    """Debug hook that prints every snapshot to a text stream."""

    def __init__(self, stream: TextIO = None):
        self.stream = stream
        self.count = 0

    def __call__(self, snapshot: DebugSnapshot) -> None:
        self.count += 1
        out = self.stream if self.stream is not None else sys.stdout
        print(snapshot.format(), file=out, flush=True)
