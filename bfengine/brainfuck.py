"""
Brainfuck Interpreter

Brainfuck is an esoteric programming language with only 8 commands:
    >   Move the pointer to the right
    <   Move the pointer to the left
    +   Increment the memory cell at the pointer
    -   Decrement the memory cell at the pointer
    .   Output the byte in the cell at the pointer
    ,   Input a byte and store it in the cell at the pointer
    [   Jump past the matching ] if the cell at the pointer is 0
    ]   Jump back to the matching [ if the cell at the pointer is nonzero

The interpreter expects code that has already been cleaned down to these
eight characters (see bfengine.source.clean_code).

Loops are matched while the program runs rather than through a jump table:
entering a loop pushes the position of its '[' on a bounded stack, ']'
jumps back to the top of that stack, and a '[' on a zero cell scans forward
counting nesting until it finds its partner. Bracket errors therefore only
surface when execution actually reaches them.
"""

import sys
from dataclasses import dataclass
from typing import BinaryIO, Callable, List, Optional

from .config import DEBUG_CONTEXT, INPUT_BUFFER_SIZE, MAX_NESTED_LOOPS, EngineConfig
from .debugger import DebugPrinter, DebugSnapshot
from .errors import LoopStackOverflowError, UnmatchedCloseError, UnmatchedOpenError
from .input_buffer import InputBuffer
from .memory import Tape


@dataclass
class ExecutionResult:
    """Outcome of a run that finished without a fatal error."""
    output: bytes
    steps: int
    pointer: int
    unclosed_loops: int = 0

    @property
    def text(self) -> str:
        return self.output.decode("latin-1")


class BrainfuckInterpreter:
    def __init__(self,
                 config: Optional[EngineConfig] = None,
                 stdin: Optional[BinaryIO] = None,
                 stdout: Optional[BinaryIO] = None,
                 debug_hook: Optional[Callable[[DebugSnapshot], None]] = None,
                 max_nested_loops: int = MAX_NESTED_LOOPS,
                 input_buffer_size: int = INPUT_BUFFER_SIZE,
                 prompt: Optional[Callable[[], None]] = None):
        self.config = config or EngineConfig()
        self.stdout = stdout if stdout is not None else sys.stdout.buffer
        if debug_hook is None and self.config.debug_mode:
            debug_hook = DebugPrinter()
        self.debug_hook = debug_hook
        self.max_nested_loops = max_nested_loops

        self.tape = Tape(self.config.memory_size, wrap=self.config.wrap_memory)
        self.input = InputBuffer(stdin if stdin is not None else sys.stdin.buffer,
                                 capacity=input_buffer_size, prompt=prompt)
        self.code = ""
        self.instruction_pointer = 0
        self.loop_stack: List[int] = []
        self.output: List[int] = []
        self.input_reads = 0
        self.output_writes = 0
        self.step_count = 0

    @property
    def pointer(self) -> int:
        return self.tape.pointer

    @property
    def memory(self):
        return self.tape.cells

    def snapshot(self, radius: int = DEBUG_CONTEXT) -> DebugSnapshot:
        """Copy of the current program counter, instruction and tape window."""
        pc = self.instruction_pointer
        instruction = self.code[pc] if pc < len(self.code) else ""
        start, end, cells = self.tape.window(radius)
        return DebugSnapshot(pc=pc, instruction=instruction, pointer=self.tape.pointer,
                             window_start=start, window_end=end, cells=cells)

    def run(self, code: str) -> ExecutionResult:
        """Execute cleaned Brainfuck code on a fresh tape.

        Raises a BrainfuckError subclass on the first fatal error; whatever
        was already written to the tape and the output stream stays as-is.
        """
        self.code = code
        self.instruction_pointer = 0
        self.loop_stack = []
        self.output = []
        self.input_reads = 0
        self.output_writes = 0
        self.step_count = 0
        self.tape.reset()

        code_length = len(code)
        while self.instruction_pointer < code_length:
            if self.config.debug_mode and self.debug_hook is not None:
                self.debug_hook(self.snapshot())
            self.step()

        return ExecutionResult(
            output=bytes(self.output),
            steps=self.step_count,
            pointer=self.tape.pointer,
            unclosed_loops=len(self.loop_stack),
        )

    def step(self) -> None:
        """Execute the instruction at the program counter and advance it."""
        pc = self.instruction_pointer
        cmd = self.code[pc]
        tape = self.tape

        if cmd == '>':
            tape.move_right(pc)

        elif cmd == '<':
            tape.move_left(pc)

        elif cmd == '+':
            tape.increment()

        elif cmd == '-':
            tape.decrement()

        elif cmd == '.':
            value = tape.read()
            self.output.append(value)
            self.output_writes += 1
            self.stdout.write(bytes((value,)))
            self.stdout.flush()

        elif cmd == ',':
            value = self.input.read_byte()
            if value is not None:
                tape.write(value)
                self.input_reads += 1
            elif self.config.eof_sets_zero:
                tape.write(0)
            # Otherwise EOF leaves the cell unchanged

        elif cmd == '[':
            if tape.read() == 0:
                pc = self._skip_forward(pc)
            else:
                if len(self.loop_stack) >= self.max_nested_loops:
                    raise LoopStackOverflowError(self.max_nested_loops, pc)
                self.loop_stack.append(pc)

        elif cmd == ']':
            if not self.loop_stack:
                raise UnmatchedCloseError(pc)
            if tape.read() != 0:
                # Back to the '['; the increment below lands on the loop body
                pc = self.loop_stack[-1]
            else:
                self.loop_stack.pop()

        self.instruction_pointer = pc + 1
        self.step_count += 1

    def _skip_forward(self, start: int) -> int:
        """Return the position of the ']' matching the '[' at `start`."""
        code = self.code
        nest_level = 1
        pc = start
        while nest_level > 0:
            pc += 1
            if pc >= len(code):
                raise UnmatchedOpenError(start)
            if code[pc] == '[':
                nest_level += 1
            elif code[pc] == ']':
                nest_level -= 1
        return pc
