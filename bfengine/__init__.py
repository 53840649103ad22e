"""bfengine: a small Brainfuck execution engine.

Quick start:
    >>> from bfengine import run_code
    >>> run_code("++++++++[>++++++++<-]>.").output
    b'@'
"""

from .brainfuck import BrainfuckInterpreter, ExecutionResult
from .config import (
    DEFAULT_MEMORY_SIZE,
    INPUT_BUFFER_SIZE,
    MAX_NESTED_LOOPS,
    MAX_PROGRAM_SIZE,
    EngineConfig,
    parse_memory_size,
)
from .debugger import DebugPrinter, DebugSnapshot
from .errors import (
    AllocationFailureError,
    BrainfuckError,
    LoopStackOverflowError,
    OutOfBoundsError,
    SourceLoadError,
    UnmatchedCloseError,
    UnmatchedOpenError,
)
from .input_buffer import InputBuffer
from .memory import Tape
from .runner import run_code, run_once
from .source import clean_code, load_program

__version__ = "1.0.0"

__all__ = [
    "BrainfuckInterpreter",
    "ExecutionResult",
    "EngineConfig",
    "parse_memory_size",
    "DEFAULT_MEMORY_SIZE",
    "INPUT_BUFFER_SIZE",
    "MAX_NESTED_LOOPS",
    "MAX_PROGRAM_SIZE",
    "DebugPrinter",
    "DebugSnapshot",
    "InputBuffer",
    "Tape",
    "run_code",
    "run_once",
    "clean_code",
    "load_program",
    # Exceptions
    "BrainfuckError",
    "OutOfBoundsError",
    "UnmatchedOpenError",
    "UnmatchedCloseError",
    "LoopStackOverflowError",
    "AllocationFailureError",
    "SourceLoadError",
]
