"""
Engine configuration.

The four knobs of a run (wrapping, debug tracing, tape size, EOF behaviour)
live in one immutable dataclass that is handed to the interpreter when it is
built. Defaults can also come from the environment (or a local .env file):

    BF_WRAP_MEMORY=1
    BF_DEBUG=0
    BF_MEMORY_SIZE=65536
    BF_EOF_ZERO=yes
"""

import os
import re
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

DEFAULT_MEMORY_SIZE = 30000
MAX_NESTED_LOOPS = 1000
MAX_PROGRAM_SIZE = 1000000
INPUT_BUFFER_SIZE = 4096
DEBUG_CONTEXT = 10  # cells shown on each side of the pointer in debug mode

_TRUTHY = {"1", "true", "yes", "on"}
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def parse_memory_size(text: Optional[str]) -> int:
    """Parse a user supplied tape size.

    Behaves like C's atoi: leading whitespace, an optional sign and leading
    digits are used, anything after them is ignored. A value that comes out
    as 0 (or negative, or not a number at all) falls back to the default.
    """
    if text is None:
        return DEFAULT_MEMORY_SIZE
    match = _LEADING_INT.match(str(text))
    value = int(match.group(1)) if match else 0
    if value <= 0:
        return DEFAULT_MEMORY_SIZE
    return value


def _env_flag(name: str, default: bool = False) -> bool:
    raw = os.environ.get(name)
    if raw is None:
        return default
    return raw.strip().lower() in _TRUTHY


@dataclass(frozen=True)
class EngineConfig:
    """Configuration parameters for a single interpreter instance."""
    wrap_memory: bool = False     # wrap the pointer instead of bounds checking
    debug_mode: bool = False      # call the debug hook before every instruction
    memory_size: int = DEFAULT_MEMORY_SIZE
    eof_sets_zero: bool = False   # zero the cell on EOF, otherwise leave it alone

    def __post_init__(self):
        if not isinstance(self.memory_size, int) or self.memory_size < 1:
            raise ValueError(f"memory_size must be a positive integer, got {self.memory_size!r}")

    @classmethod
    def from_env(cls, dotenv_path: Optional[str] = None) -> 'EngineConfig':
        """Build a configuration from BF_* environment variables."""
        load_dotenv(dotenv_path)
        return cls(
            wrap_memory=_env_flag("BF_WRAP_MEMORY"),
            debug_mode=_env_flag("BF_DEBUG"),
            memory_size=parse_memory_size(os.environ.get("BF_MEMORY_SIZE")),
            eof_sets_zero=_env_flag("BF_EOF_ZERO"),
        )

    def describe(self) -> str:
        """One-line summary used by the command-line banner."""
        return "Memory Size={}, Wrapping={}, Debug={}, EOF=Set to {}".format(
            self.memory_size,
            "Enabled" if self.wrap_memory else "Disabled",
            "Enabled" if self.debug_mode else "Disabled",
            "0" if self.eof_sets_zero else "Unchanged",
        )
