"""Loading program text and stripping it down to the eight commands."""

from .config import MAX_PROGRAM_SIZE
from .errors import SourceLoadError

COMMANDS = '><+-.,[]'


def clean_code(text: str) -> str:
    """Remove comments (keep only valid BF commands)."""
    return ''.join(c for c in text if c in COMMANDS)


def load_program(path: str, limit: int = MAX_PROGRAM_SIZE) -> str:
    """Read a program file and return its cleaned code.

    At most `limit - 1` characters of the file are considered.
    """
    try:
        with open(path, 'r', encoding='utf-8', errors='replace') as f:
            text = f.read(limit - 1)
    except OSError:
        raise SourceLoadError(path) from None
    return clean_code(text)
