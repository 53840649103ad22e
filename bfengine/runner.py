import io
from typing import Optional, Union

from .brainfuck import BrainfuckInterpreter, ExecutionResult
from .config import EngineConfig
from .source import clean_code


def run_code(code: str, input_data: Union[bytes, str] = b"",
             config: Optional[EngineConfig] = None, **kwargs) -> ExecutionResult:
    """Execute BF source against in-memory input and capture its output.

    Comments are stripped first. Extra keyword arguments are passed to
    BrainfuckInterpreter (e.g. debug_hook, max_nested_loops).
    """
    if isinstance(input_data, str):
        input_data = input_data.encode("latin-1")
    itp = BrainfuckInterpreter(config, stdin=io.BytesIO(input_data),
                               stdout=io.BytesIO(), **kwargs)
    return itp.run(clean_code(code))


def run_once(code: str, x: int, config: Optional[EngineConfig] = None) -> Optional[int]:
    """Execute BF code with single byte input, return the first output byte."""
    result = run_code(code, bytes((x % 256,)), config)
    return result.output[0] if result.output else None
