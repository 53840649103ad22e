"""Command-line front end.

Usage:
    bfengine [-w] [-d] [-m SIZE] [-z] program.bf
    python -m bfengine -w -m 100000 program.bf

Flags override any BF_* settings picked up from the environment or .env.
Unknown options print the usage and exit with status 1.
"""

import argparse
import sys
from dataclasses import replace
from typing import List, Optional

from .brainfuck import BrainfuckInterpreter
from .config import DEFAULT_MEMORY_SIZE, EngineConfig, parse_memory_size
from .errors import BrainfuckError
from .source import load_program


class _ArgumentParser(argparse.ArgumentParser):
    """Reports bad options with the usage text and exit status 1."""

    def error(self, message):
        self.print_usage(sys.stderr)
        self.exit(1, f"{self.prog}: error: {message}\n")


def _build_parser() -> argparse.ArgumentParser:
    ap = _ArgumentParser(
        prog="bfengine",
        description="Run a Brainfuck program",
        epilog="Example: bfengine -w -m 100000 program.bf",
    )
    ap.add_argument("-w", dest="wrap", action="store_true",
                    help="Enable memory wrapping (instead of bounds checking)")
    ap.add_argument("-d", dest="debug", action="store_true", help="Enable debug mode")
    ap.add_argument("-m", dest="memory_size", metavar="SIZE",
                    help=f"Set memory size (default: {DEFAULT_MEMORY_SIZE})")
    ap.add_argument("-z", dest="eof_zero", action="store_true",
                    help="Set cell to 0 on EOF (default: leave unchanged)")
    ap.add_argument("--no-pause", action="store_true",
                    help="Do not wait for Enter before exiting in a terminal")
    ap.add_argument("file", nargs="?", help="Brainfuck source file")
    return ap


def build_config(args: argparse.Namespace) -> EngineConfig:
    config = EngineConfig.from_env()
    overrides = {}
    if args.wrap:
        overrides["wrap_memory"] = True
    if args.debug:
        overrides["debug_mode"] = True
    if args.eof_zero:
        overrides["eof_sets_zero"] = True
    if args.memory_size is not None:
        overrides["memory_size"] = parse_memory_size(args.memory_size)
    return replace(config, **overrides)


def _prompt() -> None:
    print("\nInput: ", end="", flush=True)


def main(argv: Optional[List[str]] = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    if not args.file:
        print("Error: No brainfuck file specified", file=sys.stderr)
        parser.print_help()
        return 1

    config = build_config(args)
    try:
        code = load_program(args.file)
    except BrainfuckError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(f"Running Brainfuck program from: {args.file}")
    print(f"Configuration: {config.describe()}\n", flush=True)

    interactive = sys.stdin.isatty()
    status = 0
    try:
        itp = BrainfuckInterpreter(config, prompt=_prompt if interactive else None)
        result = itp.run(code)
        if result.unclosed_loops:
            print(f"Error: {result.unclosed_loops} unclosed loops", file=sys.stderr)
    except BrainfuckError as e:
        sys.stdout.flush()
        print(f"Error: {e}", file=sys.stderr)
        status = 1

    print("\n\nProgram execution complete.")

    if interactive and not args.no_pause:
        print("Press Enter to exit...", end="", flush=True)
        sys.stdin.readline()

    return status


if __name__ == "__main__":
    sys.exit(main())
