"""Command-line front end: flags, banner, error reporting and exit status."""

import io
import os
import sys
import tempfile
import unittest
from unittest import mock

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from bfengine import DEFAULT_MEMORY_SIZE
from bfengine.cli import _build_parser, build_config, main

_BF_VARS = ("BF_WRAP_MEMORY", "BF_DEBUG", "BF_MEMORY_SIZE", "BF_EOF_ZERO")


class _CliRun:
    """Runs main() with stdin/stdout/stderr swapped for in-memory streams."""

    def __init__(self, argv, stdin=b""):
        self.argv = argv
        self.stdin = io.TextIOWrapper(io.BytesIO(stdin))
        self.raw_out = io.BytesIO()
        self.stdout = io.TextIOWrapper(self.raw_out, write_through=True)
        self.stderr = io.StringIO()

    def __call__(self):
        env = {k: v for k, v in os.environ.items() if k not in _BF_VARS}
        with mock.patch.dict(os.environ, env, clear=True), \
                mock.patch("dotenv.main.find_dotenv", return_value=""), \
                mock.patch.object(sys, "stdin", self.stdin), \
                mock.patch.object(sys, "stdout", self.stdout), \
                mock.patch.object(sys, "stderr", self.stderr):
            status = main(self.argv)
            self.stdout.flush()
        return status

    @property
    def out(self) -> bytes:
        return self.raw_out.getvalue()

    @property
    def err(self) -> str:
        return self.stderr.getvalue()


class TestCli(unittest.TestCase):
    def setUp(self):
        self.tmp = tempfile.TemporaryDirectory()
        self.addCleanup(self.tmp.cleanup)

    def _program(self, text):
        path = os.path.join(self.tmp.name, "prog.bf")
        with open(path, "w") as f:
            f.write(text)
        return path

    def test_runs_program(self):
        run = _CliRun([self._program("8x8: ++++++++[>++++++++<-]>.")])
        self.assertEqual(run(), 0)
        self.assertIn(b"Running Brainfuck program from:", run.out)
        self.assertIn(b"Memory Size=30000, Wrapping=Disabled", run.out)
        self.assertIn(b"@", run.out)
        self.assertTrue(run.out.rstrip().endswith(b"Program execution complete."))
        self.assertEqual(run.err, "")

    def test_echoes_stdin(self):
        run = _CliRun(["-z", self._program(",[.,]")], stdin=b"abc\n")
        self.assertEqual(run(), 0)
        self.assertIn(b"abc\n", run.out)

    def test_missing_file_argument(self):
        run = _CliRun([])
        self.assertEqual(run(), 1)
        self.assertIn("No brainfuck file specified", run.err)

    def test_unreadable_file(self):
        run = _CliRun([os.path.join(self.tmp.name, "nope.bf")])
        self.assertEqual(run(), 1)
        self.assertIn("Error: Could not open file", run.err)

    def test_runtime_error_reported(self):
        run = _CliRun([self._program("<")])
        self.assertEqual(run(), 1)
        self.assertIn("Error: Data pointer out of bounds at position 0", run.err)

    def test_wrap_flag_avoids_error(self):
        run = _CliRun(["-w", self._program("<+.")])
        self.assertEqual(run(), 0)
        self.assertIn(b"\x01", run.out)

    def test_unclosed_loops_warning(self):
        run = _CliRun([self._program("+[")])
        self.assertEqual(run(), 0)
        self.assertIn("Error: 1 unclosed loops", run.err)

    def test_debug_flag_prints_trace(self):
        run = _CliRun(["-d", "-m", "5", self._program("+.")])
        self.assertEqual(run(), 0)
        self.assertIn(b"[DEBUG] PC: 0, Instruction: +", run.out)
        self.assertIn(b"Memory[0-4]: [1] 0 0 0 0", run.out)

    def test_huge_memory_size_reported(self):
        run = _CliRun(["-m", "100000000000000000000", self._program("+.")])
        self.assertEqual(run(), 1)
        self.assertIn("Error: Memory allocation failed for memory tape", run.err)

    def test_unknown_option_exits_with_usage(self):
        run = _CliRun(["-q", self._program("+")])
        with self.assertRaises(SystemExit) as cm:
            run()
        self.assertEqual(cm.exception.code, 1)
        self.assertIn("usage: bfengine", run.err)


class TestBuildConfig(unittest.TestCase):
    def _config(self, argv):
        env = {k: v for k, v in os.environ.items() if k not in _BF_VARS}
        with mock.patch.dict(os.environ, env, clear=True), \
                mock.patch("dotenv.main.find_dotenv", return_value=""):
            return build_config(_build_parser().parse_args(argv))

    def test_flags(self):
        config = self._config(["-w", "-d", "-z", "-m", "100000", "x.bf"])
        self.assertTrue(config.wrap_memory)
        self.assertTrue(config.debug_mode)
        self.assertTrue(config.eof_sets_zero)
        self.assertEqual(config.memory_size, 100000)

    def test_zero_memory_size_falls_back(self):
        config = self._config(["-m", "0", "x.bf"])
        self.assertEqual(config.memory_size, DEFAULT_MEMORY_SIZE)

    def test_defaults(self):
        config = self._config(["x.bf"])
        self.assertFalse(config.wrap_memory)
        self.assertEqual(config.memory_size, DEFAULT_MEMORY_SIZE)


if __name__ == "__main__":
    unittest.main()
