"""CLI argument parsing, dispatch and exit-status tests.

Verifies how ``lazyls.cli.main`` routes to listing, watch, the navigator
and the folder picker, and how listing errors become exit codes.
"""

from __future__ import annotations

import io
import json
import os
import sys
import tempfile
import termios
import unittest
from pathlib import Path
from unittest import mock

from lazyls import cli
from lazyls.config import ConfigDefaults
from lazyls.options import SortKey


class _FdStringIO(io.StringIO):
    """In-memory stream that reports a fixed file descriptor."""

    def __init__(self, fd: int) -> None:
        super().__init__()
        self._fd = fd

    def fileno(self) -> int:
        return self._fd


class SplitCommandTests(unittest.TestCase):
    def test_leading_and_trailing_positions(self) -> None:
        self.assertEqual(cli.split_command(["interactive", "src"]), ("interactive", ["src"]))
        self.assertEqual(cli.split_command(["-a", "fastls"]), ("fastls", ["-a"]))
        self.assertEqual(cli.split_command(["--sort", "size", "interactive"]), ("interactive", ["--sort", "size"]))

    def test_option_values_and_paths_are_not_commands(self) -> None:
        self.assertEqual(cli.split_command(["--filter", "interactive"]), (None, ["--filter", "interactive"]))
        self.assertEqual(cli.split_command(["src", "interactive"]), (None, ["src", "interactive"]))
        self.assertEqual(cli.split_command([]), (None, []))


class ParserTests(unittest.TestCase):
    def test_config_defaults_seed_parser(self) -> None:
        parser = cli.build_parser(ConfigDefaults(show_hidden=True, sort=SortKey.SIZE, human=True))
        args = parser.parse_args([])

        self.assertTrue(args.all)
        self.assertTrue(args.human)
        self.assertEqual(args.sort, SortKey.SIZE)

    def test_sort_aliases_and_rejection(self) -> None:
        parser = cli.build_parser(ConfigDefaults())
        self.assertEqual(parser.parse_args(["--sort", "time"]).sort, SortKey.AGE)
        with mock.patch("sys.stderr", new_callable=io.StringIO), self.assertRaises(SystemExit) as ctx:
            parser.parse_args(["--sort", "color"])
        self.assertEqual(ctx.exception.code, 2)

    def test_options_from_args_disable_color_off_tty(self) -> None:
        args = cli.build_parser(ConfigDefaults()).parse_args(["-l", "--tree", "--filter", "*.py", "--only-files"])
        with mock.patch("sys.stdout", new_callable=io.StringIO):
            options = cli.options_from_args(args)

        self.assertTrue(options.long)
        self.assertTrue(options.tree)
        self.assertEqual(options.filter, "*.py")
        self.assertTrue(options.only_files)
        self.assertFalse(options.color)


class CliMainTests(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.root = Path(self._tmp.name).resolve()
        patcher = mock.patch("lazyls.config.CONFIG_PATH", self.root / "no-config.json")
        patcher.start()
        self.addCleanup(patcher.stop)
        self.addCleanup(self._tmp.cleanup)

    def _run(self, argv: list[str]) -> tuple[str, str]:
        out, err = io.StringIO(), io.StringIO()
        with mock.patch.object(sys, "stdout", out), mock.patch.object(sys, "stderr", err):
            cli.main(argv)
        return out.getvalue(), err.getvalue()

    def test_lists_explicit_path(self) -> None:
        (self.root / "b.txt").write_bytes(b"")
        (self.root / "a").mkdir()

        out, _err = self._run([str(self.root)])

        self.assertEqual(out, f"a{os.sep}\nb.txt\n")

    def test_defaults_to_current_working_directory(self) -> None:
        (self.root / "here.txt").write_bytes(b"")
        previous_cwd = Path.cwd()
        try:
            os.chdir(self.root)
            out, _err = self._run([])
        finally:
            os.chdir(previous_cwd)

        self.assertIn("here.txt", out)

    def test_json_output(self) -> None:
        (self.root / "x.py").write_bytes(b"123")

        out, _err = self._run(["--json", "--du", str(self.root)])
        record = json.loads(out)

        self.assertEqual([entry["rel_path"] for entry in record["entries"]], ["x.py"])
        self.assertEqual(record["summary"]["total_bytes"], 3)

    def test_invalid_filter_exits_with_status_one(self) -> None:
        out, err = io.StringIO(), io.StringIO()
        with mock.patch.object(sys, "stdout", out), mock.patch.object(sys, "stderr", err):
            with self.assertRaises(SystemExit) as ctx:
                cli.main(["--filter", "[abc", str(self.root)])

        self.assertEqual(ctx.exception.code, 1)
        self.assertIn("Invalid glob: [abc", err.getvalue())
        self.assertEqual(out.getvalue(), "")

    def test_missing_path_exits_with_status_one(self) -> None:
        err = io.StringIO()
        with mock.patch.object(sys, "stdout", io.StringIO()), mock.patch.object(sys, "stderr", err):
            with self.assertRaises(SystemExit) as ctx:
                cli.main([str(self.root / "missing")])

        self.assertEqual(ctx.exception.code, 1)
        self.assertIn("missing", err.getvalue())

    def test_watch_flag_routes_to_watch_loop_with_config_interval(self) -> None:
        (self.root / "no-config.json").write_text('{"watch_interval_seconds": 5}', encoding="utf-8")
        with mock.patch("lazyls.cli.run_watch") as run_watch:
            self._run(["--watch", str(self.root)])

        run_watch.assert_called_once()
        path, options = run_watch.call_args.args
        self.assertEqual(path, self.root)
        self.assertTrue(options.watch)
        self.assertEqual(run_watch.call_args.kwargs["interval_seconds"], 5.0)

    def test_interrupt_exits_with_status_130(self) -> None:
        with mock.patch("lazyls.cli.run_watch", side_effect=KeyboardInterrupt):
            with self.assertRaises(SystemExit) as ctx:
                self._run(["--watch", str(self.root)])
        self.assertEqual(ctx.exception.code, 130)

    def test_interactive_command_starts_navigator(self) -> None:
        with mock.patch("lazyls.cli.run_navigator") as run_navigator:
            self._run(["interactive", "-a", str(self.root)])

        run_navigator.assert_called_once()
        start, options = run_navigator.call_args.args
        self.assertEqual(start, self.root)
        self.assertTrue(options.show_hidden)

    def test_interactive_without_terminal_exits_with_status_one(self) -> None:
        err = io.StringIO()
        with mock.patch(
            "lazyls.navigator.terminal.termios.tcgetattr",
            side_effect=termios.error(25, "Inappropriate ioctl for device"),
        ), mock.patch.object(sys, "stdin", _FdStringIO(0)), mock.patch.object(
            sys, "stdout", _FdStringIO(1)
        ), mock.patch.object(sys, "stderr", err):
            with self.assertRaises(SystemExit) as ctx:
                cli.main(["interactive", str(self.root)])

        self.assertEqual(ctx.exception.code, 1)
        self.assertIn("Interactive mode needs a terminal on stdin: Inappropriate ioctl for device", err.getvalue())

    def test_fastls_lists_picked_folder(self) -> None:
        (self.root / "picked.txt").write_bytes(b"")
        with mock.patch("lazyls.cli.pick_folder", return_value=self.root):
            out, _err = self._run(["fastls"])

        self.assertEqual(out, "picked.txt\n")

    def test_fastls_cancelled_prints_nothing(self) -> None:
        with mock.patch("lazyls.cli.pick_folder", return_value=None):
            out, _err = self._run(["fastls"])

        self.assertEqual(out, "")

    def test_fastls_rejects_path_argument(self) -> None:
        with mock.patch("lazyls.cli.pick_folder") as pick_folder, self.assertRaises(SystemExit):
            self._run(["fastls", str(self.root)])
        pick_folder.assert_not_called()


if __name__ == "__main__":
    unittest.main()
