"""Tests for interval re-rendering in watch mode.

Covers failure reporting in both output shapes and that the loop keeps
running after a failed iteration.
"""

from __future__ import annotations

import io
import json
import tempfile
import unittest
from pathlib import Path

from lazyls.errors import ListingIOError
from lazyls.options import ListOptions
from lazyls.watch import CLEAR_SCREEN, run_watch, run_watch_iteration


class WatchIterationTests(unittest.TestCase):
    def test_human_iteration_clears_screen_then_renders(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            (root / "a.txt").write_bytes(b"a")
            out, err = io.StringIO(), io.StringIO()

            ok = run_watch_iteration(root, ListOptions(), out, err)

            self.assertTrue(ok)
            self.assertEqual(out.getvalue(), CLEAR_SCREEN + "a.txt\n")
            self.assertEqual(err.getvalue(), "")

    def test_human_failure_goes_to_stderr(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            missing = Path(tmp) / "missing"
            out, err = io.StringIO(), io.StringIO()

            ok = run_watch_iteration(missing, ListOptions(), out, err)

            self.assertFalse(ok)
            self.assertEqual(out.getvalue(), CLEAR_SCREEN)
            self.assertIn("Failed to read metadata for", err.getvalue())

    def test_json_failure_emits_error_record_without_clearing(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            missing = Path(tmp) / "missing"
            out, err = io.StringIO(), io.StringIO()

            ok = run_watch_iteration(missing, ListOptions(json=True), out, err)

            self.assertFalse(ok)
            record = json.loads(out.getvalue())
            self.assertEqual(record["root"], str(missing))
            self.assertEqual(record["entries"], [])
            self.assertIsNone(record["summary"])
            self.assertIn("missing", record["error"])
            self.assertNotIn(CLEAR_SCREEN, out.getvalue())
            self.assertEqual(err.getvalue(), "")


class WatchLoopTests(unittest.TestCase):
    def test_loop_continues_after_failure_and_sleeps_between_renders(self) -> None:
        calls: list[int] = []
        sleeps: list[float] = []

        def flaky_render(path, options, stream, theme) -> None:
            calls.append(len(calls))
            if len(calls) == 2:
                raise ListingIOError("Failed to read /w: gone", path)
            stream.write(f"render {len(calls)}\n")

        out, err = io.StringIO(), io.StringIO()
        run_watch(
            Path("/w"),
            ListOptions(),
            interval_seconds=0.5,
            stdout=out,
            stderr=err,
            render=flaky_render,
            sleep=sleeps.append,
            max_iterations=3,
        )

        self.assertEqual(len(calls), 3)
        self.assertEqual(sleeps, [0.5, 0.5, 0.5])
        self.assertIn("render 1", out.getvalue())
        self.assertIn("render 3", out.getvalue())
        self.assertEqual(err.getvalue(), "Failed to read /w: gone\n")

    def test_non_listing_errors_propagate(self) -> None:
        def broken_render(path, options, stream, theme) -> None:
            raise RuntimeError("bug")

        with self.assertRaises(RuntimeError):
            run_watch(
                Path("/w"),
                ListOptions(),
                stdout=io.StringIO(),
                stderr=io.StringIO(),
                render=broken_render,
                sleep=lambda _s: None,
                max_iterations=1,
            )


if __name__ == "__main__":
    unittest.main()
