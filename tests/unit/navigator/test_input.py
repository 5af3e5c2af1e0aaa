"""Tests for raw key decoding from a byte stream."""

from __future__ import annotations

import os
import unittest

from lazyls.navigator import input as key_input
from lazyls.navigator.input import read_key


class ReadKeyTests(unittest.TestCase):
    def setUp(self) -> None:
        self.read_fd, self.write_fd = os.pipe()
        key_input._PENDING_BYTES.clear()

    def tearDown(self) -> None:
        os.close(self.read_fd)
        os.close(self.write_fd)
        key_input._PENDING_BYTES.clear()

    def _keys(self, payload: bytes, count: int) -> list[str]:
        os.write(self.write_fd, payload)
        return [read_key(self.read_fd, timeout_ms=50) for _ in range(count)]

    def test_control_and_plain_keys(self) -> None:
        self.assertEqual(
            self._keys(b"q\r\n\x7f\x08\x03\tj", 8),
            ["q", "ENTER", "ENTER", "BACKSPACE", "BACKSPACE", "CTRL_C", "TAB", "j"],
        )

    def test_arrow_and_navigation_sequences(self) -> None:
        payload = b"\x1b[A\x1b[B\x1b[C\x1b[D\x1b[H\x1b[F\x1b[5~\x1b[6~\x1bOA"
        self.assertEqual(
            self._keys(payload, 9),
            ["UP", "DOWN", "RIGHT", "LEFT", "HOME", "END", "PAGE_UP", "PAGE_DOWN", "UP"],
        )

    def test_lone_escape_and_escape_followed_by_key(self) -> None:
        self.assertEqual(self._keys(b"\x1b", 1), ["ESC"])
        self.assertEqual(self._keys(b"\x1bq", 2), ["ESC", "q"])

    def test_multibyte_character_is_one_key(self) -> None:
        self.assertEqual(self._keys("é界".encode("utf-8"), 2), ["é", "界"])

    def test_timeout_returns_empty_token(self) -> None:
        self.assertEqual(read_key(self.read_fd, timeout_ms=10), "")


class ReadKeyEofTests(unittest.TestCase):
    def test_closed_writer_returns_eof_token(self) -> None:
        read_fd, write_fd = os.pipe()
        os.close(write_fd)
        try:
            self.assertEqual(read_key(read_fd), "EOF")
            self.assertEqual(read_key(read_fd, timeout_ms=10), "EOF")
        finally:
            os.close(read_fd)


if __name__ == "__main__":
    unittest.main()
