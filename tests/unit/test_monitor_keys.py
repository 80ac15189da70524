"""Unit tests for KeyReader outside a terminal."""

from __future__ import annotations

import io
import time

from ghwatch.monitor.keys import KeyReader


class TestKeyReaderWithoutTerminal:
    def test_not_interactive_for_plain_stream(self):
        with KeyReader(io.StringIO("q")) as reader:
            assert reader.interactive is False

    def test_read_key_times_out(self):
        with KeyReader(io.StringIO("q")) as reader:
            start = time.monotonic()
            assert reader.read_key(0.02) is None
            assert time.monotonic() - start >= 0.015

    def test_negative_timeout_returns_immediately(self):
        with KeyReader(io.StringIO()) as reader:
            assert reader.read_key(-1.0) is None
