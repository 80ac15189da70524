"""Single-key input for the live dashboard.

Puts the terminal in cbreak mode so keys arrive without Enter, and
polls stdin with a timeout so the watch loop can wait for the next
tick and for a quit key at the same time.  Ctrl+C still raises
``KeyboardInterrupt`` because cbreak keeps signal generation on.

When stdin is not a terminal (pipes, CI, tests) no keys are ever
reported and ``read_key`` simply sleeps for the timeout.
"""

from __future__ import annotations

import os
import select
import sys
import time
from typing import IO, Any

try:
    import termios
    import tty
except ImportError:  # Windows has no termios
    termios = None  # type: ignore[assignment]
    tty = None  # type: ignore[assignment]


class KeyReader:
    """Context manager yielding keypresses from a terminal stream.

    Parameters
    ----------
    stream:
        Input stream.  Defaults to ``sys.stdin``.
    """

    def __init__(self, stream: IO[str] | None = None) -> None:
        self._stream = stream if stream is not None else sys.stdin
        self._fd: int | None = None
        self._saved: Any = None

    @property
    def interactive(self) -> bool:
        """True when keys can actually be read."""
        return self._fd is not None

    def __enter__(self) -> KeyReader:
        if termios is None:
            return self
        try:
            fd = self._stream.fileno()
        except (AttributeError, OSError, ValueError):
            return self
        if not os.isatty(fd):
            return self

        self._fd = fd
        self._saved = termios.tcgetattr(fd)
        tty.setcbreak(fd)
        return self

    def __exit__(self, *exc_info: object) -> None:
        if self._fd is not None and self._saved is not None:
            termios.tcsetattr(self._fd, termios.TCSADRAIN, self._saved)
        self._fd = None
        self._saved = None

    def read_key(self, timeout: float) -> str | None:
        """Return the next key, or ``None`` if none arrives within *timeout*."""
        timeout = max(timeout, 0.0)
        if self._fd is None:
            time.sleep(timeout)
            return None

        ready, _, _ = select.select([self._fd], [], [], timeout)
        if not ready:
            return None
        data = os.read(self._fd, 1)
        return data.decode(errors="ignore") or None
