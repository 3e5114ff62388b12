"""A simple stopwatch that reports elapsed wall-clock time."""

from __future__ import annotations

import sys
import time
from typing import TextIO


class Stopwatch:
    """Reports the milliseconds since it was started or last checked out."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream
        self.line = 0
        self._start = time.perf_counter()

    def checkout(self) -> float:
        """Print the time since the last checkpoint, restart, and return it in ms."""
        end = time.perf_counter()
        elapsed_ms = (end - self._start) * 1000.0
        stream = self._stream if self._stream is not None else sys.stdout
        print(f"Number Timecheck: {self.line} Time needed: {elapsed_ms:g} ms", file=stream)
        self.line += 1
        self._start = time.perf_counter()
        return elapsed_ms