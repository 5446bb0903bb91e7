from __future__ import annotations

import sys
import time


class Stopwatch:
    """Elapsed-time meter for control loops.

    Starts on construction; ``get_duration()`` returns seconds since the last
    ``start()`` and is the usual source of ``dt`` for ``PID.update``.
    """

    def __init__(self) -> None:
        self.start()

    def start(self) -> None:
        self._t0 = time.monotonic()

    def get_duration(self) -> float:
        return time.monotonic() - self._t0

    def display_duration(self) -> None:
        dt = self.get_duration()
        hz = 1.0 / dt if dt > 0 else float("inf")
        print(f"dt: {dt:.6f}[sec]\tf: {hz:.3f}[Hz]", file=sys.stderr)
