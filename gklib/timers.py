"""Wall-clock and CPU timing helpers."""

from __future__ import annotations

import time
from typing import Callable


def wclock_seconds() -> float:
    """Return the current wall-clock time in seconds."""
    return time.time()


def cpu_seconds() -> float:
    """Return the user plus system CPU time used by this process, in seconds."""
    return time.process_time()


class Timer:
    """An accumulating timer over a clock function.

    Each ``start``/``stop`` pair adds the time between them to the total,
    which ``elapsed`` reports and ``clear`` resets.
    """

    def __init__(self, clock: Callable[[], float] = wclock_seconds) -> None:
        self.clock = clock
        self.total = 0.0

    def clear(self) -> None:
        """Reset the accumulated time to zero."""
        self.total = 0.0

    def start(self) -> None:
        """Begin a timed interval."""
        self.total -= self.clock()

    def stop(self) -> None:
        """End the current timed interval."""
        self.total += self.clock()

    def elapsed(self) -> float:
        """Return the accumulated time."""
        return self.total

    def __enter__(self) -> "Timer":
        self.start()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.stop()