"""A high-resolution wall-clock timer."""

from __future__ import annotations

import sys
import time
from collections.abc import Callable
from types import TracebackType


class Timer:
    """Measures the time between :meth:`start` and :meth:`stop`.

    While running, the elapsed time is measured up to the present moment.
    The timer can also be used as a context manager.
    """

    __slots__ = ("_clock", "_start", "_end", "_stopped")

    def __init__(self, clock: Callable[[], float] = time.perf_counter) -> None:
        self._clock = clock
        self._start: float | None = None
        self._end: float | None = None
        self._stopped = False

    def start(self) -> None:
        """Start (or restart) the timer."""
        self._stopped = False
        self._start = self._clock()

    def stop(self) -> None:
        """Stop the timer, freezing the elapsed time."""
        self._stopped = True
        self._end = self._clock()

    def elapsed_microseconds(self) -> float:
        """Elapsed time in microseconds."""
        if self._start is None:
            raise RuntimeError("the timer was never started")
        if not self._stopped or self._end is None:
            self._end = self._clock()
        return (self._end - self._start) * 1_000_000.0

    def elapsed_milliseconds(self) -> float:
        """Elapsed time in milliseconds."""
        return self.elapsed_microseconds() * 0.001

    def elapsed_seconds(self) -> float:
        """Elapsed time in seconds."""
        return self.elapsed_microseconds() * 0.000001

    def print_elapsed_time(self, caption: str) -> None:
        """Write the caption followed by the elapsed seconds to standard error."""
        print(f"{caption}{self.elapsed_seconds():g}", file=sys.stderr)

    def __enter__(self) -> Timer:
        self.start()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.stop()