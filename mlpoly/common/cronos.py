"""
Cronos: named stopwatches for rough timing of demo workloads.

Example:
    >>> cronos = Cronos()
    >>> with cronos.clock("eval"):
    ...     _ = sum(range(1000))
    >>> print(cronos.summary())  # doctest: +SKIP
    eval  0.000012s
"""

from __future__ import annotations
from typing import Callable, Dict, Iterator, Optional
from contextlib import contextmanager
import time


class Cronos:
    """
    A set of named timers over a monotonic clock.

    Attributes:
        clock_fn: Zero-argument callable returning seconds (time.perf_counter)
    """

    def __init__(self, clock_fn: Optional[Callable[[], float]] = None):
        self.clock_fn = clock_fn or time.perf_counter
        self._started: Dict[str, float] = {}
        self._elapsed: Dict[str, float] = {}

    def start(self, name: str) -> None:
        """Start (or restart) the timer called name."""
        self._started[name] = self.clock_fn()
        self._elapsed.pop(name, None)

    def stop(self, name: str) -> float:
        """
        Stop a running timer and return its elapsed seconds.

        Raises:
            KeyError: If no timer called name is running
        """
        if name not in self._started:
            raise KeyError(f"Timer '{name}' is not running")
        elapsed = self.clock_fn() - self._started.pop(name)
        self._elapsed[name] = elapsed
        return elapsed

    def elapsed(self, name: str) -> float:
        """Elapsed seconds; live reading if the timer is still running."""
        if name in self._started:
            return self.clock_fn() - self._started[name]
        if name in self._elapsed:
            return self._elapsed[name]
        raise KeyError(f"Unknown timer '{name}'")

    @contextmanager
    def clock(self, name: str) -> Iterator[None]:
        """Time the body of a with-block."""
        self.start(name)
        try:
            yield
        finally:
            self.stop(name)

    def reset(self) -> None:
        self._started.clear()
        self._elapsed.clear()

    @property
    def names(self) -> list:
        return list(self._elapsed) + [n for n in self._started if n not in self._elapsed]

    def summary(self) -> str:
        """One aligned line per timer, in the order timers finished."""
        if not self.names:
            return "(no timers)"
        width = max(len(name) for name in self.names)
        lines = []
        for name in self.names:
            suffix = " (running)" if name in self._started else ""
            lines.append(f"{name:<{width}}  {self.elapsed(name):.6f}s{suffix}")
        return "\n".join(lines)

    def __repr__(self) -> str:
        return f"Cronos(timers={self.names})"
