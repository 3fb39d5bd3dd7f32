import logging
import time
from contextlib import contextmanager
from typing import Callable

logger = logging.getLogger("honeycomb")


class StageTimer:
    """Wall-clock milliseconds spent in each stage of one solve.

    Re-entering a stage adds to its total.
    """

    def __init__(self, clock: Callable[[], float] = time.perf_counter):
        self._clock = clock
        self._started = clock()
        self.timings: dict[str, float] = {}

    @contextmanager
    def stage(self, name: str):
        began = self._clock()
        try:
            yield
        finally:
            ms = round((self._clock() - began) * 1000, 1)
            self.timings[name] = round(self.timings.get(name, 0.0) + ms, 1)
            logger.info("stage=%s elapsed=%.1fms", name, ms)

    def elapsed(self, name: str) -> float:
        return self.timings.get(name, 0.0)

    @property
    def total_ms(self) -> float:
        return round((self._clock() - self._started) * 1000, 1)

    def summary(self) -> dict:
        return {**self.timings, "total": self.total_ms}

    def __str__(self) -> str:
        return " ".join(f"{name}={ms:.1f}ms" for name, ms in self.summary().items())
