import itertools
import random
import time
from typing import Callable, Iterator, Optional


def _clock_ms() -> int:
    return time.time_ns() // 1_000_000


def _jitter() -> int:
    return random.randint(0, 999_999)


class SeedFactory:
    """Hands out round seeds: wall clock + per-factory counter + jitter.

    Only seed construction is impure; generation itself is a pure function
    of the seed it is given. Clock and jitter are injectable for tests.
    """

    def __init__(
        self,
        clock: Callable[[], int] = _clock_ms,
        jitter: Callable[[], int] = _jitter,
        start: int = 0,
    ):
        self._clock = clock
        self._jitter = jitter
        self._counter: Iterator[int] = itertools.count(start)

    def next_seed(self) -> int:
        return self._clock() + next(self._counter) + self._jitter()


_default_factory: Optional[SeedFactory] = None


def default_factory() -> SeedFactory:
    global _default_factory
    if _default_factory is None:
        _default_factory = SeedFactory()
    return _default_factory
