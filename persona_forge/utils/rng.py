"""Deterministic linear congruential generator used by every generator."""
from __future__ import annotations

from typing import Sequence, TypeVar

T = TypeVar("T")

_MULTIPLIER = 9301
_INCREMENT = 49297
_MODULUS = 233280


class SeededRandom:
    """Small LCG with the classic 9301/49297/233280 constants.

    Statistical quality is irrelevant here; the only contract is that the
    same seed yields the same sequence on every platform.
    """

    def __init__(self, seed: int):
        self._state = seed % _MODULUS

    def next(self) -> float:
        self._state = (self._state * _MULTIPLIER + _INCREMENT) % _MODULUS
        return self._state / _MODULUS

    def pick(self, items: Sequence[T]) -> T:
        if not items:
            raise ValueError("cannot pick from an empty sequence")
        return items[int(self.next() * len(items))]

    def picks(self, items: Sequence[T], count: int) -> list[T]:
        """Pick ``count`` distinct items (without replacement)."""
        if count > len(items):
            raise ValueError(f"cannot pick {count} items from {len(items)}")
        pool = list(items)
        chosen: list[T] = []
        for _ in range(count):
            chosen.append(pool.pop(int(self.next() * len(pool))))
        return chosen

    def int(self, low: int, high: int) -> int:
        """Uniform integer in [low, high], both ends inclusive."""
        return low + int(self.next() * (high - low + 1))

    def boolean(self, probability: float = 0.5) -> bool:
        return self.next() < probability

    def shuffle(self, items: Sequence[T]) -> list[T]:
        out = list(items)
        for i in range(len(out) - 1, 0, -1):
            j = int(self.next() * (i + 1))
            out[i], out[j] = out[j], out[i]
        return out
