"""Seeded Mersenne Twister random source with inclusive ranges."""

from __future__ import annotations

import random as _random
import secrets
from collections.abc import MutableSequence, Sequence, Sized
from typing import Iterable, TypeVar

from halloween_ninja.sliders import is_real_close

T = TypeVar("T")

_WARMUP_SKIP_COUNT = 123456


class Random:
    """Random numbers over inclusive ranges, with a recorded seed for replays."""

    def __init__(self, seed: int | None = None) -> None:
        self._seed = secrets.randbits(32) if seed is None else seed
        self._warmup_skip_count = _WARMUP_SKIP_COUNT
        self._engine = _random.Random(self._seed)
        # the first outputs of a badly seeded twister are predictable, so skip them
        for _ in range(self._warmup_skip_count):
            self._engine.getrandbits(32)

    @property
    def seed(self) -> int:
        return self._seed

    @property
    def warmup_skip_count(self) -> int:
        return self._warmup_skip_count

    def from_to(self, start, stop):
        """Return a number in [start, stop]; the bounds may be given in either order."""
        for bound in (start, stop):
            if isinstance(bound, bool) or not isinstance(bound, (int, float)):
                raise TypeError(f"Random.from_to() needs numbers, got {bound!r}")
        if stop < start:
            start, stop = stop, start
        if is_real_close(start, stop):
            return start
        if isinstance(start, int) and isinstance(stop, int):
            return self._engine.randint(start, stop)
        return min(self._engine.uniform(float(start), float(stop)), float(stop))

    def zero_to(self, stop):
        return self.from_to(type(stop)(0), stop)

    def zero_to_one_less_than(self, stop):
        return self.zero_to(stop - 1)

    def boolean(self) -> bool:
        return self.zero_to(1) == 1

    def index(self, container: Sized) -> int:
        """Return a valid index into *container*."""
        if len(container) == 0:
            raise ValueError("Random.index() but the container is empty.")
        return self.zero_to_one_less_than(len(container))

    def choice(self, items: Iterable[T]) -> T:
        """Return one element of *items*."""
        pool = items if isinstance(items, Sequence) else list(items)
        if len(pool) == 0:
            raise ValueError("Random.choice() but there is nothing to choose from.")
        return pool[self.index(pool)]

    def shuffle(self, items: MutableSequence) -> None:
        """Shuffle *items* in place."""
        self._engine.shuffle(items)