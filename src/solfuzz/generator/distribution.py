"""
Uniform random distribution shared by every generator.

All randomness of a generation run flows through a single instance so that a
seed fully determines the emitted program.
"""

from __future__ import annotations

import random
from typing import Iterable, Sequence, TypeVar

from solfuzz.exceptions import invariant


T = TypeVar("T")


class UniformRandomDistribution:
    __slots__ = ("_rng", "seed")

    def __init__(self, seed: int):
        invariant(seed >= 0, f"seed must be unsigned, got {seed}")
        self.seed = seed
        self._rng = random.Random(seed)

    def distribution_one_to_n(self, n: int) -> int:
        """Return an integer in ``[1, n]`` chosen uniformly at random."""
        invariant(n > 0, f"sample range [1, {n}] is empty")
        return self._rng.randint(1, n)

    def probable(self, n: int) -> bool:
        """Return True with probability ``1/n``."""
        invariant(n > 1, f"probable() needs n > 1, got {n}")
        return self.distribution_one_to_n(n) == 1

    def likely(self, n: int) -> bool:
        """Return True with probability ``1 - 1/n``."""
        invariant(n > 1, f"likely() needs n > 1, got {n}")
        return not self.probable(n)

    def choice(self, items: Sequence[T]) -> T:
        return items[self.distribution_one_to_n(len(items)) - 1]

    def subset(self, items: Iterable[T]) -> set[T]:
        """Keep each element of ``items`` with probability ``1/len(items)``.

        Elements are visited in sorted order so the draws do not depend on
        set iteration order.
        """
        pool = sorted(set(items))
        size = len(pool)
        invariant(size > 1, f"subset() needs more than one element, got {size}")
        return {item for item in pool if self.probable(size)}
