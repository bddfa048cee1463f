"""
motus.rng

Random sources handed to the generators. Callers pick one per run:
- SeededRandom(seed): reproducible, backed by random.Random (MT19937)
- SystemRandomSource(): backed by the OS entropy pool via secrets.SystemRandom

Both expose the same two draws: randbelow(n) and choose_weighted(weights).
Weighted draws are built on randbelow, so a seeded source reproduces the
same stream for any sequence of calls.
"""

import random
from bisect import bisect_right
from itertools import accumulate
from secrets import SystemRandom
from typing import Optional, Sequence


class WeightedIndex:
    """
    Categorical distribution over indices 0..len(weights)-1, each picked with
    probability weight / sum(weights).
    """

    def __init__(self, weights: Sequence[int]):
        if not weights:
            raise ValueError("weights must not be empty")
        for w in weights:
            if isinstance(w, bool) or not isinstance(w, int):
                raise ValueError(f"weights must be integers, got {w!r}")
            if w <= 0:
                raise ValueError(f"weights must be positive, got {w}")
        self.weights = tuple(weights)
        self._cumulative = list(accumulate(self.weights))
        self.total = self._cumulative[-1]

    def __len__(self) -> int:
        return len(self.weights)

    def sample(self, rng: "RandomSource") -> int:
        r = rng.randbelow(self.total)
        return bisect_right(self._cumulative, r)


class RandomSource:
    """Wraps a random.Random-compatible generator."""

    def __init__(self, rand: random.Random):
        self._rand = rand

    def randbelow(self, n: int) -> int:
        """Uniform integer in [0, n)."""
        if n <= 0:
            raise ValueError("n must be > 0")
        return self._rand.randrange(n)

    def choose_weighted(self, weights) -> int:
        """Index drawn from `weights` (a WeightedIndex or a list of ints)."""
        if not isinstance(weights, WeightedIndex):
            weights = WeightedIndex(weights)
        return weights.sample(self)

    def choice(self, seq: Sequence):
        return seq[self.randbelow(len(seq))]


class SeededRandom(RandomSource):
    def __init__(self, seed: int):
        super().__init__(random.Random(seed))
        self.seed = seed


class SystemRandomSource(RandomSource):
    def __init__(self):
        super().__init__(SystemRandom())


def from_seed(seed: Optional[int] = None) -> RandomSource:
    """Seeded source when a seed is given, system entropy otherwise."""
    if seed is None:
        return SystemRandomSource()
    return SeededRandom(seed)
