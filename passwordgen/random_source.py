# -*- coding: utf-8 -*-
"""
Secure randomness used by the generator.

The generator only needs two things from its random source: a uniform integer
below a bound, and an in-place uniform permutation. Tests inject their own
implementation of this small protocol to make generation deterministic.
"""

from __future__ import annotations

import secrets
from typing import MutableSequence, Protocol, TypeVar

T = TypeVar("T")


class RandomSource(Protocol):
    def randbelow(self, upper: int) -> int:
        """Return a uniformly distributed integer in [0, upper)."""
        ...

    def shuffle(self, items: MutableSequence[T]) -> None:
        """Uniformly permute ``items`` in place."""
        ...


class SecureRandomSource:
    """
    Cryptographically secure source backed by the OS CSPRNG (secrets.SystemRandom).

    randrange() uses rejection sampling internally, so there is no modulo bias
    for bounds that don't divide the underlying output range.
    """

    def __init__(self) -> None:
        self._rng = secrets.SystemRandom()

    def randbelow(self, upper: int) -> int:
        return self._rng.randrange(upper)

    def shuffle(self, items: MutableSequence[T]) -> None:
        # Fisher-Yates, drawing every swap index from the secure source.
        for i in range(len(items) - 1, 0, -1):
            j = self.randbelow(i + 1)
            items[i], items[j] = items[j], items[i]
