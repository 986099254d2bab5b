# src/gridmaze/rng.py
# Park–Miller minimal standard generator used for maze carving tie-breaks.

import os
from dataclasses import dataclass
from typing import Protocol

A = 16807
M = 0x7FFFFFFF  # 2^31-1


class RandomSource(Protocol):
    def below(self, n: int) -> int:
        """Return a uniform integer in [0, n)."""
        ...


def pm_next(state: int) -> int:
    return (state * A) % M


def state_from_seed(seed: int) -> int:
    # State 0 is a fixed point of the recurrence; fold every seed into 1..M-1.
    return (seed % (M - 1)) + 1


@dataclass
class PMRandom:
    state: int

    def __post_init__(self) -> None:
        if not (0 < self.state < M):
            raise ValueError(f"state must be in 1..{M - 1}, got {self.state}")

    @classmethod
    def seeded(cls, seed: int) -> "PMRandom":
        return cls(state_from_seed(seed))

    @classmethod
    def from_entropy(cls) -> "PMRandom":
        return cls.seeded(int.from_bytes(os.urandom(8), "big"))

    def next32(self) -> int:
        # Advance first, then return: values lie in 1..M-1.
        self.state = pm_next(self.state)
        return self.state

    def below(self, n: int) -> int:
        """
        Uniform integer in [0, n). Draws outside the largest multiple of n
        are rejected so small ranges are not biased toward low values.
        """
        if n < 1:
            raise ValueError("n must be >= 1")
        span = M - 1
        limit = span - (span % n)
        while True:
            v = self.next32() - 1
            if v < limit:
                return v % n
