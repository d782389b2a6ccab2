"""
Reproducible random source for centroid seeding.

A 64-bit linear congruential generator using Knuth's MMIX constants. All
arithmetic is on Python integers, so a given seed produces the same sequence
on every platform and torch version.
"""

from typing import Optional
import secrets
import torch
from torch import Tensor


MULTIPLIER = 6364136223846793005
INCREMENT = 1442695040888963407
MODULUS = 2 ** 64
_MASK = MODULUS - 1


class LinearCongruentialGenerator:
    """x_{i+1} = (a * x_i + c) mod 2**64.

    Args:
        seed: Initial state in [0, 2**64). If None, 64 bits are drawn from
              the operating system's entropy pool; the value actually used is
              available as ``seed`` afterwards.
    """

    def __init__(self, seed: Optional[int] = None):
        if seed is None:
            seed = secrets.randbits(64)
        if not 0 <= seed < MODULUS:
            raise ValueError(f"seed must be in [0, 2**64), got {seed}")
        self.seed = seed
        self._state = seed

    def next_uint64(self) -> int:
        """Advance the generator and return the new 64-bit state."""
        self._state = (MULTIPLIER * self._state + INCREMENT) & _MASK
        return self._state

    def random(self) -> float:
        """Uniform float in [0, 1) from the 53 high bits of the next state."""
        return (self.next_uint64() >> 11) * (1.0 / (1 << 53))

    def randint(self, n: int) -> int:
        """Uniform integer in [0, n).

        Rejection sampling over equal-sized buckets of the 64-bit range, so
        the result depends on the high bits of the state and carries no
        modulo bias.
        """
        if n <= 0:
            raise ValueError(f"n must be positive, got {n}")
        bucket = MODULUS // n
        limit = bucket * n
        while True:
            x = self.next_uint64()
            if x < limit:
                return x // bucket

    def weighted_index(self, weights: Tensor) -> int:
        """Draw an index with probability proportional to ``weights``.

        Weights must be non-negative. The draw is made on the float64
        cumulative sum, so fractional weights keep their exact share of the
        probability mass. An all-zero weight vector falls back to a uniform
        draw.
        """
        n = weights.shape[0]
        cumulative = torch.cumsum(weights.detach().to('cpu', torch.float64), dim=0)
        total = cumulative[-1].item()
        if not total > 0:
            return self.randint(n)

        target = torch.tensor([self.random() * total], dtype=torch.float64)
        index = torch.searchsorted(cumulative, target, right=True).item()
        if index >= n:
            # rounding put the target on the upper edge: take the last
            # index that carries weight
            index = torch.nonzero(cumulative < total)
            index = index[-1].item() + 1 if len(index) > 0 else 0
        return index

    def getstate(self) -> int:
        return self._state

    def setstate(self, state: int) -> None:
        self._state = state & _MASK

    def __repr__(self) -> str:
        return f"LinearCongruentialGenerator(seed={self.seed})"
