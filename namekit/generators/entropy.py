#!/usr/bin/env python3
"""
Random Sources for Name Generation
==================================
Generators never call the `random` module directly. They draw from a random
source object, so callers can swap true randomness for a seeded or scripted
source.

A random source only needs two methods:
    choice(seq)     - uniform pick from a non-empty sequence
    randint(a, b)   - integer N with a <= N <= b

Sources:
- TrueRandom:   cryptographically secure, backed by the OS entropy pool (default)
- SeededRandom: reproducible, backed by random.Random(seed)
"""

import random
import secrets
from typing import Any, Sequence, Optional


# =============================================================================
# True Random Number Generator
# =============================================================================

class TrueRandom:
    """
    Cryptographically secure random number generator.

    Draws from secrets.SystemRandom, which reads the OS entropy pool.
    """

    def __init__(self):
        self._rng = secrets.SystemRandom()

    def randint(self, a: int, b: int) -> int:
        """Return random integer N such that a <= N <= b."""
        return self._rng.randint(a, b)

    def choice(self, seq: Sequence) -> Any:
        """Return a random element from non-empty sequence."""
        if not seq:
            raise IndexError("Cannot choose from empty sequence")
        return self._rng.choice(seq)


class SeededRandom(TrueRandom):
    """Reproducible random source for tests and `--seed` runs."""

    def __init__(self, seed: int):
        self.seed = seed
        self._rng = random.Random(seed)


# Global instance
_true_random = TrueRandom()


def get_rng(seed: Optional[int] = None) -> TrueRandom:
    """
    Get a random source.

    Returns the shared TrueRandom instance, or a fresh SeededRandom when a
    seed is given.
    """
    if seed is not None:
        return SeededRandom(seed)
    return _true_random
