"""Seeded random number generator for reproducible maze generation."""

import random
from typing import Optional


class SeededRNG:
    """Seeded random number generator for reproducible results."""

    def __init__(self, seed: Optional[int] = None):
        self._rng = random.Random(seed)

    def choice(self, seq):
        """Choose a random element from a non-empty sequence."""
        return self._rng.choice(seq)

    def shuffle(self, seq) -> None:
        """Shuffle the sequence in place."""
        self._rng.shuffle(seq)
