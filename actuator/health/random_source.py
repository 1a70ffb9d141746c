"""Randomness source backed by the standard pseudo-random generator."""

import random


class SystemRandomSource:
    """Per-instance pseudo-random boolean source.

    A seed makes the boolean sequence reproducible; without one the generator
    is seeded from system entropy.
    """

    def __init__(self, seed: int | None = None):
        """Initialize random source.

        Args:
            seed: Optional seed for a reproducible sequence.
        """

        self._random = random.Random(seed)

    def next_boolean(self) -> bool:
        """Draw one bit from the generator.

        Returns:
            bool: True when the drawn bit is set.
        """

        return self._random.getrandbits(1) == 1
