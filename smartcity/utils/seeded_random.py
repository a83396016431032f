"""Seeded random stream shared by the generation stages."""
import math
import random
from typing import Sequence, TypeVar

T = TypeVar('T')


class SeededRandom:
    """Deterministic uniform random stream built from an integer seed.

    Every public draw consumes exactly one value from the underlying
    generator, so the sequence of calls fully determines the output. Each
    instance owns its own ``random.Random``; the module-level ``random`` state
    is never touched.
    """

    def __init__(self, seed: int):
        """Create the stream.

        Args:
            seed: Integer seed.
        """
        self.seed = seed
        self._rng = random.Random(seed)

    def random(self) -> float:
        """Return a float in [0, 1)."""
        return self._rng.random()

    def random_int(self, min_value: int, max_value: int) -> int:
        """Return an integer in [min_value, max_value], both ends inclusive.

        Raises:
            ValueError: If ``max_value < min_value``.
        """
        if max_value < min_value:
            raise ValueError(f'Empty integer range [{min_value}, {max_value}]')
        return math.floor(self._rng.random() * (max_value - min_value + 1)) + min_value

    def random_float(self, min_value: float, max_value: float) -> float:
        """Return a float in [min_value, max_value)."""
        return self._rng.random() * (max_value - min_value) + min_value

    def choice(self, items: Sequence[T]) -> T:
        """Pick one element uniformly.

        Args:
            items: Non-empty sequence.

        Raises:
            ValueError: If ``items`` is empty.
        """
        if len(items) == 0:
            raise ValueError('Cannot choose from an empty collection')
        return items[math.floor(self._rng.random() * len(items))]
