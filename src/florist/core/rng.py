"""Seeded random source that can be rewound to its seed.

Generation consumes one random stream per run. Sub-pipelines that must be
reproducible on their own (the mosaic frame at the center of a flower) draw
from a restored copy, which starts again from the seed's initial state.
"""

import random
from collections.abc import Callable, MutableSequence
from typing import TypeVar

T = TypeVar("T")

U64_MAX = 2**64 - 1


class RestorableRandom:
    """Deterministic random source bound to a 64-bit seed.

    Example:
        source = RestorableRandom(42)
        first = source.next_float_in_range(0.0, 1.0)
        assert source.restore().next_float_in_range(0.0, 1.0) == first
    """

    def __init__(self, seed: int) -> None:
        """Initialize the source.

        Args:
            seed: Seed in [0, 2**64 - 1]

        Raises:
            ValueError: If the seed is out of range
        """
        if not 0 <= seed <= U64_MAX:
            raise ValueError(f"seed must be in [0, {U64_MAX}], got {seed}")
        self._seed = seed
        self._random = random.Random(seed)

    @classmethod
    def from_entropy(cls) -> "RestorableRandom":
        """Create a source with a fresh random seed."""
        return cls(random.SystemRandom().randint(0, U64_MAX))

    @property
    def seed(self) -> int:
        """Seed this source was created with."""
        return self._seed

    def restore(self) -> "RestorableRandom":
        """Return a new source in this seed's initial state."""
        return RestorableRandom(self._seed)

    def next_float_in_range(self, low: float, high: float) -> float:
        """Uniform float in [low, high].

        Raises:
            ValueError: If low > high
        """
        if low > high:
            raise ValueError(f"empty range [{low}, {high}]")
        return self._random.uniform(low, high)

    def next_int_in_range(self, low: int, high: int) -> int:
        """Uniform integer in [low, high].

        Raises:
            ValueError: If low > high
        """
        if low > high:
            raise ValueError(f"empty range [{low}, {high}]")
        return self._random.randint(low, high)

    def next_bool(self, probability: float = 0.5) -> bool:
        """True with the given probability.

        Raises:
            ValueError: If probability is outside [0, 1]
        """
        if not 0.0 <= probability <= 1.0:
            raise ValueError(f"probability must be in [0, 1], got {probability}")
        return self._random.random() < probability

    def next_u64(self) -> int:
        """Uniform 64-bit unsigned integer."""
        return self._random.getrandbits(64)

    def option(self, func: Callable[["RestorableRandom"], T], probability: float = 0.5) -> T | None:
        """Call func with this source with the given probability.

        Returns:
            func's result, or None when the draw failed
        """
        if self.next_bool(probability):
            return func(self)
        return None

    def shuffle(self, items: MutableSequence[T]) -> None:
        """Shuffle items in place."""
        self._random.shuffle(items)
