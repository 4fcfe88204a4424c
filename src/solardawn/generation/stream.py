"""Seeded random stream and the asteroid name sequence.

Output depends on the order of draws, not just the seed. The generator draws
in a fixed order: planet angles (Mercury, Venus, Mars, Jupiter), then ice and
ore abundance pairs for the main belt, Trojans, Greeks and Hildas.
"""

from __future__ import annotations

import math
import random

SEED_SIZE = 32

RESOURCE_VALUES = (0, 1, 2, 3, 4, 5, 6)
RESOURCE_WEIGHTS = (7, 6, 5, 4, 3, 2, 1)
_RESOURCE_CUM_WEIGHTS = tuple(sum(RESOURCE_WEIGHTS[: i + 1]) for i in range(len(RESOURCE_WEIGHTS)))


class RandomStream:
    """Deterministic draws for one generation run.

    Args:
        seed: Exactly 32 opaque bytes.

    Raises:
        ValueError: If the seed is not 32 bytes long.
    """

    def __init__(self, seed: bytes):
        if len(seed) != SEED_SIZE:
            raise ValueError(f"seed must be {SEED_SIZE} bytes, got {len(seed)}")
        # bytes seeds are hashed with SHA-512, stable across platforms
        self._rng = random.Random(bytes(seed))

    def sample_angle(self) -> float:
        """Uniform angle in [0, 2*pi)."""
        angle = self._rng.random() * math.tau
        return angle if angle < math.tau else 0.0

    def sample_abundance(self) -> int:
        """Resource abundance in [0, 6]; low values are most likely."""
        return self._rng.choices(RESOURCE_VALUES, cum_weights=_RESOURCE_CUM_WEIGHTS)[0]


class AsteroidNameSequence:
    """Five-digit asteroid designations from a fixed-step walk.

    Never touches the random stream, so naming more or fewer asteroids cannot
    shift body placement.
    """

    STEP = 13121
    MODULUS = 60_000
    OFFSET = 10_000

    def __init__(self) -> None:
        self._last = 0

    def __iter__(self) -> AsteroidNameSequence:
        return self

    def __next__(self) -> str:
        self._last = (self._last + self.STEP) % self.MODULUS
        return str(self._last + self.OFFSET)
