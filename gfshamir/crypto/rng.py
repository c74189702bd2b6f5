"""Random sources for polynomial coefficients.

The sharing engine never reaches for ambient randomness: a source is
passed in (or defaulted) per call.  Anything with a
``random_element() -> int`` method returning a value in [0, 256) works.

``SystemRandomSource`` draws from the OS CSPRNG via :mod:`secrets` and
is the default.  ``SeededRandomSource`` is reproducible and exists for
tests; it must never be used to share a real secret.
"""

from __future__ import annotations

import random as _random
import secrets
from typing import Protocol

from gfshamir.config import FIELD_SIZE


class RandomSource(Protocol):
    def random_element(self) -> int:
        """Return a uniform random field element in [0, FIELD_SIZE)."""
        ...


class SystemRandomSource:
    """Cryptographically secure source backed by :mod:`secrets`."""

    def random_element(self) -> int:
        return secrets.randbelow(FIELD_SIZE)


class SeededRandomSource:
    """Deterministic source for reproducible tests."""

    def __init__(self, seed: int) -> None:
        self._seed = seed
        self._rng = _random.Random(seed)

    def random_element(self) -> int:
        return self._rng.randrange(FIELD_SIZE)

    def __repr__(self) -> str:
        return f"SeededRandomSource(seed={self._seed})"
