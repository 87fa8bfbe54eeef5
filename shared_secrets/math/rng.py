"""Random source for field elements.

Wraps :class:`random.SystemRandom` (the generator behind :mod:`secrets`)
by default.  Tests may hand in a seeded :class:`random.Random` to get
reproducible polynomials; never do that outside of tests.
"""

from __future__ import annotations

import random
from typing import Optional


class Rng:
    """Uniform sampler of arbitrary-precision integers below a bound."""

    def __init__(self, source: Optional[random.Random] = None) -> None:
        self._source = source if source is not None else random.SystemRandom()

    def randbelow(self, bound: int) -> int:
        """Return a uniform integer in ``[0, bound)``."""
        if bound <= 0:
            raise ValueError(f"bound must be positive, got {bound}")
        return self._source.randrange(bound)
