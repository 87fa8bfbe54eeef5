"""Prime moduli for modular integers.

A :class:`Prime` is parsed once and shared by reference between every
:class:`~shared_secrets.math.modular.ModularInteger` built on it.  Primality
is *not* verified: callers must supply a real prime, otherwise division
fails later with :class:`~shared_secrets.math.errors.NotInvertibleError`.
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache

from shared_secrets.config import PRIME_257


@dataclass(frozen=True)
class Prime:
    """An integer ``> 1`` used as the modulus of a prime field."""

    value: int

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise TypeError(f"Prime value must be an int, got {type(self.value).__name__}")
        if self.value <= 1:
            raise ValueError(f"Expected a value greater than 1, got {self.value}")

    @classmethod
    def parse(cls, string: str) -> "Prime":
        """Parse a base-10 string.

        Raises ``ValueError`` if *string* is not an integer or is ``<= 1``.
        """
        try:
            value = int(string, 10)
        except (TypeError, ValueError):
            raise ValueError(f"Invalid prime literal: {string!r}") from None
        return cls(value)

    @property
    def byte_length(self) -> int:
        """Number of bytes needed to write the prime big-endian."""
        return (self.value.bit_length() + 7) // 8

    def __str__(self) -> str:
        return str(self.value)


@lru_cache(maxsize=None)
def canonical_prime() -> Prime:
    """The 257-bit prime every share is computed over."""
    return Prime.parse(PRIME_257)
