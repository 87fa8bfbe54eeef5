"""Prime-field arithmetic F_p on arbitrary-precision integers.

Every :class:`ModularInteger` holds a value in ``[0, p)`` and a reference
to the :class:`~shared_secrets.math.prime.Prime` it is reduced by.  All
arithmetic reduces its result back into ``[0, p)``; Python's ``%`` is the
Euclidean remainder for a positive modulus, so negative intermediates land
in range too.

Mixing moduli is always a bug, so binary operators raise
:class:`~shared_secrets.math.errors.ModulusMismatchError` instead of
guessing.  Two primes with the same value are the same modulus.
"""

from __future__ import annotations

import re
from typing import Optional

from shared_secrets.math.errors import ModulusMismatchError, NotInvertibleError, ParseError
from shared_secrets.math.field import Field
from shared_secrets.math.prime import Prime
from shared_secrets.math.rng import Rng

_DIGITS = "0123456789abcdefghijklmnopqrstuvwxyz"
_NUMERAL = re.compile(r"[+-]?[0-9a-zA-Z]+", re.ASCII)


def _check_radix(radix: int) -> None:
    if not 2 <= radix <= 36:
        raise ValueError(f"radix must be in the range 2..36, got {radix}")


class ModularInteger(Field):
    """An element of F_p."""

    def __init__(self, value: int, prime: Prime) -> None:
        self._value = value % prime.value
        self._prime = prime

    # ---- construction ----

    @classmethod
    def parse(cls, string: str, prime: Prime) -> "ModularInteger":
        """Parse a base-10 integer and reduce it modulo *prime*."""
        return cls.parse_radix(string, prime, 10)

    @classmethod
    def parse_radix(cls, string: str, prime: Prime, radix: int) -> "ModularInteger":
        """Parse an integer written in *radix* (2..36) and reduce it modulo *prime*.

        Only ASCII digits and letters with an optional sign are accepted;
        surrounding whitespace, underscores and non-ASCII digits are not.
        Raises :class:`ParseError` if *string* is not a valid numeral.
        """
        _check_radix(radix)
        if (
            not isinstance(string, str)
            or not _NUMERAL.fullmatch(string)
            or any(_DIGITS.index(c) >= radix for c in string.lstrip("+-").lower())
        ):
            raise ParseError(f"Invalid base-{radix} integer: {string!r}")
        value = int(string, radix)
        return cls(value, prime)

    @classmethod
    def from_digits(cls, data: bytes, prime: Prime) -> "ModularInteger":
        """Read *data* as a big-endian unsigned integer, reduced modulo *prime*.

        An empty byte string is the integer 0.
        """
        return cls(int.from_bytes(data, "big"), prime)

    @classmethod
    def random(cls, prime: Prime, rng: Optional[Rng] = None) -> "ModularInteger":
        """Return a uniform random element of F_p."""
        rng = rng if rng is not None else Rng()
        return cls(rng.randbelow(prime.value), prime)

    @classmethod
    def zero_of(cls, prime: Prime) -> "ModularInteger":
        return cls(0, prime)

    @classmethod
    def one_of(cls, prime: Prime) -> "ModularInteger":
        return cls(1, prime)

    # ---- accessors ----

    @property
    def value(self) -> int:
        return self._value

    @property
    def prime(self) -> Prime:
        return self._prime

    # ---- serialisation ----

    def to_digits(self, length: Optional[int] = None) -> bytes:
        """Big-endian bytes of the value.

        Without *length* the encoding is minimal: leading zero bytes are
        dropped and zero encodes to ``b""``.  With *length* the result is
        left-padded with zero bytes to exactly that many bytes; a value that
        needs more raises ``ValueError``.
        """
        minimal = (self._value.bit_length() + 7) // 8
        if length is None:
            length = minimal
        elif length < minimal:
            raise ValueError(f"value needs {minimal} bytes, cannot fit in {length}")
        return self._value.to_bytes(length, "big")

    def to_string_radix(self, radix: int) -> str:
        """Lowercase representation of the value in *radix* (2..36)."""
        _check_radix(radix)
        if radix == 10:
            return str(self._value)
        if self._value == 0:
            return "0"
        digits = []
        n = self._value
        while n:
            n, rem = divmod(n, radix)
            digits.append(_DIGITS[rem])
        return "".join(reversed(digits))

    # ---- Field ----

    def zero(self) -> "ModularInteger":
        return ModularInteger(0, self._prime)

    def one(self) -> "ModularInteger":
        return ModularInteger(1, self._prime)

    def add_inverse(self) -> "ModularInteger":
        return ModularInteger(-self._value, self._prime)

    def mul_inverse(self) -> "ModularInteger":
        """Multiplicative inverse via the extended Euclidean algorithm.

        Raises ``ZeroDivisionError`` for zero and :class:`NotInvertibleError`
        if the modulus shares a factor with the value (it is not prime).
        """
        if self._value == 0:
            raise ZeroDivisionError("Cannot invert zero in F_p")
        try:
            inverse = pow(self._value, -1, self._prime.value)
        except ValueError:
            raise NotInvertibleError(
                f"{self._value} has no inverse modulo {self._prime.value}; "
                "the modulus is not a prime"
            ) from None
        return ModularInteger(inverse, self._prime)

    def is_zero(self) -> bool:
        return self._value == 0

    def is_one(self) -> bool:
        return self._value == 1

    # ---- arithmetic ----

    def _check_modulus(self, other: "ModularInteger") -> None:
        if other._prime is not self._prime and other._prime != self._prime:
            raise ModulusMismatchError(
                "Illegal operation between different modulus numbers "
                f"({self._prime.value} and {other._prime.value})"
            )

    def __add__(self, other: object) -> "ModularInteger":
        if not isinstance(other, ModularInteger):
            return NotImplemented
        self._check_modulus(other)
        return ModularInteger(self._value + other._value, self._prime)

    def __sub__(self, other: object) -> "ModularInteger":
        if not isinstance(other, ModularInteger):
            return NotImplemented
        self._check_modulus(other)
        return ModularInteger(self._value - other._value, self._prime)

    def __mul__(self, other: object) -> "ModularInteger":
        if not isinstance(other, ModularInteger):
            return NotImplemented
        self._check_modulus(other)
        return ModularInteger(self._value * other._value, self._prime)

    def __truediv__(self, other: object) -> "ModularInteger":
        if not isinstance(other, ModularInteger):
            return NotImplemented
        self._check_modulus(other)
        if other._value == 0:
            raise ZeroDivisionError("illegal division by zero in F_p")
        return self * other.mul_inverse()

    def __neg__(self) -> "ModularInteger":
        return self.add_inverse()

    # ---- comparison / display ----

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ModularInteger):
            return NotImplemented
        return self._value == other._value and self._prime == other._prime

    def __hash__(self) -> int:
        return hash((self._value, self._prime.value))

    def __int__(self) -> int:
        return self._value

    def __str__(self) -> str:
        return str(self._value)

    def __repr__(self) -> str:
        return f"ModularInteger({self._value}, mod={self._prime.value})"
