"""Field contract.

A type implementing :class:`Field` must also support ``+``, ``-``, ``*``,
``/``, ``==`` and ``hash()``, with

    a - b == a + b.add_inverse()
    a / b == a * b.mul_inverse()      (b != 0)

The polynomial layer only relies on this contract, so any implementation
can be plugged in.  Production code uses :class:`ModularInteger`.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TypeVar

F = TypeVar("F", bound="Field")


class Field(ABC):
    """An element of a field."""

    @abstractmethod
    def zero(self: F) -> F:
        """Additive identity of the field this element belongs to."""

    @abstractmethod
    def one(self: F) -> F:
        """Multiplicative identity of the field this element belongs to."""

    @abstractmethod
    def add_inverse(self: F) -> F:
        """Return ``-self``."""

    @abstractmethod
    def mul_inverse(self: F) -> F:
        """Return ``1 / self``.

        Raises ``ZeroDivisionError`` when called on the zero of the field.
        """

    def is_zero(self) -> bool:
        return self == self.zero()

    def is_one(self) -> bool:
        return self == self.one()

    def __neg__(self: F) -> F:
        return self.add_inverse()
