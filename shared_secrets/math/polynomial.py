"""Polynomials over a field, in two representations.

``CoefficientPolynomial``
    ``[a0, a1, ..., ad]`` meaning ``a0 + a1*x + ... + ad*x^d``, evaluated
    with Horner's method.

``InterpolationPolynomial``
    The unique polynomial of degree ``< len(points)`` through a set of
    ``(x, y)`` points, evaluated with Lagrange interpolation.

Both only rely on the :class:`~shared_secrets.math.field.Field` contract.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Iterable, NamedTuple, Sequence, Set, Tuple

from shared_secrets.math.errors import (
    DegeneratePolynomialError,
    DuplicateEvaluationError,
    EmptyEvaluationsError,
)
from shared_secrets.math.field import Field


class Evaluation(NamedTuple):
    """One sample ``(x, f(x))`` of a polynomial."""

    x: Field
    y: Field


class Polynomial(ABC):
    """A polynomial that can be evaluated at a field element."""

    @abstractmethod
    def evaluate(self, x: Field) -> Evaluation:
        """Return ``(x, f(x))``."""

    @staticmethod
    def from_coefficients(coefficients: Iterable[Field]) -> "CoefficientPolynomial":
        return CoefficientPolynomial(coefficients)

    @staticmethod
    def from_evaluations(evaluations: Iterable[Tuple[Field, Field]]) -> "InterpolationPolynomial":
        return InterpolationPolynomial(evaluations)


class CoefficientPolynomial(Polynomial):
    """Polynomial given by its coefficients, lowest degree first."""

    def __init__(self, coefficients: Iterable[Field]) -> None:
        coeffs = tuple(coefficients)
        if not coeffs:
            raise DegeneratePolynomialError("A polynomial needs at least one coefficient")
        if coeffs[-1].is_zero():
            raise DegeneratePolynomialError(
                f"Leading coefficient of a degree-{len(coeffs) - 1} polynomial must be non-zero"
            )
        self._coefficients = coeffs

    @property
    def coefficients(self) -> Tuple[Field, ...]:
        return self._coefficients

    @property
    def degree(self) -> int:
        return len(self._coefficients) - 1

    def evaluate(self, x: Field) -> Evaluation:
        """Horner's method: ``(...(ad*x + a{d-1})*x + ...)*x + a0``."""
        acc = self._coefficients[0].zero()
        for coeff in reversed(self._coefficients):
            acc = acc * x + coeff
        return Evaluation(x, acc)


class InterpolationPolynomial(Polynomial):
    """Polynomial given by samples with pairwise distinct x."""

    def __init__(self, evaluations: Iterable[Tuple[Field, Field]]) -> None:
        points = tuple(Evaluation(x, y) for x, y in evaluations)
        if not points:
            raise EmptyEvaluationsError("Need at least one evaluation to interpolate")
        seen: Set[Field] = set()
        for x, _ in points:
            if x in seen:
                raise DuplicateEvaluationError(f"Duplicate x-coordinate {x}")
            seen.add(x)
        self._evaluations = points

    @property
    def evaluations(self) -> Sequence[Evaluation]:
        return self._evaluations

    def evaluate(self, x: Field) -> Evaluation:
        """Lagrange interpolation: ``f(x) = sum_i y_i * L_i(x)``."""
        result = self._evaluations[0].x.zero()
        for i, (_, y_i) in enumerate(self._evaluations):
            result = result + y_i * self._base_polynomial(x, i)
        return Evaluation(x, result)

    def _base_polynomial(self, x: Field, i: int) -> Field:
        """``L_i(x) = prod_{j != i} (x - x_j) / (x_i - x_j)``."""
        x_i = self._evaluations[i].x
        result = x_i.one()
        for j, (x_j, _) in enumerate(self._evaluations):
            if j == i:
                continue
            # x_i != x_j is guaranteed by the constructor
            result = result * ((x - x_j) / (x_i - x_j))
        return result
