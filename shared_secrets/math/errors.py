"""Exceptions raised by the field, polynomial and sharing layers.

Two families:

* ``ValueError`` subclasses for bad *data* (untrusted text, corrupt share
  sets).  Callers are expected to catch and report these.
* ``SharedSecretsBug`` subclasses for API misuse (mixed moduli, degenerate
  polynomials, invalid thresholds, a modulus that turns out not to be
  prime).  These are not ``ValueError``s, so an ``except ValueError`` around
  untrusted input never hides them.
"""

from __future__ import annotations


class ParseError(ValueError):
    """Raised when a numeric string cannot be parsed."""


class EmptyEvaluationsError(ValueError):
    """Raised when an interpolation polynomial is given no points."""


class DuplicateEvaluationError(ValueError):
    """Raised when two interpolation points share the same x."""


class SecretTooLargeError(ValueError):
    """Raised when a secret does not encode to an integer below the prime."""


class SharedSecretsBug(Exception):
    """Base class for programming errors detected at runtime."""


class ModulusMismatchError(SharedSecretsBug):
    """Raised on arithmetic between integers of different moduli."""


class NotInvertibleError(SharedSecretsBug, ArithmeticError):
    """Raised when a non-zero element has no inverse (the modulus is not prime)."""


class DegeneratePolynomialError(SharedSecretsBug):
    """Raised when a coefficient list is empty or its leading term is zero."""


class InvalidThresholdError(SharedSecretsBug):
    """Raised when split parameters violate ``n > 2`` and ``0 < k <= n``."""
