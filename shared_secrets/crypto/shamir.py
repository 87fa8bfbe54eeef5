"""Shamir (K-of-N) secret sharing over F_p.

API
---
split_secret(secret, n, k)  -> set of n shares (x, y), radix-36 strings
recover_secret(shares)      -> secret bytes   (needs >= k shares)

A random polynomial f of degree exactly k-1 is chosen with f(0) = secret.
Shares are (x, f(x)) for n distinct random non-zero x.  Recovering from
fewer than k shares does not fail: it interpolates a different polynomial
and returns an unrelated value.  Nothing in a share tells how many are
needed, so there is no check for it.
"""

from __future__ import annotations

from typing import Callable, Iterable, List, Optional, Set, Tuple

import structlog

from shared_secrets.config import SHARE_RADIX
from shared_secrets.math.errors import InvalidThresholdError, SecretTooLargeError
from shared_secrets.math.modular import ModularInteger
from shared_secrets.math.polynomial import Evaluation, Polynomial
from shared_secrets.math.prime import Prime, canonical_prime
from shared_secrets.math.rng import Rng

Share = Tuple[str, str]

log = structlog.get_logger(__name__)


def split_secret(secret: bytes, n: int, k: int, rng: Optional[Rng] = None) -> Set[Share]:
    """Split *secret* into *n* shares with threshold *k*.

    Requires ``n > 2`` and ``0 < k <= n``; anything else raises
    :class:`InvalidThresholdError`.  The secret must encode (big-endian) to
    an integer below the canonical prime, i.e. at most 32 bytes; leading
    zero bytes are not preserved unless the caller pads on recovery.

    The returned set has no meaningful order.
    """
    if n <= 2:
        raise InvalidThresholdError(f"n must be greater than 2, got n={n}")
    if not 0 < k <= n:
        raise InvalidThresholdError(f"Invalid threshold: k={k}, n={n}")

    rng = rng if rng is not None else Rng()
    prime = canonical_prime()
    secret_number = _encode_secret(secret, prime)
    evaluate = _sharing_function(secret_number, k, rng)

    xs: Set[ModularInteger] = set()
    shares: Set[Share] = set()
    while len(xs) < n:
        x = _non_zero_random(prime, rng)
        if x in xs:
            continue
        xs.add(x)
        _, y = evaluate(x)
        shares.add((x.to_string_radix(SHARE_RADIX), y.to_string_radix(SHARE_RADIX)))

    log.debug("secret split", n=n, k=k)
    return shares


def recover_secret(shares: Iterable[Share], length: Optional[int] = None) -> bytes:
    """Reconstruct the secret from *shares* by Lagrange interpolation at x=0.

    Raises :class:`~shared_secrets.math.errors.ParseError` for a malformed
    share and a ``ValueError`` subclass for an empty share set or repeated
    x.  With *length*, the result is left-padded with zero bytes to that
    size (needed for fixed-size keys that may start with ``0x00``).
    """
    prime = canonical_prime()
    evaluations: List[Evaluation] = [
        Evaluation(
            ModularInteger.parse_radix(x, prime, SHARE_RADIX),
            ModularInteger.parse_radix(y, prime, SHARE_RADIX),
        )
        for x, y in shares
    ]
    polynomial = Polynomial.from_evaluations(evaluations)
    _, secret_number = polynomial.evaluate(ModularInteger.zero_of(prime))
    log.debug("secret recovered", shares=len(evaluations))
    return secret_number.to_digits(length)


def _encode_secret(secret: bytes, prime: Prime) -> ModularInteger:
    if int.from_bytes(secret, "big") >= prime.value:
        raise SecretTooLargeError(
            f"A {len(secret)}-byte secret does not fit below the "
            f"{prime.value.bit_length()}-bit prime"
        )
    return ModularInteger.from_digits(secret, prime)


def _sharing_function(
    secret_number: ModularInteger, k: int, rng: Rng
) -> Callable[[ModularInteger], Evaluation]:
    """Return the evaluator of a random degree-(k-1) polynomial with f(0) = secret."""
    if k == 1:
        # Degree 0: every share carries the secret itself.
        return lambda x: Evaluation(x, secret_number)

    prime = secret_number.prime
    coeffs = [secret_number]
    coeffs += [ModularInteger.random(prime, rng) for _ in range(k - 2)]
    # Leading coefficient must be non-zero so the degree is exactly k-1.
    coeffs.append(_non_zero_random(prime, rng))
    return Polynomial.from_coefficients(coeffs).evaluate


def _non_zero_random(prime: Prime, rng: Rng) -> ModularInteger:
    value = ModularInteger.random(prime, rng)
    while value.is_zero():
        value = ModularInteger.random(prime, rng)
    return value
