"""Tests for modular integer arithmetic."""

import random

import pytest

from shared_secrets.math.errors import (
    ModulusMismatchError,
    NotInvertibleError,
    ParseError,
    SharedSecretsBug,
)
from shared_secrets.math.modular import ModularInteger
from shared_secrets.math.prime import Prime
from shared_secrets.math.rng import Rng


def mod(value, prime):
    p = Prime(prime)
    return ModularInteger.parse(str(value), p)


def assert_valid(number, prime):
    assert 0 <= number.value < prime.value
    assert number.prime == prime


# ======================================================================
# Construction / parsing
# ======================================================================


@pytest.mark.parametrize(
    "prime,literal,expected",
    [(11, "7", 7), (11, "100", 1), (7, "-3", 4), (7, "0", 0), (7, "-14", 0)],
)
def test_parse_reduces(prime, literal, expected):
    p = Prime(prime)
    number = ModularInteger.parse(literal, p)
    assert_valid(number, p)
    assert number.value == expected


@pytest.mark.parametrize("literal", ["", "abc", "1.5", "12 34", None])
def test_parse_malformed(literal):
    with pytest.raises(ParseError):
        ModularInteger.parse(literal, Prime(7))


def test_parse_error_is_value_error():
    assert issubclass(ParseError, ValueError)


def test_parse_radix():
    p = Prime(648863)
    assert ModularInteger.parse_radix("z", p, 36).value == 35
    assert ModularInteger.parse_radix("ZZ", p, 36).value == 1295
    assert ModularInteger.parse_radix("101", p, 2).value == 5
    with pytest.raises(ParseError):
        ModularInteger.parse_radix("1g", p, 16)


@pytest.mark.parametrize(
    "literal,radix",
    [
        (" 5", 10),
        ("5 ", 10),
        ("1_0", 10),
        ("\u0663", 10),
        ("\uff15", 10),
        ("0x1f", 16),
        ("0b1", 2),
        ("+", 10),
        ("-", 36),
    ],
)
def test_parse_radix_rejects_non_canonical_numerals(literal, radix):
    with pytest.raises(ParseError):
        ModularInteger.parse_radix(literal, Prime(648863), radix)


def test_parse_radix_accepts_sign_and_either_case():
    p = Prime(648863)
    assert ModularInteger.parse_radix("+Ff", p, 16).value == 255
    assert ModularInteger.parse_radix("-1", p, 36).value == 648862


@pytest.mark.parametrize("radix", [0, 1, 37])
def test_parse_radix_out_of_range(radix):
    with pytest.raises(ValueError, match="radix"):
        ModularInteger.parse_radix("1", Prime(7), radix)


def test_constructor_reduces_any_int():
    p = Prime(7)
    assert ModularInteger(10, p).value == 3
    assert ModularInteger(-1, p).value == 6


def test_random_in_range():
    p = Prime(7)
    rng = Rng()
    for _ in range(100):
        assert_valid(ModularInteger.random(p, rng), p)


def test_random_is_reproducible_with_seeded_source():
    p = Prime(648863)
    a = [ModularInteger.random(p, Rng(random.Random(3))) for _ in range(3)]
    b = [ModularInteger.random(p, Rng(random.Random(3))) for _ in range(3)]
    assert a == b


def test_random_default_rng():
    p = Prime(11)
    assert_valid(ModularInteger.random(p), p)


# ======================================================================
# Byte and text encodings
# ======================================================================


def test_from_digits_big_endian():
    p = Prime(648863)
    assert ModularInteger.from_digits(b"\x01\x00", p).value == 256


def test_from_digits_reduces():
    assert ModularInteger.from_digits(b"\x0a", Prime(7)).value == 3


def test_empty_digits_is_zero_and_back():
    number = ModularInteger.from_digits(b"", Prime(7))
    assert number.is_zero()
    assert number.to_digits() == b""


def test_to_digits_is_minimal():
    p = Prime(648863)
    assert ModularInteger.from_digits(b"\x01\x00", p).to_digits() == b"\x01\x00"
    assert ModularInteger.from_digits(b"\x00\x00\x01", p).to_digits() == b"\x01"


def test_to_digits_padded():
    p = Prime(648863)
    assert ModularInteger(1, p).to_digits(4) == b"\x00\x00\x00\x01"
    assert ModularInteger(0, p).to_digits(2) == b"\x00\x00"
    with pytest.raises(ValueError):
        ModularInteger(256, p).to_digits(1)


def test_to_string_radix():
    p = Prime(648863)
    assert ModularInteger(1295, p).to_string_radix(36) == "zz"
    assert ModularInteger(5, p).to_string_radix(2) == "101"
    assert ModularInteger(0, p).to_string_radix(36) == "0"
    assert ModularInteger(255, p).to_string_radix(16) == "ff"
    assert ModularInteger(1234, p).to_string_radix(10) == "1234"


def test_string_radix_round_trip_large_value():
    p = Prime.parse("208351617316091241234326746312124448251235562226470491514186331217050270460481")
    number = ModularInteger(p.value - 1, p)
    text = number.to_string_radix(36)
    assert ModularInteger.parse_radix(text, p, 36) == number


def test_str_and_repr():
    number = mod(5, 7)
    assert str(number) == "5"
    assert repr(number) == "ModularInteger(5, mod=7)"
    assert int(number) == 5


# ======================================================================
# Identities and inverses
# ======================================================================


def test_zero_and_one_share_prime():
    p = Prime(3)
    base = ModularInteger(2, p)
    for ident in (base.zero(), base.one()):
        assert ident.prime is p
    assert base.zero() == base.zero()
    assert base.zero().is_zero()
    assert base.one().is_one()
    assert ModularInteger.zero_of(p) == base.zero()
    assert ModularInteger.one_of(p) == base.one()


def test_add_inverse():
    assert mod(5, 7).add_inverse().value == 2
    assert mod(0, 7).add_inverse().value == 0
    assert (-mod(5, 7)).value == 2


def test_mul_inverse():
    inverse = mod(3, 5).mul_inverse()
    assert inverse.value == 2


def test_mul_inverse_of_zero():
    with pytest.raises(ZeroDivisionError):
        mod(0, 7).mul_inverse()


def test_mul_inverse_under_composite_modulus():
    with pytest.raises(NotInvertibleError, match="not a prime"):
        mod(2, 8).mul_inverse()


# ======================================================================
# Arithmetic
# ======================================================================


@pytest.mark.parametrize(
    "prime,lhs,rhs,op,expected",
    [
        (11, 2, 5, "+", 7),
        (11, 10, 10, "+", 9),
        (13, 8, 0, "+", 8),
        (7, 6, 5, "-", 1),
        (5, 1, 3, "-", 3),
        (13, 2, 3, "*", 6),
        (11, 10, 9, "*", 2),
        (23, 14, 1, "*", 14),
        (7, 1, 6, "/", 6),
        (7, 2, 3, "/", 3),
        (11, 5, 1, "/", 5),
        (7, 3, 5, "/", 2),
        (7, 5, 5, "/", 1),
    ],
)
def test_operations(prime, lhs, rhs, op, expected):
    p = Prime(prime)
    a = ModularInteger(lhs, p)
    b = ModularInteger(rhs, p)
    result = {
        "+": lambda: a + b,
        "-": lambda: a - b,
        "*": lambda: a * b,
        "/": lambda: a / b,
    }[op]()
    assert_valid(result, p)
    assert result.value == expected


def test_division_by_zero():
    with pytest.raises(ZeroDivisionError):
        mod(3, 7) / mod(0, 7)


def test_division_under_composite_modulus():
    with pytest.raises(NotInvertibleError):
        mod(3, 8) / mod(2, 8)


def test_compound_assignment_rebinds():
    a = mod(3, 7)
    original = a
    a += mod(5, 7)
    assert a.value == 1
    assert original.value == 3
    a *= mod(4, 7)
    assert a.value == 4
    a -= mod(6, 7)
    assert a.value == 5
    a /= mod(5, 7)
    assert a.value == 1


def test_operations_with_plain_int_are_rejected():
    with pytest.raises(TypeError):
        mod(3, 7) + 1
    with pytest.raises(TypeError):
        2 * mod(3, 7)


# ======================================================================
# Modulus handling
# ======================================================================


@pytest.mark.parametrize("op", ["+", "-", "*", "/"])
def test_mixed_moduli_fail(op):
    a = mod(3, 7)
    b = mod(3, 11)
    with pytest.raises(ModulusMismatchError):
        {"+": lambda: a + b, "-": lambda: a - b, "*": lambda: a * b, "/": lambda: a / b}[op]()


def test_modulus_mismatch_is_not_a_value_error():
    assert issubclass(ModulusMismatchError, SharedSecretsBug)
    assert not issubclass(ModulusMismatchError, ValueError)


def test_equal_primes_from_different_instances_mix():
    a = ModularInteger(3, Prime(7))
    b = ModularInteger(5, Prime.parse("7"))
    assert (a + b).value == 1
    assert (a / b).value == 2


def test_equality_and_hash():
    p = Prime(7)
    assert ModularInteger(3, p) == ModularInteger(10, Prime(7))
    assert ModularInteger(3, Prime(7)) != ModularInteger(3, Prime(11))
    assert len({ModularInteger(3, p), ModularInteger(10, p), ModularInteger(4, p)}) == 2
    assert ModularInteger(3, p) != 3
