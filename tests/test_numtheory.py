"""Tests for number theory helpers."""

import math
from fractions import Fraction

import pytest
from hypothesis import given, assume, strategies as st

from mlpoly.common import numtheory as nt

PRIMES = [2, 3, 5, 7, 13, 17, 97, 257, (1 << 61) - 1, (1 << 64) - (1 << 32) + 1]


def test_xgcd_example():
    assert nt.xgcd(240, 46) == (2, -9, 47)
    assert nt.xgcd(0, 0) == (0, 1, 0)


@given(st.integers(min_value=-10**12, max_value=10**12),
       st.integers(min_value=-10**12, max_value=10**12))
def test_xgcd_bezout(a, b):
    g, x, y = nt.xgcd(a, b)
    assert g == math.gcd(a, b)
    assert a * x + b * y == g


def test_mod_inverse():
    assert nt.mod_inverse(3, 7) == 5
    assert nt.mod_inverse(-3, 7) == 2
    with pytest.raises(ValueError):
        nt.mod_inverse(4, 8)
    with pytest.raises(ValueError):
        nt.mod_inverse(1, 0)


@given(st.integers(min_value=-10**6, max_value=10**6),
       st.integers(min_value=0, max_value=10**4),
       st.integers(min_value=1, max_value=10**9))
def test_pow_mod_matches_builtin(base, exp, mod):
    assert nt.pow_mod(base, exp, mod) == pow(base, exp, mod)


def test_pow_mod_negative_exponent():
    assert nt.pow_mod(3, -1, 7) == 5
    assert nt.pow_mod(3, -2, 7) == 4
    assert nt.pow_mod(5, 3, 1) == 0
    with pytest.raises(ValueError):
        nt.pow_mod(2, 3, 0)


def test_legendre_symbol():
    assert nt.legendre_symbol(10, 13) == 1
    assert nt.legendre_symbol(5, 13) == -1
    assert nt.legendre_symbol(26, 13) == 0


@pytest.mark.parametrize("p", PRIMES)
def test_tonelli_shanks_small_values(p):
    for n in range(min(p, 200)):
        r = nt.tonelli_shanks(n, p)
        if n == 0 or p == 2 or nt.legendre_symbol(n, p) == 1:
            assert r is not None
            assert (r * r) % p == n
            assert r <= p - r or r == 0
        else:
            assert r is None


@given(st.integers(min_value=1, max_value=(1 << 64) - (1 << 32)))
def test_tonelli_shanks_goldilocks_squares(x):
    p = (1 << 64) - (1 << 32) + 1
    r = nt.tonelli_shanks(x * x % p, p)
    assert r in (x, p - x)


def test_int_bytes():
    assert nt.int_to_bytes(0) == b""
    assert nt.int_to_bytes(256) == b"\x00\x01"
    assert nt.int_to_bytes(256, byteorder="big") == b"\x01\x00"
    assert nt.int_to_bytes(1, length=4) == b"\x01\x00\x00\x00"
    with pytest.raises(ValueError):
        nt.int_to_bytes(-1)
    with pytest.raises(ValueError):
        nt.int_to_bytes(1 << 16, length=2)


@given(st.integers(min_value=0, max_value=1 << 512))
def test_int_bytes_roundtrip(n):
    assert nt.bytes_to_int(nt.int_to_bytes(n)) == n
    assert nt.bytes_to_int(nt.int_to_bytes(n, byteorder="big"), byteorder="big") == n


def test_bit_helpers():
    assert nt.bit_length(0) == 0
    assert nt.bit_length(255) == 8
    assert nt.get_bit(0b100, 2)
    assert not nt.get_bit(0b100, 1)
    assert nt.popcount(0b101101) == 4
    assert nt.is_power_of_two(64)
    assert not nt.is_power_of_two(0)
    assert not nt.is_power_of_two(96)
    assert nt.next_power_of_two(0) == 1
    assert nt.next_power_of_two(5) == 8
    assert nt.next_power_of_two(8) == 8
    assert nt.log2_floor(1) == 0
    assert nt.log2_floor(1023) == 9
    with pytest.raises(ValueError):
        nt.log2_floor(0)
    with pytest.raises(ValueError):
        nt.popcount(-1)


def test_rat_pow():
    assert nt.rat_pow(Fraction(2, 3), 3) == Fraction(8, 27)
    assert nt.rat_pow(Fraction(-5, 2), -3) == Fraction(-8, 125)
    assert nt.rat_pow(Fraction(7, 9), 0) == 1
    with pytest.raises(ZeroDivisionError):
        nt.rat_pow(Fraction(0), -1)


@given(st.fractions(), st.integers(min_value=-6, max_value=6))
def test_rat_pow_matches_operator(q, n):
    assume(q != 0 or n >= 0)
    assert nt.rat_pow(q, n) == q ** n


def test_rat_rounding():
    assert nt.rat_floor(Fraction(-1, 2)) == -1
    assert nt.rat_ceil(Fraction(-1, 2)) == 0
    assert nt.rat_round(Fraction(5, 2)) == 3
    assert nt.rat_round(Fraction(-5, 2)) == -3
    assert nt.rat_round(Fraction(7, 3)) == 2
    assert nt.rat_round(Fraction(-7, 3)) == -2
    assert nt.rat_round(4) == 4
