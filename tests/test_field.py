"""Tests for prime field arithmetic."""

import random

import pytest

from mlpoly.common.field import FieldElement, PrimeField

F = PrimeField(97)


def test_add():
    assert F.element(3) + F.element(4) == F.element(7)


def test_add_wrap():
    assert F.element(96) + F.element(2) == F.element(1)


def test_sub_wrap():
    assert F.element(0) - F.element(1) == F.element(96)
    assert 1 - F.element(2) == 96


def test_mul():
    assert F.element(45) * F.element(67) == 8


def test_div():
    a, b = F.element(5), F.element(7)
    assert (a / b) * b == a


def test_inverse():
    a = F.element(42)
    assert a * a.inverse() == 1
    assert F.element(1).inverse() == 1


def test_inverse_zero():
    with pytest.raises(ValueError):
        F.element(0).inverse()
    with pytest.raises(ValueError):
        F.inv(97)


def test_pow():
    assert F.element(2) ** 10 == 1024 % 97
    assert F.element(3) ** -1 == F.element(3).inverse()


def test_neg():
    a = F.element(5)
    assert a + (-a) == 0


def test_eq_int():
    assert F.element(42) == 42
    assert F.element(42) == 42 + 97


def test_mixed_fields_rejected():
    with pytest.raises(ValueError):
        F.element(1) + PrimeField(101).element(1)


def test_sqrt():
    assert F.sqrt(2) == 14
    assert F.element(2).sqrt() == 14
    assert F.sqrt(5) is None
    assert F.element(5).sqrt() is None
    assert F.sqrt(0) == 0


def test_goldilocks_sqrt():
    field = PrimeField(PrimeField.GOLDILOCKS_PRIME)
    x = field.element(123456789)
    root = (x * x).sqrt()
    assert root * root == x * x


def test_to_bytes():
    assert F.element(5).to_bytes() == b"\x05"
    field = PrimeField(PrimeField.GOLDILOCKS_PRIME)
    assert len(field.element(1).to_bytes()) == 8
    assert field.element(258).to_bytes("big") == b"\x00" * 6 + b"\x01\x02"


def test_ring_interface():
    assert F.zero() == 0
    assert F.one() == 1
    assert F.add(50, 60) == 13
    assert F.mul(50, 2) == 3
    assert F.sub(3, 5) == 95
    assert F.neg(0) == 0
    assert F.is_zero(97)
    assert not F.is_zero(1)
    assert F.sum([50, 50, 50]) == 53
    assert F.product([2, 3, 4]) == 24


def test_random_reproducible():
    a = [F.random(rng=random.Random(3)) for _ in range(3)]
    b = [F.random(rng=random.Random(3)) for _ in range(3)]
    assert a == b
    for _ in range(20):
        assert F.random(exclude_zero=True) != 0


def test_field_equality():
    assert PrimeField(97) == F
    assert PrimeField(101) != F
    assert hash(PrimeField(97)) == hash(F)


def test_invalid_prime():
    with pytest.raises(ValueError):
        PrimeField(1)


def test_bool_and_predicates():
    assert not F.element(0)
    assert F.element(1).is_one()
    assert F.element(97).is_zero()
    assert repr(F.element(3)) == "FieldElement(3, mod 97)"
    assert isinstance(F.element(3), FieldElement)


def test_normalize():
    assert F.normalize(98) == 1
    assert F.normalize(-1) == 96
    assert F.normalize(F.element(5)) == 5
    with pytest.raises(ValueError):
        F.normalize(PrimeField(101).element(5))


def test_ring_interface_accepts_field_elements():
    a, b = F.element(45), F.element(67)
    assert F.mul(a, b) == 8
    assert F.add(a, 67) == 15
    assert F.sub(a, b) == 75
    assert F.neg(a) == 52
    assert F.is_zero(F.element(97))
    assert F.inv(a) == a.inverse().value
    assert F.pow(F.element(2), 10) == 1024 % 97
    assert F.sqrt(F.element(2)) == 14
