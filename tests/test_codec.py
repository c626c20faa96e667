"""Tests for the monomial index encoding."""

import pytest
from hypothesis import given, strategies as st

from mlpoly.multilinear.codec import MonomialIndexCodec, decode, encode, iter_indices


def test_empty_set_is_zero_key():
    assert encode([]) == 0
    assert decode(0) == frozenset()


def test_known_keys():
    assert encode({1}) == 2
    assert encode({0, 4}) == 17
    assert encode({1, 3}) == 10
    assert decode(18) == frozenset({1, 4})


def test_duplicate_indices_collapse():
    assert encode([2, 2, 2]) == 4


def test_iter_indices_ascending():
    assert list(iter_indices(0b101101)) == [0, 2, 3, 5]


def test_large_index_does_not_truncate():
    key = encode([0, 200])
    assert key == (1 << 200) | 1
    assert decode(key) == frozenset({0, 200})


def test_negative_inputs_rejected():
    with pytest.raises(ValueError):
        encode([3, -1])
    with pytest.raises(ValueError):
        decode(-5)


def test_codec_class_delegates():
    codec = MonomialIndexCodec()
    assert codec.encode({0, 4}) == 17
    assert codec.sorted_indices(17) == [0, 4]
    assert codec.degree(17) == 2
    assert codec.degree(0) == 0


@given(st.integers(min_value=0, max_value=1 << 300))
def test_encode_decode_roundtrip(key):
    assert encode(decode(key)) == key


@given(st.frozensets(st.integers(min_value=0, max_value=300)))
def test_decode_encode_roundtrip(indices):
    assert decode(encode(indices)) == indices
