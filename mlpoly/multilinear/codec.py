"""
Monomial Index Encoding.

In a multilinear polynomial every variable appears with exponent 0 or 1,
so a monomial is nothing more than the *set* of variables it contains.
We store that set as a single non-negative integer, the monomial key:

    bit i of the key is 1  <=>  x_i appears in the monomial

Examples:
    {}        -> 0b0     = 0   (the constant term)
    {1}       -> 0b10    = 2
    {0, 4}    -> 0b10001 = 17
    {1, 3}    -> 0b1010  = 10

This is a bijection between finite sets of non-negative integers and
non-negative integers. Python ints are arbitrary precision, so there is
no upper limit on the variable index.
"""

from __future__ import annotations
from typing import FrozenSet, Iterable, Iterator

from ..common.numtheory import popcount


def iter_indices(key: int) -> Iterator[int]:
    """
    Yield the variable indices of a key in ascending order.

    Walks the set bits directly instead of testing every position, so
    sparse keys with a large top bit stay cheap.
    """
    if key < 0:
        raise ValueError(f"Monomial key must be non-negative, got {key}")
    while key:
        low = key & -key
        yield low.bit_length() - 1
        key ^= low


def decode(key: int) -> FrozenSet[int]:
    """Set of variable indices present in key (empty for key 0)."""
    return frozenset(iter_indices(key))


def encode(indices: Iterable[int]) -> int:
    """Key with bit i set for every i in indices. Duplicates are harmless."""
    key = 0
    for i in indices:
        if i < 0:
            raise ValueError(f"Variable index must be non-negative, got {i}")
        key |= 1 << i
    return key


class MonomialIndexCodec:
    """
    Stateless converter between index sets and monomial keys.

    Exposed as a class so callers can pass a codec around; the module
    level functions do the actual work.

    Example:
        >>> codec = MonomialIndexCodec()
        >>> codec.encode({0, 4})
        17
        >>> sorted(codec.decode(17))
        [0, 4]
    """

    @staticmethod
    def encode(indices: Iterable[int]) -> int:
        return encode(indices)

    @staticmethod
    def decode(key: int) -> FrozenSet[int]:
        return decode(key)

    @staticmethod
    def sorted_indices(key: int) -> list:
        """Indices of key as an ascending list."""
        return list(iter_indices(key))

    @staticmethod
    def degree(key: int) -> int:
        """Number of variables in the monomial."""
        return popcount(key)
