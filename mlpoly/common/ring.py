"""
Coefficient Rings for Polynomial Arithmetic.

A polynomial engine never needs to know what its coefficients *are*; it
only needs a small set of operations on them. This module describes that
capability set as an operations table (a `Ring` object) that is passed
alongside the coefficients, instead of relying on the coefficients'
own operators.

Key Concepts:
    - zero(), one(): the additive and multiplicative identities
    - add(a, b), mul(a, b): the two ring operations
    - is_zero(a): the test used when pruning zero terms
    - normalize(a): canonical form a coefficient is stored in
    - neg(a), sub(a, b): optional, only needed when converting from
      evaluation tables (see mlpoly.multilinear.mle)

Example:
    >>> ring = IntegerRing()
    >>> ring.add(2, 3)
    5
    >>> ring.is_zero(ring.mul(0, 7))
    True

Concrete rings:
    - IntegerRing: Python ints (arbitrary precision)
    - RationalField: fractions.Fraction
    - PrimeField: residues modulo p (see field.py)
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from fractions import Fraction
from typing import Any, Iterable


class Ring(ABC):
    """
    Operations table for a commutative ring with zero.

    Subclasses must provide the identities and the two ring operations.
    Everything else has a default built on top of them.
    """

    name: str = "ring"

    @abstractmethod
    def zero(self) -> Any:
        """Return the additive identity."""

    @abstractmethod
    def one(self) -> Any:
        """Return the multiplicative identity."""

    @abstractmethod
    def add(self, a: Any, b: Any) -> Any:
        """Return a + b."""

    @abstractmethod
    def mul(self, a: Any, b: Any) -> Any:
        """Return a * b."""

    def is_zero(self, a: Any) -> bool:
        """Check whether a is the additive identity."""
        return a == self.zero()

    def normalize(self, a: Any) -> Any:
        """
        Canonical representative of a.

        Polynomials store coefficients in this form, so two spellings of
        the same ring element (98 and 1 in Z_97) compare equal.
        """
        return a

    def neg(self, a: Any) -> Any:
        raise NotImplementedError(f"{self.name} has no additive inverse")

    def sub(self, a: Any, b: Any) -> Any:
        return self.add(a, self.neg(b))

    def sum(self, items: Iterable[Any]) -> Any:
        """Fold items with add, starting from zero."""
        total = self.zero()
        for item in items:
            total = self.add(total, item)
        return total

    def product(self, items: Iterable[Any]) -> Any:
        """Fold items with mul, starting from one."""
        total = self.one()
        for item in items:
            total = self.mul(total, item)
        return total

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class IntegerRing(Ring):
    """The integers, using Python's arbitrary-precision int."""

    name = "ZZ"

    def zero(self) -> int:
        return 0

    def one(self) -> int:
        return 1

    def add(self, a: int, b: int) -> int:
        return a + b

    def mul(self, a: int, b: int) -> int:
        return a * b

    def neg(self, a: int) -> int:
        return -a

    def sub(self, a: int, b: int) -> int:
        return a - b

    def __eq__(self, other: object) -> bool:
        return isinstance(other, IntegerRing)

    def __hash__(self) -> int:
        return hash(self.name)


class RationalField(Ring):
    """
    The rationals, using fractions.Fraction.

    Plain ints are accepted as inputs and promoted on the way through,
    so RATIONALS.add(1, Fraction(1, 2)) == Fraction(3, 2).
    """

    name = "QQ"

    def zero(self) -> Fraction:
        return Fraction(0)

    def one(self) -> Fraction:
        return Fraction(1)

    def add(self, a, b) -> Fraction:
        return Fraction(a) + Fraction(b)

    def mul(self, a, b) -> Fraction:
        return Fraction(a) * Fraction(b)

    def neg(self, a) -> Fraction:
        return -Fraction(a)

    def sub(self, a, b) -> Fraction:
        return Fraction(a) - Fraction(b)

    def inv(self, a) -> Fraction:
        """Multiplicative inverse; raises ZeroDivisionError for zero."""
        return 1 / Fraction(a)

    def div(self, a, b) -> Fraction:
        return Fraction(a) / Fraction(b)

    def __eq__(self, other: object) -> bool:
        return isinstance(other, RationalField)

    def __hash__(self) -> int:
        return hash(self.name)


INTEGERS = IntegerRing()
RATIONALS = RationalField()
