"""
Sparse Multilinear Polynomials.

A multilinear polynomial is linear in each variable: no variable appears
with exponent greater than 1. Such a polynomial is a sum of terms

    c_S * prod_{i in S} x_i

over finite sets S of variable indices. We store it sparsely as a map
from monomial key (see codec.py) to coefficient, kept sorted by key:

    f = 4 + 2·x1 + 3·x0·x4
      = {0: 4, 2: 2, 17: 3}

Key Concepts:
    - Coefficients live in any Ring (integers, rationals, Z_p, ...)
    - Every operation returns a new polynomial; nothing mutates in place
    - Coefficients are stored in the ring's normal form (residues mod p
      for a PrimeField), so 98 and 1 are the same coefficient in Z_97
    - Zero coefficients are allowed in the map; prune() removes them and
      equality always compares pruned forms
    - disjoint_mul() only multiplies correctly when the operands share no
      variables (the product of two multilinear polynomials with a shared
      variable is not multilinear)

Example:
    >>> from mlpoly.common.ring import INTEGERS
    >>> f = MultilinearPolynomial.from_summands(INTEGERS, [(2, {1}), (3, {4, 0}), (4, set())])
    >>> print(f)
    4 + 2x₁ + 3x₀x₄
    >>> f.eval([0, 1, 0, 0, 4])
    6
"""

from __future__ import annotations
from types import MappingProxyType
from typing import (Any, Dict, FrozenSet, Iterable, Iterator, List, Mapping,
                    Optional, Sequence, Tuple)
import random

from ..common.field import PrimeField
from ..common.numtheory import popcount
from ..common.ring import Ring
from .codec import decode, encode, iter_indices

_SUBSCRIPTS = str.maketrans("0123456789", "₀₁₂₃₄₅₆₇₈₉")


class OverlappingSupportError(ValueError):
    """Raised by checked_disjoint_mul when the operands share variables."""

    def __init__(self, shared_key: int):
        self.shared_key = shared_key
        self.shared = sorted(iter_indices(shared_key))
        names = ", ".join(f"x{i}" for i in self.shared)
        super().__init__(f"Operands share variables {names}; product is not multilinear")


class MultilinearPolynomial:
    """
    A multilinear polynomial over a coefficient ring.

    Attributes:
        ring: The coefficient Ring (operations table)

    The term map is read-only; use the arithmetic methods (or +, *) to
    build new polynomials.

    Example:
        >>> from mlpoly.common.field import PrimeField
        >>> field = PrimeField(97)
        >>> x0 = MultilinearPolynomial.variable(field, 0)
        >>> x1 = MultilinearPolynomial.variable(field, 1)
        >>> f = (x0 * x1).scale(5) + MultilinearPolynomial.constant(field, 1)
        >>> f.eval_by_index({0: 2, 1: 3})
        31
    """

    __slots__ = ("ring", "_terms")

    def __init__(self, ring: Ring, terms: Optional[Mapping[int, Any]] = None):
        """
        Args:
            ring: Coefficient ring
            terms: Map from monomial key to coefficient

        Coefficients are stored as ring.normalize(c).

        Raises:
            ValueError: If any key is negative
        """
        items = dict(terms) if terms else {}
        for key in items:
            if key < 0:
                raise ValueError(f"Monomial key must be non-negative, got {key}")
        self.ring = ring
        normalize = ring.normalize
        self._terms: Dict[int, Any] = {key: normalize(items[key]) for key in sorted(items)}

    @classmethod
    def _wrap(cls, ring: Ring, terms: Dict[int, Any]) -> MultilinearPolynomial:
        """Build from a dict whose keys are already known to be valid."""
        poly = cls.__new__(cls)
        poly.ring = ring
        poly._terms = {key: terms[key] for key in sorted(terms)}
        return poly

    # =========================================================================
    # Construction
    # =========================================================================

    @classmethod
    def zero(cls, ring: Ring) -> MultilinearPolynomial:
        """The empty polynomial."""
        return cls._wrap(ring, {})

    @classmethod
    def constant(cls, ring: Ring, value: Any) -> MultilinearPolynomial:
        return cls._wrap(ring, {0: ring.normalize(value)})

    @classmethod
    def variable(cls, ring: Ring, index: int) -> MultilinearPolynomial:
        """The polynomial x_index."""
        return cls._wrap(ring, {encode([index]): ring.one()})

    @classmethod
    def from_monomial_pairs(cls, ring: Ring,
                            pairs: Iterable[Tuple[int, Any]]) -> MultilinearPolynomial:
        """
        Build from (key, coefficient) pairs.

        A key that appears more than once keeps its last coefficient.
        """
        terms: Dict[int, Any] = {}
        for key, coeff in pairs:
            terms[key] = coeff
        return cls(ring, terms)

    @classmethod
    def from_summands(cls, ring: Ring,
                      summands: Iterable[Tuple[Any, Iterable[int]]]) -> MultilinearPolynomial:
        """
        Build from (coefficient, variable indices) pairs.

        Example:
            >>> from mlpoly.common.ring import INTEGERS
            >>> f = MultilinearPolynomial.from_summands(INTEGERS, [(2, [1]), (4, [])])
            >>> f.terms()
            [(0, 4), (2, 2)]
        """
        return cls.from_monomial_pairs(
            ring, ((encode(indices), coeff) for coeff, indices in summands)
        )

    def to_summands(self) -> List[Tuple[Any, FrozenSet[int]]]:
        """(coefficient, index set) pairs in ascending key order."""
        return [(coeff, decode(key)) for key, coeff in self._terms.items()]

    def to_monomial_pairs(self) -> List[Tuple[int, Any]]:
        return list(self._terms.items())

    # =========================================================================
    # Inspection
    # =========================================================================

    def terms(self) -> List[Tuple[int, Any]]:
        """(key, coefficient) pairs in ascending key order."""
        return list(self._terms.items())

    @property
    def mapping(self) -> Mapping[int, Any]:
        """Read-only view of the key -> coefficient map."""
        return MappingProxyType(self._terms)

    def coefficient(self, key: int) -> Any:
        """Coefficient stored for key, or the ring's zero."""
        return self._terms.get(key, self.ring.zero())

    def support(self) -> int:
        """Key of every variable that appears in some term (OR of all keys)."""
        support = 0
        for key in self._terms:
            support |= key
        return support

    @property
    def num_vars(self) -> int:
        """Highest variable index used, plus one (0 for constants)."""
        return self.support().bit_length()

    @property
    def degree(self) -> int:
        """Size of the largest monomial (0 for constants and zero)."""
        return max((popcount(key) for key in self._terms), default=0)

    def is_zero(self) -> bool:
        return not self.prune()._terms

    def __len__(self) -> int:
        return len(self._terms)

    def __iter__(self) -> Iterator[int]:
        return iter(self._terms)

    def __contains__(self, key: object) -> bool:
        return key in self._terms

    # =========================================================================
    # Arithmetic
    # =========================================================================

    def _check_ring(self, other: MultilinearPolynomial) -> None:
        if other.ring != self.ring:
            raise ValueError(f"Cannot combine polynomials over {self.ring!r} and {other.ring!r}")

    def scale(self, a: Any) -> MultilinearPolynomial:
        """Multiply every coefficient by a. Zero results are kept."""
        mul = self.ring.mul
        a = self.ring.normalize(a)
        return self._wrap(self.ring, {key: mul(coeff, a) for key, coeff in self._terms.items()})

    def add(self, other: MultilinearPolynomial) -> MultilinearPolynomial:
        """
        Sum of two polynomials, merging terms by key.

        Cost is proportional to the smaller operand: the larger one is
        copied as the base and the smaller one is folded into it.
        """
        self._check_ring(other)
        add = self.ring.add
        swapped = len(other._terms) > len(self._terms)
        base, folded = (other, self) if swapped else (self, other)

        result = dict(base._terms)
        for key, coeff in folded._terms.items():
            if key in result:
                # Keep self's coefficient on the left
                result[key] = add(coeff, result[key]) if swapped else add(result[key], coeff)
            else:
                result[key] = coeff
        return self._wrap(self.ring, result)

    def disjoint_mul(self, other: MultilinearPolynomial) -> MultilinearPolynomial:
        """
        Product of two polynomials with disjoint variable supports.

        Each pair of terms (k1, c1), (k2, c2) contributes c1*c2 at key
        k1 | k2. If the supports overlap, colliding keys overwrite each
        other and the result is NOT the true product; use
        checked_disjoint_mul() when the inputs are not known to be
        disjoint.

        Cost: O(len(self) * len(other)).
        """
        self._check_ring(other)
        mul = self.ring.mul
        result: Dict[int, Any] = {}
        for k1, c1 in self._terms.items():
            for k2, c2 in other._terms.items():
                result[k1 | k2] = mul(c1, c2)
        return self._wrap(self.ring, result)

    def checked_disjoint_mul(self, other: MultilinearPolynomial) -> MultilinearPolynomial:
        """
        disjoint_mul() that refuses overlapping supports.

        Raises:
            OverlappingSupportError: If a variable appears in both operands
        """
        shared = self.support() & other.support()
        if shared:
            raise OverlappingSupportError(shared)
        return self.disjoint_mul(other)

    def prune(self) -> MultilinearPolynomial:
        """Copy without the terms whose coefficient is zero."""
        is_zero = self.ring.is_zero
        return self._wrap(
            self.ring,
            {key: coeff for key, coeff in self._terms.items() if not is_zero(coeff)},
        )

    # =========================================================================
    # Evaluation
    # =========================================================================

    def eval(self, values: Sequence[Any]) -> Any:
        """
        Evaluate at a point given as a sequence, values[i] being x_i.

        Variables past the end of values count as zero.
        """
        ring = self.ring
        zero = ring.zero()
        n = len(values)
        total = zero
        for key, coeff in self._terms.items():
            term = coeff
            for i in iter_indices(key):
                if i >= n:
                    term = zero
                    break
                term = ring.mul(term, values[i])
            total = ring.add(total, term)
        return total

    def eval_by_index(self, values: Mapping[int, Any]) -> Any:
        """Evaluate at a sparse point {index: value}; missing indices are zero."""
        ring = self.ring
        zero = ring.zero()
        total = zero
        for key, coeff in self._terms.items():
            term = coeff
            for i in iter_indices(key):
                if i not in values:
                    term = zero
                    break
                term = ring.mul(term, values[i])
            total = ring.add(total, term)
        return total

    # =========================================================================
    # Equality and display
    # =========================================================================

    def equals(self, other: MultilinearPolynomial) -> bool:
        """Compare pruned term maps, so explicit zero terms never matter."""
        if other.ring != self.ring:
            return False
        return self.prune()._terms == other.prune()._terms

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MultilinearPolynomial):
            return NotImplemented
        return self.equals(other)

    def __hash__(self) -> int:
        return hash(tuple(self.prune()._terms.items()))

    def __add__(self, other: MultilinearPolynomial) -> MultilinearPolynomial:
        if not isinstance(other, MultilinearPolynomial):
            return NotImplemented
        return self.add(other)

    def __mul__(self, other: MultilinearPolynomial) -> MultilinearPolynomial:
        if not isinstance(other, MultilinearPolynomial):
            return NotImplemented
        return self.disjoint_mul(other)

    def __str__(self) -> str:
        if not self._terms:
            return "0"
        parts = []
        for key, coeff in self._terms.items():
            variables = "".join(f"x{str(i).translate(_SUBSCRIPTS)}" for i in iter_indices(key))
            parts.append(f"{coeff}{variables}")
        return " + ".join(parts)

    def __repr__(self) -> str:
        return f"MultilinearPolynomial({self.ring!r}, {self._terms})"


def random_polynomial(field: PrimeField, num_vars: int, num_terms: int,
                      rng: Optional[random.Random] = None) -> MultilinearPolynomial:
    """
    Random polynomial with num_terms distinct monomials in x_0..x_{num_vars-1}.

    Coefficients are non-zero, so the result is already pruned.

    Raises:
        ValueError: If there are fewer than num_terms possible monomials
    """
    if num_vars < 0 or num_terms < 0:
        raise ValueError("num_vars and num_terms must be non-negative")
    if num_terms > (1 << num_vars):
        raise ValueError(f"Only {1 << num_vars} monomials exist in {num_vars} variables")
    rng = rng or random.Random()
    keys = rng.sample(range(1 << num_vars), num_terms)
    return MultilinearPolynomial._wrap(
        field, {key: field.random(exclude_zero=True, rng=rng) for key in keys}
    )
