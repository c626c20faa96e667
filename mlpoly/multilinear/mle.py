"""
Dense Evaluation Tables for Multilinear Polynomials.

A multilinear polynomial in μ variables is determined by its values on
the boolean hypercube {0,1}^μ. This module converts between the sparse
coefficient form (MultilinearPolynomial) and the dense table of those
2^μ values, which is what hypercube-sum style protocols consume.

Indexing convention (matches the monomial key encoding):
    - entry b holds f evaluated at x_i = bit i of b
    - index 0 = all zeros, index 2^μ - 1 = all ones

Conversions:
    - coefficients -> table: zeta transform over subsets,
          T[b] = sum of c_S for S ⊆ b
    - table -> coefficients: Möbius transform,
          c_S = sum over b ⊆ S of (-1)^{|S|-|b|} T[b]
      (needs subtraction, so the ring must implement sub)

Both transforms run in O(μ · 2^μ) ring operations, one butterfly pass
per variable, vectorized over numpy object arrays.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Sequence

import numpy as np

from ..common.numtheory import is_power_of_two, log2_floor
from ..common.ring import Ring
from .core import MultilinearPolynomial


def _butterfly(table: np.ndarray, num_vars: int, op) -> np.ndarray:
    """Apply hi = op(hi, lo) for every variable, in place."""
    for i in range(num_vars):
        view = table.reshape(-1, 2, 1 << i)
        view[:, 1, :] = op(view[:, 1, :], view[:, 0, :])
    return table


def to_evaluations(poly: MultilinearPolynomial, num_vars: int) -> np.ndarray:
    """
    Values of poly on {0,1}^num_vars as a numpy object array.

    Raises:
        ValueError: If poly uses a variable index >= num_vars
    """
    if num_vars < 0:
        raise ValueError(f"num_vars must be non-negative, got {num_vars}")
    if poly.num_vars > num_vars:
        raise ValueError(
            f"Polynomial uses {poly.num_vars} variables, table only has {num_vars}"
        )
    ring = poly.ring
    table = np.empty(1 << num_vars, dtype=object)
    table.fill(ring.zero())
    for key, coeff in poly.terms():
        table[key] = coeff
    return _butterfly(table, num_vars, np.frompyfunc(ring.add, 2, 1))


def from_evaluations(ring: Ring, values: Sequence[Any]) -> MultilinearPolynomial:
    """
    The unique multilinear polynomial with the given hypercube values.

    Raises:
        ValueError: If len(values) is not a power of two
        NotImplementedError: If ring has no subtraction
    """
    size = len(values)
    if not is_power_of_two(size):
        raise ValueError(f"Table size must be power of 2, got {size}")
    num_vars = log2_floor(size)
    table = np.empty(size, dtype=object)
    table[:] = list(values)
    _butterfly(table, num_vars, np.frompyfunc(ring.sub, 2, 1))
    return MultilinearPolynomial(ring, dict(enumerate(table.tolist()))).prune()


def hypercube_sum(poly: MultilinearPolynomial, num_vars: int) -> Any:
    """Sum of poly over all 2^num_vars boolean points."""
    return poly.ring.sum(to_evaluations(poly, num_vars).tolist())


@dataclass(eq=False)
class EvaluationTable:
    """
    A multilinear polynomial stored by its hypercube values.

    Attributes:
        name: Identifier for this table (e.g., "f", "w1")
        values: numpy object array of length 2^μ
        ring: Coefficient ring for the values

    Example:
        >>> from mlpoly.common.field import PrimeField
        >>> field = PrimeField(97)
        >>> table = EvaluationTable("f", [3, 7, 2, 5], field)
        >>> table.num_vars
        2
        >>> print(table.to_polynomial())
        3 + 4x₀ + 96x₁ + 96x₀x₁
    """
    name: str
    values: Any
    ring: Ring

    def __post_init__(self):
        if not is_power_of_two(len(self.values)):
            raise ValueError(f"Table size must be power of 2, got {len(self.values)}")
        values = np.empty(len(self.values), dtype=object)
        values[:] = [self.ring.normalize(v) for v in self.values]
        self.values = values

    @classmethod
    def from_polynomial(cls, name: str, poly: MultilinearPolynomial,
                        num_vars: int) -> EvaluationTable:
        return cls(name, to_evaluations(poly, num_vars), poly.ring)

    @property
    def size(self) -> int:
        return len(self.values)

    @property
    def num_vars(self) -> int:
        """Number of variables (μ = log2(size))."""
        return log2_floor(self.size)

    def __getitem__(self, index: int) -> Any:
        return self.values[index]

    def total(self) -> Any:
        """Sum of every entry."""
        return self.ring.sum(self.values.tolist())

    def to_polynomial(self) -> MultilinearPolynomial:
        return from_evaluations(self.ring, self.values.tolist())

    def __repr__(self) -> str:
        if self.size <= 8:
            return f"EvaluationTable({self.name}, {self.values.tolist()})"
        return f"EvaluationTable({self.name}, size={self.size}, first_few={self.values[:4].tolist()}...)"
