"""
Multilinear Polynomial Engine

Sparse multilinear polynomials over an arbitrary coefficient ring, with
monomials stored as bit-encoded integer keys.

Key Components:
    - MonomialIndexCodec: index set <-> monomial key
    - MultilinearPolynomial: scale, add, disjoint multiplication,
      evaluation, pruning and equality
    - EvaluationTable / to_evaluations / from_evaluations: dense
      boolean-hypercube form

Usage:
    >>> from mlpoly.common import INTEGERS
    >>> from mlpoly.multilinear import MultilinearPolynomial
    >>>
    >>> f = MultilinearPolynomial.from_summands(INTEGERS, [(2, [1]), (4, [])])
    >>> g = MultilinearPolynomial.from_summands(INTEGERS, [(3, [0])])
    >>> (f * g).eval([5, 1])
    90
"""

from .codec import MonomialIndexCodec, encode, decode, iter_indices
from .core import MultilinearPolynomial, OverlappingSupportError, random_polynomial
from .mle import EvaluationTable, to_evaluations, from_evaluations, hypercube_sum

__all__ = [
    "MonomialIndexCodec",
    "encode",
    "decode",
    "iter_indices",
    "MultilinearPolynomial",
    "OverlappingSupportError",
    "random_polynomial",
    "EvaluationTable",
    "to_evaluations",
    "from_evaluations",
    "hypercube_sum",
]
