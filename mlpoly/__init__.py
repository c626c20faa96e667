"""
mlpoly
======

Algebraic and number-theoretic primitives centred on a sparse
multilinear polynomial engine.

Modules:
    - common: rings, prime fields, number theory helpers, timing
    - multilinear: the polynomial engine and its dense table form

Quick Start:
    >>> from mlpoly.common import PrimeField
    >>> from mlpoly.multilinear import MultilinearPolynomial
    >>> field = PrimeField(97)
    >>> f = MultilinearPolynomial.from_summands(field, [(2, [1]), (3, [0, 4])])
    >>> print(f)
    2x₁ + 3x₀x₄
"""

__version__ = "0.1.0"

from . import common
from . import multilinear
