"""
Common utilities for the multilinear polynomial toolkit.

This module provides:
    - Coefficient rings (Ring, IntegerRing, RationalField)
    - Finite field arithmetic (PrimeField, FieldElement)
    - Number theory helpers (xgcd, pow_mod, tonelli_shanks, byte encoding)
    - A small timing utility (Cronos)
"""

from .ring import Ring, IntegerRing, RationalField, INTEGERS, RATIONALS
from .field import PrimeField, FieldElement
from .cronos import Cronos

__all__ = [
    "Ring",
    "IntegerRing",
    "RationalField",
    "INTEGERS",
    "RATIONALS",
    "PrimeField",
    "FieldElement",
    "Cronos",
]
