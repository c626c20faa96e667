"""
Prime Field Arithmetic.

This module implements modular arithmetic over prime fields, the most
common coefficient ring for multilinear polynomials in practice. A
PrimeField works in two styles:

    - As a Ring (operations table) over raw int residues. This is what
      the polynomial engine uses: cheap, no wrapper objects.
    - As a factory for FieldElement objects with overloaded operators,
      for code that reads better as a + b * c.

Key Concepts:
    - All arithmetic is done modulo a prime p
    - Addition: (a + b) mod p
    - Multiplication: (a * b) mod p
    - Subtraction: (a - b + p) mod p (to keep positive)
    - Division: a * b^(-1) mod p (multiply by modular inverse)
    - Square root: Tonelli-Shanks (only quadratic residues have one)

Example:
    >>> field = PrimeField(97)  # Small prime for demo
    >>> a = field.element(45)
    >>> b = field.element(67)
    >>> c = a + b  # (45 + 67) mod 97 = 15
    >>> print(c)
    15
    >>> field.add(45, 67)
    15
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Optional, Union
import random

from .numtheory import int_to_bytes, mod_inverse, pow_mod, tonelli_shanks
from .ring import Ring


@dataclass
class FieldElement:
    """
    An element of a prime field Z_p.

    All operations automatically reduce the result modulo p. Plain ints
    are accepted on either side of an operator.

    Attributes:
        value: The integer value (always in range [0, p-1])
        field: Reference to the parent PrimeField
    """
    value: int
    field: 'PrimeField'

    def __post_init__(self):
        """Ensure value is reduced modulo p."""
        self.value = self.value % self.field.prime

    def __repr__(self) -> str:
        return f"FieldElement({self.value}, mod {self.field.prime})"

    def __str__(self) -> str:
        return str(self.value)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, FieldElement):
            return self.value == other.value and self.field.prime == other.field.prime
        if isinstance(other, int):
            return self.value == (other % self.field.prime)
        return False

    def __hash__(self) -> int:
        return hash((self.value, self.field.prime))

    def _coerce(self, other: Union[FieldElement, int]) -> int:
        if isinstance(other, FieldElement):
            if other.field.prime != self.field.prime:
                raise ValueError(
                    f"Cannot mix elements of Z_{self.field.prime} and Z_{other.field.prime}"
                )
            return other.value
        return other

    def __add__(self, other: Union[FieldElement, int]) -> FieldElement:
        return FieldElement(self.field.add(self.value, self._coerce(other)), self.field)

    def __radd__(self, other: int) -> FieldElement:
        return self.__add__(other)

    def __sub__(self, other: Union[FieldElement, int]) -> FieldElement:
        return FieldElement(self.field.sub(self.value, self._coerce(other)), self.field)

    def __rsub__(self, other: int) -> FieldElement:
        return FieldElement(other - self.value, self.field)

    def __mul__(self, other: Union[FieldElement, int]) -> FieldElement:
        return FieldElement(self.field.mul(self.value, self._coerce(other)), self.field)

    def __rmul__(self, other: int) -> FieldElement:
        return self.__mul__(other)

    def __truediv__(self, other: Union[FieldElement, int]) -> FieldElement:
        """Division in the field: a * b^(-1) mod p"""
        return FieldElement(self.field.div(self.value, self._coerce(other)), self.field)

    def __neg__(self) -> FieldElement:
        return FieldElement(self.field.neg(self.value), self.field)

    def __pow__(self, exp: int) -> FieldElement:
        """Square-and-multiply; negative exponents invert first."""
        return FieldElement(self.field.pow(self.value, exp), self.field)

    def __bool__(self) -> bool:
        return self.value != 0

    def inverse(self) -> FieldElement:
        """
        Compute the modular inverse using the Extended Euclidean Algorithm.

        Raises:
            ValueError: If self.value is 0 (no inverse exists)
        """
        return FieldElement(self.field.inv(self.value), self.field)

    def sqrt(self) -> Optional[FieldElement]:
        """Square root via Tonelli-Shanks, or None for non-residues."""
        root = self.field.sqrt(self.value)
        if root is None:
            return None
        return FieldElement(root, self.field)

    def to_bytes(self, byteorder: str = "little") -> bytes:
        """Fixed-width encoding, wide enough for any element of the field."""
        return int_to_bytes(self.value, self.field.byte_length, byteorder)

    def is_zero(self) -> bool:
        """Check if this element is zero."""
        return self.value == 0

    def is_one(self) -> bool:
        """Check if this element is one."""
        return self.value == 1


class PrimeField(Ring):
    """
    A prime field Z_p, usable directly as a polynomial coefficient ring.

    As a Ring, the field works on raw int residues in [0, p-1]. Any int,
    or a FieldElement of this field, is accepted as an input and reduced
    by normalize() on the way in; results are always plain residues.

    Attributes:
        prime: The prime modulus p

    Common Primes:
        - 97: Good for testing/visualization (small, easy to verify by hand)
        - 2^64 - 2^32 + 1: Goldilocks prime (fast on 64-bit CPUs)

    Example:
        >>> field = PrimeField(97)
        >>> field.mul(50, 2)
        3
        >>> field.sqrt(2)
        14
    """

    SMALL_TEST_PRIME = 97
    GOLDILOCKS_PRIME = (1 << 64) - (1 << 32) + 1  # 2^64 - 2^32 + 1

    def __init__(self, prime: int):
        """
        Initialize a prime field.

        Args:
            prime: The prime modulus. Should be prime for correct behavior.
                   (We don't verify primality for performance reasons)
        """
        if prime < 2:
            raise ValueError("Prime must be at least 2")
        self.prime = prime
        self.name = f"Z_{prime}"

    def __repr__(self) -> str:
        return f"PrimeField({self.prime})"

    def __eq__(self, other: object) -> bool:
        return isinstance(other, PrimeField) and other.prime == self.prime

    def __hash__(self) -> int:
        return hash(("PrimeField", self.prime))

    @property
    def byte_length(self) -> int:
        """Bytes needed to hold any residue."""
        return ((self.prime - 1).bit_length() + 7) // 8

    def element(self, value: int) -> FieldElement:
        """Create a field element from an integer."""
        return FieldElement(value % self.prime, self)

    def random(self, exclude_zero: bool = False,
               rng: Optional[random.Random] = None) -> int:
        """
        Generate a random residue.

        Args:
            exclude_zero: If True, never returns zero (useful for testing inverses)
            rng: Source of randomness; the module-level generator if omitted

        Returns:
            A random int in [0, p-1] or [1, p-1]
        """
        rng = rng or random
        if exclude_zero:
            return rng.randint(1, self.prime - 1)
        return rng.randint(0, self.prime - 1)

    # Ring interface over raw residues

    def zero(self) -> int:
        return 0

    def one(self) -> int:
        return 1 % self.prime

    def normalize(self, a: Union[FieldElement, int]) -> int:
        """
        Reduce a to its residue in [0, p-1].

        Raises:
            ValueError: If a is an element of a different field
        """
        if isinstance(a, FieldElement):
            if a.field.prime != self.prime:
                raise ValueError(f"Cannot use an element of Z_{a.field.prime} in Z_{self.prime}")
            return a.value
        return a % self.prime

    def is_zero(self, a) -> bool:
        return self.normalize(a) == 0

    def add(self, a, b) -> int:
        return (self.normalize(a) + self.normalize(b)) % self.prime

    def sub(self, a, b) -> int:
        return (self.normalize(a) - self.normalize(b)) % self.prime

    def mul(self, a, b) -> int:
        return (self.normalize(a) * self.normalize(b)) % self.prime

    def neg(self, a) -> int:
        return (-self.normalize(a)) % self.prime

    def inv(self, a: int) -> int:
        """
        Modular inverse of an integer.

        Raises:
            ValueError: If a is zero in the field
        """
        a = self.normalize(a)
        if a == 0:
            raise ValueError("Cannot invert zero")
        return mod_inverse(a, self.prime)

    def div(self, a: int, b: int) -> int:
        return self.mul(a, self.inv(b))

    def pow(self, base: int, exp: int) -> int:
        """Compute base^exp in the field."""
        base = self.normalize(base)
        if exp < 0:
            base, exp = self.inv(base), -exp
        return pow_mod(base, exp, self.prime)

    def sqrt(self, a: int) -> Optional[int]:
        """Smaller square root of a, or None if a is a non-residue."""
        return tonelli_shanks(self.normalize(a), self.prime)
