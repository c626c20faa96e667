"""
Number-Theoretic Helpers.

Small, self-contained integer and rational routines used by the prime
field and by the demos:

    - xgcd / mod_inverse: Extended Euclidean Algorithm
    - pow_mod: square-and-multiply modular exponentiation
    - legendre_symbol / tonelli_shanks: square roots modulo a prime
    - int_to_bytes / bytes_to_int: big-integer byte encoding
    - bit helpers: bit_length, get_bit, popcount, log2_floor, ...
    - rat_pow / rat_floor / rat_ceil / rat_round: rational helpers

Example:
    >>> xgcd(240, 46)
    (2, -9, 47)
    >>> pow_mod(3, 200, 101)
    1
    >>> r = tonelli_shanks(10, 13)
    >>> (r * r) % 13
    10
"""

from __future__ import annotations
from fractions import Fraction
from typing import Optional, Tuple
import math


# =============================================================================
# GCD and inverses
# =============================================================================

def xgcd(a: int, b: int) -> Tuple[int, int, int]:
    """
    Extended Euclidean Algorithm.

    Returns (g, x, y) with a*x + b*y == g, where g = gcd(a, b) >= 0.
    """
    old_r, r = a, b
    old_s, s = 1, 0
    old_t, t = 0, 1

    while r != 0:
        quotient = old_r // r
        old_r, r = r, old_r - quotient * r
        old_s, s = s, old_s - quotient * s
        old_t, t = t, old_t - quotient * t

    if old_r < 0:
        old_r, old_s, old_t = -old_r, -old_s, -old_t
    return old_r, old_s, old_t


def mod_inverse(a: int, m: int) -> int:
    """
    Find x in [0, m) with a*x == 1 (mod m).

    Raises:
        ValueError: If m < 1 or a is not invertible modulo m
    """
    if m < 1:
        raise ValueError(f"Modulus must be positive, got {m}")
    g, x, _ = xgcd(a % m, m)
    if g != 1:
        raise ValueError(f"No inverse exists (gcd = {g})")
    return x % m


def pow_mod(base: int, exp: int, mod: int) -> int:
    """
    Compute base^exp mod mod using square-and-multiply.

    Time complexity: O(log exp) multiplications. Negative exponents go
    through the modular inverse of base.
    """
    if mod < 1:
        raise ValueError(f"Modulus must be positive, got {mod}")
    if mod == 1:
        return 0
    if exp < 0:
        base = mod_inverse(base, mod)
        exp = -exp

    result = 1
    base %= mod
    while exp > 0:
        if exp & 1:
            result = (result * base) % mod
        base = (base * base) % mod
        exp >>= 1
    return result


# =============================================================================
# Square roots modulo a prime
# =============================================================================

def legendre_symbol(a: int, p: int) -> int:
    """Euler's criterion: 1 for residues, -1 for non-residues, 0 if p | a."""
    a %= p
    if a == 0:
        return 0
    ls = pow_mod(a, (p - 1) // 2, p)
    return -1 if ls == p - 1 else 1


def tonelli_shanks(n: int, p: int) -> Optional[int]:
    """
    Square root of n modulo the prime p.

    Returns the smaller of the two roots, or None when n is a quadratic
    non-residue. p is assumed to be prime (not checked).

    Algorithm:
        1. Write p - 1 = q * 2^s with q odd
        2. Find a non-residue z, set c = z^q
        3. Start from r = n^((q+1)/2), t = n^q and repeatedly fix up
           t until it becomes 1, squaring c along the way
    """
    if p < 2:
        raise ValueError(f"Modulus must be a prime, got {p}")
    n %= p
    if n == 0 or p == 2:
        return n
    if legendre_symbol(n, p) != 1:
        return None

    if p % 4 == 3:
        r = pow_mod(n, (p + 1) // 4, p)
        return min(r, p - r)

    q, s = p - 1, 0
    while q % 2 == 0:
        q //= 2
        s += 1

    z = 2
    while legendre_symbol(z, p) != -1:
        z += 1

    m = s
    c = pow_mod(z, q, p)
    t = pow_mod(n, q, p)
    r = pow_mod(n, (q + 1) // 2, p)

    while t != 1:
        # Least i with t^(2^i) == 1
        i, t2 = 0, t
        while t2 != 1:
            t2 = (t2 * t2) % p
            i += 1
        b = pow_mod(c, 1 << (m - i - 1), p)
        m = i
        c = (b * b) % p
        t = (t * c) % p
        r = (r * b) % p

    return min(r, p - r)


# =============================================================================
# Byte encoding
# =============================================================================

def int_to_bytes(n: int, length: Optional[int] = None,
                 byteorder: str = "little") -> bytes:
    """
    Encode a non-negative integer as bytes.

    Without length, the minimal encoding is used (zero encodes as b"").

    Raises:
        ValueError: If n is negative or does not fit in length bytes
    """
    if n < 0:
        raise ValueError(f"Cannot encode negative integer {n}")
    minimal = (n.bit_length() + 7) // 8
    if length is None:
        length = minimal
    elif length < minimal:
        raise ValueError(f"{n} needs {minimal} bytes, only {length} allowed")
    return n.to_bytes(length, byteorder)


def bytes_to_int(data: bytes, byteorder: str = "little") -> int:
    """Decode bytes produced by int_to_bytes."""
    return int.from_bytes(data, byteorder)


# =============================================================================
# Bit helpers
# =============================================================================

def bit_length(n: int) -> int:
    """Number of bits needed to write n (0 for n == 0)."""
    if n < 0:
        raise ValueError(f"Expected a non-negative integer, got {n}")
    return n.bit_length()


def get_bit(n: int, i: int) -> bool:
    """Check whether bit i (LSB = 0) of n is set."""
    if i < 0:
        raise ValueError(f"Bit index must be non-negative, got {i}")
    return (n >> i) & 1 == 1


def popcount(n: int) -> int:
    """Number of set bits in a non-negative integer."""
    if n < 0:
        raise ValueError(f"Expected a non-negative integer, got {n}")
    return bin(n).count("1")


def is_power_of_two(n: int) -> bool:
    return n > 0 and (n & (n - 1)) == 0


def next_power_of_two(n: int) -> int:
    """Smallest power of two >= n (1 for n <= 1)."""
    if n <= 1:
        return 1
    return 1 << (n - 1).bit_length()


def log2_floor(n: int) -> int:
    """Floor of log2(n) for n >= 1."""
    if n <= 0:
        raise ValueError(f"log2 undefined for {n}")
    return n.bit_length() - 1


# =============================================================================
# Rationals
# =============================================================================

def rat_pow(q: Fraction, n: int) -> Fraction:
    """q^n for any integer n; raises ZeroDivisionError for 0^(negative)."""
    q = Fraction(q)
    if n < 0:
        if q == 0:
            raise ZeroDivisionError("Zero cannot be raised to a negative power")
        return Fraction(q.denominator ** -n, q.numerator ** -n)
    return Fraction(q.numerator ** n, q.denominator ** n)


def rat_floor(q: Fraction) -> int:
    return math.floor(Fraction(q))


def rat_ceil(q: Fraction) -> int:
    return math.ceil(Fraction(q))


def rat_round(q: Fraction) -> int:
    """Round to the nearest integer, ties away from zero."""
    q = Fraction(q)
    if q < 0:
        return -rat_round(-q)
    return math.floor(q + Fraction(1, 2))
