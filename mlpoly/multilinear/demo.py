"""
Multilinear Polynomial Engine Demo

Walks through the engine with a worked example that is small enough to
check by hand, then times the operations on random polynomials over a
prime field.

Run with:
    python -m mlpoly.multilinear.demo
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Optional
import random

from tabulate import tabulate

from mlpoly.common.cronos import Cronos
from mlpoly.common.field import PrimeField
from mlpoly.common.ring import INTEGERS
from mlpoly.multilinear.codec import MonomialIndexCodec
from mlpoly.multilinear.core import MultilinearPolynomial, OverlappingSupportError, random_polynomial
from mlpoly.multilinear.mle import EvaluationTable, hypercube_sum


@dataclass
class DemoConfig:
    """
    Parameters for the random-polynomial part of the demo.

    Attributes:
        prime: Field modulus for coefficients
        num_vars: Variables per operand (operands use disjoint halves)
        num_terms: Terms per random operand
        seed: Seed for reproducible output (None = fresh randomness)
    """
    prime: int = PrimeField.GOLDILOCKS_PRIME
    num_vars: int = 12
    num_terms: int = 200
    seed: Optional[int] = 42

    def __post_init__(self):
        """Validate configuration."""
        if self.prime < 2:
            raise ValueError("prime must be at least 2")
        if self.num_vars < 1:
            raise ValueError("num_vars must be at least 1")
        if self.num_terms > (1 << self.num_vars):
            raise ValueError("num_terms exceeds the number of possible monomials")


def reference_polynomials():
    """
    The three polynomials used throughout the worked example.

        pol1 = 2·x1 + 3·x4·x0 + 4
        pol2 = 1·x1·x3 + 4·x4·x0 + 2·x4·x1 + 3
        pol3 = 12·x2 + 4·x2·x3 + 5
    """
    pol1 = MultilinearPolynomial.from_summands(INTEGERS, [(2, [1]), (3, [4, 0]), (4, [])])
    pol2 = MultilinearPolynomial.from_summands(
        INTEGERS, [(1, [1, 3]), (4, [4, 0]), (2, [4, 1]), (3, [])]
    )
    pol3 = MultilinearPolynomial.from_summands(INTEGERS, [(12, [2]), (4, [2, 3]), (5, [])])
    return pol1, pol2, pol3


def summand_table(poly: MultilinearPolynomial) -> str:
    rows = [
        (key, f"{key:b}", sorted(MonomialIndexCodec.decode(key)), coeff)
        for key, coeff in poly.terms()
    ]
    return tabulate(rows, headers=["key", "bits", "variables", "coefficient"])


def demo_worked_example():
    """Scale, add and multiply the reference polynomials."""
    print("\n" + "=" * 70)
    print("DEMO 1: WORKED EXAMPLE (integer coefficients)")
    print("=" * 70)

    pol1, pol2, pol3 = reference_polynomials()
    print(f"\npol1 = {pol1}")
    print(f"pol2 = {pol2}")
    print(f"pol3 = {pol3}")

    print("\nStorage of pol1 (key = bit i set for each x_i):")
    print(summand_table(pol1))

    print(f"\npol1 * 3    = {pol1.scale(3)}")
    print(f"pol1 + pol2 = {pol1 + pol2}")

    product = pol1 * pol3
    point = [0, 1, 2, 0, 4]
    print(f"pol1 * pol3 = {product}")
    print(f"\n(pol1 * pol3)({point}) = {product.eval(point)}")
    print(f"  check: pol1 = {pol1.eval(point)}, pol3 = {pol3.eval(point)}, "
          f"product = {pol1.eval(point) * pol3.eval(point)}")

    print("\nMultiplying pol1 by pol2 is not allowed (both use x0, x1, x4):")
    try:
        pol1.checked_disjoint_mul(pol2)
    except OverlappingSupportError as exc:
        print(f"  OverlappingSupportError: {exc}")


def demo_evaluation_table():
    """Dense hypercube form of a small polynomial over Z_97."""
    print("\n" + "=" * 70)
    print("DEMO 2: HYPERCUBE EVALUATION TABLE (Z_97)")
    print("=" * 70)

    field = PrimeField(PrimeField.SMALL_TEST_PRIME)
    f = MultilinearPolynomial.from_summands(field, [(3, []), (4, [0]), (96, [1]), (96, [0, 1])])
    table = EvaluationTable.from_polynomial("f", f, num_vars=2)

    print(f"\nf = {f}")
    rows = [(b, f"{b:02b}", table[b]) for b in range(table.size)]
    print(tabulate(rows, headers=["index", "x1 x0", "f"]))
    print(f"\nSum over hypercube: {hypercube_sum(f, 2)}")
    print(f"Recovered from table: {table.to_polynomial()}")


def demo_random_timing(config: Optional[DemoConfig] = None):
    """Time the engine on random polynomials with disjoint supports."""
    config = config or DemoConfig()
    print("\n" + "=" * 70)
    print(f"DEMO 3: RANDOM POLYNOMIALS ({config.num_terms} terms, "
          f"{config.num_vars} + {config.num_vars} variables)")
    print("=" * 70)

    rng = random.Random(config.seed)
    field = PrimeField(config.prime)
    p = random_polynomial(field, config.num_vars, config.num_terms, rng)
    # Shift q's variables past p's so the supports are disjoint
    q_low = random_polynomial(field, config.num_vars, config.num_terms, rng)
    q = MultilinearPolynomial(
        field, {key << config.num_vars: coeff for key, coeff in q_low.terms()}
    )
    point = [field.random(rng=rng) for _ in range(2 * config.num_vars)]

    cronos = Cronos()
    with cronos.clock("add"):
        total = p + q
    with cronos.clock("disjoint_mul"):
        product = p * q
    with cronos.clock("eval(product)"):
        value = product.eval(point)
    with cronos.clock("eval(p) * eval(q)"):
        expected = field.mul(p.eval(point), q.eval(point))

    print(f"\n|p + q| = {len(total)} terms, |p * q| = {len(product)} terms")
    print(f"product evaluation matches: {value == expected}")
    print("\nTimings:")
    print(cronos.summary())


def main():
    """Run all demos."""
    print("╔" + "═" * 68 + "╗")
    print("║" + " " * 14 + "MULTILINEAR POLYNOMIAL ENGINE DEMONSTRATION" + " " * 11 + "║")
    print("╚" + "═" * 68 + "╝")

    demos = [
        ("Worked Example", demo_worked_example),
        ("Evaluation Table", demo_evaluation_table),
        ("Random Timing", demo_random_timing),
    ]
    for name, demo in demos:
        demo()
        print(f"\n✓ {name} complete")


if __name__ == "__main__":
    main()
