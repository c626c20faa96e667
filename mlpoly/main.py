"""
mlpoly - Main Entry Point

This script provides a unified menu over the toolkit's demos:
    1. Multilinear polynomial engine
    2. Number theory helpers
    3. Prime field arithmetic

Run with:
    python -m mlpoly.main
"""

from fractions import Fraction


def print_banner():
    """Print the toolkit banner."""
    print()
    print("╔" + "═" * 68 + "╗")
    print("║" + " " * 68 + "║")
    print("║" + " " * 16 + "MULTILINEAR POLYNOMIAL TOOLKIT" + " " * 22 + "║")
    print("║" + " " * 68 + "║")
    print("╚" + "═" * 68 + "╝")
    print()


def print_menu():
    """Print the main menu."""
    print("  [1] Multilinear Polynomial Engine")
    print("      Scale, add, multiply and evaluate sparse polynomials")
    print()
    print("  [2] Number Theory")
    print("      Extended GCD, modular powers, square roots, byte encoding")
    print()
    print("  [3] Prime Field")
    print("      Field elements, inverses and square roots in Z_97")
    print()
    print("  [4] Quick Demo (all three)")
    print()
    print("  [q] Quit")
    print()


def run_polynomials():
    """Run the multilinear polynomial demo."""
    from mlpoly.multilinear.demo import main as polynomial_demo

    polynomial_demo()


def run_number_theory():
    """Show the number theory helpers on small inputs."""
    from mlpoly.common.numtheory import (xgcd, pow_mod, tonelli_shanks,
                                         int_to_bytes, bytes_to_int,
                                         rat_pow, rat_round)

    print("\n" + "=" * 70)
    print("NUMBER THEORY")
    print("=" * 70)

    g, x, y = xgcd(240, 46)
    print(f"\nxgcd(240, 46) = {g}  since 240·({x}) + 46·({y}) = {240 * x + 46 * y}")
    print(f"3^200 mod 101 = {pow_mod(3, 200, 101)}")

    r = tonelli_shanks(10, 13)
    print(f"sqrt(10) mod 13 = {r}  (check: {r}² mod 13 = {r * r % 13})")
    print(f"sqrt(5) mod 13 = {tonelli_shanks(5, 13)}  (non-residue)")

    n = 2 ** 70 + 5
    encoded = int_to_bytes(n)
    print(f"\n{n} -> {encoded.hex()} ({len(encoded)} bytes, little endian)")
    print(f"round trip: {bytes_to_int(encoded) == n}")

    q = Fraction(-5, 2)
    print(f"\n({q})^-3 = {rat_pow(q, -3)}")
    print(f"round({q}) = {rat_round(q)}  (ties away from zero)")


def run_field():
    """Show prime field arithmetic in Z_97."""
    from mlpoly.common.field import PrimeField

    print("\n" + "=" * 70)
    print("PRIME FIELD Z_97")
    print("=" * 70)

    field = PrimeField(PrimeField.SMALL_TEST_PRIME)
    a = field.element(45)
    b = field.element(67)

    print(f"\na = {a}, b = {b}")
    print(f"a + b = {a + b}  (45 + 67 = 112 → 112 mod 97 = 15)")
    print(f"a - b = {a - b}  (45 - 67 = -22 → -22 + 97 = 75)")
    print(f"a * b = {a * b}  (45 * 67 = 3015 → 3015 - 31·97 = 8)")
    print(f"a / b = {a / b}  (check: (a / b) * b = {(a / b) * b})")
    print(f"a^(-1) = {a.inverse()}")

    root = field.element(2).sqrt()
    print(f"sqrt(2) = {root}  (check: {root}² = {root * root})")
    print(f"sqrt(5) = {field.element(5).sqrt()}")


def run_quick_demo():
    run_polynomials()
    run_number_theory()
    run_field()


def main():
    """Main entry point."""
    print_banner()

    actions = {
        "1": run_polynomials,
        "2": run_number_theory,
        "3": run_field,
        "4": run_quick_demo,
    }

    while True:
        print_menu()

        choice = input("Enter your choice: ").strip().lower()

        if choice in ("q", "quit", "exit"):
            print("\nGoodbye!")
            break
        if choice in actions:
            actions[choice]()
            input("\nPress Enter to continue...")
        else:
            print("\nInvalid choice. Please try again.")


if __name__ == "__main__":
    main()
