"""Tests for dense hypercube evaluation tables."""

import numpy as np
import pytest
from hypothesis import given, strategies as st

from mlpoly.common.field import PrimeField
from mlpoly.common.ring import INTEGERS, Ring
from mlpoly.multilinear.core import MultilinearPolynomial
from mlpoly.multilinear.mle import (EvaluationTable, from_evaluations, hypercube_sum,
                                    to_evaluations)

FIELD = PrimeField(97)


def tables(max_vars=4):
    return st.integers(min_value=0, max_value=max_vars).flatmap(
        lambda n: st.lists(st.integers(min_value=0, max_value=96),
                           min_size=1 << n, max_size=1 << n)
    )


def bits(b, n):
    return [(b >> i) & 1 for i in range(n)]


@pytest.fixture
def pol1():
    return MultilinearPolynomial.from_summands(INTEGERS, [(2, [1]), (3, [4, 0]), (4, [])])


def test_table_matches_eval(pol1):
    table = to_evaluations(pol1, 5)
    assert isinstance(table, np.ndarray)
    assert len(table) == 32
    for b in range(32):
        assert table[b] == pol1.eval(bits(b, 5))


def test_hypercube_sum(pol1):
    # 4 * 32 + 2 * 16 + 3 * 8
    assert hypercube_sum(pol1, 5) == 184


def test_extra_variables_double_the_sum(pol1):
    assert hypercube_sum(pol1, 6) == 2 * hypercube_sum(pol1, 5)


def test_table_too_small_rejected(pol1):
    with pytest.raises(ValueError):
        to_evaluations(pol1, 4)


def test_zero_variables():
    p = MultilinearPolynomial.constant(INTEGERS, 9)
    assert to_evaluations(p, 0).tolist() == [9]
    assert from_evaluations(INTEGERS, [9]) == p


def test_from_evaluations_small():
    p = from_evaluations(FIELD, [3, 7, 2, 5])
    assert p.terms() == [(0, 3), (1, 4), (2, 96), (3, 96)]


def test_from_evaluations_prunes():
    p = from_evaluations(INTEGERS, [1, 1, 1, 1])
    assert p.terms() == [(0, 1)]


def test_non_power_of_two_rejected():
    with pytest.raises(ValueError):
        from_evaluations(INTEGERS, [1, 2, 3])
    with pytest.raises(ValueError):
        EvaluationTable("bad", [], INTEGERS)


def test_ring_without_subtraction():
    class Naturals(Ring):
        def zero(self):
            return 0

        def one(self):
            return 1

        def add(self, a, b):
            return a + b

        def mul(self, a, b):
            return a * b

    p = MultilinearPolynomial.from_summands(Naturals(), [(1, [0])])
    assert to_evaluations(p, 1).tolist() == [0, 1]
    with pytest.raises(NotImplementedError):
        from_evaluations(Naturals(), [0, 1])


@given(tables())
def test_table_roundtrip(values):
    num_vars = len(values).bit_length() - 1
    poly = from_evaluations(FIELD, values)
    assert to_evaluations(poly, num_vars).tolist() == values


def test_evaluation_table_class():
    table = EvaluationTable("f", [3, 7, 2, 5], FIELD)
    assert table.size == 4
    assert table.num_vars == 2
    assert table[1] == 7
    assert table.total() == 17
    poly = table.to_polynomial()
    again = EvaluationTable.from_polynomial("g", poly, 2)
    assert again.values.tolist() == [3, 7, 2, 5]
    assert hypercube_sum(poly, 2) == table.total()
    assert "EvaluationTable(f" in repr(table)


def test_table_values_are_reduced():
    table = EvaluationTable("f", [100, -1, FIELD.element(2), 5], FIELD)
    assert table.values.tolist() == [3, 96, 2, 5]
    assert table.to_polynomial() == from_evaluations(FIELD, [3, 96, 2, 5])
    assert from_evaluations(FIELD, [100, -1]) == from_evaluations(FIELD, [3, 96])
