from __future__ import annotations

import numpy as np
import pytest

from vecnum.quadrature import ABSCISSAS, WEIGHTS, integrate, quadrature_order


def test_tables_cover_orders_2_to_16():
    assert len(ABSCISSAS) == 15
    assert len(WEIGHTS) == 15
    for n in range(2, 17):
        m = (n + 1) // 2
        assert len(ABSCISSAS[n - 2]) == m
        assert len(WEIGHTS[n - 2]) == m


def test_weights_sum_to_interval_length():
    for n in range(2, 17):
        w = WEIGHTS[n - 2]
        total = w[0] + 2.0 * sum(w[1:]) if n % 2 else 2.0 * sum(w)
        assert total == pytest.approx(2.0, abs=1e-14)


def test_constant_and_odd_integrands():
    assert integrate(lambda x: 1.0, 0.0, 1.0, 4) == pytest.approx(1.0, abs=1e-15)
    assert abs(integrate(lambda x: x, -1.0, 1.0, 2)) < 1e-12


def test_odd_order_uses_centre_node():
    assert integrate(lambda x: x * x, 0.0, 1.0, 3) == pytest.approx(1.0 / 3.0, abs=1e-15)


def test_reversed_interval_flips_sign():
    assert integrate(lambda x: x, 1.0, 0.0, 4) == pytest.approx(-0.5, abs=1e-15)


@pytest.mark.parametrize("n", list(range(2, 17)))
def test_exact_for_degree_2n_minus_1(n):
    rng = np.random.default_rng(n)
    coeffs = rng.uniform(-1.0, 1.0, 2 * n)
    anti = np.polyint(coeffs)
    a, b = -0.5, 1.0
    exact = float(np.polyval(anti, b) - np.polyval(anti, a))
    got = integrate(lambda x: float(np.polyval(coeffs, x)), a, b, n)
    assert got == pytest.approx(exact, abs=1e-12)


def test_not_exact_beyond_degree_2n_minus_1():
    # x^4 over [-1, 1] with two nodes gives 2/9 instead of 2/5
    assert integrate(lambda x: x ** 4, -1.0, 1.0, 2) == pytest.approx(2.0 / 9.0, abs=1e-15)


@pytest.mark.parametrize("n", [0, 1, 17, 32])
def test_order_out_of_range_raises(n):
    with pytest.raises(ValueError, match="quadrature order must be in"):
        integrate(lambda x: x, 0.0, 1.0, n)


def test_quadrature_order_from_interval_length():
    assert quadrature_order(0.0, 0.0) == 2
    assert quadrature_order(0.0, 0.25) == 8
    assert quadrature_order(0.5, 0.25) == 8
    assert quadrature_order(0.0, 0.1) == 4
    assert quadrature_order(0.0, 1.0) == 16
    assert quadrature_order(-3.0, 3.0) == 16
