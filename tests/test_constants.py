from __future__ import annotations

import math

from vecnum.constants import (
    CURVETIME_EPSILON,
    CUBIC_NEWTON_MAX_ITER,
    EPSILON,
    GEOMETRIC_EPSILON,
    KAPPA,
    MACHINE_EPSILON,
    MAX_QUADRATURE_ORDER,
    MIN_QUADRATURE_ORDER,
    SPLIT_FACTOR,
    TRIGONOMETRIC_EPSILON,
)


def test_tolerances_are_positive_and_ordered():
    assert 0.0 < MACHINE_EPSILON < EPSILON < CURVETIME_EPSILON < GEOMETRIC_EPSILON
    assert TRIGONOMETRIC_EPSILON == CURVETIME_EPSILON


def test_machine_epsilon_is_just_above_half_ulp_of_one():
    assert MACHINE_EPSILON > 2.0 ** -53
    assert 1.0 + MACHINE_EPSILON > 1.0


def test_kappa_matches_quarter_circle_bezier_handle():
    assert math.isclose(KAPPA, 0.5522847498307936, rel_tol=0.0, abs_tol=1e-15)


def test_split_factor_is_dekker_constant():
    assert SPLIT_FACTOR == 2.0 ** 27 + 1.0


def test_quadrature_order_range_and_newton_cap():
    assert (MIN_QUADRATURE_ORDER, MAX_QUADRATURE_ORDER) == (2, 16)
    assert CUBIC_NEWTON_MAX_ITER > 10
