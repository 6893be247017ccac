from __future__ import annotations

import warnings

import numpy as np
import pytest

import vecnum.polynomial as polynomial
from vecnum.polynomial import solve_cubic


def _solve(*args):
    roots: list[float] = []
    n = solve_cubic(*args[:4], roots, *args[4:])
    return n, roots


def test_three_distinct_roots_bounded():
    n, roots = _solve(1.0, -6.0, 11.0, -6.0, -100.0, 100.0)
    assert n == 3
    assert sorted(roots) == pytest.approx([1.0, 2.0, 3.0], abs=1e-6)


def test_three_distinct_roots_boundless():
    n, roots = _solve(1.0, -6.0, 11.0, -6.0)
    assert n == 3
    assert sorted(roots) == pytest.approx([1.0, 2.0, 3.0], abs=1e-12)


def test_bounded_selection():
    n, roots = _solve(1.0, -6.0, 11.0, -6.0, 0.0, 1.5)
    assert n == 1
    assert roots == pytest.approx([1.0], abs=1e-12)


def test_one_real_root():
    n, roots = _solve(1.0, 0.0, 1.0, -2.0)
    assert n == 1
    assert roots == pytest.approx([1.0], abs=1e-12)


def test_zero_constant_term_gives_zero_root():
    n, roots = _solve(1.0, -3.0, 2.0, 0.0)
    assert n == 3
    assert sorted(roots) == [0.0, 1.0, 2.0]


def test_triple_root_reported_once():
    n, roots = _solve(1.0, -3.0, 3.0, -1.0)
    assert n == 1
    assert roots == [1.0]


def test_degenerate_leading_coefficient_falls_back_to_quadratic():
    n, roots = _solve(0.0, 1.0, -3.0, 2.0)
    assert n == 2
    assert sorted(roots) == [1.0, 2.0]


def test_identity_and_contradiction():
    assert _solve(0.0, 0.0, 0.0, 0.0) == (-1, [])
    assert _solve(0.0, 0.0, 0.0, 5.0) == (0, [])


@pytest.mark.parametrize("scale", [1e-10, 1e-4, 1e6, 1e12])
def test_scaled_coefficients(scale):
    n, roots = _solve(scale, -6.0 * scale, 11.0 * scale, -6.0 * scale)
    assert n == 3
    assert sorted(roots) == pytest.approx([1.0, 2.0, 3.0], abs=1e-9)


def test_random_cubics_satisfy_residual_bound():
    rng = np.random.default_rng(7)
    for _ in range(50):
        r = np.sort(rng.uniform(-10.0, 10.0, 3))
        if np.min(np.diff(r)) < 1e-2:
            continue
        c = np.poly(r)
        n, roots = _solve(*[float(x) for x in c])
        assert n == 3
        assert sorted(roots) == pytest.approx(list(r), abs=1e-8)
        for x in roots:
            den = float(np.polyval(np.abs(c), abs(x)))
            assert abs(float(np.polyval(c, x))) <= 1e-7 * den


def test_resolve_is_idempotent():
    assert _solve(2.0, -1.0, -7.0, 3.0) == _solve(2.0, -1.0, -7.0, 3.0)


def test_newton_converges_without_warning():
    with warnings.catch_warnings():
        warnings.simplefilter("error")
        _solve(1.0, -6.0, 11.0, -6.0)
        _solve(1.0, 0.0, 1.0, -2.0)


def test_newton_iteration_cap_warns(monkeypatch):
    monkeypatch.setattr(polynomial, "CUBIC_NEWTON_MAX_ITER", 1)
    with pytest.warns(RuntimeWarning, match="did not settle"):
        _solve(1.0, -6.0, 11.0, -6.0)
