"""Numerically robust real roots of quadratic and cubic polynomials.

References:
    W. Kahan, "To Solve a Real Cubic Equation" (1986).
    J. Blinn, "How to Solve a Quadratic Equation", IEEE CG&A (2005/2006).
"""

from __future__ import annotations

import math
import warnings
from typing import List, Optional

from .compensated import get_discriminant, get_normalization_factor
from .constants import CUBIC_NEWTON_MAX_ITER, EPSILON, MACHINE_EPSILON
from .predicates import clamp

# Plastic number; scales the initial Newton step so that the first iterate
# lands beyond the root on the far side of the inflection point.
_PLASTIC = 1.324717957244746


def _bounded(x: float, lo: Optional[float], hi: Optional[float]) -> Optional[float]:
    """Value to store for root ``x``, or None when it is rejected.

    Without bounds every finite root is kept as-is.  With bounds a root is
    accepted within ``EPSILON`` of the range and clamped into it.
    """
    if not math.isfinite(x):
        return None
    if lo is None and hi is None:
        return x
    lo = -math.inf if lo is None else lo
    hi = math.inf if hi is None else hi
    if lo - EPSILON < x < hi + EPSILON:
        return clamp(x, lo, hi)
    return None


def solve_quadratic(
    a: float,
    b: float,
    c: float,
    roots: List[float],
    lo: Optional[float] = None,
    hi: Optional[float] = None,
) -> int:
    """Solve ``a*x**2 + b*x + c = 0`` and append the real roots to ``roots``.

    The half-b discriminant is computed with compensated products, and the
    roots are formed as ``R/a`` and ``c/R`` with ``R = b' + sign(b')*sqrt(D)``
    so neither involves a cancelling subtraction.  A nearly-zero ``a``
    degrades to the linear equation.

    Args:
        a, b, c: coefficients, highest degree first.
        roots: list the roots are appended to.
        lo, hi: optional bounds.  When either is given, roots are accepted
            within ``EPSILON`` of ``[lo, hi]`` and clamped into it.

    Returns:
        Number of roots appended (0, 1 or 2), or -1 if every ``x`` is a
        solution.  A double root is appended once.
    """
    x1 = math.inf
    x2 = math.inf
    if abs(a) < EPSILON:
        if abs(b) < EPSILON:
            return -1 if abs(c) < EPSILON else 0
        x1 = -c / b
    else:
        b *= -0.5
        D = get_discriminant(a, b, c)
        # Near-zero discriminant: rescale so that a double root is not
        # mistaken for a pair of close or complex roots.
        if D and abs(D) < MACHINE_EPSILON:
            f = get_normalization_factor(abs(a), abs(b), abs(c))
            if f:
                a *= f
                b *= f
                c *= f
                D = get_discriminant(a, b, c)
        if D >= -MACHINE_EPSILON:
            Q = 0.0 if D < 0 else math.sqrt(D)
            R = b - Q if b < 0 else b + Q
            if R == 0:
                x1 = c / a
                x2 = -x1
            else:
                x1 = R / a
                x2 = c / R

    count = 0
    v1 = _bounded(x1, lo, hi)
    if v1 is not None:
        roots.append(v1)
        count += 1
    if x2 != x1:
        v2 = _bounded(x2, lo, hi)
        if v2 is not None:
            roots.append(v2)
            count += 1
    return count


def _evaluate(a: float, b: float, c: float, d: float, x: float):
    """Horner evaluation of the cubic at ``x``.

    Returns ``(x, b1, c2, qd, q)``: ``q`` is the polynomial value, ``qd`` its
    derivative, and ``a*t**2 + b1*t + c2`` the quadratic left after dividing
    out ``(t - x)``.
    """
    tmp = a * x
    b1 = tmp + b
    c2 = b1 * x + c
    qd = (tmp + b1) * x + c2
    q = c2 * x + d
    return x, b1, c2, qd, q


def solve_cubic(
    a: float,
    b: float,
    c: float,
    d: float,
    roots: List[float],
    lo: Optional[float] = None,
    hi: Optional[float] = None,
) -> int:
    """Solve ``a*x**3 + b*x**2 + c*x + d = 0`` and append the real roots.

    One real root is found by a guarded Newton iteration started from
    Kahan's estimate around the inflection point; it is then divided out
    and the remaining quadratic factor is handed to ``solve_quadratic``.
    This avoids the trigonometric branch of Cardano's formula and keeps the
    error bound close to double precision.

    Bounds behave as in ``solve_quadratic``.  Non-finite and out-of-range
    roots are dropped and not counted.

    Returns:
        Number of roots appended (0..3), or -1 when the equation
        degenerates to ``0 = 0``.
    """
    f = get_normalization_factor(abs(a), abs(b), abs(c), abs(d))
    if f:
        a *= f
        b *= f
        c *= f
        d *= f

    if abs(a) < EPSILON:
        # Not a cubic: solve b*x**2 + c*x + d and contribute no root of our own.
        a, b1, c2, x = b, c, d, math.inf
    elif abs(d) < EPSILON:
        b1, c2, x = b, c, 0.0
    else:
        x, b1, c2, qd, q = _evaluate(a, b, c, d, -(b / a) / 3.0)
        t = q / a
        r = abs(t) ** (1.0 / 3.0)
        s = -1.0 if t < 0 else 1.0
        td = -qd / a
        rd = _PLASTIC * max(r, math.sqrt(td)) if td > 0 else r
        x0 = x - s * rd
        if x0 != x:
            for _ in range(CUBIC_NEWTON_MAX_ITER):
                x, b1, c2, qd, q = _evaluate(a, b, c, d, x0)
                x0 = x if qd == 0 else x - q / qd / (1.0 + MACHINE_EPSILON)
                if not s * x0 > s * x:
                    break
            else:
                warnings.warn(
                    f"solve_cubic: Newton polish did not settle within "
                    f"{CUBIC_NEWTON_MAX_ITER} iterations (x={x!r})",
                    RuntimeWarning,
                )
            # Deflating by division is more accurate than the Horner
            # remainder when the cubic term dominates.
            if x and abs(a) * x * x > abs(d / x):
                c2 = -d / x
                b1 = (c2 - c) / x

    start = len(roots)
    count = solve_quadratic(a, b1, c2, roots, lo, hi)
    found = roots[start:]
    if count == 0 or (count > 0 and x not in found):
        v = _bounded(x, lo, hi)
        if v is not None:
            roots.append(v)
            count += 1
    return count
