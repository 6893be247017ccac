"""Compensated (double-double) helpers for the polynomial solvers.

``get_discriminant`` evaluates ``b*b - a*c`` and falls back to Dekker's
exact-product splitting when the two terms are close enough for direct
subtraction to lose the sign.  ``get_normalization_factor`` picks a
power-of-two rescale for coefficient sets whose magnitudes would
overflow or underflow when squared.

References:
    T. J. Dekker, "A floating-point technique for extending the available
    precision", Numer. Math. 18 (1971).
    W. Kahan, "On the Cost of Floating-Point Computation Without
    Extra-Precise Arithmetic" (2004).
"""

from __future__ import annotations

import math

from .constants import NORMALIZATION_MAX, NORMALIZATION_MIN, SPLIT_FACTOR

# Finite range of a binary64 exponent (subnormals included).
_MIN_EXP = -1074
_MAX_EXP = 1023


def split(v: float) -> tuple[float, float]:
    """Split ``v`` into ``(hi, lo)`` with ``hi + lo == v`` and at most 26
    significant bits in each half, so that products of halves are exact."""
    x = v * SPLIT_FACTOR
    y = v - x
    hi = y + x
    lo = v - hi
    return hi, lo


def product_error(x: float, y: float, p: float) -> float:
    """Exact rounding error of the floating-point product ``p = x * y``."""
    xh, xl = split(x)
    yh, yl = split(y)
    return xh * yh - p + xh * yl + xl * yh + xl * yl


def get_discriminant(a: float, b: float, c: float) -> float:
    """Return ``b*b - a*c`` with a sign that is reliable to about one ulp."""
    D = b * b - a * c
    E = b * b + a * c
    if abs(D) * 3.0 < E:
        p = b * b
        q = a * c
        dp = product_error(b, b, p)
        dq = product_error(a, c, q)
        D = p - q + (dp - dq)
    return D


def get_normalization_factor(*coeffs: float) -> float:
    """Power-of-two factor bringing ``max(coeffs)`` close to 1, or 0.

    Callers pass absolute values.  Returns 0 ("no rescale needed") when
    the largest value already lies within ``[1e-8, 1e8]`` or is not
    positive, or when any value is not finite.
    """
    if not coeffs:
        return 0.0
    if not all(math.isfinite(v) for v in coeffs):
        return 0.0
    norm = max(coeffs)
    if norm <= 0.0:
        return 0.0
    if NORMALIZATION_MIN <= norm <= NORMALIZATION_MAX:
        return 0.0
    # round half up
    exp = -math.floor(math.log2(norm) + 0.5)
    exp = max(_MIN_EXP, min(_MAX_EXP, exp))
    return math.ldexp(1.0, exp)
