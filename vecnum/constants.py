"""Named numeric constants for the vecnum kernel.

These thresholds are shared by every curve-time, intersection and
arc-length consumer of the kernel.  Any change to these values is a
behaviour change and must be verified via ``vecnum verify`` and the
golden root files.

Categories
----------
EPSILON
    General "is this coefficient effectively absent" threshold.  Used by
    the polynomial solvers to detect degenerate leading coefficients and
    by the root-bounds filter as the acceptance margin.

CURVETIME_EPSILON
    Tolerance on curve-time parameters in ``[0, 1]``.

GEOMETRIC_EPSILON
    Tolerance on geometric distances (points, lengths).

TRIGONOMETRIC_EPSILON
    Tolerance on angle-derived quantities (sines, cosines, dot products
    of unit vectors).

MACHINE_EPSILON
    Raw binary precision of a double near 1.0.  The tightest threshold;
    only used where true floating-point cancellation must be detected.

KAPPA
    Control-point distance of a cubic bezier approximating a quarter
    circle of radius 1.
"""

from __future__ import annotations

import math

# ---------------------------------------------------------------------------
# Precision hierarchy
# ---------------------------------------------------------------------------
EPSILON: float = 1e-12
CURVETIME_EPSILON: float = 1e-8
GEOMETRIC_EPSILON: float = 1e-7
TRIGONOMETRIC_EPSILON: float = 1e-8
MACHINE_EPSILON: float = 1.12e-16

# ---------------------------------------------------------------------------
# Geometry
# ---------------------------------------------------------------------------
KAPPA: float = 4.0 * (math.sqrt(2.0) - 1.0) / 3.0

# ---------------------------------------------------------------------------
# Compensated arithmetic (Dekker split, 2**27 + 1)
# ---------------------------------------------------------------------------
SPLIT_FACTOR: float = 134217729.0

# Coefficient magnitudes outside this range are rescaled by a power of two
# before solving.
NORMALIZATION_MIN: float = 1e-8
NORMALIZATION_MAX: float = 1e8

# ---------------------------------------------------------------------------
# Iteration limits
# ---------------------------------------------------------------------------
CUBIC_NEWTON_MAX_ITER: int = 100

# Gauss-Legendre orders with tabulated nodes.
MIN_QUADRATURE_ORDER: int = 2
MAX_QUADRATURE_ORDER: int = 16
