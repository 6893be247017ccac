"""vecnum: root-finding and quadrature kernel for 2D vector graphics.

Version is single-sourced from the repository root VERSION file.
"""

from __future__ import annotations
from pathlib import Path

from .compensated import get_discriminant, get_normalization_factor, product_error, split
from .constants import (
    CURVETIME_EPSILON,
    EPSILON,
    GEOMETRIC_EPSILON,
    KAPPA,
    MACHINE_EPSILON,
    TRIGONOMETRIC_EPSILON,
)
from .polynomial import solve_cubic, solve_quadratic
from .predicates import clamp, is_machine_zero, is_zero
from .quadrature import ABSCISSAS, WEIGHTS, integrate, quadrature_order
from .rootfinding import find_root


def _read_version() -> str:
    repo_root = Path(__file__).resolve().parents[1]
    try:
        return (repo_root / "VERSION").read_text(encoding="utf-8").strip()
    except OSError:
        return "1.0.0"


__version__ = _read_version()

__all__ = [
    "ABSCISSAS",
    "CURVETIME_EPSILON",
    "EPSILON",
    "GEOMETRIC_EPSILON",
    "KAPPA",
    "MACHINE_EPSILON",
    "TRIGONOMETRIC_EPSILON",
    "WEIGHTS",
    "clamp",
    "find_root",
    "get_discriminant",
    "get_normalization_factor",
    "integrate",
    "is_machine_zero",
    "is_zero",
    "product_error",
    "quadrature_order",
    "solve_cubic",
    "solve_quadratic",
    "split",
]
