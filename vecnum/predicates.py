from __future__ import annotations

from .constants import EPSILON, MACHINE_EPSILON


def is_zero(value: float) -> bool:
    """True iff ``|value| <= EPSILON``.  NaN is never zero."""
    return -EPSILON <= value <= EPSILON


def is_machine_zero(value: float) -> bool:
    """True iff ``|value| <= MACHINE_EPSILON``.  NaN is never zero."""
    return -MACHINE_EPSILON <= value <= MACHINE_EPSILON


def clamp(value: float, lo: float, hi: float) -> float:
    """Return ``value`` saturated to the range ``[lo, hi]``."""
    if value < lo:
        return lo
    if value > hi:
        return hi
    return value
