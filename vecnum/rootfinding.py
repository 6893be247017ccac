from __future__ import annotations

import math
from typing import Callable

from .predicates import clamp


def find_root(
    f: Callable[[float], float],
    df: Callable[[float], float],
    x: float,
    a: float,
    b: float,
    n: int,
    tolerance: float,
) -> float:
    """Refine a root of ``f`` inside the bracket ``[a, b]`` starting at ``x``.

    Safeguarded Newton: every iterate narrows the bracket on the side given
    by the sign of ``f(x)`` (``f`` is assumed increasing through the root),
    and a Newton step that would leave the bracket is replaced by its
    midpoint.  Stops after ``n`` iterations or once the step is smaller than
    ``tolerance``.

    Returns:
        The refined root, clamped to the final bracket.
    """
    for _ in range(int(n)):
        fx = f(x)
        dfx = df(x)
        if dfx != 0:
            dx = fx / dfx
        elif fx != 0:
            # flat tangent: step out of the bracket so the midpoint is used
            dx = math.copysign(math.inf, fx)
        else:
            dx = 0.0
        nx = x - dx
        if abs(dx) < tolerance:
            x = nx
            break
        if fx > 0:
            b = x
            x = (a + b) * 0.5 if nx <= a else nx
        else:
            a = x
            x = (a + b) * 0.5 if nx >= b else nx
    return clamp(x, a, b)
