from __future__ import annotations
from dataclasses import dataclass
from typing import Optional
import numpy as np

@dataclass(frozen=True)
class PolyCase:
    name: str
    coeffs: tuple[float, ...]  # highest degree first
    roots: tuple[float, ...]   # expected real roots, sorted
    lo: Optional[float] = None
    hi: Optional[float] = None

    @property
    def kind(self) -> str:
        return "cubic" if len(self.coeffs) == 4 else "quadratic"

def residual(coeffs, x: float) -> float:
    """Relative residual |p(x)| / sum_i |c_i| |x|^i (0 when the scale is 0)."""
    c = np.asarray(coeffs, dtype=float)
    num = abs(float(np.polyval(c, x)))
    den = float(np.polyval(np.abs(c), abs(x)))
    if den == 0.0:
        return num
    return num / den

def _separated(r: np.ndarray, min_sep: float) -> bool:
    if r.size < 2:
        return True
    return bool(np.all(np.diff(np.sort(r)) > min_sep))

def random_cases(kind: str, n: int, seed: int,
                 root_range: tuple[float, float] = (-10.0, 10.0),
                 min_separation: float = 1e-3) -> list[PolyCase]:
    """Random polynomials with known, well separated real roots.

    Coefficients are expanded from the roots with ``numpy.poly`` and scaled
    by a random leading coefficient spanning six orders of magnitude.
    """
    if kind == "quadratic":
        degree = 2
    elif kind == "cubic":
        degree = 3
    else:
        raise ValueError(f"kind must be 'quadratic' or 'cubic', got {kind!r}")
    lo, hi = float(root_range[0]), float(root_range[1])
    if not lo < hi:
        raise ValueError("root_range must satisfy lo < hi")
    rng = np.random.default_rng(int(seed))
    out = []
    for i in range(int(n)):
        while True:
            r = np.sort(rng.uniform(lo, hi, degree))
            if _separated(r, float(min_separation)):
                break
        scale = 10.0 ** rng.uniform(-3.0, 3.0)
        c = scale * np.poly(r)
        out.append(PolyCase(
            name=f"{kind}_random_{i:04d}",
            coeffs=tuple(float(x) for x in c),
            roots=tuple(float(x) for x in r),
        ))
    return out

def default_cases() -> list[PolyCase]:
    return [
        PolyCase(name="quad_distinct", coeffs=(1.0, -3.0, 2.0), roots=(1.0, 2.0)),
        PolyCase(name="quad_bounded", coeffs=(1.0, -3.0, 2.0), roots=(1.0,), lo=0.0, hi=1.5),
        PolyCase(name="quad_double_root", coeffs=(1.0, -2.0, 1.0), roots=(1.0,)),
        PolyCase(name="quad_no_real", coeffs=(1.0, 0.0, 1.0), roots=()),
        PolyCase(name="quad_linear", coeffs=(0.0, 2.0, -4.0), roots=(2.0,)),
        PolyCase(name="quad_wide_spread", coeffs=(1.0, -1e8, 1.0), roots=(1e-8, 1e8)),
        PolyCase(name="quad_tiny_scale", coeffs=(1e-9, -3e-9, 2e-9), roots=(1.0, 2.0)),
        PolyCase(name="quad_huge_scale", coeffs=(1e10, -3e10, 2e10), roots=(1.0, 2.0)),
        PolyCase(name="cubic_three_roots", coeffs=(1.0, -6.0, 11.0, -6.0), roots=(1.0, 2.0, 3.0)),
        PolyCase(name="cubic_bounded", coeffs=(1.0, -6.0, 11.0, -6.0), roots=(1.0,), lo=0.0, hi=1.5),
        PolyCase(name="cubic_one_real", coeffs=(1.0, 0.0, 1.0, -2.0), roots=(1.0,)),
        PolyCase(name="cubic_zero_root", coeffs=(1.0, -3.0, 2.0, 0.0), roots=(0.0, 1.0, 2.0)),
        PolyCase(name="cubic_triple_root", coeffs=(1.0, -3.0, 3.0, -1.0), roots=(1.0,)),
        PolyCase(name="cubic_degenerate", coeffs=(0.0, 1.0, -3.0, 2.0), roots=(1.0, 2.0)),
        PolyCase(name="cubic_tiny_scale", coeffs=(1e-10, -6e-10, 11e-10, -6e-10), roots=(1.0, 2.0, 3.0)),
        PolyCase(name="cubic_huge_scale", coeffs=(1e12, -6e12, 11e12, -6e12), roots=(1.0, 2.0, 3.0)),
    ]

def select_cases(names: list[str] | None) -> list[PolyCase]:
    cases = default_cases()
    if not names:
        return cases
    wanted = set(names)
    known = {c.name for c in cases}
    unknown = sorted(wanted - known)
    if unknown:
        raise ValueError(f"Unknown cases: {unknown}. Known: {sorted(known)}")
    return [c for c in cases if c.name in wanted]
