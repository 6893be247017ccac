from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Callable
import csv
import math
import os

import numpy as np

from .config import Config, default_config
from .polynomial import solve_cubic, solve_quadratic
from .quadrature import integrate
from .rootfinding import find_root
from .testcases import PolyCase, default_cases, random_cases, residual

@dataclass
class VerifyRow:
    case: str
    kind: str
    ok: bool
    count: int
    expected: int
    max_residual: float
    max_root_err: float
    details: dict[str, Any] = field(default_factory=dict)

def solve_case(case: PolyCase) -> tuple[int, list[float]]:
    roots: list[float] = []
    if case.kind == "cubic":
        a, b, c, d = case.coeffs
        n = solve_cubic(a, b, c, d, roots, case.lo, case.hi)
    else:
        a, b, c = case.coeffs
        n = solve_quadratic(a, b, c, roots, case.lo, case.hi)
    return n, roots

def _root_error(found: list[float], expected: tuple[float, ...]) -> float:
    """Worst distance from a found root to its nearest expected root,
    relative to max(1, |expected|)."""
    if not found or not expected:
        return 0.0
    worst = 0.0
    for x in found:
        err = min(abs(x - r) / max(1.0, abs(r)) for r in expected)
        worst = max(worst, err)
    return float(worst)

def verify_case(case: PolyCase, tol_residual: float, tol_root: float) -> VerifyRow:
    n, roots = solve_case(case)
    n2, roots2 = solve_case(case)
    idempotent = (n == n2) and (roots == roots2)
    max_res = max((residual(case.coeffs, x) for x in roots), default=0.0)
    max_err = _root_error(roots, case.roots)
    expected = len(case.roots)
    ok = (n == expected and idempotent
          and max_res <= tol_residual and max_err <= tol_root)
    return VerifyRow(
        case=case.name, kind=case.kind, ok=bool(ok), count=int(n), expected=expected,
        max_residual=float(max_res), max_root_err=float(max_err),
        details={"roots": list(roots), "idempotent": bool(idempotent)},
    )

def _verify_integration(orders: list[int], seed: int, tol: float) -> list[VerifyRow]:
    """An n-point rule must integrate a degree 2n-1 polynomial exactly."""
    rng = np.random.default_rng(int(seed) + 1)
    rows = []
    for n in orders:
        coeffs = rng.uniform(-1.0, 1.0, 2 * int(n))
        a, b = 0.0, 1.0
        anti = np.polyint(coeffs)
        exact = float(np.polyval(anti, b) - np.polyval(anti, a))
        got = integrate(lambda x: float(np.polyval(coeffs, x)), a, b, int(n))
        err = abs(got - exact)
        rows.append(VerifyRow(
            case=f"integrate_order_{int(n)}", kind="integrate", ok=bool(err <= tol),
            count=int(n), expected=int(n), max_residual=float(err), max_root_err=0.0,
            details={"value": got, "exact": exact},
        ))
    return rows

_ROOT_PROBLEMS: list[tuple[str, Callable[[float], float], Callable[[float], float], float, float, float, float]] = [
    ("find_root_sqrt2", lambda x: x * x - 2.0, lambda x: 2.0 * x, 1.0, 0.0, 2.0, math.sqrt(2.0)),
    ("find_root_wallis", lambda x: x ** 3 - 2.0 * x - 5.0, lambda x: 3.0 * x * x - 2.0,
     2.5, 2.0, 3.0, 2.0945514815423265),
    ("find_root_dottie", lambda x: x - math.cos(x), lambda x: 1.0 + math.sin(x),
     0.0, 0.0, 1.0, 0.7390851332151607),
]

def _verify_find_root(tol: float) -> list[VerifyRow]:
    rows = []
    for name, f, df, x0, a, b, exact in _ROOT_PROBLEMS:
        got = find_root(f, df, x0, a, b, 50, 1e-12)
        err = abs(got - exact)
        rows.append(VerifyRow(
            case=name, kind="find_root", ok=bool(err <= tol), count=1, expected=1,
            max_residual=float(abs(f(got))), max_root_err=float(err),
            details={"value": got, "exact": exact},
        ))
    return rows

def run_verify(cfg: Config | None = None, cases: list[PolyCase] | None = None) -> list[VerifyRow]:
    """Solve named and random cases and check counts, residuals, root errors
    and repeatability; check integration exactness and root refinement."""
    if cfg is None:
        cfg = default_config()
    if cases is None:
        cases = default_cases()
    tol = cfg.tolerances
    sw = cfg.sweep
    cases = list(cases)
    cases += random_cases("quadratic", sw.n_random, sw.seed, sw.root_range, sw.min_separation)
    cases += random_cases("cubic", sw.n_random, sw.seed + 7, sw.root_range, sw.min_separation)

    rows: list[VerifyRow] = []
    for case in cases:
        tol_res = tol.cubic_rel if case.kind == "cubic" else tol.quadratic_rel
        rows.append(verify_case(case, tol_res, tol.root_rel))
    rows += _verify_integration(cfg.quadrature.orders, sw.seed, tol.integrate_abs)
    rows += _verify_find_root(tol.find_root_abs)
    return rows

def write_csv(rows: list[VerifyRow], path: str) -> None:
    os.makedirs(os.path.dirname(path) or ".", exist_ok=True)
    with open(path, "w", newline="", encoding="utf-8") as f:
        w = csv.writer(f)
        w.writerow(["case","kind","ok","count","expected","max_residual","max_root_err"])
        for r in rows:
            w.writerow([r.case,r.kind,int(r.ok),r.count,r.expected,r.max_residual,r.max_root_err])

def _worst_metrics(rows: list[VerifyRow]) -> dict[str, float]:
    worst = {}
    for nm in ["max_residual", "max_root_err"]:
        worst[nm] = max(getattr(r, nm) for r in rows)
    return worst

def summarize(rows: list[VerifyRow]) -> dict[str, Any]:
    if not rows:
        return {"n": 0, "total": 0, "ok": 0, "fail": 0, "ok_all": False, "worst": {}, "by_kind": {}}
    total = len(rows)
    ok_count = sum(1 for r in rows if r.ok)
    by_kind: dict[str, list[VerifyRow]] = {}
    for r in rows:
        by_kind.setdefault(r.kind, []).append(r)
    by_kind_summ = {}
    for kind, kind_rows in by_kind.items():
        kind_ok = sum(1 for r in kind_rows if r.ok)
        by_kind_summ[kind] = {
            "total": len(kind_rows),
            "ok": kind_ok,
            "fail": len(kind_rows) - kind_ok,
            "worst": _worst_metrics(kind_rows),
        }
    return {
        "n": total,
        "total": total,
        "ok": ok_count,
        "fail": total - ok_count,
        "ok_all": bool(ok_count == total),
        "worst": _worst_metrics(rows),
        "by_kind": by_kind_summ,
    }

def summarize_markdown(rows: list[VerifyRow]) -> str:
    s = summarize(rows)
    lines = []
    lines.append(f"- n_rows: `{s.get('n')}`")
    lines.append(f"- ok: `{s.get('ok_all')}`")
    w = s.get("worst", {})
    if w:
        lines.append("## Worst metrics")
        for k,v in w.items():
            lines.append(f"- {k}: `{v}`")
    bad = [r for r in rows if not r.ok]
    if bad:
        lines.append("\n## First failing rows")
        for r in bad[:5]:
            lines.append(f"- case={r.case} kind={r.kind} count={r.count}/{r.expected} "
                         f"residual={r.max_residual} root_err={r.max_root_err}")
    return "\n".join(lines)
