from __future__ import annotations

import argparse
import json
import math
import os
import sys
import time
from statistics import median

import numpy as np

ROOT_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT_DIR not in sys.path:
    sys.path.insert(0, ROOT_DIR)

from vecnum.polynomial import solve_cubic, solve_quadratic
from vecnum.quadrature import integrate
from vecnum.rootfinding import find_root
from vecnum.testcases import random_cases, residual


def _measure_us(repeats: int, fn) -> float:
    """Median wall time of ``fn()`` in microseconds per call."""
    vals: list[float] = []
    for _ in range(max(1, int(repeats))):
        t0 = time.perf_counter()
        n_calls = fn()
        dt = time.perf_counter() - t0
        vals.append(1e6 * dt / max(1, int(n_calls)))
    return float(median(vals)) if vals else 0.0


def main() -> int:
    ap = argparse.ArgumentParser(description="Timing smoke for the polynomial solvers, integrator and root finder")
    ap.add_argument("--n", type=int, default=500, help="Polynomials per batch")
    ap.add_argument("--repeats", type=int, default=5)
    ap.add_argument("--seed", type=int, default=12345)
    ap.add_argument("--out-json", default="results/bench_solvers.summary.json")
    ap.add_argument("--strict", action="store_true")
    ap.add_argument("--max-us-per-call", type=float, default=500.0)
    ap.add_argument("--max-residual", type=float, default=1e-7)
    args = ap.parse_args()

    n = int(max(1, args.n))
    quads = random_cases("quadratic", n, int(args.seed))
    cubics = random_cases("cubic", n, int(args.seed) + 7)
    rng = np.random.default_rng(int(args.seed) + 1)
    poly = rng.uniform(-1.0, 1.0, 8)

    worst_res = {"solve_quadratic": 0.0, "solve_cubic": 0.0}

    def _quadratic():
        for case in quads:
            roots: list[float] = []
            solve_quadratic(*case.coeffs, roots)
            for x in roots:
                worst_res["solve_quadratic"] = max(worst_res["solve_quadratic"], residual(case.coeffs, x))
        return len(quads)

    def _cubic():
        for case in cubics:
            roots: list[float] = []
            solve_cubic(*case.coeffs, roots)
            for x in roots:
                worst_res["solve_cubic"] = max(worst_res["solve_cubic"], residual(case.coeffs, x))
        return len(cubics)

    def _integrate():
        for _ in range(n):
            integrate(lambda x: float(np.polyval(poly, x)), 0.0, 1.0, 16)
        return n

    def _find_root():
        for _ in range(n):
            find_root(lambda x: x * x - 2.0, lambda x: 2.0 * x, 1.0, 0.0, 2.0, 50, 1e-12)
        return n

    timings = {
        "solve_quadratic": _measure_us(args.repeats, _quadratic),
        "solve_cubic": _measure_us(args.repeats, _cubic),
        "integrate": _measure_us(args.repeats, _integrate),
        "find_root": _measure_us(args.repeats, _find_root),
    }
    sqrt2_err = abs(find_root(lambda x: x * x - 2.0, lambda x: 2.0 * x, 1.0, 0.0, 2.0, 50, 1e-12) - math.sqrt(2.0))

    rows = []
    by_case = {}
    for name, us in timings.items():
        res = float(worst_res.get(name, 0.0))
        ok = bool(us <= float(args.max_us_per_call) and res <= float(args.max_residual))
        if name == "find_root":
            ok = ok and sqrt2_err <= 1e-9
        rows.append({"case": name, "ok": ok, "us_per_call": float(us), "max_residual": res})
        by_case[name] = {
            "total": 1,
            "ok": int(ok),
            "fail": int(not ok),
            "worst": {"us_per_call": float(us), "max_residual": res},
        }
    n_ok = sum(1 for r in rows if r["ok"])
    ok_all = bool(n_ok == len(rows))

    summary = {
        "n": len(rows),
        "total": len(rows),
        "ok": n_ok,
        "fail": len(rows) - n_ok,
        "ok_all": ok_all,
        "worst": {
            "us_per_call": max(r["us_per_call"] for r in rows),
            "max_residual": max(r["max_residual"] for r in rows),
            "find_root_sqrt2_err": float(sqrt2_err),
        },
        "by_case": by_case,
        "rows": rows,
        "thresholds": {
            "max_us_per_call": float(args.max_us_per_call),
            "max_residual": float(args.max_residual),
        },
    }

    os.makedirs(os.path.dirname(args.out_json) or ".", exist_ok=True)
    with open(args.out_json, "w", encoding="utf-8") as f:
        json.dump(summary, f, indent=2)
    print(f"[bench_solvers] ok_all={ok_all} worst_us={summary['worst']['us_per_call']:.2f} -> {args.out_json}")

    return 0 if ok_all or not args.strict else 2


if __name__ == "__main__":
    raise SystemExit(main())
