from __future__ import annotations

import argparse
from typing import Callable


def build_parser(
    *,
    cmd_solve_quadratic: Callable,
    cmd_solve_cubic: Callable,
    cmd_integrate: Callable,
    cmd_find_root: Callable,
    cmd_verify: Callable,
    cmd_golden_gen: Callable,
    cmd_golden_check: Callable,
) -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="vecnum")
    sub = p.add_subparsers(dest="cmd", required=True)

    pq = sub.add_parser("solve-quadratic", help="Real roots of a*x^2 + b*x + c")
    pq.add_argument("a", type=float)
    pq.add_argument("b", type=float)
    pq.add_argument("c", type=float)
    pq.add_argument("--lo", type=float, default=None, help="Lower root bound")
    pq.add_argument("--hi", type=float, default=None, help="Upper root bound")
    pq.set_defaults(func=cmd_solve_quadratic)

    pc = sub.add_parser("solve-cubic", help="Real roots of a*x^3 + b*x^2 + c*x + d")
    pc.add_argument("a", type=float)
    pc.add_argument("b", type=float)
    pc.add_argument("c", type=float)
    pc.add_argument("d", type=float)
    pc.add_argument("--lo", type=float, default=None, help="Lower root bound")
    pc.add_argument("--hi", type=float, default=None, help="Upper root bound")
    pc.set_defaults(func=cmd_solve_cubic)

    pi = sub.add_parser("integrate", help="Gauss-Legendre integral of a polynomial")
    pi.add_argument("coeffs", type=float, nargs="+", help="Polynomial coefficients, highest degree first")
    pi.add_argument("--a", type=float, required=True, help="Lower limit")
    pi.add_argument("--b", type=float, required=True, help="Upper limit")
    pi.add_argument("--order", type=int, default=0, help="Quadrature order 2..16 (0 = from interval length)")
    pi.set_defaults(func=cmd_integrate)

    pf = sub.add_parser("find-root", help="Bracketed Newton refinement of a polynomial root")
    pf.add_argument("coeffs", type=float, nargs="+", help="Polynomial coefficients, highest degree first")
    pf.add_argument("--x0", type=float, required=True, help="Initial guess")
    pf.add_argument("--a", type=float, required=True, help="Bracket lower end")
    pf.add_argument("--b", type=float, required=True, help="Bracket upper end")
    pf.add_argument("--iters", type=int, default=32)
    pf.add_argument("--tol", type=float, default=1e-12)
    pf.set_defaults(func=cmd_find_root)

    pv = sub.add_parser("verify", help="Property sweep over named and random polynomials")
    pv.add_argument("config", nargs="?", default="", help="YAML verify config")
    pv.add_argument("--case", action="append", default=[])
    pv.add_argument("--n-random", type=int, default=-1, help="Override sweep.n_random")
    pv.add_argument("--csv", default="")
    pv.add_argument("--plots", default="")  # dir for pngs
    pv.set_defaults(func=cmd_verify)

    pg = sub.add_parser("golden-gen")
    pg.add_argument("--out", default="tests/golden/default_golden.json")
    pg.set_defaults(func=cmd_golden_gen)

    pk = sub.add_parser("golden-check")
    pk.add_argument("--golden", default="tests/golden/default_golden.json")
    pk.add_argument("--tol", type=float, default=0.0)
    pk.set_defaults(func=cmd_golden_check)

    return p
