from __future__ import annotations

from dataclasses import replace

import numpy as np

from .cli_parser import build_parser
from .config import default_config, load_config
from .polynomial import solve_cubic, solve_quadratic
from .quadrature import integrate, quadrature_order
from .rootfinding import find_root
from .testcases import select_cases


def _fmt_roots(roots: list[float]) -> str:
    return "[" + ", ".join(f"{x:.17g}" for x in roots) + "]"


def _cmd_solve_quadratic(args) -> None:
    roots: list[float] = []
    n = solve_quadratic(args.a, args.b, args.c, roots, args.lo, args.hi)
    print(f"[solve-quadratic] count={n} roots={_fmt_roots(roots)}")


def _cmd_solve_cubic(args) -> None:
    roots: list[float] = []
    n = solve_cubic(args.a, args.b, args.c, args.d, roots, args.lo, args.hi)
    print(f"[solve-cubic] count={n} roots={_fmt_roots(roots)}")


def _cmd_integrate(args) -> None:
    coeffs = np.asarray(args.coeffs, dtype=float)
    order = int(args.order) if args.order else quadrature_order(args.a, args.b)
    try:
        val = integrate(lambda x: float(np.polyval(coeffs, x)), args.a, args.b, order)
    except ValueError as exc:
        raise SystemExit(f"[integrate] {exc}")
    print(f"[integrate] order={order} value={val:.17g}")


def _cmd_find_root(args) -> None:
    coeffs = np.asarray(args.coeffs, dtype=float)
    dcoeffs = np.polyder(coeffs)
    if not args.a < args.b:
        raise SystemExit("[find-root] bracket must satisfy a < b")
    x = find_root(
        lambda t: float(np.polyval(coeffs, t)),
        lambda t: float(np.polyval(dcoeffs, t)),
        args.x0,
        args.a,
        args.b,
        int(args.iters),
        float(args.tol),
    )
    print(f"[find-root] x={x:.17g} f(x)={float(np.polyval(coeffs, x)):.3e}")


def _cmd_verify(args) -> None:
    cfg = load_config(args.config) if args.config else default_config()
    if args.n_random >= 0:
        cfg = replace(cfg, sweep=replace(cfg.sweep, n_random=int(args.n_random)))
    from .verify import run_verify, summarize, write_csv

    try:
        cases = select_cases(args.case)
    except ValueError as exc:
        raise SystemExit(str(exc))
    rows = run_verify(cfg, cases)
    summ = summarize(rows)
    print(f"[verify] total={summ['total']} ok={summ['ok']} fail={summ['fail']}")
    for kind, s in summ["by_kind"].items():
        print(
            f"  - {kind}: ok {s['ok']}/{s['total']}  "
            f"worst residual={s['worst']['max_residual']:.3e} root_err={s['worst']['max_root_err']:.3e}"
        )
    for r in rows:
        if not r.ok:
            print(f"[verify {r.case}] FAIL count={r.count}/{r.expected} "
                  f"residual={r.max_residual:.3e} root_err={r.max_root_err:.3e}")
    if args.csv:
        write_csv(rows, args.csv)
        print(f"[verify] wrote {args.csv}")
        if args.plots:
            from .verify_plots import plot_residuals_csv

            plot_residuals_csv(args.csv, args.plots)
            print(f"[verify] plots -> {args.plots}")
    raise SystemExit(0 if summ["fail"] == 0 else 2)


def _cmd_golden_gen(args) -> None:
    from .verify_golden import generate_golden

    out = generate_golden(out_path=args.out)
    print(f"[golden-gen] wrote {out}")
    raise SystemExit(0)


def _cmd_golden_check(args) -> None:
    from .verify_golden import check_against_golden

    res = check_against_golden(golden_path=args.golden, tol=float(args.tol))
    ok = True
    for r in res:
        print(f"[golden-check {r.case}] ok={r.ok} count_ok={r.count_ok} max|dx|={r.max_dx:.3e}")
        ok = ok and r.ok
    if not res:
        print(f"[golden-check] no known cases in {args.golden}")
        ok = False
    raise SystemExit(0 if ok else 2)


def main(argv: list[str] | None = None) -> None:
    p = build_parser(
        cmd_solve_quadratic=_cmd_solve_quadratic,
        cmd_solve_cubic=_cmd_solve_cubic,
        cmd_integrate=_cmd_integrate,
        cmd_find_root=_cmd_find_root,
        cmd_verify=_cmd_verify,
        cmd_golden_gen=_cmd_golden_gen,
        cmd_golden_check=_cmd_golden_check,
    )
    args = p.parse_args(argv)
    func = getattr(args, "func", None)
    if func is None:
        raise SystemExit(f"unsupported cmd: {getattr(args, 'cmd', None)}")
    func(args)


if __name__ == "__main__":
    main()
