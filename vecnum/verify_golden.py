from __future__ import annotations
from dataclasses import dataclass
import math
from .golden import GoldenRoots, load as load_golden, save as save_golden
from .testcases import PolyCase, default_cases
from .verify import solve_case

@dataclass
class GoldenCheckResult:
    case: str
    ok: bool
    count_ok: bool
    max_dx: float
    details: dict

def generate_golden(*, out_path: str, cases: list[PolyCase] | None = None) -> str:
    if cases is None:
        cases = default_cases()
    entries = []
    for case in cases:
        n, roots = solve_case(case)
        entries.append(GoldenRoots(case=case.name, count=int(n), roots=[float(x) for x in roots]))
    save_golden(out_path, entries)
    return out_path

def check_against_golden(*, golden_path: str, tol: float = 0.0,
                         cases: list[PolyCase] | None = None) -> list[GoldenCheckResult]:
    """Re-solve the golden cases; roots must match in count, order and value.

    ``tol`` is an absolute bound on each root difference.  The default 0.0
    demands bit-identical output.
    """
    golden = {g.case: g for g in load_golden(golden_path)}
    if cases is None:
        cases = default_cases()
    results = []
    for case in cases:
        if case.name not in golden:
            continue
        g = golden[case.name]
        n, roots = solve_case(case)
        count_ok = (n == g.count) and (len(roots) == len(g.roots))
        if count_ok:
            diffs = [abs(x - y) for x, y in zip(roots, g.roots)]
            max_dx = float(max(diffs)) if diffs else 0.0
        else:
            max_dx = math.inf
        ok = count_ok and max_dx <= float(tol)
        results.append(GoldenCheckResult(
            case=case.name, ok=bool(ok), count_ok=bool(count_ok), max_dx=max_dx,
            details={"count": int(n), "golden_count": int(g.count), "roots": list(roots)},
        ))
    return results
