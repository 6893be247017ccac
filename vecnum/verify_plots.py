from __future__ import annotations
import os, csv
import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
import numpy as np

def _read_csv(path: str):
    with open(path, "r", encoding="utf-8") as f:
        r = csv.DictReader(f)
        rows = [row for row in r]
    return rows

def plot_residuals_csv(csv_path: str, out_dir: str) -> list[str]:
    rows = _read_csv(csv_path)
    if not rows:
        return []
    os.makedirs(out_dir, exist_ok=True)
    written = []
    kinds = sorted(set(r["kind"] for r in rows))
    for m in ["max_residual", "max_root_err"]:
        plt.figure()
        for kind in kinds:
            y = np.array([float(r[m]) for r in rows if r["kind"] == kind])
            # zeros cannot be drawn on a log axis
            y = np.maximum(y, np.finfo(float).tiny)
            x = np.arange(len(y))
            plt.plot(x, y, ".", label=kind)
        plt.yscale("log")
        plt.xlabel("case index")
        plt.ylabel(m)
        plt.legend()
        plt.tight_layout()
        path = os.path.join(out_dir, f"{m}.png")
        plt.savefig(path)
        plt.close()
        written.append(path)
    return written
