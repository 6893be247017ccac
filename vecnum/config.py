from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, List, Optional, Tuple
import yaml

from .constants import MAX_QUADRATURE_ORDER, MIN_QUADRATURE_ORDER

_SECTIONS = {"sweep", "tolerances", "quadrature"}
_SWEEP_KEYS = {"seed", "n_random", "root_range", "min_separation"}
_TOL_KEYS = {"quadratic_rel", "cubic_rel", "root_rel", "integrate_abs", "find_root_abs"}
_QUAD_KEYS = {"orders"}

@dataclass
class SweepConfig:
    seed: int = 12345
    n_random: int = 200
    root_range: Tuple[float, float] = (-10.0, 10.0)
    min_separation: float = 1e-3

@dataclass
class ToleranceConfig:
    quadratic_rel: float = 1e-9
    cubic_rel: float = 1e-7
    root_rel: float = 1e-6
    integrate_abs: float = 1e-12
    find_root_abs: float = 1e-9

@dataclass
class QuadratureConfig:
    orders: List[int] = field(default_factory=lambda: [2, 4, 8, 16])

@dataclass
class Config:
    sweep: SweepConfig
    tolerances: ToleranceConfig
    quadrature: QuadratureConfig


def default_config() -> Config:
    return Config(sweep=SweepConfig(), tolerances=ToleranceConfig(), quadrature=QuadratureConfig())


def _section(root: dict[str, Any], key: str, allowed: set[str]) -> dict[str, Any]:
    sec = root.get(key, None)
    if sec is None:
        return {}
    if not isinstance(sec, dict):
        raise ValueError(f"{key} must be a mapping")
    extra = sorted(set(sec.keys()) - allowed)
    if extra:
        raise ValueError(f"{key} contains unsupported keys: {extra}")
    return sec


def _parse_sweep(root: dict[str, Any]) -> SweepConfig:
    d = _section(root, "sweep", _SWEEP_KEYS)
    base = SweepConfig()
    rr = d.get("root_range", None)
    if rr is None:
        root_range = base.root_range
    else:
        if not isinstance(rr, (list, tuple)) or len(rr) != 2:
            raise ValueError("sweep.root_range must be a [lo, hi] pair")
        root_range = (float(rr[0]), float(rr[1]))
        if not root_range[0] < root_range[1]:
            raise ValueError("sweep.root_range must satisfy lo < hi")
    n_random = int(d.get("n_random", base.n_random))
    if n_random < 0:
        raise ValueError("sweep.n_random must be >= 0")
    min_sep = float(d.get("min_separation", base.min_separation))
    if min_sep < 0.0:
        raise ValueError("sweep.min_separation must be >= 0")
    return SweepConfig(
        seed=int(d.get("seed", base.seed)),
        n_random=n_random,
        root_range=root_range,
        min_separation=min_sep,
    )


def _parse_tolerances(root: dict[str, Any]) -> ToleranceConfig:
    d = _section(root, "tolerances", _TOL_KEYS)
    base = ToleranceConfig()
    vals = {k: float(d.get(k, getattr(base, k))) for k in sorted(_TOL_KEYS)}
    for k, v in vals.items():
        if not v > 0.0:
            raise ValueError(f"tolerances.{k} must be positive")
    return ToleranceConfig(**vals)


def _parse_quadrature(root: dict[str, Any]) -> QuadratureConfig:
    d = _section(root, "quadrature", _QUAD_KEYS)
    raw = d.get("orders", None)
    if raw is None:
        return QuadratureConfig()
    if not isinstance(raw, (list, tuple)) or not raw:
        raise ValueError("quadrature.orders must be a non-empty list")
    orders = [int(x) for x in raw]
    bad = [n for n in orders if n < MIN_QUADRATURE_ORDER or n > MAX_QUADRATURE_ORDER]
    if bad:
        raise ValueError(
            f"quadrature.orders must be in [{MIN_QUADRATURE_ORDER}, {MAX_QUADRATURE_ORDER}], got {bad}"
        )
    return QuadratureConfig(orders=orders)


def config_from_dict(d: Optional[dict[str, Any]]) -> Config:
    if d is None:
        d = {}
    if not isinstance(d, dict):
        raise ValueError("config root must be a mapping")
    extra = sorted(set(d.keys()) - _SECTIONS)
    if extra:
        raise ValueError(f"config contains unsupported sections: {extra}")
    return Config(
        sweep=_parse_sweep(d),
        tolerances=_parse_tolerances(d),
        quadrature=_parse_quadrature(d),
    )


def load_config(path: str) -> Config:
    with open(path,"r",encoding="utf-8") as f:
        d = yaml.safe_load(f)
    return config_from_dict(d)
