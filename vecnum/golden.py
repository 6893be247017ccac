from __future__ import annotations

import json
import os
from dataclasses import dataclass
from typing import Any


@dataclass
class GoldenRoots:
    case: str
    count: int
    roots: list[float]


def to_dict(entries: list[GoldenRoots]) -> dict[str, Any]:
    return {"roots": [e.__dict__ for e in entries]}


def from_dict(d: dict[str, Any]) -> list[GoldenRoots]:
    out = []
    for e in d.get("roots", []):
        out.append(
            GoldenRoots(
                case=e["case"],
                count=int(e["count"]),
                roots=[float(x) for x in e["roots"]],
            )
        )
    return out


def save(path: str, entries: list[GoldenRoots]):
    os.makedirs(os.path.dirname(path) or ".", exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(to_dict(entries), f, indent=2)


def load(path: str) -> list[GoldenRoots]:
    with open(path, "r", encoding="utf-8") as f:
        d = json.load(f)
    return from_dict(d)
