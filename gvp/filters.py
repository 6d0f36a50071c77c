from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, List, Optional


@dataclass(frozen=True)
class DashboardFilters:
    selected_wards: List[str] = field(default_factory=list)
    selected_point: Optional[int] = None
    top_n: int = 5
    table_limit: int = 50


def _as_ward_list(values: Optional[Iterable[object]]) -> List[str]:
    if not values:
        return []
    out: List[str] = []
    for v in values:
        if v is None:
            continue
        s = str(v).strip()
        if s.endswith(".0"):
            s = s[:-2]
        if s and s not in out:
            out.append(s)
    return out


def _clamped_int(value: object, default: int, low: int, high: int) -> int:
    try:
        out = int(value)
    except Exception:
        out = default
    return max(low, min(high, out))


def normalize_filters(raw: dict, *, available_wards: Optional[List[str]] = None) -> DashboardFilters:
    selected_wards = _as_ward_list(raw.get("selected_wards"))
    if available_wards is not None:
        known = set(available_wards)
        selected_wards = [w for w in selected_wards if w in known]

    selected_point = raw.get("selected_point")
    try:
        selected_point = int(selected_point) if selected_point is not None else None
    except Exception:
        selected_point = None
    if selected_point is not None and selected_point < 0:
        selected_point = None

    return DashboardFilters(
        selected_wards=selected_wards,
        selected_point=selected_point,
        top_n=_clamped_int(raw.get("top_n", 5), 5, 1, 20),
        table_limit=_clamped_int(raw.get("table_limit", 50), 50, 1, 500),
    )
