from __future__ import annotations

from dataclasses import asdict
from typing import Any, Callable, Dict, List

from gvp.aggregate import (
    Distribution,
    pie_for_single_record,
    problems_distribution,
    reasons_distribution,
    setting_distribution,
    solution_distribution,
    waste_type_distribution,
    who_dispose_distribution,
)
from gvp.charts import bar_chart, pie_chart, to_vega_spec
from gvp.data import WARD_COLUMN, map_points, ward_key
from gvp.filters import DashboardFilters
from gvp.point_info import describe_point
from gvp.weights import total_volume

TABLE_COLUMNS = [WARD_COLUMN, "Nearest Location", "Photo URL", "Video URL"]

CHART_TITLES = {
    "waste_type": "Waste Type",
    "problems": "Problems Faced",
    "reasons": "Reasons for Waste Accumulation",
    "who_dispose": "Who Disposes the Waste",
    "setting": "GVP Setting",
    "solutions": "Solutions Suggested",
}


def _builders(filters: DashboardFilters) -> Dict[str, Callable[[List[Dict[str, Any]]], Distribution]]:
    return {
        "waste_type": waste_type_distribution,
        "problems": problems_distribution,
        "reasons": reasons_distribution,
        "who_dispose": lambda rows: who_dispose_distribution(rows, top_n=filters.top_n),
        "setting": lambda rows: setting_distribution(rows, top_n=filters.top_n),
        "solutions": solution_distribution,
    }


def compute_distribution(name: str, filters: DashboardFilters, ctx: Dict[str, Any]) -> Distribution:
    builders = _builders(filters)
    if name not in builders:
        raise KeyError(name)
    selected = ctx.get("selected_row")
    if name == "waste_type" and selected is not None:
        return pie_for_single_record(selected)
    return builders[name](ctx.get("card_rows", []) or [])


def table_rows(rows: List[Dict[str, Any]], limit: int) -> List[Dict[str, Any]]:
    out = []
    for index, row in enumerate(rows[:limit]):
        item = {"index": index}
        for column in TABLE_COLUMNS:
            value = row.get(column)
            item[column] = ward_key(value) if column == WARD_COLUMN else value
        out.append(item)
    return out


def compute_overview(filters: DashboardFilters, ctx: Dict[str, Any]) -> Dict[str, Any]:
    card_rows: List[Dict[str, Any]] = ctx.get("card_rows", []) or []
    gvp_rows: List[Dict[str, Any]] = ctx.get("table_rows", []) or []
    selected = ctx.get("selected_row")

    distributions = {name: compute_distribution(name, filters, ctx) for name in _builders(filters)}

    charts: Dict[str, Any] = {}
    for name, dist in distributions.items():
        if name == "waste_type":
            chart = pie_chart(dist, title=CHART_TITLES[name], percent=selected is None)
        elif name == "solutions":
            chart = pie_chart(dist, title=CHART_TITLES[name])
        else:
            chart = bar_chart(dist, title=CHART_TITLES[name])
        charts[name] = to_vega_spec(chart)

    return {
        "filters": asdict(filters),
        "kpis": {
            "total_points": len(card_rows),
            "total_volume": total_volume(card_rows),
        },
        "distributions": distributions,
        "charts": charts,
        "table": table_rows(gvp_rows, filters.table_limit),
        "map_points": map_points(gvp_rows),
        "selected": (
            {"index": filters.selected_point, "record": selected, "description": describe_point(selected)}
            if selected is not None
            else None
        ),
    }
