from __future__ import annotations

from typing import Any, Dict, List, Optional

import altair as alt
import pandas as pd

alt.data_transformers.disable_max_rows()

PIE_COLORS = ["#0088FE", "#00C49F", "#FFBB28", "#FF8042", "#A020F0", "#DC143C", "#2E8B57", "#808080"]
BAR_COLORS = ["#0088FE", "#00C49F", "#FFBB28", "#FF8042", "#A020F0"]


def to_vega_spec(chart: alt.Chart) -> Dict[str, Any]:
    """Convert an Altair chart into a Vega-Lite spec dict (JSON-serializable)."""
    return chart.to_dict()


def _frame(distribution: List[Dict[str, Any]]) -> pd.DataFrame:
    df = pd.DataFrame(distribution, columns=["name", "value"])
    df["value"] = pd.to_numeric(df["value"], errors="coerce").fillna(0.0)
    return df


def pie_chart(distribution: List[Dict[str, Any]], *, title: Optional[str] = None, percent: bool = True) -> alt.Chart:
    """Donut chart of a distribution; `percent=False` for raw presence counts."""
    df = _frame(distribution)
    df["share"] = df["value"] / df["value"].sum() if df["value"].sum() else 0.0
    chart = (
        alt.Chart(df)
        .mark_arc(innerRadius=50, outerRadius=110)
        .encode(
            theta=alt.Theta("value:Q", stack=True),
            color=alt.Color("name:N", title=None, sort=df["name"].tolist(), scale=alt.Scale(range=PIE_COLORS)),
            tooltip=[
                alt.Tooltip("name:N", title="Category"),
                alt.Tooltip("value:Q", title="Share (%)" if percent else "Count", format=".1f" if percent else "d"),
                alt.Tooltip("share:Q", title="Share", format=".0%"),
            ],
        )
        .properties(height=280)
    )
    return chart.properties(title=title) if title else chart


def bar_chart(distribution: List[Dict[str, Any]], *, title: Optional[str] = None) -> alt.LayerChart:
    """Horizontal percentage bars, largest first."""
    df = _frame(distribution)
    order = df["name"].tolist()
    bars = (
        alt.Chart(df)
        .mark_bar()
        .encode(
            y=alt.Y("name:N", sort=order, title=None, axis=alt.Axis(labelLimit=260)),
            x=alt.X("value:Q", title="Share (%)", axis=alt.Axis(gridDash=[4, 4], domain=False, ticks=False)),
            color=alt.Color("name:N", legend=None, sort=order, scale=alt.Scale(range=BAR_COLORS)),
            tooltip=[alt.Tooltip("name:N", title="Category"), alt.Tooltip("value:Q", title="Share (%)", format=".1f")],
        )
    )
    labels = bars.mark_text(align="left", dx=6, fontWeight="bold").encode(text=alt.Text("value:Q", format=".1f"))
    chart = (bars + labels).properties(height=max(120, 36 * len(df)))
    return chart.properties(title=title) if title else chart
