import altair as alt
import pandas as pd
import streamlit as st
from contextlib import contextmanager
from typing import List, Optional

from gvp import data as gd
from gvp.charts import bar_chart, pie_chart
from gvp.metrics import CHART_TITLES, compute_overview, table_rows

alt.data_transformers.disable_max_rows()

MARKER_HEX = {"red": "#E53935", "green": "#43A047", "blue": "#1E88E5", "orange": "#FB8C00", "gray": "#757575"}


# ---------- UI / layout helpers ----------
def inject_base_styles():
    if st.session_state.get("_base_css_injected"):
        return
    st.markdown(
        """
        <style>
        .app-top-bar {padding: 6px 0 4px;border-bottom: 1px solid #e5e7eb;margin-bottom: 10px;}
        .app-top-bar .page-title {font-size: 1.4rem;font-weight: 700;color: #111827;}
        .card {border: 1px solid #e5e7eb;border-radius: 12px;padding: 16px;background: #ffffff;
               box-shadow: 0 1px 2px rgba(0,0,0,0.04); margin-bottom: 12px;}
        .card-title {font-weight: 600;font-size: 1.0rem;color: #111827;margin-bottom: 8px;}
        .chip-row {display: flex;flex-wrap: wrap;gap: 6px;margin-top: 6px;}
        .chip {background: #f3f4f6;border: 1px solid #e5e7eb;border-radius: 14px;padding: 4px 10px;font-size: 0.85rem;color: #374151;}
        </style>
        """,
        unsafe_allow_html=True,
    )
    st.session_state["_base_css_injected"] = True


@contextmanager
def card(title: str):
    container = st.container()
    container.markdown(f"<div class='card'><div class='card-title'>{title}</div>", unsafe_allow_html=True)
    body = container.container()
    with body:
        yield body
    container.markdown("</div>", unsafe_allow_html=True)


def format_filter_summary(selected_wards: List[str], selected_label: Optional[str]) -> str:
    ward_chip = f"Wards: {', '.join(selected_wards)}" if selected_wards else "Wards: All"
    point_chip = f"Point: {selected_label}" if selected_label else "Point: All"
    return "".join([f"<span class='chip'>{txt}</span>" for txt in [ward_chip, point_chip]])


# ---------- UI setup ----------
st.set_page_config(page_title="Garbage Vulnerable Points Dashboard", layout="wide")
inject_base_styles()
st.title("Garbage Vulnerable Points Dashboard")
st.caption("Survey of garbage vulnerable points: where waste accumulates, why, and what citizens suggest.")

data_ctx = gd.load_dashboard_data()
records = data_ctx.get("records", [])
if not records:
    st.error(f"No records found. Place {gd.DATA_FILE} next to app.py.")
    st.stop()

wards = data_ctx.get("wards", [])
with st.sidebar:
    st.markdown("### Filters")
    selected_wards = st.multiselect("GVP Ward", options=wards, default=[])
    preview_ctx = gd.prepare_context({"selected_wards": selected_wards}, data_ctx)
    point_labels = ["All points"] + [
        f"{i + 1}. Ward {gd.ward_key(r.get(gd.WARD_COLUMN)) or 'N/A'} - {r.get('Nearest Location') or 'N/A'}"
        for i, r in enumerate(preview_ctx["table_rows"])
    ]
    point_choice = st.selectbox("Garbage point", options=range(len(point_labels)), format_func=lambda i: point_labels[i])
    with st.expander("Advanced settings", expanded=False):
        top_n = st.slider("Top N categories", min_value=3, max_value=12, value=5, step=1)
        table_limit = st.slider("Table rows", min_value=10, max_value=200, value=50, step=10)

filters = {
    "selected_wards": selected_wards,
    "selected_point": point_choice - 1 if point_choice else None,
    "top_n": top_n,
    "table_limit": table_limit,
}
ctx = gd.prepare_context(filters, data_ctx)
payload = compute_overview(ctx["filters"], ctx)
st.markdown(
    f"<div class='chip-row'>{format_filter_summary(selected_wards, point_labels[point_choice] if point_choice else None)}</div>",
    unsafe_allow_html=True,
)

# ---------- Cards ----------
k1, k2 = st.columns(2)
k1.metric("Total Garbage Points", f"{payload['kpis']['total_points']:,}")
k2.metric("Total Hath Gadi Volume", f"{payload['kpis']['total_volume']:,.1f}")

# ---------- Map + table ----------
left, right = st.columns([3, 2])
with left:
    with card("Map of Garbage Points"):
        points = pd.DataFrame(payload["map_points"])
        if points.empty:
            st.info("No mappable points for the current filter.")
        else:
            points["hex"] = points["color"].map(MARKER_HEX).fillna(MARKER_HEX["gray"])
            st.map(points, latitude="lat", longitude="lon", color="hex", zoom=12)
with right:
    with card("Photos and Videos of Garbage Points"):
        table = pd.DataFrame(table_rows(ctx["table_rows"], ctx["filters"].table_limit))
        if table.empty:
            st.info("No Garbage Points found for the current filter.")
        else:
            st.dataframe(
                table.drop(columns=["index"]),
                use_container_width=True,
                hide_index=True,
                column_config={
                    "Photo URL": st.column_config.LinkColumn("Photo URL", display_text="View Photo"),
                    "Video URL": st.column_config.LinkColumn("Video URL", display_text="View Video"),
                },
            )

if payload["selected"] is not None:
    with card("Selected Point"):
        st.text(payload["selected"]["description"])

# ---------- Charts ----------
dists = payload["distributions"]
c1, c2 = st.columns(2)
with c1:
    with card(CHART_TITLES["waste_type"]):
        if dists["waste_type"]:
            st.altair_chart(pie_chart(dists["waste_type"], percent=payload["selected"] is None), use_container_width=True)
        else:
            st.caption("No waste type recorded.")
with c2:
    with card(CHART_TITLES["solutions"]):
        st.altair_chart(pie_chart(dists["solutions"]), use_container_width=True)

for pair in [("problems", "reasons"), ("who_dispose", "setting")]:
    cols = st.columns(2)
    for col, name in zip(cols, pair):
        with col:
            with card(CHART_TITLES[name]):
                st.altair_chart(bar_chart(dists[name]), use_container_width=True)
