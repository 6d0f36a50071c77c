from __future__ import annotations

import logging
import math

import numpy as np
import pandas as pd
from fastapi import FastAPI
from fastapi.encoders import jsonable_encoder
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, Response

from gvp.data import load_dashboard_data, prepare_context
from gvp.filters import DashboardFilters, normalize_filters
from gvp.metrics import TABLE_COLUMNS, compute_distribution, compute_overview, table_rows
from gvp.point_info import describe_point
from gvp_api.schemas import DashboardFiltersModel, DistributionResponse, MetaWardsResponse, PointResponse

app = FastAPI(title="GVP Dashboard API", version="0.1.0")
logger = logging.getLogger(__name__)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["http://localhost:3000", "http://127.0.0.1:3000"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def _filters_from_model(model: DashboardFiltersModel, *, available_wards: list[str]) -> DashboardFilters:
    raw = model.model_dump()
    return normalize_filters(raw, available_wards=available_wards)


def _json(data: object, status_code: int = 200) -> JSONResponse:
    """Return JSON with safe encoding for pandas/numpy objects."""

    def _safe_float(value: object) -> float | None:
        try:
            out = float(value)  # type: ignore[arg-type]
        except Exception:
            return None
        if math.isnan(out) or math.isinf(out):
            return None
        return out

    return JSONResponse(
        status_code=status_code,
        content=jsonable_encoder(
            data,
            custom_encoder={
                type(pd.NA): lambda _: None,
                np.integer: int,
                float: _safe_float,
                np.floating: _safe_float,
                np.bool_: bool,
                np.ndarray: lambda arr: arr.tolist(),
                pd.Timestamp: lambda ts: ts.isoformat(),
            },
        ),
    )


def _error(exc: Exception) -> JSONResponse:
    return JSONResponse(status_code=500, content={"error": str(exc), "type": type(exc).__name__})


@app.get("/meta/wards", response_model=MetaWardsResponse)
def meta_wards():
    try:
        data_ctx = load_dashboard_data()
        return _json({"wards": data_ctx.get("wards", []) or []})
    except Exception as exc:
        logger.exception("meta_wards failed")
        return _error(exc)


@app.post("/overview")
def overview(filters: DashboardFiltersModel):
    try:
        data_ctx = load_dashboard_data()
        f = _filters_from_model(filters, available_wards=data_ctx.get("wards", []))
        ctx = prepare_context(f, data_ctx)
        return _json(compute_overview(f, ctx))
    except Exception as exc:
        logger.exception("overview failed")
        return _error(exc)


@app.post("/distributions/{name}", response_model=DistributionResponse)
def distribution(name: str, filters: DashboardFiltersModel):
    try:
        data_ctx = load_dashboard_data()
        f = _filters_from_model(filters, available_wards=data_ctx.get("wards", []))
        ctx = prepare_context(f, data_ctx)
        try:
            values = compute_distribution(name, f, ctx)
        except KeyError:
            return _json({"error": f"Unknown distribution: {name}"}, status_code=404)
        return _json({"name": name, "values": values})
    except Exception as exc:
        logger.exception("distribution failed")
        return _error(exc)


@app.post("/points/{index}", response_model=PointResponse)
def point(index: int, filters: DashboardFiltersModel):
    try:
        data_ctx = load_dashboard_data()
        f = _filters_from_model(filters, available_wards=data_ctx.get("wards", []))
        ctx = prepare_context(f, data_ctx)
        rows = ctx.get("table_rows", [])
        if index < 0 or index >= len(rows):
            return _json({"error": f"No point at index {index}"}, status_code=404)
        record = rows[index]
        return _json({"index": index, "record": record, "description": describe_point(record)})
    except Exception as exc:
        logger.exception("point failed")
        return _error(exc)


@app.post("/export/table")
def export_table(filters: DashboardFiltersModel):
    data_ctx = load_dashboard_data()
    f = _filters_from_model(filters, available_wards=data_ctx.get("wards", []))
    ctx = prepare_context(f, data_ctx)
    export_df = pd.DataFrame(table_rows(ctx.get("table_rows", []), f.table_limit), columns=["index"] + TABLE_COLUMNS)
    csv_bytes = export_df.to_csv(index=False).encode("utf-8")
    return Response(content=csv_bytes, media_type="text/csv", headers={"Content-Disposition": "attachment; filename=gvp_points.csv"})
