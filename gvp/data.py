from __future__ import annotations

import logging
import math
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple

import pandas as pd

from gvp.filters import DashboardFilters, normalize_filters

logger = logging.getLogger(__name__)

DATA_DIR = Path(__file__).resolve().parents[1]
DATA_FILE = "data_cleaned.json"

FORM_TYPE_COLUMN = "Type_of_Form"
GVP_FORM = "form_for_gvp"
WARD_COLUMN = "GVP Ward"
LAT_COLUMN = "GVP Latitude"
LON_COLUMN = "GVP Longitude"

MAP_CENTER = (21.135, 79.085)
WARD_COLORS = {"12": "red", "13": "green", "14": "blue", "15": "orange"}
DEFAULT_MARKER_COLOR = "gray"

Record = Dict[str, Any]


def get_data_path(path: Optional[Path] = None) -> Path:
    return Path(path) if path is not None else DATA_DIR / DATA_FILE


def file_signature(path: Path) -> Tuple[str, float]:
    return (str(path), path.stat().st_mtime)


def load_records(path: Path) -> List[Record]:
    """Read the cleaned JSON array; missing values come back as None."""
    df = pd.read_json(path, orient="records", dtype=False, convert_dates=False)
    if df.empty:
        return []
    df = df.astype(object).where(df.notna(), None)
    return df.to_dict(orient="records")


def ward_key(value: object) -> Optional[str]:
    if value is None:
        return None
    if isinstance(value, float):
        if math.isnan(value):
            return None
        if value.is_integer():
            return str(int(value))
    s = str(value).strip()
    return s or None


def _ward_number(value: object) -> float:
    key = ward_key(value)
    if key is None:
        return math.inf
    try:
        return float(key)
    except ValueError:
        return math.inf


def unique_wards(records: Iterable[Mapping[str, Any]]) -> List[str]:
    wards = {ward_key(r.get(WARD_COLUMN)) for r in records}
    wards.discard(None)
    return sorted(wards, key=lambda w: (_ward_number(w), w))


def filter_by_wards(records: Iterable[Record], wards: Iterable[str]) -> List[Record]:
    selected = set(wards)
    if not selected:
        return list(records)
    return [r for r in records if ward_key(r.get(WARD_COLUMN)) in selected]


def gvp_table_rows(records: Iterable[Record]) -> List[Record]:
    """GVP form rows ordered by ward number, rows without a ward last."""
    rows = [r for r in records if r.get(FORM_TYPE_COLUMN) == GVP_FORM]
    return sorted(rows, key=lambda r: _ward_number(r.get(WARD_COLUMN)))


def _coord(value: object) -> Optional[float]:
    if value is None or isinstance(value, bool):
        return None
    try:
        out = float(value)
    except (TypeError, ValueError):
        return None
    if math.isnan(out) or math.isinf(out):
        return None
    return out


def map_points(rows: Iterable[Record]) -> List[Dict[str, Any]]:
    points = []
    for index, row in enumerate(rows):
        lat = _coord(row.get(LAT_COLUMN))
        lon = _coord(row.get(LON_COLUMN))
        if lat is None or lon is None:
            continue
        ward = ward_key(row.get(WARD_COLUMN))
        points.append(
            {
                "index": index,
                "lat": lat,
                "lon": lon,
                "ward": ward,
                "color": WARD_COLORS.get(ward or "", DEFAULT_MARKER_COLOR),
                "nearest_location": row.get("Nearest Location"),
            }
        )
    return points


# ---------------- Public API (Streamlit parity + FastAPI use) ----------------
@lru_cache(maxsize=4)
def _load_dashboard_data_cached(signature: Tuple[str, float]) -> Dict[str, object]:
    path = Path(signature[0])
    records = load_records(path)
    logger.info("Loaded %d records from %s", len(records), path)
    return {
        "files": [path.name],
        "records": records,
        "wards": unique_wards(records),
    }


def load_dashboard_data(path: Optional[Path] = None) -> Dict[str, object]:
    data_path = get_data_path(path)
    if not data_path.exists():
        logger.warning("Data file not found: %s", data_path)
        return {"files": [], "records": [], "wards": []}
    return _load_dashboard_data_cached(file_signature(data_path))


def prepare_context(filters: dict | DashboardFilters, data_ctx: Dict[str, object]) -> Dict[str, object]:
    records: List[Record] = list(data_ctx.get("records", []) or [])
    wards: List[str] = list(data_ctx.get("wards", []) or [])
    if not isinstance(filters, DashboardFilters):
        filters = normalize_filters(filters or {}, available_wards=wards)

    filtered = filter_by_wards(records, filters.selected_wards)
    table_rows = gvp_table_rows(filtered)

    selected_row = None
    if filters.selected_point is not None and 0 <= filters.selected_point < len(table_rows):
        selected_row = table_rows[filters.selected_point]

    return {
        "filters": filters,
        "records": records,
        "filtered_records": filtered,
        "table_rows": table_rows,
        "selected_row": selected_row,
        "card_rows": [selected_row] if selected_row is not None else table_rows,
    }
