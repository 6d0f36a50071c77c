from __future__ import annotations

from typing import Optional

import pandas as pd

from gvp.taxonomy import TaxonomyTable


def normalize_text(value: object) -> str:
    if value is None:
        return ""
    if isinstance(value, float) and pd.isna(value):
        return ""
    return str(value).lower().strip()


def is_flag_set(value: object) -> bool:
    """True for 1/true flag values (bool, int, float or their string forms)."""
    if value is None or isinstance(value, bool):
        return value is True
    if isinstance(value, (int, float)):
        return value == 1
    return str(value).strip().lower() in {"1", "1.0", "true"}


def classify(text: object, table: TaxonomyTable) -> Optional[str]:
    lowered = normalize_text(text)
    for entry in table.entries:
        if any(keyword.lower() in lowered for keyword in entry.keywords):
            return entry.category
    return table.default
