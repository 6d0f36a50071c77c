from __future__ import annotations

from typing import Any, Iterable, Mapping

QUANTITY_COLUMN = "Approx Waste Quantity Found at GVP"

WASTE_WEIGHTS = {
    "below_500_kg": 3.5,
    "some_100_kg": 1,
    "_500kg_1_tonne": 7.5,
    "above_1_tonne": 10,
}


def waste_weight(bucket: object) -> float:
    if not isinstance(bucket, str):
        return 0
    return WASTE_WEIGHTS.get(bucket, 0)


def total_volume(records: Iterable[Mapping[str, Any]], column: str = QUANTITY_COLUMN) -> float:
    """Sum of bucket weights ("hath gadi" volume) over the records."""
    return sum(waste_weight(record.get(column)) for record in records)
