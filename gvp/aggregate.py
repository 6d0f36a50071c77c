"""Category counting and percentage distributions for the dashboard charts.

A distribution is a list of ``{"name": str, "value": float}`` dicts sorted by value
descending. Ties keep the order of the known categories (taxonomy order).
"""

from __future__ import annotations

from typing import Any, Callable, Dict, Iterable, List, Mapping, Optional, Sequence

from gvp.classify import classify, is_flag_set, normalize_text
from gvp.taxonomy import (
    DISPOSAL_TAXONOMY,
    PROBLEM_COLUMNS,
    REASON_COLUMNS,
    SETTING_COLUMNS,
    SETTING_TAXONOMY,
    SOLUTION_COLUMNS,
    SOLUTION_TAXONOMY,
    WASTE_TYPE_COLUMNS,
    WHO_DISPOSE_COLUMN,
    TaxonomyTable,
)

Record = Mapping[str, Any]
Distribution = List[Dict[str, Any]]
Extractor = Callable[[Record], Any]

MISSING_TEXT = "N/A"
DEFAULT_TOP_N = 5


def _values(extracted: Any) -> List[Any]:
    if extracted is None:
        return []
    if isinstance(extracted, (list, tuple)):
        return list(extracted)
    return [extracted]


def count_categories(
    records: Iterable[Record],
    extract: Extractor,
    table: Optional[TaxonomyTable] = None,
    *,
    categories: Sequence[str] = (),
) -> Dict[str, int]:
    """Count categories over records, seeded with `categories` at zero.

    `extract` may return one value or a list of values per record. With a table each
    value is classified first; values that resolve to None are not counted.
    """
    counts: Dict[str, int] = {c: 0 for c in categories}
    for record in records:
        for value in _values(extract(record)):
            category = classify(value, table) if table is not None else value
            if category is None:
                continue
            counts[category] = counts.get(category, 0) + 1
    return counts


def normalize_counts(
    counts: Mapping[str, int],
    *,
    keep_zero: bool = False,
    uniform_when_empty: bool = False,
    top_n: Optional[int] = None,
) -> Distribution:
    total = sum(counts.values())
    if total == 0:
        if uniform_when_empty and counts:
            share = 100 / len(counts)
            rows = [{"name": name, "value": share} for name in counts]
        elif keep_zero:
            rows = [{"name": name, "value": 0.0} for name in counts]
        else:
            rows = []
    else:
        rows = [
            {"name": name, "value": 100 * count / total}
            for name, count in counts.items()
            if count > 0 or keep_zero
        ]
    rows = sorted(rows, key=lambda r: r["value"], reverse=True)
    if top_n is not None:
        rows = rows[: max(0, int(top_n))]
    return rows


def aggregate(
    records: Iterable[Record],
    extract: Extractor,
    table: Optional[TaxonomyTable] = None,
    *,
    categories: Optional[Sequence[str]] = None,
    keep_zero: bool = False,
    uniform_when_empty: bool = False,
    top_n: Optional[int] = None,
) -> Distribution:
    if categories is None:
        categories = table.categories if table is not None else ()
    counts = count_categories(records, extract, table, categories=categories)
    return normalize_counts(counts, keep_zero=keep_zero, uniform_when_empty=uniform_when_empty, top_n=top_n)


# ---------------- Extractors ----------------
def flag_extractor(columns: Mapping[str, str]) -> Extractor:
    def extract(record: Record) -> List[str]:
        return [label for label, column in columns.items() if is_flag_set(record.get(column))]

    return extract


def first_text_extractor(columns: Sequence[str]) -> Extractor:
    def extract(record: Record) -> str:
        for column in columns:
            value = record.get(column)
            if normalize_text(value):
                return str(value)
        return ""

    return extract


def text_columns_extractor(columns: Sequence[str]) -> Extractor:
    """One value per column that is non-empty and not the "N/A" placeholder."""

    def extract(record: Record) -> List[str]:
        out = []
        for column in columns:
            value = record.get(column)
            if not isinstance(value, str):
                continue
            if value.strip() in ("", MISSING_TEXT):
                continue
            out.append(value)
        return out

    return extract


# ---------------- Dashboard breakdowns ----------------
def flag_distribution(records: Iterable[Record], columns: Mapping[str, str], *, keep_zero: bool = True) -> Distribution:
    return aggregate(records, flag_extractor(columns), categories=list(columns), keep_zero=keep_zero)


def waste_type_distribution(records: Iterable[Record], columns: Mapping[str, str] = WASTE_TYPE_COLUMNS) -> Distribution:
    return flag_distribution(records, columns, keep_zero=False)


def problems_distribution(records: Iterable[Record], columns: Mapping[str, str] = PROBLEM_COLUMNS) -> Distribution:
    return flag_distribution(records, columns)


def reasons_distribution(records: Iterable[Record], columns: Mapping[str, str] = REASON_COLUMNS) -> Distribution:
    return flag_distribution(records, columns)


def who_dispose_distribution(
    records: Iterable[Record],
    table: TaxonomyTable = DISPOSAL_TAXONOMY,
    *,
    top_n: Optional[int] = DEFAULT_TOP_N,
) -> Distribution:
    return aggregate(records, first_text_extractor([WHO_DISPOSE_COLUMN]), table, top_n=top_n)


def setting_distribution(
    records: Iterable[Record],
    table: TaxonomyTable = SETTING_TAXONOMY,
    *,
    top_n: Optional[int] = DEFAULT_TOP_N,
) -> Distribution:
    return aggregate(records, first_text_extractor(SETTING_COLUMNS), table, top_n=top_n)


def solution_distribution(
    records: Iterable[Record],
    table: TaxonomyTable = SOLUTION_TAXONOMY,
    columns: Sequence[str] = SOLUTION_COLUMNS,
) -> Distribution:
    return aggregate(records, text_columns_extractor(columns), table, keep_zero=True, uniform_when_empty=True)


def pie_for_single_record(record: Record, columns: Mapping[str, str] = WASTE_TYPE_COLUMNS) -> Distribution:
    """Presence of each waste type on one record (value 1 each, not percentages)."""
    return [{"name": label, "value": 1} for label in flag_extractor(columns)(record)]
