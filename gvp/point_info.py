"""Plain-text summary of one GVP record, used for map tooltips and the detail panel."""

from __future__ import annotations

from typing import Any, List, Mapping

from gvp.classify import is_flag_set
from gvp.taxonomy import PROBLEM_COLUMNS, REASON_COLUMNS, WASTE_TYPE_COLUMNS

LB = "\n"

GVP_FIELDS = [
    ("Ward", "GVP Ward"),
    ("Nearest Location", "Nearest Location"),
    ("Comments", "Comments On GVP"),
]
GVP_TAIL_FIELDS = [
    ("Waste Volume", "Waste Quantity Numeric"),
    ("In What Setting is GVP Present", "In_what_setting_is_the_GVP_pre"),
    ("Area", "Kindly_specify_the_area"),
]
CITIZEN_FIELDS = [
    ("Has The Civic Authority Conducted Any Awareness Session", "Civic Authority Conduct Any Session"),
    ("Have Interviewees Complained to Authorities", "Have Interviewees Complained to Authority"),
    ("If Yes How Was Your Experience", "If Yes How Was Your Experience "),
    ("How Often is Waste Spotted", "Notice Frequency"),
    ("Solution Suggested By Interviewee", "Solution Suggested by Interviewee"),
    ("Where Interviewee Disposes Their Waste", "Where Interviewee Dispose Their Waste"),
    ("Who Disposes The Waste", "Who Dispose"),
]
CLEARING_FIELDS = [
    ("Does Waste Get Cleared Off", "Does Waste Clear Off"),
    ("When Waste Cleared Off", "When Waste Cleared Off"),
]


def _text(value: Any) -> str:
    if value is None or value is False:
        return ""
    if isinstance(value, float):
        if value != value:
            return ""
        if value.is_integer():
            return str(int(value))
    return " ".join(str(value).split())


def _lines(record: Mapping[str, Any], fields) -> List[str]:
    out = []
    for label, column in fields:
        value = _text(record.get(column))
        if value:
            out.append(f"{label}: {value}")
    return out


def _bullets(record: Mapping[str, Any], columns, extra_column: str = "") -> List[str]:
    out = [f"• {column}" for column in columns if is_flag_set(record.get(column))]
    extra = _text(record.get(extra_column)) if extra_column else ""
    if extra:
        out.append(f"• {extra}")
    return out


def _block(title: str, bullets: List[str]) -> List[str]:
    return [f"{title}:"] + bullets if bullets else []


def describe_point(record: Mapping[str, Any]) -> str:
    gvp = _lines(record, GVP_FIELDS)
    gvp += _block("Waste Type", _bullets(record, WASTE_TYPE_COLUMNS.values(), "Other Waste Found"))
    gvp += _lines(record, GVP_TAIL_FIELDS)

    citizens = _lines(record, CITIZEN_FIELDS)
    gender = []
    for label, column in [("Women", "No of Women"), ("Men", "No of Men")]:
        value = _text(record.get(column))
        if value and value != "0":
            gender.append(f"• {label}: {value}")
    citizens += _block("Gender", gender)
    citizens += _block("Reasons for Waste Accumulation", _bullets(record, REASON_COLUMNS.values()))
    citizens += _lines(record, CLEARING_FIELDS)
    citizens += _block("Problems Faced", _bullets(record, PROBLEM_COLUMNS.values(), "Other Problem Face"))

    sections = []
    if gvp:
        sections.append(LB.join(["GVP Information"] + gvp))
    if citizens:
        sections.append(LB.join(["Information Shared by Citizens"] + citizens))
    return (LB + LB).join(sections)
