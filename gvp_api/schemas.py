from __future__ import annotations

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field


class DashboardFiltersModel(BaseModel):
    selected_wards: List[str] = Field(default_factory=list)
    selected_point: Optional[int] = None
    top_n: int = 5
    table_limit: int = 50


class DistributionItem(BaseModel):
    name: str
    value: float


class DistributionResponse(BaseModel):
    name: str
    values: List[DistributionItem]


class MetaWardsResponse(BaseModel):
    wards: List[str]


class PointResponse(BaseModel):
    index: int
    record: Dict[str, Any]
    description: str
