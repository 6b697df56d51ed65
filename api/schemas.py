from __future__ import annotations

from typing import Any, Dict, List, Literal, Optional

from pydantic import BaseModel, Field


class ThemeModel(BaseModel):
    theme: Literal["light", "dark"] = "light"


class StatCardModel(BaseModel):
    label: str
    value: Any = None


class NumericStatModel(BaseModel):
    feature: str
    mean: str
    sd: str
    text: str


class RecommendationModel(BaseModel):
    topic: str
    text: str


class DashboardResponse(BaseModel):
    status: Literal["loading", "error", "ready"]
    error: Optional[str] = None
    theme: Literal["light", "dark"] = "light"
    cards: List[StatCardModel] = Field(default_factory=list)
    numeric_stats: List[NumericStatModel] = Field(default_factory=list)
    series: List[Dict[str, Any]] = Field(default_factory=list)
    charts: Dict[str, Dict[str, Any]] = Field(default_factory=dict)
    recommendations: List[RecommendationModel] = Field(default_factory=list)
