from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


@dataclass(frozen=True)
class SelectedFile:
    slot: str
    filename: str
    text: str

    @property
    def size(self) -> int:
        return len(self.text)


# -----------------------------
# Model response (camelCase on the wire)
# -----------------------------
class _WireModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class Sentiment(_WireModel):
    positive: float
    neutral: float
    negative: float


class Theme(_WireModel):
    theme: str
    summary: str


class ContentStrength(_WireModel):
    strength: str
    quotes: List[str] = Field(default_factory=list)


class ImprovementArea(_WireModel):
    area: str
    suggestion: str
    quotes: List[str] = Field(default_factory=list)


class PeriodAnalysis(_WireModel):
    sentiment: Optional[Sentiment] = None
    thematic_analysis: List[Theme] = Field(default_factory=list, alias="thematicAnalysis")
    content_strengths: List[ContentStrength] = Field(default_factory=list, alias="contentStrengths")
    improvement_areas: List[ImprovementArea] = Field(default_factory=list, alias="improvementAreas")


class ActionPoint(_WireModel):
    action: str
    rationale: str


class ComparisonReport(_WireModel):
    comparative_summary: str = Field(alias="comparativeSummary")
    period1_analysis: PeriodAnalysis = Field(alias="period1Analysis")
    period2_analysis: PeriodAnalysis = Field(alias="period2Analysis")
    action_points: List[ActionPoint] = Field(default_factory=list, alias="actionPoints")

    @property
    def periods(self) -> list[tuple[str, PeriodAnalysis]]:
        return [
            ("Teaching Period 1", self.period1_analysis),
            ("Teaching Period 2", self.period2_analysis),
        ]
