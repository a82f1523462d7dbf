"""Risk assessment Pydantic schemas: the payload produced by the assessment generator.

Consumed read-only: stage 1's full view attaches a RiskAssessment, locked
stages never see it. The weighted risk score and risk level are derived
here rather than trusted from the generator.
"""

from typing import Literal

from pydantic import AliasChoices, BaseModel, Field, computed_field, model_validator

from ideagate.domain.numbers import round_half_up

Verdict = Literal["proceed", "pivot", "needs_work"]
RiskLevel = Literal["Low", "Medium", "High"]

RISK_WEIGHTS: dict[str, float] = {
    "competition_level": 0.35,
    "business_viability": 0.25,
    "market_timing": 0.20,
    "execution_difficulty": 0.20,
}


def calculate_risk_score(category_scores: dict[str, float]) -> float:
    """Weighted 0-10 risk score, rounded half up to one decimal."""
    weighted = sum(category_scores[name] * weight for name, weight in RISK_WEIGHTS.items())
    return round_half_up(weighted, 1)


def risk_level_for(risk_score: float) -> RiskLevel:
    """Low up to 3.9, Medium up to 6.9, High above."""
    if risk_score <= 3.9:
        return "Low"
    if risk_score <= 6.9:
        return "Medium"
    return "High"


class CategoryScore(BaseModel):
    """Score for one risk category with optional comparison to the demo assessment."""

    score: float = Field(..., ge=0, le=10)
    demo_score: float | None = Field(None, ge=0, le=10)
    change: float | None = None
    explanation: str = ""

    @model_validator(mode="after")
    def fill_change(self) -> "CategoryScore":
        if self.change is None and self.demo_score is not None:
            self.change = round_half_up(self.score - self.demo_score, 1)
        return self


class RiskCategories(BaseModel):
    market_timing: CategoryScore
    competition_level: CategoryScore
    business_viability: CategoryScore
    execution_difficulty: CategoryScore

    def scores(self) -> dict[str, float]:
        return {name: getattr(self, name).score for name in RISK_WEIGHTS}


class TopRisk(BaseModel):
    """One of the highest-severity risks, with ordered mitigation steps."""

    title: str
    severity: float = Field(..., ge=0, le=10)
    category: str
    why_it_matters: str = Field("", validation_alias=AliasChoices("why_it_matters", "rationale"))
    mitigation_steps: list[str] = Field(default_factory=list)
    timeline: str = ""


class ScoreFactor(BaseModel):
    factor: str
    impact: str
    category: str


class Recommendation(BaseModel):
    verdict: Verdict
    verdict_label: str = ""
    confidence: int = Field(..., ge=0, le=100)
    summary: str = ""
    conditions: list[str] = Field(
        default_factory=list, validation_alias=AliasChoices("conditions", "requirements")
    )
    next_steps: list[str] = Field(default_factory=list)


class RiskAssessment(BaseModel):
    """Stage 1 assessment: category scores, top risks and a recommendation."""

    overall_score: int = Field(..., ge=0, le=100)
    verdict: Verdict
    confidence: int = Field(..., ge=0, le=100)
    categories: RiskCategories
    top_risks: list[TopRisk] = Field(default_factory=list)
    recommendation: Recommendation
    score_factors: list[ScoreFactor] = Field(default_factory=list)

    @computed_field
    @property
    def risk_score(self) -> float:
        return calculate_risk_score(self.categories.scores())

    @computed_field
    @property
    def risk_level(self) -> RiskLevel:
        return risk_level_for(self.risk_score)
