"""Shared test fixtures for all test groups."""

import asyncio

import pytest

from ideagate.schemas.assessment import RiskAssessment


class FakeIdeaClassifier:
    """Scenario-based test double for the IdeaClassifier protocol."""

    def __init__(self, label: str = "valid_idea", error: Exception | None = None, delay: float = 0.0):
        self.label = label
        self.error = error
        self.delay = delay
        self.calls: list[str] = []

    async def classify(self, idea_text: str) -> str:
        self.calls.append(idea_text)
        if self.delay:
            await asyncio.sleep(self.delay)
        if self.error is not None:
            raise self.error
        return self.label


class InMemoryCompletionStore:
    """Dict-backed StageCompletionStore."""

    def __init__(self, completed: dict[str, set[int]] | None = None):
        self.completed = {k: set(v) for k, v in (completed or {}).items()}
        self.recorded: list[tuple[str, int]] = []

    async def load_completed_stages(self, idea_id: str) -> set[int]:
        return set(self.completed.get(idea_id, set()))

    async def record_stage_completion(self, idea_id: str, stage_id: int) -> None:
        self.recorded.append((idea_id, stage_id))
        self.completed.setdefault(idea_id, set()).add(stage_id)


@pytest.fixture
def fake_classifier():
    """Classifier returning valid_idea."""
    return FakeIdeaClassifier()


@pytest.fixture
def completion_store():
    return InMemoryCompletionStore()


@pytest.fixture
def assessment_payload() -> dict:
    """Realistic stage 1 assessment payload as emitted by the generator."""
    return {
        "overall_score": 87,
        "verdict": "proceed",
        "confidence": 78,
        "categories": {
            "market_timing": {
                "score": 6.5,
                "demo_score": 6.5,
                "explanation": "AI adoption accelerating in agriculture",
            },
            "competition_level": {"score": 7.5, "explanation": "Multiple established players"},
            "business_viability": {
                "score": 6.5,
                "demo_score": 7.0,
                "explanation": "Validation-first approach improves viability",
            },
            "execution_difficulty": {
                "score": 4.5,
                "demo_score": 6.0,
                "change": -1.5,
                "explanation": "Tech background reduces execution risk",
            },
        },
        "top_risks": [
            {
                "title": "High Competition",
                "severity": 7.5,
                "category": "Competition",
                "why_it_matters": "Established players have strong customer bases.",
                "mitigation_steps": [
                    "Focus exclusively on wine grapes",
                    "Partner with 2-3 vineyards for co-design",
                ],
                "timeline": "Before starting",
            }
        ],
        "recommendation": {
            "verdict": "proceed",
            "verdict_label": "Strong Potential",
            "confidence": 78,
            "summary": "Promising niche with a clear validation path.",
            "requirements": ["Secure two pilot vineyards"],
            "next_steps": ["Interview 10 growers", "Build disease-alert prototype"],
        },
        "score_factors": [
            {"factor": "Relevant tech background", "impact": "reduces development risk", "category": "execution"}
        ],
    }


@pytest.fixture
def assessment(assessment_payload) -> RiskAssessment:
    return RiskAssessment.model_validate(assessment_payload)
