"""Assessment generator contract and response parsing.

The generator itself (prompting, competitor research, retries) lives
outside this package; this module fixes what it must hand back.
"""

from typing import Protocol, runtime_checkable

import structlog
from pydantic import ValidationError

from ideagate.schemas.assessment import RiskAssessment
from ideagate.services.llm_helpers import parse_json_response

logger = structlog.get_logger(__name__)


@runtime_checkable
class AssessmentGenerator(Protocol):
    """Produces the stage 1 RiskAssessment for an admitted idea."""

    async def generate(self, idea_text: str) -> RiskAssessment:
        ...


def parse_assessment_response(content: str) -> RiskAssessment:
    """Parse a generator's JSON reply (optionally fenced) into a RiskAssessment.

    Raises:
        json.JSONDecodeError: content is not JSON
        pydantic.ValidationError: JSON does not match the assessment shape
    """
    payload = parse_json_response(content)
    try:
        return RiskAssessment.model_validate(payload)
    except ValidationError as e:
        logger.warning(
            "assessment_payload_invalid",
            error_count=e.error_count(),
            error_type=type(e).__name__,
        )
        raise
