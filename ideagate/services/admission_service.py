"""IdeaAdmissionGate: two-phase admission of raw idea text.

Architecture:
- Phase 1: local word count (no network); ideas under two words are rejected
- Phase 2: one classifier call wrapped in asyncio.wait_for(timeout=...)
- No retries: a failed or timed-out call is not repeated
- Fail-open: classifier errors, timeouts and unrecognized labels admit the idea
- admit() NEVER raises for collaborator failures; they are logged as warnings
"""

import asyncio

import structlog

from ideagate.core.config import get_settings
from ideagate.domain.ideas import (
    AdmissionResult,
    check_idea_detail,
    count_words,
    parse_classification,
    resolve_classification,
)
from ideagate.services.classifier import AnthropicIdeaClassifier, IdeaClassifier

logger = structlog.get_logger(__name__)


class IdeaAdmissionGate:
    """Decides whether raw idea text may proceed into assessment.

    Public API:
        admit(idea_text) -> AdmissionResult

    Holds no per-request state, so one gate can serve concurrent requests.
    """

    def __init__(
        self,
        classifier: IdeaClassifier | None = None,
        timeout_seconds: float | None = None,
    ):
        settings = get_settings()
        self.classifier = classifier or AnthropicIdeaClassifier()
        self.timeout_seconds = (
            timeout_seconds if timeout_seconds is not None else settings.classifier_timeout_seconds
        )

    async def admit(self, idea_text: str) -> AdmissionResult:
        """Run both admission phases for one idea.

        Args:
            idea_text: Raw text submitted by the user

        Returns:
            AdmissionResult; rejections carry a user-facing reason
        """
        trimmed = idea_text.strip()
        word_count = count_words(trimmed)

        rejection = check_idea_detail(trimmed)
        if rejection is not None:
            logger.info(
                "idea_admission_decided",
                phase="local",
                word_count=word_count,
                admitted=False,
            )
            return rejection

        try:
            raw_label = await asyncio.wait_for(
                self.classifier.classify(trimmed),
                timeout=self.timeout_seconds,
            )
        except Exception as e:
            logger.warning(
                "idea_classification_failed",
                word_count=word_count,
                error=str(e),
                error_type=type(e).__name__,
            )
            return AdmissionResult(True, degraded=True)

        classification = parse_classification(raw_label)
        if classification is None:
            logger.warning("idea_classification_unrecognized", raw_label=raw_label)

        result = resolve_classification(classification)
        logger.info(
            "idea_admission_decided",
            phase="classifier",
            word_count=word_count,
            classification=classification.value if classification else None,
            admitted=result.admitted,
        )
        return result
