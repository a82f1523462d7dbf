"""AnswerService: accepts follow-up answers only after per-field validation."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

import structlog

from ideagate.core.exceptions import AnswersIncompleteError
from ideagate.domain.answers import validate_answer, validate_answers
from ideagate.schemas.questions import QuestionForm

logger = structlog.get_logger(__name__)


@dataclass
class AnswerSubmission:
    """Merged answers plus the reasons any submitted answer was refused."""

    answers: dict[str, Any]
    errors: dict[str, str] = field(default_factory=dict)

    @property
    def accepted(self) -> bool:
        return not self.errors


class AnswerService:
    """Merges submitted answers into stored answers for one question form."""

    def accept_answers(
        self,
        form: QuestionForm,
        stored: Mapping[str, Any],
        submitted: Mapping[str, Any],
    ) -> AnswerSubmission:
        """Merge valid submitted answers over the stored ones.

        Invalid answers are reported and never merged; the stored value for
        that question is kept. Answers to unknown questions are dropped.
        """
        answers = dict(stored)
        errors: dict[str, str] = {}

        for question_id, value in submitted.items():
            question = form.get(question_id)
            if question is None:
                logger.warning("answer_for_unknown_question_dropped", question_id=question_id)
                continue

            outcome = validate_answer(question, value)
            if outcome.valid:
                answers[question_id] = value
            else:
                errors[question_id] = outcome.reason

        if errors:
            logger.info("answers_rejected", error_count=len(errors), question_ids=list(errors))
        return AnswerSubmission(answers=answers, errors=errors)

    def check_complete(self, form: QuestionForm, answers: Mapping[str, Any]) -> None:
        """Validate a full answer set before the form is marked complete.

        Raises:
            AnswersIncompleteError: carrying {question_id: reason} for every failure
        """
        errors = validate_answers(form, answers)
        if errors:
            logger.info("form_validation_failed", error_count=len(errors), errors=errors)
            raise AnswersIncompleteError(errors)
