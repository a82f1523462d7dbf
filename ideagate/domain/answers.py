"""Per-field answer validation.

Pure domain logic with no external dependencies. Rule/kind pairing is
enforced when a Question is constructed, so validation here only has to
branch on the kind.
"""

from __future__ import annotations

import math
import re
from collections.abc import Mapping
from dataclasses import dataclass
from enum import StrEnum
from typing import TYPE_CHECKING, Any

from ideagate.domain.numbers import format_number

if TYPE_CHECKING:
    from ideagate.schemas.questions import Question, QuestionForm


class QuestionKind(StrEnum):
    """Input kinds a follow-up question can declare."""

    TEXT = "text"
    TEXTAREA = "textarea"
    NUMBER = "number"
    SINGLE_CHOICE = "single-choice"
    MULTI_CHOICE = "multi-choice"
    SELECT = "select"


TEXT_KINDS = frozenset({QuestionKind.TEXT, QuestionKind.TEXTAREA})

REQUIRED_MESSAGE = "This field is required"
REQUIRED_CHOICE_MESSAGE = "Please select at least one option"
FORMAT_MESSAGE = "Please check the format and try again"
NOT_A_NUMBER_MESSAGE = "Value is not a valid number"


@dataclass(frozen=True)
class ValidationOutcome:
    """Result of validating one answer."""

    valid: bool
    reason: str = ""


VALID = ValidationOutcome(True)


def _invalid(reason: str) -> ValidationOutcome:
    return ValidationOutcome(False, reason)


def _is_empty(value: Any) -> bool:
    if value is None or value == "":
        return True
    return isinstance(value, (list, tuple)) and len(value) == 0


def _to_number(value: Any) -> float | None:
    """Coerce an answer to a number, None when it is not numeric."""
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        try:
            number = float(value)
        except OverflowError:
            return None
    elif isinstance(value, str):
        try:
            number = float(value.strip())
        except ValueError:
            return None
    else:
        return None
    if not math.isfinite(number):
        return None
    return number


def validate_answer(question: Question, value: Any) -> ValidationOutcome:
    """Validate one answer against its question.

    Pure function -- never raises, returns the first violation found.

    Args:
        question: The question being answered
        value: None, a string, a number, or a list of selected options

    Returns:
        ValidationOutcome with valid flag and a user-facing reason when invalid

    Order:
        1. Required check (empty list on multi-choice has its own message)
        2. Empty optional answers skip every other rule
        3. Text kinds: minLength, maxLength, pattern
        4. Number kind: numeric coercion, min, max (inclusive)
        5. Choice kinds carry no rules
    """
    if question.required:
        if value is None or value == "":
            return _invalid(REQUIRED_MESSAGE)
        if isinstance(value, (list, tuple)) and len(value) == 0:
            return _invalid(REQUIRED_CHOICE_MESSAGE)

    if _is_empty(value):
        return VALID

    rules = question.rules

    if question.kind in TEXT_KINDS:
        if rules is None:
            return VALID

        try:
            text = value if isinstance(value, str) else str(value)
        except ValueError:
            # int too large to render as a string
            if rules.max_length is not None:
                return _invalid(f"Maximum {rules.max_length} characters allowed.")
            return _invalid(FORMAT_MESSAGE)

        if rules.min_length is not None and len(text) < rules.min_length:
            remaining = rules.min_length - len(text)
            return _invalid(
                f"Minimum {rules.min_length} characters required. {remaining} more needed."
            )

        if rules.max_length is not None and len(text) > rules.max_length:
            return _invalid(f"Maximum {rules.max_length} characters allowed.")

        # Never echo the pattern back to the user
        if rules.pattern is not None and not re.search(rules.pattern, text):
            return _invalid(FORMAT_MESSAGE)

        return VALID

    if question.kind == QuestionKind.NUMBER:
        number = _to_number(value)
        if number is None:
            return _invalid(NOT_A_NUMBER_MESSAGE)
        if rules is None:
            return VALID

        if rules.min is not None and number < rules.min:
            return _invalid(f"Must be at least {format_number(rules.min)}")

        if rules.max is not None and number > rules.max:
            return _invalid(f"Must be no more than {format_number(rules.max)}")

    return VALID


def validate_answers(form: QuestionForm, answers: Mapping[str, Any]) -> dict[str, str]:
    """Validate every question in a form, returning {question_id: reason} for failures.

    Missing answers are treated as absent values. Failures keep form order.
    """
    errors: dict[str, str] = {}
    for question in form.questions:
        outcome = validate_answer(question, answers.get(question.id))
        if not outcome.valid:
            errors[question.id] = outcome.reason
    return errors
