"""Question Pydantic schemas: configuration contracts for follow-up forms.

Kind/rule pairing is checked here so that a mismatched definition fails when
it is loaded, never when a user submits an answer.
"""

import re

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from ideagate.core.exceptions import QuestionConfigError
from ideagate.domain.answers import TEXT_KINDS, QuestionKind

# Question generator output uses the wizard's original input names
_KIND_ALIASES: dict[str, str] = {
    "radio": QuestionKind.SINGLE_CHOICE,
    "single_choice": QuestionKind.SINGLE_CHOICE,
    "checkbox": QuestionKind.MULTI_CHOICE,
    "multi_choice": QuestionKind.MULTI_CHOICE,
    "dropdown": QuestionKind.SELECT,
    "short_text": QuestionKind.TEXT,
    "long_text": QuestionKind.TEXTAREA,
}


class ValidationRules(BaseModel):
    """Optional constraints attached to a question."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    min_length: int | None = Field(None, alias="minLength", ge=0)
    max_length: int | None = Field(None, alias="maxLength", ge=0)
    min: int | float | None = None
    max: int | float | None = None
    pattern: str | None = None

    @model_validator(mode="after")
    def check_consistency(self) -> "ValidationRules":
        if (
            self.min_length is not None
            and self.max_length is not None
            and self.min_length > self.max_length
        ):
            raise QuestionConfigError("minLength cannot exceed maxLength")
        if self.min is not None and self.max is not None and self.min > self.max:
            raise QuestionConfigError("min cannot exceed max")
        if self.pattern is not None:
            try:
                re.compile(self.pattern)
            except re.error as e:
                raise QuestionConfigError(f"Invalid pattern: {e}") from e
        return self

    @property
    def has_text_rules(self) -> bool:
        return any(v is not None for v in (self.min_length, self.max_length, self.pattern))

    @property
    def has_number_rules(self) -> bool:
        return self.min is not None or self.max is not None


class Question(BaseModel):
    """A single follow-up question with its input kind and rules."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    id: str = Field(..., min_length=1)
    kind: QuestionKind = Field(..., alias="type")
    required: bool = False
    text: str = ""
    placeholder: str | None = None
    help_text: str | None = None
    options: list[str] | None = None
    rules: ValidationRules | None = Field(None, alias="validation")

    @field_validator("kind", mode="before")
    @classmethod
    def normalize_kind(cls, v: object) -> object:
        """Map generator aliases (radio, checkbox, ...) onto the canonical kinds."""
        if not isinstance(v, str):
            return v
        v = v.strip().lower()
        v = _KIND_ALIASES.get(v, v)
        if v not in {k.value for k in QuestionKind}:
            raise QuestionConfigError(f"Unknown question kind: {v!r}")
        return v

    @model_validator(mode="after")
    def check_rules_match_kind(self) -> "Question":
        """Length/pattern rules belong to text kinds, min/max to numbers, none to choices."""
        rules = self.rules
        if rules is None:
            return self

        if self.kind in TEXT_KINDS:
            if rules.has_number_rules:
                raise QuestionConfigError(
                    f"Question {self.id!r}: min/max only apply to number questions"
                )
        elif self.kind == QuestionKind.NUMBER:
            if rules.has_text_rules:
                raise QuestionConfigError(
                    f"Question {self.id!r}: minLength/maxLength/pattern only apply to text questions"
                )
        elif rules.has_text_rules or rules.has_number_rules:
            raise QuestionConfigError(
                f"Question {self.id!r}: {self.kind} questions do not take validation rules"
            )
        return self


class QuestionForm(BaseModel):
    """An ordered set of questions with unique ids."""

    questions: list[Question] = Field(default_factory=list)

    @field_validator("questions")
    @classmethod
    def unique_ids(cls, v: list[Question]) -> list[Question]:
        seen: set[str] = set()
        for question in v:
            if question.id in seen:
                raise QuestionConfigError(f"Duplicate question id: {question.id!r}")
            seen.add(question.id)
        return v

    def get(self, question_id: str) -> Question | None:
        for question in self.questions:
            if question.id == question_id:
                return question
        return None
