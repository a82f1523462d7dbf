"""Tests for per-field answer validation.

Tests enforce pure function behavior:
- Never raises, always returns a ValidationOutcome
- First violation wins, in required -> length -> pattern order
- Bounds are inclusive
"""
import pytest

from ideagate.domain.answers import (
    FORMAT_MESSAGE,
    REQUIRED_CHOICE_MESSAGE,
    REQUIRED_MESSAGE,
    QuestionKind,
    ValidationOutcome,
    validate_answer,
    validate_answers,
)
from ideagate.schemas.questions import Question, QuestionForm, ValidationRules

pytestmark = pytest.mark.unit


def _text(required=False, **rules) -> Question:
    return Question(
        id="problem",
        kind=QuestionKind.TEXT,
        required=required,
        rules=ValidationRules(**rules) if rules else None,
    )


def _number(required=False, **rules) -> Question:
    return Question(
        id="budget",
        kind=QuestionKind.NUMBER,
        required=required,
        rules=ValidationRules(**rules) if rules else None,
    )


class TestRequired:
    """Required questions reject absent and empty values."""

    @pytest.mark.parametrize("value", [None, ""])
    def test_required_text_rejects_empty(self, value):
        outcome = validate_answer(_text(required=True), value)
        assert outcome == ValidationOutcome(False, REQUIRED_MESSAGE)

    def test_required_number_rejects_none(self):
        assert validate_answer(_number(required=True), None).valid is False

    def test_required_multi_choice_rejects_empty_list(self):
        question = Question(id="channels", kind="multi-choice", required=True, options=["a", "b"])
        outcome = validate_answer(question, [])
        assert outcome.valid is False
        assert outcome.reason == REQUIRED_CHOICE_MESSAGE

    def test_required_multi_choice_accepts_single_selection(self):
        question = Question(id="channels", kind="multi-choice", required=True, options=["a", "b"])
        assert validate_answer(question, ["a"]).valid is True

    def test_required_multi_choice_accepts_any_count(self):
        question = Question(id="channels", kind="multi-choice", required=True, options=["a", "b", "c"])
        assert validate_answer(question, ["a", "b", "c"]).valid is True

    def test_required_single_choice_accepts_value(self):
        question = Question(id="stage", kind="single-choice", required=True, options=["idea", "mvp"])
        assert validate_answer(question, "mvp").valid is True


class TestOptional:
    """Optional questions accept empty values regardless of rules."""

    @pytest.mark.parametrize("value", [None, "", []])
    def test_empty_optional_text_with_rules_is_valid(self, value):
        question = _text(min_length=10, pattern=r"^\d+$")
        assert validate_answer(question, value).valid is True

    def test_empty_optional_number_with_bounds_is_valid(self):
        assert validate_answer(_number(min=5, max=10), None).valid is True

    def test_empty_optional_multi_choice_is_valid(self):
        question = Question(id="channels", kind="multi-choice", options=["a"])
        assert validate_answer(question, []).valid is True


class TestTextRules:
    """minLength, maxLength and pattern on text and textarea questions."""

    def test_min_length_reports_remaining_characters(self):
        outcome = validate_answer(_text(min_length=10), "abcdefg")
        assert outcome.valid is False
        assert "3 more needed" in outcome.reason
        assert outcome.reason == "Minimum 10 characters required. 3 more needed."

    def test_min_length_exact_is_valid(self):
        assert validate_answer(_text(min_length=10), "abcdefghij").valid is True

    def test_max_length_exceeded(self):
        outcome = validate_answer(_text(max_length=5), "abcdef")
        assert outcome.valid is False
        assert outcome.reason == "Maximum 5 characters allowed."

    def test_max_length_exact_is_valid(self):
        assert validate_answer(_text(max_length=5), "abcde").valid is True

    def test_pattern_mismatch_uses_generic_message(self):
        outcome = validate_answer(_text(pattern=r"^\d{5}$"), "abcde")
        assert outcome.valid is False
        assert outcome.reason == FORMAT_MESSAGE
        assert r"\d" not in outcome.reason

    def test_pattern_match_is_valid(self):
        assert validate_answer(_text(pattern=r"^\d{5}$"), "12345").valid is True

    def test_pattern_uses_search_semantics(self):
        assert validate_answer(_text(pattern=r"\d"), "room 4").valid is True

    def test_short_and_pattern_failing_reports_length_first(self):
        outcome = validate_answer(_text(min_length=10, pattern=r"^\d+$"), "abc")
        assert outcome.reason == "Minimum 10 characters required. 7 more needed."

    def test_long_and_pattern_failing_reports_max_length_first(self):
        outcome = validate_answer(_text(max_length=3, pattern=r"^\d+$"), "abcdef")
        assert outcome.reason == "Maximum 3 characters allowed."

    def test_textarea_uses_text_rules(self):
        question = Question(id="story", kind="textarea", rules={"minLength": 20})
        outcome = validate_answer(question, "too short")
        assert "11 more needed" in outcome.reason

    def test_non_string_value_is_coerced(self):
        assert validate_answer(_text(min_length=3), 12345).valid is True

    def test_text_without_rules_is_valid(self):
        assert validate_answer(_text(), "anything").valid is True

    def test_int_too_long_to_render_exceeds_max_length(self):
        outcome = validate_answer(_text(max_length=10), 10**5000)
        assert outcome == ValidationOutcome(False, "Maximum 10 characters allowed.")

    def test_int_too_long_to_render_without_max_length(self):
        outcome = validate_answer(_text(pattern=r"^\d+$"), 10**5000)
        assert outcome == ValidationOutcome(False, FORMAT_MESSAGE)

    def test_huge_int_without_rules_is_valid(self):
        assert validate_answer(_text(), 10**5000).valid is True


class TestNumberRules:
    """Numeric coercion and inclusive min/max bounds."""

    def test_below_min(self):
        outcome = validate_answer(_number(min=5, max=10), 4)
        assert outcome.valid is False
        assert outcome.reason == "Must be at least 5"

    def test_above_max(self):
        outcome = validate_answer(_number(min=5, max=10), 11)
        assert outcome.valid is False
        assert outcome.reason == "Must be no more than 10"

    @pytest.mark.parametrize("value", [5, 10, 7.5, "5", " 10 "])
    def test_bounds_inclusive(self, value):
        assert validate_answer(_number(min=5, max=10), value).valid is True

    @pytest.mark.parametrize(
        "value",
        ["abc", "12abc", "nan", "inf", "-Infinity", float("inf"), float("nan"), 10**400, True, ["5"]],
    )
    def test_not_a_number(self, value):
        outcome = validate_answer(_number(min=5, max=10), value)
        assert outcome.valid is False
        assert "not a valid number" in outcome.reason

    def test_numeric_string_below_min(self):
        assert validate_answer(_number(min=5), "4").reason == "Must be at least 5"

    def test_float_bound_prints_without_decimal(self):
        assert validate_answer(_number(min=5.0), 4).reason == "Must be at least 5"
        assert validate_answer(_number(max=10.0), 11).reason == "Must be no more than 10"

    def test_fractional_bound_keeps_decimal(self):
        assert validate_answer(_number(min=2.5), 2).reason == "Must be at least 2.5"

    def test_number_without_rules_still_checks_numeric(self):
        assert validate_answer(_number(), "abc").valid is False
        assert validate_answer(_number(), "42").valid is True


class TestChoiceKinds:
    """Choice kinds carry no rules beyond required."""

    @pytest.mark.parametrize("kind", ["single-choice", "select"])
    def test_any_choice_value_is_valid(self, kind):
        question = Question(id="q", kind=kind, options=["x"])
        assert validate_answer(question, "x").valid is True


class TestValidateAnswers:
    """Whole-form validation returns only failures, in form order."""

    def test_collects_failures(self):
        form = QuestionForm(
            questions=[
                _text(required=True, min_length=10),
                _number(required=True, min=5, max=10),
                Question(id="notes", kind="textarea"),
            ]
        )
        errors = validate_answers(form, {"problem": "short", "budget": 20})
        assert list(errors) == ["problem", "budget"]
        assert errors["budget"] == "Must be no more than 10"

    def test_missing_answers_treated_as_absent(self):
        form = QuestionForm(questions=[_text(required=True)])
        assert validate_answers(form, {}) == {"problem": REQUIRED_MESSAGE}

    def test_all_valid_returns_empty(self):
        form = QuestionForm(questions=[_number(min=1)])
        assert validate_answers(form, {"budget": 3}) == {}
