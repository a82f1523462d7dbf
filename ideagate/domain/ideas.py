"""Idea admission verdicts and the local (no network) admission checks.

Pure domain logic with no external dependencies.
"""

from dataclasses import dataclass
from enum import StrEnum

MIN_IDEA_WORDS = 2

TOO_SHORT_MESSAGE = "Please describe your idea in a bit more detail (a few words is enough)."
VAGUE_MESSAGE = "Your idea seems too vague. Try describing what it does or who it helps."
NON_BUSINESS_MESSAGE = (
    "This doesn't look like a business idea. Try describing a product or service concept."
)


class IdeaClassification(StrEnum):
    """Labels the idea classifier may return."""

    VALID_IDEA = "valid_idea"
    VAGUE = "vague"
    NON_BUSINESS = "non_business"


_REJECTION_MESSAGES: dict[IdeaClassification, str] = {
    IdeaClassification.VAGUE: VAGUE_MESSAGE,
    IdeaClassification.NON_BUSINESS: NON_BUSINESS_MESSAGE,
}


@dataclass(frozen=True)
class AdmissionResult:
    """Outcome of one admission attempt."""

    admitted: bool
    reason: str = ""
    classification: IdeaClassification | None = None
    degraded: bool = False  # admitted because the classifier was unavailable


def count_words(idea_text: str) -> int:
    """Count whitespace-separated tokens, ignoring empty ones."""
    return len(idea_text.split())


def check_idea_detail(idea_text: str) -> AdmissionResult | None:
    """Run the local admission check.

    Returns:
        A rejection when the idea has fewer than MIN_IDEA_WORDS words,
        None when the idea may go on to classification.
    """
    if count_words(idea_text) < MIN_IDEA_WORDS:
        return AdmissionResult(False, TOO_SHORT_MESSAGE)
    return None


def parse_classification(raw_label: str | None) -> IdeaClassification | None:
    """Map classifier output onto a label, None when it is not one of the three.

    Comparison is trimmed and case-insensitive; surrounding quotes are ignored
    since models occasionally echo the quoted label from the prompt.
    """
    if not raw_label:
        return None
    label = raw_label.strip().strip("\"'`").strip().lower()
    try:
        return IdeaClassification(label)
    except ValueError:
        return None


def resolve_classification(classification: IdeaClassification | None) -> AdmissionResult:
    """Turn a classifier label into an admission decision.

    Rules:
        - vague / non_business: reject with a label-specific hint
        - valid_idea: admit
        - unrecognized output (None): admit, a malformed label never blocks a user
    """
    message = _REJECTION_MESSAGES.get(classification) if classification else None
    if message is not None:
        return AdmissionResult(False, message, classification=classification)
    return AdmissionResult(True, classification=classification)
