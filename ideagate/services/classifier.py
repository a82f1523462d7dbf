"""Idea classifier protocol and its Anthropic implementation.

The classifier only labels text; turning the label into an admission
decision (and deciding what a failure means) is the gate's job.
"""

from typing import Protocol, runtime_checkable

import anthropic
import structlog

from ideagate.core.config import get_settings

logger = structlog.get_logger(__name__)

_CLASSIFIER_PROMPT: str = """
You are a strict validator that classifies if a text is a potential business idea.
Output ONLY one of these labels:

- "valid_idea" → clearly describes a product, service, app, or startup concept.
- "vague" → too short, unclear, or not descriptive enough.
- "non_business" → personal statement, random phrase, insult, or unrelated to business.

Text: "{idea_text}"
"""


@runtime_checkable
class IdeaClassifier(Protocol):
    """Labels idea text as valid_idea, vague or non_business."""

    async def classify(self, idea_text: str) -> str:
        """Return the raw label emitted for the idea text.

        Raises:
            Any transport or provider exception; the caller decides what failure means.
        """
        ...


class AnthropicIdeaClassifier:
    """Single-label classification through the Anthropic Messages API.

    Deterministic sampling (temperature 0) and a tiny max_tokens ceiling,
    since only one label is expected back.
    """

    def __init__(
        self,
        client: anthropic.AsyncAnthropic | None = None,
        model: str | None = None,
        max_tokens: int | None = None,
    ):
        settings = get_settings()
        self.client = client or anthropic.AsyncAnthropic(api_key=settings.anthropic_api_key)
        self.model = model or settings.classifier_model
        self.max_tokens = max_tokens or settings.classifier_max_tokens

    async def classify(self, idea_text: str) -> str:
        response = await self.client.messages.create(
            model=self.model,
            max_tokens=self.max_tokens,
            temperature=0,
            messages=[{"role": "user", "content": self.build_prompt(idea_text)}],
        )
        if not response.content or response.content[0].type != "text":
            logger.info("idea_classifier_no_text", model=self.model)
            return ""
        return response.content[0].text

    @staticmethod
    def build_prompt(idea_text: str) -> str:
        return _CLASSIFIER_PROMPT.format(idea_text=idea_text)
