"""Helpers for reading JSON out of model replies.

Models often wrap JSON in a markdown fence (```json ... ```) even when asked
not to, so replies are unwrapped before decoding.
"""

import json

FENCE = "```"


def strip_json_fences(content: str) -> str:
    """Return the body of a fenced reply, or the trimmed reply when unfenced."""
    content = content.strip()
    if not content.startswith(FENCE):
        return content
    # Drop the opening fence line, including any language tag
    _, _, body = content.partition("\n")
    return body.removesuffix(FENCE).rstrip()


def parse_json_response(content: str) -> dict | list:
    """Decode a model reply as JSON. Raises json.JSONDecodeError when it is not JSON."""
    return json.loads(strip_json_fences(content))
