"""LLM response parsing utilities."""

import json
from typing import Any

# Lenient decoder that allows control characters (raw newlines, tabs) inside
# JSON strings. Long Markdown chapter bodies occasionally come back that way.
_LENIENT_DECODER = json.JSONDecoder(strict=False)


def _try_loads(text: str) -> Any:
    """Try parsing JSON, first strictly then leniently."""
    try:
        return json.loads(text)
    except json.JSONDecodeError:
        pass
    return _LENIENT_DECODER.decode(text)


def parse_json_response(text: str) -> Any:
    """Parse a structured-output response body as JSON.

    Surrounding whitespace is trimmed. The top-level value is returned as is
    (object or array); shape checks belong to the caller.

    Raises:
        ValueError: If the text is not valid JSON.
    """
    text = (text or "").strip()
    if not text:
        raise ValueError("Failed to parse JSON from LLM response: empty response")
    try:
        return _try_loads(text)
    except json.JSONDecodeError as e:
        raise ValueError(f"Failed to parse JSON from LLM response: {text[:200]}...") from e
