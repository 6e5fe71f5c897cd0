"""
JSON extraction from LLM responses.

Models asked for JSON answer in one of three shapes: bare JSON, JSON inside a
markdown fence, or JSON surrounded by prose. ``extract_json`` tries them in
that order and returns the first JSON object that parses.
"""

import json
import re
from typing import Any, Optional

from content_ingest.core.exceptions import AIResponseError

NO_RESPONSE_MESSAGE = "No response from AI service"
UNPARSEABLE_MESSAGE = "Unable to extract valid JSON from AI service response"

_FENCE_RE = re.compile(r"```(?:json|JSON)?\s*\n?(.*?)```", re.DOTALL)
_BRACES_RE = re.compile(r"\{.*\}", re.DOTALL)


def _load_object(candidate: str) -> Optional[dict[str, Any]]:
    try:
        value = json.loads(candidate)
    except (json.JSONDecodeError, TypeError):
        return None
    return value if isinstance(value, dict) else None


def _from_fence(raw: str) -> Optional[dict[str, Any]]:
    for match in _FENCE_RE.finditer(raw):
        parsed = _load_object(match.group(1).strip())
        if parsed is not None:
            return parsed
    return None


def _from_braces(raw: str) -> Optional[dict[str, Any]]:
    match = _BRACES_RE.search(raw)
    if match is None:
        return None
    return _load_object(match.group(0))


def require_response(raw: Optional[str]) -> str:
    """
    Return the response text, or raise if the model gave nothing back.

    Raises:
        AIResponseError: For None or whitespace-only responses.
    """
    if raw is None or not raw.strip():
        raise AIResponseError(NO_RESPONSE_MESSAGE)
    return raw


def extract_json(raw: Optional[str]) -> dict[str, Any]:
    """
    Extract a JSON object from a model response.

    Steps, first success wins:
        1. parse the whole response
        2. parse the body of a ```json fenced block
        3. parse the span from the first '{' to the last '}'

    Raises:
        AIResponseError: If the response is empty or no step yields an object.
    """
    text = require_response(raw).strip()

    for strategy in (_load_object, _from_fence, _from_braces):
        parsed = strategy(text)
        if parsed is not None:
            return parsed

    raise AIResponseError(UNPARSEABLE_MESSAGE, raw_response=text[:500])
