"""Extract the compact diagram JSON object from raw response text."""
from __future__ import annotations

import json
from typing import Any

INVALID_JSON_MESSAGE = "AI returned invalid JSON. Please try again with a clearer prompt."


class InvalidDiagramJSONError(ValueError):
    """Raised when response text is not a JSON document."""

    def __init__(self, message: str = INVALID_JSON_MESSAGE, *, raw_text: str = ""):
        super().__init__(message)
        self.raw_text = raw_text


class EmptyAIResponseError(ValueError):
    """Raised when the model returned no content at all."""

    def __init__(self, message: str = "AI returned empty response"):
        super().__init__(message)


def strip_code_fences(text: str) -> str:
    """Drop a leading ```json / ``` marker and a trailing ``` marker."""
    payload = (text or "").strip()
    if payload.startswith("```json"):
        payload = payload[7:]
    elif payload.startswith("```"):
        payload = payload[3:]
    if payload.endswith("```"):
        payload = payload[:-3]
    return payload.strip()


def _reject_constant(token: str) -> Any:
    raise ValueError(f"Non-standard JSON constant: {token}")


def parse_diagram_json(text: str) -> Any:
    """Parse *text* (optionally fenced) into a JSON value.

    Only strict JSON is accepted: ``NaN`` and ``Infinity`` are rejected.
    """
    payload = strip_code_fences(text)
    try:
        return json.loads(payload, parse_constant=_reject_constant)
    except ValueError as exc:
        raise InvalidDiagramJSONError(raw_text=text) from exc
