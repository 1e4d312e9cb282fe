"""Diagram agent: asks an OpenAI-compatible model for a compact diagram."""
from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

from openai import APIConnectionError, APIStatusError

from fossflow_ai.diagram.icon_catalog import format_icon_reference
from fossflow_ai.models.ai_config import AIServiceConfig
from fossflow_ai.tools.response_parser import EmptyAIResponseError, parse_diagram_json
from fossflow_ai.tools.schema_validator import validate_compact_diagram
from fossflow_ai.utils.openai_client import get_openai_client

logger = logging.getLogger(__name__)


SYSTEM_PROMPT = (
    "You are an expert system architecture designer. Your task is to generate "
    "architecture diagrams in a compact JSON format.\n"
    "\n"
    "## Output Format\n"
    "\n"
    "You MUST output ONLY valid JSON (no markdown code blocks, no explanations) matching this schema:\n"
    "\n"
    "{\n"
    "  \"t\": \"string - Title of the diagram\",\n"
    "  \"i\": [\n"
    "    [\"string - Name\", \"string - Icon ID from the list below\", \"string (optional) - Description\"]\n"
    "  ],\n"
    "  \"v\": [\n"
    "    [\n"
    "      [[itemIndex, x, y], ...],\n"
    "      [[fromIndex, toIndex], ...]\n"
    "    ]\n"
    "  ],\n"
    "  \"_\": { \"f\": \"compact\", \"v\": \"1.0\" }\n"
    "}\n"
    "\n"
    "## Rules\n"
    "\n"
    "- Use EXACTLY one view in \"v\" unless explicitly asked otherwise.\n"
    "- Every item must appear in the positions list of that view.\n"
    "- itemIndex must match the item's index in \"i\" (0-based).\n"
    "- x and y are tile coordinates (integers). Keep them within -20 to 20.\n"
    "- Keep items spaced 3-6 tiles apart to avoid overlap.\n"
    "- If unsure about icon, use \"block\".\n"
    "- Output ONLY the JSON object, no other text.\n"
    "\n"
    "## Available Icons\n"
    "\n"
    "Choose the most appropriate icon for each item:\n"
    f"{format_icon_reference()}\n"
)

LANGUAGE_NAMES: Dict[str, str] = {
    "zh-CN": "中文(简体中文)",
    "zh": "中文(简体中文)",
    "zh-TW": "中文(繁體中文)",
    "ja": "日本語",
    "ko": "한국어",
    "fr": "français",
    "de": "Deutsch",
    "es": "español",
    "pt": "português",
    "ru": "русский",
    "hi": "हिन्दी",
    "bn": "বাংলা",
    "id": "Bahasa Indonesia",
    "en": "English",
    "en-US": "English",
}


class AIServiceError(RuntimeError):
    """Raised when the chat-completions endpoint rejects or fails a request."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


def resolve_output_language(locale: Optional[str]) -> str:
    if not locale:
        return ""
    return LANGUAGE_NAMES.get(locale) or LANGUAGE_NAMES.get(locale.split("-")[0]) or locale


def build_system_prompt(locale: Optional[str] = None) -> str:
    output_lang = resolve_output_language(locale)
    if not output_lang:
        return SYSTEM_PROMPT
    return (
        f"{SYSTEM_PROMPT}\n\n## Language Requirement\n\n"
        f"IMPORTANT: All text content (title in \"t\", item names, and descriptions) MUST be "
        f"written in {output_lang}. Only the JSON keys and icon IDs remain in English."
    )


def build_messages(prompt: str, locale: Optional[str] = None) -> List[Dict[str, str]]:
    return [
        {"role": "system", "content": build_system_prompt(locale)},
        {"role": "user", "content": prompt},
    ]


def _request_completion(prompt: str, config: AIServiceConfig, locale: Optional[str]) -> str:
    client = get_openai_client(config.api_key, config.api_endpoint)
    try:
        response = client.chat.completions.create(
            model=config.model,
            messages=build_messages(prompt, locale),
            temperature=config.temperature,
            max_tokens=config.max_tokens,
        )
    except APIStatusError as exc:
        raise AIServiceError(
            f"AI API error ({exc.status_code}): {exc.response.text}", status_code=exc.status_code
        ) from exc
    except APIConnectionError as exc:
        raise AIServiceError(f"AI API connection failed: {exc}") from exc

    choices = response.choices or []
    content = choices[0].message.content if choices else None
    if not content:
        raise EmptyAIResponseError()
    return content


def generate_diagram_with_ai(prompt: str, config: AIServiceConfig, locale: Optional[str] = None) -> Dict[str, Any]:
    """Request a diagram for *prompt* and return the validated raw payload.

    The payload is schema-checked but not normalized; callers run
    ``normalize_compact_diagram`` before handing it to the renderer.
    """
    content = _request_completion(prompt, config, locale)
    diagram = parse_diagram_json(content)
    validate_compact_diagram(diagram)
    logger.info(
        "AI diagram received",
        extra={"model": config.model, "items": len(diagram["i"]), "views": len(diagram["v"])},
    )
    return diagram
