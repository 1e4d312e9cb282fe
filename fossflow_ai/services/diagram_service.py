"""Diagram generation and manual-edit flows.

Two entry points with different trust levels:

- ``generate_diagram``: fresh LLM output, strictly validated then normalized.
- ``apply_json``: user-supplied JSON, normalized only.
"""
from __future__ import annotations

import json
import logging
import threading
from dataclasses import dataclass
from typing import Any, Dict, Iterable, Optional

from fossflow_ai.agents.diagram_agent import generate_diagram_with_ai
from fossflow_ai.diagram.normalizer import normalize_compact_diagram
from fossflow_ai.diagram.summary import generate_diagram_summary
from fossflow_ai.models.ai_config import AIServiceConfig
from fossflow_ai.models.compact_diagram import CompactDiagram
from fossflow_ai.tools.response_parser import parse_diagram_json

logger = logging.getLogger(__name__)

_generation_lock = threading.Lock()


class GenerationInProgressError(RuntimeError):
    """Raised when a generation is requested while another is in flight."""

    def __init__(self, message: str = "A diagram generation is already in progress"):
        super().__init__(message)


@dataclass
class GenerationResult:
    raw: Dict[str, Any]
    diagram: CompactDiagram
    summary: str

    def to_dict(self) -> dict:
        return {
            "raw": self.raw,
            "diagram": self.diagram.to_compact(),
            "summary": self.summary,
        }


def generate_diagram(
    prompt: str,
    config: AIServiceConfig,
    *,
    locale: Optional[str] = None,
    existing_icons: Optional[Iterable[Any]] = None,
) -> GenerationResult:
    """Generate, validate and normalize a diagram for *prompt*.

    Failures propagate unchanged so the caller keeps its previous diagram.
    """
    if not (prompt or "").strip():
        raise ValueError("Please enter a description")
    if not config.api_key:
        raise ValueError("AI API key is not set")

    if not _generation_lock.acquire(blocking=False):
        raise GenerationInProgressError()
    try:
        try:
            raw = generate_diagram_with_ai(prompt.strip(), config, locale)
        except Exception as exc:
            logger.warning("AI diagram generation failed", extra={"model": config.model, "error": str(exc)})
            raise
    finally:
        _generation_lock.release()

    diagram = normalize_compact_diagram(raw, existing_icons)
    logger.info(
        "Generated diagram",
        extra={"model": config.model, "title": diagram.title, "items": len(diagram.items)},
    )
    return GenerationResult(raw=raw, diagram=diagram, summary=generate_diagram_summary(diagram))


def apply_json(text: str, existing_icons: Optional[Iterable[Any]] = None) -> CompactDiagram:
    """Normalize hand-edited JSON text; only undecodable text is rejected."""
    return normalize_compact_diagram(parse_diagram_json(text), existing_icons)


def format_diagram_json(text: str) -> str:
    """Pretty-print pasted diagram JSON with a 2-space indent."""
    return json.dumps(parse_diagram_json(text), indent=2, ensure_ascii=False)
