"""Persisted AI provider configuration."""
from __future__ import annotations

import json
import logging
from typing import Optional

from pydantic import ValidationError

from fossflow_ai.models.ai_config import AIServiceConfig, config_from_preset
from fossflow_ai.tools.file_storage import load_json, save_json
from fossflow_ai.utils.config import settings

logger = logging.getLogger(__name__)


def config_from_env() -> Optional[AIServiceConfig]:
    """Defaults from the environment, or None unless endpoint, key and model are all known.

    AI_PROVIDER names a preset whose endpoint and model stand in for an unset
    AI_API_ENDPOINT or AI_MODEL.
    """
    preset = {}
    if settings.ai_provider:
        try:
            preset = config_from_preset(settings.ai_provider).model_dump()
        except ValueError:
            logger.warning("Ignoring unknown AI_PROVIDER", extra={"provider": settings.ai_provider})
    endpoint = settings.ai_api_endpoint or preset.get("api_endpoint", "")
    model = settings.ai_model or preset.get("model", "")
    if not (endpoint and settings.ai_api_key and model):
        return None
    return AIServiceConfig(
        api_endpoint=endpoint,
        api_key=settings.ai_api_key,
        model=model,
        temperature=settings.ai_temperature,
        max_tokens=settings.ai_max_tokens,
    )


def load_ai_config() -> Optional[AIServiceConfig]:
    """Load the saved configuration, falling back to environment defaults."""
    try:
        stored = load_json(settings.ai_config_file)
        if stored is not None:
            return AIServiceConfig.model_validate(stored)
    except (json.JSONDecodeError, ValidationError) as exc:
        logger.error("Failed to load AI config", extra={"file": settings.ai_config_file, "error": str(exc)})
    return config_from_env()


def save_ai_config(config: AIServiceConfig) -> str:
    return save_json(settings.ai_config_file, config.model_dump())
