"""AI provider configuration model and presets."""
from __future__ import annotations

from typing import Dict

from pydantic import BaseModel, Field

DEFAULT_TEMPERATURE = 0.7
DEFAULT_MAX_TOKENS = 4096


class AIServiceConfig(BaseModel):
    """Connection settings for an OpenAI-compatible chat-completions API."""

    api_endpoint: str
    api_key: str = ""
    model: str
    temperature: float = Field(default=DEFAULT_TEMPERATURE, ge=0.0, le=2.0)
    max_tokens: int = Field(default=DEFAULT_MAX_TOKENS, ge=1)


AI_PRESETS: Dict[str, Dict[str, object]] = {
    "openai": {
        "api_endpoint": "https://api.openai.com/v1/chat/completions",
        "model": "gpt-4o",
        "temperature": DEFAULT_TEMPERATURE,
        "max_tokens": DEFAULT_MAX_TOKENS,
    },
    "deepseek": {
        "api_endpoint": "https://api.deepseek.com/v1/chat/completions",
        "model": "deepseek-chat",
        "temperature": DEFAULT_TEMPERATURE,
        "max_tokens": DEFAULT_MAX_TOKENS,
    },
    "ollama": {
        "api_endpoint": "http://localhost:11434/v1/chat/completions",
        "model": "llama3",
        "temperature": DEFAULT_TEMPERATURE,
        "max_tokens": DEFAULT_MAX_TOKENS,
    },
    "custom": {
        "api_endpoint": "",
        "model": "",
        "temperature": DEFAULT_TEMPERATURE,
        "max_tokens": DEFAULT_MAX_TOKENS,
    },
}


def config_from_preset(provider: str, api_key: str = "") -> AIServiceConfig:
    preset = AI_PRESETS.get(provider)
    if preset is None:
        raise ValueError(f"Unknown AI provider preset: {provider}")
    return AIServiceConfig(api_key=api_key, **preset)
