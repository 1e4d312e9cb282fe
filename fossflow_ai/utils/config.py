"""Application configuration."""
from __future__ import annotations

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime settings loaded from .env and environment variables."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    ai_api_endpoint: str = ""
    ai_api_key: str = Field(
        default="",
        validation_alias=AliasChoices("AI_API_KEY", "OPENAI_API_KEY"),
    )
    ai_model: str = ""
    ai_temperature: float = 0.7
    ai_max_tokens: int = 4096
    ai_provider: str = ""
    output_dir: str = "outputs"
    ai_config_file: str = "ai_config.json"


settings = Settings()
