"""Application settings loaded from environment variables."""

from __future__ import annotations

import json
import logging
from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from prompt_assistant.constants import (
    DEFAULT_ASSISTANT_NAME,
    DEFAULT_LANGUAGE,
    OPENROUTER_DEFAULT_MODEL,
    AIProvider,
)
from prompt_assistant.migration import migrate_legacy_settings, settings_from_state
from prompt_assistant.models import CustomPrompt
from prompt_assistant.prompts import DEFAULT_CUSTOM_PROMPTS

logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    """Strongly typed application configuration."""

    provider: str = Field(default=AIProvider.OPENROUTER.value, alias="AI_PROVIDER")
    openrouter_api_key: str = Field(default="", alias="OPENROUTER_API_KEY")
    openrouter_model: str = Field(default="", alias="OPENROUTER_MODEL")
    assistant_name: str = Field(default=DEFAULT_ASSISTANT_NAME, alias="ASSISTANT_NAME")
    language: str = Field(default=DEFAULT_LANGUAGE, alias="RESPONSE_LANGUAGE")
    custom_prompts: list[CustomPrompt] = Field(
        default_factory=lambda: list(DEFAULT_CUSTOM_PROMPTS), alias="CUSTOM_PROMPTS"
    )
    documents_dir: Path = Field(default=Path("."), alias="DOCUMENTS_DIR")
    settings_file: Path | None = Field(default=None, alias="SETTINGS_FILE")
    environment: str = Field(default="development", alias="ENVIRONMENT")
    log_level: Literal["debug", "info", "warning", "error", "critical"] = Field(
        default="info", alias="LOG_LEVEL"
    )
    chat_timeout: float = Field(default=30.0, alias="CHAT_TIMEOUT")
    ws_inactivity_timeout: float = Field(
        default=30.0, alias="WS_INACTIVITY_TIMEOUT", description="Seconds"
    )

    model_config = SettingsConfigDict(
        env_file=".env", case_sensitive=False, populate_by_name=True
    )

    @field_validator("assistant_name", "openrouter_model", "openrouter_api_key")
    @classmethod
    def _strip(cls, value: str) -> str:
        return value.strip()

    @field_validator("assistant_name")
    @classmethod
    def _default_assistant_name(cls, value: str) -> str:
        return value or DEFAULT_ASSISTANT_NAME

    @property
    def current_model(self) -> str:
        return self.openrouter_model or OPENROUTER_DEFAULT_MODEL

    def find_prompt(self, prompt_id: str) -> CustomPrompt | None:
        return next((prompt for prompt in self.custom_prompts if prompt.id == prompt_id), None)


def load_stored_settings(settings: Settings, path: Path) -> Settings:
    """Layer a stored settings file over ``settings``, upgrading it if needed."""

    stored = json.loads(path.read_text(encoding="utf-8")) if path.exists() else None
    result = migrate_legacy_settings(stored)

    if result.changed:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(result.state, indent=2), encoding="utf-8")
        logger.info("Stored settings migrated", extra={"settings_file": str(path)})

    return Settings.model_validate(
        {**settings.model_dump(), **settings_from_state(result.state, stored or {})}
    )


@lru_cache
def get_settings() -> Settings:
    """Return a cached instance of settings."""

    settings = Settings()
    if settings.settings_file is not None:
        settings = load_stored_settings(settings, settings.settings_file)
    return settings
