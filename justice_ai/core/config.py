from functools import lru_cache
from pathlib import Path
from typing import Optional

import httpx
from pydantic_settings import BaseSettings, SettingsConfigDict

from .constants import AppSettings, OllamaModels


class Settings(BaseSettings):
    """Application settings loaded from environment + defaults"""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    ENVIRONMENT: str = AppSettings.ENVIRONMENT
    LOG_LEVEL: str = AppSettings.LOG_LEVEL

    OLLAMA_MODEL: OllamaModels = AppSettings.OLLAMA_MODEL
    OLLAMA_BASE_URL: str = AppSettings.OLLAMA_BASE_URL
    OLLAMA_TEMPERATURE: float = AppSettings.OLLAMA_TEMPERATURE
    # Seconds; None leaves the provider call unbounded
    OLLAMA_TIMEOUT: Optional[float] = None

    DRAFT_STORE_DIR: str = AppSettings.DRAFT_STORE_DIR

    @property
    def ollama_config(self) -> dict:
        config = {
            "model": self.OLLAMA_MODEL.value,
            "base_url": self.OLLAMA_BASE_URL,
            "temperature": self.OLLAMA_TEMPERATURE,
            "format": "json",
        }
        if self.OLLAMA_TIMEOUT is not None:
            config["client_kwargs"] = {"timeout": httpx.Timeout(self.OLLAMA_TIMEOUT)}
        return config

    @property
    def draft_store_dir(self) -> Path:
        return Path(self.DRAFT_STORE_DIR).expanduser()


@lru_cache()
def get_settings() -> Settings:
    return Settings()
