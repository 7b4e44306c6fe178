"""Configuration management - environment, .env and YAML prompt files."""

from functools import lru_cache
from pathlib import Path
from typing import Any

import yaml
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings from environment and .env."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # LLM
    llm_api_key: str = Field(default="", description="Bearer token for the chat completions API")
    llm_model: str = Field(default="gpt-4o-mini", description="Model name")

    # Conversation
    history_limit: int = Field(default=30, ge=0, description="Sliding window size for chat turns")
    request_timeout: float = Field(default=60.0, gt=0, description="HTTP timeout in seconds")
    prompts_file: Path | None = Field(default=None, description="YAML file with system_prompts list")

    log_level: str = Field(default="INFO", description="Root log level for the CLI")


def load_yaml_config(config_path: Path) -> dict[str, Any]:
    """Load YAML config file."""
    if not config_path.exists():
        return {}
    with config_path.open() as f:
        return yaml.safe_load(f) or {}


def load_system_prompts(config_path: Path) -> list[str]:
    """Read `system_prompts` from a YAML file. A single string is accepted."""
    prompts = load_yaml_config(config_path).get("system_prompts", [])
    if isinstance(prompts, str):
        return [prompts]
    return [str(p) for p in prompts]


@lru_cache
def get_settings() -> Settings:
    """Cached settings instance."""
    return Settings()
