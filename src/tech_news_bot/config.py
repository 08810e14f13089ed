"""Configuration loading and validation."""

import os
from pathlib import Path

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field

DEFAULT_NEWS_API_URL = "https://newsapi.org/v2/everything"


class NewsAPIConfig(BaseModel):
    """News search API configuration."""

    model_config = ConfigDict(frozen=True)

    base_url: str = DEFAULT_NEWS_API_URL
    api_key_env: str = "NEWS_API_KEY"
    api_key: str | None = Field(default=None, repr=False)


class MonitoringConfig(BaseModel):
    """Logging configuration."""

    model_config = ConfigDict(frozen=True)

    structured_logging: bool = False
    log_file: str | None = None
    log_level: str = "INFO"


class AppConfig(BaseModel):
    """Top-level application configuration."""

    model_config = ConfigDict(frozen=True)

    news: NewsAPIConfig = Field(default_factory=NewsAPIConfig)
    monitoring: MonitoringConfig = Field(default_factory=MonitoringConfig)


def _resolve_api_key(config: AppConfig) -> AppConfig:
    """Fill ``news.api_key`` from the environment when the config leaves it unset."""
    if config.news.api_key:
        return config
    api_key = os.environ.get(config.news.api_key_env) or None
    news = config.news.model_copy(update={"api_key": api_key})
    return config.model_copy(update={"news": news})


def load_config(path: Path) -> AppConfig:
    """Load config from a YAML file, resolving the API key from the environment."""
    load_dotenv(path.parent / ".env", override=False)
    raw = yaml.safe_load(path.read_text()) or {}
    return _resolve_api_key(AppConfig(**raw))


def config_from_env() -> AppConfig:
    """Build a default config, taking the API key from ``.env`` or the environment."""
    load_dotenv(Path.cwd() / ".env", override=False)
    return _resolve_api_key(AppConfig())
