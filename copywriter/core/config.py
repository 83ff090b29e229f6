"""Application configuration using Pydantic BaseSettings."""
from __future__ import annotations

import logging
from functools import lru_cache
from pathlib import Path

from dotenv import load_dotenv
from pydantic_settings import BaseSettings

logger = logging.getLogger(__name__)


def _load_env_file() -> None:
    """Load .env with fallback encodings to avoid Unicode errors."""
    env_path = Path(".env")
    if not env_path.exists():
        return
    for encoding in ("utf-8", "utf-8-sig", "latin-1"):
        try:
            load_dotenv(dotenv_path=env_path, encoding=encoding, override=False)
            return
        except UnicodeDecodeError:
            continue
    logger.warning("Failed to decode .env; using process env vars only.")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    app_name: str = "AI Copywriting Service"
    app_version: str = "1.0.0"
    app_env: str = "dev"  # dev, test, prod

    # Anthropic Messages API. No key means template fallback only.
    anthropic_api_key: str | None = None
    anthropic_base_url: str = "https://api.anthropic.com/v1/messages"
    anthropic_model: str = "claude-3-5-sonnet-20241022"
    anthropic_version: str = "2023-06-01"
    llm_max_tokens: int = 1024
    llm_timeout: float = 30.0  # seconds

    # Logging settings
    log_level: str = "info"  # debug, info, warning, error
    log_dir: str | None = None  # console only when unset
    log_backup_count: int = 14

    # CORS origins for a separately hosted form page
    cors_origins: list[str] = [
        "http://127.0.0.1:3000",
        "http://localhost:3000",
        "http://127.0.0.1:8000",
        "http://localhost:8000",
    ]

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = False
        extra = "ignore"  # Ignore extra fields from .env


@lru_cache
def get_settings() -> Settings:
    """Return cached settings instance."""
    return Settings()


# Load .env file on module import
_load_env_file()
