"""Application configuration from environment."""
from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """App settings loaded from env / .env."""

    app_name: str = "Pi-Куб API"
    debug: bool = False
    log_level: str = "INFO"

    # Server
    host: str = "0.0.0.0"
    port: int = 4000

    # Database (async driver: aiosqlite or asyncpg)
    database_url: str = "sqlite+aiosqlite:///./pi_kub.db"

    # Completion provider
    openai_api_key: str | None = None
    openai_model: str = "gpt-3.5-turbo"
    openai_timeout: float = 30.0

    # Implicit single user (no auth)
    anonymous_user_id: str = "anonymous"
    anonymous_email: str = "anon@pi-kub"

    cors_origins: list[str] = ["*"]

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"


@lru_cache
def get_settings() -> Settings:
    return Settings()


# Project root (parent of app/)
BASE_DIR = Path(__file__).resolve().parent.parent.parent
