"""
Runtime configuration. Values come from VERSUS_* environment variables (or .env).
"""
from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

PROJECT_ROOT = Path(__file__).resolve().parent.parent


class Settings(BaseSettings):
    """Runtime configuration for the versus API."""

    model_config = SettingsConfigDict(
        env_prefix="VERSUS_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    roster_path: Path = PROJECT_ROOT / "data" / "characters.json"
    cors_origins: list[str] = [
        "http://localhost:5173",
        "http://127.0.0.1:5173",
    ]
    log_level: str = "INFO"


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
