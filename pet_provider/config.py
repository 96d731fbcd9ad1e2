"""
Central configuration loader.
Reads from environment variables (via .env) into typed settings.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from pet_provider.contract import CONTENT_AUTHORITY as DEFAULT_AUTHORITY
from pet_provider.db.schema import DATABASE_NAME


# ---------------------------------------------------------------------------
# Load .env from repo root (if present)
# ---------------------------------------------------------------------------
_REPO_ROOT = Path(__file__).resolve().parents[1]
load_dotenv(_REPO_ROOT / ".env")


class Settings(BaseSettings):
    """Provider settings loaded from environment variables"""

    model_config = SettingsConfigDict(
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    # Database
    DATABASE_PATH: Path = Field(
        default=_REPO_ROOT / "data" / DATABASE_NAME,
        validation_alias="DATABASE_PATH",
    )
    DB_BUSY_TIMEOUT: float = Field(default=5.0, validation_alias="DB_BUSY_TIMEOUT")

    # Provider
    CONTENT_AUTHORITY: str = Field(
        default=DEFAULT_AUTHORITY,
        validation_alias="CONTENT_AUTHORITY",
    )

    # Logging
    LOG_LEVEL: str = Field(default="INFO", validation_alias="LOG_LEVEL")


# ---------------------------------------------------------------------------
# Module singleton
# ---------------------------------------------------------------------------
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reset_settings() -> None:
    """Discard cached settings so the next call re-reads the environment."""
    global _settings
    _settings = None
