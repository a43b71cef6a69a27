"""
Runtime configuration helpers for the gallery application.

Loads DATABASE_URL and the other variables from the process environment,
falling back to a .env file located in the project root.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from dotenv import load_dotenv
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from .constants import DEFAULT_MAX_VIDEO_BYTES

# Resolve the project root
BASE_DIR = Path(__file__).resolve().parents[1]

# Absolute path to .env
ENV_PATH = BASE_DIR / ".env"

DEFAULT_PUBLIC_DIR = Path(__file__).resolve().parent / "ui" / "static"

# Load .env defaults without overriding environment variables provided by the platform
load_dotenv(dotenv_path=ENV_PATH, override=False)


class Settings(BaseSettings):
    # Required: must come from the environment or .env
    database_url: str = Field(..., alias="DATABASE_URL")

    host: str = Field(default="0.0.0.0", alias="HOST")
    port: int = Field(default=3000, alias="PORT")
    app_name: str = Field(default="Art Gallery", alias="APP_NAME")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")

    # Transient storage and static assets
    upload_dir: Path = Field(default=Path("uploads"), alias="UPLOAD_DIR")
    public_dir: Path = Field(default=DEFAULT_PUBLIC_DIR, alias="PUBLIC_DIR")
    max_video_bytes: int = Field(default=DEFAULT_MAX_VIDEO_BYTES, gt=0, alias="MAX_VIDEO_BYTES")
    keep_transient_uploads: bool = Field(default=False, alias="KEEP_TRANSIENT_UPLOADS")

    model_config = SettingsConfigDict(
        env_file=str(ENV_PATH),
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )


@lru_cache()
def get_settings() -> Settings:
    return Settings()


__all__ = ["Settings", "get_settings"]
