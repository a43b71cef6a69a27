"""Tests for environment driven settings."""
from __future__ import annotations

import pytest
from pydantic import ValidationError

from gallery.config import Settings
from gallery.constants import DEFAULT_MAX_VIDEO_BYTES, MIB

_VARIABLES = ("DATABASE_URL", "PORT", "HOST", "MAX_VIDEO_BYTES", "KEEP_TRANSIENT_UPLOADS", "UPLOAD_DIR")


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    for name in _VARIABLES:
        monkeypatch.delenv(name, raising=False)


def test_defaults(monkeypatch):
    monkeypatch.setenv("DATABASE_URL", "sqlite:///gallery.db")

    settings = Settings(_env_file=None)

    assert settings.port == 3000
    assert settings.max_video_bytes == DEFAULT_MAX_VIDEO_BYTES == 100 * MIB
    assert settings.keep_transient_uploads is False
    assert str(settings.upload_dir) == "uploads"


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("DATABASE_URL", "sqlite:///other.db")
    monkeypatch.setenv("PORT", "8080")
    monkeypatch.setenv("KEEP_TRANSIENT_UPLOADS", "true")

    settings = Settings(_env_file=None)

    assert settings.database_url == "sqlite:///other.db"
    assert settings.port == 8080
    assert settings.keep_transient_uploads is True


def test_database_url_is_required():
    with pytest.raises(ValidationError):
        Settings(_env_file=None)


def test_video_limit_must_be_positive(monkeypatch):
    monkeypatch.setenv("DATABASE_URL", "sqlite:///gallery.db")
    monkeypatch.setenv("MAX_VIDEO_BYTES", "0")

    with pytest.raises(ValidationError):
        Settings(_env_file=None)
