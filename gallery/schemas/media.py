"""Form payloads submitted alongside media uploads."""
from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from ..constants import UNKNOWN_CREDIT


def parse_tags(raw: str | list[str] | None) -> list[str]:
    """Split a comma separated tag field, keeping order and dropping blanks."""

    if raw is None:
        return []
    parts = raw.split(",") if isinstance(raw, str) else list(raw)
    return [part.strip() for part in parts if part and part.strip()]


def _credit_or_unknown(value: str | None) -> str:
    text = (value or "").strip()
    return text or UNKNOWN_CREDIT


def describe_validation_error(exc: ValidationError) -> str:
    """Flatten pydantic errors into a single human readable line."""

    messages = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error.get("loc", ()))
        messages.append(f"{location}: {error.get('msg', 'invalid value')}" if location else error.get("msg", ""))
    return "; ".join(messages) or "Invalid form data"


class PaintingForm(BaseModel):
    """Metadata submitted with a painting upload."""

    model_config = ConfigDict(str_strip_whitespace=True)

    name: str | None = Field(None, max_length=255)
    description: str | None = None


class AudioForm(BaseModel):
    """Metadata submitted with a music upload."""

    model_config = ConfigDict(str_strip_whitespace=True)

    title: str = Field(..., min_length=1, max_length=255)
    description: str | None = None
    artist: str = UNKNOWN_CREDIT
    genre: str = UNKNOWN_CREDIT
    tags: list[str] = Field(default_factory=list)

    @field_validator("artist", "genre", mode="before")
    @classmethod
    def _default_credit(cls, value: str | None) -> str:
        return _credit_or_unknown(value)

    @field_validator("tags", mode="before")
    @classmethod
    def _split_tags(cls, value: str | list[str] | None) -> list[str]:
        return parse_tags(value)


class DanceVideoForm(BaseModel):
    """Metadata submitted with a dance video upload."""

    model_config = ConfigDict(str_strip_whitespace=True)

    title: str = Field(..., min_length=1, max_length=255)
    description: str = Field(..., min_length=1)
    choreographer: str = UNKNOWN_CREDIT
    genre: str = UNKNOWN_CREDIT
    tags: list[str] = Field(default_factory=list)

    @field_validator("choreographer", "genre", mode="before")
    @classmethod
    def _default_credit(cls, value: str | None) -> str:
        return _credit_or_unknown(value)

    @field_validator("tags", mode="before")
    @classmethod
    def _split_tags(cls, value: str | list[str] | None) -> list[str]:
        return parse_tags(value)


__all__ = [
    "AudioForm",
    "DanceVideoForm",
    "PaintingForm",
    "describe_validation_error",
    "parse_tags",
]
