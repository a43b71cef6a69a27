"""Project-wide constant values."""
from __future__ import annotations

MIB = 1024 * 1024

DEFAULT_MAX_VIDEO_BYTES = 100 * MIB

IMAGE_MIME_TYPES = frozenset({"image/jpeg", "image/png", "image/gif"})
AUDIO_MIME_TYPES = frozenset({"audio/mpeg", "audio/mp3"})
VIDEO_MIME_TYPES = frozenset({"video/mp4", "video/avi", "video/mpeg"})

UNKNOWN_CREDIT = "Unknown"  # fallback for artist, genre and choreographer

UPLOADS_URL_PREFIX = "/uploads"
ASSETS_URL_PREFIX = "/assets"

__all__ = [
    "MIB",
    "DEFAULT_MAX_VIDEO_BYTES",
    "IMAGE_MIME_TYPES",
    "AUDIO_MIME_TYPES",
    "VIDEO_MIME_TYPES",
    "UNKNOWN_CREDIT",
    "UPLOADS_URL_PREFIX",
    "ASSETS_URL_PREFIX",
]
