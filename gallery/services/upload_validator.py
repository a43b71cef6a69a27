"""Per media kind acceptance rules for incoming uploads.

The checks trust the MIME type declared by the client; file contents are never
inspected, so this is a naming convention gate rather than a security boundary.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum

from fastapi import status

from ..constants import AUDIO_MIME_TYPES, DEFAULT_MAX_VIDEO_BYTES, IMAGE_MIME_TYPES, MIB, VIDEO_MIME_TYPES

logger = logging.getLogger(__name__)


class MediaKind(str, Enum):
    IMAGE = "image"
    AUDIO = "audio"
    VIDEO = "video"


class UploadRejectedError(ValueError):
    """Raised when an upload does not satisfy its media kind policy."""

    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self, message: str, *, kind: MediaKind) -> None:
        super().__init__(message)
        self.kind = kind


class UnsupportedMediaTypeError(UploadRejectedError):
    status_code = status.HTTP_415_UNSUPPORTED_MEDIA_TYPE


class UploadTooLargeError(UploadRejectedError):
    status_code = status.HTTP_413_REQUEST_ENTITY_TOO_LARGE


def normalize_content_type(content_type: str | None) -> str:
    """Return the bare lower-cased MIME type without parameters."""

    return (content_type or "").split(";", 1)[0].strip().lower()


@dataclass(frozen=True)
class UploadPolicy:
    kind: MediaKind
    allowed_types: frozenset[str]
    max_bytes: int | None = None

    @property
    def label(self) -> str:
        return self.kind.value

    def check(self, content_type: str | None, size: int | None = None) -> str:
        """Validate an upload and return its normalised MIME type."""

        normalized = normalize_content_type(content_type)
        if normalized not in self.allowed_types:
            logger.warning("Rejected %s upload with content type %r", self.label, content_type)
            raise UnsupportedMediaTypeError(f"Only {self.label} files are allowed!", kind=self.kind)
        self.check_size(size)
        return normalized

    def check_size(self, size: int | None) -> None:
        if size is None or self.max_bytes is None:
            return
        if size > self.max_bytes:
            logger.warning("Rejected %s upload of %d bytes (limit %d)", self.label, size, self.max_bytes)
            raise UploadTooLargeError(
                f"{self.label.capitalize()} files must be at most {self.max_bytes // MIB} MiB",
                kind=self.kind,
            )

    def accepts(self, content_type: str | None, size: int | None = None) -> bool:
        try:
            self.check(content_type, size)
        except UploadRejectedError:
            return False
        return True


IMAGE_POLICY = UploadPolicy(MediaKind.IMAGE, IMAGE_MIME_TYPES)
AUDIO_POLICY = UploadPolicy(MediaKind.AUDIO, AUDIO_MIME_TYPES)


def video_policy(max_bytes: int = DEFAULT_MAX_VIDEO_BYTES) -> UploadPolicy:
    return UploadPolicy(MediaKind.VIDEO, VIDEO_MIME_TYPES, max_bytes=max_bytes)


def policy_for(kind: MediaKind, *, max_video_bytes: int = DEFAULT_MAX_VIDEO_BYTES) -> UploadPolicy:
    if kind is MediaKind.IMAGE:
        return IMAGE_POLICY
    if kind is MediaKind.AUDIO:
        return AUDIO_POLICY
    return video_policy(max_video_bytes)


__all__ = [
    "MediaKind",
    "UploadPolicy",
    "UploadRejectedError",
    "UnsupportedMediaTypeError",
    "UploadTooLargeError",
    "IMAGE_POLICY",
    "AUDIO_POLICY",
    "normalize_content_type",
    "policy_for",
    "video_policy",
]
