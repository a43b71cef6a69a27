"""Convenience exports for ORM models."""
from .audio import Audio
from .base import TimestampMixin
from .dance_video import DanceVideo
from .painting import Painting

__all__ = [
    "Audio",
    "DanceVideo",
    "Painting",
    "TimestampMixin",
]
