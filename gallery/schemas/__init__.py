"""Convenience exports for schema layer."""
from .media import AudioForm, DanceVideoForm, PaintingForm, describe_validation_error, parse_tags

__all__ = [
    "AudioForm",
    "DanceVideoForm",
    "PaintingForm",
    "describe_validation_error",
    "parse_tags",
]
