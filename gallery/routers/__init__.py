"""Aggregate router exports."""
from .dance_videos import router as dance_videos_router
from .music import router as music_router
from .paintings import router as paintings_router

__all__ = [
    "dance_videos_router",
    "music_router",
    "paintings_router",
]
