"""FastAPI dependencies that expose per-application resources."""
from __future__ import annotations

from fastapi import Request

from .config import Settings
from .services.upload_storage import TransientStorage


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_storage(request: Request) -> TransientStorage:
    return request.app.state.storage


__all__ = ["get_app_settings", "get_storage"]
