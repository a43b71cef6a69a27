"""Middleware exports."""
from __future__ import annotations

from .catchall import CatchAllExceptionMiddleware
from .method_override import MethodOverrideMiddleware

__all__ = ["CatchAllExceptionMiddleware", "MethodOverrideMiddleware"]
