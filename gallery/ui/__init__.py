"""Server-rendered pages, templates and Markup components."""
from .router import router

__all__ = ["router"]
