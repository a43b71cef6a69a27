"""Utilities for rendering UI templates with shared context."""
from __future__ import annotations

from pathlib import Path
from typing import Any

from fastapi import Request
from fastapi.templating import Jinja2Templates

from . import components

TEMPLATES_DIR = Path(__file__).resolve().parent / "templates"

templates = Jinja2Templates(directory=str(TEMPLATES_DIR))

_BASE_COMPONENTS = {
    "buttons": components.buttons,
    "cards": components.cards,
    "forms": components.forms,
    "layout": components.layout,
}


def render_template(
    request: Request,
    template_name: str,
    context: dict[str, Any] | None = None,
    *,
    status_code: int = 200,
):
    """Return a TemplateResponse with the shared page context."""

    settings = getattr(request.app.state, "settings", None)
    base_context: dict[str, Any] = {
        "app_name": getattr(settings, "app_name", "Art Gallery"),
        "components": _BASE_COMPONENTS,
        "active_nav": None,
        "page_title": "",
    }
    if context:
        base_context.update(context)

    return templates.TemplateResponse(request, template_name, base_context, status_code=status_code)
