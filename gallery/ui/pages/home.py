"""Landing page surface."""
from __future__ import annotations

from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse

from ..template_helpers import render_template

router = APIRouter()


@router.get("/", response_class=HTMLResponse)
async def home(request: Request) -> HTMLResponse:
    """Render the landing page with links to each collection."""

    return render_template(
        request,
        "home.html",
        {
            "page_title": "Home",
            "active_nav": "/",
        },
    )
