"""Upload form pages for each media kind."""
from __future__ import annotations

from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse

from ..template_helpers import render_template

router = APIRouter()

_UPLOAD_PAGES = {
    "upload": ("upload.html", "Upload"),
    "upload-paint": ("upload-paint.html", "Upload Paintings"),
    "upload-music": ("upload-music.html", "Upload Music"),
    "upload-dance": ("upload-dance.html", "Upload Dance Video"),
}


def _render_upload_page(request: Request, slug: str) -> HTMLResponse:
    template_name, title = _UPLOAD_PAGES[slug]
    return render_template(
        request,
        template_name,
        {
            "page_title": title,
            "active_nav": "/upload",
        },
    )


@router.get("/upload", response_class=HTMLResponse)
async def upload_index(request: Request) -> HTMLResponse:
    return _render_upload_page(request, "upload")


@router.get("/upload-paint", response_class=HTMLResponse)
async def upload_painting(request: Request) -> HTMLResponse:
    return _render_upload_page(request, "upload-paint")


@router.get("/upload-music", response_class=HTMLResponse)
async def upload_music(request: Request) -> HTMLResponse:
    return _render_upload_page(request, "upload-music")


@router.get("/upload-dance", response_class=HTMLResponse)
async def upload_dance(request: Request) -> HTMLResponse:
    return _render_upload_page(request, "upload-dance")
