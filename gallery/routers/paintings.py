"""Painting routes: list, upload, detail, image payload and delete."""
from __future__ import annotations

import logging
from typing import Optional

from fastapi import APIRouter, Depends, File, Form, Request, UploadFile
from fastapi.responses import HTMLResponse, RedirectResponse, Response
from sqlalchemy.orm import Session

from ..config import Settings
from ..database import get_session
from ..dependencies import get_app_settings, get_storage
from ..models import Painting
from ..schemas import PaintingForm
from ..services import (
    TransientStorage,
    create_painting,
    delete_record_or_404,
    get_record_or_404,
    list_records,
)
from ..ui.template_helpers import render_template
from .common import build_form, redirect_to

router = APIRouter(prefix="/paintings", tags=["paintings"])

logger = logging.getLogger(__name__)

LIST_PATH = "/paintings"


@router.get("", response_class=HTMLResponse)
async def list_paintings(request: Request, db: Session = Depends(get_session)) -> HTMLResponse:
    images = list_records(db, Painting)
    return render_template(
        request,
        "paintings.html",
        {
            "page_title": "Paintings",
            "active_nav": LIST_PATH,
            "items": images,
        },
    )


@router.post("")
async def upload_painting(
    image: UploadFile = File(...),
    name: Optional[str] = Form(None),
    desc: Optional[str] = Form(None),
    db: Session = Depends(get_session),
    storage: TransientStorage = Depends(get_storage),
    settings: Settings = Depends(get_app_settings),
) -> RedirectResponse:
    """Store an uploaded image inside a new painting record."""

    form = build_form(PaintingForm, name=name, description=desc)
    painting = await create_painting(
        db,
        storage,
        upload=image,
        form=form,
        keep_transient=settings.keep_transient_uploads,
    )
    logger.info("Painting %s uploaded (%s)", painting.id, painting.image_content_type)
    return redirect_to(LIST_PATH)


@router.get("/{painting_id}", response_class=HTMLResponse)
async def painting_detail(painting_id: str, request: Request, db: Session = Depends(get_session)) -> HTMLResponse:
    image = get_record_or_404(db, Painting, painting_id, label="Painting")
    return render_template(
        request,
        "painting_detail.html",
        {
            "page_title": "Image Details",
            "active_nav": LIST_PATH,
            "image": image,
        },
    )


@router.get("/{painting_id}/image")
async def painting_image(painting_id: str, db: Session = Depends(get_session)) -> Response:
    image = get_record_or_404(db, Painting, painting_id, label="Painting")
    return Response(content=image.image_data, media_type=image.image_content_type)


@router.delete("/{painting_id}")
async def delete_painting(painting_id: str, db: Session = Depends(get_session)) -> RedirectResponse:
    delete_record_or_404(db, Painting, painting_id, label="Painting")
    return redirect_to(LIST_PATH)
