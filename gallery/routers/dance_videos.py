"""Dance video routes. Video bytes stay in transient storage under /uploads."""
from __future__ import annotations

import logging
from typing import Optional

from fastapi import APIRouter, Depends, File, Form, Request, UploadFile
from fastapi.responses import HTMLResponse, RedirectResponse
from sqlalchemy.orm import Session

from ..config import Settings
from ..database import get_session
from ..dependencies import get_app_settings, get_storage
from ..models import DanceVideo
from ..schemas import DanceVideoForm
from ..services import (
    TransientStorage,
    create_dance_video,
    delete_record_or_404,
    get_record_or_404,
    list_records,
)
from ..ui.template_helpers import render_template
from .common import build_form, redirect_to

router = APIRouter(tags=["dance-videos"])

logger = logging.getLogger(__name__)

LIST_PATH = "/dance-videos"


@router.get("/dance", include_in_schema=False)
async def dance_shortcut() -> RedirectResponse:
    return redirect_to(LIST_PATH)


@router.get(LIST_PATH, response_class=HTMLResponse)
async def list_dance_videos(request: Request, db: Session = Depends(get_session)) -> HTMLResponse:
    videos = list_records(db, DanceVideo)
    return render_template(
        request,
        "dance.html",
        {
            "page_title": "Dance Videos",
            "active_nav": LIST_PATH,
            "videos": videos,
        },
    )


@router.post(LIST_PATH)
async def upload_dance_video(
    file: UploadFile = File(...),
    title: str = Form(...),
    description: str = Form(...),
    choreographer: Optional[str] = Form(None),
    genre: Optional[str] = Form(None),
    tags: Optional[str] = Form(None),
    db: Session = Depends(get_session),
    storage: TransientStorage = Depends(get_storage),
    settings: Settings = Depends(get_app_settings),
) -> RedirectResponse:
    """Stage an uploaded video and record a reference to it.

    Deleting the record later does not remove the staged file.
    """

    form = build_form(
        DanceVideoForm,
        title=title,
        description=description,
        choreographer=choreographer,
        genre=genre,
        tags=tags,
    )
    video = await create_dance_video(
        db,
        storage,
        upload=file,
        form=form,
        max_bytes=settings.max_video_bytes,
    )
    logger.info("Dance video %s uploaded to %s", video.id, video.file_url)
    return redirect_to(LIST_PATH)


@router.get(LIST_PATH + "/{video_id}", response_class=HTMLResponse)
async def dance_video_detail(video_id: str, request: Request, db: Session = Depends(get_session)) -> HTMLResponse:
    video = get_record_or_404(db, DanceVideo, video_id, label="Dance video")
    return render_template(
        request,
        "dance_detail.html",
        {
            "page_title": "Dance Video Details",
            "active_nav": LIST_PATH,
            "video": video,
        },
    )


@router.delete(LIST_PATH + "/{video_id}")
async def delete_dance_video(video_id: str, db: Session = Depends(get_session)) -> RedirectResponse:
    delete_record_or_404(db, DanceVideo, video_id, label="Dance video")
    return redirect_to(LIST_PATH)
