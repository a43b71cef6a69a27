"""Music routes: library, upload, detail, audio payload and delete."""
from __future__ import annotations

import logging
from typing import Optional

from fastapi import APIRouter, Depends, File, Form, Request, UploadFile
from fastapi.responses import HTMLResponse, RedirectResponse, Response
from sqlalchemy.orm import Session

from ..config import Settings
from ..database import get_session
from ..dependencies import get_app_settings, get_storage
from ..models import Audio
from ..schemas import AudioForm
from ..services import (
    TransientStorage,
    create_audio,
    delete_record_or_404,
    get_record_or_404,
    list_records,
)
from ..ui.template_helpers import render_template
from .common import build_form, redirect_to

router = APIRouter(prefix="/music", tags=["music"])

logger = logging.getLogger(__name__)

LIST_PATH = "/music"


@router.get("", response_class=HTMLResponse)
async def music_library(request: Request, db: Session = Depends(get_session)) -> HTMLResponse:
    audio_files = list_records(db, Audio)
    return render_template(
        request,
        "music.html",
        {
            "page_title": "Music Library",
            "active_nav": LIST_PATH,
            "audioFiles": audio_files,
        },
    )


@router.post("")
async def upload_music(
    file: UploadFile = File(...),
    title: str = Form(...),
    description: Optional[str] = Form(None),
    artist: Optional[str] = Form(None),
    genre: Optional[str] = Form(None),
    tags: Optional[str] = Form(None),
    db: Session = Depends(get_session),
    storage: TransientStorage = Depends(get_storage),
    settings: Settings = Depends(get_app_settings),
) -> RedirectResponse:
    """Store an uploaded audio file inside a new music record.

    Blank ``artist`` and ``genre`` fall back to ``"Unknown"``; ``tags`` is a
    comma separated list.
    """

    form = build_form(AudioForm, title=title, description=description, artist=artist, genre=genre, tags=tags)
    audio = await create_audio(
        db,
        storage,
        upload=file,
        form=form,
        keep_transient=settings.keep_transient_uploads,
    )
    logger.info("Audio %s uploaded (%s)", audio.id, audio.file_content_type)
    return redirect_to(LIST_PATH)


@router.get("/{audio_id}", response_class=HTMLResponse)
async def music_detail(audio_id: str, request: Request, db: Session = Depends(get_session)) -> HTMLResponse:
    audio = get_record_or_404(db, Audio, audio_id, label="Audio")
    return render_template(
        request,
        "music_detail.html",
        {
            "page_title": "Music Details",
            "active_nav": LIST_PATH,
            "audio": audio,
        },
    )


@router.get("/{audio_id}/file")
async def music_file(audio_id: str, db: Session = Depends(get_session)) -> Response:
    audio = get_record_or_404(db, Audio, audio_id, label="Audio")
    return Response(content=audio.file_data, media_type=audio.file_content_type)


@router.delete("/{audio_id}")
async def delete_music(audio_id: str, db: Session = Depends(get_session)) -> RedirectResponse:
    delete_record_or_404(db, Audio, audio_id, label="Audio")
    return redirect_to(LIST_PATH)
