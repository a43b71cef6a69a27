"""Upload workflow for paintings, music and dance videos.

Each create call runs validate -> stage on disk -> (embed) -> insert. Image and
audio bytes are embedded in the record and the staged file is removed once the
insert commits; videos keep only a ``/uploads/...`` reference and the staged
file stays on disk. A failed write or insert leaves any staged file behind.
"""
from __future__ import annotations

import logging
from typing import TypeVar
from uuid import UUID

from fastapi import HTTPException, UploadFile, status
from sqlalchemy.orm import Session

from ..constants import DEFAULT_MAX_VIDEO_BYTES
from ..models import Audio, DanceVideo, Painting
from ..schemas import AudioForm, DanceVideoForm, PaintingForm
from .record_store import RecordStore, RecordStoreError
from .upload_storage import StoredUpload, TransientStorage, UploadStorageError
from .upload_validator import AUDIO_POLICY, IMAGE_POLICY, UploadPolicy, UploadRejectedError, video_policy

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT")

PAINTING_FIELD = "image"
AUDIO_FIELD = "file"
VIDEO_FIELD = "file"


def _rejected(exc: UploadRejectedError) -> HTTPException:
    return HTTPException(status_code=exc.status_code, detail=str(exc))


def _server_error(detail: str) -> HTTPException:
    return HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=detail)


async def _stage(
    storage: TransientStorage,
    upload: UploadFile,
    *,
    policy: UploadPolicy,
    field_name: str,
    failure_detail: str,
) -> StoredUpload:
    try:
        policy.check(upload.content_type, getattr(upload, "size", None))
        return await storage.save(upload, field_name=field_name, policy=policy)
    except UploadRejectedError as exc:
        raise _rejected(exc) from exc
    except UploadStorageError as exc:
        raise _server_error(failure_detail) from exc


async def _read_staged(storage: TransientStorage, stored: StoredUpload, *, failure_detail: str) -> bytes:
    try:
        return await storage.read_back(stored)
    except UploadStorageError as exc:
        raise _server_error(failure_detail) from exc


def _insert(db: Session, model: type[ModelT], record: ModelT, *, failure_detail: str) -> ModelT:
    try:
        RecordStore(db, model).insert(record)
    except RecordStoreError as exc:
        raise _server_error(failure_detail) from exc
    return record


async def _release(storage: TransientStorage, stored: StoredUpload, *, keep: bool) -> None:
    if not keep:
        await storage.discard(stored)


async def create_painting(
    db: Session,
    storage: TransientStorage,
    *,
    upload: UploadFile,
    form: PaintingForm,
    keep_transient: bool = False,
) -> Painting:
    """Validate, embed and persist a painting upload."""

    failure = "Error uploading painting"
    stored = await _stage(storage, upload, policy=IMAGE_POLICY, field_name=PAINTING_FIELD, failure_detail=failure)
    data = await _read_staged(storage, stored, failure_detail=failure)

    painting = Painting(
        name=form.name,
        description=form.description,
        image_data=data,
        image_content_type=stored.content_type,
    )
    _insert(db, Painting, painting, failure_detail=failure)
    await _release(storage, stored, keep=keep_transient)
    return painting


async def create_audio(
    db: Session,
    storage: TransientStorage,
    *,
    upload: UploadFile,
    form: AudioForm,
    keep_transient: bool = False,
) -> Audio:
    """Validate, embed and persist a music upload."""

    failure = "Error uploading music"
    stored = await _stage(storage, upload, policy=AUDIO_POLICY, field_name=AUDIO_FIELD, failure_detail=failure)
    data = await _read_staged(storage, stored, failure_detail=failure)

    audio = Audio(
        title=form.title,
        description=form.description,
        artist=form.artist,
        genre=form.genre,
        tags=list(form.tags),
        file_data=data,
        file_content_type=stored.content_type,
    )
    _insert(db, Audio, audio, failure_detail=failure)
    await _release(storage, stored, keep=keep_transient)
    return audio


async def create_dance_video(
    db: Session,
    storage: TransientStorage,
    *,
    upload: UploadFile,
    form: DanceVideoForm,
    max_bytes: int = DEFAULT_MAX_VIDEO_BYTES,
) -> DanceVideo:
    """Validate and stage a dance video, persisting only its URL reference."""

    failure = "Error uploading video"
    stored = await _stage(
        storage,
        upload,
        policy=video_policy(max_bytes),
        field_name=VIDEO_FIELD,
        failure_detail=failure,
    )

    video = DanceVideo(
        title=form.title,
        description=form.description,
        choreographer=form.choreographer,
        genre=form.genre,
        tags=list(form.tags),
        file_url=storage.public_url(stored),
    )
    return _insert(db, DanceVideo, video, failure_detail=failure)


def list_records(db: Session, model: type[ModelT]) -> list[ModelT]:
    try:
        return RecordStore(db, model).list_all()
    except RecordStoreError as exc:
        raise _server_error("Server Error") from exc


def get_record_or_404(db: Session, model: type[ModelT], key: UUID | str, *, label: str) -> ModelT:
    try:
        record = RecordStore(db, model).get(key)
    except RecordStoreError as exc:
        raise _server_error("Server Error") from exc
    if record is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"{label} not found")
    return record


def delete_record_or_404(db: Session, model: type[ModelT], key: UUID | str, *, label: str) -> None:
    try:
        deleted = RecordStore(db, model).delete(key)
    except RecordStoreError as exc:
        raise _server_error("Server Error") from exc
    if not deleted:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"{label} not found")


__all__ = [
    "AUDIO_FIELD",
    "PAINTING_FIELD",
    "VIDEO_FIELD",
    "create_audio",
    "create_dance_video",
    "create_painting",
    "delete_record_or_404",
    "get_record_or_404",
    "list_records",
]
