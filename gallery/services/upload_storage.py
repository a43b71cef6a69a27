"""Transient on-disk staging for uploaded files."""
from __future__ import annotations

import logging
import re
import time
import uuid
from dataclasses import dataclass
from pathlib import Path

from fastapi import UploadFile
from fastapi.concurrency import run_in_threadpool

from ..constants import UPLOADS_URL_PREFIX
from .upload_validator import UploadPolicy, normalize_content_type

logger = logging.getLogger(__name__)

CHUNK_SIZE = 1024 * 1024


class UploadStorageError(RuntimeError):
    """Raised when an upload cannot be written to or read from transient storage."""


@dataclass(frozen=True)
class StoredUpload:
    """An upload that has been written to transient storage."""

    path: Path
    filename: str
    content_type: str
    size: int


def _safe_extension(filename: str | None) -> str:
    extension = Path(filename or "").suffix.lower()
    if extension and not re.fullmatch(r"\.[a-z0-9]{1,10}", extension):
        return ""
    return extension


def _safe_field_name(field_name: str) -> str:
    cleaned = re.sub(r"[^A-Za-z0-9_-]", "-", field_name.strip())
    return cleaned.strip("-") or "file"


class TransientStorage:
    """Write uploads under a generated name inside ``directory``.

    Names combine the form field, the current epoch milliseconds and a short
    random suffix. There is no lock on the directory, so a collision is
    unlikely rather than impossible.
    """

    def __init__(self, directory: Path | str) -> None:
        self.directory = Path(directory)

    def ensure_directory(self) -> Path:
        self.directory.mkdir(parents=True, exist_ok=True)
        return self.directory

    def generate_name(self, field_name: str, original_filename: str | None) -> str:
        stamp = int(time.time() * 1000)
        return f"{_safe_field_name(field_name)}-{stamp}-{uuid.uuid4().hex[:8]}{_safe_extension(original_filename)}"

    async def save(
        self,
        upload: UploadFile,
        *,
        field_name: str,
        policy: UploadPolicy | None = None,
    ) -> StoredUpload:
        """Stream ``upload`` to disk, enforcing ``policy`` size limits while writing.

        A file that exceeds the limit is removed before the rejection propagates.
        """

        filename = self.generate_name(field_name, upload.filename)
        destination = self.directory / filename
        written = 0

        try:
            await run_in_threadpool(self.ensure_directory)
            fh = await run_in_threadpool(destination.open, "wb")
        except OSError as exc:
            logger.exception("Failed to open %s for writing", destination)
            raise UploadStorageError("Unable to store uploaded file") from exc

        # Every blocking file call goes through the thread pool.
        try:
            try:
                while True:
                    chunk = await upload.read(CHUNK_SIZE)
                    if not chunk:
                        break
                    written += len(chunk)
                    if policy is not None:
                        policy.check_size(written)
                    await run_in_threadpool(fh.write, chunk)
            finally:
                await run_in_threadpool(fh.close)
        except OSError as exc:
            logger.exception("Failed to write upload to %s", destination)
            raise UploadStorageError("Unable to store uploaded file") from exc
        except Exception:
            await run_in_threadpool(destination.unlink, missing_ok=True)
            raise

        logger.info("Stored upload %s (%d bytes)", filename, written)
        return StoredUpload(
            path=destination,
            filename=filename,
            content_type=normalize_content_type(upload.content_type),
            size=written,
        )

    async def read_back(self, stored: StoredUpload) -> bytes:
        try:
            return await run_in_threadpool(stored.path.read_bytes)
        except OSError as exc:
            logger.exception("Failed to read staged upload %s", stored.path)
            raise UploadStorageError("Unable to read uploaded file") from exc

    async def discard(self, stored: StoredUpload) -> bool:
        """Remove a staged file, returning False when it was already gone."""

        try:
            await run_in_threadpool(stored.path.unlink)
        except FileNotFoundError:
            return False
        except OSError:
            logger.warning("Unable to remove staged upload %s", stored.path, exc_info=True)
            return False
        return True

    def public_url(self, stored: StoredUpload) -> str:
        return f"{UPLOADS_URL_PREFIX}/{stored.filename}"


__all__ = ["CHUNK_SIZE", "StoredUpload", "TransientStorage", "UploadStorageError"]
