"""SQLAlchemy ORM model for dance videos kept in transient storage."""
from __future__ import annotations

import uuid

from sqlalchemy import JSON, Column, DateTime, String, Text, Uuid
from sqlalchemy.sql import func

from ..constants import UNKNOWN_CREDIT
from ..database import Base


class DanceVideo(Base):
    __tablename__ = "dance_videos"

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    title = Column(String(255), nullable=False)
    description = Column(Text, nullable=False)
    choreographer = Column(String(255), nullable=False, default=UNKNOWN_CREDIT)
    genre = Column(String(255), nullable=False, default=UNKNOWN_CREDIT)
    tags = Column(JSON, nullable=False, default=list)
    # Only a path under /uploads is stored; the bytes stay on disk.
    file_url = Column(String(1024), nullable=False)
    upload_date = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)


__all__ = ["DanceVideo"]
