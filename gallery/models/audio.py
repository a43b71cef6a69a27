"""SQLAlchemy ORM model for uploaded music tracks."""
from __future__ import annotations

import uuid

from sqlalchemy import JSON, Column, Float, Integer, LargeBinary, String, Text, Uuid

from ..constants import UNKNOWN_CREDIT
from ..database import Base
from .base import TimestampMixin


class Audio(TimestampMixin, Base):
    __tablename__ = "audio_tracks"

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    title = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)
    artist = Column(String(255), nullable=False, default=UNKNOWN_CREDIT)
    genre = Column(String(255), nullable=False, default=UNKNOWN_CREDIT)
    file_data = Column(LargeBinary, nullable=False)
    file_content_type = Column(String(255), nullable=False)
    tags = Column(JSON, nullable=False, default=list)

    # Declared for the library UI; nothing populates them yet.
    duration = Column(Float, nullable=True)
    format = Column(String(32), nullable=True)
    plays = Column(Integer, nullable=False, default=0)
    likes = Column(Integer, nullable=False, default=0)

    @property
    def file_size(self) -> int:
        return len(self.file_data or b"")


__all__ = ["Audio"]
