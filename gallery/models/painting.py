"""SQLAlchemy ORM model for uploaded paintings."""
from __future__ import annotations

import uuid

from sqlalchemy import Column, DateTime, LargeBinary, String, Text, Uuid
from sqlalchemy.sql import func

from ..database import Base


class Painting(Base):
    __tablename__ = "paintings"

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    name = Column(String(255), nullable=True)
    description = Column(Text, nullable=True)
    image_data = Column(LargeBinary, nullable=False)
    image_content_type = Column(String(255), nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)

    @property
    def image_size(self) -> int:
        return len(self.image_data or b"")


__all__ = ["Painting"]
