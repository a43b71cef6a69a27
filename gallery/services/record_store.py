"""Generic per-kind record collection over a SQLAlchemy session."""
from __future__ import annotations

import logging
from typing import Generic, TypeVar
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT")


class RecordStoreError(RuntimeError):
    """Raised when the database rejects a store operation."""


def parse_record_key(raw: str | UUID | None) -> UUID | None:
    """Return ``raw`` as a UUID, or None when it cannot name any record."""

    if isinstance(raw, UUID):
        return raw
    try:
        return UUID(str(raw).strip())
    except (TypeError, ValueError, AttributeError):
        return None


class RecordStore(Generic[ModelT]):
    """Insert, list, fetch and delete records of a single model.

    Every mutating call commits on its own; there are no cross-store
    transactions.
    """

    def __init__(self, session: Session, model: type[ModelT]) -> None:
        self.session = session
        self.model = model

    @property
    def kind(self) -> str:
        return self.model.__name__

    def insert(self, record: ModelT) -> UUID:
        try:
            self.session.add(record)
            self.session.commit()
            self.session.refresh(record)
        except SQLAlchemyError as exc:
            self.session.rollback()
            logger.exception("Failed to insert %s", self.kind)
            raise RecordStoreError(f"Failed to insert {self.kind}") from exc
        key = record.id  # type: ignore[attr-defined]
        logger.info("Inserted %s %s", self.kind, key)
        return key

    def list_all(self) -> list[ModelT]:
        try:
            return list(self.session.scalars(select(self.model)))
        except SQLAlchemyError as exc:
            self.session.rollback()
            logger.exception("Failed to list %s records", self.kind)
            raise RecordStoreError(f"Failed to list {self.kind} records") from exc

    def get(self, key: UUID | str | None) -> ModelT | None:
        record_id = parse_record_key(key)
        if record_id is None:
            return None
        try:
            return self.session.get(self.model, record_id)
        except SQLAlchemyError as exc:
            self.session.rollback()
            logger.exception("Failed to load %s %s", self.kind, record_id)
            raise RecordStoreError(f"Failed to load {self.kind}") from exc

    def delete(self, key: UUID | str | None) -> bool:
        """Remove the record named by ``key``; False when it did not exist."""

        record = self.get(key)
        if record is None:
            return False
        try:
            self.session.delete(record)
            self.session.commit()
        except SQLAlchemyError as exc:
            self.session.rollback()
            logger.exception("Failed to delete %s %s", self.kind, key)
            raise RecordStoreError(f"Failed to delete {self.kind}") from exc
        logger.info("Deleted %s %s", self.kind, key)
        return True


__all__ = ["RecordStore", "RecordStoreError", "parse_record_key"]
