"""
Document store on top of SQLAlchemy.

All collections share the ``documents`` table. Documents are handed out as
plain dicts with their ``id`` merged in. Methods flush but never commit:
the calling service commits once per operation so that writes touching
several documents land together.
"""
import logging
from datetime import datetime, timezone
from typing import Any

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.core.errors import DependencyError, NotFoundError
from app.models.document import Document, new_document_id

logger = logging.getLogger(__name__)

ATHLETES = "athletes"
INVENTORY = "inventory"
EVENTS = "events"
USERS = "users"


def _to_dict(doc: Document) -> dict:
    return {"id": doc.id, **(doc.data or {})}


def _field_clause(field: str, value: Any):
    element = Document.data[field]
    if isinstance(value, bool):
        return element.as_boolean() == value
    if isinstance(value, int):
        return element.as_integer() == value
    return element.as_string() == str(value)


class DocumentStore:
    def __init__(self, db: Session):
        self.db = db

    def _load(self, collection: str, doc_id: str, for_update: bool = False) -> Document | None:
        stmt = select(Document).where(Document.collection == collection, Document.id == doc_id)
        if for_update:
            stmt = stmt.with_for_update()
        try:
            return self.db.execute(stmt).scalar_one_or_none()
        except SQLAlchemyError as e:
            raise DependencyError(f"Failed to read from {collection}", str(e)) from e

    def get(self, collection: str, doc_id: str, for_update: bool = False) -> dict | None:
        if not doc_id:
            return None
        doc = self._load(collection, doc_id, for_update=for_update)
        return _to_dict(doc) if doc else None

    def list(self, collection: str, filters: dict | None = None) -> list[dict]:
        stmt = select(Document).where(Document.collection == collection)
        for field, value in (filters or {}).items():
            stmt = stmt.where(_field_clause(field, value))
        stmt = stmt.order_by(Document.created_at, Document.id)
        try:
            rows = self.db.execute(stmt).scalars().all()
        except SQLAlchemyError as e:
            raise DependencyError(f"Failed to read from {collection}", str(e)) from e
        return [_to_dict(r) for r in rows]

    def add(self, collection: str, data: dict, doc_id: str | None = None) -> str:
        payload = {k: v for k, v in data.items() if k != "id"}
        doc = Document(id=doc_id or new_document_id(), collection=collection, data=payload)
        try:
            self.db.add(doc)
            self.db.flush()
        except SQLAlchemyError as e:
            raise DependencyError(f"Failed to write to {collection}", str(e)) from e
        logger.debug(f"[Store] add {collection}/{doc.id}")
        return doc.id

    def update(self, collection: str, doc_id: str, partial: dict) -> None:
        doc = self._load(collection, doc_id)
        if not doc:
            raise NotFoundError(f"Document {collection}/{doc_id} not found")
        # Reassign so the JSON column is flagged dirty
        doc.data = {**(doc.data or {}), **{k: v for k, v in partial.items() if k != "id"}}
        try:
            self.db.flush()
        except SQLAlchemyError as e:
            raise DependencyError(f"Failed to write to {collection}", str(e)) from e
        logger.debug(f"[Store] update {collection}/{doc_id} fields={sorted(partial)}")

    def delete(self, collection: str, doc_id: str) -> None:
        doc = self._load(collection, doc_id)
        if not doc:
            raise NotFoundError(f"Document {collection}/{doc_id} not found")
        try:
            self.db.delete(doc)
            self.db.flush()
        except SQLAlchemyError as e:
            raise DependencyError(f"Failed to delete from {collection}", str(e)) from e
        logger.debug(f"[Store] delete {collection}/{doc_id}")

    def commit(self) -> None:
        try:
            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            raise DependencyError("Failed to save changes", str(e)) from e

    def rollback(self) -> None:
        self.db.rollback()


def server_timestamp() -> str:
    """UTC timestamp stored on documents as ISO-8601 text."""
    return datetime.now(timezone.utc).isoformat()
