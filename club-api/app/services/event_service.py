"""Practice / meet schedule."""
import logging

from app.core.errors import NotFoundError, ValidationError
from app.core.store import EVENTS, DocumentStore, server_timestamp

logger = logging.getLogger(__name__)

EVENT_TYPES = ("Practice", "Meet")


def _validate(title, date, group, event_type):
    if not title or not date or not group or not event_type:
        raise ValidationError("Title, date, group, and type are required fields")
    if event_type not in EVENT_TYPES:
        raise ValidationError('Type must be either "Practice" or "Meet"')


def _get_or_404(store: DocumentStore, event_id: str) -> dict:
    event = store.get(EVENTS, event_id)
    if not event:
        raise NotFoundError("Event not found")
    return event


def list_events(store: DocumentStore) -> list[dict]:
    return sorted(store.list(EVENTS), key=lambda e: str(e.get("date") or ""))


def get_event(store: DocumentStore, event_id: str) -> dict:
    return _get_or_404(store, event_id)


def create_event(store: DocumentStore, title, date, group, event_type) -> dict:
    _validate(title, date, group, event_type)
    now = server_timestamp()
    data = {
        "title": title,
        "date": date,
        "group": group,
        "type": event_type,
        "createdAt": now,
        "updatedAt": now,
    }
    try:
        event_id = store.add(EVENTS, data)
        store.commit()
    except Exception:
        store.rollback()
        raise

    logger.info(f"[Events] Created {event_type} '{title}' on {date} ({event_id})")
    return {"id": event_id, **data}


def update_event(store: DocumentStore, event_id: str, title, date, group, event_type) -> dict:
    _validate(title, date, group, event_type)
    data = {
        "title": title,
        "date": date,
        "group": group,
        "type": event_type,
        "updatedAt": server_timestamp(),
    }
    try:
        current = _get_or_404(store, event_id)
        store.update(EVENTS, event_id, data)
        store.commit()
    except Exception:
        store.rollback()
        raise

    logger.info(f"[Events] Updated {event_id}")
    return {**current, **data}


def delete_event(store: DocumentStore, event_id: str) -> None:
    try:
        _get_or_404(store, event_id)
        store.delete(EVENTS, event_id)
        store.commit()
    except Exception:
        store.rollback()
        raise

    logger.info(f"[Events] Deleted {event_id}")
