"""
Athlete roster CRUD.

Athletes are stored with separate ``firstName`` / ``lastName`` fields and a
numeric ``groupId``. ``hasUniform`` / ``uniformId`` belong to the inventory
engine: this module initialises them on create and never writes them again.
"""
import logging

from app.core.errors import NotFoundError, ValidationError
from app.core.store import ATHLETES, INVENTORY, DocumentStore, server_timestamp
from app.services.groups import get_group_id, get_group_name
from app.services.inventory_service import STATUS_AVAILABLE, athlete_display_name

logger = logging.getLogger(__name__)


def split_name(name: str) -> tuple[str, str]:
    """Split on the first space: "Mary Ann Smith" -> ("Mary", "Ann Smith")."""
    parts = name.strip().split()
    if not parts:
        return "", ""
    return parts[0], " ".join(parts[1:])


def athlete_view(athlete: dict) -> dict:
    group = get_group_name(athlete.get("groupId"))
    return {
        "id": athlete["id"],
        "name": athlete_display_name(athlete),
        "firstName": athlete.get("firstName") or "",
        "lastName": athlete.get("lastName") or "",
        "groupId": get_group_id(group),
        "group": group,
        "hasUniform": bool(athlete.get("hasUniform")),
        "uniformId": athlete.get("uniformId"),
    }


def _get_or_404(store: DocumentStore, athlete_id: str) -> dict:
    athlete = store.get(ATHLETES, athlete_id)
    if not athlete:
        raise NotFoundError("Athlete not found")
    return athlete


def list_athletes(store: DocumentStore) -> list[dict]:
    return [athlete_view(a) for a in store.list(ATHLETES)]


def get_athlete(store: DocumentStore, athlete_id: str) -> dict:
    return athlete_view(_get_or_404(store, athlete_id))


def create_athlete(store: DocumentStore, name: str | None, group: str | None) -> dict:
    if not name or not name.strip():
        raise ValidationError("Name is required")

    first_name, last_name = split_name(name)
    now = server_timestamp()
    data = {
        "firstName": first_name,
        "lastName": last_name,
        "groupId": get_group_id(group),
        "hasUniform": False,
        "uniformId": None,
        "createdAt": now,
        "updatedAt": now,
    }
    try:
        athlete_id = store.add(ATHLETES, data)
        store.commit()
    except Exception:
        store.rollback()
        raise

    logger.info(f"[Athletes] Created {athlete_id} ({first_name} {last_name})")
    return athlete_view({"id": athlete_id, **data})


def update_athlete(store: DocumentStore, athlete_id: str, name: str | None, group: str | None) -> dict:
    if not name or not name.strip():
        raise ValidationError("Name is required")

    first_name, last_name = split_name(name)
    data = {
        "firstName": first_name,
        "lastName": last_name,
        "groupId": get_group_id(group),
        "updatedAt": server_timestamp(),
    }
    try:
        current = _get_or_404(store, athlete_id)
        store.update(ATHLETES, athlete_id, data)
        store.commit()
    except Exception:
        store.rollback()
        raise

    logger.info(f"[Athletes] Updated {athlete_id}")
    return athlete_view({**current, **data})


def delete_athlete(store: DocumentStore, athlete_id: str) -> int:
    """Delete an athlete and hand back every item they held. Returns the number of items released."""
    try:
        _get_or_404(store, athlete_id)
        held = store.list(INVENTORY, {"assignedTo": athlete_id})
        for item in held:
            store.update(INVENTORY, item["id"], {
                "assignedTo": None,
                "status": STATUS_AVAILABLE,
                "updatedAt": server_timestamp(),
            })
        store.delete(ATHLETES, athlete_id)
        store.commit()
    except Exception:
        store.rollback()
        raise

    logger.info(f"[Athletes] Deleted {athlete_id}, released {len(held)} item(s)")
    return len(held)
