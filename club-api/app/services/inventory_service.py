"""
Inventory assignment engine and inventory read model.

An inventory item points at one athlete through ``assignedTo``; the athlete
mirrors it in ``hasUniform`` / ``uniformId``. Every mutating operation here
re-reads the stored item first, validates the whole transition before any
write, then writes the item and the affected athlete(s) and commits once.
"""
import logging

from app.core.errors import NotFoundError, ValidationError
from app.core.store import ATHLETES, INVENTORY, DocumentStore, server_timestamp

logger = logging.getLogger(__name__)

STATUS_AVAILABLE = "Available"
STATUS_CHECKED_OUT = "Checked Out"
STATUS_MAINTENANCE = "Maintenance"
STATUS_RETIRED = "Retired"

ALLOWED_STATUSES = (STATUS_AVAILABLE, STATUS_CHECKED_OUT, STATUS_MAINTENANCE, STATUS_RETIRED)

# Optional attributes, always written (None when absent)
DESCRIPTIVE_FIELDS = ("category", "size", "condition", "location", "notes")

# Items in this condition, or whose notes mention these words, need a coach's look
ATTENTION_CONDITIONS = ("Poor", "Damaged")
ATTENTION_KEYWORDS = ("repair", "replace")


# ═══════════════════════════════════════════════════════════
# HELPERS
# ═══════════════════════════════════════════════════════════

def athlete_display_name(athlete: dict) -> str:
    return f"{athlete.get('firstName') or ''} {athlete.get('lastName') or ''}".strip()


def normalize_ref(value) -> str | None:
    """Empty strings and whitespace count as "no athlete"."""
    if value is None:
        return None
    value = str(value).strip()
    return value or None


def _validate_item_fields(item_id, item_type, status, assigned_to):
    if not item_id or not item_type or not status:
        raise ValidationError("Item ID, type, and status are required")
    if status not in ALLOWED_STATUSES:
        raise ValidationError(f"Status must be one of: {', '.join(ALLOWED_STATUSES)}")
    if status == STATUS_CHECKED_OUT and not assigned_to:
        raise ValidationError('When status is "Checked Out", an athlete must be assigned')
    if assigned_to and status != STATUS_CHECKED_OUT:
        raise ValidationError('Only items with status "Checked Out" can be assigned to an athlete')


def _descriptive(details: dict | None) -> dict:
    """Every descriptive field, None when not supplied, so an update replaces them all."""
    details = details or {}
    return {field: details.get(field) for field in DESCRIPTIVE_FIELDS}


def _get_item_or_404(store: DocumentStore, item_doc_id: str, for_update: bool = False) -> dict:
    item = store.get(INVENTORY, item_doc_id, for_update=for_update)
    if not item:
        raise NotFoundError("Inventory item not found")
    return item


def _require_athlete(store: DocumentStore, athlete_id: str) -> dict:
    athlete = store.get(ATHLETES, athlete_id)
    if not athlete:
        # The item exists, the reference is what's wrong
        raise NotFoundError("Selected athlete does not exist", status_code=400)
    return athlete


def _set_uniform(store: DocumentStore, athlete_id: str, item_code: str):
    store.update(ATHLETES, athlete_id, {"hasUniform": True, "uniformId": item_code})
    logger.info(f"[Inventory] Athlete {athlete_id} now holds {item_code}")


def _clear_uniform(store: DocumentStore, athlete_id: str):
    if not store.get(ATHLETES, athlete_id):
        logger.warning(f"[Inventory] Athlete {athlete_id} no longer exists, nothing to clear")
        return
    store.update(ATHLETES, athlete_id, {"hasUniform": False, "uniformId": None})
    logger.info(f"[Inventory] Athlete {athlete_id} uniform cleared")


def _move_assignment(store: DocumentStore, previous: str | None, new: str | None, item_code: str):
    if new == previous:
        return
    if previous:
        _clear_uniform(store, previous)
    if new:
        _set_uniform(store, new, item_code)


def _resolve_name(store: DocumentStore, athlete_id: str | None, cache: dict | None = None) -> str | None:
    if not athlete_id:
        return None
    if cache is not None and athlete_id in cache:
        return cache[athlete_id]
    athlete = store.get(ATHLETES, athlete_id)
    name = athlete_display_name(athlete) if athlete else None
    if athlete is None:
        logger.warning(f"[Inventory] Assigned athlete {athlete_id} not found, name left empty")
    if cache is not None:
        cache[athlete_id] = name
    return name


def _with_name(store: DocumentStore, item: dict, cache: dict | None = None) -> dict:
    return {**item, "assignedToName": _resolve_name(store, normalize_ref(item.get("assignedTo")), cache)}


# ═══════════════════════════════════════════════════════════
# ASSIGNMENT ENGINE
# ═══════════════════════════════════════════════════════════

def create_item(
    store: DocumentStore,
    item_id: str | None,
    item_type: str | None,
    status: str | None,
    assigned_to: str | None = None,
    details: dict | None = None,
) -> dict:
    assigned_to = normalize_ref(assigned_to)
    _validate_item_fields(item_id, item_type, status, assigned_to)

    try:
        if assigned_to:
            _require_athlete(store, assigned_to)

        now = server_timestamp()
        item_data = {
            "itemId": item_id,
            "type": item_type,
            "status": status,
            "assignedTo": assigned_to,
            **_descriptive(details),
            "createdAt": now,
            "updatedAt": now,
        }
        doc_id = store.add(INVENTORY, item_data)

        if assigned_to:
            _set_uniform(store, assigned_to, item_id)

        store.commit()
    except Exception:
        store.rollback()
        raise

    logger.info(f"[Inventory] Created {item_id} ({doc_id}) status={status} assignedTo={assigned_to}")
    # Name is joined on the next read
    return {"id": doc_id, **item_data, "assignedToName": None}


def update_item(
    store: DocumentStore,
    item_doc_id: str,
    item_id: str | None,
    item_type: str | None,
    status: str | None,
    assigned_to: str | None = None,
    details: dict | None = None,
) -> dict:
    assigned_to = normalize_ref(assigned_to)
    _validate_item_fields(item_id, item_type, status, assigned_to)

    athlete = None
    try:
        current = _get_item_or_404(store, item_doc_id, for_update=True)
        previously_assigned = normalize_ref(current.get("assignedTo"))

        if assigned_to and assigned_to != previously_assigned:
            athlete = _require_athlete(store, assigned_to)

        _move_assignment(store, previously_assigned, assigned_to, item_id)
        if assigned_to and assigned_to == previously_assigned and current.get("itemId") != item_id:
            # Same holder, renamed item: keep the mirror in step
            _set_uniform(store, assigned_to, item_id)

        item_data = {
            "itemId": item_id,
            "type": item_type,
            "status": status,
            "assignedTo": assigned_to,
            **_descriptive(details),
            "updatedAt": server_timestamp(),
        }
        store.update(INVENTORY, item_doc_id, item_data)
        store.commit()
    except Exception:
        store.rollback()
        raise

    logger.info(
        f"[Inventory] Updated {item_doc_id}: status={status} "
        f"assignedTo {previously_assigned} -> {assigned_to}"
    )
    name = athlete_display_name(athlete) if athlete else _resolve_name(store, assigned_to)
    return {**current, **item_data, "id": item_doc_id, "assignedToName": name}


def assign_item(store: DocumentStore, item_doc_id: str, assigned_to: str | None = None) -> dict:
    """(Re)assign or release an item without touching its descriptive fields."""
    assigned_to = normalize_ref(assigned_to)

    athlete = None
    try:
        current = _get_item_or_404(store, item_doc_id, for_update=True)
        previously_assigned = normalize_ref(current.get("assignedTo"))

        # A held item can always be passed on or returned
        if current.get("status") != STATUS_AVAILABLE and not previously_assigned:
            raise ValidationError("Only available items can be assigned")

        if assigned_to and assigned_to != previously_assigned:
            athlete = _require_athlete(store, assigned_to)

        _move_assignment(store, previously_assigned, assigned_to, current.get("itemId"))

        item_data = {
            "status": STATUS_CHECKED_OUT if assigned_to else STATUS_AVAILABLE,
            "assignedTo": assigned_to,
            "updatedAt": server_timestamp(),
        }
        store.update(INVENTORY, item_doc_id, item_data)
        store.commit()
    except Exception:
        store.rollback()
        raise

    logger.info(f"[Inventory] Assigned {item_doc_id}: {previously_assigned} -> {assigned_to}")
    name = athlete_display_name(athlete) if athlete else _resolve_name(store, assigned_to)
    return {**current, **item_data, "id": item_doc_id, "assignedToName": name}


def delete_item(store: DocumentStore, item_doc_id: str) -> None:
    try:
        current = _get_item_or_404(store, item_doc_id, for_update=True)
        assigned_to = normalize_ref(current.get("assignedTo"))

        # Release the holder first so the athlete is never left pointing at nothing
        if assigned_to:
            _clear_uniform(store, assigned_to)

        store.delete(INVENTORY, item_doc_id)
        store.commit()
    except Exception:
        store.rollback()
        raise

    logger.info(f"[Inventory] Deleted {item_doc_id} (was assigned to {assigned_to})")


# ═══════════════════════════════════════════════════════════
# READ MODEL
# ═══════════════════════════════════════════════════════════

def list_inventory(store: DocumentStore) -> list[dict]:
    cache: dict = {}
    return [_with_name(store, item, cache) for item in store.list(INVENTORY)]


def get_item(store: DocumentStore, item_doc_id: str) -> dict:
    return _with_name(store, _get_item_or_404(store, item_doc_id))


def list_athlete_items(store: DocumentStore, athlete_id: str) -> list[dict]:
    """Every item currently held by the athlete, however many there are."""
    items = store.list(INVENTORY, {"assignedTo": athlete_id})
    cache: dict = {}
    return [_with_name(store, item, cache) for item in items]


def list_available_items(store: DocumentStore) -> list[dict]:
    """Items that can be handed out right now."""
    return [
        {**item, "assignedToName": None}
        for item in store.list(INVENTORY, {"status": STATUS_AVAILABLE})
        if not normalize_ref(item.get("assignedTo"))
    ]


def needs_attention(item: dict) -> bool:
    if item.get("condition") in ATTENTION_CONDITIONS:
        return True
    notes = (item.get("notes") or "").lower()
    return any(word in notes for word in ATTENTION_KEYWORDS)


def list_items_needing_attention(store: DocumentStore) -> list[dict]:
    cache: dict = {}
    return [_with_name(store, item, cache) for item in store.list(INVENTORY) if needs_attention(item)]


def find_uniform_mismatches(store: DocumentStore) -> list[dict]:
    """
    Compare each athlete's hasUniform/uniformId mirror with the items that
    actually point at them. Also reports items assigned to athletes that no
    longer exist. Read-only.
    """
    held: dict[str, list[dict]] = {}
    for item in store.list(INVENTORY):
        ref = normalize_ref(item.get("assignedTo"))
        if ref:
            held.setdefault(ref, []).append(item)

    mismatches = []
    for athlete in store.list(ATHLETES):
        items = held.pop(athlete["id"], [])
        codes = [i.get("itemId") for i in items]
        has_uniform = bool(athlete.get("hasUniform"))
        uniform_id = athlete.get("uniformId")

        reason = None
        if has_uniform and not items:
            reason = "marked as holding a uniform but no item is assigned"
        elif items and not has_uniform:
            reason = "holds items but is not marked as holding a uniform"
        elif has_uniform and uniform_id not in codes:
            reason = "uniformId does not match any assigned item"

        if reason:
            mismatches.append({
                "athleteId": athlete["id"],
                "athleteName": athlete_display_name(athlete),
                "hasUniform": has_uniform,
                "uniformId": uniform_id,
                "assignedItemIds": [i["id"] for i in items],
                "reason": reason,
            })

    # Whatever is left points at a missing athlete
    for athlete_id, items in held.items():
        mismatches.append({
            "athleteId": athlete_id,
            "athleteName": None,
            "hasUniform": False,
            "uniformId": None,
            "assignedItemIds": [i["id"] for i in items],
            "reason": "items are assigned to an athlete that does not exist",
        })

    return mismatches
