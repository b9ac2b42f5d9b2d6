import pytest

from app.core.errors import NotFoundError, ValidationError
from app.services import event_service


def test_events_are_listed_by_date(store) -> None:
    event_service.create_event(store, "Conference Meet", "2026-05-02", "Elite Sprinters", "Meet")
    event_service.create_event(store, "Hill repeats", "2026-04-20", "Elite Distance", "Practice")

    titles = [e["title"] for e in event_service.list_events(store)]

    assert titles == ["Hill repeats", "Conference Meet"]


def test_event_requires_fields(store) -> None:
    with pytest.raises(ValidationError, match="are required fields"):
        event_service.create_event(store, "Practice", None, "Elite Sprinters", "Practice")


def test_event_type_is_checked(store) -> None:
    with pytest.raises(ValidationError, match='either "Practice" or "Meet"'):
        event_service.create_event(store, "Scrimmage", "2026-04-20", "Elite Sprinters", "Scrimmage")


def test_update_and_delete_event(store) -> None:
    event = event_service.create_event(store, "Relays", "2026-06-01", "Elite Sprinters", "Practice")

    updated = event_service.update_event(store, event["id"], "Relays", "2026-06-02", "Elite Sprinters", "Meet")
    assert updated["type"] == "Meet"
    assert updated["createdAt"] == event["createdAt"]

    event_service.delete_event(store, event["id"])
    with pytest.raises(NotFoundError):
        event_service.get_event(store, event["id"])


def test_events_over_http(client, auth_headers) -> None:
    payload = {"title": "Time trial", "date": "2026-04-25", "group": "Elite Distance", "type": "Practice"}

    r = client.post("/api/events", json=payload, headers=auth_headers)
    assert r.status_code == 201, r.text
    event_id = r.json()["id"]

    r = client.get(f"/api/events/{event_id}", headers=auth_headers)
    assert r.json()["title"] == "Time trial"

    r = client.put(f"/api/events/{event_id}", json={**payload, "type": "Race"}, headers=auth_headers)
    assert r.status_code == 400

    r = client.delete(f"/api/events/{event_id}", headers=auth_headers)
    assert r.json()["message"] == "Event deleted successfully"

    r = client.delete(f"/api/events/{event_id}", headers=auth_headers)
    assert r.status_code == 404
    assert r.json() == {"error": "Event not found"}
