from fastapi import APIRouter, Depends

from app.core.store import DocumentStore
from app.deps import get_current_user, get_store
from app.schemas.events import EventIn, EventOut
from app.schemas.upload import MessageOut
from app.services import event_service

router = APIRouter(prefix="/api/events", tags=["events"])


@router.get("", response_model=list[EventOut])
def list_events(
    store: DocumentStore = Depends(get_store),
    user=Depends(get_current_user),
):
    return event_service.list_events(store)


@router.get("/{event_id}", response_model=EventOut)
def get_event(
    event_id: str,
    store: DocumentStore = Depends(get_store),
    user=Depends(get_current_user),
):
    return event_service.get_event(store, event_id)


@router.post("", response_model=EventOut, status_code=201)
def create_event(
    payload: EventIn,
    store: DocumentStore = Depends(get_store),
    user=Depends(get_current_user),
):
    return event_service.create_event(store, payload.title, payload.date, payload.group, payload.type)


@router.put("/{event_id}", response_model=EventOut)
def update_event(
    event_id: str,
    payload: EventIn,
    store: DocumentStore = Depends(get_store),
    user=Depends(get_current_user),
):
    return event_service.update_event(store, event_id, payload.title, payload.date, payload.group, payload.type)


@router.delete("/{event_id}", response_model=MessageOut)
def delete_event(
    event_id: str,
    store: DocumentStore = Depends(get_store),
    user=Depends(get_current_user),
):
    event_service.delete_event(store, event_id)
    return MessageOut(message="Event deleted successfully")
