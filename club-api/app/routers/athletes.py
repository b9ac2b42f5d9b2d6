from fastapi import APIRouter, Depends

from app.core.store import DocumentStore
from app.deps import get_current_user, get_store
from app.schemas.athletes import AthleteIn, AthleteOut
from app.schemas.inventory import InventoryItemOut
from app.schemas.upload import MessageOut
from app.services import athlete_service, inventory_service
from app.services.groups import list_groups

router = APIRouter(prefix="/api/athletes", tags=["athletes"])


@router.get("", response_model=list[AthleteOut])
def list_athletes(
    store: DocumentStore = Depends(get_store),
    user=Depends(get_current_user),
):
    return athlete_service.list_athletes(store)


@router.get("/groups", response_model=list[str])
def athlete_groups(user=Depends(get_current_user)):
    return list_groups()


@router.get("/{athlete_id}", response_model=AthleteOut)
def get_athlete(
    athlete_id: str,
    store: DocumentStore = Depends(get_store),
    user=Depends(get_current_user),
):
    return athlete_service.get_athlete(store, athlete_id)


@router.get("/{athlete_id}/items", response_model=list[InventoryItemOut])
def athlete_items(
    athlete_id: str,
    store: DocumentStore = Depends(get_store),
    user=Depends(get_current_user),
):
    athlete_service.get_athlete(store, athlete_id)
    return inventory_service.list_athlete_items(store, athlete_id)


@router.post("", response_model=AthleteOut, status_code=201)
def create_athlete(
    payload: AthleteIn,
    store: DocumentStore = Depends(get_store),
    user=Depends(get_current_user),
):
    return athlete_service.create_athlete(store, payload.name, payload.group)


@router.put("/{athlete_id}", response_model=AthleteOut)
def update_athlete(
    athlete_id: str,
    payload: AthleteIn,
    store: DocumentStore = Depends(get_store),
    user=Depends(get_current_user),
):
    return athlete_service.update_athlete(store, athlete_id, payload.name, payload.group)


@router.delete("/{athlete_id}", response_model=MessageOut)
def delete_athlete(
    athlete_id: str,
    store: DocumentStore = Depends(get_store),
    user=Depends(get_current_user),
):
    released = athlete_service.delete_athlete(store, athlete_id)
    message = "Athlete deleted successfully"
    if released:
        message += f" ({released} item(s) returned to inventory)"
    return MessageOut(message=message)
