from fastapi import APIRouter, Depends

from app.core.store import DocumentStore
from app.deps import get_current_user, get_store
from app.schemas.inventory import AssignIn, InventoryItemIn, InventoryItemOut, UniformMismatchOut
from app.schemas.upload import MessageOut
from app.services import inventory_service

router = APIRouter(prefix="/api/inventory", tags=["inventory"])


@router.get("", response_model=list[InventoryItemOut])
def list_inventory(
    store: DocumentStore = Depends(get_store),
    user=Depends(get_current_user),
):
    return inventory_service.list_inventory(store)


# Fixed paths are declared before /{inventory_id} so they are not taken for an id
@router.get("/audit", response_model=list[UniformMismatchOut])
def uniform_audit(
    store: DocumentStore = Depends(get_store),
    user=Depends(get_current_user),
):
    return inventory_service.find_uniform_mismatches(store)


@router.get("/available", response_model=list[InventoryItemOut])
def available_inventory(
    store: DocumentStore = Depends(get_store),
    user=Depends(get_current_user),
):
    return inventory_service.list_available_items(store)


@router.get("/attention", response_model=list[InventoryItemOut])
def inventory_needing_attention(
    store: DocumentStore = Depends(get_store),
    user=Depends(get_current_user),
):
    return inventory_service.list_items_needing_attention(store)


@router.get("/{inventory_id}", response_model=InventoryItemOut)
def get_inventory_item(
    inventory_id: str,
    store: DocumentStore = Depends(get_store),
    user=Depends(get_current_user),
):
    return inventory_service.get_item(store, inventory_id)


@router.post("", response_model=InventoryItemOut, status_code=201)
def create_inventory_item(
    payload: InventoryItemIn,
    store: DocumentStore = Depends(get_store),
    user=Depends(get_current_user),
):
    return inventory_service.create_item(
        store,
        item_id=payload.item_id,
        item_type=payload.type,
        status=payload.status,
        assigned_to=payload.assigned_to,
        details=payload.details(),
    )


@router.put("/{inventory_id}", response_model=InventoryItemOut)
def update_inventory_item(
    inventory_id: str,
    payload: InventoryItemIn,
    store: DocumentStore = Depends(get_store),
    user=Depends(get_current_user),
):
    return inventory_service.update_item(
        store,
        inventory_id,
        item_id=payload.item_id,
        item_type=payload.type,
        status=payload.status,
        assigned_to=payload.assigned_to,
        details=payload.details(),
    )


@router.put("/{inventory_id}/assign", response_model=InventoryItemOut)
def assign_inventory_item(
    inventory_id: str,
    payload: AssignIn,
    store: DocumentStore = Depends(get_store),
    user=Depends(get_current_user),
):
    return inventory_service.assign_item(store, inventory_id, payload.assigned_to)


@router.delete("/{inventory_id}", response_model=MessageOut)
def delete_inventory_item(
    inventory_id: str,
    store: DocumentStore = Depends(get_store),
    user=Depends(get_current_user),
):
    inventory_service.delete_item(store, inventory_id)
    return MessageOut(message="Inventory item deleted successfully")
