from fastapi import APIRouter, Depends
from app.core.store import DocumentStore
from app.deps import get_current_user, get_store, require_admin
from app.schemas.user import RoleUpdateIn, UserOut
from app.services import user_service

router = APIRouter(prefix="/api/users", tags=["users"])

@router.get("/me", response_model=UserOut)
def me(user = Depends(get_current_user)):
    return user

@router.put("/{uid}/role", response_model=UserOut)
def set_user_role(
    uid: str,
    payload: RoleUpdateIn,
    store: DocumentStore = Depends(get_store),
    admin = Depends(require_admin),
):
    return user_service.set_role(store, uid, payload.role)
