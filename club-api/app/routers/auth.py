from fastapi import APIRouter, Depends, HTTPException
from app.core.security import create_access_token
from app.core.store import DocumentStore
from app.deps import get_store
from app.schemas.auth import RegisterIn, LoginIn, TokenOut
from app.schemas.user import UserOut
from app.services import user_service

router = APIRouter(prefix="/api/auth", tags=["auth"])

@router.post("/register", response_model=UserOut, status_code=201)
def register(payload: RegisterIn, store: DocumentStore = Depends(get_store)):
    return user_service.register_user(store, payload.email, payload.password, payload.displayName)

@router.post("/login", response_model=TokenOut)
def login(payload: LoginIn, store: DocumentStore = Depends(get_store)):
    user = user_service.authenticate(store, payload.email, payload.password)
    if not user:
        raise HTTPException(status_code=401, detail="Invalid credentials")
    if not user.get("isActive", True):
        raise HTTPException(status_code=401, detail="User inactive or not found")

    token = create_access_token(user["id"])
    return TokenOut(access_token=token, user=UserOut(**user))
