from fastapi import Depends, HTTPException
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jose import JWTError
from sqlalchemy.orm import Session
from app.core.db import SessionLocal
from app.core.security import decode_access_token
from app.core.store import USERS, DocumentStore
from app.services.upload_service import UploadService
from app.services.user_service import ROLE_ADMIN

bearer = HTTPBearer(auto_error=False)

def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()

def get_store(db: Session = Depends(get_db)) -> DocumentStore:
    return DocumentStore(db)

def get_upload_service() -> UploadService:
    return UploadService()

def get_current_user(
    creds: HTTPAuthorizationCredentials | None = Depends(bearer),
    store: DocumentStore = Depends(get_store),
) -> dict:
    if creds is None:
        raise HTTPException(status_code=401, detail="Unauthorized")
    try:
        payload = decode_access_token(creds.credentials)
        uid = payload.get("sub")
        if not uid:
            raise HTTPException(status_code=401, detail="Invalid token")
    except JWTError:
        raise HTTPException(status_code=401, detail="Invalid token")

    user = store.get(USERS, uid)
    if not user or not user.get("isActive", True):
        raise HTTPException(status_code=401, detail="User inactive or not found")
    return user

def require_admin(user: dict = Depends(get_current_user)) -> dict:
    if user.get("role") != ROLE_ADMIN:
        raise HTTPException(status_code=403, detail="Only admins can modify user roles")
    return user
