"""Coach accounts stored in the ``users`` collection."""
import logging

from app.core.errors import NotFoundError, ValidationError
from app.core.security import hash_password, verify_password
from app.core.store import USERS, DocumentStore, server_timestamp

logger = logging.getLogger(__name__)

ROLE_COACH = "coach"
ROLE_ADMIN = "admin"
ALLOWED_ROLES = (ROLE_COACH, ROLE_ADMIN)


def find_by_email(store: DocumentStore, email: str) -> dict | None:
    rows = store.list(USERS, {"email": email.strip().lower()})
    return rows[0] if rows else None


def register_user(store: DocumentStore, email: str, password: str, display_name: str = "") -> dict:
    email = email.strip().lower()
    if find_by_email(store, email):
        raise ValidationError("Email already used")

    data = {
        "email": email,
        "displayName": display_name or "",
        "passwordHash": hash_password(password),
        # Every new account is a coach; admins are promoted afterwards
        "role": ROLE_COACH,
        "isActive": True,
        "createdAt": server_timestamp(),
    }
    try:
        uid = store.add(USERS, data)
        store.commit()
    except Exception:
        store.rollback()
        raise

    logger.info(f"[Users] Registered {email} ({uid})")
    return {"id": uid, **data}


def authenticate(store: DocumentStore, email: str, password: str) -> dict | None:
    user = find_by_email(store, email)
    if not user or not verify_password(password, user.get("passwordHash", "")):
        return None
    return user


def set_role(store: DocumentStore, uid: str, role: str) -> dict:
    if role not in ALLOWED_ROLES:
        raise ValidationError(f"Role must be one of: {', '.join(ALLOWED_ROLES)}")
    try:
        user = store.get(USERS, uid)
        if not user:
            raise NotFoundError("User not found")
        store.update(USERS, uid, {"role": role, "updatedAt": server_timestamp()})
        store.commit()
    except Exception:
        store.rollback()
        raise

    logger.info(f"[Users] {uid} role set to {role}")
    return {**user, "role": role}
