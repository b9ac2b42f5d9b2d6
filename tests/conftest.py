from __future__ import annotations

import os
import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1] / "club-api"
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("SCHEDULER_ENABLED", "false")
os.environ.setdefault("JWT_SECRET", "test-secret")

from fastapi.testclient import TestClient  # noqa: E402

from app import models  # noqa: E402,F401
from app.core.db import Base, SessionLocal, engine  # noqa: E402
from app.core.security import create_access_token  # noqa: E402
from app.core.store import ATHLETES, INVENTORY, USERS, DocumentStore, server_timestamp  # noqa: E402
from app.deps import get_upload_service  # noqa: E402
from app.main import app  # noqa: E402
from app.services.upload_service import UploadService  # noqa: E402
from tests.fakes.s3 import FakeS3Client  # noqa: E402


@pytest.fixture(autouse=True)
def clean_db():
    """Fresh schema for every test (the in-memory database lives for the whole run)."""
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    yield


@pytest.fixture
def store():
    db = SessionLocal()
    try:
        yield DocumentStore(db)
    finally:
        db.close()


@pytest.fixture
def read_doc():
    """Read a document through a short-lived session, as another process would."""

    def _read(collection: str, doc_id: str) -> dict | None:
        db = SessionLocal()
        try:
            return DocumentStore(db).get(collection, doc_id)
        finally:
            db.close()

    return _read


@pytest.fixture
def seed():
    """Insert raw documents directly, bypassing every service rule."""

    def _seed(collection: str, data: dict, doc_id: str | None = None) -> str:
        db = SessionLocal()
        try:
            s = DocumentStore(db)
            new_id = s.add(collection, data, doc_id=doc_id)
            s.commit()
            return new_id
        finally:
            db.close()

    return _seed


@pytest.fixture
def make_athlete(seed):
    def _make(first: str = "Ada", last: str = "Runner", doc_id: str | None = None, **extra) -> str:
        return seed(ATHLETES, {
            "firstName": first,
            "lastName": last,
            "groupId": 1,
            "hasUniform": False,
            "uniformId": None,
            **extra,
        }, doc_id=doc_id)

    return _make


@pytest.fixture
def make_item(seed):
    def _make(item_id: str = "U1", status: str = "Available", assigned_to: str | None = None, **extra) -> str:
        now = server_timestamp()
        return seed(INVENTORY, {
            "itemId": item_id,
            "type": "Singlet",
            "status": status,
            "assignedTo": assigned_to,
            "createdAt": now,
            "updatedAt": now,
            **extra,
        })

    return _make


@pytest.fixture
def fake_s3() -> FakeS3Client:
    return FakeS3Client()


@pytest.fixture
def client(fake_s3):
    app.dependency_overrides[get_upload_service] = lambda: UploadService(
        client=fake_s3, bucket="club-test", public_base_url="https://cdn.example.test"
    )
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
def coach_id(seed) -> str:
    return seed(USERS, {
        "email": "coach@example.com",
        "displayName": "Coach",
        "passwordHash": "unused",
        "role": "coach",
        "isActive": True,
    })


@pytest.fixture
def auth_headers(coach_id) -> dict:
    return {"Authorization": f"Bearer {create_access_token(coach_id)}"}
