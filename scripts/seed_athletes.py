"""
Seed the athletes collection with a few sample athletes.
Run from the project root: python scripts/seed_athletes.py
Does nothing if the collection already has documents.
"""
import os
import sys

# Add parent directory to path for imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'club-api'))

from app import models  # noqa: E402,F401
from app.core.db import Base, SessionLocal, engine  # noqa: E402
from app.core.store import ATHLETES, DocumentStore, server_timestamp  # noqa: E402
from app.services.athlete_service import split_name  # noqa: E402
from app.services.groups import get_group_id  # noqa: E402

# Older seed files carried a single "name" field; they are split on load
SAMPLE_ATHLETES = [
    {"name": "John Smith", "group": "Elite Sprinters"},
    {"name": "Sarah Johnson", "group": "Beginner Distance"},
    {"name": "Michael Chen", "group": "Intermediate Throwers"},
]


def to_document(entry: dict) -> dict:
    if "firstName" in entry:
        first_name, last_name = entry["firstName"], entry.get("lastName", "")
    else:
        first_name, last_name = split_name(entry.get("name", ""))
    now = server_timestamp()
    return {
        "firstName": first_name,
        "lastName": last_name,
        "groupId": get_group_id(entry.get("group")),
        "hasUniform": False,
        "uniformId": None,
        "createdAt": now,
        "updatedAt": now,
    }


def seed_athletes():
    Base.metadata.create_all(bind=engine)
    db = SessionLocal()
    store = DocumentStore(db)
    try:
        existing = store.list(ATHLETES)
        if existing:
            print(f"Athletes collection already has {len(existing)} documents. Skipping.")
            return

        for entry in SAMPLE_ATHLETES:
            store.add(ATHLETES, to_document(entry))
        store.commit()
        print(f"Added {len(SAMPLE_ATHLETES)} sample athletes.")
    except Exception:
        store.rollback()
        raise
    finally:
        db.close()


if __name__ == "__main__":
    seed_athletes()
