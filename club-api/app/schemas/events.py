from pydantic import BaseModel


class EventIn(BaseModel):
    title: str | None = None
    date: str | None = None
    group: str | None = None
    type: str | None = None


class EventOut(BaseModel):
    id: str
    title: str
    date: str
    group: str
    type: str
    createdAt: str | None = None
    updatedAt: str | None = None
