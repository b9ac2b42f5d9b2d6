from pydantic import BaseModel


class AthleteIn(BaseModel):
    name: str | None = None
    group: str | None = None


class AthleteOut(BaseModel):
    id: str
    name: str
    firstName: str
    lastName: str
    group: str
    groupId: int
    hasUniform: bool = False
    uniformId: str | None = None
