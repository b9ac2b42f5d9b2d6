from pydantic import BaseModel, Field


class UserOut(BaseModel):
    id: str
    email: str
    displayName: str = ""
    role: str


class RoleUpdateIn(BaseModel):
    role: str = Field(min_length=1)
