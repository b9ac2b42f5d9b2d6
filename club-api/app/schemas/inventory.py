"""
Inventory schemas.

Inputs are deliberately loose (everything optional): required-field and
status checks belong to the inventory service so the caller gets the same
messages whichever way it reaches it.
"""
from pydantic import AliasChoices, BaseModel, ConfigDict, Field


class InventoryItemIn(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    item_id: str | None = Field(default=None, alias="itemId")
    type: str | None = None
    status: str | None = None
    assigned_to: str | None = Field(
        default=None,
        alias="assignedTo",
        validation_alias=AliasChoices("assignedTo", "athleteId"),
    )

    # Descriptive, all optional
    category: str | None = None
    size: str | None = None
    condition: str | None = None
    location: str | None = None
    notes: str | None = None

    def details(self) -> dict:
        return self.model_dump(include={"category", "size", "condition", "location", "notes"}, exclude_none=True)


class AssignIn(BaseModel):
    """``athleteId`` is accepted for older clients."""
    model_config = ConfigDict(populate_by_name=True)

    assigned_to: str | None = Field(
        default=None,
        alias="assignedTo",
        validation_alias=AliasChoices("assignedTo", "athleteId"),
    )


class InventoryItemOut(BaseModel):
    # Unknown stored fields are passed through untouched
    model_config = ConfigDict(extra="allow")

    id: str
    itemId: str | None = None
    type: str | None = None
    status: str | None = None
    assignedTo: str | None = None
    assignedToName: str | None = None
    category: str | None = None
    size: str | None = None
    condition: str | None = None
    location: str | None = None
    notes: str | None = None
    createdAt: str | None = None
    updatedAt: str | None = None


class UniformMismatchOut(BaseModel):
    athleteId: str
    athleteName: str | None = None
    hasUniform: bool
    uniformId: str | None = None
    assignedItemIds: list[str]
    reason: str
