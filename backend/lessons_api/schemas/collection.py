"""Collection Schemas — response envelopes for the generic CRUD routes.

Invariants:
    - Documents themselves are never modeled (schema-less passthrough)
    - StatusMessage.msg is "success" or "error" for update/delete
"""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class InsertAck(BaseModel):
    """Insert acknowledgment — mirrors the store's insert result."""
    model_config = ConfigDict(populate_by_name=True)

    acknowledged: bool = True
    inserted_id: str = Field(alias="insertedId")


class StatusMessage(BaseModel):
    """Soft outcome for update/delete: no match is not an HTTP error."""
    msg: Literal["success", "error"]

    @classmethod
    def from_count(cls, count: int) -> "StatusMessage":
        return cls(msg="success" if count == 1 else "error")


class NotFoundMessage(BaseModel):
    msg: str = "Document not found"
