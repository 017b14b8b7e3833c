"""Todo data models using Pydantic."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class TodoCreate(BaseModel):
    """Payload for creating todos."""

    text: str


class TodoUpdate(BaseModel):
    """Payload for replacing the text of an existing todo."""

    text: str


class TodoCreated(BaseModel):
    """Identifier assigned to a newly created todo."""

    id: int = Field(..., ge=1)


class Todo(BaseModel):
    """Stored todo record.

    ``deleted`` is a soft-delete flag: deleted records stay in the store so
    their ids are never handed out again, but they are hidden from reads.
    """

    id: int = Field(..., ge=1)
    text: str
    deleted: bool = False

    model_config = ConfigDict(from_attributes=True)
