"""Groceries and to-do schemas."""
from datetime import datetime
from pydantic import BaseModel


class ChecklistItemCreate(BaseModel):
    title: str
    owner: str | None = None


class ChecklistItemResponse(BaseModel):
    id: int
    title: str
    owner: str | None = None
    completed: bool
    created_by: int
    created_at: datetime | None = None

    class Config:
        from_attributes = True
