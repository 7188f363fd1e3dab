"""Guest roster and notes schemas."""
from datetime import datetime
from pydantic import BaseModel, Field


class GuestCreate(BaseModel):
    name: str
    count: int = Field(1, ge=1)


class UserGuestCreate(BaseModel):
    user_id: int


class GuestResponse(BaseModel):
    id: int
    reservation_id: int
    name: str
    count: int
    user_id: int | None = None
    created_by: int
    created_at: datetime | None = None

    class Config:
        from_attributes = True


class NoteCreate(BaseModel):
    note: str


class NoteResponse(BaseModel):
    id: int
    reservation_id: int
    note: str
    created_by: int
    created_at: datetime | None = None

    class Config:
        from_attributes = True


class DirectoryEntry(BaseModel):
    id: int
    display_name: str
