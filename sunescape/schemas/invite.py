"""Invite and join-request schemas."""
from datetime import date, datetime
from pydantic import BaseModel, Field
from sunescape.models.invite import InviteResponseStatus
from sunescape.models.join_request import JoinRequestStatus


class InviteView(BaseModel):
    id: int
    reservation_id: int
    created_by: int
    message: str | None = None
    created_at: datetime | None = None
    start_date: date | None = None
    end_date: date | None = None
    creator_name: str | None = None
    creator_email: str | None = None
    accept_count: int = 0


class InviteAccept(BaseModel):
    rooms: int = Field(1, ge=1)


class InviteResponseView(BaseModel):
    invite_id: int
    user_id: int
    status: InviteResponseStatus
    rooms_count: int

    class Config:
        from_attributes = True


class JoinRequestCreate(BaseModel):
    rooms_needed: int = Field(1, ge=1)
    message: str | None = None


class JoinRequestResponse(BaseModel):
    id: int
    reservation_id: int
    requester_id: int
    rooms_needed: int
    message: str | None = None
    status: JoinRequestStatus
    created_at: datetime | None = None

    class Config:
        from_attributes = True


class PendingJoinRequestView(JoinRequestResponse):
    requester_name: str


class MyJoinRequestView(BaseModel):
    reservation_id: int
    status: JoinRequestStatus

    class Config:
        from_attributes = True
