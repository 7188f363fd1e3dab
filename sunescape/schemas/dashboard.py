"""Everything the home screen needs after a write, fetched in one call."""
from pydantic import BaseModel
from sunescape.schemas.auth import ProfileResponse
from sunescape.schemas.checklist import ChecklistItemResponse
from sunescape.schemas.invite import InviteView, MyJoinRequestView
from sunescape.schemas.reservation import HouseSettingsResponse, ReservationResponse


class DashboardSnapshot(BaseModel):
    profile: ProfileResponse
    settings: HouseSettingsResponse
    reservations: list[ReservationResponse]
    groceries: list[ChecklistItemResponse]
    todos: list[ChecklistItemResponse]
    my_join_requests: list[MyJoinRequestView]
    invites: list[InviteView]
