"""Home screen snapshot. Clients re-fetch this after every write; nothing is cached."""
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from sunescape.database import get_db
from sunescape.models.checklist import Grocery, Todo
from sunescape.models.profile import Profile
from sunescape.schemas.checklist import ChecklistItemResponse
from sunescape.schemas.dashboard import DashboardSnapshot
from sunescape.schemas.invite import MyJoinRequestView
from sunescape.schemas.reservation import HouseSettingsResponse, ReservationResponse
from sunescape.services.checklists import list_items
from sunescape.services.house_settings import get_house_settings
from sunescape.services.invites import pending_invites
from sunescape.services.join_requests import my_join_requests
from sunescape.services.reservations import list_reservations
from sunescape.dependencies import get_current_user, profile_response
from sunescape.routers.invites import invite_view

router = APIRouter(prefix="/dashboard", tags=["dashboard"])


@router.get("", response_model=DashboardSnapshot)
def snapshot(
    db: Session = Depends(get_db),
    current_user: Profile = Depends(get_current_user),
):
    return DashboardSnapshot(
        profile=profile_response(current_user),
        settings=HouseSettingsResponse.model_validate(get_house_settings(db)),
        reservations=[ReservationResponse.model_validate(r) for r in list_reservations(db)],
        groceries=[ChecklistItemResponse.model_validate(i) for i in list_items(db, Grocery)],
        todos=[ChecklistItemResponse.model_validate(i) for i in list_items(db, Todo)],
        my_join_requests=[MyJoinRequestView.model_validate(jr) for jr in my_join_requests(db, current_user)],
        invites=[invite_view(p) for p in pending_invites(db, current_user)],
    )
