"""
All SQLAlchemy models. Schema is the source of truth for new DBs.
Base.metadata.create_all() creates every table; no migration scripts needed for fresh installs.
"""
from sunescape.models.profile import Profile, ProfileRole
from sunescape.models.house_settings import HouseSettings
from sunescape.models.reservation import Reservation
from sunescape.models.ledger import ReservationGuest, ReservationNote
from sunescape.models.checklist import Grocery, Todo
from sunescape.models.invite import Invite, InviteResponse, InviteResponseStatus
from sunescape.models.join_request import JoinRequest, JoinRequestStatus

__all__ = [
    "Profile",
    "ProfileRole",
    "HouseSettings",
    "Reservation",
    "ReservationGuest",
    "ReservationNote",
    "Grocery",
    "Todo",
    "Invite",
    "InviteResponse",
    "InviteResponseStatus",
    "JoinRequest",
    "JoinRequestStatus",
]
