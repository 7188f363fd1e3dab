"""Invite inbox: pending broadcasts for the current user, accept or decline."""
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from sunescape.database import get_db
from sunescape.models.profile import Profile
from sunescape.schemas.invite import InviteAccept, InviteResponseView, InviteView
from sunescape.schemas.reservation import ReservationResponse
from sunescape.services import invites as svc
from sunescape.dependencies import get_current_user, unwrap

router = APIRouter(prefix="/invites", tags=["invites"])


def invite_view(p: svc.PendingInvite) -> InviteView:
    inv = p.invite
    return InviteView(
        id=inv.id,
        reservation_id=inv.reservation_id,
        created_by=inv.created_by,
        message=inv.message,
        created_at=inv.created_at,
        start_date=p.start_date,
        end_date=p.end_date,
        creator_name=p.creator_name,
        creator_email=p.creator_email,
        accept_count=p.accept_count,
    )


@router.get("/", response_model=list[InviteView])
def inbox(
    db: Session = Depends(get_db),
    current_user: Profile = Depends(get_current_user),
):
    return [invite_view(p) for p in svc.pending_invites(db, current_user)]


@router.post("/{invite_id}/accept", response_model=ReservationResponse)
def accept(
    invite_id: int,
    data: InviteAccept,
    db: Session = Depends(get_db),
    current_user: Profile = Depends(get_current_user),
):
    """Join this stay: books the same dates for you with the rooms you need."""
    reservation = unwrap(svc.accept_invite(db, current_user, invite_id, data.rooms))
    return ReservationResponse.model_validate(reservation)


@router.post("/{invite_id}/decline", response_model=InviteResponseView)
def decline(
    invite_id: int,
    db: Session = Depends(get_db),
    current_user: Profile = Depends(get_current_user),
):
    return InviteResponseView.model_validate(unwrap(svc.decline_invite(db, current_user, invite_id)))
