"""Join requests: submit, owner review, approve/deny."""
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from sunescape.database import get_db
from sunescape.models.profile import Profile
from sunescape.schemas.invite import (
    JoinRequestCreate,
    JoinRequestResponse,
    MyJoinRequestView,
    PendingJoinRequestView,
)
from sunescape.schemas.ledger import GuestResponse
from sunescape.services import join_requests as svc
from sunescape.services.outbox import Outbox
from sunescape.dependencies import get_current_user, get_outbox, unwrap

router = APIRouter(tags=["join-requests"])


@router.post("/reservations/{reservation_id}/join-requests", response_model=JoinRequestResponse)
def submit(
    reservation_id: int,
    data: JoinRequestCreate,
    db: Session = Depends(get_db),
    current_user: Profile = Depends(get_current_user),
    outbox: Outbox = Depends(get_outbox),
):
    jr = unwrap(
        svc.submit_join_request(db, current_user, reservation_id, data.rooms_needed, data.message, outbox=outbox)
    )
    return JoinRequestResponse.model_validate(jr)


@router.get("/reservations/{reservation_id}/join-requests", response_model=list[PendingJoinRequestView])
def pending_for_reservation(
    reservation_id: int,
    db: Session = Depends(get_db),
    current_user: Profile = Depends(get_current_user),
):
    pending = unwrap(svc.pending_join_requests(db, current_user, reservation_id))
    return [
        PendingJoinRequestView(
            **JoinRequestResponse.model_validate(p.request).model_dump(),
            requester_name=p.requester_name,
        )
        for p in pending
    ]


@router.get("/join-requests/mine", response_model=list[MyJoinRequestView])
def mine(
    db: Session = Depends(get_db),
    current_user: Profile = Depends(get_current_user),
):
    return [MyJoinRequestView.model_validate(jr) for jr in svc.my_join_requests(db, current_user)]


@router.post("/join-requests/{request_id}/approve", response_model=GuestResponse)
def approve(
    request_id: int,
    db: Session = Depends(get_db),
    current_user: Profile = Depends(get_current_user),
    outbox: Outbox = Depends(get_outbox),
):
    guest = unwrap(svc.approve_join_request(db, current_user, request_id, outbox=outbox))
    return GuestResponse.model_validate(guest)


@router.post("/join-requests/{request_id}/deny", response_model=JoinRequestResponse)
def deny(
    request_id: int,
    db: Session = Depends(get_db),
    current_user: Profile = Depends(get_current_user),
    outbox: Outbox = Depends(get_outbox),
):
    jr = unwrap(svc.deny_join_request(db, current_user, request_id, outbox=outbox))
    return JoinRequestResponse.model_validate(jr)
