"""Join requests: a non-owner asks to join one reservation; the owner (or an admin) approves or denies."""
from dataclasses import dataclass

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from sunescape.models.join_request import JoinRequest, JoinRequestStatus
from sunescape.models.ledger import ReservationGuest
from sunescape.models.profile import Profile
from sunescape.services import notifications
from sunescape.services.dates import to_iso
from sunescape.services.outbox import Outbox
from sunescape.services.profiles import display_name
from sunescape.services.reservations import can_edit_reservation, get_reservation
from sunescape.services.result import (
    Ok,
    Result,
    conflict_error,
    not_found_error,
    permission_error,
    validation_error,
)

DUPLICATE_REQUEST_MESSAGE = "You already sent a request for this reservation."


@dataclass
class PendingJoinRequest:
    request: JoinRequest
    requester_name: str


def submit_join_request(
    db: Session,
    requester: Profile,
    reservation_id: int,
    rooms_needed: int = 1,
    message: str | None = None,
    outbox: Outbox | None = None,
) -> Result[JoinRequest]:
    found = get_reservation(db, reservation_id)
    if not found.ok:
        return found
    reservation = found.value
    if reservation.created_by == requester.id:
        return validation_error("You can't request to join your own reservation.")

    if rooms_needed is None or rooms_needed < 1:
        return validation_error("Rooms needed must be at least 1.")
    message = (message or "").strip() or None
    jr = JoinRequest(
        reservation_id=reservation.id,
        requester_id=requester.id,
        rooms_needed=rooms_needed,
        message=message,
        status=JoinRequestStatus.pending,
    )
    db.add(jr)
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        return conflict_error(DUPLICATE_REQUEST_MESSAGE)
    db.refresh(jr)

    if outbox is not None:
        outbox.enqueue(
            "join request email",
            notifications.notify_join_request,
            reservation.created_by,
            display_name(requester, fallback="Guest"),
            reservation.name,
            to_iso(reservation.start_date),
            to_iso(reservation.end_date),
            rooms_needed,
            message,
        )
    return Ok(jr)


def my_join_requests(db: Session, user: Profile) -> list[JoinRequest]:
    return db.query(JoinRequest).filter(JoinRequest.requester_id == user.id).all()


def pending_join_requests(db: Session, actor: Profile, reservation_id: int) -> Result[list[PendingJoinRequest]]:
    found = get_reservation(db, reservation_id)
    if not found.ok:
        return found
    if not can_edit_reservation(actor, found.value):
        return permission_error("Only the reservation owner can review join requests.")
    rows = (
        db.query(JoinRequest)
        .filter(JoinRequest.reservation_id == reservation_id, JoinRequest.status == JoinRequestStatus.pending)
        .order_by(JoinRequest.created_at.asc(), JoinRequest.id.asc())
        .all()
    )
    return Ok([PendingJoinRequest(request=jr, requester_name=display_name(jr.requester)) for jr in rows])


def _decidable(db: Session, actor: Profile, request_id: int) -> Result[JoinRequest]:
    jr = db.query(JoinRequest).filter(JoinRequest.id == request_id).first()
    if not jr:
        return not_found_error("Join request not found")
    if not can_edit_reservation(actor, jr.reservation):
        return permission_error("Only the reservation owner can answer join requests.")
    if jr.status != JoinRequestStatus.pending:
        return validation_error(f"This request was already {jr.status.value}.")
    return Ok(jr)


def approve_join_request(db: Session, actor: Profile, request_id: int, outbox: Outbox | None = None) -> Result[ReservationGuest]:
    """Mark approved and add the requester to the guest list with their room count."""
    found = _decidable(db, actor, request_id)
    if not found.ok:
        return found
    jr = found.value
    reservation = jr.reservation

    jr.status = JoinRequestStatus.approved
    guest = ReservationGuest(
        reservation_id=reservation.id,
        name=display_name(jr.requester, fallback="Guest"),
        count=jr.rooms_needed,
        user_id=jr.requester_id,
        created_by=actor.id,
    )
    db.add(guest)
    db.commit()
    db.refresh(guest)

    if outbox is not None:
        outbox.enqueue(
            "join approved email",
            notifications.notify_join_response,
            jr.requester_id,
            reservation.name,
            to_iso(reservation.start_date),
            to_iso(reservation.end_date),
            True,
        )
    return Ok(guest)


def deny_join_request(db: Session, actor: Profile, request_id: int, outbox: Outbox | None = None) -> Result[JoinRequest]:
    found = _decidable(db, actor, request_id)
    if not found.ok:
        return found
    jr = found.value
    reservation = jr.reservation

    jr.status = JoinRequestStatus.denied
    db.commit()
    db.refresh(jr)

    if outbox is not None:
        outbox.enqueue(
            "join denied email",
            notifications.notify_join_response,
            jr.requester_id,
            reservation.name,
            to_iso(reservation.start_date),
            to_iso(reservation.end_date),
            False,
        )
    return Ok(jr)
