"""Broadcast invites: inbox filtering, accept (own reservation for the same dates) or decline.

A user never sees an invite they created or already answered. A decline can be
changed to an accept later; an accept is final because it already booked a
reservation.
"""
from collections import Counter
from dataclasses import dataclass
from datetime import date

from sqlalchemy.orm import Session

from sunescape.models.invite import Invite, InviteResponse, InviteResponseStatus
from sunescape.models.profile import Profile
from sunescape.models.reservation import Reservation
from sunescape.services.profiles import display_name
from sunescape.services.reservations import create_reservation
from sunescape.services.result import Ok, Result, conflict_error, not_found_error, validation_error

ALREADY_ACCEPTED_MESSAGE = "You already accepted this invite and have a reservation for these dates."


@dataclass
class PendingInvite:
    invite: Invite
    start_date: date | None
    end_date: date | None
    creator_name: str | None
    creator_email: str | None
    accept_count: int


def pending_invites(db: Session, user: Profile) -> list[PendingInvite]:
    invites = db.query(Invite).order_by(Invite.created_at.desc(), Invite.id.desc()).all()
    responded = {
        row.invite_id
        for row in db.query(InviteResponse.invite_id).filter(InviteResponse.user_id == user.id).all()
    }
    pending = [inv for inv in invites if inv.id not in responded and inv.created_by != user.id]
    if not pending:
        return []

    invite_ids = [inv.id for inv in pending]
    accepted = Counter(
        row.invite_id
        for row in db.query(InviteResponse.invite_id)
        .filter(InviteResponse.invite_id.in_(invite_ids), InviteResponse.status == InviteResponseStatus.accepted)
        .all()
    )

    out = []
    for inv in pending:
        resv = inv.reservation
        creator = inv.creator
        out.append(
            PendingInvite(
                invite=inv,
                start_date=resv.start_date if resv else None,
                end_date=resv.end_date if resv else None,
                creator_name=creator.full_name if creator else None,
                creator_email=creator.email if creator else None,
                accept_count=accepted.get(inv.id, 0),
            )
        )
    return out


def _upsert_response(db: Session, invite_id: int, user_id: int, status: InviteResponseStatus, rooms_count: int) -> InviteResponse:
    row = _existing_response(db, invite_id, user_id)
    if row:
        row.status = status
        row.rooms_count = rooms_count
    else:
        row = InviteResponse(invite_id=invite_id, user_id=user_id, status=status, rooms_count=rooms_count)
        db.add(row)
    db.commit()
    db.refresh(row)
    return row


def _get_invite(db: Session, invite_id: int) -> Invite | None:
    return db.query(Invite).filter(Invite.id == invite_id).first()


def _existing_response(db: Session, invite_id: int, user_id: int) -> InviteResponse | None:
    return (
        db.query(InviteResponse)
        .filter(InviteResponse.invite_id == invite_id, InviteResponse.user_id == user_id)
        .first()
    )


def _already_accepted(db: Session, invite_id: int, user_id: int) -> bool:
    row = _existing_response(db, invite_id, user_id)
    return row is not None and row.status == InviteResponseStatus.accepted


def accept_invite(db: Session, user: Profile, invite_id: int, rooms: int) -> Result[Reservation]:
    """Book the invite's dates as the responder's own reservation, then record the acceptance."""
    invite = _get_invite(db, invite_id)
    if not invite:
        return not_found_error("Invite not found")
    if invite.created_by == user.id:
        return validation_error("You can't respond to your own invite.")
    original = invite.reservation
    if not original:
        return not_found_error("Reservation not found. Please refresh.")

    if _already_accepted(db, invite.id, user.id):
        return conflict_error(ALREADY_ACCEPTED_MESSAGE)

    created = create_reservation(
        db,
        user,
        name=display_name(user, fallback="Guest"),
        start_date=original.start_date,
        end_date=original.end_date,
        rooms=rooms,
    )
    if not created.ok:
        return created
    _upsert_response(db, invite.id, user.id, InviteResponseStatus.accepted, rooms)
    return created


def decline_invite(db: Session, user: Profile, invite_id: int) -> Result[InviteResponse]:
    invite = _get_invite(db, invite_id)
    if not invite:
        return not_found_error("Invite not found")
    if invite.created_by == user.id:
        return validation_error("You can't respond to your own invite.")
    if _already_accepted(db, invite.id, user.id):
        # An accept already booked a reservation, so it is final
        return conflict_error(ALREADY_ACCEPTED_MESSAGE)
    return Ok(_upsert_response(db, invite.id, user.id, InviteResponseStatus.declined, 0))
