"""Reservation workflow: validation, create/update, edit-mode permission, optional broadcast invite."""
from datetime import date

from sqlalchemy.orm import Session

from sunescape.models.invite import Invite
from sunescape.models.profile import Profile
from sunescape.models.reservation import Reservation
from sunescape.services import notifications
from sunescape.services.dates import to_iso
from sunescape.services.house_settings import get_total_rooms
from sunescape.services.outbox import Outbox
from sunescape.services.profiles import can_manage, display_name
from sunescape.services.result import Err, Ok, Result, not_found_error, permission_error, validation_error


def _clean(value: str | None) -> str | None:
    return (value or "").strip() or None


def validate_reservation(name: str | None, start_date: date, end_date: date, rooms: int, total_rooms: int) -> Err | None:
    """Checks run before any write. Returns the first failure, or None."""
    if not (name or "").strip():
        return validation_error("Reservation name is required.")
    if to_iso(start_date) > to_iso(end_date):
        return validation_error("End date must be after start date.")
    if rooms < 1 or rooms > total_rooms:
        return validation_error(f"Rooms must be between 1 and {total_rooms}.")
    return None


def can_edit_reservation(profile: Profile | None, reservation: Reservation | None) -> bool:
    if not reservation:
        return False
    return can_manage(profile, reservation.created_by)


def list_reservations(db: Session) -> list[Reservation]:
    return db.query(Reservation).order_by(Reservation.start_date.asc(), Reservation.id.asc()).all()


def get_reservation(db: Session, reservation_id: int) -> Result[Reservation]:
    reservation = db.query(Reservation).filter(Reservation.id == reservation_id).first()
    if not reservation:
        return not_found_error("Reservation not found")
    return Ok(reservation)


def begin_edit(db: Session, actor: Profile, reservation_id: int) -> Result[Reservation]:
    """Enter update mode. Refused before any form values are handed out."""
    found = get_reservation(db, reservation_id)
    if not found.ok:
        return found
    if not can_edit_reservation(actor, found.value):
        return permission_error("You can only edit your own reservations.")
    return found


def create_reservation(
    db: Session,
    actor: Profile,
    *,
    name: str,
    start_date: date,
    end_date: date,
    rooms: int,
    occasion: str | None = None,
    guests: str | None = None,
    broadcast_invite: bool = False,
    invite_note: str | None = None,
    outbox: Outbox | None = None,
) -> Result[Reservation]:
    err = validate_reservation(name, start_date, end_date, rooms, get_total_rooms(db))
    if err:
        return err

    reservation = Reservation(
        name=name.strip(),
        start_date=start_date,
        end_date=end_date,
        rooms=rooms,
        occasion=_clean(occasion),
        guests=_clean(guests),
        created_by=actor.id,
    )
    db.add(reservation)
    db.commit()
    db.refresh(reservation)

    if broadcast_invite:
        create_invite(db, actor, reservation, invite_note, outbox=outbox)
    return Ok(reservation)


def update_reservation(
    db: Session,
    actor: Profile,
    reservation_id: int,
    *,
    name: str,
    start_date: date,
    end_date: date,
    rooms: int,
    occasion: str | None = None,
    guests: str | None = None,
) -> Result[Reservation]:
    found = begin_edit(db, actor, reservation_id)
    if not found.ok:
        return found
    err = validate_reservation(name, start_date, end_date, rooms, get_total_rooms(db))
    if err:
        return err

    reservation = found.value
    reservation.name = name.strip()
    reservation.start_date = start_date
    reservation.end_date = end_date
    reservation.rooms = rooms
    reservation.occasion = _clean(occasion)
    reservation.guests = _clean(guests)
    db.commit()
    db.refresh(reservation)
    return Ok(reservation)


def create_invite(db: Session, actor: Profile, reservation: Reservation, message: str | None, outbox: Outbox | None = None) -> Invite:
    """Broadcast "anyone may join these dates" and queue push + email to everyone else."""
    invite = Invite(reservation_id=reservation.id, created_by=actor.id, message=_clean(message))
    db.add(invite)
    db.commit()
    db.refresh(invite)
    if outbox is not None:
        sender_name = display_name(actor, fallback="Someone")
        # Separate jobs: a push failure never costs anyone the email
        outbox.enqueue("invite push", notifications.push_new_invite, actor.id, sender_name)
        outbox.enqueue(
            "invite email",
            notifications.notify_new_invite,
            actor.id,
            sender_name,
            to_iso(reservation.start_date),
            to_iso(reservation.end_date),
            invite.message,
        )
    return invite
