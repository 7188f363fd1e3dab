"""Guest roster and notes feed scoped to one reservation.

Adding needs edit rights on the parent reservation. Removing needs to be the
entry's own creator or an admin; owning the parent reservation is not enough.
"""
from sqlalchemy.orm import Session

from sunescape.models.ledger import ReservationGuest, ReservationNote
from sunescape.models.profile import Profile
from sunescape.services.profiles import can_manage, display_name, get_profile, list_profiles
from sunescape.services.reservations import can_edit_reservation, get_reservation
from sunescape.services.result import Ok, Result, not_found_error, permission_error, validation_error


def list_guests(db: Session, reservation_id: int) -> list[ReservationGuest]:
    # Roster: oldest first
    return (
        db.query(ReservationGuest)
        .filter(ReservationGuest.reservation_id == reservation_id)
        .order_by(ReservationGuest.created_at.asc(), ReservationGuest.id.asc())
        .all()
    )


def list_notes(db: Session, reservation_id: int) -> list[ReservationNote]:
    # Feed: newest first
    return (
        db.query(ReservationNote)
        .filter(ReservationNote.reservation_id == reservation_id)
        .order_by(ReservationNote.created_at.desc(), ReservationNote.id.desc())
        .all()
    )


def _editable_reservation(db: Session, actor: Profile, reservation_id: int, what: str) -> Result:
    found = get_reservation(db, reservation_id)
    if not found.ok:
        return found
    if not can_edit_reservation(actor, found.value):
        return permission_error(f"You can only add {what} to your own reservations.")
    return found


def add_guest(db: Session, actor: Profile, reservation_id: int, name: str, count: int = 1) -> Result[ReservationGuest]:
    found = _editable_reservation(db, actor, reservation_id, "guests")
    if not found.ok:
        return found
    name = (name or "").strip()
    if not name:
        return validation_error("Guest name is required.")
    if count is None or count < 1:
        return validation_error("Guest count must be at least 1.")
    guest = ReservationGuest(
        reservation_id=reservation_id,
        name=name,
        count=count,
        created_by=actor.id,
    )
    db.add(guest)
    db.commit()
    db.refresh(guest)
    return Ok(guest)


def guest_directory(db: Session, actor: Profile, reservation_id: int) -> list[Profile]:
    """Registered profiles that can still be added: not the caller, not already a linked guest."""
    found = get_reservation(db, reservation_id)
    if not found.ok or not can_edit_reservation(actor, found.value):
        return []
    already_added = {g.user_id for g in list_guests(db, reservation_id) if g.user_id}
    return [p for p in list_profiles(db) if p.id != actor.id and p.id not in already_added]


def add_user_guest(db: Session, actor: Profile, reservation_id: int, user_id: int) -> Result[ReservationGuest]:
    found = _editable_reservation(db, actor, reservation_id, "guests")
    if not found.ok:
        return found
    profile = get_profile(db, user_id)
    if not profile:
        return validation_error("Please select a user.")
    if any(g.user_id == profile.id for g in list_guests(db, reservation_id)):
        return validation_error(f"{display_name(profile)} is already a guest on this reservation.")
    guest = ReservationGuest(
        reservation_id=reservation_id,
        name=display_name(profile),
        count=1,
        user_id=profile.id,
        created_by=actor.id,
    )
    db.add(guest)
    db.commit()
    db.refresh(guest)
    return Ok(guest)


def remove_guest(db: Session, actor: Profile, guest_id: int) -> Result[ReservationGuest]:
    guest = db.query(ReservationGuest).filter(ReservationGuest.id == guest_id).first()
    if not guest:
        return not_found_error("Guest not found")
    if not can_manage(actor, guest.created_by):
        return permission_error("Only the person who added this guest, or an admin, can remove it.")
    db.delete(guest)
    db.commit()
    return Ok(guest)


def add_note(db: Session, actor: Profile, reservation_id: int, text: str) -> Result[ReservationNote]:
    found = _editable_reservation(db, actor, reservation_id, "notes")
    if not found.ok:
        return found
    text = (text or "").strip()
    if not text:
        return validation_error("Note text is required.")
    note = ReservationNote(reservation_id=reservation_id, note=text, created_by=actor.id)
    db.add(note)
    db.commit()
    db.refresh(note)
    return Ok(note)


def delete_note(db: Session, actor: Profile, note_id: int) -> Result[ReservationNote]:
    note = db.query(ReservationNote).filter(ReservationNote.id == note_id).first()
    if not note:
        return not_found_error("Note not found")
    if not can_manage(actor, note.created_by):
        return permission_error("Only the author of this note, or an admin, can delete it.")
    db.delete(note)
    db.commit()
    return Ok(note)
