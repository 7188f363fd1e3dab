"""Guests and notes attached to one reservation."""
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from sunescape.database import get_db
from sunescape.models.profile import Profile
from sunescape.schemas.ledger import (
    DirectoryEntry,
    GuestCreate,
    GuestResponse,
    NoteCreate,
    NoteResponse,
    UserGuestCreate,
)
from sunescape.services import ledger as svc
from sunescape.services.profiles import display_name
from sunescape.services.reservations import get_reservation
from sunescape.dependencies import get_current_user, unwrap

router = APIRouter(tags=["guests", "notes"])


@router.get("/reservations/{reservation_id}/guests", response_model=list[GuestResponse])
def list_guests(
    reservation_id: int,
    db: Session = Depends(get_db),
    current_user: Profile = Depends(get_current_user),
):
    unwrap(get_reservation(db, reservation_id))
    return [GuestResponse.model_validate(g) for g in svc.list_guests(db, reservation_id)]


@router.post("/reservations/{reservation_id}/guests", response_model=GuestResponse)
def add_guest(
    reservation_id: int,
    data: GuestCreate,
    db: Session = Depends(get_db),
    current_user: Profile = Depends(get_current_user),
):
    guest = unwrap(svc.add_guest(db, current_user, reservation_id, data.name, data.count))
    return GuestResponse.model_validate(guest)


@router.get("/reservations/{reservation_id}/guest-directory", response_model=list[DirectoryEntry])
def guest_directory(
    reservation_id: int,
    db: Session = Depends(get_db),
    current_user: Profile = Depends(get_current_user),
):
    return [
        DirectoryEntry(id=p.id, display_name=display_name(p))
        for p in svc.guest_directory(db, current_user, reservation_id)
    ]


@router.post("/reservations/{reservation_id}/guests/from-user", response_model=GuestResponse)
def add_user_guest(
    reservation_id: int,
    data: UserGuestCreate,
    db: Session = Depends(get_db),
    current_user: Profile = Depends(get_current_user),
):
    guest = unwrap(svc.add_user_guest(db, current_user, reservation_id, data.user_id))
    return GuestResponse.model_validate(guest)


@router.delete("/guests/{guest_id}")
def remove_guest(
    guest_id: int,
    db: Session = Depends(get_db),
    current_user: Profile = Depends(get_current_user),
):
    unwrap(svc.remove_guest(db, current_user, guest_id))
    return {"ok": True}


@router.get("/reservations/{reservation_id}/notes", response_model=list[NoteResponse])
def list_notes(
    reservation_id: int,
    db: Session = Depends(get_db),
    current_user: Profile = Depends(get_current_user),
):
    unwrap(get_reservation(db, reservation_id))
    return [NoteResponse.model_validate(n) for n in svc.list_notes(db, reservation_id)]


@router.post("/reservations/{reservation_id}/notes", response_model=NoteResponse)
def add_note(
    reservation_id: int,
    data: NoteCreate,
    db: Session = Depends(get_db),
    current_user: Profile = Depends(get_current_user),
):
    note = unwrap(svc.add_note(db, current_user, reservation_id, data.note))
    return NoteResponse.model_validate(note)


@router.delete("/notes/{note_id}")
def delete_note(
    note_id: int,
    db: Session = Depends(get_db),
    current_user: Profile = Depends(get_current_user),
):
    unwrap(svc.delete_note(db, current_user, note_id))
    return {"ok": True}
