"""Reservations: list, create (optionally broadcasting an invite), edit."""
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from sunescape.database import get_db
from sunescape.models.profile import Profile
from sunescape.schemas.reservation import ReservationCreate, ReservationIn, ReservationResponse
from sunescape.services import reservations as svc
from sunescape.services.outbox import Outbox
from sunescape.dependencies import get_current_user, get_outbox, unwrap

router = APIRouter(prefix="/reservations", tags=["reservations"])


@router.get("/", response_model=list[ReservationResponse])
def list_reservations(
    db: Session = Depends(get_db),
    current_user: Profile = Depends(get_current_user),
):
    return [ReservationResponse.model_validate(r) for r in svc.list_reservations(db)]


@router.post("/", response_model=ReservationResponse)
def create_reservation(
    data: ReservationCreate,
    db: Session = Depends(get_db),
    current_user: Profile = Depends(get_current_user),
    outbox: Outbox = Depends(get_outbox),
):
    reservation = unwrap(
        svc.create_reservation(
            db,
            current_user,
            name=data.name,
            start_date=data.start_date,
            end_date=data.end_date,
            rooms=data.rooms,
            occasion=data.occasion,
            guests=data.guests,
            broadcast_invite=data.broadcast_invite,
            invite_note=data.invite_note,
            outbox=outbox,
        )
    )
    return ReservationResponse.model_validate(reservation)


@router.get("/{reservation_id}", response_model=ReservationResponse)
def get_reservation(
    reservation_id: int,
    db: Session = Depends(get_db),
    current_user: Profile = Depends(get_current_user),
):
    return ReservationResponse.model_validate(unwrap(svc.get_reservation(db, reservation_id)))


@router.get("/{reservation_id}/edit", response_model=ReservationResponse)
def begin_edit(
    reservation_id: int,
    db: Session = Depends(get_db),
    current_user: Profile = Depends(get_current_user),
):
    """Form values for update mode; only the owner or an admin gets them."""
    return ReservationResponse.model_validate(unwrap(svc.begin_edit(db, current_user, reservation_id)))


@router.put("/{reservation_id}", response_model=ReservationResponse)
def update_reservation(
    reservation_id: int,
    data: ReservationIn,
    db: Session = Depends(get_db),
    current_user: Profile = Depends(get_current_user),
):
    reservation = unwrap(
        svc.update_reservation(
            db,
            current_user,
            reservation_id,
            name=data.name,
            start_date=data.start_date,
            end_date=data.end_date,
            rooms=data.rooms,
            occasion=data.occasion,
            guests=data.guests,
        )
    )
    return ReservationResponse.model_validate(reservation)
