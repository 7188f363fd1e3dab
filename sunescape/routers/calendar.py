"""Calendar month grid and the selected-day panel."""
from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from sunescape.database import get_db
from sunescape.models.profile import Profile
from sunescape.schemas.reservation import (
    AvailabilityView,
    CalendarCellView,
    CalendarMonthView,
    DayReservationView,
    DayView,
    ReservationResponse,
)
from sunescape.services.availability import availability_on, calendar_month, reservations_on
from sunescape.services.dates import parse_iso
from sunescape.services.house_settings import get_total_rooms
from sunescape.services.join_requests import my_join_requests
from sunescape.services.reservations import can_edit_reservation, list_reservations
from sunescape.dependencies import get_current_user

router = APIRouter(prefix="/calendar", tags=["calendar"])


@router.get("/day/{iso_date}", response_model=DayView)
def selected_day(
    iso_date: str,
    db: Session = Depends(get_db),
    current_user: Profile = Depends(get_current_user),
):
    try:
        day = parse_iso(iso_date)
    except ValueError:
        raise HTTPException(status_code=400, detail="Date must be YYYY-MM-DD")
    reservations = list_reservations(db)
    avail = availability_on(reservations, day, get_total_rooms(db))
    requested = {jr.reservation_id for jr in my_join_requests(db, current_user)}
    return DayView(
        availability=AvailabilityView(
            day=avail.day,
            used=avail.used,
            total=avail.total,
            available=avail.available,
            available_display=avail.available_display,
            overbooked=avail.overbooked,
        ),
        reservations=[
            DayReservationView(
                **ReservationResponse.model_validate(r).model_dump(),
                can_edit=can_edit_reservation(current_user, r),
                already_requested=r.id in requested,
            )
            for r in reservations_on(reservations, day)
        ],
    )


@router.get("/{year}/{month}", response_model=CalendarMonthView)
def month_view(
    year: int,
    month: int,
    db: Session = Depends(get_db),
    current_user: Profile = Depends(get_current_user),
):
    if not 1 <= month <= 12:
        raise HTTPException(status_code=400, detail="Month must be between 1 and 12")
    total = get_total_rooms(db)
    weeks = calendar_month(list_reservations(db), year, month, total)
    return CalendarMonthView(
        year=year,
        month=month,
        total_rooms=total,
        weeks=[
            [
                CalendarCellView(
                    day=cell.availability.day,
                    in_month=cell.in_month,
                    used=cell.availability.used,
                    available_display=cell.availability.available_display,
                    overbooked=cell.availability.overbooked,
                )
                for cell in week
            ]
            for week in weeks
        ],
    )
