"""Reservation, calendar and settings schemas."""
from datetime import date
from pydantic import BaseModel, Field


class ReservationIn(BaseModel):
    name: str
    start_date: date
    end_date: date
    rooms: int
    occasion: str | None = None
    guests: str | None = None


class ReservationCreate(ReservationIn):
    broadcast_invite: bool = False
    invite_note: str | None = None


class ReservationResponse(BaseModel):
    id: int
    name: str
    start_date: date
    end_date: date
    rooms: int
    occasion: str | None = None
    guests: str | None = None
    created_by: int

    class Config:
        from_attributes = True


class DayReservationView(ReservationResponse):
    """Reservation as listed on a selected day, with the caller's possible actions."""
    can_edit: bool = False
    already_requested: bool = False


class AvailabilityView(BaseModel):
    day: date
    used: int
    total: int
    available: int  # may be negative when overbooked
    available_display: int  # clamped at zero
    overbooked: bool


class DayView(BaseModel):
    availability: AvailabilityView
    reservations: list[DayReservationView]


class CalendarCellView(BaseModel):
    day: date
    in_month: bool
    used: int
    available_display: int
    overbooked: bool


class CalendarMonthView(BaseModel):
    year: int
    month: int
    total_rooms: int
    weeks: list[list[CalendarCellView]]


class HouseSettingsResponse(BaseModel):
    total_rooms: int
    updated_by: int | None = None

    class Config:
        from_attributes = True


class HouseSettingsUpdate(BaseModel):
    total_rooms: int = Field(..., ge=1)
