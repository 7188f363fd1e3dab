"""Room availability per calendar day, derived from the full reservation list.

Pure functions: reservations are any objects with start_date, end_date (date or
ISO string, inclusive) and rooms.
"""
from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Iterable, Sequence

from sunescape.services.dates import month_grid, to_iso


def overlaps(day: date, reservation) -> bool:
    iso = to_iso(day)
    return to_iso(reservation.start_date) <= iso <= to_iso(reservation.end_date)


def rooms_used_on(reservations: Iterable, day: date) -> int:
    # No cap: the sum may exceed total rooms (overbooked)
    return sum(r.rooms for r in reservations if overlaps(day, r))


def reservations_on(reservations: Iterable, day: date) -> list:
    return [r for r in reservations if overlaps(day, r)]


@dataclass(frozen=True)
class DayAvailability:
    day: date
    used: int
    total: int

    @property
    def available(self) -> int:
        return self.total - self.used

    @property
    def available_display(self) -> int:
        return max(self.available, 0)

    @property
    def overbooked(self) -> bool:
        return self.used > self.total


def availability_on(reservations: Iterable, day: date, total_rooms: int) -> DayAvailability:
    return DayAvailability(day=day, used=rooms_used_on(reservations, day), total=total_rooms)


@dataclass(frozen=True)
class CalendarCell:
    availability: DayAvailability
    in_month: bool


def calendar_month(reservations: Sequence, year: int, month: int, total_rooms: int) -> list[list[CalendarCell]]:
    return [
        [
            CalendarCell(availability=availability_on(reservations, cell.day, total_rooms), in_month=cell.in_month)
            for cell in week
        ]
        for week in month_grid(year, month)
    ]
