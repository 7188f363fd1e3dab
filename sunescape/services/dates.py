"""Calendar-day helpers. The ISO key (YYYY-MM-DD) is the only comparison key for stays."""
from __future__ import annotations

import calendar
from dataclasses import dataclass
from datetime import date, datetime, timedelta


def to_iso(value: date | datetime | str) -> str:
    """Zero-padded YYYY-MM-DD, so string order equals chronological order."""
    if isinstance(value, str):
        return to_iso(parse_iso(value))
    if isinstance(value, datetime):
        value = value.date()
    return f"{value.year:04d}-{value.month:02d}-{value.day:02d}"


def parse_iso(value: str) -> date:
    y, m, d = (int(part) for part in value.strip().split("-"))
    return date(y, m, d)


def format_date(value: date) -> str:
    return f"{calendar.month_abbr[value.month]} {value.day}, {value.year}"


@dataclass(frozen=True)
class CalendarDay:
    day: date
    in_month: bool

    @property
    def iso(self) -> str:
        return to_iso(self.day)


def month_grid(year: int, month: int) -> list[list[CalendarDay]]:
    """Weeks of the month, Monday first, always seven days each.

    Leading and trailing cells come from the adjacent months and are flagged
    in_month=False.
    """
    first = date(year, month, 1)
    total_days = calendar.monthrange(year, month)[1]
    start_offset = first.weekday()  # Monday == 0
    total_cells = -(-(start_offset + total_days) // 7) * 7

    grid_start = first - timedelta(days=start_offset)
    weeks: list[list[CalendarDay]] = []
    for week_idx in range(total_cells // 7):
        week = []
        for day_idx in range(7):
            d = grid_start + timedelta(days=week_idx * 7 + day_idx)
            week.append(CalendarDay(day=d, in_month=(d.year == year and d.month == month)))
        weeks.append(week)
    return weeks
