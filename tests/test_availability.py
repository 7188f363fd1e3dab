from dataclasses import dataclass
from datetime import date

from sunescape.services.availability import (
    availability_on,
    calendar_month,
    overlaps,
    reservations_on,
    rooms_used_on,
)


@dataclass
class Stay:
    name: str
    start_date: object
    end_date: object
    rooms: int


A = Stay("A", date(2025, 6, 1), date(2025, 6, 3), 3)
B = Stay("B", "2025-06-02", "2025-06-04", 2)


def test_overlap_is_inclusive():
    assert overlaps(date(2025, 6, 1), A)
    assert overlaps(date(2025, 6, 3), A)
    assert not overlaps(date(2025, 5, 31), A)
    assert not overlaps(date(2025, 6, 4), A)


def test_shared_house_scenario():
    stays = [A, B]
    assert rooms_used_on(stays, date(2025, 6, 1)) == 3
    assert rooms_used_on(stays, date(2025, 6, 2)) == 5
    assert rooms_used_on(stays, date(2025, 6, 3)) == 5
    assert rooms_used_on(stays, date(2025, 6, 4)) == 2
    assert rooms_used_on(stays, date(2025, 6, 5)) == 0

    full = availability_on(stays, date(2025, 6, 2), 5)
    assert full.available == 0
    assert not full.overbooked


def test_reservations_on_keeps_input_order():
    assert [r.name for r in reservations_on([B, A], date(2025, 6, 2))] == ["B", "A"]
    assert reservations_on([A, B], date(2025, 7, 1)) == []


def test_overbooked_after_capacity_drops():
    day = availability_on([A, B], date(2025, 6, 2), 3)
    assert day.used == 5
    assert day.available == -2
    assert day.available_display == 0
    assert day.overbooked


def test_calendar_month_cells():
    weeks = calendar_month([A, B], 2025, 6, 5)
    cells = {c.availability.day: c for w in weeks for c in w}
    assert cells[date(2025, 6, 2)].availability.used == 5
    assert cells[date(2025, 6, 4)].availability.available == 3
    assert cells[date(2025, 5, 31)].in_month is False
    assert cells[date(2025, 5, 31)].availability.used == 0
