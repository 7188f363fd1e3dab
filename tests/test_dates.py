from datetime import date, datetime

import pytest

from sunescape.services.dates import format_date, month_grid, parse_iso, to_iso


def test_to_iso_zero_pads():
    assert to_iso(date(2025, 6, 2)) == "2025-06-02"
    assert to_iso(datetime(2025, 1, 9, 23, 59)) == "2025-01-09"
    assert to_iso("2025-6-2") == "2025-06-02"


def test_iso_string_order_matches_date_order():
    days = [date(2025, 12, 1), date(2025, 2, 10), date(2025, 10, 2), date(2024, 12, 31)]
    assert sorted(days) == sorted(days, key=to_iso)


def test_parse_iso_rejects_garbage():
    assert parse_iso("2025-06-02") == date(2025, 6, 2)
    with pytest.raises(ValueError):
        parse_iso("June 2nd")
    with pytest.raises(ValueError):
        parse_iso("2025-02-30")


def test_format_date():
    assert format_date(date(2025, 6, 2)) == "Jun 2, 2025"


def test_month_grid_starts_monday_and_fills_weeks():
    # June 2025 starts on a Sunday
    weeks = month_grid(2025, 6)
    assert all(len(w) == 7 for w in weeks)
    assert weeks[0][0].day == date(2025, 5, 26)
    assert weeks[0][0].in_month is False
    assert weeks[0][6].day == date(2025, 6, 1)
    assert weeks[0][6].in_month is True
    in_month = [c for w in weeks for c in w if c.in_month]
    assert len(in_month) == 30
    assert weeks[-1][-1].day.weekday() == 6


def test_month_grid_exact_fit():
    # February 2021: starts Monday, 28 days, exactly four rows
    weeks = month_grid(2021, 2)
    assert len(weeks) == 4
    assert all(c.in_month for w in weeks for c in w)
    assert weeks[0][0].iso == "2021-02-01"


def test_parse_iso_inverts_to_iso():
    for d in (date(2024, 2, 29), date(1999, 12, 31), date(2025, 1, 1)):
        assert parse_iso(to_iso(d)) == d
