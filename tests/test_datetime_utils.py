from __future__ import annotations

from datetime import date, time

import pytest

from tutor_tracker.common.datetime_utils import (
    day_of_week,
    format_minutes,
    month_bounds,
    parse_iso_date,
    parse_month,
    start_of_week,
    to_minutes,
)
from tutor_tracker.core.exceptions import ValidationError


@pytest.mark.parametrize(
    "value,expected",
    [("09:30", 570), ("9:30", 570), ("16:00:00", 960), ("10:30:45", 630), (time(23, 59), 1439), (0, 0)],
)
def test_to_minutes(value, expected):
    assert to_minutes(value) == expected


@pytest.mark.parametrize(
    "value",
    ["24:00", "12:75", "noon", None, True, -1, 1440, "¹:00", "1٠:00", "10:00:60", "10:00:99"],
)
def test_to_minutes_rejects(value):
    with pytest.raises(ValidationError):
        to_minutes(value)


def test_format_minutes():
    assert format_minutes(570) == "09:30"


def test_day_of_week_is_sunday_based():
    assert day_of_week(date(2026, 2, 1)) == 0
    assert day_of_week(date(2026, 2, 4)) == 3
    assert day_of_week(date(2026, 2, 7)) == 6


def test_start_of_week():
    assert start_of_week(date(2026, 2, 4)) == date(2026, 2, 1)
    assert start_of_week(date(2026, 2, 1)) == date(2026, 2, 1)
    assert start_of_week(date(2026, 2, 7)) == date(2026, 2, 1)


def test_parsers():
    assert parse_iso_date("2026-02-04") == date(2026, 2, 4)
    assert parse_month("2025-06") == (2025, 6)
    assert month_bounds(2025, 6) == (date(2025, 6, 1), date(2025, 6, 30))

    with pytest.raises(ValidationError):
        parse_iso_date("04/02/2026")
    with pytest.raises(ValidationError):
        parse_month("2025-13")
