from datetime import date, datetime, timezone

import pytest

from app.services.dates import (
    add_months,
    format_date,
    is_valid_date,
    parse_date,
    utc_timestamp,
    weekday_name,
)


@pytest.mark.parametrize("value", ["2025-02-28", "2024-02-29", "2025-06-01", "1999-12-31"])
def test_valid_dates(value):
    assert is_valid_date(value) is True


@pytest.mark.parametrize(
    "value",
    [
        "2025-02-30",
        "2025-13-01",
        "2023-02-29",
        "2025-00-10",
        "2025-1-01",
        "25-01-01",
        " 2025-01-01",
        "2025-01-01\n",
        "2025/01/01",
        "２０２５-01-01",
        "",
        None,
        20250101,
    ],
)
def test_invalid_dates(value):
    assert is_valid_date(value) is False


def test_parse_date():
    assert parse_date("2025-06-01") == date(2025, 6, 1)
    assert parse_date("2025-02-30") is None


def test_format_date_pads():
    assert format_date(date(2025, 1, 5)) == "2025-01-05"


def test_add_months_clamps_to_month_end():
    assert add_months(date(2025, 11, 30), 3) == date(2026, 2, 28)
    assert add_months(date(2024, 1, 31), 1) == date(2024, 2, 29)
    assert add_months(date(2025, 6, 15), 3) == date(2025, 9, 15)


def test_weekday_names():
    assert weekday_name(date(2025, 6, 1)) == "Sunday"
    assert weekday_name(date(2025, 6, 2), "short") == "mon"


def test_utc_timestamp_format():
    moment = datetime(2025, 6, 1, 8, 30, 0, 123456, tzinfo=timezone.utc)
    assert utc_timestamp(moment) == "2025-06-01T08:30:00.123Z"
    # naive values are taken as UTC
    assert utc_timestamp(datetime(2025, 6, 1, 8, 30)) == "2025-06-01T08:30:00.000Z"
