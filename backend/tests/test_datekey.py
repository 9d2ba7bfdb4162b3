"""Tests for date key formatting"""
import re
import pytest
from datetime import date
from app.utils.datekey import (
    date_key_for,
    format_date_display,
    format_date_key,
    is_date_key,
    parse_date_key,
)


def test_format_date_key_zero_pads():
    """Month is zero-based on input and both month and day are two digits"""
    assert format_date_key(2024, 2, 5) == "planner-2024-03-05"
    assert format_date_key(2024, 11, 31) == "planner-2024-12-31"
    assert format_date_key(987, 0, 1) == "planner-0987-01-01"


def test_format_date_key_is_injective_over_a_year():
    """Every day of two years maps to a distinct, well-formed key"""
    keys = set()
    for year in (2023, 2024):
        for month in range(12):
            for day in range(1, 32):
                key = format_date_key(year, month, day)
                assert re.fullmatch(r"planner-\d{4}-\d{2}-\d{2}", key)
                keys.add(key)
    assert len(keys) == 2 * 12 * 31


@pytest.mark.parametrize("year,month,day", [(2024, 12, 1), (2024, -1, 1), (2024, 0, 0), (2024, 0, 32), (10000, 0, 1)])
def test_format_date_key_rejects_out_of_range(year, month, day):
    with pytest.raises(ValueError):
        format_date_key(year, month, day)


def test_parse_date_key_inverts_format():
    assert parse_date_key("planner-2024-03-05") == (2024, 2, 5)
    assert parse_date_key(format_date_key(1999, 11, 31)) == (1999, 11, 31)


def test_parse_date_key_rejects_other_keys():
    with pytest.raises(ValueError):
        parse_date_key("plan-planner-2024-03-05")
    assert not is_date_key("darkMode")
    assert is_date_key("planner-2024-03-05")


def test_date_key_for_date():
    assert date_key_for(date(2024, 3, 5)) == "planner-2024-03-05"


def test_format_date_display():
    assert format_date_display(2024, 2, 5) == "March 5, 2024"
