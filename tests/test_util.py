"""Tests for day constants and date coercion helpers."""

from datetime import date, datetime, timedelta

import pytest

from dateinterval import ONE_DAY, InvalidArgumentError, days_between
from dateinterval.util import coerce_date


def test_one_day_constant():
    """Test that ONE_DAY steps a single calendar day."""
    assert ONE_DAY == timedelta(days=1)
    assert date(2013, 12, 31) + ONE_DAY == date(2014, 1, 1)


def test_days_between():
    """Test whole-day differences, including reversed order."""
    assert days_between(date(2013, 1, 1), date(2013, 1, 1)) == 0
    assert days_between(date(2013, 1, 1), date(2013, 1, 3)) == 2
    assert days_between(date(2013, 1, 3), date(2013, 1, 1)) == -2
    assert days_between(date(2013, 1, 1), date(2014, 1, 1)) == 365


def test_coerce_date_passthrough_and_datetime():
    """Test that dates pass through and datetimes lose their time."""
    assert coerce_date(date(2013, 1, 1), "date") == date(2013, 1, 1)
    assert coerce_date(datetime(2013, 1, 1, 12), "date") == date(2013, 1, 1)


def test_coerce_date_rejects_other_types():
    """Test that non-date values raise InvalidArgumentError."""
    with pytest.raises(InvalidArgumentError, match="Date must be a date or datetime"):
        coerce_date(1.5, "date")
    with pytest.raises(InvalidArgumentError, match="Upper bound must be a date"):
        coerce_date([2013, 1, 1], "upper bound")
