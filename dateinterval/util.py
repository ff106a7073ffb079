"""Utility constants and helpers for dateinterval.

Day-granularity arithmetic is done with ``datetime.date`` and
``datetime.timedelta``; no finer unit is ever used.
"""

from datetime import date, datetime, timedelta
from typing import Any, Literal

from dateinterval.errors import InvalidArgumentError

ONE_DAY = timedelta(days=1)


def days_between(first: date, last: date) -> int:
    """Return the number of whole days from ``first`` to ``last``."""
    return (last - first).days


def coerce_date(value: Any, role: Literal["lower bound", "upper bound", "date"]) -> date:
    """Convert a bound or probe value to a plain ``date``.

    Accepts:
    - date: Passed through as-is
    - datetime: Reduced to its calendar date (``.date()``)

    Raises:
        InvalidArgumentError: If value is None or not a date
    """
    if value is None:
        if role == "date":
            raise InvalidArgumentError("date to test cannot be None")
        raise InvalidArgumentError(f"{role} of the interval cannot be None")
    # datetime subclasses date, so it has to be checked first
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    raise InvalidArgumentError(
        f"{role.capitalize()} must be a date or datetime.\n"
        f"Got {type(value).__name__!r}: {value!r}\n"
        f"Hint: Parse strings first, e.g. date.fromisoformat('2013-01-01')"
    )
