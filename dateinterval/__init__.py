from .errors import (
    DateIntervalError,
    ExhaustedSequenceError,
    InvalidArgumentError,
    UnsupportedOperationError,
    ViolatesInvariantError,
)
from .interval import DateInterval, DateIterator, date_interval
from .recurrence import daily_rule
from .util import ONE_DAY, days_between

__all__ = [
    "DateInterval",
    "DateIterator",
    "date_interval",
    "daily_rule",
    "days_between",
    "ONE_DAY",
    "DateIntervalError",
    "InvalidArgumentError",
    "ViolatesInvariantError",
    "ExhaustedSequenceError",
    "UnsupportedOperationError",
]
