from collections.abc import Iterator
from dataclasses import dataclass, field
from datetime import date
from typing import Any, NoReturn

from dateutil.rrule import rrule
from typing_extensions import override

from dateinterval.errors import (
    ExhaustedSequenceError,
    UnsupportedOperationError,
    ViolatesInvariantError,
)
from dateinterval.recurrence import daily_rule
from dateinterval.util import ONE_DAY, coerce_date, days_between


@dataclass(frozen=True, kw_only=True)
class DateInterval:
    """Closed interval of calendar dates, inclusive of both ``first`` and ``last``.

    An interval from 1 Jan to 3 Jan contains 3 days. Iterating yields each
    contained date in ascending order; every call to ``iter()`` starts a
    fresh cursor at ``first``.
    """

    first: date
    last: date
    length: int = field(init=False, compare=False)

    def __post_init__(self) -> None:
        first = coerce_date(self.first, "lower bound")
        last = coerce_date(self.last, "upper bound")
        if first > last:
            raise ViolatesInvariantError(
                f"lower bound {first} cannot be after upper bound {last}"
            )
        # Frozen dataclass: bounds may have been narrowed from datetime
        object.__setattr__(self, "first", first)
        object.__setattr__(self, "last", last)
        object.__setattr__(self, "length", days_between(first, last) + 1)

    def contains(self, day: Any) -> bool:
        """Return True if ``day`` lies within the interval, bounds included."""
        day = coerce_date(day, "date")
        return self.first <= day <= self.last

    def __contains__(self, day: Any) -> bool:
        return self.contains(day)

    def __len__(self) -> int:
        return self.length

    def __iter__(self) -> "DateIterator":
        return DateIterator(self)

    @property
    def recurrence_rule(self) -> rrule:
        """Daily RFC 5545 rule producing one occurrence per contained date."""
        return daily_rule(self)

    def __str__(self) -> str:
        """Human-friendly string showing range and length."""
        return f"DateInterval({self.first}→{self.last}, {self.length}d)"


class DateIterator(Iterator[date]):
    """Single forward pass over the dates of a ``DateInterval``.

    The cursor belongs to the iterator, never to the interval.
    """

    def __init__(self, interval: DateInterval):
        self.interval: DateInterval = interval
        # None once the cursor has passed ``last``
        self._next: date | None = interval.first

    def has_next(self) -> bool:
        return self._next is not None

    @override
    def __next__(self) -> date:
        if self._next is None:
            raise ExhaustedSequenceError(f"Last element reached in {self.interval!r}")
        current = self._next
        self._next = None if current == self.interval.last else current + ONE_DAY
        return current

    def __length_hint__(self) -> int:
        if self._next is None:
            return 0
        return days_between(self._next, self.interval.last) + 1

    def remove(self) -> NoReturn:
        raise UnsupportedOperationError(
            f"{type(self.interval).__name__} is immutable, "
            f"dates cannot be removed while iterating over it"
        )


def date_interval(first: date, last: date) -> DateInterval:
    """Create a closed interval from ``first`` to ``last`` (both inclusive).

    Raises:
        InvalidArgumentError: If either bound is None or not a date
        ViolatesInvariantError: If ``first`` is after ``last``

    Example:
        >>> from datetime import date
        >>> january = date_interval(date(2013, 1, 1), date(2013, 1, 31))
        >>> len(january)
        31
    """
    return DateInterval(first=first, last=last)
