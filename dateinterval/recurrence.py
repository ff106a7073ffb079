"""RFC 5545 recurrence rules for date intervals.

Backed by python-dateutil's rrule implementation, so an interval can be
handed to any tooling that already speaks recurrence rules.
"""

from datetime import datetime, time
from typing import TYPE_CHECKING

from dateutil.rrule import DAILY, rrule

if TYPE_CHECKING:
    from dateinterval.interval import DateInterval


def daily_rule(interval: "DateInterval") -> rrule:
    """Return a daily rule with one occurrence (at midnight) per date in ``interval``.

    Example:
        >>> from datetime import date
        >>> from dateinterval import date_interval
        >>> rule = daily_rule(date_interval(date(2013, 1, 1), date(2013, 1, 3)))
        >>> [dt.date() for dt in rule]
        [datetime.date(2013, 1, 1), datetime.date(2013, 1, 2), datetime.date(2013, 1, 3)]
    """
    return rrule(
        freq=DAILY,
        dtstart=datetime.combine(interval.first, time.min),
        until=datetime.combine(interval.last, time.min),
    )
