"""Exceptions raised by dateinterval.

Each error also derives from the builtin exception a caller would expect,
so ``except ValueError`` and friends keep working.
"""


class DateIntervalError(Exception):
    """Base class for all dateinterval errors."""


class InvalidArgumentError(DateIntervalError, TypeError):
    """A required argument is missing or is not a date."""


class ViolatesInvariantError(DateIntervalError, ValueError):
    """The lower bound falls after the upper bound."""


class ExhaustedSequenceError(DateIntervalError, StopIteration):
    """An iterator was advanced past the last date of its interval."""


class UnsupportedOperationError(DateIntervalError, NotImplementedError):
    """A mutation was attempted on an immutable interval or its iterator."""
