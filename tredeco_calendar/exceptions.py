"""Tredeco calendar exception hierarchy.

Every engine failure derives from :class:`TredecoError`, itself a
``ValueError`` so callers that only know about the builtin keep working.
The ``code`` attribute doubles as the Django ``ValidationError`` code.
"""

from __future__ import annotations


class TredecoError(ValueError):
    """Base exception for all Tredeco calendar errors."""

    code = "invalid"


class InvalidArgumentError(TredecoError, TypeError):
    """Argument has the wrong type.

    Examples:
        - ``2024.5`` or ``"5"`` passed where an integer is required
        - a string passed where a ``datetime.date`` is required
    """

    code = "invalid_argument"


class OutOfRangeError(TredecoError):
    """Numeric argument outside its allowed range.

    Examples:
        - start weekday outside 0-6
        - Tredeco day number below 1

    Day and year range failures use the subclasses below.
    """

    code = "out_of_range"


class DayOutOfRangeError(OutOfRangeError):
    """Day outside 1-28 in a regular month."""

    code = "day_out_of_range"


class YearOutOfRangeError(OutOfRangeError):
    """Tredeco day or year falls outside the representable standard dates.

    Standard dates run from 0001-01-01 to 9999-12-31.
    """

    code = "year_out_of_range"


class InvalidSpecialDayError(TredecoError):
    """Day other than 1 requested for Nilo or Bix."""

    code = "invalid_special_day"


class LeapConstraintError(TredecoError):
    """Bix requested for a Tredeco year that is not a leap year."""

    code = "leap_constraint"


class InvalidMonthError(TredecoError):
    """Month index outside 0-14."""

    code = "invalid_month"


class InvariantViolationError(TredecoError):
    """Computed day-of-year falls outside its Tredeco year.

    Never raised for valid input; signals a bug or a corrupted date.
    """

    code = "invariant_violation"


__all__ = [
    "TredecoError",
    "InvalidArgumentError",
    "OutOfRangeError",
    "DayOutOfRangeError",
    "YearOutOfRangeError",
    "InvalidSpecialDayError",
    "LeapConstraintError",
    "InvalidMonthError",
    "InvariantViolationError",
]
