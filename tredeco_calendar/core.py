"""Canonical Tredeco calendar implementation.

The Tredeco year has 13 months of exactly 28 days followed by the
intercalary day Nilo and, in leap years, a second intercalary day Bix.
Tredeco year ``Y`` starts on standard (Gregorian) March 1 of ``Y`` and
ends on the last day of February of ``Y + 1``.

Every month is four full weeks, so the weekday of day ``d`` is the same
in all 13 months of a year and depends only on the weekday of March 1.

This module is pure: no Django, no clock, no logging. Callers pass
every date explicitly.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import MAXYEAR, MINYEAR, date, datetime, timedelta
from enum import IntEnum
from typing import Any, ClassVar, Dict, List, Optional

from .exceptions import (
    InvalidArgumentError,
    InvalidMonthError,
    InvalidSpecialDayError,
    InvariantViolationError,
    DayOutOfRangeError,
    LeapConstraintError,
    OutOfRangeError,
    YearOutOfRangeError,
)

DAYS_PER_MONTH: int = 28
MONTHS_PER_YEAR: int = 13
DAYS_PER_WEEK: int = 7
NILO_INDEX: int = 13
BIX_INDEX: int = 14
NILO_DAY_OF_YEAR: int = DAYS_PER_MONTH * MONTHS_PER_YEAR + 1
BIX_DAY_OF_YEAR: int = NILO_DAY_OF_YEAR + 1
# Tredeco years holding at least one representable standard date.
MIN_YEAR: int = MINYEAR - 1
MAX_YEAR: int = MAXYEAR
# Tredeco years lying wholly inside the representable standard dates.
MIN_FULL_YEAR: int = MINYEAR
MAX_FULL_YEAR: int = MAXYEAR - 1

MONTH_NAMES: List[str] = [
    "Primo",
    "Secundo",
    "Terzo",
    "Quarto",
    "Quinto",
    "Sexto",
    "Septo",
    "Octo",
    "Nono",
    "Decimo",
    "Undeco",
    "Duodeco",
    "Tredeco",
]
WEEKDAY_NAMES: List[str] = [
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
    "Sunday",
]
WEEKDAY_NAMES_SHORT: List[str] = ["Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun"]


class Month(IntEnum):
    """Ordinal of a regular Tredeco month (0 = Primo .. 12 = Tredeco)."""

    PRIMO = 0
    SECUNDO = 1
    TERZO = 2
    QUARTO = 3
    QUINTO = 4
    SEXTO = 5
    SEPTO = 6
    OCTO = 7
    NONO = 8
    DECIMO = 9
    UNDECO = 10
    DUODECO = 11
    TREDECO = 12

    @property
    def label(self) -> str:
        return MONTH_NAMES[self.value]


def _require_int(name: str, value: Any) -> int:
    # bool is an int subclass but never a meaningful calendar number
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidArgumentError(f"{name} must be an integer, got {value!r}")
    return value


@dataclass(frozen=True)
class NormalDate:
    """A day inside one of the 13 regular months."""

    year: int
    month: Month
    day: int

    is_nilo: ClassVar[bool] = False
    is_bix: ClassVar[bool] = False

    def __post_init__(self) -> None:
        _require_int("year", self.year)
        month = _require_int("month", self.month)
        if not 0 <= month < MONTHS_PER_YEAR:
            raise InvalidMonthError(f"month must be 0-12, got {month}")
        object.__setattr__(self, "month", Month(month))
        # every value must map to a representable standard date
        tredeco_to_standard(self.year, month, self.day)

    @property
    def month_index(self) -> int:
        return int(self.month)

    @property
    def month_name(self) -> str:
        return self.month.label


@dataclass(frozen=True)
class Nilo:
    """The 365th day of a Tredeco year. Exists every year."""

    year: int

    day: ClassVar[int] = 1
    month_index: ClassVar[int] = NILO_INDEX
    month_name: ClassVar[str] = "Nilo"
    is_nilo: ClassVar[bool] = True
    is_bix: ClassVar[bool] = False

    def __post_init__(self) -> None:
        tredeco_to_standard(self.year, NILO_INDEX, 1)


@dataclass(frozen=True)
class Bix:
    """The 366th day of a Tredeco year. Exists only in leap years."""

    year: int

    day: ClassVar[int] = 1
    month_index: ClassVar[int] = BIX_INDEX
    month_name: ClassVar[str] = "Bix"
    is_nilo: ClassVar[bool] = False
    is_bix: ClassVar[bool] = True

    def __post_init__(self) -> None:
        tredeco_to_standard(self.year, BIX_INDEX, 1)


TredecoDate = NormalDate | Nilo | Bix


def is_gregorian_leap_year(year: int) -> bool:
    """Return True if standard year ``year`` is a leap year."""

    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def is_tredeco_leap_year(tredeco_year: int) -> bool:
    """Return True if Tredeco year ``tredeco_year`` has a Bix day.

    The intercalary days close the Tredeco year in late February of the
    following standard year, so the leap status is that of ``year + 1``.
    """

    return is_gregorian_leap_year(_require_int("tredeco_year", tredeco_year) + 1)


def year_length(tredeco_year: int) -> int:
    """Return the number of days in ``tredeco_year`` (365 or 366)."""

    return BIX_DAY_OF_YEAR if is_tredeco_leap_year(tredeco_year) else NILO_DAY_OF_YEAR


def _march_first_ordinal(year: int) -> int:
    """Proleptic Gregorian ordinal of March 1 of ``year`` (any integer).

    Matches ``date.toordinal()`` where the date exists; year 0 gives the
    March 1 before 0001-01-01.
    """

    before = year - 1
    days_before_year = before * 365 + before // 4 - before // 100 + before // 400
    return days_before_year + 31 + (29 if is_gregorian_leap_year(year) else 28) + 1


def _from_ordinal(ordinal: int, what: str) -> date:
    if not date.min.toordinal() <= ordinal <= date.max.toordinal():
        raise YearOutOfRangeError(f"{what} falls outside standard dates {date.min}..{date.max}")
    return date.fromordinal(ordinal)


def require_full_year(tredeco_year: int) -> int:
    """Return ``tredeco_year`` if every one of its days is a representable date."""

    year = _require_int("tredeco_year", tredeco_year)
    if not MIN_FULL_YEAR <= year <= MAX_FULL_YEAR:
        raise YearOutOfRangeError(
            f"Tredeco year must be {MIN_FULL_YEAR}-{MAX_FULL_YEAR}, got {year}"
        )
    return year


def march_first(tredeco_year: int) -> date:
    """Return the standard date on which ``tredeco_year`` starts."""

    year = _require_int("tredeco_year", tredeco_year)
    return _from_ordinal(_march_first_ordinal(year), f"March 1 of Tredeco year {year}")


def start_weekday_of_march_1st(tredeco_year: int) -> int:
    """Return weekday index (0=Mon .. 6=Sun) of March 1 of ``tredeco_year``."""

    # ordinal 1 (0001-01-01) is a Monday
    year = _require_int("tredeco_year", tredeco_year)
    return (_march_first_ordinal(year) - 1) % DAYS_PER_WEEK


def weekday_index(tredeco_day: int, start_weekday: int) -> int:
    """Return weekday index (0=Mon .. 6=Sun) of in-month day ``tredeco_day``.

    ``tredeco_day`` may exceed 28; only its position modulo 7 matters.
    """

    tredeco_day = _require_int("tredeco_day", tredeco_day)
    start_weekday = _require_int("start_weekday", start_weekday)
    if tredeco_day < 1:
        raise OutOfRangeError(f"tredeco_day must be positive, got {tredeco_day}")
    if not 0 <= start_weekday < DAYS_PER_WEEK:
        raise OutOfRangeError(f"start_weekday must be 0-6, got {start_weekday}")
    return (start_weekday + (tredeco_day - 1) % DAYS_PER_WEEK) % DAYS_PER_WEEK


def weekday_name(tredeco_day: int, start_weekday: int, short: bool = False) -> str:
    """Return Monday-first weekday name of in-month day ``tredeco_day``."""

    names = WEEKDAY_NAMES_SHORT if short else WEEKDAY_NAMES
    return names[weekday_index(tredeco_day, start_weekday)]


def _as_date(value: Any) -> date:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    raise InvalidArgumentError(f"expected a date, got {value!r}")


def standard_to_tredeco(standard_date: date) -> TredecoDate:
    """Convert a standard calendar date to its Tredeco date.

    ``datetime`` values are truncated to their calendar day.
    """

    d = _as_date(standard_date)
    year = d.year if d.month >= 3 else d.year - 1
    doy = d.toordinal() - _march_first_ordinal(year) + 1
    length = year_length(year)
    if not 1 <= doy <= length:
        raise InvariantViolationError(
            f"day-of-year {doy} outside Tredeco year {year} of {length} days"
        )
    if doy == NILO_DAY_OF_YEAR:
        return Nilo(year)
    if doy == BIX_DAY_OF_YEAR:
        return Bix(year)
    month, day = divmod(doy - 1, DAYS_PER_MONTH)
    return NormalDate(year, Month(month), day + 1)


def tredeco_to_standard(year: int, month_index: int, day: int) -> date:
    """Convert Tredeco ``year``/``month_index``/``day`` to a standard date.

    ``month_index`` is 0-12 for Primo..Tredeco, 13 for Nilo and 14 for Bix.
    Intercalary days only accept ``day == 1``.
    """

    year = _require_int("year", year)
    month_index = _require_int("month_index", month_index)
    day = _require_int("day", day)

    if 0 <= month_index < MONTHS_PER_YEAR:
        if not 1 <= day <= DAYS_PER_MONTH:
            raise DayOutOfRangeError(
                f"{MONTH_NAMES[month_index]} has days 1-{DAYS_PER_MONTH}, got {day}"
            )
        offset = month_index * DAYS_PER_MONTH + (day - 1)
    elif month_index == NILO_INDEX:
        if day != 1:
            raise InvalidSpecialDayError(f"Nilo only has day 1, got {day}")
        offset = NILO_DAY_OF_YEAR - 1
    elif month_index == BIX_INDEX:
        if day != 1:
            raise InvalidSpecialDayError(f"Bix only has day 1, got {day}")
        if not is_tredeco_leap_year(year):
            raise LeapConstraintError(f"Bix does not exist in Tredeco year {year}")
        offset = BIX_DAY_OF_YEAR - 1
    else:
        raise InvalidMonthError(
            f"month_index must be 0-12, {NILO_INDEX} (Nilo) or {BIX_INDEX} (Bix), "
            f"got {month_index}"
        )
    return _from_ordinal(
        _march_first_ordinal(year) + offset,
        f"Day {offset + 1} of Tredeco year {year}",
    )


def to_standard(tdate: TredecoDate) -> date:
    """Convert a :data:`TredecoDate` value to a standard date."""

    return tredeco_to_standard(tdate.year, tdate.month_index, tdate.day)


def day_of_year_from_tredeco_date(tdate: TredecoDate) -> Optional[int]:
    """Return month-relative day-of-year, or None for Nilo and Bix."""

    if isinstance(tdate, NormalDate):
        return tdate.month_index * DAYS_PER_MONTH + tdate.day
    return None


def day_of_year(tdate: TredecoDate) -> int:
    """Return 1-based position of ``tdate`` in its year, Nilo and Bix included."""

    if isinstance(tdate, Nilo):
        return NILO_DAY_OF_YEAR
    if isinstance(tdate, Bix):
        return BIX_DAY_OF_YEAR
    return tdate.month_index * DAYS_PER_MONTH + tdate.day


def weekday_headers(tredeco_year: int, short: bool = True) -> List[str]:
    """Return weekday labels rotated so column 0 is the weekday of day 1."""

    names = WEEKDAY_NAMES_SHORT if short else WEEKDAY_NAMES
    start = weekday_index(1, start_weekday_of_march_1st(tredeco_year))
    return names[start:] + names[:start]


def month_grid() -> List[List[int]]:
    """Return the 4x7 day layout shared by every month."""

    return [
        list(range(week * DAYS_PER_WEEK + 1, (week + 1) * DAYS_PER_WEEK + 1))
        for week in range(DAYS_PER_MONTH // DAYS_PER_WEEK)
    ]


def year_meta(tredeco_year: int) -> Dict[str, Any]:
    """Return JSON-ready metadata describing ``tredeco_year``."""

    start = march_first(require_full_year(tredeco_year))
    leap = is_tredeco_leap_year(tredeco_year)
    length = year_length(tredeco_year)
    return {
        "year": tredeco_year,
        "leap": leap,
        "year_length": length,
        "start_weekday": start.weekday(),
        "weekday_headers": weekday_headers(tredeco_year),
        "months": list(MONTH_NAMES),
        "first_day": start.isoformat(),
        "last_day": (start + timedelta(days=length - 1)).isoformat(),
        "nilo": tredeco_to_standard(tredeco_year, NILO_INDEX, 1).isoformat(),
        "bix": tredeco_to_standard(tredeco_year, BIX_INDEX, 1).isoformat() if leap else None,
    }
