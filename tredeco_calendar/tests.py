from datetime import date, datetime, timedelta

import pytest

from . import core
from .exceptions import (
    DayOutOfRangeError,
    InvalidArgumentError,
    InvalidMonthError,
    InvalidSpecialDayError,
    InvariantViolationError,
    LeapConstraintError,
    OutOfRangeError,
    TredecoError,
    YearOutOfRangeError,
)


def test_leap_follows_next_standard_year():
    assert core.is_tredeco_leap_year(2023)
    assert not core.is_tredeco_leap_year(2024)
    assert not core.is_tredeco_leap_year(1899)
    assert not core.is_tredeco_leap_year(2099)
    assert core.is_tredeco_leap_year(1999)
    assert core.is_tredeco_leap_year(2399)


def test_leap_rule_matches_gregorian_arithmetic():
    for y in range(1, 3000):
        s = y + 1
        expected = s % 4 == 0 and (s % 100 != 0 or s % 400 == 0)
        assert core.is_tredeco_leap_year(y) is expected


def test_year_length():
    assert core.year_length(2023) == 366
    assert core.year_length(2024) == 365


def test_start_weekday_pivots():
    assert core.start_weekday_of_march_1st(2024) == 4  # Friday
    assert core.start_weekday_of_march_1st(2023) == 2  # Wednesday
    assert core.start_weekday_of_march_1st(2026) == 6  # Sunday


def test_weekday_index_and_name():
    assert core.weekday_index(1, 4) == 4
    assert core.weekday_index(4, 4) == 0
    assert core.weekday_name(1, 4) == "Friday"
    assert core.weekday_name(3, 4, short=True) == "Sun"


def test_weekday_periodicity():
    for s in range(7):
        for d in range(1, 60):
            assert core.weekday_index(d, s) == core.weekday_index(d + 7, s)


def test_grid_is_identical_in_every_month():
    year = 2024
    start = core.start_weekday_of_march_1st(year)
    for d in range(1, 29):
        expected = core.weekday_index(d, start)
        for month in core.Month:
            std = core.tredeco_to_standard(year, month, d)
            assert std.weekday() == expected


@pytest.mark.parametrize(
    "args, exc",
    [
        ((0, 0), OutOfRangeError),
        ((1, 7), OutOfRangeError),
        ((1, -1), OutOfRangeError),
        ((1.5, 0), InvalidArgumentError),
        ((1, "2"), InvalidArgumentError),
        ((True, 0), InvalidArgumentError),
    ],
)
def test_weekday_index_rejects(args, exc):
    with pytest.raises(exc):
        core.weekday_index(*args)


def test_march_first_is_primo_1():
    tdate = core.standard_to_tredeco(date(2024, 3, 1))
    assert tdate == core.NormalDate(2024, core.Month.PRIMO, 1)
    assert tdate.month_name == "Primo"


def test_february_28_2024_is_nilo_2023():
    tdate = core.standard_to_tredeco(date(2024, 2, 28))
    assert isinstance(tdate, core.Nilo)
    assert tdate.year == 2023
    assert core.day_of_year(tdate) == 365
    assert tdate.is_nilo and not tdate.is_bix


def test_february_29_2024_is_bix_2023():
    tdate = core.standard_to_tredeco(date(2024, 2, 29))
    assert tdate == core.Bix(2023)
    assert core.day_of_year(tdate) == 366


def test_mid_year_conversions():
    assert core.standard_to_tredeco(date(2024, 1, 15)) == core.NormalDate(2023, core.Month.DUODECO, 13)
    assert core.standard_to_tredeco(date(2024, 12, 25)) == core.NormalDate(2024, core.Month.UNDECO, 20)
    assert core.standard_to_tredeco(date(2024, 3, 29)) == core.NormalDate(2024, core.Month.SECUNDO, 1)
    assert core.standard_to_tredeco(date(2025, 2, 27)) == core.NormalDate(2024, core.Month.TREDECO, 28)
    assert core.standard_to_tredeco(date(2025, 2, 28)) == core.Nilo(2024)


def test_datetime_is_truncated():
    assert core.standard_to_tredeco(datetime(2024, 3, 1, 23, 59)) == core.NormalDate(2024, 0, 1)


def test_standard_to_tredeco_rejects_non_dates():
    with pytest.raises(InvalidArgumentError):
        core.standard_to_tredeco("2024-03-01")


def test_standard_range_edges_convert():
    assert core.standard_to_tredeco(date.min) == core.NormalDate(0, core.Month.UNDECO, 27)
    assert core.standard_to_tredeco(date(1, 2, 28)) == core.Nilo(0)
    assert core.standard_to_tredeco(date.max) == core.NormalDate(9999, core.Month.UNDECO, 26)
    assert core.tredeco_to_standard(9999, 0, 1) == date(9999, 3, 1)
    assert core.standard_to_tredeco(date.min).year == core.MIN_YEAR
    assert core.standard_to_tredeco(date.max).year == core.MAX_YEAR


@pytest.mark.parametrize(
    "start, end",
    [(date(1, 1, 1), date(1, 3, 31)), (date(9998, 12, 1), date(9999, 12, 31))],
)
def test_round_trip_at_standard_range_edges(start, end):
    d = start
    while True:
        assert core.to_standard(core.standard_to_tredeco(d)) == d
        if d == end:
            break
        d += timedelta(days=1)


def test_partial_years_reject_unrepresentable_days():
    with pytest.raises(YearOutOfRangeError):
        core.tredeco_to_standard(0, core.Month.UNDECO, 26)
    with pytest.raises(YearOutOfRangeError):
        core.tredeco_to_standard(9999, core.Month.UNDECO, 27)
    with pytest.raises(YearOutOfRangeError):
        core.tredeco_to_standard(9999, core.NILO_INDEX, 1)
    with pytest.raises(YearOutOfRangeError):
        core.year_meta(9999)
    with pytest.raises(YearOutOfRangeError):
        core.year_meta(0)
    assert core.march_first(9999) == date(9999, 3, 1)
    assert core.start_weekday_of_march_1st(0) == 2


def test_round_trip_every_day():
    d = date(1999, 1, 1)
    end = date(2026, 12, 31)
    while d <= end:
        tdate = core.standard_to_tredeco(d)
        assert core.tredeco_to_standard(tdate.year, tdate.month_index, tdate.day) == d
        assert core.to_standard(tdate) == d
        d += timedelta(days=1)


@pytest.mark.parametrize("year", [1899, 1999, 2023, 2024, 2099, 2399])
def test_year_is_covered_exactly_once(year):
    days = [
        core.tredeco_to_standard(year, m, d)
        for m in range(core.MONTHS_PER_YEAR)
        for d in range(1, core.DAYS_PER_MONTH + 1)
    ]
    days.append(core.tredeco_to_standard(year, core.NILO_INDEX, 1))
    if core.is_tredeco_leap_year(year):
        days.append(core.tredeco_to_standard(year, core.BIX_INDEX, 1))

    start = date(year, 3, 1)
    end = date(year + 1, 3, 1)
    assert len(days) == len(set(days)) == (end - start).days
    assert min(days) == start
    assert max(days) == end - timedelta(days=1)


def test_bix_exists_only_in_leap_years():
    assert core.tredeco_to_standard(2023, 14, 1) == date(2024, 2, 29)
    assert core.tredeco_to_standard(2023, 14, 1) == date(2023, 3, 1) + timedelta(days=365)
    with pytest.raises(LeapConstraintError, match="Bix does not exist"):
        core.tredeco_to_standard(2024, 14, 1)
    with pytest.raises(LeapConstraintError):
        core.Bix(2024)


def test_nilo_date():
    assert core.tredeco_to_standard(2023, 13, 1) == date(2024, 2, 28)
    assert core.tredeco_to_standard(2024, 13, 1) == date(2025, 2, 28)


@pytest.mark.parametrize(
    "args, exc",
    [
        ((2024, 5, 29), DayOutOfRangeError),
        ((2024, 5, 0), DayOutOfRangeError),
        ((2024, 13, 2), InvalidSpecialDayError),
        ((2023, 14, 2), InvalidSpecialDayError),
        ((2024, 15, 1), InvalidMonthError),
        ((2024, -1, 1), InvalidMonthError),
        ((2024.0, 0, 1), InvalidArgumentError),
        ((2024, "0", 1), InvalidArgumentError),
        ((2024, 0, None), InvalidArgumentError),
        ((0, 0, 1), YearOutOfRangeError),
        ((9999, 13, 1), YearOutOfRangeError),
        ((-5, 0, 1), YearOutOfRangeError),
    ],
)
def test_tredeco_to_standard_rejects(args, exc):
    with pytest.raises(exc):
        core.tredeco_to_standard(*args)


def test_type_check_runs_before_other_checks():
    with pytest.raises(InvalidArgumentError):
        core.tredeco_to_standard(2024, 99, 1.5)


def test_errors_share_base_class():
    for exc in (
        InvalidArgumentError,
        OutOfRangeError,
        DayOutOfRangeError,
        YearOutOfRangeError,
        InvalidSpecialDayError,
        LeapConstraintError,
        InvalidMonthError,
        InvariantViolationError,
    ):
        assert issubclass(exc, TredecoError)
        assert issubclass(exc, ValueError)
    assert issubclass(InvalidArgumentError, TypeError)
    assert issubclass(DayOutOfRangeError, OutOfRangeError)
    assert issubclass(YearOutOfRangeError, OutOfRangeError)


def test_day_of_year_from_tredeco_date():
    assert core.day_of_year_from_tredeco_date(core.NormalDate(2024, core.Month.PRIMO, 1)) == 1
    assert core.day_of_year_from_tredeco_date(core.NormalDate(2024, core.Month.TREDECO, 28)) == 364
    assert core.day_of_year_from_tredeco_date(core.Nilo(2024)) is None
    assert core.day_of_year_from_tredeco_date(core.Bix(2023)) is None


def test_normal_date_validates_parts():
    with pytest.raises(DayOutOfRangeError):
        core.NormalDate(2024, core.Month.PRIMO, 29)
    with pytest.raises(YearOutOfRangeError):
        core.NormalDate(-5, core.Month.PRIMO, 1)
    with pytest.raises(YearOutOfRangeError):
        core.Nilo(9999)
    with pytest.raises(InvalidMonthError):
        core.NormalDate(2024, 13, 1)
    assert core.NormalDate(2024, 3, 1).month is core.Month.QUARTO


def test_month_labels():
    assert [m.label for m in core.Month] == core.MONTH_NAMES
    assert len(core.MONTH_NAMES) == 13
    assert core.WEEKDAY_NAMES[0] == "Monday"
    assert core.WEEKDAY_NAMES_SHORT[6] == "Sun"


def test_weekday_headers_start_with_primo_1():
    assert core.weekday_headers(2024) == ["Fri", "Sat", "Sun", "Mon", "Tue", "Wed", "Thu"]
    assert core.weekday_headers(2024, short=False)[0] == "Friday"


def test_month_grid():
    grid = core.month_grid()
    assert len(grid) == 4
    assert grid[0] == [1, 2, 3, 4, 5, 6, 7]
    assert grid[-1][-1] == 28


def test_year_meta():
    meta = core.year_meta(2023)
    assert meta["leap"] is True
    assert meta["year_length"] == 366
    assert meta["first_day"] == "2023-03-01"
    assert meta["last_day"] == "2024-02-29"
    assert meta["nilo"] == "2024-02-28"
    assert meta["bix"] == "2024-02-29"
    assert core.year_meta(2024)["bix"] is None
