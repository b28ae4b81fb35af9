from datetime import date, datetime

import pytest
from django.core.exceptions import ValidationError

from tredeco_calendar import core
from tredeco_calendar.utils import (
    format_tredeco_date,
    month_index_from_name,
    parse_standard_date,
    parse_tredeco_date,
    to_storage,
)
from tests.tredeco_helpers import tredeco_label, tredeco_storage


def test_parse_none():
    assert parse_tredeco_date(None) is None


def test_parse_empty_string():
    assert parse_tredeco_date("") is None
    assert parse_tredeco_date("   ") is None


def test_parse_storage_format():
    assert parse_tredeco_date("2024-01-01") == core.NormalDate(2024, core.Month.PRIMO, 1)
    assert parse_tredeco_date("2024-13-28") == core.NormalDate(2024, core.Month.TREDECO, 28)


def test_parse_intercalary_storage():
    assert parse_tredeco_date("2023-NILO") == core.Nilo(2023)
    assert parse_tredeco_date("2023-bix") == core.Bix(2023)


def test_parse_display_format():
    assert parse_tredeco_date("13 Duodeco 2023") == core.NormalDate(2023, core.Month.DUODECO, 13)
    assert parse_tredeco_date("1 primo 2024") == core.NormalDate(2024, core.Month.PRIMO, 1)
    assert parse_tredeco_date("Nilo 2024") == core.Nilo(2024)


def test_parse_bytes():
    assert parse_tredeco_date(b"2024-02-05") == core.NormalDate(2024, core.Month.SECUNDO, 5)


def test_parse_value_passthrough():
    tdate = core.Nilo(2020)
    assert parse_tredeco_date(tdate) is tdate


@pytest.mark.parametrize("value", ["2024-14-01", "2024-01-29", "01.09.2025", "5 Limes 2024", 42])
def test_invalid_input_raises_validation_error(value):
    with pytest.raises(ValidationError):
        parse_tredeco_date(value)


def test_bix_in_common_year_keeps_error_code():
    with pytest.raises(ValidationError) as excinfo:
        parse_tredeco_date("2024-BIX")
    assert excinfo.value.code == "leap_constraint"
    assert "Bix does not exist" in excinfo.value.messages[0]


def test_format_and_storage():
    tdate = core.NormalDate(2024, core.Month.SECUNDO, 5)
    assert format_tredeco_date(tdate) == tredeco_label(2024, 2, 5)
    assert to_storage(tdate) == tredeco_storage(2024, 2, 5)
    assert format_tredeco_date(core.Bix(2023)) == "Bix 2023"
    assert to_storage(core.Nilo(2023)) == tredeco_storage(2023, "nilo")


def test_storage_round_trip():
    for tdate in (core.NormalDate(812, core.Month.OCTO, 17), core.Nilo(1999), core.Bix(1999)):
        assert parse_tredeco_date(to_storage(tdate)) == tdate
        assert parse_tredeco_date(format_tredeco_date(tdate)) == tdate


def test_month_index_from_name():
    assert month_index_from_name("Primo") == 0
    assert month_index_from_name(" tredeco ") == 12
    assert month_index_from_name("NILO") == 13
    assert month_index_from_name("Bix") == 14
    with pytest.raises(ValueError):
        month_index_from_name("Limes")


def test_parse_standard_date_formats():
    assert parse_standard_date("01-09-2025") == date(2025, 9, 1)
    assert parse_standard_date("2025-09-01") == date(2025, 9, 1)
    assert parse_standard_date(b"2024-02-29") == date(2024, 2, 29)
    assert parse_standard_date(datetime(2024, 2, 29, 10, 30)) == date(2024, 2, 29)
    assert parse_standard_date("") is None


@pytest.mark.parametrize("value", ["2023-02-29", "32-01-2024", "tomorrow", 20240101])
def test_parse_standard_date_invalid(value):
    with pytest.raises(ValidationError):
        parse_standard_date(value)


def test_storage_round_trip_at_range_edges():
    edges = (
        core.NormalDate(0, core.Month.UNDECO, 27),
        core.Nilo(0),
        core.NormalDate(9999, core.Month.PRIMO, 1),
    )
    for tdate in edges:
        assert parse_tredeco_date(to_storage(tdate)) == tdate
    assert to_storage(core.Nilo(0)) == "0000-NILO"


@pytest.mark.parametrize("value", ["-005-01-01", "-5-NILO", "1 Primo -5", "9999-NILO", "0000-01-01"])
def test_unrepresentable_years_are_rejected(value):
    with pytest.raises(ValidationError):
        parse_tredeco_date(value)
