"""Public interface for the Tredeco calendar engine."""

from .core import (
    BIX_INDEX,
    MONTH_NAMES,
    NILO_INDEX,
    WEEKDAY_NAMES,
    WEEKDAY_NAMES_SHORT,
    Bix,
    Month,
    Nilo,
    NormalDate,
    TredecoDate,
    day_of_year_from_tredeco_date,
    is_tredeco_leap_year,
    standard_to_tredeco,
    start_weekday_of_march_1st,
    tredeco_to_standard,
    weekday_index,
    weekday_name,
)
from .exceptions import TredecoError

__all__ = [
    "BIX_INDEX",
    "MONTH_NAMES",
    "NILO_INDEX",
    "WEEKDAY_NAMES",
    "WEEKDAY_NAMES_SHORT",
    "Bix",
    "Month",
    "Nilo",
    "NormalDate",
    "TredecoDate",
    "TredecoError",
    "day_of_year_from_tredeco_date",
    "is_tredeco_leap_year",
    "standard_to_tredeco",
    "start_weekday_of_march_1st",
    "tredeco_to_standard",
    "weekday_index",
    "weekday_name",
]
