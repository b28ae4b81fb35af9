from datetime import date

from tredeco_calendar.core import MONTH_NAMES, tredeco_to_standard


def tredeco_storage(year: int, month: int | str, day: int = 1) -> str:
    """Storage form; ``month`` is 1-13 or "NILO"/"BIX"."""
    if isinstance(month, str):
        return f"{year:04d}-{month.upper()}"
    return f"{year:04d}-{month:02d}-{day:02d}"


def tredeco_label(year: int, month: int, day: int) -> str:
    """Display form ``D Month YYYY`` for 1-based ``month``."""
    return f"{day} {MONTH_NAMES[month - 1]} {year}"


def standard_of(year: int, month: int, day: int) -> date:
    """Standard date of Tredeco ``year``/1-based ``month``/``day``."""
    return tredeco_to_standard(year, month - 1, day)
