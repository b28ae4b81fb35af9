"""Context processors for Tredeco calendar."""

import json

from django.conf import settings
from django.core.exceptions import ValidationError
from django.utils import timezone

from . import core
from .utils import format_tredeco_date, parse_standard_date, to_storage


def _active_date(request):
    """Session-stored active standard date, falling back to today."""
    key = getattr(settings, "TREDECO_SESSION_KEY", "tredeco_active_date")
    try:
        value = parse_standard_date(request.session.get(key, ""))
    except ValidationError:
        value = None
    return value or timezone.localdate()


def tredeco_today(request):
    """Add the Tredeco date of the active standard date to templates."""
    today = _active_date(request)
    tdate = core.standard_to_tredeco(today)
    return {
        "TREDECO_STANDARD_DATE": today.isoformat(),
        "TREDECO_TODAY": to_storage(tdate),
        "TREDECO_TODAY_LABEL": format_tredeco_date(tdate),
    }


def tredeco_calendar_meta(request):
    """Expose calendar metadata for the Tredeco year of the active date."""

    year = core.standard_to_tredeco(_active_date(request)).year
    # edge years 0 and 9999 are only partly representable
    whole = core.MIN_FULL_YEAR <= year <= core.MAX_FULL_YEAR
    return {
        "TREDECO_CALENDAR_META": core.year_meta(year) if whole else None,
        "TREDECO_WEEKDAY_HEADERS_JSON": json.dumps(core.weekday_headers(year)),
        "TREDECO_MONTHS_JSON": json.dumps(core.MONTH_NAMES),
    }
