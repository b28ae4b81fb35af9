"""Validators for Tredeco calendar."""

from django.core.exceptions import ValidationError

from . import core
from .exceptions import TredecoError


def validate_tredeco_date_parts(year: int, month_index: int, day: int) -> None:
    """Validate numeric parts of a Tredeco date (month index 0-14)."""
    try:
        core.tredeco_to_standard(year, month_index, day)
    except TredecoError as exc:
        raise ValidationError(str(exc), code=exc.code) from exc


def validate_tredeco_year(year: int) -> None:
    """Validate that every day of Tredeco ``year`` is a representable date."""
    try:
        core.require_full_year(year)
    except TredecoError as exc:
        raise ValidationError(str(exc), code=exc.code) from exc
