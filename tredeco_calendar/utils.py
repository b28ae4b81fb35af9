"""Tredeco calendar helper utilities."""

from __future__ import annotations

import re
from collections.abc import Iterable
from datetime import date, datetime
from typing import Any

from django.conf import settings
from django.core.exceptions import ValidationError

from . import core
from .exceptions import TredecoError

_STORAGE_RE = re.compile(r"(\d{1,4})-(\d{1,2})-(\d{1,2})")
_STORAGE_SPECIAL_RE = re.compile(r"(\d{1,4})-(NILO|BIX)", re.IGNORECASE)
_DISPLAY_RE = re.compile(r"(\d{1,2})\s+([A-Za-z]+)\s+(\d{1,4})")
_DISPLAY_SPECIAL_RE = re.compile(r"(NILO|BIX)\s+(\d{1,4})", re.IGNORECASE)

_MONTH_LOOKUP = {name.lower(): index for index, name in enumerate(core.MONTH_NAMES)}
_MONTH_LOOKUP["nilo"] = core.NILO_INDEX
_MONTH_LOOKUP["bix"] = core.BIX_INDEX


def month_index_from_name(name: str) -> int:
    """Return month index 0-14 for a month name, Nilo or Bix (case-insensitive)."""

    try:
        return _MONTH_LOOKUP[name.strip().lower()]
    except KeyError:
        raise ValueError(f"Unknown Tredeco month {name!r}") from None


def build_tredeco_date(year: int, month_index: int, day: int) -> core.TredecoDate:
    """Build a :data:`core.TredecoDate` from flat components.

    Validates through :func:`core.tredeco_to_standard` so the same errors
    surface as for a conversion.
    """

    core.tredeco_to_standard(year, month_index, day)
    if month_index == core.NILO_INDEX:
        return core.Nilo(year)
    if month_index == core.BIX_INDEX:
        return core.Bix(year)
    return core.NormalDate(year, core.Month(month_index), day)


def format_tredeco_date(tdate: core.TredecoDate) -> str:
    """Return display form such as ``1 Primo 2024`` or ``Nilo 2023``."""

    if isinstance(tdate, core.NormalDate):
        return f"{tdate.day} {tdate.month_name} {tdate.year}"
    return f"{tdate.month_name} {tdate.year}"


def to_storage(tdate: core.TredecoDate) -> str:
    """Format to storage form ``YYYY-MM-DD`` (months 01-13) or ``YYYY-NILO``."""

    if isinstance(tdate, core.NormalDate):
        return f"{tdate.year:04d}-{tdate.month_index + 1:02d}-{tdate.day:02d}"
    return f"{tdate.year:04d}-{tdate.month_name.upper()}"


def _parse_text(value: str) -> core.TredecoDate:
    """Parse storage or display form; raises ``TredecoError``/``ValueError``."""

    special = _STORAGE_SPECIAL_RE.fullmatch(value)
    if special:
        year_s, name = special.groups()
        return build_tredeco_date(int(year_s), month_index_from_name(name), 1)

    special = _DISPLAY_SPECIAL_RE.fullmatch(value)
    if special:
        name, year_s = special.groups()
        return build_tredeco_date(int(year_s), month_index_from_name(name), 1)

    storage = _STORAGE_RE.fullmatch(value)
    if storage:
        y, m, d = map(int, storage.groups())
        if not 1 <= m <= core.MONTHS_PER_YEAR:
            raise ValueError(f"Tredeco month must be 1-{core.MONTHS_PER_YEAR}")
        return build_tredeco_date(y, m - 1, d)

    display = _DISPLAY_RE.fullmatch(value)
    if display:
        day_s, name, year_s = display.groups()
        index = month_index_from_name(name)
        if index >= core.MONTHS_PER_YEAR:
            raise ValueError(f"{name} has no numbered days")
        return build_tredeco_date(int(year_s), index, int(day_s))

    raise ValueError(f"Unrecognised Tredeco date {value!r}")


def parse_tredeco_date(value: Any) -> core.TredecoDate | None:
    """Tolerant parser for Tredeco dates.

    Accepts multiple input types:

    * ``None``/``""``/``b""`` → ``None``
    * :data:`core.TredecoDate` values → returned unchanged
    * ``bytes`` → decoded as UTF-8
    * ``str`` in storage form (``2024-01-01``, ``2023-NILO``) or display
      form (``1 Primo 2024``, ``Bix 2023``)

    Raises :class:`django.core.exceptions.ValidationError` on invalid input.
    """

    err_msg = "Date must look like YYYY-MM-DD (month 01-13), YYYY-NILO, YYYY-BIX or '1 Primo 2024'"

    if value in (None, "", b""):
        return None

    if isinstance(value, core.NormalDate | core.Nilo | core.Bix):
        return value

    if isinstance(value, bytes):
        try:
            value = value.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise ValidationError(err_msg, code="invalid") from exc

    if isinstance(value, str):
        value = value.strip()
        if not value:
            return None
        try:
            return _parse_text(value)
        except TredecoError as exc:
            raise ValidationError(str(exc), code=exc.code) from exc
        except ValueError as exc:
            raise ValidationError(err_msg, code="invalid") from exc

    raise ValidationError(err_msg, code="invalid")


def from_storage(
    value: str | bytes | core.TredecoDate | Iterable[int] | None,
) -> core.TredecoDate | None:
    """Parse storage form ``YYYY-MM-DD`` / ``YYYY-NILO`` / ``YYYY-BIX``.

    Also accepts ``(year, month_index, day)`` triples with 0-based month
    index. Returns ``None`` when parsing fails.
    """

    if value is None or value in ("", b"", "None"):
        return None

    if isinstance(value, core.NormalDate | core.Nilo | core.Bix):
        return value

    if isinstance(value, list | tuple) and len(value) == 3:
        try:
            y, m, d = [int(v) for v in value]
            return build_tredeco_date(y, m, d)
        except (TypeError, ValueError):
            return None

    if isinstance(value, bytes):
        try:
            value = value.decode()
        except UnicodeDecodeError:
            return None

    if isinstance(value, str):
        value = value.strip()
        if not (_STORAGE_RE.fullmatch(value) or _STORAGE_SPECIAL_RE.fullmatch(value)):
            return None
        try:
            return _parse_text(value)
        except ValueError:
            return None

    return None


def parse_standard_date(value: Any) -> date | None:
    """Parse a standard calendar date.

    Strings are tried against ``settings.DATE_INPUT_FORMATS`` in order.
    Empty values give ``None``; anything else invalid raises
    :class:`django.core.exceptions.ValidationError`.
    """

    err_msg = "Date must be in DD-MM-YYYY or YYYY-MM-DD format"

    if value in (None, "", b""):
        return None

    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value

    if isinstance(value, bytes):
        try:
            value = value.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise ValidationError(err_msg, code="invalid") from exc

    if isinstance(value, str):
        value = value.strip()
        if not value:
            return None
        for fmt in settings.DATE_INPUT_FORMATS:
            try:
                return datetime.strptime(value, fmt).date()
            except ValueError:
                continue

    raise ValidationError(err_msg, code="invalid")
