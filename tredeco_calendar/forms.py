from __future__ import annotations

from django import forms

from tredeco_calendar import core
from tredeco_calendar.exceptions import (
    DayOutOfRangeError,
    InvalidMonthError,
    InvalidSpecialDayError,
    LeapConstraintError,
    TredecoError,
    YearOutOfRangeError,
)
from tredeco_calendar.utils import (
    from_storage,
    month_index_from_name,
    parse_standard_date,
    parse_tredeco_date,
    to_storage,
)
from tredeco_calendar.validators import validate_tredeco_date_parts, validate_tredeco_year

# error code -> offending field; anything else is a form-wide error
_ERROR_FIELDS = {
    InvalidMonthError.code: "month",
    InvalidSpecialDayError.code: "day",
    LeapConstraintError.code: "month",
    DayOutOfRangeError.code: "day",
    YearOutOfRangeError.code: "year",
}


class TredecoDateFormField(forms.Field):
    """\
    Text field for a Tredeco date (13 months + Nilo/Bix).
    clean() returns the normalized storage string (YYYY-MM-DD or YYYY-NILO).
    """

    def __init__(self, *args, **kwargs):
        kwargs.setdefault("widget", forms.TextInput(attrs={"placeholder": "YYYY-MM-DD"}))
        super().__init__(*args, **kwargs)

    def to_python(self, value):
        if value in (None, ""):
            return ""
        if isinstance(value, str | bytes):
            tdate = parse_tredeco_date(value)
            return to_storage(tdate) if tdate is not None else ""
        return str(value)

    def clean(self, value):
        v = super().clean(value)
        if v in ("", None):
            return ""
        return v


class StandardDateFormField(forms.Field):
    """Standard calendar date accepting ``DD-MM-YYYY`` and ``YYYY-MM-DD``."""

    def to_python(self, value):
        return parse_standard_date(value)


class StandardToTredecoForm(forms.Form):
    date = StandardDateFormField()

    def clean(self):
        cleaned = super().clean()
        value = cleaned.get("date")
        if value is None:
            return cleaned
        try:
            cleaned["result"] = core.standard_to_tredeco(value)
        except TredecoError as exc:
            self.add_error("date", forms.ValidationError(str(exc), code=exc.code))
        return cleaned


class TredecoToStandardForm(forms.Form):
    """Tredeco date to standard date.

    Takes either ``date`` (storage or display form, e.g. ``1 Primo 2024``)
    or ``year``/``month``/``day``. ``month`` is a 0-based index (13 = Nilo,
    14 = Bix) or a month name. ``day`` may be omitted for Nilo and Bix.
    """

    date = TredecoDateFormField(required=False)
    year = forms.IntegerField(required=False)
    month = forms.CharField(required=False)
    day = forms.IntegerField(required=False)

    def clean_month(self) -> int | None:
        raw = self.cleaned_data["month"].strip()
        if not raw:
            return None
        try:
            return int(raw)
        except ValueError:
            pass
        try:
            return month_index_from_name(raw)
        except ValueError as exc:
            raise forms.ValidationError(str(exc), code="invalid_month") from exc

    def _require(self, *names: str) -> bool:
        missing = False
        for name in names:
            if self.cleaned_data.get(name) is None and name not in self.errors:
                self.add_error(name, forms.ValidationError("This field is required.", code="required"))
                missing = True
        return not missing

    def clean(self):
        cleaned = super().clean()
        if self.errors:
            return cleaned
        stored = cleaned.get("date")
        if stored:
            cleaned["result"] = core.to_standard(from_storage(stored))
            return cleaned
        if not self._require("year", "month"):
            return cleaned
        year, month = cleaned["year"], cleaned["month"]
        day = cleaned.get("day")
        if day is None:
            if month < core.NILO_INDEX:
                self._require("day")
                return cleaned
            day = cleaned["day"] = 1
        try:
            validate_tredeco_date_parts(year, month, day)
        except forms.ValidationError as exc:
            self.add_error(_ERROR_FIELDS.get(exc.code), exc)
            return cleaned
        cleaned["result"] = core.tredeco_to_standard(year, month, day)
        return cleaned


class TredecoYearForm(forms.Form):
    """Tredeco year whose every day maps to a standard date."""

    year = forms.IntegerField(validators=[validate_tredeco_year])
