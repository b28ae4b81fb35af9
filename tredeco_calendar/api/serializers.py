from __future__ import annotations

from django.utils import formats
from rest_framework import serializers

from tredeco_calendar import core
from tredeco_calendar.utils import format_tredeco_date, to_storage


def standard_weekday_label(value) -> str:
    """Localized weekday name of a standard date."""
    return formats.date_format(value, "l")


class TredecoDateSerializer(serializers.Serializer):
    """Read-only representation of a :data:`core.TredecoDate` value.

    Nilo and Bix have no Tredeco weekday; they borrow the localized weekday
    of the standard date they fall on.
    """

    year = serializers.IntegerField(read_only=True)
    month_index = serializers.IntegerField(read_only=True)
    month_name = serializers.CharField(read_only=True)
    day = serializers.IntegerField(read_only=True)
    is_nilo = serializers.BooleanField(read_only=True)
    is_bix = serializers.BooleanField(read_only=True)
    day_of_year = serializers.SerializerMethodField()
    storage = serializers.SerializerMethodField()
    label = serializers.SerializerMethodField()
    weekday = serializers.SerializerMethodField()
    standard_date = serializers.SerializerMethodField()

    def get_day_of_year(self, obj: core.TredecoDate) -> int:
        return core.day_of_year(obj)

    def get_storage(self, obj: core.TredecoDate) -> str:
        return to_storage(obj)

    def get_label(self, obj: core.TredecoDate) -> str:
        return format_tredeco_date(obj)

    def get_weekday(self, obj: core.TredecoDate) -> str:
        if isinstance(obj, core.NormalDate):
            return core.weekday_name(obj.day, core.start_weekday_of_march_1st(obj.year))
        return standard_weekday_label(core.to_standard(obj))

    def get_standard_date(self, obj: core.TredecoDate) -> str:
        return core.to_standard(obj).isoformat()


class StandardDateSerializer(serializers.Serializer):
    date = serializers.SerializerMethodField()
    weekday = serializers.SerializerMethodField()
    label = serializers.SerializerMethodField()

    def get_date(self, obj) -> str:
        return obj.isoformat()

    def get_weekday(self, obj) -> str:
        return standard_weekday_label(obj)

    def get_label(self, obj) -> str:
        return formats.date_format(obj, "DATE_FORMAT")
