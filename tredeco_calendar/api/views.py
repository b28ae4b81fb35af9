from __future__ import annotations

import logging
from datetime import timedelta

from rest_framework import generics, permissions, status
from rest_framework.response import Response
from rest_framework.throttling import AnonRateThrottle

from tredeco_calendar import core
from tredeco_calendar.forms import StandardToTredecoForm, TredecoToStandardForm, TredecoYearForm

from .serializers import StandardDateSerializer, TredecoDateSerializer, standard_weekday_label

logger = logging.getLogger(__name__)


class BurstAnonThrottle(AnonRateThrottle):
    rate = "600/min"


def _form_errors(form) -> Response:
    logger.debug("tredeco.api rejected data=%s errors=%s", dict(form.data), form.errors.as_data())
    return Response({"errors": form.errors.get_json_data()}, status=status.HTTP_400_BAD_REQUEST)


class ToTredeco(generics.GenericAPIView):
    """``?date=YYYY-MM-DD`` → Tredeco date."""

    permission_classes = [permissions.AllowAny]
    throttle_classes = [BurstAnonThrottle]

    def get(self, request) -> Response:
        form = StandardToTredecoForm(request.query_params)
        if not form.is_valid():
            return _form_errors(form)
        return Response(TredecoDateSerializer(form.cleaned_data["result"]).data)


class ToStandard(generics.GenericAPIView):
    """``?year=Y&month=M&day=D`` → standard date."""

    permission_classes = [permissions.AllowAny]
    throttle_classes = [BurstAnonThrottle]

    def get(self, request) -> Response:
        form = TredecoToStandardForm(request.query_params)
        if not form.is_valid():
            return _form_errors(form)
        return Response(StandardDateSerializer(form.cleaned_data["result"]).data)


class YearGrid(generics.GenericAPIView):
    """Data for a full-year calendar: 13 month grids plus intercalary days."""

    permission_classes = [permissions.AllowAny]
    throttle_classes = [BurstAnonThrottle]

    def get(self, request, y: int) -> Response:
        form = TredecoYearForm({"year": y})
        if not form.is_valid():
            return _form_errors(form)
        start = core.march_first(y)

        months = []
        for month in core.Month:
            first = start + timedelta(days=month * core.DAYS_PER_MONTH)
            months.append(
                {
                    "index": int(month),
                    "name": month.label,
                    "first_day": first.isoformat(),
                    "last_day": (first + timedelta(days=core.DAYS_PER_MONTH - 1)).isoformat(),
                }
            )

        intercalary = [core.Nilo(y)]
        if core.is_tredeco_leap_year(y):
            intercalary.append(core.Bix(y))

        return Response(
            {
                "year": y,
                "leap": core.is_tredeco_leap_year(y),
                "weekday_headers": core.weekday_headers(y),
                "grid": core.month_grid(),
                "months": months,
                "intercalary": [
                    {
                        "name": tdate.month_name,
                        "date": core.to_standard(tdate).isoformat(),
                        "weekday": standard_weekday_label(core.to_standard(tdate)),
                    }
                    for tdate in intercalary
                ],
            }
        )
