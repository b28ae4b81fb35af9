"""Views for Tredeco calendar utilities."""

import logging

from django.conf import settings
from django.core.exceptions import ValidationError
from django.http import (
    HttpResponseBadRequest,
    HttpResponseRedirect,
    JsonResponse,
)
from django.views.decorators.http import require_POST

from . import core
from .exceptions import TredecoError
from .utils import format_tredeco_date, parse_standard_date, to_storage
from .validators import validate_tredeco_year

logger = logging.getLogger(__name__)


def _session_key() -> str:
    return getattr(settings, "TREDECO_SESSION_KEY", "tredeco_active_date")


def _is_xhr(request) -> bool:
    return request.headers.get("x-requested-with") == "XMLHttpRequest"


@require_POST
def set_tredeco_date(request):
    """Store the active standard date in session."""
    date_str = request.POST.get("date", "")
    try:
        value = parse_standard_date(date_str)
        if value is None:
            raise ValidationError("Date is required", code="required")
        tdate = core.standard_to_tredeco(value)
    except (ValidationError, TredecoError) as exc:
        message = exc.messages[0] if isinstance(exc, ValidationError) else str(exc)
        logger.info("tredeco.set_date rejected value=%r error=%s", date_str, message)
        if _is_xhr(request):
            return JsonResponse({"error": message}, status=400)
        return HttpResponseBadRequest(message)
    request.session[_session_key()] = value.isoformat()
    if _is_xhr(request):
        return JsonResponse(
            {
                "ok": True,
                "value": value.isoformat(),
                "tredeco": to_storage(tdate),
                "label": format_tredeco_date(tdate),
            }
        )
    return HttpResponseRedirect(request.META.get("HTTP_REFERER", "/"))


def year_meta(request, y: int) -> JsonResponse:
    """Return calendar metadata for Tredeco year ``y``."""

    try:
        validate_tredeco_year(y)
    except ValidationError as exc:
        logger.debug("tredeco.year_meta rejected year=%s error=%s", y, exc.messages[0])
        return JsonResponse({"error": exc.messages[0]}, status=400)
    return JsonResponse(core.year_meta(y))
