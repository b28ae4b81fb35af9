import json
from datetime import date

from django.test import RequestFactory, override_settings

from tredeco_calendar import context_processors


def make_request(session=None):
    request = RequestFactory().get("/")
    request.session = session or {}
    return request


def test_today_uses_session_date():
    request = make_request({"tredeco_active_date": "2024-02-29"})
    ctx = context_processors.tredeco_today(request)
    assert ctx["TREDECO_STANDARD_DATE"] == "2024-02-29"
    assert ctx["TREDECO_TODAY"] == "2023-BIX"
    assert ctx["TREDECO_TODAY_LABEL"] == "Bix 2023"


def test_today_falls_back_to_localdate(monkeypatch):
    monkeypatch.setattr(context_processors.timezone, "localdate", lambda: date(2024, 3, 1))
    ctx = context_processors.tredeco_today(make_request({"tredeco_active_date": "garbage"}))
    assert ctx["TREDECO_TODAY"] == "2024-01-01"


@override_settings(TREDECO_SESSION_KEY="other_key")
def test_session_key_setting():
    ctx = context_processors.tredeco_today(make_request({"other_key": "01-03-2025"}))
    assert ctx["TREDECO_TODAY_LABEL"] == "1 Primo 2025"


def test_calendar_meta():
    ctx = context_processors.tredeco_calendar_meta(make_request({"tredeco_active_date": "2024-01-15"}))
    assert ctx["TREDECO_CALENDAR_META"]["year"] == 2023
    assert json.loads(ctx["TREDECO_WEEKDAY_HEADERS_JSON"])[0] == "Wed"
    assert json.loads(ctx["TREDECO_MONTHS_JSON"])[-1] == "Tredeco"


def test_calendar_meta_in_partial_edge_year():
    ctx = context_processors.tredeco_calendar_meta(make_request({"tredeco_active_date": "0001-01-15"}))
    assert ctx["TREDECO_CALENDAR_META"] is None
    assert json.loads(ctx["TREDECO_WEEKDAY_HEADERS_JSON"])[0] == "Wed"
    assert len(json.loads(ctx["TREDECO_MONTHS_JSON"])) == 13

    ctx = context_processors.tredeco_today(make_request({"tredeco_active_date": "9999-12-31"}))
    assert ctx["TREDECO_TODAY"] == "9999-11-26"
