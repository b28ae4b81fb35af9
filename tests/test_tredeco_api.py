import pytest
from rest_framework.test import APIClient


@pytest.fixture
def api():
    return APIClient()


def test_to_tredeco_normal_day(api):
    resp = api.get("/api/tredeco/to-tredeco/", {"date": "2024-03-01"})
    assert resp.status_code == 200
    data = resp.json()
    assert data["year"] == 2024
    assert data["month_index"] == 0
    assert data["month_name"] == "Primo"
    assert data["day"] == 1
    assert data["is_nilo"] is False
    assert data["storage"] == "2024-01-01"
    assert data["label"] == "1 Primo 2024"
    assert data["weekday"] == "Friday"
    assert data["day_of_year"] == 1
    assert data["standard_date"] == "2024-03-01"


def test_to_tredeco_intercalary_borrows_standard_weekday(api):
    resp = api.get("/api/tredeco/to-tredeco/", {"date": "29-02-2024"})
    data = resp.json()
    assert data["is_bix"] is True
    assert data["month_index"] == 14
    assert data["label"] == "Bix 2023"
    assert data["day_of_year"] == 366
    assert data["weekday"] == "Thursday"


def test_to_tredeco_invalid(api):
    resp = api.get("/api/tredeco/to-tredeco/", {"date": "2023-02-29"})
    assert resp.status_code == 400
    assert "date" in resp.json()["errors"]


def test_to_standard(api):
    resp = api.get("/api/tredeco/to-standard/", {"year": 2023, "month": "Duodeco", "day": 13})
    assert resp.status_code == 200
    data = resp.json()
    assert data["date"] == "2024-01-15"
    assert data["weekday"] == "Monday"


def test_to_standard_bix_in_common_year(api):
    resp = api.get("/api/tredeco/to-standard/", {"year": 2024, "month": 14, "day": 1})
    assert resp.status_code == 400
    errors = resp.json()["errors"]
    assert errors["month"][0]["code"] == "leap_constraint"


def test_to_standard_day_out_of_range(api):
    resp = api.get("/api/tredeco/to-standard/", {"year": 2024, "month": 5, "day": 29})
    assert resp.status_code == 400
    assert resp.json()["errors"]["day"][0]["code"] == "day_out_of_range"


def test_year_grid(api):
    resp = api.get("/api/tredeco/year/2023/grid/")
    assert resp.status_code == 200
    data = resp.json()
    assert data["leap"] is True
    assert data["weekday_headers"][0] == "Wed"
    assert len(data["months"]) == 13
    assert data["months"][0] == {
        "index": 0,
        "name": "Primo",
        "first_day": "2023-03-01",
        "last_day": "2023-03-28",
    }
    assert data["months"][-1]["last_day"] == "2024-02-27"
    assert data["grid"][3] == [22, 23, 24, 25, 26, 27, 28]
    assert [d["name"] for d in data["intercalary"]] == ["Nilo", "Bix"]
    assert data["intercalary"][0] == {"name": "Nilo", "date": "2024-02-28", "weekday": "Wednesday"}


def test_year_grid_common_year_has_only_nilo(api):
    data = api.get("/api/tredeco/year/2024/grid/").json()
    assert [d["name"] for d in data["intercalary"]] == ["Nilo"]


def test_year_grid_unsupported_year(api):
    resp = api.get("/api/tredeco/year/9999/grid/")
    assert resp.status_code == 400
    assert resp.json()["errors"]["year"][0]["code"] == "year_out_of_range"


def test_to_standard_accepts_whole_tredeco_date(api):
    resp = api.get("/api/tredeco/to-standard/", {"date": "13 Duodeco 2023"})
    assert resp.status_code == 200
    assert resp.json()["date"] == "2024-01-15"

    resp = api.get("/api/tredeco/to-standard/", {"date": "2023-BIX"})
    assert resp.json()["date"] == "2024-02-29"


def test_to_standard_last_representable_year(api):
    resp = api.get("/api/tredeco/to-standard/", {"year": 9999, "month": 0, "day": 1})
    assert resp.status_code == 200
    assert resp.json()["date"] == "9999-03-01"

    resp = api.get("/api/tredeco/to-standard/", {"year": 9999, "month": "Nilo"})
    assert resp.status_code == 400
    assert resp.json()["errors"]["year"][0]["code"] == "year_out_of_range"


def test_to_tredeco_first_standard_date(api):
    resp = api.get("/api/tredeco/to-tredeco/", {"date": "0001-01-01"})
    assert resp.status_code == 200
    assert resp.json()["storage"] == "0000-11-27"
