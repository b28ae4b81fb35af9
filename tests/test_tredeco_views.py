from django.urls import reverse


def test_year_meta_endpoint(client):
    resp = client.get(reverse("tredeco_calendar:year_meta", args=[2023]))
    assert resp.status_code == 200
    data = resp.json()
    assert data["year"] == 2023
    assert data["leap"] is True
    assert data["bix"] == "2024-02-29"


def test_year_meta_api_alias(client):
    resp = client.get("/api/tredeco/year/2024/meta")
    assert resp.status_code == 200
    assert resp.json()["year_length"] == 365


def test_year_meta_unsupported_year(client):
    resp = client.get("/tredeco/year/0/meta/")
    assert resp.status_code == 400
    assert "error" in resp.json()


def test_set_date_xhr(client):
    resp = client.post(
        reverse("tredeco_calendar:set_tredeco_date"),
        {"date": "29-02-2024"},
        HTTP_X_REQUESTED_WITH="XMLHttpRequest",
    )
    assert resp.status_code == 200
    data = resp.json()
    assert data == {
        "ok": True,
        "value": "2024-02-29",
        "tredeco": "2023-BIX",
        "label": "Bix 2023",
    }
    assert client.session["tredeco_active_date"] == "2024-02-29"


def test_set_date_redirects_to_referer(client):
    resp = client.post(
        reverse("tredeco_calendar:set_tredeco_date"),
        {"date": "2024-03-01"},
        HTTP_REFERER="/somewhere/",
    )
    assert resp.status_code == 302
    assert resp["Location"] == "/somewhere/"


def test_set_date_invalid(client):
    url = reverse("tredeco_calendar:set_tredeco_date")
    resp = client.post(url, {"date": "31-02-2024"}, HTTP_X_REQUESTED_WITH="XMLHttpRequest")
    assert resp.status_code == 400
    assert "error" in resp.json()

    resp = client.post(url, {"date": ""})
    assert resp.status_code == 400


def test_set_date_requires_post(client):
    resp = client.get(reverse("tredeco_calendar:set_tredeco_date"))
    assert resp.status_code == 405
