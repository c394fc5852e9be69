import io
from datetime import date

import pandas as pd
import pytest

from src.timesheet_pay.timesheet_pay.main import create_app


@pytest.fixture
def client(monkeypatch):
    monkeypatch.setenv("APP_ENV", "testing")
    app = create_app({"CLOCK": lambda: date(2026, 1, 15)})
    return app.test_client()


def test_index_renders_without_month(client):
    resp = client.get("/")

    assert resp.status_code == 200
    assert b"Select Month" in resp.data


def test_select_month_returns_rows_and_summary(client):
    client.post("/api/basic-pay", json={"basic_pay": "30000"})
    resp = client.post("/api/month", json={"month": "Jan"})

    data = resp.get_json()
    assert resp.status_code == 200
    assert len(data["rows"]) == 31
    assert data["totals"]["total_pay"] == 35000
    assert data["summary"]["total_pay"] == "Rs35,000.00"


def test_edits_flow_through_to_summary(client):
    client.post("/api/basic-pay", json={"basic_pay": "30000"})
    client.post("/api/month", json={"month": "Jan"})

    resp = client.post("/api/entries/2026-01-05", json={"field": "timeIn", "value": "10:00 AM"})
    assert resp.get_json()["updated"] is True
    assert resp.get_json()["totals"]["total_minutes_late"] == 30

    for key in ("2026-01-06", "2026-01-07", "2026-01-08"):
        resp = client.post(f"/api/entries/{key}/status", json={"status": "leave"})

    totals = resp.get_json()["totals"]
    assert totals["leave_count"] == 3
    assert totals["leave_deduction"] == 2000
    assert totals["total_pay"] == 30000 + 2500 - 2000


def test_unknown_date_key_is_not_an_error(client):
    client.post("/api/month", json={"month": "Jan"})

    resp = client.post("/api/entries/2031-01-01", json={"field": "timeOut", "value": "5:00 PM"})

    assert resp.status_code == 200
    assert resp.get_json()["updated"] is False


@pytest.mark.parametrize(
    "url, payload",
    [
        ("/api/month", {"month": "Bogus"}),
        ("/api/month", ["Jan"]),
        ("/api/entries/2026-01-05", {"field": "note", "value": "x"}),
        ("/api/entries/2026-01-05/status", {"status": "holiday"}),
        ("/api/basic-pay", {"basic_pay": {"amount": 1}}),
    ],
)
def test_bad_payloads_are_rejected(client, url, payload):
    client.post("/api/month", json={"month": "Jan"})

    resp = client.post(url, json=payload)

    assert resp.status_code == 400
    assert resp.get_json()["success"] is False


def test_timesheet_api_includes_entries(client):
    client.post("/api/month", json={"month": "Jan"})

    data = client.get("/api/timesheet").get_json()

    assert data["month"] == "Jan"
    assert data["entries"]["2025-12-27"]["status"] == "off"


def test_sessions_are_per_client(monkeypatch):
    monkeypatch.setenv("APP_ENV", "testing")
    app = create_app({"CLOCK": lambda: date(2026, 1, 15)})
    first, second = app.test_client(), app.test_client()

    first.post("/api/month", json={"month": "Jan"})

    assert second.get("/api/timesheet").get_json()["rows"] == []


def test_csv_and_excel_downloads(client):
    client.post("/api/month", json={"month": "Jan"})

    csv_resp = client.get("/timesheet.csv")
    assert csv_resp.status_code == 200
    assert "timesheet_20251226_20260125.csv" in csv_resp.headers["Content-Disposition"]

    xlsx_resp = client.get("/timesheet.xlsx")
    assert xlsx_resp.status_code == 200
    frame = pd.read_excel(io.BytesIO(xlsx_resp.data))
    assert len(frame) == 31


def test_many_clients_do_not_grow_sessions_without_bound(monkeypatch):
    monkeypatch.setenv("APP_ENV", "testing")
    app = create_app({"CLOCK": lambda: date(2026, 1, 15), "MAX_SESSIONS": 5})

    for _ in range(50):
        app.test_client().get("/")

    assert len(app.extensions["timesheet_pay"].sessions) == 5
