import csv
import io
from datetime import date

import pytest

from src.shop_management.shop_management.container import build_services
from src.shop_management.shop_management.main import create_app
from src.shop_management.shop_management.payroll.policy import PayrollPolicy
from conftest import InMemoryAttendance, InMemoryEmployees, make_employee, make_record


@pytest.fixture
def client(monkeypatch, notifier):
    monkeypatch.setenv("APP_ENV", "testing")
    container = build_services(
        employees_repo=InMemoryEmployees([make_employee("e1", daily_rate=160)]),
        attendance_repo=InMemoryAttendance(
            [make_record(f"r{i}", "e1", date(2025, 1, 6 + i)) for i in range(3)]
        ),
        policy=PayrollPolicy(),
        notifier=notifier,
        admin_chat_id="admin-1",
    )
    app = create_app(container=container)
    app.config["TESTING"] = True
    return app.test_client()


WEEK = {"start": "2025-01-05", "end": "2025-01-11"}


def test_health(client):
    assert client.get("/health").get_json() == {"status": "ok"}


def test_create_and_fetch_employee(client):
    res = client.post(
        "/api/employees",
        json={
            "name": "Jane Doe",
            "phone": "0911000000",
            "paymentMethod": "Monthly",
            "accountNumber": "99887766",
            "monthlyRate": 3000,
        },
    )
    assert res.status_code == 201
    employee_id = res.get_json()["employee"]["id"]

    detail = client.get(f"/api/employees/{employee_id}").get_json()
    assert detail["employee"]["monthlyRate"] == 3000
    assert detail["attendance"] == []


def test_invalid_employee_is_400(client):
    res = client.post("/api/employees", json={"name": "J"})
    assert res.status_code == 400
    assert res.get_json()["success"] is False


def test_unknown_employee_is_404(client):
    assert client.get("/api/employees/ghost").status_code == 404
    assert client.get("/api/payroll/ghost").status_code == 404


def test_attendance_day_sheet(client):
    client.post("/api/attendance", json={"employeeId": "e1", "date": "2025-01-10", "status": "Absent"})

    data = client.get("/api/attendance?date=2025-01-10").get_json()
    [row] = data["rows"]
    assert row["record"]["status"] == "Absent"

    assert client.get("/api/attendance?date=10-01-2025").status_code == 400


def test_employee_payroll_for_period(client):
    data = client.get("/api/payroll/e1", query_string=WEEK).get_json()
    assert data["entry"]["totalHours"] == 22.5
    assert data["entry"]["amount"] == 450.0
    assert data["summary"].startswith("Hi Worker e1")


def test_half_open_period_is_400(client):
    assert client.get("/api/payroll/e1?start=2025-01-05").status_code == 400


def test_export_csv(client):
    res = client.get("/api/payroll/export", query_string={"method": "Weekly", **WEEK})
    assert res.mimetype == "text/csv"
    rows = list(csv.DictReader(io.StringIO(res.data.decode("utf-8-sig"))))
    assert [r["employeeId"] for r in rows] == ["e1"]
    assert rows[0]["amount"] == "450.0"


def test_expenses(client):
    data = client.get("/api/payroll/expenses", query_string=WEEK).get_json()
    assert data["total"] == 450.0
    assert len(data["points"]) == 7


def test_send_summary(client, notifier):
    res = client.post("/api/payroll/e1/send", json=WEEK)
    assert res.get_json() == {"success": True}
    assert notifier.sent[0][0] == "admin-1"


def test_overview_shape(client):
    data = client.get("/api/payroll").get_json()
    assert set(data) >= {"success", "weekly", "monthly"}
    assert "label" in data["weekly"]["period"]


def test_send_summary_rejects_non_object_body(client, notifier):
    res = client.post("/api/payroll/e1/send", json=["2025-01-05", "2025-01-11"])
    assert res.status_code == 400
    assert notifier.sent == []


@pytest.mark.parametrize(
    "method, url",
    [
        ("post", "/api/employees"),
        ("patch", "/api/employees/e1"),
        ("post", "/api/attendance"),
    ],
)
def test_write_routes_reject_non_object_body(client, method, url):
    res = getattr(client, method)(url, json=[1, 2])
    assert res.status_code == 400
    assert res.get_json()["success"] is False
