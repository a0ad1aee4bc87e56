from __future__ import annotations

import pytest

from ems_backend.core.exceptions import StoreError


def _register(client, **fields):
    res = client.post("/users", json=fields)
    assert res.status_code == 201, res.get_json()
    return res.get_json()


def _auth(client, email):
    token = client.post("/jwt", json={"email": email}).get_json()["token"]
    return {"Authorization": f"Bearer {token}"}


def test_index(client):
    res = client.get("/")
    assert res.status_code == 200
    assert b"running" in res.data


def test_register_and_lookup(client):
    body = _register(client, email="a@x.io", name="Ada")

    assert body["message"] == "User created"
    assert body["employeeId"] == "20250001"

    res = client.get("/users", query_string={"email": "a@x.io"})
    assert res.status_code == 200
    assert res.get_json()["_id"] == body["insertedId"]
    assert res.get_json()["employeeId"] == "20250001"


def test_register_errors(client):
    assert client.post("/users", json={"name": "no email"}).status_code == 400
    _register(client, email="a@x.io")
    res = client.post("/users", json={"email": "a@x.io"})
    assert res.status_code == 409
    assert res.get_json() == {"message": "User already exists"}


def test_list_users_and_missing_lookup(client):
    _register(client, email="a@x.io")
    _register(client, email="b@x.io")

    assert len(client.get("/users").get_json()) == 2
    res = client.get("/users", query_string={"email": "ghost@x.io"})
    assert res.status_code == 404
    assert res.get_json() == {"message": "User not found"}


def test_admin_check_requires_credential(client):
    res = client.get("/users/admin/a@x.io")
    assert res.status_code == 401
    assert res.get_json() == {"message": "Unauthorized"}


def test_admin_check_rejects_invalid_token(client):
    res = client.get("/users/admin/a@x.io", headers={"Authorization": "Bearer nope"})
    assert res.status_code == 403
    assert res.get_json() == {"message": "Forbidden"}


def test_admin_check_identity_mismatch_is_false_even_for_admin(client):
    _register(client, email="boss@x.io", role="admin")

    res = client.get("/users/admin/boss@x.io", headers=_auth(client, "a@x.io"))

    assert res.status_code == 403
    assert res.get_json() == {"isAdmin": False}


def test_admin_check_uses_stored_role(client):
    _register(client, email="boss@x.io", role="admin")
    _register(client, email="a@x.io")

    assert client.get("/users/admin/boss@x.io", headers=_auth(client, "boss@x.io")).get_json() == {"isAdmin": True}
    assert client.get("/users/admin/a@x.io", headers=_auth(client, "a@x.io")).get_json() == {"isAdmin": False}


def test_jwt_requires_json_object(client):
    assert client.post("/jwt", data="x", content_type="text/plain").status_code == 400


def test_attendance_actions_flow(client, work_date):
    rid = _register(client, email="a@x.io")["insertedId"]

    res = client.patch(f"/users/{rid}", json={"action": "clockIn", "date": work_date, "clockIn": "09:00"})
    assert res.status_code == 201
    assert res.get_json() == {"message": "Clock-in recorded."}

    res = client.patch(f"/users/{rid}", json={"action": "clockIn", "date": work_date, "clockIn": "09:05"})
    assert res.status_code == 409

    assert client.patch(f"/users/{rid}", json={"action": "clockOut", "date": work_date, "clockOut": "18:00"}).status_code == 200

    payroll = client.patch(f"/users/{rid}", json={"action": "updatePayroll", "date": "2025-06-03", "payroll": "paid"})
    assert payroll.status_code == 201
    payroll = client.patch(f"/users/{rid}", json={"action": "updatePayroll", "date": "2025-06-03", "payroll": "bonus"})
    assert payroll.status_code == 200
    assert payroll.get_json() == {"message": "Payroll updated successfully."}

    record = client.get("/users", query_string={"email": "a@x.io"}).get_json()
    assert [a["date"] for a in record["attendance"]] == [work_date, "2025-06-03"]
    assert record["attendance"][0]["clockOut"] == "18:00"


def test_invalid_action_and_unknown_record(client):
    rid = _register(client, email="a@x.io")["insertedId"]

    res = client.patch(f"/users/{rid}", json={"action": "dance"})
    assert res.status_code == 400
    assert res.get_json() == {"message": "Invalid action"}

    assert client.patch("/users/65f000000000000000000000", json={"action": "clockIn"}).status_code == 404


def test_update_role_endpoint(client):
    rid = _register(client, email="a@x.io")["insertedId"]

    assert client.patch(f"/users/{rid}", json={"action": "updateRole"}).status_code == 400
    assert client.patch(f"/users/{rid}", json={"action": "updateRole", "role": "admin"}).status_code == 200
    assert client.patch(f"/users/{rid}", json={"action": "updateRole", "role": "admin"}).status_code == 404


def test_performance_endpoint(client, work_date):
    rid = _register(client, email="a@x.io")["insertedId"]

    assert client.patch(f"/users/{rid}/performance", json={"date": work_date, "score": "high"}).status_code == 400
    assert client.patch(f"/users/{rid}/performance", json={"date": work_date, "score": 90}).status_code == 201
    assert client.patch(f"/users/{rid}/performance", json={"date": work_date, "score": 85}).status_code == 200

    record = client.get("/users", query_string={"email": "a@x.io"}).get_json()
    assert record["performance"] == [{"date": work_date, "score": 85}]


@pytest.mark.parametrize(
    "path, message",
    [
        ("communication/reset", "Communication reset"),
        ("payroll/reset", "Payroll reset"),
        ("performance/reset", "Performance reset"),
        ("attendance/delete", "Attendance & performance deleted"),
    ],
)
def test_reset_endpoints_succeed(client, work_date, path, message):
    rid = _register(client, email="a@x.io")["insertedId"]

    res = client.patch(f"/users/{rid}/{path}", json={"date": work_date})

    assert res.status_code == 200
    assert res.get_json() == {"message": message}


@pytest.mark.parametrize("path", ["communication/reset", "payroll/reset", "performance/reset", "attendance/delete"])
def test_reset_endpoints_unknown_record_404(client, work_date, path):
    res = client.patch(f"/users/65f000000000000000000000/{path}", json={"date": work_date})

    assert res.status_code == 404
    assert res.get_json() == {"message": "User not found"}


def test_attendance_delete_endpoint_removes_day(client, work_date):
    rid = _register(client, email="a@x.io")["insertedId"]
    client.patch(f"/users/{rid}", json={"action": "clockIn", "date": work_date, "clockIn": "09:00"})
    client.patch(f"/users/{rid}/performance", json={"date": work_date, "score": 70})

    client.patch(f"/users/{rid}/attendance/delete", json={"date": work_date})

    record = client.get("/users", query_string={"email": "a@x.io"}).get_json()
    assert record["attendance"] == []
    assert record["performance"] == []


def test_feedback_view(client, work_date):
    rid = _register(client, email="a@x.io")["insertedId"]
    client.patch(f"/users/{rid}", json={"action": "clockIn", "date": work_date, "clockIn": "09:00"})

    res = client.get("/feedback", query_string={"email": "a@x.io"})

    assert res.status_code == 200
    assert res.get_json() == {
        "dailyFeedback": [
            {
                "date": work_date,
                "clockIn": "09:00",
                "clockOut": "Not Recorded",
                "communicationRating": 0,
                "payroll": "N/A",
            }
        ]
    }
    assert client.get("/feedback").status_code == 400
    assert client.get("/feedback", query_string={"email": "ghost@x.io"}).status_code == 404


def test_unknown_route_is_json(client):
    res = client.get("/nope")
    assert res.status_code == 404
    assert "message" in res.get_json()


def test_store_failure_is_internal_error(client, users, monkeypatch):
    def boom():
        raise StoreError("connection reset")

    monkeypatch.setattr(users, "list_all", boom)

    res = client.get("/users")

    assert res.status_code == 500
    assert res.get_json() == {"message": "Internal server error"}
