from __future__ import annotations

DAY = "2024-03-01"


def _mark(client, body, prefix=""):
    return client.post(f"{prefix}/attendance", json=body)


def test_post_then_get_scenario(client):
    res = _mark(client, {
        "teacherId": 1,
        "subjectId": 10,
        "date": DAY,
        "attendanceRecords": [
            {"studentId": 5, "status": "present"},
            {"studentId": 6, "status": "absent"},
        ],
    })
    assert res.status_code == 200
    assert res.get_json() == {
        "success": True,
        "message": "Attendance marked successfully",
        "data": {"stored": 2},
    }

    res = client.get(f"/attendance?subjectId=10&date={DAY}")
    body = res.get_json()
    assert res.status_code == 200
    assert body["success"] is True
    assert [(r["studentId"], r["status"]) for r in body["data"]] == [(5, "present"), (6, "absent")]
    assert body["data"][0]["studentName"] == "Ethan Brown"
    assert body["data"][0]["rollNumber"] == "005"

    res = _mark(client, {
        "teacherId": 2,
        "subjectId": 10,
        "date": DAY,
        "attendanceRecords": [{"studentId": 5, "status": "absent"}],
    })
    assert res.status_code == 200

    data = client.get(f"/attendance?subjectId=10&date={DAY}").get_json()["data"]
    assert len(data) == 1
    assert data[0]["studentId"] == 5
    assert data[0]["status"] == "absent"
    assert data[0]["teacherId"] == 2


def test_api_prefix_is_routed(client):
    res = _mark(client, {"teacherId": 1, "subjectId": 10, "date": DAY, "attendanceRecords": []}, prefix="/api")
    assert res.status_code == 200

    res = client.get(f"/api/attendance?subjectId=10&date={DAY}")
    assert res.get_json() == {"success": True, "data": []}


def test_post_missing_teacher_is_400(client):
    res = _mark(client, {"subjectId": 10, "date": DAY, "attendanceRecords": []})

    assert res.status_code == 400
    body = res.get_json()
    assert body["success"] is False
    assert "teacherId" in body["error"]


def test_post_records_not_a_list_is_400(client):
    res = _mark(client, {"teacherId": 1, "subjectId": 10, "date": DAY, "attendanceRecords": "x"})

    assert res.status_code == 400


def test_post_non_json_body_is_400(client):
    res = client.post("/attendance", data="not json", content_type="text/plain")

    assert res.status_code == 400
    assert res.get_json() == {"success": False, "error": "Invalid request body"}


def test_get_missing_date_is_400(client):
    res = client.get("/attendance?subjectId=10")

    assert res.status_code == 400
    assert res.get_json()["success"] is False


def test_store_failure_is_500_with_message(client, attendance_repo):
    attendance_repo.error = "Deadlock found when trying to get lock"

    res = _mark(client, {"teacherId": 1, "subjectId": 10, "date": DAY, "attendanceRecords": []})
    assert res.status_code == 500
    assert res.get_json() == {"success": False, "error": "Deadlock found when trying to get lock"}

    res = client.get(f"/attendance?subjectId=10&date={DAY}")
    assert res.status_code == 500


def test_roster_endpoint(client):
    _mark(client, {
        "teacherId": 1,
        "subjectId": 10,
        "date": DAY,
        "attendanceRecords": [{"studentId": 7, "status": "present"}],
    })

    res = client.get(f"/attendance/roster?subjectId=10&date={DAY}")
    data = res.get_json()["data"]

    assert res.status_code == 200
    assert data["subjectId"] == 10
    assert data["date"] == DAY
    assert data["presentCount"] == 1
    assert data["total"] == 3
    assert [(s["studentId"], s["status"], s["marked"]) for s in data["students"]] == [
        (5, "absent", False),
        (6, "absent", False),
        (7, "present", True),
    ]


def test_roster_requires_params(client):
    assert client.get("/attendance/roster?date=2024-03-01").status_code == 400


def test_post_overflowing_teacher_id_is_400(client):
    res = client.post(
        "/attendance",
        data='{"teacherId": 1e400, "subjectId": 10, "date": "2024-03-01", "attendanceRecords": []}',
        content_type="application/json",
    )

    assert res.status_code == 400
    assert res.get_json() == {"success": False, "error": "teacherId must be a positive integer"}
