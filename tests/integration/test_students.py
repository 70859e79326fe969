def test_create_student_defaults_to_unpaid(create_group, create_student):
    group = create_group(name="Biology", monthly_fee=150000)
    student = create_student(group_id=group["id"], full_name="  Dilnoza  ")
    assert student["full_name"] == "Dilnoza"
    assert student["payment_status"] == "unpaid"
    assert student["group_name"] == "Biology"
    assert student["monthly_fee"] == 150000
    assert student["join_date"] == "2024-01-15"


def test_group_id_as_numeric_string_is_accepted(create_group, create_student):
    group = create_group()
    student = create_student(group_id=str(group["id"]))
    assert student["group_id"] == group["id"]


def test_unknown_group_creates_nothing(client, auth_headers):
    r = client.post(
        "/api/students",
        json={"group_id": 999, "full_name": "Nobody", "join_date": "2024-01-01"},
        headers=auth_headers,
    )
    assert r.status_code == 404
    assert r.json() == {"success": False, "message": "Group not found"}
    assert client.get("/api/students", headers=auth_headers).json()["data"] == []


def test_validation_reports_all_fields(client, auth_headers):
    r = client.post(
        "/api/students",
        json={"group_id": "abc", "full_name": "", "join_date": "2024-13-01", "payment_status": "late"},
        headers=auth_headers,
    )
    assert r.status_code == 400
    assert r.json()["errors"] == [
        {"field": "group_id", "message": "Valid group ID is required"},
        {"field": "full_name", "message": "Full name is required"},
        {"field": "join_date", "message": "Valid join date is required"},
        {"field": "payment_status", "message": "Invalid payment status"},
    ]


def test_list_filters_by_group_newest_first(client, auth_headers, create_group, create_student):
    a = create_group(name="A")
    b = create_group(name="B")
    first = create_student(group_id=a["id"], full_name="First")
    second = create_student(group_id=a["id"], full_name="Second")
    create_student(group_id=b["id"], full_name="Other")

    data = client.get(f"/api/students?group_id={a['id']}", headers=auth_headers).json()["data"]
    assert [s["id"] for s in data] == [second["id"], first["id"]]
    assert all(s["group_name"] == "A" for s in data)
    assert len(client.get("/api/students", headers=auth_headers).json()["data"]) == 3


def test_update_replaces_whole_row(client, auth_headers, create_student):
    student = create_student(payment_status="paid", parent_phone="+998911112233")
    r = client.put(
        f"/api/students/{student['id']}",
        json={"group_id": student["group_id"], "full_name": "Renamed", "join_date": "2024-02-01"},
        headers=auth_headers,
    )
    assert r.status_code == 200
    data = r.json()["data"]
    assert r.json()["message"] == "Student updated successfully"
    assert data["full_name"] == "Renamed"
    assert data["phone_number"] is None
    assert data["parent_phone"] is None
    assert data["payment_status"] == "unpaid"


def test_update_without_group_clears_it(client, auth_headers, create_student):
    student = create_student()
    r = client.put(
        f"/api/students/{student['id']}",
        json={"full_name": "Free Agent", "join_date": "2024-02-01"},
        headers=auth_headers,
    )
    assert r.status_code == 200
    assert r.json()["data"]["group_id"] is None
    assert r.json()["data"]["group_name"] is None


def test_update_to_unknown_group(client, auth_headers, create_student, get_student):
    student = create_student()
    r = client.put(
        f"/api/students/{student['id']}",
        json={"group_id": 999, "full_name": "Lost", "join_date": "2024-02-01"},
        headers=auth_headers,
    )
    assert r.status_code == 404
    assert r.json()["message"] == "Group not found"
    assert get_student(student["id"])["full_name"] == student["full_name"]


def test_missing_student(client, auth_headers):
    assert client.get("/api/students/999", headers=auth_headers).json() == {
        "success": False,
        "message": "Student not found",
    }
    r = client.put(
        "/api/students/999",
        json={"full_name": "X", "join_date": "2024-01-01"},
        headers=auth_headers,
    )
    assert r.status_code == 404


def test_delete_student_removes_payments(client, auth_headers, create_student, create_payment):
    student = create_student()
    create_payment(student["id"], "2024-03")
    r = client.delete(f"/api/students/{student['id']}", headers=auth_headers)
    assert r.json() == {"success": True, "message": "Student deleted successfully"}
    assert client.get("/api/payments", headers=auth_headers).json()["data"] == []
    assert client.delete(f"/api/students/{student['id']}", headers=auth_headers).status_code == 404


def test_oversized_group_id_is_a_validation_error(client, auth_headers):
    r = client.post(
        "/api/students",
        json={"group_id": 99999999999999999999, "full_name": "Nobody", "join_date": "2024-01-01"},
        headers=auth_headers,
    )
    assert r.status_code == 400
    assert r.json()["errors"] == [{"field": "group_id", "message": "Valid group ID is required"}]


def test_phone_longer_than_column_is_rejected(client, auth_headers, create_group):
    group = create_group()
    r = client.post(
        "/api/students",
        json={"group_id": group["id"], "full_name": "Ali", "join_date": "2024-01-01", "parent_phone": "9" * 21},
        headers=auth_headers,
    )
    assert r.status_code == 400
    assert r.json()["errors"] == [{"field": "parent_phone", "message": "Parent phone must be at most 20 characters"}]


def test_week_date_is_not_a_join_date(client, auth_headers, create_group):
    group = create_group()
    r = client.post(
        "/api/students",
        json={"group_id": group["id"], "full_name": "Ali", "join_date": "2024-W10-1"},
        headers=auth_headers,
    )
    assert r.status_code == 400
    assert r.json()["errors"] == [{"field": "join_date", "message": "Valid join date is required"}]
