from datetime import date

import pytest


@pytest.fixture
def march_2024(freeze_today):
    freeze_today(date(2024, 3, 10))


def test_past_month_payment_marks_student_paid(march_2024, create_student, create_payment, get_student):
    student = create_student()
    assert student["payment_status"] == "unpaid"
    create_payment(student["id"], "2023-11")
    assert get_student(student["id"])["payment_status"] == "paid"


def test_deleting_only_current_month_payment_marks_unpaid(
    march_2024, client, auth_headers, create_student, create_payment, get_student
):
    student = create_student()
    payment = create_payment(student["id"], "2024-03")
    assert get_student(student["id"])["payment_status"] == "paid"

    r = client.delete(f"/api/payments/{payment['id']}", headers=auth_headers)
    assert r.status_code == 200
    assert r.json() == {"success": True, "message": "Payment deleted successfully"}
    assert get_student(student["id"])["payment_status"] == "unpaid"


def test_remaining_current_month_payment_keeps_paid(
    march_2024, client, auth_headers, create_student, create_payment, get_student
):
    student = create_student()
    first = create_payment(student["id"], "2024-03")
    create_payment(student["id"], "2024-03", amount=50000)

    client.delete(f"/api/payments/{first['id']}", headers=auth_headers)
    assert get_student(student["id"])["payment_status"] == "paid"


def test_delete_only_looks_at_current_month(
    march_2024, client, auth_headers, create_student, create_payment, get_student
):
    # Two past-month payments: deleting one leaves a payment behind, yet the
    # student becomes unpaid because none of them covers March 2024.
    student = create_student()
    first = create_payment(student["id"], "2024-01")
    create_payment(student["id"], "2024-02")
    assert get_student(student["id"])["payment_status"] == "paid"

    client.delete(f"/api/payments/{first['id']}", headers=auth_headers)
    assert get_student(student["id"])["payment_status"] == "unpaid"
    remaining = client.get(f"/api/payments?student_id={student['id']}", headers=auth_headers).json()["data"]
    assert len(remaining) == 1


def test_double_delete(march_2024, client, auth_headers, create_student, create_payment):
    payment = create_payment(create_student()["id"], "2024-03")
    assert client.delete(f"/api/payments/{payment['id']}", headers=auth_headers).status_code == 200
    r = client.delete(f"/api/payments/{payment['id']}", headers=auth_headers)
    assert r.status_code == 404
    assert r.json() == {"success": False, "message": "Payment not found"}


def test_unknown_student(client, auth_headers):
    r = client.post(
        "/api/payments",
        json={
            "student_id": 999,
            "amount": 100,
            "payment_month": "2024-03",
            "payment_date": "2024-03-01",
            "payment_method": "card",
        },
        headers=auth_headers,
    )
    assert r.status_code == 404
    assert r.json()["message"] == "Student not found"
    assert client.get("/api/payments", headers=auth_headers).json()["data"] == []


def test_payment_keeps_group_at_time_of_insert(
    client, auth_headers, create_group, create_student, create_payment
):
    old_group = create_group(name="Old")
    new_group = create_group(name="New")
    student = create_student(group_id=old_group["id"], full_name="Mover")
    payment = create_payment(student["id"], "2024-03", payment_method="transfer", notes="first")
    assert payment["group_id"] == old_group["id"]
    assert payment["student_name"] == "Mover"
    assert payment["group_name"] == "Old"

    client.put(
        f"/api/students/{student['id']}",
        json={"group_id": new_group["id"], "full_name": "Mover", "join_date": "2024-01-15"},
        headers=auth_headers,
    )
    rows = client.get(f"/api/payments?group_id={old_group['id']}", headers=auth_headers).json()["data"]
    assert [p["id"] for p in rows] == [payment["id"]]


def test_list_filters_and_order(client, auth_headers, create_student, create_payment):
    student = create_student()
    older = create_payment(student["id"], "2024-02", payment_date="2024-02-03")
    newer = create_payment(student["id"], "2024-03", payment_date="2024-03-03")

    data = client.get("/api/payments", headers=auth_headers).json()["data"]
    assert [p["id"] for p in data] == [newer["id"], older["id"]]

    march = client.get("/api/payments?month=2024-03", headers=auth_headers).json()["data"]
    assert [p["id"] for p in march] == [newer["id"]]

    r = client.get("/api/payments?month=March", headers=auth_headers)
    assert r.status_code == 400
    assert r.json()["errors"] == [{"field": "month", "message": "Month must be in YYYY-MM format"}]


def test_payment_validation(client, auth_headers):
    r = client.post(
        "/api/payments",
        json={"student_id": "x", "amount": -5, "payment_month": "2024-3", "payment_date": "soon", "payment_method": "gold"},
        headers=auth_headers,
    )
    assert r.status_code == 400
    assert [e["message"] for e in r.json()["errors"]] == [
        "Valid student ID is required",
        "Amount must be a positive number",
        "Payment month must be in YYYY-MM format",
        "Valid payment date is required",
        "Invalid payment method",
    ]


def test_amount_above_numeric_precision_is_rejected(client, auth_headers, create_student):
    student = create_student()
    r = client.post(
        "/api/payments",
        json={
            "student_id": student["id"],
            "amount": 1e9,
            "payment_month": "2024-03",
            "payment_date": "2024-03-05",
            "payment_method": "cash",
        },
        headers=auth_headers,
    )
    assert r.status_code == 400
    assert r.json()["errors"] == [{"field": "amount", "message": "Amount must not exceed 99999999.99"}]
    assert client.get("/api/payments", headers=auth_headers).json()["data"] == []
