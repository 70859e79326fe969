from __future__ import annotations

from typing import Any, Mapping, Optional

from src.academy.application.dto import StudentInput
from src.academy.domain.entities import PaymentStatus
from src.shared.validation import (
    Rule,
    Schema,
    blank_to_none,
    is_int,
    is_iso_date,
    max_length,
    not_blank,
    one_of,
    optional,
    parse_iso_date,
)

_STATUSES = tuple(s.value for s in PaymentStatus)

STUDENT_CREATE_SCHEMA = Schema([
    Rule("group_id", is_int, "Valid group ID is required"),
    Rule("full_name", not_blank, "Full name is required"),
    Rule("full_name", max_length(100, strip=True), "Full name must be at most 100 characters"),
    Rule("phone_number", max_length(20), "Phone number must be at most 20 characters"),
    Rule("parent_phone", max_length(20), "Parent phone must be at most 20 characters"),
    Rule("join_date", is_iso_date, "Valid join date is required"),
    Rule("payment_status", optional(one_of(*_STATUSES)), "Invalid payment status"),
])

STUDENT_UPDATE_SCHEMA = Schema([
    Rule("group_id", optional(is_int), "Valid group ID is required"),
    Rule("full_name", not_blank, "Full name is required"),
    Rule("full_name", max_length(100, strip=True), "Full name must be at most 100 characters"),
    Rule("phone_number", max_length(20), "Phone number must be at most 20 characters"),
    Rule("parent_phone", max_length(20), "Parent phone must be at most 20 characters"),
    Rule("join_date", is_iso_date, "Valid join date is required"),
    Rule("payment_status", optional(one_of(*_STATUSES)), "Invalid payment status"),
])


def _build(payload: Mapping[str, Any]) -> StudentInput:
    group_id = payload.get("group_id")
    status = payload.get("payment_status")
    return StudentInput(
        group_id=int(str(group_id).strip()) if group_id not in (None, "") else None,
        full_name=payload["full_name"].strip(),
        phone_number=blank_to_none(payload.get("phone_number")),
        parent_phone=blank_to_none(payload.get("parent_phone")),
        join_date=parse_iso_date(payload["join_date"]),
        # Omitted status means unpaid, on update as well as on create
        payment_status=PaymentStatus(status) if status else PaymentStatus.UNPAID,
    )


def parse_student_create(payload: Optional[Mapping[str, Any]]) -> StudentInput:
    STUDENT_CREATE_SCHEMA.enforce(payload)
    return _build(payload)


def parse_student_update(payload: Optional[Mapping[str, Any]]) -> StudentInput:
    STUDENT_UPDATE_SCHEMA.enforce(payload)
    return _build(payload)
