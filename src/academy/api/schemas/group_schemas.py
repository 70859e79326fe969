from __future__ import annotations

from typing import Any, Mapping, Optional

from src.academy.application.dto import GroupInput
from src.shared.validation import (
    MAX_AMOUNT,
    Rule,
    Schema,
    blank_to_none,
    is_number_at_least,
    is_number_at_most,
    max_length,
    not_blank,
    to_decimal,
)

GROUP_SCHEMA = Schema([
    Rule("name", not_blank, "Group name is required"),
    Rule("name", max_length(100, strip=True), "Group name must be at most 100 characters"),
    Rule("teacher_name", max_length(100), "Teacher name must be at most 100 characters"),
    Rule("monthly_fee", is_number_at_least(0), "Monthly fee must be a positive number"),
    Rule("monthly_fee", is_number_at_most(MAX_AMOUNT), "Monthly fee must not exceed 99999999.99"),
])


def parse_group(payload: Optional[Mapping[str, Any]]) -> GroupInput:
    GROUP_SCHEMA.enforce(payload)
    return GroupInput(
        name=payload["name"].strip(),
        teacher_name=blank_to_none(payload.get("teacher_name")),
        monthly_fee=to_decimal(payload["monthly_fee"]),
    )
