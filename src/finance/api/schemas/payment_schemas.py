from __future__ import annotations

from typing import Any, Mapping, Optional

from src.finance.application.dto import PaymentInput
from src.finance.domain.entities import PaymentMethod
from src.shared.validation import (
    MAX_AMOUNT,
    MONTH_PATTERN,
    Rule,
    Schema,
    blank_to_none,
    is_int,
    is_iso_date,
    is_number_at_least,
    is_number_at_most,
    matches,
    one_of,
    parse_iso_date,
    to_decimal,
)

PAYMENT_SCHEMA = Schema([
    Rule("student_id", is_int, "Valid student ID is required"),
    Rule("amount", is_number_at_least(0), "Amount must be a positive number"),
    Rule("amount", is_number_at_most(MAX_AMOUNT), "Amount must not exceed 99999999.99"),
    Rule("payment_month", matches(MONTH_PATTERN), "Payment month must be in YYYY-MM format"),
    Rule("payment_date", is_iso_date, "Valid payment date is required"),
    Rule("payment_method", one_of(*(m.value for m in PaymentMethod)), "Invalid payment method"),
])


def parse_payment(payload: Optional[Mapping[str, Any]]) -> PaymentInput:
    PAYMENT_SCHEMA.enforce(payload)
    return PaymentInput(
        student_id=int(str(payload["student_id"]).strip()),
        amount=to_decimal(payload["amount"]),
        payment_month=payload["payment_month"],
        payment_date=parse_iso_date(payload["payment_date"]),
        payment_method=PaymentMethod(payload["payment_method"]),
        notes=blank_to_none(payload.get("notes")),
    )
