from __future__ import annotations

from typing import Any, Mapping, Optional

from src.finance.application.dto import ExpenseInput
from src.shared.validation import (
    MAX_AMOUNT,
    Rule,
    Schema,
    blank_to_none,
    is_iso_date,
    is_number_at_least,
    is_number_at_most,
    max_length,
    not_blank,
    parse_iso_date,
    to_decimal,
)

EXPENSE_SCHEMA = Schema([
    Rule("title", not_blank, "Title is required"),
    Rule("title", max_length(200, strip=True), "Title must be at most 200 characters"),
    Rule("amount", is_number_at_least(0), "Amount must be a positive number"),
    Rule("amount", is_number_at_most(MAX_AMOUNT), "Amount must not exceed 99999999.99"),
    Rule("category", max_length(100), "Category must be at most 100 characters"),
    Rule("expense_date", is_iso_date, "Valid expense date is required"),
])


def parse_expense(payload: Optional[Mapping[str, Any]]) -> ExpenseInput:
    """expense_month is derived from expense_date; a client-sent value is ignored."""
    EXPENSE_SCHEMA.enforce(payload)
    return ExpenseInput(
        title=payload["title"].strip(),
        amount=to_decimal(payload["amount"]),
        category=blank_to_none(payload.get("category")),
        expense_date=parse_iso_date(payload["expense_date"]),
        notes=blank_to_none(payload.get("notes")),
    )
