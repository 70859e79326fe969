from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Any, Dict, Optional

from src.finance.domain.entities import PaymentMethod
from src.shared.utils.dates import month_key


@dataclass(frozen=True)
class PaymentInput:
    student_id: int
    amount: Decimal
    payment_month: str
    payment_date: date
    payment_method: PaymentMethod
    notes: Optional[str] = None

    def as_values(self, group_id: Optional[int]) -> Dict[str, Any]:
        return {
            "student_id": self.student_id,
            "group_id": group_id,
            "amount": self.amount,
            "payment_month": self.payment_month,
            "payment_date": self.payment_date,
            "payment_method": self.payment_method.value,
            "notes": self.notes,
        }


@dataclass(frozen=True)
class ExpenseInput:
    title: str
    amount: Decimal
    category: Optional[str]
    expense_date: date
    notes: Optional[str] = None

    @property
    def expense_month(self) -> str:
        return month_key(self.expense_date)

    def as_values(self) -> Dict[str, Any]:
        return {
            "title": self.title,
            "amount": self.amount,
            "category": self.category,
            "expense_date": self.expense_date,
            "expense_month": self.expense_month,
            "notes": self.notes,
        }
