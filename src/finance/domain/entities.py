"""
Finance entities: payments received from students and the centre's expenses.
"""
from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal
from enum import Enum
from typing import Any, Dict, Optional

from src.shared.utils.money import to_number


class PaymentMethod(str, Enum):
    CASH = "cash"
    CARD = "card"
    TRANSFER = "transfer"


@dataclass
class Payment:
    """
    A money receipt for one student and one covered month.

    ``group_id`` is the student's group at the time the payment was recorded
    and is never recomputed afterwards.
    """

    id: int
    student_id: int
    group_id: Optional[int]
    amount: Decimal
    payment_month: str
    payment_date: date
    payment_method: PaymentMethod
    notes: Optional[str] = None
    created_at: Optional[datetime] = None
    student_name: Optional[str] = None
    group_name: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "student_id": self.student_id,
            "group_id": self.group_id,
            "amount": to_number(self.amount),
            "payment_month": self.payment_month,
            "payment_date": self.payment_date,
            "payment_method": self.payment_method.value,
            "notes": self.notes,
            "created_at": self.created_at,
            "student_name": self.student_name,
            "group_name": self.group_name,
        }


@dataclass
class Expense:
    id: int
    title: str
    amount: Decimal
    category: Optional[str]
    expense_date: date
    expense_month: str
    notes: Optional[str] = None
    created_at: Optional[datetime] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "amount": to_number(self.amount),
            "category": self.category,
            "expense_date": self.expense_date,
            "expense_month": self.expense_month,
            "notes": self.notes,
            "created_at": self.created_at,
        }
