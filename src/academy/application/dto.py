"""
Write models for groups and students.

Updates replace the whole row, so the same input type serves create and
update; optional fields that were omitted are stored as NULL.
"""
from __future__ import annotations

from dataclasses import asdict, dataclass
from datetime import date
from decimal import Decimal
from typing import Any, Dict, Optional

from src.academy.domain.entities import PaymentStatus


@dataclass(frozen=True)
class GroupInput:
    name: str
    teacher_name: Optional[str]
    monthly_fee: Decimal

    def as_values(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class StudentInput:
    group_id: Optional[int]
    full_name: str
    phone_number: Optional[str]
    parent_phone: Optional[str]
    join_date: date
    payment_status: PaymentStatus = PaymentStatus.UNPAID

    def as_values(self) -> Dict[str, Any]:
        values = asdict(self)
        values["payment_status"] = self.payment_status.value
        return values
