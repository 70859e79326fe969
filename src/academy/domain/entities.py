"""
Academy entities: groups (classes taught by one teacher for a monthly fee)
and the students enrolled in them.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime
from decimal import Decimal
from enum import Enum
from typing import Any, Dict, List, Optional

from src.shared.utils.money import to_number


class PaymentStatus(str, Enum):
    PAID = "paid"
    UNPAID = "unpaid"


@dataclass
class Group:
    id: int
    name: str
    teacher_name: Optional[str]
    monthly_fee: Decimal
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "teacher_name": self.teacher_name,
            "monthly_fee": to_number(self.monthly_fee),
            "created_at": self.created_at,
            "updated_at": self.updated_at,
        }


@dataclass
class GroupSummary:
    """List row: a group plus its roster counters."""

    group: Group
    student_count: int
    paid_students: int

    def to_dict(self) -> Dict[str, Any]:
        data = self.group.to_dict()
        data["student_count"] = self.student_count
        data["paid_students"] = self.paid_students
        return data


@dataclass
class Student:
    id: int
    group_id: Optional[int]
    full_name: str
    phone_number: Optional[str]
    parent_phone: Optional[str]
    join_date: date
    payment_status: PaymentStatus
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    # Display columns joined from the student's group
    group_name: Optional[str] = None
    monthly_fee: Optional[Decimal] = None

    def to_dict(self, *, with_group: bool = True) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "id": self.id,
            "group_id": self.group_id,
            "full_name": self.full_name,
            "phone_number": self.phone_number,
            "parent_phone": self.parent_phone,
            "join_date": self.join_date,
            "payment_status": self.payment_status.value,
            "created_at": self.created_at,
            "updated_at": self.updated_at,
        }
        if with_group:
            data["group_name"] = self.group_name
            data["monthly_fee"] = to_number(self.monthly_fee)
        return data


@dataclass
class GroupDetail:
    group: Group
    students: List[Student] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        data = self.group.to_dict()
        data["students"] = [s.to_dict(with_group=False) for s in self.students]
        return data
