"""
Read-only aggregate queries backing the dashboard.
"""
from __future__ import annotations

from decimal import Decimal
from typing import Dict, List, Tuple

from sqlalchemy import Float, case, cast, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from src.academy.infrastructure.persistence.models import GroupModel, StudentModel
from src.academy.infrastructure.persistence.repositories.group_repository import (
    paid_students_column,
    student_count_column,
)
from src.finance.infrastructure.persistence.models import ExpenseModel, PaymentModel
from src.shared.utils.money import to_decimal_amount


class DashboardRepository:
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def _scalar(self, stmt) -> object:
        result = await self.session.execute(stmt)
        return result.scalar_one()

    async def income_for_month(self, month: str) -> Decimal:
        total = await self._scalar(
            select(func.sum(PaymentModel.amount)).where(PaymentModel.payment_month == month)
        )
        return to_decimal_amount(total)

    async def expenses_for_month(self, month: str) -> Decimal:
        total = await self._scalar(
            select(func.sum(ExpenseModel.amount)).where(ExpenseModel.expense_month == month)
        )
        return to_decimal_amount(total)

    async def count_groups(self) -> int:
        return int(await self._scalar(select(func.count(GroupModel.id))))

    async def count_students(self) -> int:
        return int(await self._scalar(select(func.count(StudentModel.id))))

    async def payment_status_breakdown(self) -> List[Tuple[str, int]]:
        stmt = (
            select(StudentModel.payment_status, func.count(StudentModel.id))
            .group_by(StudentModel.payment_status)
            .order_by(StudentModel.payment_status)
        )
        result = await self.session.execute(stmt)
        return [(status, int(count)) for status, count in result.all()]

    async def income_by_month(self, year: int) -> Dict[str, Decimal]:
        stmt = (
            select(PaymentModel.payment_month, func.sum(PaymentModel.amount))
            .where(PaymentModel.payment_month.like(f"{year:04d}-%"))
            .group_by(PaymentModel.payment_month)
        )
        result = await self.session.execute(stmt)
        return {month: to_decimal_amount(total) for month, total in result.all()}

    async def expenses_by_month(self, year: int) -> Dict[str, Decimal]:
        stmt = (
            select(ExpenseModel.expense_month, func.sum(ExpenseModel.amount))
            .where(ExpenseModel.expense_month.like(f"{year:04d}-%"))
            .group_by(ExpenseModel.expense_month)
        )
        result = await self.session.execute(stmt)
        return {month: to_decimal_amount(total) for month, total in result.all()}

    async def top_groups(self, limit: int = 10) -> List[tuple]:
        """Rows of (GroupModel, student_count, paid_students), biggest and best-paying first."""
        student_count = student_count_column()
        paid_students = paid_students_column()
        payment_rate = case(
            (student_count > 0, cast(paid_students, Float) * 100.0 / student_count),
            else_=0.0,
        )
        stmt = (
            select(GroupModel, student_count.label("student_count"), paid_students.label("paid_students"))
            .outerjoin(StudentModel, StudentModel.group_id == GroupModel.id)
            .group_by(GroupModel.id)
            .order_by(student_count.desc(), payment_rate.desc(), GroupModel.id)
            .limit(limit)
        )
        result = await self.session.execute(stmt)
        return [(model, int(total or 0), int(paid or 0)) for model, total, paid in result.all()]
