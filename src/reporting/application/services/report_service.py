"""
Dashboard reports: monthly totals, a 12-month income/expense series,
unpaid students and the best-performing groups.

Money is summed as Decimal and converted to float only when rendered.
"""
from __future__ import annotations

from decimal import Decimal
from typing import Any, Dict, List, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from src.academy.domain.entities import Student
from src.academy.infrastructure.persistence.repositories import StudentRepository
from src.reporting.infrastructure.dashboard_repository import DashboardRepository
from src.shared.utils.dates import Today, current_month, months_of_year, utc_today
from src.shared.utils.money import to_number

TOP_GROUPS_LIMIT = 10


def payment_rate(paid: int, total: int) -> float:
    """Percentage of paid students, two decimals; an empty group scores 0."""
    if total <= 0:
        return 0.0
    return round(paid * 100.0 / total, 2)


class ReportService:
    def __init__(self, session: AsyncSession, today: Optional[Today] = None) -> None:
        self.dashboard = DashboardRepository(session)
        self.students = StudentRepository(session)
        self.today = today or utc_today

    async def stats(self, month: Optional[str] = None) -> Dict[str, Any]:
        month = month or current_month(self.today)
        income = await self.dashboard.income_for_month(month)
        expenses = await self.dashboard.expenses_for_month(month)
        return {
            "month": month,
            "total_income": to_number(income),
            "total_expenses": to_number(expenses),
            "net_profit": to_number(income - expenses),
            "total_groups": await self.dashboard.count_groups(),
            "total_students": await self.dashboard.count_students(),
            "payment_status": [
                {"payment_status": status, "count": count}
                for status, count in await self.dashboard.payment_status_breakdown()
            ],
        }

    async def monthly_chart(self, year: Optional[int] = None) -> List[Dict[str, Any]]:
        if year is None:
            year = self.today().year
        income = await self.dashboard.income_by_month(year)
        expenses = await self.dashboard.expenses_by_month(year)
        chart = []
        for month in months_of_year(year):
            month_income = income.get(month, Decimal("0"))
            month_expenses = expenses.get(month, Decimal("0"))
            chart.append({
                "month": month,
                "income": to_number(month_income),
                "expenses": to_number(month_expenses),
                "profit": to_number(month_income - month_expenses),
            })
        return chart

    async def unpaid_students(self) -> List[Student]:
        return await self.students.list_unpaid()

    async def top_groups(self, limit: int = TOP_GROUPS_LIMIT) -> List[Dict[str, Any]]:
        rows = await self.dashboard.top_groups(limit)
        return [
            {
                "id": group.id,
                "name": group.name,
                "teacher_name": group.teacher_name,
                "monthly_fee": to_number(group.monthly_fee),
                "student_count": total,
                "paid_students": paid,
                "payment_rate": payment_rate(paid, total),
            }
            for group, total, paid in rows
        ]
