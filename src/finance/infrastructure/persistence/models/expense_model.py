"""
Expense ORM Model
Maps to expenses table
"""
from datetime import date
from decimal import Decimal

from sqlalchemy import CheckConstraint, Date, Numeric, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from src.shared.database.base_model import Base, CreatedAtMixin


class ExpenseModel(CreatedAtMixin, Base):
    __tablename__ = "expenses"
    __table_args__ = (
        CheckConstraint("amount >= 0", name="ck_expenses_amount_non_negative"),
    )

    title: Mapped[str] = mapped_column(String(200), nullable=False)
    amount: Mapped[Decimal] = mapped_column(Numeric(10, 2), nullable=False)
    category: Mapped[str | None] = mapped_column(String(100), nullable=True)
    expense_date: Mapped[date] = mapped_column(Date, nullable=False)
    # YYYY-MM of expense_date, kept in sync by the service on every write
    expense_month: Mapped[str] = mapped_column(String(7), nullable=False, index=True)
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)
