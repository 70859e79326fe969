"""
Expense Repository Implementation
"""
from __future__ import annotations

from typing import Any, Dict, List, Optional

from sqlalchemy import select

from src.finance.domain.entities import Expense
from src.finance.infrastructure.persistence.models.expense_model import ExpenseModel
from src.shared.database.repository import SQLAlchemyRepository


class ExpenseRepository(SQLAlchemyRepository[Expense, ExpenseModel]):
    model_class = ExpenseModel

    def _to_entity(self, model: ExpenseModel) -> Expense:
        return Expense(
            id=model.id,
            title=model.title,
            amount=model.amount,
            category=model.category,
            expense_date=model.expense_date,
            expense_month=model.expense_month,
            notes=model.notes,
            created_at=model.created_at,
        )

    async def list(self, month: Optional[str] = None) -> List[Expense]:
        stmt = select(ExpenseModel)
        if month is not None:
            stmt = stmt.where(ExpenseModel.expense_month == month)
        stmt = stmt.order_by(
            ExpenseModel.expense_date.desc(),
            ExpenseModel.created_at.desc(),
            ExpenseModel.id.desc(),
        )
        result = await self.session.execute(stmt)
        return [self._to_entity(m) for m in result.scalars().all()]

    async def create(self, values: Dict[str, Any]) -> Expense:
        model = await self._add(ExpenseModel(**values))
        return self._to_entity(model)

    async def update(self, expense_id: int, values: Dict[str, Any]) -> Optional[Expense]:
        model = await self._update(expense_id, values)
        return self._to_entity(model) if model else None
