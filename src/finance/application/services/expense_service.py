from __future__ import annotations

from typing import List, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from src.finance.application.dto import ExpenseInput
from src.finance.domain.entities import Expense
from src.finance.infrastructure.persistence.repositories import ExpenseRepository
from src.shared.database.unit_of_work import SQLAlchemyUnitOfWork
from src.shared.exceptions import NotFoundError
from src.shared.logging import get_logger

logger = get_logger(__name__)


class ExpenseService:
    def __init__(self, session: AsyncSession) -> None:
        self.session = session
        self.expenses = ExpenseRepository(session)

    async def list(self, month: Optional[str] = None) -> List[Expense]:
        return await self.expenses.list(month)

    async def get(self, expense_id: int) -> Expense:
        expense = await self.expenses.get_by_id(expense_id)
        if expense is None:
            raise NotFoundError.for_entity("Expense")
        return expense

    async def create(self, data: ExpenseInput) -> Expense:
        async with SQLAlchemyUnitOfWork(self.session) as uow:
            expense = await self.expenses.create(data.as_values())
            await uow.commit()
        logger.info("Expense created", expense_id=expense.id, expense_month=expense.expense_month)
        return expense

    async def update(self, expense_id: int, data: ExpenseInput) -> Expense:
        async with SQLAlchemyUnitOfWork(self.session) as uow:
            expense = await self.expenses.update(expense_id, data.as_values())
            if expense is None:
                raise NotFoundError.for_entity("Expense")
            await uow.commit()
        logger.info("Expense updated", expense_id=expense_id, expense_month=expense.expense_month)
        return expense

    async def delete(self, expense_id: int) -> None:
        async with SQLAlchemyUnitOfWork(self.session) as uow:
            if not await self.expenses.delete(expense_id):
                raise NotFoundError.for_entity("Expense")
            await uow.commit()
        logger.info("Expense deleted", expense_id=expense_id)
