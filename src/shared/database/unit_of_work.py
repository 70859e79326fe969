"""
SQLAlchemy Unit of Work
Groups several repository writes into one transaction
"""
from __future__ import annotations

from typing import Any

from sqlalchemy.ext.asyncio import AsyncSession

from src.shared.logging import get_logger

logger = get_logger(__name__)


class SQLAlchemyUnitOfWork:
    """
    Ensures all operations within the context are atomic (all succeed or all fail).

    Usage:
        async with SQLAlchemyUnitOfWork(session) as uow:
            await payments.add(payment)
            await students.set_payment_status(student_id, PaymentStatus.PAID)
            await uow.commit()

    Leaving the block without ``commit()`` (or with an exception) rolls back.
    """

    def __init__(self, session: AsyncSession) -> None:
        self.session = session
        self._committed = False

    async def __aenter__(self) -> SQLAlchemyUnitOfWork:
        if not self.session.in_transaction():
            await self.session.begin()
        self._committed = False
        logger.debug("UnitOfWork transaction started")
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        if exc_type is not None:
            await self.rollback()
            logger.warning("UnitOfWork rolled back due to exception", exception=str(exc_val))
        elif not self._committed:
            await self.rollback()
            logger.warning("UnitOfWork rolled back (not committed)")

    async def commit(self) -> None:
        try:
            await self.session.commit()
            self._committed = True
            logger.debug("UnitOfWork transaction committed")
        except Exception as e:
            await self.rollback()
            logger.error("UnitOfWork commit failed", error=str(e))
            raise

    async def rollback(self) -> None:
        await self.session.rollback()
        self._committed = False
        logger.debug("UnitOfWork transaction rolled back")
