from __future__ import annotations

from typing import List, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from src.finance.application.dto import PaymentInput
from src.finance.application.services.status_reconciler import StatusReconciler
from src.finance.domain.entities import Payment
from src.finance.infrastructure.persistence.repositories import PaymentRepository
from src.shared.exceptions import InternalServerError
from src.shared.utils.dates import Today


class PaymentService:
    """Payments are immutable: listed, recorded and deleted, never edited."""

    def __init__(self, session: AsyncSession, today: Optional[Today] = None) -> None:
        self.payments = PaymentRepository(session)
        self.reconciler = StatusReconciler(session, today=today)

    async def list(
        self,
        *,
        month: Optional[str] = None,
        student_id: Optional[int] = None,
        group_id: Optional[int] = None,
    ) -> List[Payment]:
        return await self.payments.list(month=month, student_id=student_id, group_id=group_id)

    async def create(self, data: PaymentInput) -> Payment:
        payment = await self.reconciler.record_payment(data)
        detail = await self.payments.get_detail(payment.id)
        if detail is None:
            raise InternalServerError(f"Payment {payment.id} missing after commit")
        return detail

    async def delete(self, payment_id: int) -> None:
        await self.reconciler.remove_payment(payment_id)
