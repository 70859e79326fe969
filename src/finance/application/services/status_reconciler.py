"""
Keeps ``Student.payment_status`` in step with the student's payments.

Rules, applied once per triggering event inside a single transaction:

* recording a payment marks the student ``paid``, whatever month the payment
  covers;
* deleting a payment marks the student ``unpaid`` only when no payment for
  the *current* calendar month (UTC, evaluated at deletion time) remains.

The two rules are not symmetric: a student whose only payments
cover past months becomes ``paid`` on insert and ``unpaid`` on the next
delete, even though payments remain.
"""
from __future__ import annotations

from typing import Optional

from sqlalchemy.ext.asyncio import AsyncSession

from src.academy.domain.entities import PaymentStatus
from src.academy.infrastructure.persistence.repositories import StudentRepository
from src.finance.application.dto import PaymentInput
from src.finance.domain.entities import Payment
from src.finance.infrastructure.persistence.repositories import PaymentRepository
from src.shared.database.unit_of_work import SQLAlchemyUnitOfWork
from src.shared.exceptions import NotFoundError
from src.shared.logging import get_logger
from src.shared.utils.dates import Today, current_month, utc_today

logger = get_logger(__name__)


class StatusReconciler:
    def __init__(self, session: AsyncSession, today: Optional[Today] = None) -> None:
        self.session = session
        self.payments = PaymentRepository(session)
        self.students = StudentRepository(session)
        self.today = today or utc_today

    async def record_payment(self, data: PaymentInput) -> Payment:
        async with SQLAlchemyUnitOfWork(self.session) as uow:
            exists, group_id = await self.students.get_group_id(data.student_id)
            if not exists:
                raise NotFoundError.for_entity("Student")

            payment = await self.payments.create(data.as_values(group_id))
            await self.students.set_payment_status(data.student_id, PaymentStatus.PAID)
            await uow.commit()

        logger.info(
            "Payment recorded",
            payment_id=payment.id,
            student_id=data.student_id,
            payment_month=data.payment_month,
            payment_status=PaymentStatus.PAID.value,
        )
        return payment

    async def remove_payment(self, payment_id: int) -> None:
        async with SQLAlchemyUnitOfWork(self.session) as uow:
            student_id = await self.payments.get_student_id(payment_id)
            if student_id is None:
                raise NotFoundError.for_entity("Payment")
            await self.payments.delete(payment_id)

            month = current_month(self.today)
            remaining = await self.payments.count_for_student_month(student_id, month)
            if remaining == 0:
                await self.students.set_payment_status(student_id, PaymentStatus.UNPAID)
            await uow.commit()

        logger.info(
            "Payment deleted",
            payment_id=payment_id,
            student_id=student_id,
            month=month,
            remaining_in_month=remaining,
        )
