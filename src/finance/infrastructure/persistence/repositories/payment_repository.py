"""
Payment Repository Implementation
"""
from __future__ import annotations

from typing import Any, Dict, List, Optional

from sqlalchemy import Select, func, select

from src.academy.infrastructure.persistence.models import GroupModel, StudentModel
from src.finance.domain.entities import Payment, PaymentMethod
from src.finance.infrastructure.persistence.models.payment_model import PaymentModel
from src.shared.database.repository import SQLAlchemyRepository


class PaymentRepository(SQLAlchemyRepository[Payment, PaymentModel]):
    model_class = PaymentModel

    def _to_entity(
        self,
        model: PaymentModel,
        student_name: Optional[str] = None,
        group_name: Optional[str] = None,
    ) -> Payment:
        return Payment(
            id=model.id,
            student_id=model.student_id,
            group_id=model.group_id,
            amount=model.amount,
            payment_month=model.payment_month,
            payment_date=model.payment_date,
            payment_method=PaymentMethod(model.payment_method),
            notes=model.notes,
            created_at=model.created_at,
            student_name=student_name,
            group_name=group_name,
        )

    def _joined(self) -> Select:
        return (
            select(PaymentModel, StudentModel.full_name, GroupModel.name)
            .outerjoin(StudentModel, PaymentModel.student_id == StudentModel.id)
            .outerjoin(GroupModel, PaymentModel.group_id == GroupModel.id)
        )

    async def list(
        self,
        *,
        month: Optional[str] = None,
        student_id: Optional[int] = None,
        group_id: Optional[int] = None,
    ) -> List[Payment]:
        stmt = self._joined()
        if month is not None:
            stmt = stmt.where(PaymentModel.payment_month == month)
        if student_id is not None:
            stmt = stmt.where(PaymentModel.student_id == student_id)
        if group_id is not None:
            stmt = stmt.where(PaymentModel.group_id == group_id)
        stmt = stmt.order_by(
            PaymentModel.payment_date.desc(),
            PaymentModel.created_at.desc(),
            PaymentModel.id.desc(),
        )
        result = await self.session.execute(stmt)
        return [self._to_entity(model, s_name, g_name) for model, s_name, g_name in result.all()]

    async def get_detail(self, payment_id: int) -> Optional[Payment]:
        result = await self.session.execute(self._joined().where(PaymentModel.id == payment_id))
        row = result.first()
        return self._to_entity(*row) if row else None

    async def create(self, values: Dict[str, Any]) -> Payment:
        model = await self._add(PaymentModel(**values))
        return self._to_entity(model)

    async def get_student_id(self, payment_id: int) -> Optional[int]:
        stmt = select(PaymentModel.student_id).where(PaymentModel.id == payment_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def count_for_student_month(self, student_id: int, month: str) -> int:
        stmt = select(func.count(PaymentModel.id)).where(
            PaymentModel.student_id == student_id,
            PaymentModel.payment_month == month,
        )
        result = await self.session.execute(stmt)
        return int(result.scalar_one())
