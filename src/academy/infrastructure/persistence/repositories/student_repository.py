"""
Student Repository Implementation

Reads join the student's group so list/detail rows carry ``group_name`` and
``monthly_fee``.
"""
from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from sqlalchemy import Select, select, update

from src.academy.domain.entities import PaymentStatus, Student
from src.academy.infrastructure.persistence.models.group_model import GroupModel
from src.academy.infrastructure.persistence.models.student_model import StudentModel
from src.shared.database.repository import SQLAlchemyRepository


class StudentRepository(SQLAlchemyRepository[Student, StudentModel]):
    model_class = StudentModel

    def _to_entity(self, model: StudentModel, group_name: Optional[str] = None, monthly_fee=None) -> Student:
        return Student(
            id=model.id,
            group_id=model.group_id,
            full_name=model.full_name,
            phone_number=model.phone_number,
            parent_phone=model.parent_phone,
            join_date=model.join_date,
            payment_status=PaymentStatus(model.payment_status),
            created_at=model.created_at,
            updated_at=model.updated_at,
            group_name=group_name,
            monthly_fee=monthly_fee,
        )

    def _joined(self) -> Select:
        return select(StudentModel, GroupModel.name, GroupModel.monthly_fee).outerjoin(
            GroupModel, StudentModel.group_id == GroupModel.id
        )

    async def _fetch(self, stmt: Select) -> List[Student]:
        result = await self.session.execute(stmt)
        return [self._to_entity(model, name, fee) for model, name, fee in result.all()]

    async def list(self, group_id: Optional[int] = None) -> List[Student]:
        stmt = self._joined()
        if group_id is not None:
            stmt = stmt.where(StudentModel.group_id == group_id)
        stmt = stmt.order_by(StudentModel.created_at.desc(), StudentModel.id.desc())
        return await self._fetch(stmt)

    async def list_unpaid(self) -> List[Student]:
        stmt = (
            self._joined()
            .where(StudentModel.payment_status == PaymentStatus.UNPAID.value)
            .order_by(StudentModel.join_date.desc(), StudentModel.id.desc())
        )
        return await self._fetch(stmt)

    async def list_by_group(self, group_id: int) -> List[Student]:
        stmt = (
            select(StudentModel)
            .where(StudentModel.group_id == group_id)
            .order_by(StudentModel.full_name, StudentModel.id)
        )
        result = await self.session.execute(stmt)
        return [self._to_entity(model) for model in result.scalars().all()]

    async def get_detail(self, student_id: int) -> Optional[Student]:
        students = await self._fetch(self._joined().where(StudentModel.id == student_id))
        return students[0] if students else None

    async def get_group_id(self, student_id: int) -> tuple[bool, Optional[int]]:
        """Return ``(exists, group_id)``; a student may exist without a group."""
        stmt = select(StudentModel.group_id).where(StudentModel.id == student_id)
        result = await self.session.execute(stmt)
        row = result.first()
        if row is None:
            return False, None
        return True, row[0]


    async def create(self, values: Dict[str, Any]) -> int:
        model = await self._add(StudentModel(**values))
        return model.id

    async def update(self, student_id: int, values: Dict[str, Any]) -> bool:
        return await self._update(student_id, values) is not None

    async def set_payment_status(self, student_id: int, status: PaymentStatus) -> None:
        stmt = (
            update(StudentModel)
            .where(StudentModel.id == student_id)
            .values(payment_status=status.value, updated_at=datetime.now(timezone.utc))
        )
        await self.session.execute(stmt)
