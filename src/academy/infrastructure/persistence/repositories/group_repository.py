"""
Group Repository Implementation
"""
from __future__ import annotations

from typing import Any, Dict, List, Optional

from sqlalchemy import case, func, select

from src.academy.domain.entities import Group, GroupSummary, PaymentStatus
from src.academy.infrastructure.persistence.models.group_model import GroupModel
from src.academy.infrastructure.persistence.models.student_model import StudentModel
from src.shared.database.repository import SQLAlchemyRepository


def student_count_column():
    return func.count(func.distinct(StudentModel.id))


def paid_students_column():
    return func.count(
        func.distinct(case((StudentModel.payment_status == PaymentStatus.PAID.value, StudentModel.id)))
    )


class GroupRepository(SQLAlchemyRepository[Group, GroupModel]):
    model_class = GroupModel

    def _to_entity(self, model: GroupModel) -> Group:
        return Group(
            id=model.id,
            name=model.name,
            teacher_name=model.teacher_name,
            monthly_fee=model.monthly_fee,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )

    async def list_with_counts(self) -> List[GroupSummary]:
        stmt = (
            select(
                GroupModel,
                student_count_column().label("student_count"),
                paid_students_column().label("paid_students"),
            )
            .outerjoin(StudentModel, StudentModel.group_id == GroupModel.id)
            .group_by(GroupModel.id)
            .order_by(GroupModel.created_at.desc(), GroupModel.id.desc())
        )
        result = await self.session.execute(stmt)
        return [
            GroupSummary(
                group=self._to_entity(model),
                student_count=int(student_count or 0),
                paid_students=int(paid_students or 0),
            )
            for model, student_count, paid_students in result.all()
        ]

    async def create(self, values: Dict[str, Any]) -> Group:
        model = await self._add(GroupModel(**values))
        return self._to_entity(model)

    async def update(self, group_id: int, values: Dict[str, Any]) -> Optional[Group]:
        model = await self._update(group_id, values)
        return self._to_entity(model) if model else None
