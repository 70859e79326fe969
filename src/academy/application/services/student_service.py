from __future__ import annotations

from typing import List, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from src.academy.application.dto import StudentInput
from src.academy.domain.entities import Student
from src.academy.infrastructure.persistence.repositories import GroupRepository, StudentRepository
from src.shared.database.unit_of_work import SQLAlchemyUnitOfWork
from src.shared.exceptions import NotFoundError
from src.shared.logging import get_logger

logger = get_logger(__name__)


class StudentService:
    def __init__(self, session: AsyncSession) -> None:
        self.session = session
        self.students = StudentRepository(session)
        self.groups = GroupRepository(session)

    async def list(self, group_id: Optional[int] = None) -> List[Student]:
        return await self.students.list(group_id)

    async def get(self, student_id: int) -> Student:
        student = await self.students.get_detail(student_id)
        if student is None:
            raise NotFoundError.for_entity("Student")
        return student

    async def _ensure_group(self, group_id: Optional[int]) -> None:
        if group_id is not None and not await self.groups.exists(group_id):
            raise NotFoundError.for_entity("Group")

    async def create(self, data: StudentInput) -> Student:
        async with SQLAlchemyUnitOfWork(self.session) as uow:
            await self._ensure_group(data.group_id)
            student_id = await self.students.create(data.as_values())
            await uow.commit()
        logger.info("Student created", student_id=student_id, group_id=data.group_id)
        return await self.get(student_id)

    async def update(self, student_id: int, data: StudentInput) -> Student:
        async with SQLAlchemyUnitOfWork(self.session) as uow:
            if not await self.students.exists(student_id):
                raise NotFoundError.for_entity("Student")
            await self._ensure_group(data.group_id)
            await self.students.update(student_id, data.as_values())
            await uow.commit()
        logger.info("Student updated", student_id=student_id)
        return await self.get(student_id)

    async def delete(self, student_id: int) -> None:
        # Payments of the student go with it (ON DELETE CASCADE)
        async with SQLAlchemyUnitOfWork(self.session) as uow:
            if not await self.students.delete(student_id):
                raise NotFoundError.for_entity("Student")
            await uow.commit()
        logger.info("Student deleted", student_id=student_id)
