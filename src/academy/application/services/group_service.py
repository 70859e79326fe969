from __future__ import annotations

from typing import List

from sqlalchemy.ext.asyncio import AsyncSession

from src.academy.application.dto import GroupInput
from src.academy.domain.entities import Group, GroupDetail, GroupSummary
from src.academy.infrastructure.persistence.repositories import GroupRepository, StudentRepository
from src.shared.database.unit_of_work import SQLAlchemyUnitOfWork
from src.shared.exceptions import NotFoundError
from src.shared.logging import get_logger

logger = get_logger(__name__)


class GroupService:
    def __init__(self, session: AsyncSession) -> None:
        self.session = session
        self.groups = GroupRepository(session)
        self.students = StudentRepository(session)

    async def list(self) -> List[GroupSummary]:
        return await self.groups.list_with_counts()

    async def get(self, group_id: int) -> GroupDetail:
        group = await self.groups.get_by_id(group_id)
        if group is None:
            raise NotFoundError.for_entity("Group")
        students = await self.students.list_by_group(group_id)
        return GroupDetail(group=group, students=students)

    async def create(self, data: GroupInput) -> Group:
        async with SQLAlchemyUnitOfWork(self.session) as uow:
            group = await self.groups.create(data.as_values())
            await uow.commit()
        logger.info("Group created", group_id=group.id)
        return group

    async def update(self, group_id: int, data: GroupInput) -> Group:
        async with SQLAlchemyUnitOfWork(self.session) as uow:
            group = await self.groups.update(group_id, data.as_values())
            if group is None:
                raise NotFoundError.for_entity("Group")
            await uow.commit()
        logger.info("Group updated", group_id=group_id)
        return group

    async def delete(self, group_id: int) -> None:
        # Students of the group are detached by the ON DELETE SET NULL constraint
        async with SQLAlchemyUnitOfWork(self.session) as uow:
            if not await self.groups.delete(group_id):
                raise NotFoundError.for_entity("Group")
            await uow.commit()
        logger.info("Group deleted", group_id=group_id)
