"""
Admin Repository Implementation
"""
from __future__ import annotations

from typing import Optional

from sqlalchemy import or_, select
from sqlalchemy.exc import IntegrityError

from src.identity.domain.entities import Admin
from src.identity.infrastructure.persistence.models.admin_model import AdminModel
from src.shared.database.repository import SQLAlchemyRepository
from src.shared.exceptions import ConflictError

DUPLICATE_ADMIN = "Username or email already exists"


class AdminRepository(SQLAlchemyRepository[Admin, AdminModel]):
    model_class = AdminModel

    def _to_entity(self, model: AdminModel) -> Admin:
        return Admin(
            id=model.id,
            username=model.username,
            email=model.email,
            password_hash=model.password_hash,
            created_at=model.created_at,
        )

    async def get_by_username(self, username: str) -> Optional[Admin]:
        stmt = select(AdminModel).where(AdminModel.username == username)
        result = await self.session.execute(stmt)
        model = result.scalar_one_or_none()
        return self._to_entity(model) if model else None

    async def username_or_email_taken(self, username: str, email: str) -> bool:
        stmt = (
            select(AdminModel.id)
            .where(or_(AdminModel.username == username, AdminModel.email == email))
            .limit(1)
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none() is not None

    async def create(self, *, username: str, email: str, password_hash: str) -> Admin:
        """
        Insert a new admin.

        Raises:
            ConflictError: username or email collides with an existing row
                (including a concurrent insert that wins the race)
        """
        model = AdminModel(username=username, email=email, password_hash=password_hash)
        try:
            model = await self._add(model)
        except IntegrityError as e:
            raise ConflictError(DUPLICATE_ADMIN) from e
        return self._to_entity(model)
