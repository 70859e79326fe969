"""
Authentication service: credential verification, admin registration, login.
"""
from __future__ import annotations

from typing import Any, Dict

from sqlalchemy.ext.asyncio import AsyncSession

from src.identity.domain.entities import Admin
from src.identity.infrastructure.persistence.repositories.admin_repository import (
    DUPLICATE_ADMIN,
    AdminRepository,
)
from src.shared.database.unit_of_work import SQLAlchemyUnitOfWork
from src.shared.exceptions import AuthenticationError, ConflictError
from src.shared.logging import get_logger, log_security_event
from src.shared.security.passwords import PasswordHasher
from src.shared.security.tokens import TokenService

logger = get_logger(__name__)

INVALID_CREDENTIALS = "Invalid credentials"


class AuthService:
    def __init__(self, session: AsyncSession, hasher: PasswordHasher, tokens: TokenService) -> None:
        self.session = session
        self.admins = AdminRepository(session)
        self.hasher = hasher
        self.tokens = tokens

    async def verify(self, username: str, password: str) -> Admin:
        """
        Check credentials. An unknown username and a wrong password fail with
        the same error so callers cannot probe which usernames exist.
        """
        admin = await self.admins.get_by_username(username)
        if admin is None or not self.hasher.verify(password, admin.password_hash):
            log_security_event("login_failed", username=username)
            raise AuthenticationError(INVALID_CREDENTIALS)
        return admin

    async def login(self, username: str, password: str) -> Dict[str, Any]:
        admin = await self.verify(username, password)
        token = self.tokens.issue(admin.id, admin.username)
        log_security_event("login_succeeded", admin_id=admin.id, username=admin.username)
        return {"token": token, "user": admin.to_public()}

    async def register(self, username: str, password: str, email: str) -> Admin:
        async with SQLAlchemyUnitOfWork(self.session) as uow:
            if await self.admins.username_or_email_taken(username, email):
                raise ConflictError(DUPLICATE_ADMIN)
            admin = await self.admins.create(
                username=username,
                email=email,
                password_hash=self.hasher.hash(password),
            )
            await uow.commit()

        log_security_event("admin_registered", admin_id=admin.id, username=admin.username)
        return admin
