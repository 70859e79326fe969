# src/dependencies.py
from __future__ import annotations

from typing import AsyncGenerator, Optional

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from src.academy.application.services import GroupService, StudentService
from src.finance.application.services import ExpenseService, PaymentService
from src.identity.application.services import AuthService
from src.reporting.application.services import ReportService
from src.shared.exceptions import AuthenticationError
from src.shared.logging import bind_request_context
from src.shared.security.passwords import PasswordHasher
from src.shared.security.tokens import AdminIdentity, TokenService
from src.shared.utils.dates import Today, utc_today


# --- Process-wide state built in the app lifespan ---
def get_token_service(request: Request) -> TokenService:
    return request.app.state.token_service


def get_password_hasher(request: Request) -> PasswordHasher:
    return request.app.state.password_hasher


def get_today() -> Today:
    """Clock used for "current month" decisions; overridden in tests."""
    return utc_today


# --- DB session ---
async def get_db_session(request: Request) -> AsyncGenerator[AsyncSession, None]:
    """One AsyncSession per request, closed (and rolled back if still open) on exit."""
    async with request.app.state.db.session() as session:
        yield session


# --- Auth ---
def extract_bearer_token(request: Request) -> Optional[str]:
    auth = request.headers.get("Authorization", "")
    if not auth.lower().startswith("bearer "):
        return None
    token = auth.split(" ", 1)[1].strip()
    return token or None


async def require_admin(
    request: Request,
    tokens: TokenService = Depends(get_token_service),
) -> AdminIdentity:
    token = extract_bearer_token(request)
    if token is None:
        raise AuthenticationError("Access token required")
    identity = tokens.verify(token)
    request.state.admin = identity
    bind_request_context(admin_id=identity.admin_id)
    return identity


# --- Application services ---
def get_auth_service(
    session: AsyncSession = Depends(get_db_session),
    hasher: PasswordHasher = Depends(get_password_hasher),
    tokens: TokenService = Depends(get_token_service),
) -> AuthService:
    return AuthService(session, hasher, tokens)


def get_group_service(session: AsyncSession = Depends(get_db_session)) -> GroupService:
    return GroupService(session)


def get_student_service(session: AsyncSession = Depends(get_db_session)) -> StudentService:
    return StudentService(session)


def get_payment_service(
    session: AsyncSession = Depends(get_db_session),
    today: Today = Depends(get_today),
) -> PaymentService:
    return PaymentService(session, today=today)


def get_expense_service(session: AsyncSession = Depends(get_db_session)) -> ExpenseService:
    return ExpenseService(session)


def get_report_service(
    session: AsyncSession = Depends(get_db_session),
    today: Today = Depends(get_today),
) -> ReportService:
    return ReportService(session, today=today)
