"""
Database engine & session factory.

One ``Database`` is built per process (in the FastAPI lifespan) from
``Settings`` and handed to whoever needs it; there is no module-level engine.
"""
from __future__ import annotations

from contextlib import asynccontextmanager
from typing import Any, AsyncGenerator, Dict

import sqlalchemy as sa
from sqlalchemy import event
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import NullPool

from src.config import Settings
from src.shared.database.base_model import Base
from src.shared.logging import get_logger

logger = get_logger(__name__)


def _engine_options(settings: Settings, url: str) -> Dict[str, Any]:
    options: Dict[str, Any] = {"echo": False, "pool_pre_ping": True}

    if settings.TESTING or url.startswith("sqlite"):
        options["poolclass"] = NullPool
    else:
        options.update(
            pool_size=settings.DATABASE_POOL_SIZE,
            max_overflow=settings.DATABASE_MAX_OVERFLOW,
            pool_timeout=30,
            pool_recycle=3600,
        )

    if url.startswith("postgresql+asyncpg"):
        options["connect_args"] = {
            "server_settings": {
                "application_name": f"tutoring-admin-{settings.ENVIRONMENT}",
                "statement_timeout": str(settings.DATABASE_STATEMENT_TIMEOUT_MS),
            }
        }
    return options


def _enable_sqlite_foreign_keys(dbapi_connection, _connection_record) -> None:
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


class Database:
    """
    Owns the async engine and session maker.

    Attributes:
        engine: Async SQLAlchemy engine (connection pool)
        session_factory: Factory producing request-scoped sessions
    """

    def __init__(self, settings: Settings) -> None:
        url = settings.effective_database_url
        self.engine: AsyncEngine = create_async_engine(url, **_engine_options(settings, url))
        if url.startswith("sqlite"):
            event.listen(self.engine.sync_engine, "connect", _enable_sqlite_foreign_keys)

        self.session_factory: async_sessionmaker[AsyncSession] = async_sessionmaker(
            bind=self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
            autoflush=False,
        )
        logger.info("Database engine created", dialect=self.engine.dialect.name)

    @asynccontextmanager
    async def session(self) -> AsyncGenerator[AsyncSession, None]:
        async with self.session_factory() as session:
            try:
                yield session
            except Exception:
                await session.rollback()
                raise

    async def ping(self) -> None:
        async with self.engine.connect() as conn:
            await conn.execute(sa.text("SELECT 1"))

    async def create_all(self) -> None:
        # Import for side effects: registers every model on Base.metadata.
        import src.models  # noqa: F401

        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        logger.info("Database schema ensured")

    async def dispose(self) -> None:
        await self.engine.dispose()
        logger.info("Database engine disposed")
