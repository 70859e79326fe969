from .base_model import Base, CreatedAtMixin, TimestampMixin
from .engine import Database
from .repository import SQLAlchemyRepository
from .unit_of_work import SQLAlchemyUnitOfWork

__all__ = [
    "Base",
    "CreatedAtMixin",
    "TimestampMixin",
    "Database",
    "SQLAlchemyRepository",
    "SQLAlchemyUnitOfWork",
]
