"""
Import every ORM model so ``Base.metadata`` knows all tables
(used by ``Database.create_all`` and Alembic autogenerate).
"""
from src.academy.infrastructure.persistence.models import GroupModel, StudentModel
from src.finance.infrastructure.persistence.models import ExpenseModel, PaymentModel
from src.identity.infrastructure.persistence.models import AdminModel
from src.shared.database.base_model import Base

__all__ = ["Base", "AdminModel", "GroupModel", "StudentModel", "PaymentModel", "ExpenseModel"]
