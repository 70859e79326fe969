"""
Admin ORM Model
Maps to admins table
"""
from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from src.shared.database.base_model import Base, CreatedAtMixin


class AdminModel(CreatedAtMixin, Base):
    __tablename__ = "admins"

    username: Mapped[str] = mapped_column(String(50), unique=True, nullable=False, index=True)
    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)
    email: Mapped[str] = mapped_column(String(100), unique=True, nullable=False)
