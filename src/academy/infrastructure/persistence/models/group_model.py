"""
Group ORM Model
Maps to groups table
"""
from decimal import Decimal

from sqlalchemy import CheckConstraint, Numeric, String
from sqlalchemy.orm import Mapped, mapped_column

from src.shared.database.base_model import Base, TimestampMixin


class GroupModel(TimestampMixin, Base):
    __tablename__ = "groups"
    __table_args__ = (
        CheckConstraint("monthly_fee >= 0", name="ck_groups_monthly_fee_non_negative"),
    )

    name: Mapped[str] = mapped_column(String(100), nullable=False)
    teacher_name: Mapped[str | None] = mapped_column(String(100), nullable=True)
    monthly_fee: Mapped[Decimal] = mapped_column(Numeric(10, 2), nullable=False)
