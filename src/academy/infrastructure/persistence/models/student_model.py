"""
Student ORM Model
Maps to students table
"""
from datetime import date

from sqlalchemy import CheckConstraint, Date, ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from src.shared.database.base_model import Base, TimestampMixin


class StudentModel(TimestampMixin, Base):
    __tablename__ = "students"
    __table_args__ = (
        CheckConstraint("payment_status IN ('paid', 'unpaid')", name="ck_students_payment_status"),
    )

    # Deleting a group leaves its students without one
    group_id: Mapped[int | None] = mapped_column(
        Integer,
        ForeignKey("groups.id", ondelete="SET NULL"),
        nullable=True,
        index=True,
    )
    full_name: Mapped[str] = mapped_column(String(100), nullable=False)
    phone_number: Mapped[str | None] = mapped_column(String(20), nullable=True)
    parent_phone: Mapped[str | None] = mapped_column(String(20), nullable=True)
    join_date: Mapped[date] = mapped_column(Date, nullable=False)
    payment_status: Mapped[str] = mapped_column(String(10), nullable=False, default="unpaid", index=True)
