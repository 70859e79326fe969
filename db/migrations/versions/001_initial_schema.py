"""
Alembic Migration: Initial schema
Revision ID: 001_initial_schema
Creates: admins, groups, students, payments, expenses
"""
from alembic import op
import sqlalchemy as sa

# Revision identifiers
revision = "001_initial_schema"
down_revision = None
branch_labels = None
depends_on = None


def _created_at() -> sa.Column:
    return sa.Column("created_at", sa.TIMESTAMP(timezone=True), nullable=False, server_default=sa.func.now())


def _updated_at() -> sa.Column:
    return sa.Column("updated_at", sa.TIMESTAMP(timezone=True), nullable=False, server_default=sa.func.now())


def upgrade() -> None:
    # 1. Admins
    op.create_table(
        "admins",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("username", sa.String(50), nullable=False),
        sa.Column("password_hash", sa.String(255), nullable=False),
        sa.Column("email", sa.String(100), nullable=False),
        _created_at(),
        sa.UniqueConstraint("username", name="uq_admins_username"),
        sa.UniqueConstraint("email", name="uq_admins_email"),
    )
    op.create_index("ix_admins_username", "admins", ["username"])

    # 2. Groups
    op.create_table(
        "groups",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("name", sa.String(100), nullable=False),
        sa.Column("teacher_name", sa.String(100), nullable=True),
        sa.Column("monthly_fee", sa.Numeric(10, 2), nullable=False),
        _created_at(),
        _updated_at(),
        sa.CheckConstraint("monthly_fee >= 0", name="ck_groups_monthly_fee_non_negative"),
    )

    # 3. Students (group removal detaches students)
    op.create_table(
        "students",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("group_id", sa.Integer, sa.ForeignKey("groups.id", ondelete="SET NULL"), nullable=True),
        sa.Column("full_name", sa.String(100), nullable=False),
        sa.Column("phone_number", sa.String(20), nullable=True),
        sa.Column("parent_phone", sa.String(20), nullable=True),
        sa.Column("join_date", sa.Date, nullable=False),
        sa.Column("payment_status", sa.String(10), nullable=False, server_default="unpaid"),
        _created_at(),
        _updated_at(),
        sa.CheckConstraint("payment_status IN ('paid', 'unpaid')", name="ck_students_payment_status"),
    )
    op.create_index("ix_students_group_id", "students", ["group_id"])
    op.create_index("ix_students_payment_status", "students", ["payment_status"])

    # 4. Payments (student removal takes its payments along)
    op.create_table(
        "payments",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("student_id", sa.Integer, sa.ForeignKey("students.id", ondelete="CASCADE"), nullable=False),
        sa.Column("group_id", sa.Integer, sa.ForeignKey("groups.id", ondelete="SET NULL"), nullable=True),
        sa.Column("amount", sa.Numeric(10, 2), nullable=False),
        sa.Column("payment_month", sa.String(7), nullable=False),
        sa.Column("payment_date", sa.Date, nullable=False),
        sa.Column("payment_method", sa.String(20), nullable=False),
        sa.Column("notes", sa.Text, nullable=True),
        _created_at(),
        sa.CheckConstraint("amount >= 0", name="ck_payments_amount_non_negative"),
        sa.CheckConstraint("payment_method IN ('cash', 'card', 'transfer')", name="ck_payments_method"),
    )
    op.create_index("ix_payments_group_id", "payments", ["group_id"])
    op.create_index("ix_payments_payment_month", "payments", ["payment_month"])
    op.create_index("ix_payments_student_month", "payments", ["student_id", "payment_month"])

    # 5. Expenses
    op.create_table(
        "expenses",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("title", sa.String(200), nullable=False),
        sa.Column("amount", sa.Numeric(10, 2), nullable=False),
        sa.Column("category", sa.String(100), nullable=True),
        sa.Column("expense_date", sa.Date, nullable=False),
        sa.Column("expense_month", sa.String(7), nullable=False),
        sa.Column("notes", sa.Text, nullable=True),
        _created_at(),
        sa.CheckConstraint("amount >= 0", name="ck_expenses_amount_non_negative"),
    )
    op.create_index("ix_expenses_expense_month", "expenses", ["expense_month"])


def downgrade() -> None:
    op.drop_table("expenses")
    op.drop_table("payments")
    op.drop_table("students")
    op.drop_table("groups")
    op.drop_table("admins")
