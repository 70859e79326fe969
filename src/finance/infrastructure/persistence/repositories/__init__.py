from .expense_repository import ExpenseRepository
from .payment_repository import PaymentRepository

__all__ = ["ExpenseRepository", "PaymentRepository"]
