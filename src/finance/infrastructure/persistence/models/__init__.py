from .expense_model import ExpenseModel
from .payment_model import PaymentModel

__all__ = ["ExpenseModel", "PaymentModel"]
