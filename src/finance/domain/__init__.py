from .entities import Expense, Payment, PaymentMethod

__all__ = ["Expense", "Payment", "PaymentMethod"]
