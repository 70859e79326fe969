from .expense_schemas import EXPENSE_SCHEMA, parse_expense
from .payment_schemas import PAYMENT_SCHEMA, parse_payment

__all__ = ["EXPENSE_SCHEMA", "parse_expense", "PAYMENT_SCHEMA", "parse_payment"]
