from .expense_service import ExpenseService
from .payment_service import PaymentService
from .status_reconciler import StatusReconciler

__all__ = ["ExpenseService", "PaymentService", "StatusReconciler"]
