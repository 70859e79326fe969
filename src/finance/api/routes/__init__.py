from .expenses import router as expenses_router
from .payments import router as payments_router

__all__ = ["expenses_router", "payments_router"]
