from .groups import router as groups_router
from .students import router as students_router

__all__ = ["groups_router", "students_router"]
