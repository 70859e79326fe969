from .group_service import GroupService
from .student_service import StudentService

__all__ = ["GroupService", "StudentService"]
