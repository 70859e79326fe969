from .group_repository import GroupRepository
from .student_repository import StudentRepository

__all__ = ["GroupRepository", "StudentRepository"]
