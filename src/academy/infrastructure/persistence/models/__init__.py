from .group_model import GroupModel
from .student_model import StudentModel

__all__ = ["GroupModel", "StudentModel"]
