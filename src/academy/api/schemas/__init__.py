from .group_schemas import GROUP_SCHEMA, parse_group
from .student_schemas import (
    STUDENT_CREATE_SCHEMA,
    STUDENT_UPDATE_SCHEMA,
    parse_student_create,
    parse_student_update,
)

__all__ = [
    "GROUP_SCHEMA",
    "parse_group",
    "STUDENT_CREATE_SCHEMA",
    "STUDENT_UPDATE_SCHEMA",
    "parse_student_create",
    "parse_student_update",
]
