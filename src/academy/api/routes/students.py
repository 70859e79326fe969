from typing import Any, Dict, Optional

from fastapi import APIRouter, Body, Depends

from src.academy.api.schemas import parse_student_create, parse_student_update
from src.academy.application.services import StudentService
from src.dependencies import get_student_service
from src.shared.http.params import EntityId, IdFilter
from src.shared.http.responses import created, ok

router = APIRouter(prefix="/students", tags=["Students"])


@router.get("")
async def list_students(
    group_id: IdFilter = None,
    service: StudentService = Depends(get_student_service),
):
    students = await service.list(group_id)
    return ok([s.to_dict() for s in students])


@router.get("/{student_id}")
async def get_student(student_id: EntityId, service: StudentService = Depends(get_student_service)):
    student = await service.get(student_id)
    return ok(student.to_dict())


@router.post("", status_code=201)
async def create_student(
    payload: Optional[Dict[str, Any]] = Body(default=None),
    service: StudentService = Depends(get_student_service),
):
    student = await service.create(parse_student_create(payload))
    return created(student.to_dict(), message="Student created successfully")


@router.put("/{student_id}")
async def update_student(
    student_id: EntityId,
    payload: Optional[Dict[str, Any]] = Body(default=None),
    service: StudentService = Depends(get_student_service),
):
    """Full replacement: omitted optional fields are cleared, omitted status becomes unpaid."""
    student = await service.update(student_id, parse_student_update(payload))
    return ok(student.to_dict(), message="Student updated successfully")


@router.delete("/{student_id}")
async def delete_student(student_id: EntityId, service: StudentService = Depends(get_student_service)):
    await service.delete(student_id)
    return ok(message="Student deleted successfully")
