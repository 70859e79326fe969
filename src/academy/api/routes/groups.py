from typing import Any, Dict, Optional

from fastapi import APIRouter, Body, Depends

from src.academy.api.schemas import parse_group
from src.academy.application.services import GroupService
from src.dependencies import get_group_service
from src.shared.http.params import EntityId
from src.shared.http.responses import created, ok

router = APIRouter(prefix="/groups", tags=["Groups"])


@router.get("")
async def list_groups(service: GroupService = Depends(get_group_service)):
    """All groups, newest first, each with its student and paid-student counts."""
    groups = await service.list()
    return ok([g.to_dict() for g in groups])


@router.get("/{group_id}")
async def get_group(group_id: EntityId, service: GroupService = Depends(get_group_service)):
    """A group with its roster ordered by name."""
    detail = await service.get(group_id)
    return ok(detail.to_dict())


@router.post("", status_code=201)
async def create_group(
    payload: Optional[Dict[str, Any]] = Body(default=None),
    service: GroupService = Depends(get_group_service),
):
    group = await service.create(parse_group(payload))
    return created(group.to_dict(), message="Group created successfully")


@router.put("/{group_id}")
async def update_group(
    group_id: EntityId,
    payload: Optional[Dict[str, Any]] = Body(default=None),
    service: GroupService = Depends(get_group_service),
):
    group = await service.update(group_id, parse_group(payload))
    return ok(group.to_dict(), message="Group updated successfully")


@router.delete("/{group_id}")
async def delete_group(group_id: EntityId, service: GroupService = Depends(get_group_service)):
    await service.delete(group_id)
    return ok(message="Group deleted successfully")
