# src/identity/api/routes/auth.py

from typing import Any, Dict, Optional

import structlog
from fastapi import APIRouter, Body, Depends

from src.dependencies import get_auth_service
from src.identity.api.schemas import LoginRequest, RegisterRequest
from src.identity.application.services import AuthService
from src.shared.http.responses import created, ok

logger = structlog.get_logger()

router = APIRouter(prefix="/auth", tags=["Auth"])


@router.post("/login")
async def login(
    payload: Optional[Dict[str, Any]] = Body(default=None),
    auth_service: AuthService = Depends(get_auth_service),
):
    """Authenticate an admin and issue a bearer token valid for several days."""
    req = LoginRequest.parse(payload)
    result = await auth_service.login(req.username, req.password)
    logger.info("Login successful", admin_id=result["user"]["id"])
    return ok(result, message="Login successful")


@router.post("/register", status_code=201)
async def register(
    payload: Optional[Dict[str, Any]] = Body(default=None),
    auth_service: AuthService = Depends(get_auth_service),
):
    req = RegisterRequest.parse(payload)
    admin = await auth_service.register(req.username, req.password, req.email)
    logger.info("Admin registered", admin_id=admin.id)
    return created(admin.to_public(), message="Admin registered successfully")
