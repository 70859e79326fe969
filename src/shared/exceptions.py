from typing import Any, Dict, List, Optional

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from src.shared.logging import get_logger

logger = get_logger(__name__)


# ───────────────────────── Base & Domain Exceptions ─────────────────────────
class DomainError(Exception):
    """Base class for domain-level errors. Services should raise these, never HTTPException."""
    code: str = "domain_error"
    status_code: int = status.HTTP_400_BAD_REQUEST
    message: str
    errors: Optional[List[Dict[str, str]]]

    def __init__(
        self,
        message: str = "",
        *,
        code: Optional[str] = None,
        status_code: Optional[int] = None,
        errors: Optional[List[Dict[str, str]]] = None,
    ) -> None:
        super().__init__(message or self.__class__.__name__)
        if code is not None:
            self.code = code
        if status_code is not None:
            self.status_code = status_code
        self.message = message or self.__class__.__name__
        self.errors = errors


class ValidationError(DomainError):
    code = "validation_error"
    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self, errors: List[Dict[str, str]], message: str = "Validation failed") -> None:
        super().__init__(message, errors=errors)


class AuthenticationError(DomainError):
    code, status_code = "unauthorized", status.HTTP_401_UNAUTHORIZED


class NotFoundError(DomainError):
    code = "not_found"
    status_code = status.HTTP_404_NOT_FOUND

    @classmethod
    def for_entity(cls, entity: str) -> "NotFoundError":
        return cls(f"{entity} not found")


# Duplicate username/email is reported as a plain 400.
class ConflictError(DomainError):
    code = "conflict"
    status_code = status.HTTP_400_BAD_REQUEST


class InternalServerError(DomainError):
    code = "internal_error"
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR


# ───────────────────────────── Helpers ──────────────────────────────────────

def envelope(
    *,
    success: bool,
    data: Any = None,
    message: Optional[str] = None,
    errors: Optional[List[Dict[str, str]]] = None,
    **extra: Any,
) -> Dict[str, Any]:
    body: Dict[str, Any] = {"success": success}
    if data is not None:
        body["data"] = data
    if message is not None:
        body["message"] = message
    if errors is not None:
        body["errors"] = errors
    body.update({k: v for k, v in extra.items() if v is not None})
    return body


def _json(status_code: int, payload: Dict[str, Any]) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=jsonable_encoder(payload))


def _field_from_loc(loc: Any) -> str:
    # ("body", "amount") -> "amount"; ("path", "group_id") -> "group_id"
    parts = [str(p) for p in loc if p not in ("body", "query", "path")]
    return ".".join(parts) or "body"


def request_errors(exc: RequestValidationError) -> List[Dict[str, str]]:
    return [{"field": _field_from_loc(err.get("loc", ())), "message": err.get("msg", "Invalid value")} for err in exc.errors()]


# ─────────────────────────── Registration ───────────────────────────

def register_exception_handlers(app: FastAPI, *, expose_errors: bool = False) -> None:
    @app.exception_handler(DomainError)
    async def handle_domain_error(req: Request, exc: DomainError):
        if exc.status_code >= 500:
            logger.error("Domain error", code=exc.code, message=exc.message, method=req.method, path=req.url.path)
            return _json(
                exc.status_code,
                envelope(success=False, message="Server error", error=exc.message if expose_errors else None),
            )
        logger.warning("Request rejected", code=exc.code, status_code=exc.status_code, message=exc.message)
        return _json(exc.status_code, envelope(success=False, message=exc.message, errors=exc.errors))

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation(req: Request, exc: RequestValidationError):
        errors = request_errors(exc)
        logger.warning("Request rejected", code="validation_error", status_code=400, errors=errors)
        return _json(status.HTTP_400_BAD_REQUEST, envelope(success=False, message="Validation failed", errors=errors))

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_exception(req: Request, exc: StarletteHTTPException):
        if exc.status_code == status.HTTP_404_NOT_FOUND:
            message = "Route not found"
        else:
            message = exc.detail if isinstance(exc.detail, str) else "Request failed"
        return _json(exc.status_code, envelope(success=False, message=message))

    @app.exception_handler(Exception)
    async def handle_unhandled(req: Request, exc: Exception):
        logger.error(
            "Unhandled exception",
            error=str(exc),
            type=exc.__class__.__name__,
            method=req.method,
            path=req.url.path,
            exc_info=exc,
        )
        return _json(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            envelope(success=False, message="Server error", error=str(exc) if expose_errors else None),
        )
