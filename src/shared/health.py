from datetime import datetime, timezone
from time import perf_counter

from fastapi import APIRouter, Request, status
from fastapi.responses import JSONResponse

from src.shared.logging import get_logger

logger = get_logger(__name__)

router = APIRouter(prefix="/health", tags=["Health"])


@router.get("")
async def health():
    return {
        "success": True,
        "message": "Server is running",
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }


@router.get("/db", status_code=status.HTTP_200_OK)
async def health_db(request: Request):
    db = request.app.state.db
    t0 = perf_counter()
    try:
        await db.ping()
    except Exception as e:
        logger.error("Database health check failed", error=type(e).__name__, detail=str(e))
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={
                "success": False,
                "message": "Database unavailable",
                "data": {"db": "SELECT 1 failed"},
            },
        )
    dt_ms = int((perf_counter() - t0) * 1000)
    return {"success": True, "data": {"db_select_1_ms": dt_ms}}
