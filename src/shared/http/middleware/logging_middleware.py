from __future__ import annotations

import time
import uuid

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from src.shared.logging import bind_request_context, clear_request_context, get_logger

REQUEST_ID_HEADER = "X-Request-ID"

log = get_logger("http")


class LoggingMiddleware(BaseHTTPMiddleware):
    """
    Structured access logs.
    - Tags every request with a request id (incoming X-Request-ID or a new uuid4)
      and echoes it on the response.
    - Logs method, path, status and latency once the response is ready.
    """

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        start = time.perf_counter()
        request_id = request.headers.get(REQUEST_ID_HEADER) or str(uuid.uuid4())
        request.state.request_id = request_id

        clear_request_context()
        bind_request_context(
            request_id=request_id,
            path=request.url.path,
            method=request.method,
            client_ip=request.client.host if request.client else None,
        )

        status_code = 500
        try:
            response = await call_next(request)
            status_code = response.status_code
            response.headers[REQUEST_ID_HEADER] = request_id
            return response
        finally:
            dur_ms = round((time.perf_counter() - start) * 1000.0, 2)
            log.info(
                "http_access",
                method=request.method,
                path=request.url.path,
                status_code=status_code,
                duration_ms=dur_ms,
            )
