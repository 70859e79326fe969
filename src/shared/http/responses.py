# /src/shared/http/responses.py
"""
HTTP response helpers (success envelopes).

- ok(data=None, message=None)
- created(data, message)

Error envelopes are produced by ``src.shared.exceptions``; both share the
``{success, data?, message?, errors?}`` shape.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

from fastapi.encoders import jsonable_encoder
from starlette.responses import JSONResponse

from src.shared.exceptions import envelope


def ok(data: Any = None, message: Optional[str] = None, headers: Optional[Dict[str, str]] = None) -> JSONResponse:
    return JSONResponse(
        jsonable_encoder(envelope(success=True, data=data, message=message)),
        status_code=200,
        headers=headers,
    )


def created(data: Any, message: Optional[str] = None) -> JSONResponse:
    return JSONResponse(
        jsonable_encoder(envelope(success=True, data=data, message=message)),
        status_code=201,
    )
