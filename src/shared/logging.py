"""
Structured logging using structlog with:
- JSON/console switchable format
- Request id + request context (method, path, admin)
- PII redaction (emails, phone numbers of students and parents)
- Safe defaults for Uvicorn/SQLAlchemy/Alembic

"""

from __future__ import annotations

import datetime
import logging
import logging.config
import re
import sys
from typing import Any, Dict, List, Optional

import structlog

from src.config import Settings

# ---------------------------------------------------------------------
# PII redaction
# ---------------------------------------------------------------------


class PIIRedactionProcessor:
    """
    Structlog processor to redact PII from strings inside event_dict (recursively).
    - Email: keep domain, redact local-part.
    - Phone numbers: keep the first two and last 4 characters.
    """
    P_EMAIL = re.compile(r"\b([A-Za-z0-9._%+-]+)@([A-Za-z0-9.-]+\.[A-Za-z]{2,})\b")
    # E.164-ish: optional + followed by 9..15 digits
    P_PHONE = re.compile(r"\+?\d{9,15}\b")

    def __call__(self, logger, method_name, event_dict):
        return self._redact(event_dict)

    def _redact(self, value: Any) -> Any:
        if isinstance(value, dict):
            return {k: self._redact(v) for k, v in value.items()}
        if isinstance(value, (list, tuple)):
            return [self._redact(v) for v in value]
        if isinstance(value, str):
            return self._redact_str(value)
        return value

    def _redact_str(self, s: str) -> str:
        s = self.P_EMAIL.sub(lambda m: f"***@{m.group(2)}", s)

        def _mask_phone(m: re.Match) -> str:
            g = m.group(0)
            return f"{g[:2]}****{g[-4:]}"

        return self.P_PHONE.sub(_mask_phone, s)


# ---------------------------------------------------------------------
# Context processors
# ---------------------------------------------------------------------


def add_request_context(logger, method_name, event_dict):
    """
    Copy a few standard request fields from contextvars into the event.
    You can bind more via `bind_request_context(...)` during request handling.
    """
    ctx = structlog.contextvars.get_contextvars()
    for key in ("request_id", "admin_id", "path", "method", "client_ip"):
        if key in ctx and key not in event_dict:
            event_dict[key] = ctx[key]
    return event_dict


def add_timestamp(logger, method_name, event_dict):
    # UTC ISO8601 Z
    now = datetime.datetime.now(datetime.timezone.utc)
    event_dict["timestamp"] = now.strftime("%Y-%m-%dT%H:%M:%SZ")
    return event_dict


def _passthrough(logger, method_name, event_dict):
    return event_dict


# ---------------------------------------------------------------------
# Public helpers to use from API code
# ---------------------------------------------------------------------


def bind_request_context(
    *,
    request_id: Optional[str] = None,
    path: Optional[str] = None,
    method: Optional[str] = None,
    admin_id: Optional[int] = None,
    client_ip: Optional[str] = None,
    extras: Optional[Dict[str, Any]] = None,
) -> None:
    """Bind standard request context fields (call in middleware/route handlers)."""
    payload = {
        k: v
        for k, v in dict(
            request_id=request_id,
            path=path,
            method=method,
            admin_id=admin_id,
            client_ip=client_ip,
        ).items()
        if v is not None
    }
    if extras:
        payload.update(extras)
    if payload:
        structlog.contextvars.bind_contextvars(**payload)


def clear_request_context() -> None:
    """Clear all bound contextvars (call at end of request)."""
    structlog.contextvars.clear_contextvars()


# ---------------------------------------------------------------------
# Setup
# ---------------------------------------------------------------------


def _level_name_to_int(level: str) -> int:
    return getattr(logging, level.upper(), logging.INFO)


def setup_logging(settings: Settings) -> None:
    """Idempotent structured logging configuration."""
    log_format = settings.log_format
    is_prod_like = settings.is_prod or settings.is_staging

    # Python stdlib logging config
    logging_config = {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "json": {
                "()": "pythonjsonlogger.jsonlogger.JsonFormatter",
                "format": "%(asctime)s %(name)s %(levelname)s %(message)s",
                "datefmt": "%Y-%m-%dT%H:%M:%S",
            },
            "console": {
                "format": "%(message)s",
            },
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "formatter": "json" if log_format == "json" else "console",
                "stream": sys.stdout,
            },
        },
        "root": {
            "level": _level_name_to_int(settings.LOG_LEVEL),
            "handlers": ["console"],
        },
        "loggers": {
            # Quiet noisy libs, but keep errors
            "uvicorn.error": {"level": "INFO", "handlers": ["console"], "propagate": False},
            "uvicorn.access": {"level": "WARNING", "handlers": ["console"], "propagate": False},
            "sqlalchemy.engine": {"level": "WARNING", "handlers": ["console"], "propagate": False},
            "alembic": {"level": "INFO", "handlers": ["console"], "propagate": False},
        },
    }
    logging.config.dictConfig(logging_config)

    # structlog processors pipeline
    processors: List[Any] = [
        structlog.contextvars.merge_contextvars,
        add_timestamp,
        add_request_context,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        # Redact only outside of local/dev to help debugging locally
        (PIIRedactionProcessor() if is_prod_like else _passthrough),
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.StackInfoRenderer(),
    ]
    if log_format == "json":
        processors += [structlog.processors.format_exc_info, structlog.processors.JSONRenderer()]
    else:
        # ConsoleRenderer formats exc_info itself
        processors.append(structlog.dev.ConsoleRenderer())

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        context_class=dict,
        cache_logger_on_first_use=True,
    )

    # Clear any inherited context
    structlog.contextvars.clear_contextvars()


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a structured logger instance."""
    return structlog.get_logger(name)


security_logger = structlog.get_logger("security")


def log_security_event(
    event_type: str,
    *,
    admin_id: Optional[int] = None,
    username: Optional[str] = None,
    details: Optional[Dict[str, Any]] = None,
    **kwargs: Any,
) -> None:
    """Log security-relevant events (login, registration, token rejection)."""
    security_logger.info(
        "Security event",
        event_type=event_type,
        admin_id=admin_id,
        username=username,
        details=details or {},
        **kwargs,
    )
