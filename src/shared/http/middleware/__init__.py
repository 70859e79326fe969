from .logging_middleware import REQUEST_ID_HEADER, LoggingMiddleware

__all__ = ["REQUEST_ID_HEADER", "LoggingMiddleware"]
