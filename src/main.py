from __future__ import annotations

from contextlib import asynccontextmanager
from typing import Optional

from fastapi import Depends, FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.openapi.utils import get_openapi

from src.academy.api.routes import groups_router, students_router
from src.config import Settings, get_settings
from src.dependencies import require_admin
from src.finance.api.routes import expenses_router, payments_router
from src.identity.api.routes import auth_router
from src.reporting.api.routes import dashboard_router
from src.shared.database.engine import Database
from src.shared.exceptions import register_exception_handlers
from src.shared.health import router as health_router
from src.shared.http.middleware import LoggingMiddleware
from src.shared.logging import get_logger, setup_logging
from src.shared.security.passwords import PasswordHasher
from src.shared.security.tokens import TokenService, TokenSettings

logger = get_logger(__name__)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        setup_logging(settings)
        db = Database(settings)
        app.state.db = db
        if settings.DB_AUTO_CREATE:
            await db.create_all()
        logger.info(
            "Application started",
            environment=settings.ENVIRONMENT,
            api_prefix=settings.API_PREFIX,
        )
        try:
            yield
        finally:
            await db.dispose()
            logger.info("Application stopped")

    app = FastAPI(
        title=settings.PROJECT_NAME,
        version=settings.PROJECT_VERSION,
        swagger_ui_parameters={"persistAuthorization": True},
        lifespan=lifespan,
    )

    # Stateless collaborators are ready before the first request
    app.state.settings = settings
    app.state.token_service = TokenService(TokenSettings.from_settings(settings))
    app.state.password_hasher = PasswordHasher(settings.PASSWORD_HASH_SCHEME)

    # CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins(),
        allow_methods=["*"],
        allow_headers=["*"],
        allow_credentials=True,
    )

    # Request id + access log
    app.add_middleware(LoggingMiddleware)

    # Routers
    prefix = settings.API_PREFIX
    protected = [Depends(require_admin)]
    app.include_router(health_router, prefix=prefix)
    app.include_router(auth_router, prefix=prefix)
    app.include_router(groups_router, prefix=prefix, dependencies=protected)
    app.include_router(students_router, prefix=prefix, dependencies=protected)
    app.include_router(payments_router, prefix=prefix, dependencies=protected)
    app.include_router(expenses_router, prefix=prefix, dependencies=protected)
    app.include_router(dashboard_router, prefix=prefix, dependencies=protected)

    # Centralized error handling → {success: false, message, errors?}
    register_exception_handlers(app, expose_errors=not settings.is_prod)

    # ---- Custom OpenAPI to add Bearer auth ----
    def custom_openapi():
        if app.openapi_schema:
            return app.openapi_schema
        schema = get_openapi(
            title=app.title,
            version=app.version,
            routes=app.routes,
        )
        schema.setdefault("components", {}).setdefault("securitySchemes", {})["bearerAuth"] = {
            "type": "http",
            "scheme": "bearer",
            "bearerFormat": "JWT",
        }
        schema["security"] = [{"bearerAuth": []}]
        app.openapi_schema = schema
        return schema

    app.openapi = custom_openapi

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    _settings = get_settings()
    uvicorn.run("src.main:app", host="0.0.0.0", port=_settings.PORT, reload=_settings.is_dev)
