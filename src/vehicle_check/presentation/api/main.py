"""Reference check backend serving the vehicle directory and check persistence APIs."""

from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
import logging

from ...application.errors import CheckValidationError
from ...application.services.check_service import CheckService
from ...config import Settings, get_settings
from ...domain.value_objects.field_error import FieldError
from ...infrastructure.services import ServiceFactory
from .middleware import RequestResponseLoggingMiddleware
from .routes import checks, health, vehicles
from .schemas.check_schemas import error_envelope


logger = logging.getLogger(__name__)


def _field_from_location(location: tuple) -> str:
    """Turn a pydantic error location into a dotted field name."""
    parts = [str(part) for part in location if part != "body"]
    return ".".join(parts) or "body"


def add_exception_handlers(app: FastAPI) -> None:
    """Add exception handlers producing the ``{"error": {...}}`` envelope."""

    @app.exception_handler(CheckValidationError)
    async def check_validation_error_handler(request: Request, exc: CheckValidationError):
        """Handle validation failures from the check service."""
        logger.warning(f"Validation error on {request.url}: {str(exc)}")
        return JSONResponse(
            status_code=400,
            content=error_envelope("VALIDATION_ERROR", "Check validation failed", exc.details)
        )

    @app.exception_handler(RequestValidationError)
    async def request_validation_error_handler(request: Request, exc: RequestValidationError):
        """Handle malformed request bodies."""
        details = [
            FieldError(field=_field_from_location(error["loc"]), reason=error["msg"])
            for error in exc.errors()
        ]
        logger.warning(f"Malformed request on {request.url}: {len(details)} errors")
        return JSONResponse(
            status_code=400,
            content=error_envelope("VALIDATION_ERROR", "Request body is invalid", details)
        )

    @app.exception_handler(Exception)
    async def unexpected_error_handler(request: Request, exc: Exception):
        """Handle unexpected errors without leaking details."""
        logger.error(f"Unexpected error on {request.url}: {str(exc)}", exc_info=exc)
        return JSONResponse(
            status_code=500,
            content=error_envelope("INTERNAL_ERROR", "Internal server error occurred")
        )


def create_app(
    settings: Optional[Settings] = None,
    check_service: Optional[CheckService] = None
) -> FastAPI:
    """Create and configure the reference backend application."""
    settings = settings or get_settings()

    app = FastAPI(
        title="Vehicle Check Backend",
        description="Reference vehicle directory and check persistence API",
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc"
    )
    app.state.check_service = check_service or ServiceFactory(settings).create_check_service()

    add_exception_handlers(app)

    app.add_middleware(RequestResponseLoggingMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["*"],
    )

    app.include_router(health.router, tags=["health"])
    app.include_router(
        vehicles.router,
        prefix=f"{settings.api_prefix}/vehicles",
        tags=["vehicles"]
    )
    app.include_router(
        checks.router,
        prefix=f"{settings.api_prefix}/checks",
        tags=["checks"]
    )

    return app
