"""
FastAPI application main module.
"""
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from prometheus_client import make_asgi_app
from starlette.exceptions import HTTPException as StarletteHTTPException

from .config import Constants, Settings
from .models import ErrorResponse, HealthResponse
from .routers import routers
from .utils.logging_config import setup_logging, configure_third_party_loggers
from .utils.metrics import record_error
from .utils.solana_error import SolmintError, InvalidRequestBody

# Package logger; module loggers under solmint.* propagate to it
LOGGER_NAME = "solmint"


def _error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=ErrorResponse(error=message).model_dump(),
    )


def _describe_validation_error(exc: RequestValidationError) -> str:
    """Summarize validation errors by field location, without echoing input values."""
    details = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error.get("loc", ()) if part != "body")
        message = error.get("msg", "invalid value")
        details.append(f"{location}: {message}" if location else message)
    return f"{InvalidRequestBody.message}: {'; '.join(details)}" if details else InvalidRequestBody.message


def register_exception_handlers(app: FastAPI, settings: Settings, logger) -> None:
    """
    Render every failure as {"success": false, "error": ...}.

    Client errors use 400 and internal faults 500, unless the settings
    collapse every failure to 400. Routing errors keep their own status.
    """

    def status_for(status_code: int) -> int:
        return 400 if settings.collapse_errors else status_code

    @app.exception_handler(SolmintError)
    async def solmint_error_handler(request: Request, exc: SolmintError):
        record_error(type(exc).__name__)
        logger.warning(f"{request.method} {request.url.path} failed: {type(exc).__name__}: {exc.message}")
        return _error_response(status_for(exc.status_code), exc.message)

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        record_error(InvalidRequestBody.__name__)
        message = _describe_validation_error(exc)
        logger.warning(f"{request.method} {request.url.path} rejected: {message}")
        return _error_response(status_for(InvalidRequestBody.status_code), message)

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        record_error(f"HTTP{exc.status_code}")
        logger.warning(f"{request.method} {request.url.path} failed: {exc.status_code} {exc.detail}")
        response = _error_response(exc.status_code, str(exc.detail))
        response.headers.update(exc.headers or {})
        return response

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception):
        record_error("InternalError")
        logger.error(f"{request.method} {request.url.path} raised {type(exc).__name__}")
        return _error_response(status_for(500), "Internal server error")


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Create the FastAPI application.

    Args:
        settings: Settings to inject, read from the environment when omitted

    Returns:
        FastAPI: Configured application
    """
    if settings is None:
        settings = Settings.from_env()

    # Configure logging
    logger = setup_logging(LOGGER_NAME, settings.log_level, settings.log_dir)
    configure_third_party_loggers()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """
        Lifespan context manager for FastAPI app.
        Handles startup and shutdown events.
        """
        logger.info(
            f"Starting solmint {Constants.API_VERSION}: token program {settings.token_program_id}, "
            f"rent sysvar {settings.rent_sysvar}"
        )
        yield
        logger.info("Application shutdown complete")

    app = FastAPI(
        title=Constants.API_TITLE,
        description=Constants.API_DESCRIPTION,
        version=Constants.API_VERSION,
        lifespan=lifespan,
    )
    app.state.settings = settings

    register_exception_handlers(app, settings, logger)

    # Add Prometheus metrics
    metrics_app = make_asgi_app()
    app.mount("/metrics", metrics_app)

    for router in routers:
        app.include_router(router)

    @app.get("/health", response_model=HealthResponse, tags=["Diagnostics"])
    async def health():
        """Liveness check."""
        return HealthResponse(version=Constants.API_VERSION)

    return app
