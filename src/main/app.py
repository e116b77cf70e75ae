"""
Main Application - Main Layer

This module serves as the entry point for the FastAPI application.
It initializes the container, creates the FastAPI app, and includes
the API routers.
"""

from contextlib import asynccontextmanager
from datetime import datetime, timezone

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from src.application.dtos.envelope_dto import EnvelopeDTO
from src.application.services.method_dispatcher import (
    ERROR_INVALID_PARAMETERS,
    describe_validation_errors,
)
from src.main.config import get_settings
from src.main.container import app_lifespan, init_container
from src.presentation.controllers import methods_router, system_router
from src.shared import configure_logging, get_logger, update_logging_from_settings

# Configure logging with basic settings first - before configuration is loaded
# This ensures we have logging during the configuration loading process
configure_logging()

# Load settings
settings = get_settings()

# Update logging with complete settings
update_logging_from_settings(settings)

# Get structured logger
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan management.

    This context manager is called when the application starts up,
    and when it shuts down. It uses the container's app_lifespan
    to properly manage application resources.
    """
    # Set application startup time
    app.state.started_at = datetime.now(timezone.utc)
    logger.info("Application starting up")

    # Use container's lifecycle management
    async with app_lifespan() as container:
        app.state.container = container
        yield

    logger.info("Application shutting down")


async def not_found_handler(request: Request, exc: StarletteHTTPException):
    """Render unknown routes as ``{error, path}``."""
    if exc.status_code == 404:
        return JSONResponse(
            status_code=404,
            content={"error": "Not Found", "path": request.url.path},
        )
    return JSONResponse(
        status_code=exc.status_code,
        content={"detail": exc.detail},
        headers=getattr(exc, "headers", None),
    )


async def validation_error_handler(request: Request, exc: RequestValidationError):
    """Report malformed request bodies as an invalid-parameters envelope."""
    message = describe_validation_errors(exc.errors())
    logger.info("http.invalid_request", path=request.url.path, error=message)
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=EnvelopeDTO.failure(ERROR_INVALID_PARAMETERS, message).to_payload(),
    )


def create_app() -> FastAPI:
    """
    Create and configure the FastAPI application.

    Returns:
        FastAPI: The configured FastAPI application
    """
    settings = get_settings()

    # Initialize dependency injection container
    init_container(settings)

    # Create FastAPI app
    app = FastAPI(
        title=settings.server.title,
        description=settings.server.description,
        version=settings.server.version,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )

    # Set up CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        client = request.client.host if request.client else None
        logger.debug(
            "http.request", method=request.method, path=request.url.path, client=client
        )
        return await call_next(request)

    app.add_exception_handler(StarletteHTTPException, not_found_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)

    # Include routers
    app.include_router(system_router)
    app.include_router(methods_router)

    return app


app = create_app()
