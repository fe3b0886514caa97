"""FastAPI main application module."""

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from contextlib import asynccontextmanager
from typing import Dict, Optional

from ...infrastructure.logging import LoggingConfig, get_logger
from ...infrastructure.services import initialize_services, shutdown_services
from .routes import auth, dropzones, favorites, health, jumps, profile, scan, weather
from .config import get_settings
from .middleware.auth import AuthenticationError
from .middleware.logging import RequestResponseLoggingMiddleware


logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan management."""
    settings = get_settings()
    LoggingConfig(
        log_level=settings.log_level,
        log_dir=settings.log_dir,
        enable_file=settings.log_to_file
    ).setup_logging()

    # Startup
    logger.info(f"Starting Skydive Logbook API ({settings.storage_backend} storage)")
    await initialize_services()

    yield

    # Shutdown
    logger.info("Shutting down Skydive Logbook API")
    await shutdown_services()


def error_response(status_code: int, detail: str, error_type: str, headers: Optional[Dict[str, str]] = None) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"detail": detail, "type": error_type},
        headers=headers
    )


def add_exception_handlers(app: FastAPI) -> None:
    """Map domain and infrastructure exceptions onto HTTP error responses."""

    @app.exception_handler(AuthenticationError)
    async def authentication_error_handler(request: Request, exc: AuthenticationError):
        logger.warning(f"Authentication error on {request.url.path}: {exc}")
        return error_response(401, str(exc), "authentication_error", headers={"WWW-Authenticate": "Bearer"})

    @app.exception_handler(ValueError)
    async def value_error_handler(request: Request, exc: ValueError):
        """Business rule violations raised by the services."""
        logger.warning(f"Validation error on {request.url.path}: {exc}")
        return error_response(400, str(exc), "validation_error")

    @app.exception_handler(RuntimeError)
    async def runtime_error_handler(request: Request, exc: RuntimeError):
        """Infrastructure failures; the message is logged but never returned."""
        logger.error(f"Runtime error on {request.url.path}: {exc}", exc_info=exc)
        return error_response(500, "Internal server error occurred", "runtime_error")


def create_app() -> FastAPI:
    """Create and configure FastAPI application."""
    settings = get_settings()
    prefix = settings.api_prefix

    app = FastAPI(
        title="Skydive Logbook",
        description="Jump logbook and drop zone directory with live weather safety ratings",
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan
    )

    add_exception_handlers(app)

    app.add_middleware(
        RequestResponseLoggingMiddleware,
        exclude_paths={f"{prefix}/health", "/docs", "/redoc", "/openapi.json", "/favicon.ico"}
    )

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins,
        allow_credentials=True,
        allow_methods=settings.allowed_methods,
        allow_headers=settings.allowed_headers,
    )

    # Include routers
    app.include_router(health.router, prefix=prefix, tags=["health"])
    app.include_router(auth.router, prefix=f"{prefix}/auth", tags=["authentication"])
    app.include_router(profile.router, prefix=f"{prefix}/profile", tags=["profile"])
    app.include_router(jumps.router, prefix=f"{prefix}/jumps", tags=["jumps"])
    app.include_router(dropzones.router, prefix=f"{prefix}/dropzones", tags=["dropzones"])
    app.include_router(weather.router, prefix=f"{prefix}/weather", tags=["weather"])
    app.include_router(favorites.router, prefix=f"{prefix}/favorites", tags=["favorites"])
    app.include_router(scan.router, prefix=f"{prefix}/scan", tags=["scan"])

    return app


# Create app instance
app = create_app()


def run() -> None:
    """Serve the API with uvicorn."""
    import uvicorn

    uvicorn.run(
        "skydive_logbook.presentation.api.main:app",
        host="0.0.0.0",
        port=8000,
        reload=get_settings().debug
    )
