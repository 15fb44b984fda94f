"""
FastAPI application for the job board.

Wires the store lifecycle, CORS, error rendering and route modules.
Every error leaves the service as ``{"error": message}``.
"""

import logging
from contextlib import asynccontextmanager
from datetime import datetime
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from jobboard.config import BoardSettings, validate_config_on_startup
from jobboard.errors import BoardError, StoreError
from jobboard.logger import setup_logging
from jobboard.repositories import BoardStore

from . import __version__
from .models import HealthResponse
from .routes import applications_router, jobs_router, seed_router

logger = logging.getLogger(__name__)


def _describe_validation_error(exc: RequestValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return "Invalid request"
    first = errors[0]
    location = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
    message = first.get("msg", "invalid value")
    return f"Invalid request: {location}: {message}" if location else f"Invalid request: {message}"


def register_exception_handlers(app: FastAPI) -> None:
    """Render every failure as a JSON error body."""

    @app.exception_handler(BoardError)
    async def board_error_handler(request: Request, exc: BoardError):
        if exc.status_code >= 500:
            logger.error(f"{request.method} {request.url.path} failed: {exc.message}")
        return JSONResponse(status_code=exc.status_code, content=exc.to_dict())

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        return JSONResponse(status_code=400, content={"error": _describe_validation_error(exc)})

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        return JSONResponse(status_code=exc.status_code, content={"error": str(exc.detail)})

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception):
        logger.exception(f"{request.method} {request.url.path} raised: {exc}")
        return JSONResponse(status_code=500, content={"error": "Internal server error"})


def create_app(
    store: Optional[BoardStore] = None,
    settings: Optional[BoardSettings] = None,
) -> FastAPI:
    """
    Build the application.

    Args:
        store: Store handle to serve from. Built from settings when omitted.
        settings: Configuration. Loaded and validated from the environment
            when omitted.
    """
    settings = settings or validate_config_on_startup()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        board_store = app.state.store
        logger.info("Starting job board API...")
        try:
            board_store.connect()
            board_store.ensure_indexes()
        except StoreError as e:
            logger.warning(f"Serving without a ready database: {e}")

        yield

        logger.info("Shutting down job board API...")
        board_store.close()

    app = FastAPI(title="Job Board API", version=__version__, lifespan=lifespan)
    app.state.store = store or BoardStore.from_settings(settings)

    if settings.cors_origins_list:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=settings.cors_origins_list,
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    register_exception_handlers(app)

    app.include_router(jobs_router)
    app.include_router(applications_router)
    app.include_router(seed_router)

    @app.get("/", response_class=PlainTextResponse)
    def root():
        """Liveness check."""
        return "Server is Running"

    @app.get("/health", response_model=HealthResponse)
    def health():
        """Readiness check: pings the database."""
        board_store: BoardStore = app.state.store
        connected = board_store.is_connected and board_store.ping()
        payload = HealthResponse(
            status="healthy" if connected else "unhealthy",
            database="connected" if connected else "unavailable",
            timestamp=datetime.utcnow(),
        )
        if not connected:
            return JSONResponse(status_code=503, content=payload.model_dump(mode="json"))
        return payload

    return app


_settings = validate_config_on_startup()
setup_logging(_settings.log_level, _settings.log_format)

app = create_app(settings=_settings)
