"""
Phonebook Backend: FastAPI Application Factory
=================================================

What:  Creates and configures the FastAPI application instance.
How:   Factory pattern: create_app() returns a configured FastAPI instance.
Who:   Loaded by uvicorn (uvicorn phonebook.main:app, or python -m phonebook).

Application Architecture:
    ┌─────────────────────────────────────────────────────┐
    │                   FastAPI App                       │
    │                                                     │
    │  Middleware Chain:                                  │
    │  ┌──────────┐ ┌─────────┐ ┌──────┐ ┌──────┐         │
    │  │ Req ID   │→│ Logging │→│ CORS │→│ GZip │         │
    │  └──────────┘ └─────────┘ └──────┘ └──────┘         │
    │                                                     │
    │  Routes:                                            │
    │  /api/persons[/{id}]   /info   /health   /{static}  │
    │                                                     │
    │  Exception Handlers:                                │
    │  Validation→400 │ NotFound→404 │ Database→500       │
    │  no route→404 {"error": "unknown endpoint"}         │
    └─────────────────────────────────────────────────────┘

Lifecycle:
    Startup:  configure logging, create missing tables, log the port
    Shutdown: dispose the database engine
"""

import logging
import sys
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from phonebook import __version__
from phonebook.config import settings
from phonebook.database import dispose_engine, init_models
from phonebook.exceptions import (
    DatabaseError,
    NotFoundError,
    PhonebookError,
    ValidationError,
)
from phonebook.middleware.logging import RequestLoggingMiddleware
from phonebook.middleware.request_id import RequestIDMiddleware, request_id_var
from phonebook.routes import health, info, persons, static

logger = logging.getLogger(__name__)


# ══════════════════════════════════════════════════════════════════════════
# Logging Configuration
# ══════════════════════════════════════════════════════════════════════════

def setup_logging() -> None:
    """
    Configure logging for the entire application.

    Format: %(asctime)s [%(levelname)s] %(name)s: %(message)s
    Called once during app startup, before any other initialization.
    """
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
        handlers=[
            logging.StreamHandler(sys.stdout),
        ],
        force=True,
    )

    # Our own access log replaces uvicorn's
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    logging.getLogger("aiosqlite").setLevel(logging.WARNING)


# ══════════════════════════════════════════════════════════════════════════
# Application Lifespan (Startup & Shutdown)
# ══════════════════════════════════════════════════════════════════════════

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    # ── Startup ───────────────────────────────────────────────────────────
    setup_logging()
    logger.info("Phonebook backend %s starting up...", __version__)

    await init_models()
    logger.info("Database schema ready")
    logger.info("Server running on port %d", settings.port)

    yield

    # ── Shutdown ──────────────────────────────────────────────────────────
    logger.info("Phonebook backend shutting down...")
    await dispose_engine()
    logger.info("Shutdown complete.")


# ══════════════════════════════════════════════════════════════════════════
# Exception Handlers
# ══════════════════════════════════════════════════════════════════════════

def error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


def register_exception_handlers(app: FastAPI) -> None:
    """
    Register global exception handlers for consistent error responses.

    Handler hierarchy:
        ValidationError (and subclasses) → 400 {"error": message}
        RequestValidationError           → 400 (unreadable or mistyped body)
        NotFoundError                    → 404
        Starlette 404/405 (no route)     → 404 {"error": "unknown endpoint"}
        DatabaseError                    → 500 generic message
        PhonebookError (base)            → 500
        Exception (fallback)             → 500

    Internal details (SQL, stack traces) are logged, never returned.
    """

    @app.exception_handler(ValidationError)
    async def handle_validation_error(request: Request, exc: ValidationError):
        """Covers content missing, duplicate name, field rules and malformed ids."""
        rid = request_id_var.get("")
        logger.warning("[%s] Validation error: %s | Context: %s", rid, exc.message, exc.context)
        return error_response(400, exc.message)

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation_error(request: Request, exc: RequestValidationError):
        rid = request_id_var.get("")
        errors = exc.errors()
        message = "invalid request body"
        if errors:
            first = errors[0]
            location = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
            message = f"{location}: {first.get('msg')}" if location else str(first.get("msg"))
        logger.warning("[%s] Request validation error: %s", rid, message)
        return error_response(400, message)

    @app.exception_handler(NotFoundError)
    async def handle_not_found(request: Request, exc: NotFoundError):
        rid = request_id_var.get("")
        logger.info("[%s] Not found: %s", rid, exc.message)
        return error_response(404, exc.message)

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_exception(request: Request, exc: StarletteHTTPException):
        """Unmatched routes, including wrong methods on existing paths."""
        if exc.status_code in (404, 405):
            return error_response(404, "unknown endpoint")
        return error_response(exc.status_code, str(exc.detail))

    @app.exception_handler(DatabaseError)
    async def handle_database_error(request: Request, exc: DatabaseError):
        rid = request_id_var.get("")
        logger.error("[%s] Database error: %s | Context: %s", rid, exc.message, exc.context)
        return error_response(500, "An internal error occurred. Please try again later.")

    @app.exception_handler(PhonebookError)
    async def handle_phonebook_error(request: Request, exc: PhonebookError):
        rid = request_id_var.get("")
        logger.error("[%s] Application error: %s | Context: %s", rid, exc.message, exc.context)
        return error_response(500, exc.message)

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        rid = request_id_var.get("")
        logger.error("[%s] Unexpected error: %s", rid, str(exc), exc_info=True)
        return error_response(500, "An unexpected error occurred.")


# ══════════════════════════════════════════════════════════════════════════
# Application Factory
# ══════════════════════════════════════════════════════════════════════════

def create_app() -> FastAPI:
    """
    Create and configure the FastAPI application.

    Returns: Fully configured FastAPI instance ready to receive requests.
    """
    app = FastAPI(
        title="Phonebook API",
        description="Store, list, update and delete phonebook entries.",
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )

    # ── Register Middleware ───────────────────────────────────────────────
    # Middleware executes in REVERSE order of addition:
    # RequestID → Logging → GZip → CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["X-Request-ID"],
    )
    app.add_middleware(GZipMiddleware, minimum_size=500)
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(RequestIDMiddleware)

    # ── Register Exception Handlers ───────────────────────────────────────
    register_exception_handlers(app)

    # ── Register Routes ───────────────────────────────────────────────────
    # static must stay last: its catch-all path would shadow everything else
    app.include_router(persons.router)
    app.include_router(info.router)
    app.include_router(health.router)
    app.include_router(static.router)

    return app


# ── Application Instance ─────────────────────────────────────────────────
app = create_app()
