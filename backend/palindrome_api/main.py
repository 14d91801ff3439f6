"""
Palindrome API — FastAPI Application Factory
=============================================

What:  Creates and configures the FastAPI application instance.
How:   create_app() registers middleware, exception handlers and routers and
       wires the lifespan that builds the WordStore.
Who:   uvicorn (`palindrome_api.main:app`, or `python -m palindrome_api`)
       and the test suite (`create_app(word_store=...)`).

Application Architecture:
    ┌─────────────────────────────────────────────────────┐
    │                   FastAPI App                       │
    │                                                     │
    │  Middleware Chain:                                  │
    │  ┌─────────────────────────────────┐                │
    │  │  Request context (ID + access)  │                │
    │  └─────────────────────────────────┘                │
    │                                                     │
    │  Routes:                                            │
    │  GET /ispalindrome   POST /savepalindrome           │
    │  GET /words          DELETE /words/{id}             │
    │  GET /health                                        │
    │                                                     │
    │  Exception Handlers:                                │
    │  ValidationError→400 │ StorageError→500 │ other→500 │
    └─────────────────────────────────────────────────────┘

Lifecycle:
    Startup:
    1. Configure logging, reset the uptime clock
    2. Validate configuration (.env must exist) — fatal on failure
    3. Ensure the database exists (best effort)
    4. Build engine + session factory, create the schema — fatal on failure
    5. Attach WordStore to app.state

    Shutdown:
    1. Dispose the engine (close pooled connections)
"""

import logging
import sys
import time
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from palindrome_api import __version__
from palindrome_api.config import settings
from palindrome_api.database import (
    build_engine,
    build_session_factory,
    create_schema,
    ensure_database_exists,
)
from palindrome_api.exceptions import StartupError, StorageError, ValidationError
from palindrome_api.middleware.request_context import (
    RequestContextMiddleware,
    RequestIDLogFilter,
)
from palindrome_api.routes import health, palindrome, words
from palindrome_api.services.word_store import WordStore

logger = logging.getLogger(__name__)


# ══════════════════════════════════════════════════════════════════════════
# Logging Configuration
# ══════════════════════════════════════════════════════════════════════════

def setup_logging() -> None:
    """
    Configure logging for the entire application.

    Format: %(asctime)s [%(levelname)s] [%(request_id)s] %(name)s: %(message)s
    Output: stdout (captured by Docker / systemd)
    """
    handler = logging.StreamHandler(sys.stdout)
    handler.addFilter(RequestIDLogFilter())
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s [%(levelname)s] [%(request_id)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
        handlers=[handler],
        force=True,
    )

    # Our access middleware replaces uvicorn's access log
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)


# ══════════════════════════════════════════════════════════════════════════
# Application Lifespan (Startup & Shutdown)
# ══════════════════════════════════════════════════════════════════════════

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Build the WordStore on startup and release the pool on shutdown.

    The database bootstrap is skipped when the app was created with an
    explicit store. The uptime clock restarts in both cases.

    Raises:
        StartupError: missing configuration file or unreachable database.
        Raised before the server accepts any request.
    """
    app.state.started_at = time.time()
    if getattr(app.state, "word_store", None) is not None:
        yield
        return

    # ── Startup ───────────────────────────────────────────────────────────
    setup_logging()
    logger.info("=" * 60)
    logger.info("Palindrome API starting up...")

    try:
        settings.validate_startup()
    except StartupError as e:
        logger.critical("Configuration error: %s | Context: %s", e.message, e.context)
        raise

    await ensure_database_exists(settings)

    engine = build_engine(settings)
    try:
        await create_schema(engine)
    except StartupError:
        await engine.dispose()
        raise

    app.state.word_store = WordStore(build_session_factory(engine))
    logger.info("Connected to database '%s'", settings.database_name)
    logger.info("Server ready at http://%s:%d", settings.backend_host, settings.backend_port)
    logger.info("=" * 60)

    yield

    # ── Shutdown ──────────────────────────────────────────────────────────
    logger.info("Palindrome API shutting down...")
    app.state.word_store = None
    await engine.dispose()
    logger.info("Shutdown complete.")


# ══════════════════════════════════════════════════════════════════════════
# Exception Handlers
# ══════════════════════════════════════════════════════════════════════════

def register_exception_handlers(app: FastAPI) -> None:
    """
    Map exception types to HTTP status codes with a single-field error body.

    Handler hierarchy:
        ValidationError         → 400 {"error": message}
        StorageError            → 500 {"error": message}
        Exception (fallback)    → 500 {"error": "Internal server error"}

    Underlying causes are logged server-side only.
    """

    @app.exception_handler(ValidationError)
    async def handle_validation_error(request: Request, exc: ValidationError):
        logger.warning("Validation error: %s", exc.message)
        return JSONResponse(status_code=400, content={"error": exc.message})

    @app.exception_handler(StorageError)
    async def handle_storage_error(request: Request, exc: StorageError):
        logger.error("Storage error: %s | Context: %s", exc.message, exc.context)
        return JSONResponse(status_code=500, content={"error": exc.message})

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        logger.error("Unexpected error: %s", str(exc), exc_info=True)
        return JSONResponse(status_code=500, content={"error": "Internal server error"})


# ══════════════════════════════════════════════════════════════════════════
# Application Factory
# ══════════════════════════════════════════════════════════════════════════

def create_app(word_store: Optional[WordStore] = None) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        word_store: Store to serve from. When omitted, the lifespan builds a
                    PostgreSQL-backed WordStore from settings at startup.

    Returns:
        Fully configured FastAPI instance.
    """
    app = FastAPI(
        title="Palindrome API",
        description="Check words for palindromes and keep a history of checked words.",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.word_store = word_store
    app.state.started_at = time.time()

    app.add_middleware(RequestContextMiddleware)

    register_exception_handlers(app)

    app.include_router(palindrome.router)
    app.include_router(words.router)
    app.include_router(health.router)

    return app


app = create_app()
