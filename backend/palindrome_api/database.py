"""
Palindrome API — Database Engine & Schema Management
=====================================================

What:  Async SQLAlchemy engine/session construction, the declarative Base,
       the "ensure database exists" step, and schema creation.
How:   Nothing here is created at import time. The lifespan in main.py builds
       the engine from settings and hands the session factory to WordStore.
Who:   main.py (startup), WordStore (sessions), Alembic (Base.metadata).

Connection Pooling Strategy:
    pool_size=5:       Persistent connections kept idle between requests
    max_overflow=5:    Burst connections (total max = 10 open)
    pool_recycle=-1:   Connections are reused indefinitely
    pool_pre_ping:     Validates connections before use
"""

import logging
from typing import Any, Dict, Optional

from sqlalchemy import text
from sqlalchemy.engine import make_url
from sqlalchemy.exc import DBAPIError, SQLAlchemyError
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase
from sqlalchemy.pool import NullPool

from palindrome_api.config import Settings
from palindrome_api.exceptions import StartupError

logger = logging.getLogger(__name__)

# SQLSTATE raised by CREATE DATABASE when the database is already there
DUPLICATE_DATABASE = "42P04"


class Base(DeclarativeBase):
    """
    Base class for all SQLAlchemy ORM models.

    Shares a single metadata object used by create_schema() and Alembic.
    """
    pass


def _is_postgres(url: str) -> bool:
    return make_url(url).get_backend_name() == "postgresql"


def _connect_args(settings: Settings, url: str) -> Dict[str, Any]:
    # asyncpg takes the libpq sslmode names through its `ssl` argument
    if _is_postgres(url):
        return {"ssl": settings.db_sslmode}
    return {}


# ── Engine Configuration ──────────────────────────────────────────────────
def build_engine(settings: Settings, url: Optional[str] = None) -> AsyncEngine:
    """
    Create the async engine that owns the connection pool.

    Pool caps only apply to server databases; SQLite (tests) uses the
    dialect's default pool.
    """
    url = url or settings.connection_url
    kwargs: Dict[str, Any] = {
        "echo": settings.log_level == "DEBUG",
        "connect_args": _connect_args(settings, url),
    }
    if _is_postgres(url):
        kwargs.update(
            pool_size=settings.db_pool_size,
            max_overflow=settings.db_max_overflow,
            pool_recycle=-1,
            pool_pre_ping=True,
        )
    return create_async_engine(url, **kwargs)


# ── Session Factory ───────────────────────────────────────────────────────
# expire_on_commit=False: records stay readable after the session commits,
# which WordStore relies on when returning created rows.
def build_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )


# ── Startup Helpers ───────────────────────────────────────────────────────
async def ensure_database_exists(settings: Settings) -> bool:
    """
    Create the application database on the server if it is absent.

    What:    Idempotent check-then-create against the `postgres` maintenance DB.
    When:    Once during startup, before the application engine connects.
    How:     AUTOCOMMIT connection (CREATE DATABASE cannot run in a transaction),
             look the name up in pg_database, create only when missing.

    Outcomes:
        - database created                 → True
        - already present / lost a race    → False, logged at INFO
        - cannot connect or not permitted  → False, logged at WARNING; startup
          continues and the real connection decides whether we can serve
        - malformed URL or missing driver  → False, logged at WARNING
        - non-PostgreSQL URL               → False, nothing to do

    Server and database name both come from settings.connection_url, so a
    DATABASE_URL override is honored.

    Returns:
        True only when this call created the database.
    """
    engine: Optional[AsyncEngine] = None
    db_name = ""
    try:
        if not _is_postgres(settings.connection_url):
            logger.debug("Skipping database creation for non-PostgreSQL URL")
            return False

        db_name = settings.database_name
        admin_url = settings.admin_connection_url
        engine = create_async_engine(
            admin_url,
            isolation_level="AUTOCOMMIT",
            poolclass=NullPool,
            connect_args=_connect_args(settings, admin_url),
        )
        async with engine.connect() as conn:
            result = await conn.execute(
                text("SELECT 1 FROM pg_database WHERE datname = :name"),
                {"name": db_name},
            )
            if result.scalar() is not None:
                logger.info("Database '%s' already exists", db_name)
                return False

            quoted = engine.dialect.identifier_preparer.quote(db_name)
            await conn.execute(text(f"CREATE DATABASE {quoted}"))
            logger.info("Database '%s' created", db_name)
            return True
    except DBAPIError as e:
        sqlstate = getattr(e.orig, "sqlstate", None) or getattr(e.orig, "pgcode", None)
        if sqlstate == DUPLICATE_DATABASE:
            logger.info("Database '%s' already exists", db_name)
            return False
        logger.warning("Could not ensure database '%s' exists: %s", db_name, e)
        return False
    except (SQLAlchemyError, OSError, ImportError) as e:
        logger.warning("Could not ensure database '%s' exists: %s", db_name, e)
        return False
    finally:
        if engine is not None:
            await engine.dispose()


async def create_schema(engine: AsyncEngine) -> None:
    """
    Create all tables registered on Base.metadata (no-op when present).

    Raises:
        StartupError: the database could not be reached or the DDL failed.
    """
    # Registers the Word model on Base.metadata
    from palindrome_api.models import word  # noqa: F401

    try:
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
    except (SQLAlchemyError, OSError) as e:
        logger.error("Failed to create database schema: %s", e)
        raise StartupError(
            message="Could not connect to the database",
            context={"error": str(e)},
        ) from e
    logger.info("Database schema ready")
