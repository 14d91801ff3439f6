"""
Palindrome API — Test Configuration (conftest.py)
==================================================

What:  Shared pytest fixtures for the entire test suite.
How:   pytest auto-discovers conftest.py and makes fixtures available to all tests.

Fixture Hierarchy (all function-scoped):
    ├── engine:              async engine on a temporary SQLite file, schema created
    ├── word_store:          real WordStore on that engine
    ├── test_client:         HTTPX AsyncClient against create_app(word_store=...)
    ├── failing_store:       WordStore stand-in whose operations raise StorageError
    ├── mock_db_session:     AsyncSession stand-in for failure injection
    └── mock_session_factory: factory returning mock_db_session
"""

import os

# Override settings for testing BEFORE any palindrome_api imports
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///./test.db"
os.environ["ENV_FILE_REQUIRED"] = "false"
os.environ["LOG_LEVEL"] = "WARNING"

from unittest.mock import AsyncMock, MagicMock

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from palindrome_api.config import settings
from palindrome_api.database import build_engine, build_session_factory, create_schema
from palindrome_api.exceptions import StorageError
from palindrome_api.main import create_app
from palindrome_api.services.word_store import (
    DELETE_FAILED,
    FETCH_FAILED,
    SAVE_FAILED,
    WordStore,
)


@pytest_asyncio.fixture
async def engine(tmp_path):
    """
    Async engine on a fresh SQLite database file.

    Each test gets its own file, so ids restart at 1 and no rows leak
    between tests.
    """
    url = f"sqlite+aiosqlite:///{tmp_path / 'words.db'}"
    test_engine = build_engine(settings, url=url)
    await create_schema(test_engine)
    yield test_engine
    await test_engine.dispose()


@pytest.fixture
def word_store(engine):
    return WordStore(build_session_factory(engine))


@pytest_asyncio.fixture
async def test_client(word_store):
    """
    Provides an async HTTP test client for endpoint testing.

    Usage:
        async def test_words(test_client):
            response = await test_client.get("/words")
            assert response.status_code == 200
    """
    app = create_app(word_store=word_store)
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


@pytest.fixture
def failing_store():
    """A store whose every operation fails the way an unreachable database does."""
    store = MagicMock(spec=WordStore)
    store.create = AsyncMock(side_effect=StorageError(message=SAVE_FAILED))
    store.list_all = AsyncMock(side_effect=StorageError(message=FETCH_FAILED))
    store.delete_by_id = AsyncMock(side_effect=StorageError(message=DELETE_FAILED))
    store.ping = AsyncMock(return_value=False)
    return store


@pytest_asyncio.fixture
async def failing_client(failing_store):
    app = create_app(word_store=failing_store)
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


@pytest.fixture
def mock_db_session():
    """
    Provides a mock async database session.

    Usage:
        mock_db_session.execute.side_effect = OperationalError(...)
        await WordStore(mock_session_factory).list_all()
    """
    session = AsyncMock()
    session.__aenter__.return_value = session
    session.__aexit__.return_value = False
    session.execute = AsyncMock()
    session.flush = AsyncMock()
    session.commit = AsyncMock()
    session.rollback = AsyncMock()
    session.close = AsyncMock()
    session.add = MagicMock()
    return session


@pytest.fixture
def mock_session_factory(mock_db_session):
    return MagicMock(return_value=mock_db_session)
