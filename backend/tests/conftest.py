"""
Phonebook Backend: Test Configuration (conftest.py)
======================================================

What:  Shared pytest fixtures for the entire test suite.
How:   pytest auto-discovers conftest.py and makes fixtures available to all tests.

Fixture Hierarchy:
    Function-scoped (created fresh for each test):
    ├── mock_db_session: Mock AsyncSession for service unit tests
    ├── sample_person_data: Field values for a Person
    ├── db_engine: Async engine on a throwaway SQLite file, schema created
    ├── test_client: HTTPX AsyncClient bound to the app, sessions from db_engine
    └── static_root: Temporary frontend build directory
"""

import os
import tempfile
from uuid import uuid4

# Override settings BEFORE any phonebook imports
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///" + os.path.join(
    tempfile.mkdtemp(prefix="phonebook_test_"), "unused.db"
)
os.environ["LOG_LEVEL"] = "WARNING"

from unittest.mock import AsyncMock, MagicMock  # noqa: E402

import pytest  # noqa: E402
import pytest_asyncio  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402
from sqlalchemy.ext.asyncio import async_sessionmaker, create_async_engine  # noqa: E402

from phonebook.config import settings  # noqa: E402
from phonebook.database import get_db_session, init_models  # noqa: E402


@pytest.fixture
def mock_db_session():
    """
    Provides a mock async database session.

    Usage:
        async def test_get_person(mock_db_session):
            mock_db_session.get.return_value = person
            result = await person_service.get_person(mock_db_session, str(person.id))
    """
    session = AsyncMock()
    session.execute = AsyncMock()
    session.get = AsyncMock()
    session.delete = AsyncMock()
    session.flush = AsyncMock()
    session.commit = AsyncMock()
    session.rollback = AsyncMock()
    session.close = AsyncMock()
    session.add = MagicMock()
    return session


@pytest.fixture
def sample_person_data():
    return {
        "id": uuid4(),
        "name": "Ada Lovelace",
        "number": "040-123456",
    }


@pytest_asyncio.fixture
async def db_engine(tmp_path):
    """Async engine on a fresh SQLite file with the persons table created."""
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'phonebook.db'}")
    await init_models(engine)
    yield engine
    await engine.dispose()


@pytest_asyncio.fixture
async def test_client(db_engine):
    """
    Provides an async HTTP test client for endpoint testing.

    How:     ASGITransport routes requests straight to the app; get_db_session
             is overridden so every request uses the per-test database.

    Usage:
        async def test_list(test_client):
            response = await test_client.get("/api/persons")
            assert response.status_code == 200
    """
    from phonebook.main import app

    factory = async_sessionmaker(db_engine, expire_on_commit=False)

    async def override_db_session():
        async with factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_db_session] = override_db_session
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
    app.dependency_overrides.clear()


@pytest.fixture
def static_root(tmp_path, monkeypatch):
    """A frontend build directory with index.html and one asset."""
    build = tmp_path / "build"
    (build / "static").mkdir(parents=True)
    (build / "index.html").write_text("<html><body>phonebook</body></html>")
    (build / "static" / "main.js").write_text("console.log('phonebook')")
    monkeypatch.setattr(settings, "static_root", str(build))
    return build
