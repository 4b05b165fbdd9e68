"""
Test fixtures for the Course Catalog API test suite.

This module provides shared fixtures used across all test files:

  - db_engine / db_session: Fresh in-memory SQLite database for each test
  - client: Async HTTP test client (no credentials)
  - unsafe_client: Like client, but uncaught app errors come back as 500
    responses instead of being re-raised into the test
  - registered_user: A user created through POST /api/users
  - authenticated_client: client with that user's Basic-Auth credentials
  - course_id: A course created through POST /api/courses

Key design decisions:
  - In-memory SQLite (sqlite+aiosqlite://) is used for speed and isolation.
    Each test gets a completely fresh database — no state leaks between tests.
  - We override FastAPI's get_db dependency to inject our test sessions,
    so the application code works exactly as it does in production.
  - Users and courses are created through the real endpoints, not DB inserts.
"""

import pytest_asyncio
from httpx import AsyncClient, ASGITransport
from sqlalchemy.ext.asyncio import create_async_engine, AsyncSession, async_sessionmaker

from app.database import Base, enable_sqlite_foreign_keys, get_db
from app.main import app


# In-memory SQLite for fast, isolated tests
TEST_DATABASE_URL = "sqlite+aiosqlite://"

TEST_USER = {
    "firstName": "Joe",
    "lastName": "Smith",
    "emailAddress": "joe@smith.com",
    "password": "joepassword",
}

TEST_COURSE = {
    "title": "Build a Basic Bookcase",
    "description": "High-end furniture projects are great to dream about.",
    "estimatedTime": "12 hours",
    "materialsNeeded": "* 1/2 x 3/4 inch parting strip\n* 1 x 2 common pine",
}


@pytest_asyncio.fixture
async def db_engine():
    """Create a fresh async engine with all tables for each test."""
    engine = create_async_engine(TEST_DATABASE_URL)
    enable_sqlite_foreign_keys(engine)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest_asyncio.fixture
async def db_session(db_engine):
    """Provide an async session bound to the test engine."""
    async_session = async_sessionmaker(
        db_engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )
    async with async_session() as session:
        yield session


def _override_get_db(db_engine):
    async_session = async_sessionmaker(
        db_engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )

    async def override_get_db():
        async with async_session() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    return override_get_db


@pytest_asyncio.fixture
async def client(db_engine):
    """
    Async HTTP test client with the test database injected.

    This overrides the get_db dependency so all requests hit the
    in-memory test database instead of the real one.
    """
    app.dependency_overrides[get_db] = _override_get_db(db_engine)

    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as ac:
        yield ac

    app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def unsafe_client(db_engine):
    """Test client that returns the terminal error handler's response for uncaught errors."""
    app.dependency_overrides[get_db] = _override_get_db(db_engine)

    async with AsyncClient(
        transport=ASGITransport(app=app, raise_app_exceptions=False),
        base_url="http://test",
    ) as ac:
        yield ac

    app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def registered_user(client):
    """Create TEST_USER through the public endpoint and return its payload."""
    response = await client.post("/api/users", json=TEST_USER)
    assert response.status_code == 201, f"User creation failed: {response.text}"
    return dict(TEST_USER)


@pytest_asyncio.fixture
async def authenticated_client(client, registered_user):
    """
    Test client that sends the registered user's Basic-Auth credentials.

    httpx encodes the (username, password) tuple into the Authorization
    header on every subsequent request.
    """
    client.auth = (registered_user["emailAddress"], registered_user["password"])
    return client


@pytest_asyncio.fixture
async def course_id(authenticated_client):
    """Create TEST_COURSE as the registered user and return its id."""
    response = await authenticated_client.post("/api/courses", json=TEST_COURSE)
    assert response.status_code == 201, f"Course creation failed: {response.text}"
    return int(response.headers["Location"].rsplit("/", 1)[1])
