"""
Test infrastructure for userhub.

Strategy
--------
- SQLite in-memory via aiosqlite replaces PostgreSQL; StaticPool makes every
  session share the one connection an in-memory database lives on.
- Tables are created before each test and dropped after it.
- Redis is replaced by ``InMemoryCache``, a dict-backed ``CacheRepository``.
- The HTTP client talks to the FastAPI app through ``ASGITransport``, which
  does not run the lifespan, so the fixture installs the test
  ``UserService`` on ``app.state`` directly.
"""
import json

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.pool import StaticPool

from userhub.database import Base, build_session_factory
from userhub.main import create_app
from userhub.ports import CacheRepository
from userhub.repositories import SqlAlchemyUserRepository
from userhub.services.user_service import UserService

# ---------------------------------------------------------------------------
# Test database engine (SQLite in-memory with aiosqlite)
# ---------------------------------------------------------------------------

TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"

engine_test = create_async_engine(
    TEST_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)

async_session_test = build_session_factory(engine_test)


class InMemoryCache(CacheRepository):
    """Dict-backed cache; TTLs are recorded but never enforced."""

    def __init__(self) -> None:
        self.entries: dict[str, str] = {}
        self.ttls: dict[str, int | None] = {}

    async def set(self, key, value, ttl=None):
        self.entries[key] = json.dumps(value, default=str)
        self.ttls[key] = ttl

    async def get(self, key):
        return self.entries.get(key)

    async def delete(self, key):
        self.entries.pop(key, None)
        self.ttls.pop(key, None)

    async def exists(self, key):
        return key in self.entries


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------

@pytest_asyncio.fixture(autouse=True)
async def setup_db():
    """Create all tables before each test, drop after to guarantee isolation."""
    async with engine_test.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield
    async with engine_test.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)


@pytest.fixture
def repository() -> SqlAlchemyUserRepository:
    return SqlAlchemyUserRepository(async_session_test)


@pytest.fixture
def cache() -> InMemoryCache:
    return InMemoryCache()


@pytest.fixture
def user_service(repository, cache) -> UserService:
    return UserService(repository, cache)


@pytest_asyncio.fixture
async def async_client(user_service) -> AsyncClient:
    """httpx client wired to a fresh app whose service uses the test database."""
    app = create_app()
    app.state.user_service = user_service
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
