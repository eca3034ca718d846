"""
Pytest configuration and shared fixtures.

Every test gets its own in-memory SQLite database. The environment is set
before the application package is imported so the module-level engine is
never pointed at PostgreSQL.
"""

import os

os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite://")
os.environ.setdefault("SECRET_KEY", "test-secret-key")
os.environ.setdefault("ENVIRONMENT", "testing")

import pytest
from httpx import ASGITransport, AsyncClient

from client_admin.adapters.outbound.persistence.database import (
    create_engine_for,
    create_schema,
    create_session_factory,
    get_db,
)
from client_admin.adapters.outbound.security.caller_identity import CallerIdentityManager
from client_admin.application.use_cases import AsyncClientService, AsyncConfigurationService
from client_admin.main import app

OWNER_ID = 7
OTHER_USER_ID = 8


@pytest.fixture
async def engine():
    """Fresh in-memory database with every table created."""
    test_engine = create_engine_for("sqlite+aiosqlite://")
    await create_schema(test_engine)
    yield test_engine
    await test_engine.dispose()


@pytest.fixture
def session_factory(engine):
    return create_session_factory(engine)


@pytest.fixture
async def db(session_factory):
    async with session_factory() as session:
        yield session


@pytest.fixture
def client_service(db) -> AsyncClientService:
    return AsyncClientService(db)


@pytest.fixture
def configuration_service(db) -> AsyncConfigurationService:
    return AsyncConfigurationService(db)


@pytest.fixture
def auth_headers():
    """Build bearer headers for a given user id."""
    def _headers(user_id: int = OWNER_ID):
        token = CallerIdentityManager.create_access_token(user_id)
        return {"Authorization": f"Bearer {token}"}
    return _headers


@pytest.fixture
async def http_client(session_factory):
    """HTTP client talking to the app with the test database injected."""
    async def override_get_db():
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
    app.dependency_overrides.clear()
