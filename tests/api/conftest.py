"""API test fixtures — FastAPI test client over the in-memory database.

Invariants:
    - get_db dependency overridden to use the test session factory
    - app.state.db_manager points at the test engine for readiness probes

Design Decisions:
    - ASGITransport does not run the lifespan, so state is wired here by hand
"""

import pytest
from httpx import ASGITransport, AsyncClient

from todo_api.infrastructure.database import get_db, DatabaseSessionManager
from todo_api.main import app


@pytest.fixture
def wired_app(test_engine, test_session_factory):
    """App with DB dependency overridden; restores state afterwards."""
    async def override_get_db():
        async with test_session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db

    original_manager = getattr(app.state, "db_manager", None)
    fake_manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    fake_manager.engine = test_engine
    fake_manager._session_factory = test_session_factory
    app.state.db_manager = fake_manager

    yield app

    app.dependency_overrides.clear()
    app.state.db_manager = original_manager


@pytest.fixture
async def client(wired_app):
    async with AsyncClient(
        transport=ASGITransport(app=wired_app), base_url="http://test",
    ) as c:
        yield c


@pytest.fixture
async def lenient_client(wired_app):
    """Client that returns 500 responses instead of re-raising app exceptions."""
    async with AsyncClient(
        transport=ASGITransport(app=wired_app, raise_app_exceptions=False),
        base_url="http://test",
    ) as c:
        yield c
