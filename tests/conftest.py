"""Shared test fixtures for the assignment publisher."""

from datetime import datetime, timedelta, timezone

import httpx
import pytest
import pytest_asyncio
from fastapi.testclient import TestClient

from app.client.api_client import AssignmentAPI
from app.core.dependencies import get_store
from app.main import app
from app.services.assignment_store import AssignmentStore
from app.services.kv import MemoryKV


class FakeClock:
    """Advances one second on every call so successive writes are ordered."""

    def __init__(self, start=None):
        self.now = start or datetime(2025, 6, 1, 8, 0, tzinfo=timezone.utc)

    def __call__(self):
        self.now += timedelta(seconds=1)
        return self.now


@pytest.fixture
def kv():
    return MemoryKV()


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def store(kv, clock):
    return AssignmentStore(kv, clock=clock)


@pytest.fixture
def client(store):
    app.dependency_overrides[get_store] = lambda: store
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def lenient_client(store):
    """Client that returns 500 responses instead of re-raising server errors."""
    app.dependency_overrides[get_store] = lambda: store
    yield TestClient(app, raise_server_exceptions=False)
    app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def api(store):
    app.dependency_overrides[get_store] = lambda: store
    transport = httpx.ASGITransport(app=app, raise_app_exceptions=False)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as http:
        yield AssignmentAPI(http)
    app.dependency_overrides.clear()


class UnreachableStore(AssignmentStore):
    """Store whose backend is down: every read and write fails."""

    def __init__(self):
        super().__init__(MemoryKV())

    async def get(self, date):
        raise ConnectionError("key-value namespace unreachable")

    async def put(self, date, content):
        raise ConnectionError("key-value namespace unreachable")


@pytest.fixture
def broken_client():
    app.dependency_overrides[get_store] = lambda: UnreachableStore()
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def broken_api():
    app.dependency_overrides[get_store] = lambda: UnreachableStore()
    transport = httpx.ASGITransport(app=app, raise_app_exceptions=False)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as http:
        yield AssignmentAPI(http)
    app.dependency_overrides.clear()
