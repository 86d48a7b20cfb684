"""
Shared test fixtures for the Equipment Tracker test suite.
"""

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from app.config import Settings
from app.services.equipment_store import EquipmentStore


@pytest.fixture
def test_settings(tmp_path):
    """Settings pointing at a throwaway SQLite file."""
    return Settings(
        db_path=str(tmp_path / "equipment_test.db"),
        debug=True,
        log_level="DEBUG",
    )


@pytest_asyncio.fixture
async def store(test_settings):
    """An initialized store backed by a fresh database."""
    equipment_store = EquipmentStore.from_settings(test_settings)
    await equipment_store.initialize()
    yield equipment_store
    await equipment_store.close()


@pytest_asyncio.fixture
async def app_client(test_settings, store):
    """Create a test client for an app wired to the test store."""
    from app.main import create_app

    app = create_app(store=store, settings=test_settings)

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


@pytest.fixture
def make_equipment(app_client):
    """Create equipment through the API and return the stored record."""

    async def _make(name="Mixer A1", type="Mixer", status="Active", **extra):
        payload = {"name": name, "type": type, "status": status, **extra}
        response = await app_client.post("/api/equipment", json=payload)
        assert response.status_code == 201, response.text
        return response.json()["data"]

    return _make
