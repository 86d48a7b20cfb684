"""Tests for the web client's API wrapper and list cache."""

import httpx
import pytest

from app.client.api import ApiClientError, EquipmentApiClient, EquipmentCache


@pytest.fixture
def api(app_client):
    return EquipmentApiClient(client=app_client)


@pytest.mark.asyncio
async def test_add_and_fetch(api):
    created = await api.add_equipment({"name": "Mixer A1", "type": "Mixer", "status": "Active", "lastCleanedDate": None})
    assert created.name == "Mixer A1"
    assert created.last_cleaned_date is None

    listed = await api.get_equipment()
    assert [e.id for e in listed] == [created.id]


@pytest.mark.asyncio
async def test_update_and_delete(api):
    created = await api.add_equipment({"name": "Tank 1", "type": "Tank", "status": "Active"})

    updated = await api.update_equipment(created.id, {"status": "Under Maintenance"})
    assert updated.status == "Under Maintenance"

    await api.delete_equipment(created.id)
    assert await api.get_equipment() == []


@pytest.mark.asyncio
async def test_error_message_comes_from_envelope(api):
    with pytest.raises(ApiClientError) as exc_info:
        await api.add_equipment({"name": "", "type": "Tank", "status": "Active"})
    assert exc_info.value.message == "Validation failed"
    assert exc_info.value.status_code == 400

    with pytest.raises(ApiClientError) as exc_info:
        await api.delete_equipment(424242)
    assert exc_info.value.message == "Equipment not found"
    assert exc_info.value.status_code == 404


@pytest.mark.asyncio
async def test_error_message_falls_back_to_details_then_default():
    def handler(request: httpx.Request) -> httpx.Response:
        if request.method == "POST":
            return httpx.Response(400, json={"success": False, "details": ["a", "b"]})
        if request.method == "PUT":
            return httpx.Response(502, text="Bad Gateway")
        return httpx.Response(500, json={"success": False})

    transport = httpx.MockTransport(handler)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as http:
        api = EquipmentApiClient(client=http)

        with pytest.raises(ApiClientError, match="^a, b$"):
            await api.add_equipment({})
        with pytest.raises(ApiClientError, match="^Failed to update equipment$"):
            await api.update_equipment(1, {"name": "x"})
        with pytest.raises(ApiClientError, match="^Failed to fetch equipment$"):
            await api.get_equipment()
        with pytest.raises(ApiClientError, match="^Failed to delete equipment$"):
            await api.delete_equipment(1)


@pytest.mark.asyncio
async def test_cache_refetches_after_every_mutation(api):
    cache = EquipmentCache(api)
    assert cache.is_stale
    assert await cache.get() == []

    created = await cache.add({"name": "Vessel 1", "type": "Vessel", "status": "Active"})
    assert not cache.is_stale
    assert [e.id for e in await cache.get()] == [created.id]

    await cache.update(created.id, {"name": "Vessel 2"})
    assert [e.name for e in await cache.get()] == ["Vessel 2"]

    await cache.delete(created.id)
    assert await cache.get() == []


@pytest.mark.asyncio
async def test_cache_serves_cached_copy_until_invalidated(api):
    cache = EquipmentCache(api)
    await cache.get()

    # A write that bypasses the cache isn't visible until invalidation
    await api.add_equipment({"name": "Mixer", "type": "Mixer", "status": "Active"})
    assert await cache.get() == []

    cache.invalidate()
    assert len(await cache.get()) == 1


@pytest.mark.asyncio
async def test_cache_untouched_by_failed_mutation(api):
    cache = EquipmentCache(api)
    await cache.add({"name": "Mixer", "type": "Mixer", "status": "Active"})
    before = await cache.get()

    with pytest.raises(ApiClientError):
        await cache.add({"name": "Pump", "type": "Pump", "status": "Active"})

    assert not cache.is_stale
    assert await cache.get() is before


@pytest.mark.asyncio
async def test_cache_left_stale_when_refresh_fails():
    item = {
        "id": 7,
        "name": "Pump 7",
        "type": "Pump",
        "status": "Active",
        "lastCleanedDate": None,
        "createdAt": "2025-01-01T00:00:00.000Z",
        "updatedAt": "2025-01-01T00:00:00.000Z",
    }

    def handler(request: httpx.Request) -> httpx.Response:
        if request.method == "POST":
            return httpx.Response(201, json={"success": True, "data": item})
        if request.method == "DELETE":
            return httpx.Response(200, json={"success": True, "id": 7})
        return httpx.Response(500, json={"success": False, "error": "Failed to fetch equipment"})

    transport = httpx.MockTransport(handler)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as http:
        cache = EquipmentCache(EquipmentApiClient(client=http))

        created = await cache.add({"name": "Pump 7", "type": "Pump", "status": "Active"})
        assert created.id == 7
        assert cache.is_stale

        await cache.delete(7)
        assert cache.is_stale

        with pytest.raises(ApiClientError, match="^Failed to fetch equipment$"):
            await cache.get()
