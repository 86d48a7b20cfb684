"""
HTTP client for the equipment API, plus the list cache the UI reads from.

The cache never patches itself: after any successful mutation it drops the
cached list and fetches it again. A failed refresh leaves the cache stale
rather than failing the mutation that already succeeded.
"""

import logging
from typing import Any, Optional

import httpx

from app.schemas.equipment import EquipmentResponse


logger = logging.getLogger(__name__)

API_BASE = "/api"


class ApiClientError(Exception):
    """Raised when the API answers with an error envelope."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


def _json_or_empty(response: httpx.Response) -> dict:
    try:
        body = response.json()
    except ValueError:
        return {}
    return body if isinstance(body, dict) else {}


def _raise_for_envelope(response: httpx.Response, fallback: str, use_details: bool = True) -> dict:
    """Return the envelope, or raise ApiClientError with the best message available."""
    body = _json_or_empty(response)
    if response.is_success and body.get("success"):
        return body

    message = body.get("error")
    if not message and use_details and body.get("details"):
        message = ", ".join(body["details"])
    raise ApiClientError(message or fallback, status_code=response.status_code)


class EquipmentApiClient:
    """Async client for /api/equipment."""

    def __init__(self, base_url: str = "http://localhost:5000", client: Optional[httpx.AsyncClient] = None):
        self._client = client or httpx.AsyncClient(base_url=base_url)
        self._owns_client = client is None

    async def __aenter__(self) -> "EquipmentApiClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    async def get_equipment(self) -> list[EquipmentResponse]:
        response = await self._client.get(f"{API_BASE}/equipment")
        body = _raise_for_envelope(response, "Failed to fetch equipment", use_details=False)
        return [EquipmentResponse.model_validate(item) for item in body.get("data", [])]

    async def add_equipment(self, equipment: dict[str, Any]) -> EquipmentResponse:
        response = await self._client.post(f"{API_BASE}/equipment", json=equipment)
        body = _raise_for_envelope(response, "Failed to add equipment")
        return EquipmentResponse.model_validate(body["data"])

    async def update_equipment(self, equipment_id: int, equipment: dict[str, Any]) -> EquipmentResponse:
        response = await self._client.put(f"{API_BASE}/equipment/{equipment_id}", json=equipment)
        body = _raise_for_envelope(response, "Failed to update equipment")
        return EquipmentResponse.model_validate(body["data"])

    async def delete_equipment(self, equipment_id: int) -> None:
        response = await self._client.delete(f"{API_BASE}/equipment/{equipment_id}")
        _raise_for_envelope(response, "Failed to delete equipment", use_details=False)


class EquipmentCache:
    """Cached copy of the full equipment list."""

    def __init__(self, api: EquipmentApiClient):
        self.api = api
        self._items: Optional[list[EquipmentResponse]] = None

    @property
    def is_stale(self) -> bool:
        return self._items is None

    def invalidate(self) -> None:
        self._items = None

    async def get(self) -> list[EquipmentResponse]:
        """Return the cached list, fetching it first if stale."""
        if self._items is None:
            self._items = await self.api.get_equipment()
        return self._items

    async def _refetch(self) -> None:
        """Drop the list and fetch it again; on failure the cache stays stale."""
        self.invalidate()
        try:
            await self.get()
        except (ApiClientError, httpx.HTTPError) as e:
            logger.warning("Equipment list refresh failed, next read will refetch: %s", e)

    async def add(self, equipment: dict[str, Any]) -> EquipmentResponse:
        created = await self.api.add_equipment(equipment)
        await self._refetch()
        return created

    async def update(self, equipment_id: int, equipment: dict[str, Any]) -> EquipmentResponse:
        updated = await self.api.update_equipment(equipment_id, equipment)
        await self._refetch()
        return updated

    async def delete(self, equipment_id: int) -> None:
        await self.api.delete_equipment(equipment_id)
        await self._refetch()
