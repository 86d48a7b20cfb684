"""
Equipment API router.
Handles the CRUD operations at /api/equipment.

The store is created once at startup and reached through get_store();
handlers validate input, make one store call and wrap the result in the
response envelope.
"""

import logging
from typing import Any, Optional

from fastapi import APIRouter, Body, Depends, Request

from app.exceptions import NotFoundError, StoreError
from app.schemas.equipment import EquipmentCreate, EquipmentUpdate
from app.services.equipment_store import EquipmentStore
from app.services.response_builders import build_list_envelope, build_record_envelope
from app.services.validation import parse_equipment_id, validate_create, validate_update

logger = logging.getLogger(__name__)

router = APIRouter()


def get_store(request: Request) -> EquipmentStore:
    """Dependency returning the store attached to the application."""
    return request.app.state.store


@router.get("/equipment")
async def get_equipment(store: EquipmentStore = Depends(get_store)):
    """
    Get all equipment, newest first.

    Matches: GET /api/equipment
    """
    try:
        equipment_list = await store.get_all()
    except StoreError as e:
        logger.exception("Error fetching equipment")
        raise StoreError("Failed to fetch equipment", e.extra_detail) from e

    return build_list_envelope(equipment_list)


@router.post("/equipment", status_code=201)
async def create_equipment(
    data: Optional[EquipmentCreate] = Body(None),
    store: EquipmentStore = Depends(get_store),
):
    """
    Create new equipment.

    All validation failures are reported together.
    Matches: POST /api/equipment
    """
    values = validate_create(data or EquipmentCreate())

    try:
        equipment = await store.create_record(**values)
    except StoreError as e:
        logger.exception("Error creating equipment")
        raise StoreError("Failed to create equipment", e.extra_detail) from e

    return build_record_envelope(equipment, "Equipment created successfully")


@router.put("/equipment/{equipment_id}")
async def update_equipment(
    equipment_id: str,
    data: Any = Body(None),
    store: EquipmentStore = Depends(get_store),
):
    """
    Update some fields of an equipment.

    Validation stops at the first bad field.
    Matches: PUT /api/equipment/:id
    """
    parsed_id = parse_equipment_id(equipment_id)

    try:
        existing = await store.get_by_id(parsed_id)
        if existing is None:
            raise NotFoundError("Equipment", parsed_id)

        # Anything but a JSON object supplies no fields
        body = EquipmentUpdate.model_validate(data) if isinstance(data, dict) else EquipmentUpdate()
        changes = validate_update(body)
        equipment = await store.update_fields(parsed_id, changes)
    except StoreError as e:
        logger.exception("Error updating equipment %s", parsed_id)
        raise StoreError("Failed to update equipment", e.extra_detail) from e

    return build_record_envelope(equipment, "Equipment updated successfully")


@router.delete("/equipment/{equipment_id}")
async def delete_equipment(
    equipment_id: str,
    store: EquipmentStore = Depends(get_store),
):
    """
    Delete equipment.

    Matches: DELETE /api/equipment/:id
    """
    parsed_id = parse_equipment_id(equipment_id)

    try:
        deleted = await store.delete_by_id(parsed_id)
    except StoreError as e:
        logger.exception("Error deleting equipment %s", parsed_id)
        raise StoreError("Failed to delete equipment", e.extra_detail) from e

    if not deleted:
        raise NotFoundError("Equipment", parsed_id)

    return {"success": True, "message": "Equipment deleted successfully", "id": parsed_id}
