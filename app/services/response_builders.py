"""
Shared response builder utilities.

Every equipment endpoint answers with the same envelope:
    {"success": bool, "data"?: ..., "count"?: int, "message"?: str, "id"?: int}
Errors use the same shape via AppError.to_content().
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Iterable

from app.schemas.equipment import EquipmentResponse

if TYPE_CHECKING:
    from app.models.equipment import Equipment


def build_equipment_response(equipment: Equipment) -> dict:
    """Build the camelCase JSON dict for one equipment row."""
    return EquipmentResponse.model_validate(equipment).model_dump(mode="json", by_alias=True)


def build_list_envelope(equipment_list: Iterable[Equipment]) -> dict[str, Any]:
    data = [build_equipment_response(e) for e in equipment_list]
    return {"success": True, "count": len(data), "data": data}


def build_record_envelope(equipment: Equipment, message: str) -> dict[str, Any]:
    return {"success": True, "message": message, "data": build_equipment_response(equipment)}
