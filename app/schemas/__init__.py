"""
Pydantic schemas for request/response validation.
"""

from app.schemas.equipment import (
    EquipmentResponse,
    EquipmentCreate,
    EquipmentUpdate,
)

__all__ = [
    # Equipment
    "EquipmentResponse",
    "EquipmentCreate",
    "EquipmentUpdate",
]
