"""
Services package for business logic.
"""

from app.services.equipment_store import UNSET, EquipmentChanges, EquipmentStore

__all__ = [
    "EquipmentStore",
    "EquipmentChanges",
    "UNSET",
]
