"""
SQLAlchemy models package.
All models inherit from the Base class defined in database.py.
"""

from app.models.equipment import EQUIPMENT_STATUSES, EQUIPMENT_TYPES, Equipment

__all__ = [
    "Equipment",
    "EQUIPMENT_TYPES",
    "EQUIPMENT_STATUSES",
]
