"""
Pydantic schemas for Equipment.

Request bodies are deliberately loose (every field is `Any`): the equipment
router owns validation so it can answer with its own error envelope and
collect every failure on create.
"""

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field

from app.schemas.base import BaseSchema, DateTimeJS


class EquipmentResponse(BaseSchema):
    """Response model for equipment."""

    id: int
    name: str
    type: str
    status: str
    last_cleaned_date: Optional[str] = None
    created_at: Optional[DateTimeJS] = None
    updated_at: Optional[DateTimeJS] = None


class EquipmentCreate(BaseModel):
    """Request model for creating equipment."""

    model_config = ConfigDict(extra="ignore")

    name: Any = None
    type: Any = None
    status: Any = None
    last_cleaned_date: Any = Field(None, alias="lastCleanedDate")


class EquipmentUpdate(BaseModel):
    """
    Request model for updating equipment.

    Only keys actually sent are in `model_fields_set`, which keeps
    "absent" apart from an explicit null.
    """

    model_config = ConfigDict(extra="ignore")

    name: Any = None
    type: Any = None
    status: Any = None
    last_cleaned_date: Any = Field(None, alias="lastCleanedDate")
