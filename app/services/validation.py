"""
Input validation for equipment requests.

Create collects every failure before answering; update stops at the first
bad field (name, type, status, lastCleanedDate in that order). Both
behaviours are part of the API contract.
"""

import math
import re
from typing import Any

from app.exceptions import NotFoundError, ValidationError
from app.models.equipment import EQUIPMENT_STATUSES, EQUIPMENT_TYPES
from app.schemas.equipment import EquipmentCreate, EquipmentUpdate
from app.services.equipment_store import UNSET, EquipmentChanges

# Syntactic only: "2025-13-40" passes
DATE_PATTERN = re.compile(r"\d{4}-\d{2}-\d{2}", re.ASCII)

ID_PATTERN = re.compile(r"\s*[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?\s*", re.ASCII)
INTEGER_PATTERN = re.compile(r"[+-]?\d+", re.ASCII)

SQLITE_INT_MIN = -(2**63)
SQLITE_INT_MAX = 2**63 - 1

TYPES_LIST = ", ".join(EQUIPMENT_TYPES)
STATUSES_LIST = ", ".join(EQUIPMENT_STATUSES)


def is_valid_date_string(value: Any) -> bool:
    return isinstance(value, str) and DATE_PATTERN.fullmatch(value) is not None


def _is_non_empty_string(value: Any) -> bool:
    return isinstance(value, str) and value.strip() != ""


def validate_create(data: EquipmentCreate) -> dict[str, Any]:
    """
    Check a create request and return the values to store.

    Raises ValidationError listing every failed field.
    """
    errors = []

    if not _is_non_empty_string(data.name):
        errors.append("name is required and must be a non-empty string")

    if data.type not in EQUIPMENT_TYPES:
        errors.append(f"type is required and must be one of: {TYPES_LIST}")

    if data.status not in EQUIPMENT_STATUSES:
        errors.append(f"status is required and must be one of: {STATUSES_LIST}")

    # Falsy dates (missing, null, "") are stored as null
    if data.last_cleaned_date and not is_valid_date_string(data.last_cleaned_date):
        errors.append("lastCleanedDate must be in YYYY-MM-DD format")

    if errors:
        raise ValidationError("Validation failed", details=errors)

    return {
        "name": data.name.strip(),
        "type": data.type,
        "status": data.status,
        "last_cleaned_date": data.last_cleaned_date or None,
    }


def validate_update(data: EquipmentUpdate) -> EquipmentChanges:
    """
    Check an update request and turn it into an EquipmentChanges.

    Fails fast on the first invalid field, and when nothing was supplied.
    """
    supplied = data.model_fields_set

    name = UNSET
    if "name" in supplied:
        if not _is_non_empty_string(data.name):
            raise ValidationError("Validation failed", details=["name must be a non-empty string"])
        name = data.name.strip()

    type_ = UNSET
    if "type" in supplied:
        if data.type not in EQUIPMENT_TYPES:
            raise ValidationError("Validation failed", details=[f"type must be one of: {TYPES_LIST}"])
        type_ = data.type

    status = UNSET
    if "status" in supplied:
        if data.status not in EQUIPMENT_STATUSES:
            raise ValidationError("Validation failed", details=[f"status must be one of: {STATUSES_LIST}"])
        status = data.status

    last_cleaned_date = UNSET
    if "last_cleaned_date" in supplied:
        # Explicit null clears the date
        if data.last_cleaned_date is not None and not is_valid_date_string(data.last_cleaned_date):
            raise ValidationError(
                "Validation failed",
                details=["lastCleanedDate must be in YYYY-MM-DD format"],
            )
        last_cleaned_date = data.last_cleaned_date

    changes = EquipmentChanges(
        name=name,
        type=type_,
        status=status,
        last_cleaned_date=last_cleaned_date,
    )
    if changes.is_empty():
        raise ValidationError("No fields to update")
    return changes


def parse_equipment_id(raw: str) -> int:
    """
    Parse an id path segment.

    Anything that isn't a plain ASCII decimal number is a ValidationError.
    A number that can't be a stored id (fractional, or outside SQLite's
    64-bit INTEGER range) is reported as not found with its integer part
    echoed back.
    """
    if ID_PATTERN.fullmatch(raw) is None:
        raise ValidationError("Invalid equipment ID")

    text = raw.strip()
    if INTEGER_PATTERN.fullmatch(text):
        value = int(text)
    else:
        number = float(text)
        if math.isinf(number):
            raise ValidationError("Invalid equipment ID")
        if not number.is_integer():
            raise NotFoundError("Equipment", int(number))
        value = int(number)

    if not SQLITE_INT_MIN <= value <= SQLITE_INT_MAX:
        raise NotFoundError("Equipment", value)

    return value
