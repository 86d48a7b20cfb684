"""
Equipment form rules.

These run before anything is sent. They are stricter than the server: the
name length limits and the no-future-date rule exist only here.
"""

from datetime import date
from typing import Any, Optional

from app.services.validation import DATE_PATTERN

NAME_MIN_LENGTH = 2
NAME_MAX_LENGTH = 100


def validate_form(name: str, last_cleaned_date: str = "", today: Optional[date] = None) -> dict[str, str]:
    """
    Validate the form fields.

    Returns a mapping of field name to error message; empty means valid.
    """
    errors: dict[str, str] = {}

    trimmed = name.strip()
    if not trimmed:
        errors["name"] = "Name is required"
    elif len(trimmed) < NAME_MIN_LENGTH:
        errors["name"] = f"Name must be at least {NAME_MIN_LENGTH} characters"
    elif len(trimmed) > NAME_MAX_LENGTH:
        errors["name"] = f"Name must be less than {NAME_MAX_LENGTH} characters"

    if last_cleaned_date:
        if not DATE_PATTERN.fullmatch(last_cleaned_date):
            errors["lastCleanedDate"] = "Invalid date format"
        else:
            try:
                cleaned = date.fromisoformat(last_cleaned_date)
            except ValueError:
                # Not a calendar date; only the format is checked
                cleaned = None
            if cleaned is not None and cleaned > (today or date.today()):
                errors["lastCleanedDate"] = "Date cannot be in the future"

    return errors


def build_equipment_input(name: str, type: str, status: str, last_cleaned_date: str = "") -> dict[str, Any]:
    """Build the request body the form submits."""
    return {
        "name": name.strip(),
        "type": type,
        "status": status,
        "lastCleanedDate": last_cleaned_date or None,
    }
