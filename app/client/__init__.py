"""
Client-side logic of the web UI: API client, list cache, form rules and
the filtered/sorted table view.
"""

from app.client.api import ApiClientError, EquipmentApiClient, EquipmentCache
from app.client.form import build_equipment_input, validate_form
from app.client.view import filter_and_sort, format_count, toggle_sort

__all__ = [
    "ApiClientError",
    "EquipmentApiClient",
    "EquipmentCache",
    "build_equipment_input",
    "validate_form",
    "filter_and_sort",
    "format_count",
    "toggle_sort",
]
