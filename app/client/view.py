"""
Filtered and sorted table view over the cached equipment list.

filter_and_sort is a pure function of its six inputs.
"""

from typing import Literal, Sequence

from app.schemas.equipment import EquipmentResponse

SortField = Literal["name", "type", "status", "lastCleanedDate"]
SortDirection = Literal["asc", "desc"]

ALL = "all"

_SORT_ATTRIBUTES = {
    "name": "name",
    "type": "type",
    "status": "status",
    "lastCleanedDate": "last_cleaned_date",
}


def _matches_search(item: EquipmentResponse, query: str) -> bool:
    return query in item.name.lower() or query in item.type.lower() or query in item.status.lower()


def filter_and_sort(
    equipment: Sequence[EquipmentResponse],
    search_query: str = "",
    type_filter: str = ALL,
    status_filter: str = ALL,
    sort_field: SortField = "name",
    sort_direction: SortDirection = "asc",
) -> list[EquipmentResponse]:
    """
    Apply search, type/status filters and sorting.

    Search is a case-insensitive substring match on name, type and status.
    Missing values sort as empty strings. Ties keep their input order.
    """
    if sort_field not in _SORT_ATTRIBUTES:
        raise ValueError(f"Unknown sort field: {sort_field}")

    result = list(equipment)

    if search_query:
        query = search_query.lower()
        result = [item for item in result if _matches_search(item, query)]

    if type_filter != ALL:
        result = [item for item in result if item.type == type_filter]

    if status_filter != ALL:
        result = [item for item in result if item.status == status_filter]

    attribute = _SORT_ATTRIBUTES[sort_field]
    result.sort(
        key=lambda item: (getattr(item, attribute) or "").lower(),
        reverse=sort_direction == "desc",
    )
    return result


def toggle_sort(
    current_field: SortField, current_direction: SortDirection, field: SortField
) -> tuple[SortField, SortDirection]:
    """Clicking the active column flips direction; another column starts ascending."""
    if field == current_field:
        return field, "desc" if current_direction == "asc" else "asc"
    return field, "asc"


def format_count(visible: int, total: int) -> str:
    """Table heading count, e.g. "3" or "3 of 5"."""
    if visible != total:
        return f"{visible} of {total}"
    return str(visible)
