"""
Base schema classes with custom serialization.

Timestamps are stored as naive UTC datetimes and serialized the way
JavaScript's Date.toISOString() prints them, e.g. "2025-12-08T09:01:16.715Z",
so the web client can hand them straight to `new Date(...)`.
"""

from datetime import datetime, timezone
from typing import Annotated

from pydantic import BaseModel, ConfigDict, PlainSerializer
from pydantic.alias_generators import to_camel


def serialize_datetime_js(dt: datetime | None) -> str | None:
    """Serialize datetime to match JavaScript's toISOString()."""
    if dt is None:
        return None

    if dt.tzinfo is not None:
        dt = dt.astimezone(timezone.utc)

    formatted = dt.strftime("%Y-%m-%dT%H:%M:%S")
    ms = dt.microsecond // 1000
    return f"{formatted}.{ms:03d}Z"


DateTimeJS = Annotated[datetime, PlainSerializer(serialize_datetime_js, return_type=str)]


class BaseSchema(BaseModel):
    """
    Base schema class with standard configuration.
    Fields are declared in snake_case and exposed in camelCase.
    """

    model_config = ConfigDict(
        from_attributes=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )
