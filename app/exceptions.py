"""
Custom exception hierarchy for consistent error responses.

Usage:
    from app.exceptions import NotFoundError, StoreError, ValidationError

    raise ValidationError("Validation failed", details=["name must be a non-empty string"])
    raise NotFoundError("Equipment", equipment_id)
    raise StoreError("Failed to fetch equipment", str(exc))

These exceptions are caught by the handler registered in main.py and
converted to the response envelope:
    {"success": false, "error": "<message>", "details": [...], "id": ..., "message": "..."}
where the optional keys only appear when the error carries them.
"""

from typing import Any

from fastapi import HTTPException, status


class AppError(HTTPException):
    """Base application error with a default status code."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str, detail: str | None = None):
        super().__init__(
            status_code=self.__class__.status_code,
            detail=message,
        )
        self.message = message
        self.extra_detail = detail

    def to_content(self) -> dict[str, Any]:
        """Build the JSON envelope for this error."""
        content: dict[str, Any] = {"success": False, "error": self.message}
        if self.extra_detail is not None:
            content["message"] = self.extra_detail
        return content


class ValidationError(AppError):
    """Validation error (400)."""

    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self, message: str, details: list[str] | None = None):
        super().__init__(message)
        self.details = details

    def to_content(self) -> dict[str, Any]:
        content = super().to_content()
        if self.details is not None:
            content["details"] = list(self.details)
        return content


class NotFoundError(AppError):
    """Resource not found (404)."""

    status_code = status.HTTP_404_NOT_FOUND

    def __init__(self, resource: str, resource_id: int | None = None):
        super().__init__(f"{resource} not found")
        self.resource_id = resource_id

    def to_content(self) -> dict[str, Any]:
        content = super().to_content()
        if self.resource_id is not None:
            content["id"] = self.resource_id
        return content


class StoreError(AppError):
    """Persistence failure (500). The driver message is passed through as-is."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str = "Internal server error", detail: str | None = None):
        super().__init__(message, detail)


class ConstraintViolation(StoreError):
    """A row was rejected by a storage-level constraint."""
