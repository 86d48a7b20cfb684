"""
Health check endpoint.
"""

from fastapi import APIRouter
from pydantic import BaseModel

router = APIRouter()


class HealthResponse(BaseModel):
    """Health check response model."""

    status: str
    message: str


@router.get("/health", response_model=HealthResponse)
async def health_check():
    """Liveness check. Does not touch the database."""
    return HealthResponse(status="OK", message="Equipment Tracker API is running")
