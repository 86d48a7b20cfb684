"""
API routers package.
"""

from app.routers import equipment, health

__all__ = [
    "equipment",
    "health",
]
