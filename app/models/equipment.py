"""
Equipment model.
Maps to the equipment table in SQLite.
"""

from datetime import datetime, timezone

from sqlalchemy import CheckConstraint, DateTime, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from app.database import Base

EQUIPMENT_TYPES = ("Machine", "Vessel", "Tank", "Mixer")
EQUIPMENT_STATUSES = ("Active", "Inactive", "Under Maintenance")


def utcnow() -> datetime:
    """Current UTC time as a naive datetime (SQLite stores no offset)."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


def _in_clause(column: str, values: tuple[str, ...]) -> str:
    quoted = ", ".join(f"'{v}'" for v in values)
    return f"{column} IN ({quoted})"


class Equipment(Base):
    """Equipment model - a single tracked machine, vessel, tank or mixer."""

    __tablename__ = "equipment"
    __table_args__ = (
        CheckConstraint(_in_clause("type", EQUIPMENT_TYPES), name="ck_equipment_type"),
        CheckConstraint(_in_clause("status", EQUIPMENT_STATUSES), name="ck_equipment_status"),
        # AUTOINCREMENT: ids of deleted rows are never handed out again
        {"sqlite_autoincrement": True},
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(Text, nullable=False)
    type: Mapped[str] = mapped_column(Text, nullable=False)
    status: Mapped[str] = mapped_column(Text, nullable=False)
    last_cleaned_date: Mapped[str | None] = mapped_column("lastCleanedDate", String(10), nullable=True)
    created_at: Mapped[datetime] = mapped_column("createdAt", DateTime, default=utcnow, nullable=False)
    updated_at: Mapped[datetime] = mapped_column("updatedAt", DateTime, default=utcnow, nullable=False)

    def __repr__(self) -> str:
        return f"<Equipment {self.id} {self.name} ({self.type})>"
