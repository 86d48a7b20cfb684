"""Tests for the equipment table definition and storage-level constraints."""

import pytest
from sqlalchemy import text
from sqlalchemy.exc import IntegrityError


def test_equipment_model_table():
    """Equipment maps to the equipment table with camelCase column names."""
    from app.models.equipment import Equipment

    assert Equipment.__tablename__ == "equipment"
    columns = set(Equipment.__table__.columns.keys())
    assert columns == {"id", "name", "type", "status", "lastCleanedDate", "createdAt", "updatedAt"}


def test_enumerations():
    from app.models import EQUIPMENT_STATUSES, EQUIPMENT_TYPES

    assert EQUIPMENT_TYPES == ("Machine", "Vessel", "Tank", "Mixer")
    assert EQUIPMENT_STATUSES == ("Active", "Inactive", "Under Maintenance")


@pytest.mark.asyncio
async def test_check_constraint_rejects_raw_insert(store):
    """The database itself refuses a type outside the enumeration."""
    async with store.engine.begin() as conn:
        with pytest.raises(IntegrityError):
            await conn.execute(
                text(
                    'INSERT INTO equipment (name, type, status, "createdAt", "updatedAt") '
                    "VALUES ('Pump 1', 'Pump', 'Active', '2025-01-01', '2025-01-01')"
                )
            )


@pytest.mark.asyncio
async def test_check_constraint_rejects_raw_status_update(store):
    """Status is checked on UPDATE as well as INSERT."""
    created = await store.create_record("Tank 1", "Tank", "Active")

    async with store.engine.begin() as conn:
        with pytest.raises(IntegrityError):
            await conn.execute(
                text("UPDATE equipment SET status = 'Broken' WHERE id = :id"),
                {"id": created.id},
            )
