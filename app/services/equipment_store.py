"""
Equipment record store.

Owns the engine and session factory for the equipment table. One instance
is built at startup and handed to the application (see main.create_app);
there is no module-level store.
"""

import logging
from dataclasses import dataclass, fields
from typing import Any, Optional

from sqlalchemy import delete, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from app.config import Settings
from app.database import build_engine, build_session_factory, close_db, init_db
from app.exceptions import ConstraintViolation, NotFoundError, StoreError
from app.models.equipment import Equipment, utcnow

logger = logging.getLogger(__name__)


class _Unset:
    """Marker for a field that was not supplied."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNSET"

    def __bool__(self) -> bool:
        return False


UNSET: Any = _Unset()


@dataclass(frozen=True)
class EquipmentChanges:
    """
    Partial update for an equipment row.

    Each field is either UNSET (leave the column alone) or the new value.
    `last_cleaned_date=None` clears the date, which is not the same as UNSET.
    """

    name: Any = UNSET
    type: Any = UNSET
    status: Any = UNSET
    last_cleaned_date: Any = UNSET

    def present(self) -> dict[str, Any]:
        """Return only the supplied fields."""
        return {f.name: getattr(self, f.name) for f in fields(self) if getattr(self, f.name) is not UNSET}

    def is_empty(self) -> bool:
        return not self.present()


class EquipmentStore:
    """CRUD primitives over the equipment table."""

    def __init__(self, engine: AsyncEngine):
        self.engine = engine
        self._session_factory: async_sessionmaker[AsyncSession] = build_session_factory(engine)

    @classmethod
    def from_url(cls, database_url: str, echo: bool = False) -> "EquipmentStore":
        return cls(build_engine(database_url, echo=echo))

    @classmethod
    def from_settings(cls, settings: Settings) -> "EquipmentStore":
        return cls.from_url(settings.async_database_url, echo=settings.db_echo)

    async def initialize(self) -> None:
        """Create the equipment table if it doesn't exist."""
        await init_db(self.engine)

    async def close(self) -> None:
        await close_db(self.engine)

    async def create_record(
        self,
        name: str,
        type: str,
        status: str,
        last_cleaned_date: Optional[str] = None,
    ) -> Equipment:
        """Insert a row and return it as stored, with id and timestamps assigned."""
        now = utcnow()
        equipment = Equipment(
            name=name,
            type=type,
            status=status,
            last_cleaned_date=last_cleaned_date,
            created_at=now,
            updated_at=now,
        )
        async with self._session_factory() as session:
            try:
                session.add(equipment)
                await session.commit()
                await session.refresh(equipment)
            except IntegrityError as e:
                await session.rollback()
                raise ConstraintViolation("Failed to create equipment", str(e.orig)) from e
            except SQLAlchemyError as e:
                await session.rollback()
                raise StoreError("Failed to create equipment", str(e)) from e

        logger.debug("Created equipment %s", equipment.id)
        return equipment

    async def get_all(self) -> list[Equipment]:
        """All rows, newest (highest id) first."""
        async with self._session_factory() as session:
            try:
                result = await session.execute(select(Equipment).order_by(Equipment.id.desc()))
            except SQLAlchemyError as e:
                raise StoreError("Failed to fetch equipment", str(e)) from e
            return list(result.scalars().all())

    async def get_by_id(self, equipment_id: int) -> Optional[Equipment]:
        async with self._session_factory() as session:
            try:
                result = await session.execute(select(Equipment).where(Equipment.id == equipment_id))
            except SQLAlchemyError as e:
                raise StoreError("Failed to fetch equipment", str(e)) from e
            return result.scalar_one_or_none()

    async def update_fields(self, equipment_id: int, changes: EquipmentChanges) -> Equipment:
        """
        Apply the supplied fields to a row and bump updated_at.

        Raises NotFoundError if the row doesn't exist.
        """
        async with self._session_factory() as session:
            try:
                result = await session.execute(select(Equipment).where(Equipment.id == equipment_id))
                equipment = result.scalar_one_or_none()
                if equipment is None:
                    raise NotFoundError("Equipment", equipment_id)

                for field_name, value in changes.present().items():
                    setattr(equipment, field_name, value)
                equipment.updated_at = utcnow()

                await session.commit()
                await session.refresh(equipment)
            except IntegrityError as e:
                await session.rollback()
                raise ConstraintViolation("Failed to update equipment", str(e.orig)) from e
            except SQLAlchemyError as e:
                await session.rollback()
                raise StoreError("Failed to update equipment", str(e)) from e

        return equipment

    async def delete_by_id(self, equipment_id: int) -> bool:
        """Hard delete. Returns whether a row was removed."""
        async with self._session_factory() as session:
            try:
                result = await session.execute(delete(Equipment).where(Equipment.id == equipment_id))
                await session.commit()
            except SQLAlchemyError as e:
                await session.rollback()
                raise StoreError("Failed to delete equipment", str(e)) from e

        return result.rowcount > 0
