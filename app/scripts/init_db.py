"""
Database initialization for fresh installs.

Creates the equipment table (idempotent - safe to run multiple times) and,
with --seed, inserts a handful of sample rows into an empty table.

Usage:
    python -m app.scripts.init_db [--seed] [--database-url URL]
"""

import argparse
import asyncio
import logging
import sys
from typing import Optional

from app.config import get_settings
from app.exceptions import StoreError
from app.logging_conf import configure_logging
from app.services.equipment_store import EquipmentStore

logger = logging.getLogger(__name__)

SAMPLE_EQUIPMENT = [
    {"name": "Mixer A1", "type": "Mixer", "status": "Active", "last_cleaned_date": "2025-01-10"},
    {"name": "Storage Tank 3", "type": "Tank", "status": "Inactive", "last_cleaned_date": None},
    {"name": "Reactor Vessel R2", "type": "Vessel", "status": "Under Maintenance", "last_cleaned_date": "2024-11-28"},
    {"name": "Filling Machine F1", "type": "Machine", "status": "Active", "last_cleaned_date": "2025-02-03"},
]


async def seed_sample_data(store: EquipmentStore) -> int:
    """Insert sample rows if the table is empty. Returns how many were added."""
    existing = await store.get_all()
    if existing:
        logger.info("Table already holds %d rows, skipping seed", len(existing))
        return 0

    for row in SAMPLE_EQUIPMENT:
        await store.create_record(**row)
    logger.info("Seeded %d sample rows", len(SAMPLE_EQUIPMENT))
    return len(SAMPLE_EQUIPMENT)


async def main(seed: bool = False, database_url: Optional[str] = None) -> int:
    """Run database initialization."""
    settings = get_settings()
    configure_logging(settings.log_level)

    if database_url:
        store = EquipmentStore.from_url(database_url, echo=settings.db_echo)
    else:
        store = EquipmentStore.from_settings(settings)

    try:
        await store.initialize()
        if seed:
            await seed_sample_data(store)
    except StoreError as e:
        logger.error("Database initialization failed: %s (%s)", e.message, e.extra_detail)
        return 1
    finally:
        await store.close()

    logger.info("Database initialization completed successfully")
    return 0


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Create the equipment database")
    parser.add_argument("--seed", action="store_true", help="Insert sample equipment into an empty table")
    parser.add_argument("--database-url", help="Override the configured database URL")
    args = parser.parse_args()

    sys.exit(asyncio.run(main(seed=args.seed, database_url=args.database_url)))
