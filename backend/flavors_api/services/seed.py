"""
Acme Flavors Backend: Storage Schema Initializer
================================================

What:  Rebuilds the `flavors` table and inserts the seed rows.
Why:   The service starts from a known state on every boot.
When:  Once, from the lifespan, before the listener is bound.

This step is destructive: whatever was stored before the restart is lost.
Any failure propagates to the lifespan, which logs it and aborts startup.
"""

import logging
from typing import Sequence, Tuple

from sqlalchemy import insert

from flavors_api.database import Database
from flavors_api.models.flavor import Flavor

logger = logging.getLogger(__name__)

# (name, is_favorite), inserted in this order so ids are 1, 2, 3
SEED_FLAVORS: Sequence[Tuple[str, bool]] = (
    ("Vanilla", True),
    ("Chocolate", False),
    ("Strawberry", False),
)


async def rebuild_schema(database: Database) -> None:
    """
    Drop the flavors table if present, create it fresh, insert the seeds.

    Runs inside one transaction (engine.begin); the table exists and holds
    exactly the seed rows when this returns.
    """
    table = Flavor.__table__
    async with database.engine.begin() as conn:
        await conn.run_sync(table.drop, checkfirst=True)
        await conn.run_sync(table.create)
        await conn.execute(
            insert(table),
            [{"name": name, "is_favorite": fav} for name, fav in SEED_FLAVORS],
        )
    logger.info("Rebuilt table '%s' with %d seed rows", table.name, len(SEED_FLAVORS))


async def ensure_schema(database: Database) -> None:
    """Create the flavors table only if it is missing; existing rows are kept."""
    async with database.engine.begin() as conn:
        await conn.run_sync(Flavor.__table__.create, checkfirst=True)
    logger.info("Table '%s' ready (seeding disabled)", Flavor.__tablename__)
