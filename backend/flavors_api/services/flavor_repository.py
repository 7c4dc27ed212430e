"""
Acme Flavors Backend: Flavor Repository
=======================================

What:  The five parameterized queries behind /api/flavors.
Why:   Keeps SQL out of the route handlers; routes only map outcomes to HTTP.
How:   Each method issues exactly one statement through the injected
       AsyncSession and returns a Result. Writes commit their own statement;
       there is no transaction spanning several statements.
Who:   Constructed per request by routes/flavors.py (get_flavor_repository).

Query plans:
    list:   SELECT * FROM flavors                          (store order)
    get:    SELECT * FROM flavors WHERE id = :id
    create: INSERT INTO flavors (name, is_favorite) ... RETURNING *
    update: UPDATE flavors SET name, is_favorite, updated_at ... RETURNING *
    delete: DELETE FROM flavors WHERE id = :id RETURNING *

Error Handling Strategy:
    SQLAlchemyError (connection loss, constraint violation, bad parameter)
    is logged, the session is rolled back, and Result.failed(error) is
    returned. Anything else is a bug and propagates to the catch-all handler.
"""

import logging
from typing import List

from sqlalchemy import delete, func, insert, select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from flavors_api.models.flavor import Flavor
from flavors_api.schemas.flavor import FlavorCreate, FlavorResponse, FlavorUpdate
from flavors_api.services.result import Result

logger = logging.getLogger(__name__)


class FlavorRepository:
    """
    Data access for the `flavors` table.

    Responsibilities:
        - list_flavors(): every row, no ORDER BY
        - get_flavor(): single row or not-found
        - create_flavor(): insert and return the populated row
        - update_flavor(): overwrite name/is_favorite, return the new row
        - delete_flavor(): remove and return the row as it was
    """

    def __init__(self, session: AsyncSession):
        self.session = session

    async def list_flavors(self) -> Result[List[FlavorResponse]]:
        try:
            result = await self.session.execute(select(Flavor))
            flavors = [
                FlavorResponse.model_validate(flavor)
                for flavor in result.scalars().all()
            ]
        except SQLAlchemyError as e:
            return await self._failed("list", e)
        return Result.ok(flavors)

    async def get_flavor(self, flavor_id: int) -> Result[FlavorResponse]:
        try:
            result = await self.session.execute(
                select(Flavor).where(Flavor.id == flavor_id)
            )
            flavor = result.scalar_one_or_none()
        except SQLAlchemyError as e:
            return await self._failed("get", e, flavor_id)
        return self._one(flavor)

    async def create_flavor(self, data: FlavorCreate) -> Result[FlavorResponse]:
        """
        Insert a new row and return it with its generated id and timestamps.

        The store fills in id, created_at and updated_at; both timestamps come
        from the same CURRENT_TIMESTAMP evaluation so they are equal.
        """
        try:
            result = await self.session.execute(
                insert(Flavor)
                .values(name=data.name, is_favorite=data.is_favorite)
                .returning(Flavor)
            )
            created = FlavorResponse.model_validate(result.scalar_one())
            await self.session.commit()
        except SQLAlchemyError as e:
            return await self._failed("create", e)
        logger.info("Created flavor %d (%s)", created.id, created.name)
        return Result.ok(created)

    async def update_flavor(
        self, flavor_id: int, data: FlavorUpdate
    ) -> Result[FlavorResponse]:
        """
        Overwrite name and is_favorite of one row.

        created_at is never touched. updated_at is refreshed to the current
        store time so it reflects the last write.
        """
        try:
            result = await self.session.execute(
                update(Flavor)
                .where(Flavor.id == flavor_id)
                .values(
                    name=data.name,
                    is_favorite=data.is_favorite,
                    updated_at=func.now(),
                )
                .returning(Flavor)
                .execution_options(synchronize_session=False)
            )
            flavor = result.scalar_one_or_none()
            outcome = self._one(flavor)
            await self.session.commit()
        except SQLAlchemyError as e:
            return await self._failed("update", e, flavor_id)
        if outcome.is_ok:
            logger.info("Updated flavor %d", flavor_id)
        return outcome

    async def delete_flavor(self, flavor_id: int) -> Result[FlavorResponse]:
        """Remove one row; the Result carries its pre-deletion contents."""
        try:
            result = await self.session.execute(
                delete(Flavor)
                .where(Flavor.id == flavor_id)
                .returning(Flavor)
                .execution_options(synchronize_session=False)
            )
            flavor = result.scalar_one_or_none()
            outcome = self._one(flavor)
            await self.session.commit()
        except SQLAlchemyError as e:
            return await self._failed("delete", e, flavor_id)
        if outcome.is_ok:
            logger.info("Deleted flavor %d", flavor_id)
        return outcome

    # ── Helpers ───────────────────────────────────────────────────────────

    @staticmethod
    def _one(flavor) -> Result[FlavorResponse]:
        if flavor is None:
            return Result.not_found()
        return Result.ok(FlavorResponse.model_validate(flavor))

    async def _failed(self, operation: str, error: SQLAlchemyError, flavor_id=None) -> Result:
        logger.error(
            "Database error during %s (flavor_id=%s): %s",
            operation,
            flavor_id,
            str(error),
        )
        await self.session.rollback()
        return Result.failed(error)
