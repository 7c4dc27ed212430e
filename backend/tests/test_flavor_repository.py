"""
Acme Flavors Backend: Flavor Repository Tests
=============================================

What:  Tests for the five FlavorRepository operations.
How:   Real queries against a seeded SQLite file; a mocked session covers
       store failures.

What we test:
    ✅ List returns the seed rows, then grows with each create
    ✅ Create fills id, timestamps and the is_favorite default
    ✅ Update overwrites fields, refreshes updated_at and keeps created_at
    ✅ Delete returns the pre-deletion row
    ✅ Unknown ids give not_found, store errors give failed + rollback
"""

import pytest
from datetime import datetime
from unittest.mock import MagicMock
from sqlalchemy import update
from sqlalchemy.exc import OperationalError

from flavors_api.models.flavor import Flavor
from flavors_api.schemas.flavor import FlavorCreate, FlavorUpdate
from flavors_api.services.flavor_repository import FlavorRepository
from flavors_api.services.result import ResultStatus


class TestFlavorRepositoryRead:
    """Tests for list and get."""

    @pytest.mark.asyncio
    async def test_list_returns_seed_rows(self, database):
        async with database.session() as session:
            result = await FlavorRepository(session).list_flavors()

        assert result.is_ok
        rows = {(f.name, f.is_favorite) for f in result.value}
        assert rows == {("Vanilla", True), ("Chocolate", False), ("Strawberry", False)}

    @pytest.mark.asyncio
    async def test_get_existing_flavor(self, database):
        async with database.session() as session:
            result = await FlavorRepository(session).get_flavor(1)

        assert result.is_ok
        assert result.value.id == 1
        assert result.value.name == "Vanilla"
        assert result.value.created_at is not None

    @pytest.mark.asyncio
    async def test_get_unknown_flavor_is_not_found(self, database):
        async with database.session() as session:
            result = await FlavorRepository(session).get_flavor(999)

        assert result.status is ResultStatus.NOT_FOUND
        assert result.value is None


class TestFlavorRepositoryWrite:
    """Tests for create, update and delete."""

    @pytest.mark.asyncio
    async def test_create_defaults_is_favorite_to_false(self, database):
        async with database.session() as session:
            result = await FlavorRepository(session).create_flavor(
                FlavorCreate(name="Pistachio")
            )

        assert result.is_ok
        created = result.value
        assert created.name == "Pistachio"
        assert created.is_favorite is False
        assert created.id == 4
        assert created.created_at == created.updated_at

    @pytest.mark.asyncio
    async def test_create_then_get_returns_same_row(self, database):
        async with database.session() as session:
            created = (await FlavorRepository(session).create_flavor(
                FlavorCreate(name="Mint", is_favorite=True)
            )).value

        async with database.session() as session:
            fetched = (await FlavorRepository(session).get_flavor(created.id)).value

        assert fetched == created

    @pytest.mark.asyncio
    async def test_list_grows_with_creates(self, database):
        async with database.session() as session:
            repo = FlavorRepository(session)
            for name in ("Mango", "Coffee"):
                await repo.create_flavor(FlavorCreate(name=name))
            result = await repo.list_flavors()

        assert len(result.value) == 5
        assert len({f.id for f in result.value}) == 5

    @pytest.mark.asyncio
    async def test_update_overwrites_fields_and_keeps_created_at(self, database):
        async with database.session() as session:
            before = (await FlavorRepository(session).get_flavor(2)).value

        async with database.session() as session:
            result = await FlavorRepository(session).update_flavor(
                2, FlavorUpdate(name="Dark Chocolate", is_favorite=True)
            )

        assert result.is_ok
        updated = result.value
        assert updated.id == before.id
        assert updated.name == "Dark Chocolate"
        assert updated.is_favorite is True
        assert updated.created_at == before.created_at
        assert updated.updated_at >= before.updated_at

    @pytest.mark.asyncio
    async def test_update_refreshes_updated_at(self, database):
        stale = datetime(2000, 1, 1)
        async with database.session() as session:
            await session.execute(
                update(Flavor).where(Flavor.id == 1).values(updated_at=stale)
            )
            await session.commit()
            before = (await FlavorRepository(session).get_flavor(1)).value
        assert before.updated_at == stale

        async with database.session() as session:
            result = await FlavorRepository(session).update_flavor(
                1, FlavorUpdate(name="French Vanilla", is_favorite=True)
            )

        updated = result.value
        assert updated.updated_at > stale
        assert updated.created_at == before.created_at

        async with database.session() as session:
            fetched = (await FlavorRepository(session).get_flavor(1)).value
        assert fetched == updated

    @pytest.mark.asyncio
    async def test_update_unknown_flavor_is_not_found(self, database):
        async with database.session() as session:
            result = await FlavorRepository(session).update_flavor(
                42, FlavorUpdate(name="Ghost", is_favorite=False)
            )

        assert result.is_not_found

    @pytest.mark.asyncio
    async def test_delete_returns_pre_deletion_row(self, database):
        async with database.session() as session:
            before = (await FlavorRepository(session).get_flavor(3)).value

        async with database.session() as session:
            deleted = await FlavorRepository(session).delete_flavor(3)

        async with database.session() as session:
            after = await FlavorRepository(session).get_flavor(3)

        assert deleted.is_ok
        assert deleted.value == before
        assert after.is_not_found

    @pytest.mark.asyncio
    async def test_delete_unknown_flavor_is_not_found(self, database):
        async with database.session() as session:
            result = await FlavorRepository(session).delete_flavor(999)

        assert result.is_not_found


class TestFlavorRepositoryFailures:
    """Store errors become failed Results instead of exceptions."""

    def setup_method(self):
        self.store_error = OperationalError("SELECT", {}, Exception("connection lost"))

    @pytest.mark.asyncio
    async def test_list_store_error_is_failed(self, mock_db_session):
        mock_db_session.execute.side_effect = self.store_error

        result = await FlavorRepository(mock_db_session).list_flavors()

        assert result.is_failed
        assert result.error is self.store_error
        mock_db_session.rollback.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_create_store_error_does_not_commit(self, mock_db_session):
        mock_db_session.execute.side_effect = self.store_error

        result = await FlavorRepository(mock_db_session).create_flavor(
            FlavorCreate(name="Mint")
        )

        assert result.is_failed
        mock_db_session.commit.assert_not_awaited()
        mock_db_session.rollback.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_get_with_mocked_empty_result(self, mock_db_session):
        mock_result = MagicMock()
        mock_result.scalar_one_or_none.return_value = None
        mock_db_session.execute.return_value = mock_result

        result = await FlavorRepository(mock_db_session).get_flavor(7)

        assert result.is_not_found
        mock_db_session.rollback.assert_not_awaited()
