"""Tests for the property repository and schema provisioning"""
import asyncio
import pytest
from decimal import Decimal
from unittest.mock import AsyncMock, MagicMock

from sqlalchemy import inspect

from property_inventory.database import build_engine, build_session_maker, init_db, close_db
from property_inventory.repositories import Outcome, OutcomeStatus, PropertyRepository
from property_inventory.services.valuation import compute_total_price


def make_row(**overrides):
    row = {
        "location": "Madrid",
        "square_meters": Decimal("80"),
        "price_per_square_meter": Decimal("2500"),
        "owner": "Owner",
        "country": "ES",
        "region": "Madrid",
        "province": "Madrid",
        "district": "Centro",
    }
    row.update(overrides)
    row["total_price"] = compute_total_price(row["price_per_square_meter"], row["square_meters"])
    return row


class TestOutcome:
    """Test the outcome constructors"""

    def test_ok(self):
        outcome = Outcome.ok(5)
        assert outcome.is_ok
        assert outcome.value == 5
        assert outcome.status == OutcomeStatus.OK

    def test_not_found(self):
        outcome = Outcome.not_found()
        assert outcome.is_not_found
        assert outcome.value is None

    def test_failure(self):
        error = RuntimeError("boom")
        outcome = Outcome.failure(error, timed_out=True)
        assert outcome.is_error
        assert outcome.error is error
        assert outcome.timed_out is True


class TestProvisioning:
    """Test table creation"""

    @pytest.mark.asyncio
    async def test_init_db_creates_properties_table(self, settings):
        engine = build_engine(settings)
        try:
            await init_db(engine)
            async with engine.connect() as conn:
                columns = await conn.run_sync(
                    lambda sync_conn: [c["name"] for c in inspect(sync_conn).get_columns("properties")]
                )
        finally:
            await close_db(engine)

        assert columns == [
            "id", "location", "square_meters", "price_per_square_meter", "total_price",
            "owner", "country", "region", "province", "district",
        ]

    @pytest.mark.asyncio
    async def test_init_db_is_idempotent(self, engine, session):
        """Running provisioning again keeps existing rows"""
        repo = PropertyRepository(session)
        created = await repo.create(make_row())

        await init_db(engine)

        fetched = await repo.get(created.value)
        assert fetched.is_ok


class TestPropertyRepository:
    """Test the five storage operations"""

    @pytest.mark.asyncio
    async def test_create_assigns_id(self, session):
        repo = PropertyRepository(session)

        first = await repo.create(make_row())
        second = await repo.create(make_row(owner="Other"))

        assert first.is_ok and second.is_ok
        assert second.value > first.value

    @pytest.mark.asyncio
    async def test_get_returns_stored_row(self, session):
        repo = PropertyRepository(session)
        created = await repo.create(make_row())

        outcome = await repo.get(created.value)

        assert outcome.is_ok
        item = outcome.value
        assert item.location == "Madrid"
        assert item.total_price == Decimal("200000")

    @pytest.mark.asyncio
    async def test_get_missing_is_not_found(self, session):
        repo = PropertyRepository(session)

        outcome = await repo.get(999999)

        assert outcome.is_not_found

    @pytest.mark.asyncio
    async def test_list_all_in_id_order(self, session):
        repo = PropertyRepository(session)
        await repo.create(make_row(owner="First"))
        await repo.create(make_row(owner="Second"))

        outcome = await repo.list_all()

        assert outcome.is_ok
        assert [p.owner for p in outcome.value] == ["First", "Second"]

    @pytest.mark.asyncio
    async def test_update_overwrites_row(self, engine, session):
        repo = PropertyRepository(session)
        created = await repo.create(make_row())

        outcome = await repo.update(created.value, make_row(owner="New", square_meters=Decimal("100")))
        assert outcome.is_ok
        assert outcome.value == 1

        # Read through a fresh session so the identity map does not mask the change
        async with build_session_maker(engine)() as fresh:
            item = (await PropertyRepository(fresh).get(created.value)).value
        assert item.owner == "New"
        assert item.total_price == Decimal("250000")

    @pytest.mark.asyncio
    async def test_update_with_identical_values_still_matches(self, session):
        repo = PropertyRepository(session)
        created = await repo.create(make_row())

        outcome = await repo.update(created.value, make_row())

        assert outcome.is_ok

    @pytest.mark.asyncio
    async def test_update_missing_is_not_found(self, session):
        repo = PropertyRepository(session)

        outcome = await repo.update(424242, make_row())

        assert outcome.is_not_found

    @pytest.mark.asyncio
    async def test_delete_twice(self, session):
        repo = PropertyRepository(session)
        created = await repo.create(make_row())

        assert (await repo.delete(created.value)).is_ok
        assert (await repo.delete(created.value)).is_not_found

    @pytest.mark.asyncio
    async def test_ids_not_reused_after_delete(self, session):
        repo = PropertyRepository(session)
        await repo.create(make_row())
        last = await repo.create(make_row())
        await repo.delete(last.value)

        again = await repo.create(make_row())

        assert again.value > last.value


class TestRepositoryFailures:
    """Storage failures come back as error outcomes"""

    @pytest.mark.asyncio
    async def test_missing_table_is_error_outcome(self, settings):
        engine = build_engine(settings)
        try:
            async with build_session_maker(engine)() as session:
                outcome = await PropertyRepository(session).list_all()
        finally:
            await close_db(engine)

        assert outcome.is_error
        assert outcome.timed_out is False
        assert outcome.error is not None

    @pytest.mark.asyncio
    async def test_slow_statement_times_out(self):
        async def slow(*args, **kwargs):
            await asyncio.sleep(1)

        session = MagicMock()
        session.execute = AsyncMock(side_effect=slow)
        session.rollback = AsyncMock()

        outcome = await PropertyRepository(session, timeout=0.01).get(1)

        assert outcome.is_error
        assert outcome.timed_out is True
        session.rollback.assert_awaited_once()
