"""Tests for the MockDatabase facade."""

import re

import pytest

from acservice.errors import NotFoundError
from acservice.logging_context import get_request_id
from acservice.schemas.service_schema import ServiceFilters
from tests.conftest import make_booking_request


class TestWiring:
    def test_services_share_one_store(self, db, store):
        assert db.store is store
        for service in (db.catalog, db.customers, db.bookings, db.team, db.testimonials, db.auth):
            assert service.store is store

    @pytest.mark.asyncio
    async def test_booking_visible_through_other_services(self, db):
        created = (await db.bookings.create_booking(make_booking_request())).data
        history = await db.bookings.get_customer_booking_history(created.customer_id)
        assert [a.id for a in history.data] == [created.id]

    @pytest.mark.asyncio
    async def test_catalog_through_facade(self, db):
        page = await db.catalog.list_services(filters=ServiceFilters(category="repair"))
        assert {s.id for s in page.data} == {"ac-repair", "compressor-repair"}


class TestReset:
    @pytest.mark.asyncio
    async def test_reset_discards_mutations(self, db):
        await db.bookings.create_booking(make_booking_request())
        await db.testimonials.delete_testimonial("test-001")
        db.reset()
        assert len(db.store.appointments) == 6
        assert db.store.find_testimonial("test-001") is not None

    @pytest.mark.asyncio
    async def test_reset_clears_cache(self, db):
        async def loader():
            return "value"

        await db.cache.fetch("services", "all", loader)
        db.reset()
        assert len(db.cache) == 0

    def test_reset_rewires_services(self, db):
        db.reset()
        assert db.bookings.store is db.store


class TestRequestCorrelation:
    def test_begin_request_sets_context(self, db):
        request_id = db.begin_request()
        assert re.fullmatch(r"REQ-[0-9a-f]{8}", request_id)
        assert get_request_id() == request_id

    def test_each_request_gets_fresh_id(self, db):
        assert db.begin_request() != db.begin_request()


class TestCachedAccess:
    @pytest.mark.asyncio
    async def test_cached_read_served_until_mutation(self, db):
        first = await db.cached("bookings", "all", db.bookings.list_bookings)
        again = await db.cached("bookings", "all", db.bookings.list_bookings)
        assert again is first
        assert db.cache.hits == 1

        await db.mutate("bookings", db.bookings.create_booking(make_booking_request()))
        fresh = await db.cached("bookings", "all", db.bookings.list_bookings)
        assert fresh.pagination.total == first.pagination.total + 1

    @pytest.mark.asyncio
    async def test_mutation_drops_related_families(self, db):
        async def loader():
            return "schedule"

        await db.cached("technicians", "tech-001", loader)
        await db.mutate("bookings", db.bookings.cancel_booking("apt-002"))
        assert not db.cache.is_fresh("technicians", "tech-001")

    @pytest.mark.asyncio
    async def test_failed_mutation_keeps_cache(self, db):
        await db.cached("bookings", "all", db.bookings.list_bookings)
        with pytest.raises(NotFoundError):
            await db.mutate("bookings", db.bookings.cancel_booking("apt-999"))
        assert db.cache.is_fresh("bookings", "all")
