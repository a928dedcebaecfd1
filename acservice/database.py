"""
Single entry point wiring one store to every service.

Usage:
    db = MockDatabase()
    page = await db.catalog.list_services(filters=ServiceFilters(category="repair"))
    booking = await db.bookings.create_booking(request)

    # Through the query cache:
    page = await db.cached("bookings", "recent", db.bookings.list_bookings)
    booking = await db.mutate("bookings", db.bookings.create_booking(request))
"""

from typing import Awaitable, Callable, Hashable, Optional, TypeVar

from acservice.auth import MockAuthSession
from acservice.cache import QueryCache
from acservice.data.store import DataStore
from acservice.latency import LatencySimulator
from acservice.logging_context import get_request_logger, new_request_id
from acservice.services import (
    BookingService,
    CatalogService,
    CustomerService,
    TeamService,
    TestimonialService,
)

logger = get_request_logger(__name__)

T = TypeVar("T")


class MockDatabase:
    """Facade over the in-memory store and its entity services."""

    def __init__(
        self,
        store: Optional[DataStore] = None,
        latency: Optional[LatencySimulator] = None,
        cache: Optional[QueryCache] = None,
    ) -> None:
        self.latency = latency or LatencySimulator()
        self.cache = cache or QueryCache()
        self._wire(store or DataStore.seeded())

    def _wire(self, store: DataStore) -> None:
        self.store = store
        self.catalog = CatalogService(store, self.latency)
        self.customers = CustomerService(store, self.latency)
        self.bookings = BookingService(store, self.latency)
        self.team = TeamService(store, self.latency)
        self.testimonials = TestimonialService(store, self.latency)
        self.auth = MockAuthSession(store, self.latency)

    async def cached(self, family: str, key: Hashable, loader: Callable[[], Awaitable[T]]) -> T:
        """Serve a read through the query cache."""
        return await self.cache.fetch(family, key, loader)

    async def mutate(self, family: str, operation: Awaitable[T]) -> T:
        """Await a mutation, then drop the cached reads it may have changed.

        A failed mutation leaves the store untouched, so the cache is kept.
        """
        result = await operation
        dropped = self.cache.invalidate(family)
        logger.debug("Mutation on %s dropped %d cached entries", family, dropped)
        return result

    def begin_request(self) -> str:
        """Start a correlation scope; subsequent service logs carry the id."""
        request_id = new_request_id()
        logger.debug("Request started")
        return request_id

    def reset(self) -> None:
        """Discard all mutations and reseed from scratch."""
        self._wire(DataStore.seeded())
        self.cache.clear()
        logger.info("Mock database reset to seed data")
