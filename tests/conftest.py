"""Shared test fixtures and helpers."""

import os

# Config reads the environment at import time.
os.environ.setdefault("SIMULATE_LATENCY", "false")

from typing import Optional  # noqa: E402

import pytest  # noqa: E402

from acservice.data.store import DataStore  # noqa: E402
from acservice.database import MockDatabase  # noqa: E402
from acservice.latency import disabled  # noqa: E402
from acservice.schemas.booking_schema import (  # noqa: E402
    ACDetails,
    BookingRequest,
    TimeSlot,
    Urgency,
)
from acservice.schemas.customer_schema import Address, CustomerDetails  # noqa: E402
from acservice.schemas.service_schema import ACType  # noqa: E402
from acservice.services import (  # noqa: E402
    BookingService,
    CatalogService,
    CustomerService,
    TeamService,
    TestimonialService,
)

MORNING = TimeSlot(start="09:00", end="12:00", label="Morning")
EVENING = TimeSlot(start="15:00", end="18:00", label="Evening")
LATE_NIGHT = TimeSlot(start="21:00", end="00:00", label="Late Night")


@pytest.fixture
def store():
    return DataStore.seeded()


@pytest.fixture
def catalog(store):
    return CatalogService(store, disabled())


@pytest.fixture
def customers(store):
    return CustomerService(store, disabled())


@pytest.fixture
def bookings(store):
    return BookingService(store, disabled())


@pytest.fixture
def team(store):
    return TeamService(store, disabled())


@pytest.fixture
def testimonials(store):
    return TestimonialService(store, disabled())


@pytest.fixture
def db(store):
    return MockDatabase(store=store, latency=disabled())


def make_address(
    area: str = "Kankarbagh",
    street: str = "12 Lohia Nagar",
    pincode: str = "800020",
    is_default: bool = False,
    address_id: Optional[str] = None,
) -> Address:
    """Helper to create an Address whose service area matches its area."""
    return Address(
        id=address_id,
        street=street,
        area=area,
        pincode=pincode,
        service_area=area,
        is_default=is_default,
    )


def make_booking_request(
    service_id: str = "ac-repair",
    name: str = "Ankit Raj",
    phone: str = "+91-9123456780",
    preferred_date: str = "2024-04-10",
    slot: TimeSlot = MORNING,
    area: str = "Kankarbagh",
    urgency: Urgency = Urgency.NORMAL,
    customer_id: Optional[str] = None,
    notes: Optional[str] = None,
) -> BookingRequest:
    """Helper to create a valid BookingRequest."""
    return BookingRequest(
        service_id=service_id,
        customer_id=customer_id,
        customer=CustomerDetails(name=name, phone=phone),
        preferred_date=preferred_date,
        preferred_time_slot=slot,
        ac_details=ACDetails(brand="Voltas", type=ACType.SPLIT, age=3),
        address=make_address(area=area),
        urgency=urgency,
        notes=notes,
    )
