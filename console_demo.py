"""
Offline console demo: scripted walkthroughs against the mock data layer.

Runs the real services over a freshly seeded store. Latency is disabled
unless --latency is given, so the walkthroughs finish instantly.

Usage:
    python console_demo.py
    python console_demo.py --scenario emergency
    python console_demo.py --scenario moderation --latency
"""

import argparse
import asyncio
from datetime import timedelta

from acservice.config import settings
from acservice.database import MockDatabase
from acservice.envelope import create_error_response
from acservice.errors import ApiError
from acservice.latency import LatencySimulator
from acservice.schemas.booking_schema import (
    ACDetails,
    AvailabilityRequest,
    BookingRequest,
    TimeSlot,
    Urgency,
)
from acservice.schemas.customer_schema import Address, CustomerDetails
from acservice.schemas.service_schema import ACType, ServiceFilters
from acservice.schemas.testimonial_schema import CreateTestimonialRequest
from acservice.utils import now_ist

BLUE = "\033[94m"
GREEN = "\033[92m"
YELLOW = "\033[93m"
RED = "\033[91m"
DIM = "\033[2m"
RESET = "\033[0m"
BOLD = "\033[1m"


class DemoRunner:
    """Walks through one scenario and prints each call's envelope."""

    def __init__(self, simulate_latency: bool = False) -> None:
        self.db = MockDatabase(latency=LatencySimulator(enabled=simulate_latency))

    def heading(self, text: str) -> None:
        print(f"\n{BLUE}{BOLD}== {text} =={RESET}")

    def ok(self, text: str) -> None:
        print(f"{GREEN}{text}{RESET}")

    def warn(self, text: str) -> None:
        print(f"{YELLOW}{text}{RESET}")

    def system_log(self, text: str) -> None:
        print(f"{DIM}  >> {text}{RESET}")

    def failed(self, error: ApiError) -> None:
        envelope = create_error_response(error.message)
        print(f"{RED}[{error.status} {error.code}] {envelope.message}{RESET}")

    # ------------------------------------------------------------------ #
    # Scenarios
    # ------------------------------------------------------------------ #

    async def booking(self) -> None:
        self.heading("Book a split AC service in Kankarbagh")
        self.db.begin_request()
        day = (now_ist() + timedelta(days=3)).date().isoformat()

        availability = await self.db.bookings.check_availability(
            AvailabilityRequest(date=day, service_area="Kankarbagh")
        )
        self.ok(availability.message)
        for slot in availability.data.time_slots:
            state = "open" if slot.available else f"closed (next {slot.next_available})"
            self.system_log(f"{slot.label:<10} {slot.start}-{slot.end} {state}")

        slot = availability.data.recommended_slots[0]
        quote = await self.db.catalog.get_pricing_estimate("ac-cleaning", area="Kankarbagh")
        self.system_log(f"Quote for {quote.data.service.name}: Rs {quote.data.total_estimate}")

        result = await self.db.mutate(
            "bookings",
            self.db.bookings.create_booking(
                BookingRequest(
                    service_id="ac-cleaning",
                    customer=CustomerDetails(name="Neha Sinha", phone="9876543202"),
                    preferred_date=day,
                    preferred_time_slot=TimeSlot(start=slot.start, end=slot.end, label=slot.label),
                    ac_details=ACDetails(brand="Voltas", type=ACType.SPLIT, age=2),
                    address=Address(
                        street="H-45 Lohia Nagar",
                        area="Kankarbagh",
                        pincode="800020",
                        service_area="Kankarbagh",
                    ),
                )
            ),
        )
        booking = result.data
        self.ok(result.message)
        self.system_log(
            f"customer={booking.customer_id} technician={booking.technician_id or 'unassigned'} "
            f"priority={booking.priority.value} estimate=Rs {booking.pricing.estimated}"
        )

        upcoming = await self.db.cached(
            "bookings",
            ("upcoming", booking.customer_id),
            lambda: self.db.bookings.get_customer_upcoming_bookings(booking.customer_id),
        )
        self.system_log(upcoming.message)

    async def emergency(self) -> None:
        self.heading("Late-night emergency in Danapur and Boring Road")
        self.db.begin_request()
        day = now_ist().date().isoformat()

        for area in ("Danapur", "Boring Road"):
            check = await self.db.bookings.check_availability(
                AvailabilityRequest(date=day, service_area=area, is_emergency=True, duration=60)
            )
            flag = "yes" if check.data.emergency_available else "no"
            self.system_log(f"{area}: emergency cover {flag}, recommended {[s.label for s in check.data.recommended_slots]}")

        techs = await self.db.team.get_emergency_technicians("Boring Road")
        for tech in techs.data:
            self.system_log(f"{tech.name} rating {tech.rating} ({tech.experience} yrs)")

        result = await self.db.bookings.create_booking(
            BookingRequest(
                service_id="emergency-service",
                customer=CustomerDetails(name="Sameer Ali", phone="+91-9000000001"),
                preferred_date=day,
                preferred_time_slot=TimeSlot(start="21:00", end="00:00", label="Late Night"),
                ac_details=ACDetails(brand="LG", type=ACType.SPLIT, age=7, issues=["Tripping breaker"]),
                address=Address(street="Exhibition Road", area="Boring Road", pincode="800001", service_area="Boring Road"),
                urgency=Urgency.EMERGENCY,
                notes="Unit sparking near the outdoor compressor",
            )
        )
        self.ok(result.message)
        self.system_log(f"priority={result.data.priority.value} technician={result.data.technician_id}")

        try:
            await self.db.bookings.cancel_booking("apt-001")
        except ApiError as exc:
            self.failed(exc)

    async def search(self) -> None:
        self.heading("Catalog search")
        self.db.begin_request()
        for query in ("book a repair", "jet pump", "help my AC has a problem"):
            found = (await self.db.catalog.smart_search(query)).data
            self.ok(f'"{query}" -> {found.intent.value} ({found.confidence})')
            for service in found.services:
                self.system_log(f"{service.name} from Rs {service.price.min}")
            if found.suggestions:
                self.system_log(f"suggestions: {', '.join(found.suggestions)}")

        page = await self.db.catalog.list_services(
            filters=ServiceFilters(max_price=1000), sort_by="price", limit=5
        )
        self.ok(f"{page.pagination.total} services start under Rs 1000 (page 1 of {page.pagination.total_pages})")
        for service in page.data:
            self.system_log(f"Rs {service.price.min:>5}  {service.name}")

        recommended = await self.db.catalog.get_recommended_services(5, ACType.WINDOW, "Voltas")
        self.ok(recommended.message)

    async def moderation(self) -> None:
        self.heading("Testimonial moderation")
        self.db.begin_request()
        try:
            await self.db.testimonials.create_testimonial(
                CreateTestimonialRequest(customer_name="Test", rating=7, comment="Great")
            )
        except ApiError as exc:
            self.failed(exc)

        created = await self.db.testimonials.create_testimonial(
            CreateTestimonialRequest(
                customer_name="Ritu Raj",
                customer_area="Kidwaipuri",
                service="AC Deep Cleaning",
                rating=5,
                comment="Cooling is back to normal after the jet pump wash.",
                verified=True,
            )
        )
        self.ok(created.message)
        self.system_log(f"verified on creation: {created.data.verified}")

        verified = await self.db.testimonials.verify_testimonial(created.data.id)
        self.system_log(f"verified after moderation: {verified.data.verified}")

        stats = await self.db.testimonials.get_testimonial_stats()
        self.ok(f"{stats.data.total} testimonials, average {stats.data.average_rating}")
        self.system_log(f"distribution: {stats.data.rating_distribution}")

        await self.db.testimonials.delete_testimonial("test-010")
        self.warn("Removed test-010")

    SCENARIOS = ("booking", "emergency", "search", "moderation")

    async def run(self, scenario: str = "all") -> None:
        print(f"{BOLD}{settings.business.name} ({settings.business.city}) mock data layer demo{RESET}")
        names = self.SCENARIOS if scenario == "all" else (scenario,)
        for name in names:
            await getattr(self, name)()


def main() -> None:
    parser = argparse.ArgumentParser(description="Offline console demo")
    parser.add_argument(
        "--scenario",
        choices=["all", *DemoRunner.SCENARIOS],
        default="all",
        help="Run one scripted walkthrough instead of all of them",
    )
    parser.add_argument(
        "--latency",
        action="store_true",
        help="Simulate network latency on every call",
    )
    args = parser.parse_args()

    asyncio.run(DemoRunner(simulate_latency=args.latency).run(args.scenario))


if __name__ == "__main__":
    main()
