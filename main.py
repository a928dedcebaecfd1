"""
Entry point for the AC service mock data layer.

Usage:
    Scripted demo:  python main.py demo [scenario]
    Stats summary:  python main.py stats
"""

import asyncio
import logging
import sys

from acservice.config import settings
from acservice.database import MockDatabase
from acservice.latency import disabled

logger = logging.getLogger(__name__)


async def _print_stats() -> None:
    """Print headline counts from a freshly seeded store."""
    db = MockDatabase(latency=disabled())
    bookings = (await db.bookings.get_booking_stats()).data
    customers = (await db.customers.get_customer_stats()).data
    team = (await db.team.get_technician_stats()).data
    reviews = (await db.testimonials.get_testimonial_stats()).data

    print(f"{settings.business.name}, {settings.business.city}")
    print(f"  bookings:     {bookings.total} ({bookings.pending} pending, {bookings.emergency} emergency)")
    print(f"  customers:    {customers.total} ({customers.commercial} commercial)")
    print(f"  technicians:  {team.total} ({team.available} available, avg rating {team.average_rating})")
    print(f"  testimonials: {reviews.total} (avg {reviews.average_rating})")


def _run_demo(scenario: str) -> None:
    from console_demo import DemoRunner

    asyncio.run(DemoRunner().run(scenario))


if __name__ == "__main__":
    command = sys.argv[1] if len(sys.argv) > 1 else "demo"
    if command == "stats":
        asyncio.run(_print_stats())
    elif command == "demo":
        _run_demo(sys.argv[2] if len(sys.argv) > 2 else "all")
    else:
        logger.error("Unknown command %r; use 'demo' or 'stats'", command)
        sys.exit(2)
