"""
Slot availability and technician assignment.

Assignment is a pure ranking read: filter technicians by specialization,
area coverage and availability flags, then rank by rating with experience
as the tie-break. Nothing is reserved, so the pick is advisory.

Slot availability reads the per-date capacity table for dates it lists and
a default pattern (night slots closed unless emergency) for every other
date, over a slot template (standard four daytime slots, or the wider
emergency set), and subtracts live bookings already holding the slot in the
requested area.
"""

import logging
from datetime import date, timedelta
from typing import Iterable, Optional

from acservice.config import settings
from acservice.data.seed_data import SlotCapacity
from acservice.data.store import DataStore
from acservice.schemas.booking_schema import (
    Appointment,
    AppointmentStatus,
    AvailabilityResponse,
    Priority,
    SlotAvailability,
    TimeSlot,
    Urgency,
)
from acservice.schemas.service_schema import ServiceCategory
from acservice.schemas.team_schema import Technician
from acservice.utils import IST, minutes_between, parse_clock

logger = logging.getLogger(__name__)

# How far ahead next_available looks for an open slot.
LOOKAHEAD_DAYS = 14

# Slot labels that only open for emergency requests.
EMERGENCY_ONLY_LABELS = frozenset({"Night", "Early Morning", "Late Night"})

# Capacity for dates missing from the lookup table.
DEFAULT_CAPACITY: dict[str, int] = {
    "Early Morning": 1,
    "Morning": 3,
    "Afternoon": 2,
    "Evening": 1,
    "Night": 2,
    "Late Night": 1,
}

URGENCY_PRIORITY: dict[Urgency, Priority] = {
    Urgency.EMERGENCY: Priority.EMERGENCY,
    Urgency.URGENT: Priority.HIGH,
}


def priority_for_urgency(urgency: Urgency) -> Priority:
    """emergency -> emergency, urgent -> high, anything else -> medium."""
    return URGENCY_PRIORITY.get(urgency, Priority.MEDIUM)


# ------------------------------------------------------------------ #
# Technician assignment
# ------------------------------------------------------------------ #

def covers_area(technician: Technician, area: str) -> bool:
    wanted = area.strip().lower()
    return any(a.lower() == wanted for a in technician.available_areas)


def eligible_technicians(
    technicians: Iterable[Technician],
    category: ServiceCategory,
    area: str,
    is_emergency: bool = False,
) -> list[Technician]:
    return [
        t
        for t in technicians
        if category in t.specializations
        and covers_area(t, area)
        and t.is_available
        and (not is_emergency or t.emergency_available)
    ]


def rank_technicians(candidates: Iterable[Technician]) -> list[Technician]:
    """Rating descending, then years of experience descending."""
    return sorted(candidates, key=lambda t: (t.rating, t.experience), reverse=True)


def assign_technician(
    technicians: Iterable[Technician],
    category: ServiceCategory,
    area: str,
    is_emergency: bool = False,
) -> Optional[str]:
    """Return the best technician id, or None when nobody qualifies."""
    ranked = rank_technicians(eligible_technicians(technicians, category, area, is_emergency))
    if not ranked:
        logger.info("No technician for %s in %s (emergency=%s)", category.value, area, is_emergency)
        return None
    chosen = ranked[0]
    logger.debug("Assigned %s (%s, rating %.1f) for %s in %s", chosen.id, chosen.name, chosen.rating, category.value, area)
    return chosen.id


# ------------------------------------------------------------------ #
# Slot bookkeeping
# ------------------------------------------------------------------ #

def slot_contains(slot: TimeSlot, appointment: Appointment) -> bool:
    """Whether the appointment starts inside the slot window."""
    start = parse_clock(slot.start)
    local = appointment.scheduled_at.astimezone(IST)
    offset = (local.hour * 60 + local.minute) - (start.hour * 60 + start.minute)
    return 0 <= offset < minutes_between(slot.start, slot.end)


def bookings_in_slot(
    appointments: Iterable[Appointment], day: date, slot: TimeSlot, area: str
) -> list[Appointment]:
    """Non-cancelled bookings on ``day`` in ``slot`` for one service area."""
    wanted = area.strip().lower()
    return [
        a
        for a in appointments
        if a.status != AppointmentStatus.CANCELLED
        and a.scheduled_at.astimezone(IST).date() == day
        and a.address.service_area.lower() == wanted
        and slot_contains(slot, a)
    ]


class AvailabilityCalculator:
    """Computes per-slot availability for one store."""

    def __init__(self, store: DataStore) -> None:
        self.store = store

    def template(self, is_emergency: bool) -> list[TimeSlot]:
        return self.store.emergency_time_slots if is_emergency else self.store.time_slots

    def area_emergency_available(self, area: str) -> bool:
        """Emergency cover is on unless the area is flagged off (Danapur)."""
        known = self.store.find_area(area)
        if known is None:
            logger.debug("Service area %r not in the area table; emergency cover assumed", area)
            return True
        return known.emergency_available

    def capacity(self, day: date, label: str, is_emergency: bool = False) -> SlotCapacity:
        """Capacity for one slot label.

        Dates in the lookup table use that table alone; a label it does not
        list is closed. Other dates fall back to the default pattern, where
        emergency-only labels stay closed for normal requests.
        """
        table = self.store.booking_availability.get(day.isoformat())
        if table is not None:
            return table.get(label, {"available": False, "slots": 0})
        if label in EMERGENCY_ONLY_LABELS and not is_emergency:
            return {"available": False, "slots": 0}
        slots = DEFAULT_CAPACITY.get(label, 0)
        return {"available": slots > 0, "slots": slots}

    def slot_state(
        self, day: date, slot: TimeSlot, area: str, is_emergency: bool, duration: int
    ) -> tuple[bool, int]:
        """(open, remaining) for one slot on one day."""
        cap = self.capacity(day, slot.label, is_emergency)
        booked = len(bookings_in_slot(self.store.appointments, day, slot, area))
        remaining = max(0, cap["slots"] - booked)
        fits = minutes_between(slot.start, slot.end) >= duration
        return cap["available"] and remaining > 0 and fits, remaining

    def next_open_date(
        self, day: date, slot: TimeSlot, area: str, is_emergency: bool, duration: int
    ) -> Optional[str]:
        for offset in range(1, LOOKAHEAD_DAYS + 1):
            candidate = day + timedelta(days=offset)
            is_open, _ = self.slot_state(candidate, slot, area, is_emergency, duration)
            if is_open:
                return candidate.isoformat()
        return None

    def check(
        self, day: date, area: str, is_emergency: bool = False, duration: int = 90
    ) -> AvailabilityResponse:
        emergency_ok = self.area_emergency_available(area)
        # An emergency request in an area without emergency cover is treated as a normal one.
        use_emergency = is_emergency and emergency_ok

        time_slots: list[SlotAvailability] = []
        for slot in self.template(is_emergency):
            is_open, remaining = self.slot_state(day, slot, area, use_emergency, duration)
            time_slots.append(
                SlotAvailability(
                    start=slot.start,
                    end=slot.end,
                    label=slot.label,
                    available=is_open,
                    available_slots=remaining,
                    next_available=None
                    if is_open
                    else self.next_open_date(day, slot, area, use_emergency, duration),
                )
            )

        recommended = [
            TimeSlot(start=s.start, end=s.end, label=s.label)
            for s in time_slots
            if s.available
        ][: settings.booking.recommended_slot_count]

        return AvailabilityResponse(
            date=day.isoformat(),
            time_slots=time_slots,
            emergency_available=emergency_ok,
            recommended_slots=recommended,
        )
