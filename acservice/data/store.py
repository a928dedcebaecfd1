"""
In-memory data store.

One ``DataStore`` instance holds every collection for a process lifetime.
Entity services receive the store by injection instead of sharing module
globals, so tests get isolation by building a fresh store per case.
"""

import copy
import logging
from dataclasses import dataclass, field
from typing import Optional

from acservice.data import seed_data
from acservice.data.seed_data import SlotCapacity
from acservice.schemas.booking_schema import Appointment, TimeSlot
from acservice.schemas.customer_schema import Customer
from acservice.schemas.service_schema import Service, ServiceArea
from acservice.schemas.team_schema import TeamMember, Technician
from acservice.schemas.testimonial_schema import Testimonial
from acservice.utils import canonical_phone

logger = logging.getLogger(__name__)


@dataclass
class DataStore:
    services: list[Service] = field(default_factory=list)
    service_areas: list[ServiceArea] = field(default_factory=list)
    customers: list[Customer] = field(default_factory=list)
    appointments: list[Appointment] = field(default_factory=list)
    technicians: list[Technician] = field(default_factory=list)
    team_members: list[TeamMember] = field(default_factory=list)
    testimonials: list[Testimonial] = field(default_factory=list)
    time_slots: list[TimeSlot] = field(default_factory=list)
    emergency_time_slots: list[TimeSlot] = field(default_factory=list)
    booking_availability: dict[str, dict[str, SlotCapacity]] = field(default_factory=dict)

    @classmethod
    def seeded(cls) -> "DataStore":
        """Build a store from a fresh copy of the Patna seed data."""
        raw = copy.deepcopy
        store = cls(
            services=[Service.model_validate(s) for s in raw(seed_data.SERVICES)],
            service_areas=[ServiceArea.model_validate(a) for a in raw(seed_data.SERVICE_AREAS)],
            customers=[Customer.model_validate(c) for c in raw(seed_data.CUSTOMERS)],
            appointments=[Appointment.model_validate(a) for a in raw(seed_data.APPOINTMENTS)],
            technicians=[Technician.model_validate(t) for t in raw(seed_data.TECHNICIANS)],
            team_members=[TeamMember.model_validate(m) for m in raw(seed_data.TEAM_MEMBERS)],
            testimonials=[Testimonial.model_validate(t) for t in raw(seed_data.TESTIMONIALS)],
            time_slots=[TimeSlot.model_validate(s) for s in raw(seed_data.TIME_SLOTS)],
            emergency_time_slots=[
                TimeSlot.model_validate(s) for s in raw(seed_data.EMERGENCY_TIME_SLOTS)
            ],
            booking_availability=raw(seed_data.BOOKING_AVAILABILITY),
        )
        logger.debug(
            "Seeded store: %d services, %d customers, %d appointments, %d technicians, %d testimonials",
            len(store.services),
            len(store.customers),
            len(store.appointments),
            len(store.technicians),
            len(store.testimonials),
        )
        return store

    # ------------------------------------------------------------------ #
    # Lookups
    # ------------------------------------------------------------------ #

    def find_service(self, service_id: str) -> Optional[Service]:
        return next((s for s in self.services if s.id == service_id), None)

    def find_area(self, name: str) -> Optional[ServiceArea]:
        """Case-insensitive lookup of a service area by name."""
        wanted = name.strip().lower()
        return next((a for a in self.service_areas if a.name.lower() == wanted), None)

    def find_customer(self, customer_id: str) -> Optional[Customer]:
        return next((c for c in self.customers if c.id == customer_id), None)

    def find_customer_by_phone(self, phone: str) -> Optional[Customer]:
        """Match on the canonical 10-digit form so prefixes don't matter."""
        wanted = canonical_phone(phone)
        return next((c for c in self.customers if canonical_phone(c.phone) == wanted), None)

    def find_appointment(self, appointment_id: str) -> Optional[Appointment]:
        return next((a for a in self.appointments if a.id == appointment_id), None)

    def find_technician(self, technician_id: str) -> Optional[Technician]:
        return next((t for t in self.technicians if t.id == technician_id), None)

    def find_team_member(self, member_id: str) -> Optional[TeamMember]:
        return next((m for m in self.team_members if m.id == member_id), None)

    def find_testimonial(self, testimonial_id: str) -> Optional[Testimonial]:
        return next((t for t in self.testimonials if t.id == testimonial_id), None)