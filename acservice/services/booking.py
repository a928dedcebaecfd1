"""
Appointment lifecycle: create, query, status changes, availability and stats.

Creation derives priority from urgency, reuses a stored customer when the
phone matches, enforces the per-slot capacity for the service area and
runs the advisory technician assignment. Pricing stays a flat placeholder;
``CatalogService.get_pricing_estimate`` is the priced quote.
"""

from collections import Counter
from datetime import date
from typing import Optional

from acservice.config import settings
from acservice.envelope import ApiResponse, PaginatedResponse, create_api_response
from acservice.errors import BusinessRuleError, InvalidRequestError, NotFoundError
from acservice.logging_context import get_request_logger
from acservice.query import exact, in_range
from acservice.schemas.booking_schema import (
    TERMINAL_STATUSES,
    Appointment,
    AppointmentStatus,
    AvailabilityRequest,
    AvailabilityResponse,
    BookingFilters,
    BookingRequest,
    BookingStats,
    Pricing,
    Priority,
    TimeSlot,
    Urgency,
)
from acservice.services.availability import (
    AvailabilityCalculator,
    assign_technician,
    bookings_in_slot,
    priority_for_urgency,
)
from acservice.services.base import EntityService, snapshot
from acservice.utils import IST, at_local_time, end_of_day, generate_id, now_ist, parse_date, start_of_day

logger = get_request_logger(__name__)

PRIORITY_RANK = {
    Priority.LOW: 0,
    Priority.MEDIUM: 1,
    Priority.HIGH: 2,
    Priority.EMERGENCY: 3,
}

PENDING_STATUSES = frozenset(
    {AppointmentStatus.SCHEDULED, AppointmentStatus.CONFIRMED, AppointmentStatus.RESCHEDULED}
)


def _parse_day(value: str, field_name: str) -> date:
    try:
        return parse_date(value)
    except ValueError:
        raise InvalidRequestError(f"{field_name} must be a YYYY-MM-DD date, got {value!r}") from None


def _append_note(notes: Optional[str], line: str) -> str:
    return f"{notes}\n{line}" if notes else line


class BookingService(EntityService):
    sort_keys = {
        "scheduled_at": lambda a: a.scheduled_at,
        "created_at": lambda a: a.created_at,
        "priority": lambda a: PRIORITY_RANK[a.priority],
        "status": lambda a: a.status.value,
    }
    default_sort = "scheduled_at"
    default_order = "desc"

    def _require(self, booking_id: str) -> Appointment:
        booking = self.store.find_appointment(booking_id)
        if booking is None:
            raise NotFoundError(f"Booking with ID {booking_id} not found")
        return booking

    def _check_capacity(
        self, day: date, slot: TimeSlot, area: str, ignore_id: Optional[str] = None
    ) -> None:
        taken = [a for a in bookings_in_slot(self.store.appointments, day, slot, area) if a.id != ignore_id]
        limit = settings.booking.max_bookings_per_slot
        if len(taken) >= limit:
            logger.warning("Slot %s on %s in %s is full (%d bookings)", slot.label, day, area, len(taken))
            raise BusinessRuleError(
                f"The {slot.label} slot on {day.isoformat()} is fully booked in {area}. Please choose another slot.",
                details={"date": day.isoformat(), "slot": slot.label, "area": area, "limit": limit},
            )

    async def create_booking(self, request: BookingRequest) -> ApiResponse[Appointment]:
        await self.latency.wait(800, 1500)
        if not request.service_id.strip() or not request.customer.phone.strip():
            raise InvalidRequestError("Service ID and customer phone are required")

        day = _parse_day(request.preferred_date, "preferred_date")
        slot = request.preferred_time_slot
        try:
            scheduled_at = at_local_time(day, slot.start)
        except ValueError:
            raise InvalidRequestError(f"Time slot start must be HH:MM, got {slot.start!r}") from None
        area = request.address.service_area
        self._check_capacity(day, slot, area)

        customer = (
            self.store.find_customer(request.customer_id)
            if request.customer_id
            else self.store.find_customer_by_phone(request.customer.phone)
        )
        if customer is not None:
            customer.total_bookings += 1
            customer.updated_at = now_ist()
            customer_id = customer.id
        else:
            customer_id = request.customer_id or generate_id("cust")

        technician_id = None
        service = self.store.find_service(request.service_id)
        if service is not None:
            technician_id = assign_technician(
                self.store.technicians,
                service.category,
                area,
                is_emergency=request.urgency == Urgency.EMERGENCY,
            )
        else:
            logger.warning("Booking references unknown service %s", request.service_id)

        now = now_ist()
        booking = Appointment(
            id=generate_id("apt"),
            customer_id=customer_id,
            service_id=request.service_id,
            scheduled_at=scheduled_at,
            estimated_duration=settings.booking.default_duration_minutes,
            status=AppointmentStatus.SCHEDULED,
            priority=priority_for_urgency(request.urgency),
            notes=request.notes,
            technician_id=technician_id,
            ac_details=request.ac_details.model_copy(deep=True),
            address=request.address.model_copy(
                update={"id": request.address.id or generate_id("addr")}, deep=True
            ),
            pricing=Pricing(estimated=settings.booking.placeholder_estimate),
            created_at=now,
            updated_at=now,
        )
        self.store.appointments.append(booking)
        logger.info(
            "Booking created: %s for %s on %s %s (priority %s, technician %s)",
            booking.id,
            customer_id,
            day.isoformat(),
            slot.label,
            booking.priority.value,
            technician_id or "unassigned",
        )
        return create_api_response(
            snapshot(booking), f"Booking created successfully! Booking ID: {booking.id}"
        )

    async def get_booking(self, booking_id: str) -> ApiResponse[Optional[Appointment]]:
        await self.latency.wait(200, 500)
        booking = self.store.find_appointment(booking_id)
        if booking is None:
            return create_api_response(None, f"Booking with ID {booking_id} not found")
        return create_api_response(snapshot(booking), "Booking retrieved successfully")

    async def list_bookings(
        self,
        page: int = 1,
        limit: Optional[int] = None,
        filters: Optional[BookingFilters] = None,
        sort_by: Optional[str] = None,
        sort_order: Optional[str] = None,
    ) -> PaginatedResponse[Appointment]:
        await self.latency.wait(300, 800)
        f = filters or BookingFilters()
        lower = start_of_day(_parse_day(f.date_from, "date_from")) if f.date_from else None
        upper = end_of_day(_parse_day(f.date_to, "date_to")) if f.date_to else None
        predicates = [
            exact(lambda a: a.status, f.status),
            exact(lambda a: a.customer_id, f.customer_id),
            exact(lambda a: a.service_id, f.service_id),
            exact(lambda a: a.technician_id, f.technician_id),
            exact(lambda a: a.priority, f.priority),
            in_range(lambda a: a.scheduled_at, lower, upper),
        ]
        return self._list(self.store.appointments, predicates, page, limit, sort_by, sort_order)

    async def update_booking_status(
        self, booking_id: str, status: AppointmentStatus, notes: Optional[str] = None
    ) -> ApiResponse[Appointment]:
        """Overwrite the status. No transition graph is enforced here."""
        await self.latency.wait(300, 700)
        booking = self._require(booking_id)
        previous = booking.status
        booking.status = status
        if notes:
            booking.notes = notes
        booking.updated_at = now_ist()
        logger.info("Booking %s status %s -> %s", booking_id, previous.value, status.value)
        return create_api_response(snapshot(booking), f"Booking status updated to {status.value}")

    async def cancel_booking(self, booking_id: str, reason: Optional[str] = None) -> ApiResponse[Appointment]:
        await self.latency.wait(300, 700)
        booking = self._require(booking_id)
        if booking.status in TERMINAL_STATUSES:
            raise BusinessRuleError(f"Booking {booking_id} is already {booking.status.value} and cannot be cancelled")
        booking.status = AppointmentStatus.CANCELLED
        booking.notes = _append_note(booking.notes, f"Cancelled: {reason or 'Booking cancelled by user'}")
        booking.updated_at = now_ist()
        logger.info("Booking cancelled: %s", booking_id)
        return create_api_response(snapshot(booking), "Booking cancelled successfully")

    async def reschedule_booking(
        self,
        booking_id: str,
        new_date: str,
        new_time_slot: TimeSlot,
        reason: Optional[str] = None,
    ) -> ApiResponse[Appointment]:
        await self.latency.wait(400, 800)
        booking = self._require(booking_id)
        if booking.status in TERMINAL_STATUSES:
            raise BusinessRuleError(f"Booking {booking_id} is already {booking.status.value} and cannot be rescheduled")
        day = _parse_day(new_date, "new_date")
        try:
            scheduled_at = at_local_time(day, new_time_slot.start)
        except ValueError:
            raise InvalidRequestError(f"Time slot start must be HH:MM, got {new_time_slot.start!r}") from None
        self._check_capacity(day, new_time_slot, booking.address.service_area, ignore_id=booking_id)

        booking.scheduled_at = scheduled_at
        booking.status = AppointmentStatus.RESCHEDULED
        booking.notes = _append_note(booking.notes, f"Rescheduled: {reason or 'Booking rescheduled by request'}")
        booking.updated_at = now_ist()
        logger.info("Booking rescheduled: %s to %s %s", booking_id, new_date, new_time_slot.label)
        return create_api_response(
            snapshot(booking), f"Booking rescheduled to {new_date} ({new_time_slot.label})"
        )

    async def check_availability(self, request: AvailabilityRequest) -> ApiResponse[AvailabilityResponse]:
        await self.latency.wait(300, 600)
        day = _parse_day(request.date, "date")
        result = AvailabilityCalculator(self.store).check(
            day, request.service_area, is_emergency=request.is_emergency, duration=request.duration
        )
        open_count = sum(1 for s in result.time_slots if s.available)
        return create_api_response(result, f"{open_count} time slot(s) available on {request.date}")

    # ------------------------------------------------------------------ #
    # Per-customer and per-technician views
    # ------------------------------------------------------------------ #

    async def get_customer_upcoming_bookings(self, customer_id: str) -> ApiResponse[list[Appointment]]:
        await self.latency.wait(300, 600)
        now = now_ist()
        upcoming = sorted(
            (
                a
                for a in self.store.appointments
                if a.customer_id == customer_id
                and a.scheduled_at >= now
                and a.status not in TERMINAL_STATUSES
            ),
            key=lambda a: a.scheduled_at,
        )
        return create_api_response(
            [snapshot(a) for a in upcoming], f"Found {len(upcoming)} upcoming bookings"
        )

    async def get_customer_booking_history(
        self, customer_id: str, page: int = 1, limit: Optional[int] = None
    ) -> PaginatedResponse[Appointment]:
        await self.latency.wait(300, 700)
        predicates = [exact(lambda a: a.customer_id, customer_id)]
        return self._list(self.store.appointments, predicates, page, limit, "scheduled_at", "desc")

    async def get_technician_appointments(
        self, technician_id: str, day: str
    ) -> ApiResponse[list[Appointment]]:
        """A technician's non-cancelled appointments for one date, earliest first."""
        await self.latency.wait(200, 500)
        target = _parse_day(day, "date")
        found = sorted(
            (
                a
                for a in self.store.appointments
                if a.technician_id == technician_id
                and a.status != AppointmentStatus.CANCELLED
                and a.scheduled_at.astimezone(IST).date() == target
            ),
            key=lambda a: a.scheduled_at,
        )
        return create_api_response(
            [snapshot(a) for a in found], f"Found {len(found)} appointments for {technician_id} on {day}"
        )

    async def get_booking_stats(
        self, date_from: Optional[str] = None, date_to: Optional[str] = None
    ) -> ApiResponse[BookingStats]:
        """Counts over bookings created within the optional window."""
        await self.latency.wait(400, 800)
        lower = start_of_day(_parse_day(date_from, "date_from")) if date_from else None
        upper = end_of_day(_parse_day(date_to, "date_to")) if date_to else None
        window = in_range(lambda a: a.created_at, lower, upper)
        bookings = [a for a in self.store.appointments if window is None or window(a)]

        by_status = Counter(a.status for a in bookings)
        by_priority = Counter(a.priority for a in bookings)
        stats = BookingStats(
            total=len(bookings),
            completed=by_status.get(AppointmentStatus.COMPLETED, 0),
            cancelled=by_status.get(AppointmentStatus.CANCELLED, 0),
            pending=sum(by_status.get(s, 0) for s in PENDING_STATUSES),
            emergency=by_priority.get(Priority.EMERGENCY, 0),
            by_status={s: by_status.get(s, 0) for s in AppointmentStatus},
            by_priority={p: by_priority.get(p, 0) for p in Priority},
            average_rating=settings.booking.placeholder_average_rating,
        )
        return create_api_response(stats, "Booking statistics retrieved successfully")
