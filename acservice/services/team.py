"""
Technicians and the public team directory.

Availability checks are deterministic: area coverage, emergency capability,
working hours and a clash test against the technician's stored
appointments, in that order. The first failing check decides the reason.
"""

from collections import Counter
from datetime import date, datetime, timedelta
from typing import Optional

from acservice.envelope import ApiResponse, PaginatedResponse, create_api_response
from acservice.errors import InvalidRequestError, NotFoundError
from acservice.logging_context import get_request_logger
from acservice.query import any_of, at_least, exact
from acservice.schemas.booking_schema import Appointment, AppointmentStatus
from acservice.schemas.service_schema import ServiceCategory
from acservice.schemas.team_schema import (
    AreaCoverage,
    ScheduleBlock,
    ScheduleBlockStatus,
    TeamMember,
    Technician,
    TechnicianAvailability,
    TechnicianFilters,
    TechnicianSchedule,
    TechnicianStats,
)
from acservice.services.availability import LOOKAHEAD_DAYS, covers_area, eligible_technicians, rank_technicians
from acservice.services.base import EntityService, snapshot
from acservice.utils import IST, at_local_time, parse_clock, parse_date, round1

logger = get_request_logger(__name__)

BLOCK_HOURS = 3
BREAK_HOUR = 12
MAX_ALTERNATIVES = 2


def _parse_window(time_slot: str) -> tuple[str, str]:
    """Split "HH:MM-HH:MM" into its two clock strings."""
    try:
        start, end = (part.strip() for part in time_slot.split("-"))
        parse_clock(start)
        parse_clock(end)
    except ValueError:
        raise InvalidRequestError(f"time_slot must look like HH:MM-HH:MM, got {time_slot!r}") from None
    return start, end


def _window(day: date, start: str, end: str) -> tuple[datetime, datetime]:
    begin = at_local_time(day, start)
    finish = at_local_time(day, end)
    if finish <= begin:
        finish += timedelta(days=1)
    return begin, finish


def _overlaps(appointment: Appointment, begin: datetime, finish: datetime) -> bool:
    apt_start = appointment.scheduled_at
    apt_end = apt_start + timedelta(minutes=appointment.estimated_duration)
    return apt_start < finish and begin < apt_end


def _blocks(technician: Technician) -> list[tuple[int, int]]:
    """(start_hour, end_hour) pairs covering the working day in 3-hour steps.

    Empty when the window crosses midnight or starts and ends in the same hour.
    """
    first = parse_clock(technician.working_hours.start).hour
    last = parse_clock(technician.working_hours.end).hour
    return [(h, min(h + BLOCK_HOURS, last)) for h in range(first, last, BLOCK_HOURS)]


def _within_hours(technician: Technician, clock: str) -> bool:
    """Whether an HH:MM start falls inside the working window, which may run past midnight."""
    begin = parse_clock(technician.working_hours.start)
    finish = parse_clock(technician.working_hours.end)
    requested = parse_clock(clock)
    if begin < finish:
        return begin <= requested < finish
    return requested >= begin or requested < finish


class TeamService(EntityService):
    sort_keys = {
        "name": lambda t: t.name.lower(),
        "rating": lambda t: t.rating,
        "experience": lambda t: t.experience,
        "total_jobs": lambda t: t.total_jobs,
    }
    default_sort = "rating"
    default_order = "desc"

    def _require(self, technician_id: str) -> Technician:
        technician = self.store.find_technician(technician_id)
        if technician is None:
            raise NotFoundError(f"Technician with ID {technician_id} not found")
        return technician

    def _active_appointments(self, technician_id: str, day: date) -> list[Appointment]:
        return [
            a
            for a in self.store.appointments
            if a.technician_id == technician_id
            and a.status != AppointmentStatus.CANCELLED
            and a.scheduled_at.astimezone(IST).date() == day
        ]

    def _has_clash(self, technician_id: str, day: date, start: str, end: str) -> bool:
        begin, finish = _window(day, start, end)
        return any(_overlaps(a, begin, finish) for a in self._active_appointments(technician_id, day))

    async def list_technicians(
        self,
        page: int = 1,
        limit: Optional[int] = None,
        filters: Optional[TechnicianFilters] = None,
        sort_by: Optional[str] = None,
        sort_order: Optional[str] = None,
    ) -> PaginatedResponse[Technician]:
        await self.latency.wait(300, 700)
        f = filters or TechnicianFilters()
        predicates = [
            any_of(lambda t: t.specializations, f.specializations),
            any_of(lambda t: t.available_areas, f.areas, normalize=lambda a: a.lower()),
            exact(lambda t: t.is_available, f.is_available),
            exact(lambda t: t.emergency_available, f.emergency_available),
            at_least(lambda t: t.rating, f.min_rating),
            at_least(lambda t: t.experience, f.min_experience),
        ]
        return self._list(self.store.technicians, predicates, page, limit, sort_by, sort_order)

    async def get_technician(self, technician_id: str) -> ApiResponse[Optional[Technician]]:
        await self.latency.wait(200, 400)
        technician = self.store.find_technician(technician_id)
        if technician is None:
            return create_api_response(None, f"Technician with ID {technician_id} not found")
        return create_api_response(snapshot(technician), "Technician retrieved successfully")

    async def get_available_technicians(
        self, category: ServiceCategory, area: str, is_emergency: bool = False
    ) -> ApiResponse[list[Technician]]:
        """Eligible technicians, best first."""
        await self.latency.wait(300, 600)
        ranked = rank_technicians(
            eligible_technicians(self.store.technicians, category, area, is_emergency)
        )
        return create_api_response(
            [snapshot(t) for t in ranked],
            f"Found {len(ranked)} available technicians for {category.value} in {area}",
        )

    async def get_emergency_technicians(self, area: Optional[str] = None) -> ApiResponse[list[Technician]]:
        await self.latency.wait(200, 400)
        found = [
            t
            for t in self.store.technicians
            if t.is_available and t.emergency_available and (area is None or covers_area(t, area))
        ]
        ranked = rank_technicians(found)
        where = f" in {area}" if area else ""
        return create_api_response(
            [snapshot(t) for t in ranked], f"Found {len(ranked)} emergency technicians{where}"
        )

    async def get_technicians_by_specialization(
        self, specialization: ServiceCategory
    ) -> ApiResponse[list[Technician]]:
        await self.latency.wait(200, 500)
        found = rank_technicians(t for t in self.store.technicians if specialization in t.specializations)
        return create_api_response(
            [snapshot(t) for t in found],
            f"Found {len(found)} technicians specializing in {specialization.value}",
        )

    async def check_technician_availability(
        self,
        technician_id: str,
        day: str,
        time_slot: str,
        area: str,
        is_emergency: bool = False,
    ) -> ApiResponse[TechnicianAvailability]:
        await self.latency.wait(300, 500)
        technician = self._require(technician_id)
        try:
            target = parse_date(day)
        except ValueError:
            raise InvalidRequestError(f"date must be a YYYY-MM-DD date, got {day!r}") from None
        start, end = _parse_window(time_slot)

        if not technician.is_available:
            result = TechnicianAvailability(available=False, reason="Technician is currently unavailable")
            return create_api_response(result, "Technician not available")

        if not covers_area(technician, area):
            result = TechnicianAvailability(available=False, reason=f"Technician does not cover {area} area")
            return create_api_response(result, "Technician not available for the requested area")

        if is_emergency and not technician.emergency_available:
            result = TechnicianAvailability(
                available=False, reason="Technician not available for emergency services"
            )
            return create_api_response(result, "Technician not available for emergency")

        hours = technician.working_hours
        if not _within_hours(technician, start):
            blocks = _blocks(technician)
            result = TechnicianAvailability(
                available=False,
                reason=f"Technician works from {hours.start} to {hours.end}",
                alternative_slots=[f"{s:02d}:00-{e:02d}:00" for s, e in blocks[:1]],
            )
            return create_api_response(result, "Requested time is outside technician working hours")

        if self._has_clash(technician_id, target, start, end):
            next_day = next(
                (
                    (target + timedelta(days=offset)).isoformat()
                    for offset in range(1, LOOKAHEAD_DAYS + 1)
                    if not self._has_clash(technician_id, target + timedelta(days=offset), start, end)
                ),
                None,
            )
            alternatives = [
                f"{s:02d}:00-{e:02d}:00"
                for s, e in _blocks(technician)
                if s != BREAK_HOUR
                and f"{s:02d}:00" != start
                and not self._has_clash(technician_id, target, f"{s:02d}:00", f"{e:02d}:00")
            ][:MAX_ALTERNATIVES]
            result = TechnicianAvailability(
                available=False,
                reason="Technician already booked for this slot",
                next_available=next_day,
                alternative_slots=alternatives,
            )
            return create_api_response(result, "Technician is not available")

        return create_api_response(TechnicianAvailability(available=True), "Technician is available")

    async def get_technician_schedule(self, technician_id: str, day: str) -> ApiResponse[TechnicianSchedule]:
        """Working day split into 3-hour blocks; the noon block is lunch."""
        await self.latency.wait(400, 600)
        technician = self._require(technician_id)
        try:
            target = parse_date(day)
        except ValueError:
            raise InvalidRequestError(f"date must be a YYYY-MM-DD date, got {day!r}") from None

        appointments = self._active_appointments(technician_id, target)
        blocks = []
        for start_hour, end_hour in _blocks(technician):
            start, end = f"{start_hour:02d}:00", f"{end_hour:02d}:00"
            if start_hour == BREAK_HOUR:
                blocks.append(ScheduleBlock(start=start, end=end, status=ScheduleBlockStatus.BREAK))
                continue
            held = next(
                (
                    a
                    for a in appointments
                    if start_hour <= a.scheduled_at.astimezone(IST).hour < end_hour
                ),
                None,
            )
            if held is not None:
                blocks.append(
                    ScheduleBlock(
                        start=start,
                        end=end,
                        status=ScheduleBlockStatus.BOOKED,
                        appointment_id=held.id,
                        service_id=held.service_id,
                    )
                )
            else:
                blocks.append(ScheduleBlock(start=start, end=end, status=ScheduleBlockStatus.AVAILABLE))

        schedule = TechnicianSchedule(technician_id=technician_id, date=target.isoformat(), time_slots=blocks)
        return create_api_response(schedule, f"Schedule retrieved for {target.isoformat()}")

    async def get_technician_stats(self) -> ApiResponse[TechnicianStats]:
        await self.latency.wait(400, 700)
        technicians = self.store.technicians
        count = len(technicians)
        specializations = Counter(s for t in technicians for s in t.specializations)
        areas = Counter(a for t in technicians for a in t.available_areas)
        stats = TechnicianStats(
            total=count,
            available=sum(1 for t in technicians if t.is_available),
            emergency_available=sum(1 for t in technicians if t.emergency_available),
            average_rating=round1(sum(t.rating for t in technicians) / count) if count else 0.0,
            average_experience=round1(sum(t.experience for t in technicians) / count) if count else 0.0,
            specializations={c: specializations.get(c, 0) for c in ServiceCategory},
            areas_covered=[AreaCoverage(area=a, technician_count=n) for a, n in areas.most_common()],
        )
        return create_api_response(stats, "Technician statistics retrieved successfully")

    async def update_technician_availability(
        self, technician_id: str, is_available: bool, reason: Optional[str] = None
    ) -> ApiResponse[Technician]:
        """Flip the availability flag. Existing appointments are untouched."""
        await self.latency.wait(300, 500)
        technician = self._require(technician_id)
        technician.is_available = is_available
        state = "available" if is_available else "unavailable"
        logger.info("Technician %s marked %s%s", technician_id, state, f": {reason}" if reason else "")
        return create_api_response(
            snapshot(technician),
            f"Technician availability updated to {state}{f': {reason}' if reason else ''}",
        )

    # ------------------------------------------------------------------ #
    # Public team directory
    # ------------------------------------------------------------------ #

    async def get_team_members(self) -> ApiResponse[list[TeamMember]]:
        await self.latency.wait(300, 600)
        members = [snapshot(m) for m in self.store.team_members]
        return create_api_response(members, f"Found {len(members)} team members")

    async def get_team_member(self, member_id: str) -> ApiResponse[Optional[TeamMember]]:
        await self.latency.wait(200, 400)
        member = self.store.find_team_member(member_id)
        if member is None:
            return create_api_response(None, f"Team member with ID {member_id} not found")
        return create_api_response(snapshot(member), "Team member retrieved successfully")
