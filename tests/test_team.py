"""Tests for technicians and the team directory."""

import pytest

from acservice.errors import InvalidRequestError, NotFoundError
from acservice.schemas.service_schema import ServiceCategory
from acservice.schemas.team_schema import ScheduleBlockStatus, TeamRole, TechnicianFilters, WorkingHours


class TestListTechnicians:
    @pytest.mark.asyncio
    async def test_default_sort_is_rating_desc(self, team):
        page = await team.list_technicians()
        assert page.data[0].id == "tech-001"
        assert [t.rating for t in page.data] == sorted((t.rating for t in page.data), reverse=True)

    @pytest.mark.asyncio
    async def test_specialization_any_of(self, team):
        page = await team.list_technicians(
            filters=TechnicianFilters(specializations=[ServiceCategory.EMERGENCY])
        )
        assert {t.id for t in page.data} == {"tech-003", "tech-005", "tech-006"}

    @pytest.mark.asyncio
    async def test_area_filter_case_insensitive(self, team):
        page = await team.list_technicians(filters=TechnicianFilters(areas=["kankarbagh"]))
        assert {t.id for t in page.data} == {"tech-002", "tech-003", "tech-006"}

    @pytest.mark.asyncio
    async def test_minimums(self, team):
        rated = await team.list_technicians(filters=TechnicianFilters(min_rating=4.7))
        seasoned = await team.list_technicians(filters=TechnicianFilters(min_experience=10))
        assert rated.pagination.total == 4
        assert {t.id for t in seasoned.data} == {"tech-001", "tech-005"}

    @pytest.mark.asyncio
    async def test_availability_flag(self, team):
        page = await team.list_technicians(filters=TechnicianFilters(is_available=False))
        assert [t.id for t in page.data] == ["tech-005"]

    @pytest.mark.asyncio
    async def test_sort_by_experience(self, team):
        page = await team.list_technicians(sort_by="experience", sort_order="asc", limit=1)
        assert page.data[0].id == "tech-006"


class TestTechnicianLookups:
    @pytest.mark.asyncio
    async def test_get_missing_returns_null(self, team):
        response = await team.get_technician("tech-999")
        assert response.data is None

    @pytest.mark.asyncio
    async def test_available_for_category_and_area(self, team):
        response = await team.get_available_technicians(ServiceCategory.REPAIR, "Kankarbagh")
        assert [t.id for t in response.data] == ["tech-002", "tech-003", "tech-006"]

    @pytest.mark.asyncio
    async def test_emergency_technicians_in_area(self, team):
        response = await team.get_emergency_technicians("Boring Road")
        assert [t.id for t in response.data] == ["tech-001", "tech-003"]

    @pytest.mark.asyncio
    async def test_emergency_technicians_anywhere(self, team):
        response = await team.get_emergency_technicians()
        assert {t.id for t in response.data} == {"tech-001", "tech-003", "tech-006"}

    @pytest.mark.asyncio
    async def test_by_specialization(self, team):
        response = await team.get_technicians_by_specialization(ServiceCategory.CLEANING)
        assert [t.id for t in response.data] == ["tech-002", "tech-003", "tech-004"]


class TestTechnicianAvailability:
    @pytest.mark.asyncio
    async def test_free_window(self, team):
        response = await team.check_technician_availability("tech-001", "2024-03-05", "09:00-12:00", "Bailey Road")
        assert response.data.available is True

    @pytest.mark.asyncio
    async def test_clash_with_stored_appointment(self, team):
        response = await team.check_technician_availability("tech-001", "2024-03-05", "15:00-18:00", "Bailey Road")
        result = response.data
        assert result.available is False
        assert result.reason == "Technician already booked for this slot"
        assert result.next_available == "2024-03-06"
        assert result.alternative_slots == ["09:00-12:00"]

    @pytest.mark.asyncio
    async def test_area_not_covered(self, team):
        response = await team.check_technician_availability("tech-002", "2024-03-05", "09:00-12:00", "Digha")
        assert response.data.available is False
        assert "does not cover Digha" in response.data.reason

    @pytest.mark.asyncio
    async def test_emergency_capability(self, team):
        response = await team.check_technician_availability(
            "tech-002", "2024-03-05", "09:00-12:00", "Kankarbagh", is_emergency=True
        )
        assert response.data.reason == "Technician not available for emergency services"

    @pytest.mark.asyncio
    async def test_outside_working_hours(self, team):
        response = await team.check_technician_availability("tech-001", "2024-03-05", "19:00-21:00", "Boring Road")
        assert response.data.available is False
        assert response.data.reason == "Technician works from 09:00 to 18:00"
        assert response.data.alternative_slots == ["09:00-12:00"]

    @pytest.mark.asyncio
    async def test_short_window_outside_hours_has_no_alternatives(self, team, store):
        store.find_technician("tech-001").working_hours = WorkingHours(start="09:00", end="09:30")
        response = await team.check_technician_availability("tech-001", "2024-06-01", "10:00-11:00", "Boring Road")
        assert response.data.available is False
        assert response.data.alternative_slots == []

    @pytest.mark.asyncio
    async def test_overnight_working_window(self, team, store):
        store.find_technician("tech-006").working_hours = WorkingHours(start="22:00", end="02:00")
        late = await team.check_technician_availability("tech-006", "2024-06-01", "23:00-01:00", "Kankarbagh")
        assert late.data.available is True
        daytime = await team.check_technician_availability("tech-006", "2024-06-01", "10:00-12:00", "Kankarbagh")
        assert daytime.data.available is False
        assert daytime.data.reason == "Technician works from 22:00 to 02:00"
        assert daytime.data.alternative_slots == []

    @pytest.mark.asyncio
    async def test_off_duty_technician(self, team):
        response = await team.check_technician_availability("tech-005", "2024-03-05", "10:00-13:00", "Fraser Road")
        assert response.data.available is False

    @pytest.mark.asyncio
    async def test_missing_technician(self, team):
        with pytest.raises(NotFoundError):
            await team.check_technician_availability("tech-999", "2024-03-05", "09:00-12:00", "Digha")

    @pytest.mark.asyncio
    async def test_malformed_window(self, team):
        with pytest.raises(InvalidRequestError):
            await team.check_technician_availability("tech-001", "2024-03-05", "morning", "Boring Road")


class TestSchedule:
    @pytest.mark.asyncio
    async def test_blocks_with_break_and_booking(self, team):
        schedule = (await team.get_technician_schedule("tech-001", "2024-03-05")).data
        statuses = [(b.start, b.status) for b in schedule.time_slots]
        assert statuses == [
            ("09:00", ScheduleBlockStatus.AVAILABLE),
            ("12:00", ScheduleBlockStatus.BREAK),
            ("15:00", ScheduleBlockStatus.BOOKED),
        ]
        assert schedule.time_slots[2].appointment_id == "apt-003"

    @pytest.mark.asyncio
    async def test_last_block_clipped_to_working_end(self, team):
        schedule = (await team.get_technician_schedule("tech-002", "2024-06-01")).data
        assert len(schedule.time_slots) == 4
        assert schedule.time_slots[-1].end == "19:00"

    @pytest.mark.asyncio
    async def test_missing_technician(self, team):
        with pytest.raises(NotFoundError):
            await team.get_technician_schedule("tech-999", "2024-03-05")


class TestTeamStatsAndUpdates:
    @pytest.mark.asyncio
    async def test_stats(self, team):
        stats = (await team.get_technician_stats()).data
        assert stats.total == 6
        assert stats.available == 5
        assert stats.emergency_available == 4
        assert stats.average_rating == 4.7
        assert stats.average_experience == 7.2
        assert stats.specializations[ServiceCategory.REPAIR] == 5

    @pytest.mark.asyncio
    async def test_update_availability(self, team):
        response = await team.update_technician_availability("tech-004", False, reason="On leave")
        assert response.data.is_available is False
        assert "On leave" in response.message
        ranked = await team.get_available_technicians(ServiceCategory.CLEANING, "Digha")
        assert [t.id for t in ranked.data] == ["tech-003"]

    @pytest.mark.asyncio
    async def test_update_missing(self, team):
        with pytest.raises(NotFoundError):
            await team.update_technician_availability("tech-999", True)


class TestTeamDirectory:
    @pytest.mark.asyncio
    async def test_members(self, team):
        response = await team.get_team_members()
        assert len(response.data) == 4
        assert {m.role for m in response.data} == {
            TeamRole.SENIOR_TECHNICIAN,
            TeamRole.TECHNICIAN,
            TeamRole.SUPERVISOR,
        }

    @pytest.mark.asyncio
    async def test_get_member(self, team):
        assert (await team.get_team_member("team-3")).data.name == "Pradeep Sharma"
        assert (await team.get_team_member("team-9")).data is None
