"""Technician and public team-directory models."""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field

from acservice.schemas.service_schema import ServiceCategory


class WorkingHours(BaseModel):
    start: str = "09:00"
    end: str = "18:00"


class Technician(BaseModel):
    """Operational technician record used for assignment."""
    id: str
    name: str
    phone: str
    email: Optional[str] = None
    specializations: list[ServiceCategory]
    experience: int = Field(ge=0, description="Years of experience")
    certifications: list[str] = Field(default_factory=list)
    rating: float = Field(ge=0, le=5)
    total_jobs: int = 0
    available_areas: list[str] = Field(default_factory=list)
    working_hours: WorkingHours = Field(default_factory=WorkingHours)
    is_available: bool = True
    emergency_available: bool = False
    profile_image: Optional[str] = None


class TeamRole(str, Enum):
    TECHNICIAN = "Technician"
    SENIOR_TECHNICIAN = "Senior Technician"
    SUPERVISOR = "Supervisor"
    MANAGER = "Manager"


class TeamMember(BaseModel):
    """Public-facing profile, independent of the Technician record."""
    id: str
    name: str
    role: TeamRole
    experience: int
    specializations: list[str] = Field(default_factory=list)
    bio: str
    certifications: list[str] = Field(default_factory=list)
    contact_number: Optional[str] = None
    image: Optional[str] = None


class TechnicianFilters(BaseModel):
    specializations: Optional[list[ServiceCategory]] = None
    areas: Optional[list[str]] = None
    is_available: Optional[bool] = None
    emergency_available: Optional[bool] = None
    min_rating: Optional[float] = None
    min_experience: Optional[int] = None


class TechnicianAvailability(BaseModel):
    available: bool
    reason: Optional[str] = None
    next_available: Optional[str] = None
    alternative_slots: Optional[list[str]] = None


class ScheduleBlockStatus(str, Enum):
    AVAILABLE = "available"
    BOOKED = "booked"
    BREAK = "break"


class ScheduleBlock(BaseModel):
    start: str
    end: str
    status: ScheduleBlockStatus
    appointment_id: Optional[str] = None
    service_id: Optional[str] = None


class TechnicianSchedule(BaseModel):
    technician_id: str
    date: str
    time_slots: list[ScheduleBlock]


class AreaCoverage(BaseModel):
    area: str
    technician_count: int


class TechnicianStats(BaseModel):
    total: int
    available: int
    emergency_available: int
    average_rating: float
    average_experience: float
    specializations: dict[ServiceCategory, int]
    areas_covered: list[AreaCoverage]
