"""Booking, appointment and availability data models."""

from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field

from acservice.schemas.customer_schema import Address, CustomerDetails
from acservice.schemas.service_schema import ACType


class AppointmentStatus(str, Enum):
    SCHEDULED = "scheduled"
    CONFIRMED = "confirmed"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"
    CANCELLED = "cancelled"
    RESCHEDULED = "rescheduled"


TERMINAL_STATUSES = frozenset({AppointmentStatus.COMPLETED, AppointmentStatus.CANCELLED})


class Priority(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    EMERGENCY = "emergency"


class Urgency(str, Enum):
    NORMAL = "normal"
    URGENT = "urgent"
    EMERGENCY = "emergency"


class BookingSource(str, Enum):
    WEBSITE = "website"
    PHONE = "phone"
    WHATSAPP = "whatsapp"
    REFERRAL = "referral"


class WarrantyStatus(str, Enum):
    IN_WARRANTY = "in_warranty"
    OUT_OF_WARRANTY = "out_of_warranty"
    EXTENDED_WARRANTY = "extended_warranty"


class ChargeType(str, Enum):
    PARTS = "parts"
    EXTRA_SERVICE = "extra_service"
    EMERGENCY_FEE = "emergency_fee"
    TRAVEL_CHARGE = "travel_charge"


class TimeSlot(BaseModel):
    """A bookable window such as Morning 09:00-12:00."""
    start: str
    end: str
    label: str


class ACDetails(BaseModel):
    """Snapshot of the customer's unit at booking time."""
    brand: str
    model: Optional[str] = None
    type: ACType
    capacity: str = "1.5 Ton"
    age: int = Field(default=1, ge=0, description="Age in years")
    warranty_status: WarrantyStatus = WarrantyStatus.OUT_OF_WARRANTY
    issues: Optional[list[str]] = None


class AdditionalCharge(BaseModel):
    description: str
    amount: int
    type: ChargeType


class Pricing(BaseModel):
    estimated: int
    actual: Optional[int] = None
    additional_charges: list[AdditionalCharge] = Field(default_factory=list)


class Appointment(BaseModel):
    """A scheduled booking linking customer, service, address and technician."""
    id: str
    customer_id: str
    service_id: str
    scheduled_at: datetime
    estimated_duration: int
    status: AppointmentStatus = AppointmentStatus.SCHEDULED
    priority: Priority = Priority.MEDIUM
    notes: Optional[str] = None
    technician_id: Optional[str] = None
    ac_details: ACDetails
    address: Address
    pricing: Pricing
    created_at: datetime
    updated_at: datetime


class BookingRequest(BaseModel):
    """Validated booking form payload."""
    service_id: str
    customer_id: Optional[str] = None
    customer: CustomerDetails
    preferred_date: str
    preferred_time_slot: TimeSlot
    ac_details: ACDetails
    address: Address
    urgency: Urgency = Urgency.NORMAL
    notes: Optional[str] = None
    source: BookingSource = BookingSource.WEBSITE


class BookingFilters(BaseModel):
    status: Optional[AppointmentStatus] = None
    customer_id: Optional[str] = None
    service_id: Optional[str] = None
    technician_id: Optional[str] = None
    date_from: Optional[str] = None
    date_to: Optional[str] = None
    priority: Optional[Priority] = None


class AvailabilityRequest(BaseModel):
    date: str
    service_area: str
    is_emergency: bool = False
    duration: int = Field(default=90, gt=0)


class SlotAvailability(TimeSlot):
    available: bool
    available_slots: int
    next_available: Optional[str] = None


class AvailabilityResponse(BaseModel):
    """Calendar availability check result."""
    date: str
    time_slots: list[SlotAvailability]
    emergency_available: bool
    recommended_slots: list[TimeSlot] = Field(default_factory=list)


class BookingStats(BaseModel):
    total: int
    completed: int
    cancelled: int
    pending: int
    emergency: int
    by_status: dict[AppointmentStatus, int]
    by_priority: dict[Priority, int]
    average_rating: float
