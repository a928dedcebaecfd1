"""Service catalog and service-area data models."""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field


class ServiceCategory(str, Enum):
    MAINTENANCE = "maintenance"
    REPAIR = "repair"
    INSTALLATION = "installation"
    CLEANING = "cleaning"
    EMERGENCY = "emergency"


class ACType(str, Enum):
    WINDOW = "window"
    SPLIT = "split"
    CENTRAL = "central"
    CASSETTE = "cassette"
    TOWER = "tower"
    PORTABLE = "portable"


class Price(BaseModel):
    """Price band in whole rupees."""
    min: int = Field(ge=0)
    max: Optional[int] = None
    currency: str = "INR"


class Warranty(BaseModel):
    duration_days: int = Field(ge=0)
    coverage: str


class Service(BaseModel):
    """A bookable AC service. Read-only after seeding."""
    id: str
    name: str
    description: str
    price: Price
    duration: int = Field(gt=0, description="Duration in minutes")
    category: ServiceCategory
    features: list[str] = Field(default_factory=list)
    is_emergency: bool = False
    available_for: list[ACType] = Field(default_factory=list)
    warranty: Optional[Warranty] = None


class ServiceArea(BaseModel):
    """A named zone of Patna used for technician routing and surcharges."""
    name: str
    pincode: str
    landmarks: list[str] = Field(default_factory=list)
    delivery_time: str
    emergency_available: bool = True
    additional_charge: int = 0


class ServiceFilters(BaseModel):
    """Filters accepted by the service catalog list call."""
    category: Optional[ServiceCategory] = None
    min_price: Optional[int] = None
    max_price: Optional[int] = None
    ac_types: Optional[list[ACType]] = None
    is_emergency: Optional[bool] = None
    search: Optional[str] = None


class CategorySummary(BaseModel):
    category: ServiceCategory
    count: int
    services: list[Service]


class PricingEstimate(BaseModel):
    base_price: int
    area_charge: int
    urgency_charge: int = 0
    total_estimate: int
    service: Service


class SearchIntent(str, Enum):
    SERVICE_INQUIRY = "service_inquiry"
    BOOKING_INTENT = "booking_intent"
    SUPPORT_REQUEST = "support_request"
    GENERAL = "general"


class SmartSearchResult(BaseModel):
    services: list[Service]
    suggestions: list[str]
    intent: SearchIntent
    confidence: float
