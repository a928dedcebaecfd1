"""Customer and address data models."""

from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field


class CustomerType(str, Enum):
    RESIDENTIAL = "residential"
    COMMERCIAL = "commercial"


class AddressType(str, Enum):
    HOME = "home"
    OFFICE = "office"
    OTHER = "other"


class LoyaltyTier(str, Enum):
    BRONZE = "bronze"
    SILVER = "silver"
    GOLD = "gold"
    PLATINUM = "platinum"


class Address(BaseModel):
    """A service address. ``id`` is assigned by the customer service."""
    id: Optional[str] = None
    type: AddressType = AddressType.HOME
    street: str
    area: str
    city: str = "Patna"
    state: str = "Bihar"
    pincode: str
    landmarks: Optional[list[str]] = None
    is_default: bool = False
    service_area: str


class AddressUpdate(BaseModel):
    """Partial address update; unset fields are left untouched."""
    type: Optional[AddressType] = None
    street: Optional[str] = None
    area: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    pincode: Optional[str] = None
    landmarks: Optional[list[str]] = None
    is_default: Optional[bool] = None
    service_area: Optional[str] = None


class CustomerDetails(BaseModel):
    """Contact details captured by the booking form."""
    name: str
    phone: str
    email: Optional[str] = None
    alternate_phone: Optional[str] = None


class Customer(BaseModel):
    """Customer record. Always holds at least one address, exactly one default."""
    id: str
    name: str
    phone: str
    email: Optional[str] = None
    alternate_phone: Optional[str] = None
    addresses: list[Address] = Field(default_factory=list)
    customer_type: CustomerType = CustomerType.RESIDENTIAL
    loyalty_points: int = Field(default=0, ge=0)
    total_bookings: int = 0
    created_at: datetime
    updated_at: datetime


class CreateCustomerRequest(BaseModel):
    name: str
    phone: str
    email: Optional[str] = None
    alternate_phone: Optional[str] = None
    address: Address
    customer_type: CustomerType = CustomerType.RESIDENTIAL


class UpdateCustomerRequest(BaseModel):
    name: Optional[str] = None
    email: Optional[str] = None
    alternate_phone: Optional[str] = None
    customer_type: Optional[CustomerType] = None


class CustomerFilters(BaseModel):
    customer_type: Optional[CustomerType] = None
    area: Optional[str] = None
    search: Optional[str] = None
    has_email: Optional[bool] = None
    loyalty_tier: Optional[LoyaltyTier] = None


class AreaCount(BaseModel):
    area: str
    count: int


class CustomerStats(BaseModel):
    total: int
    residential: int
    commercial: int
    with_email: int
    loyalty_tiers: dict[LoyaltyTier, int]
    top_areas: list[AreaCount]
