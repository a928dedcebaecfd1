"""Testimonial (customer review) models."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field


class Testimonial(BaseModel):
    id: str
    customer_name: str
    customer_area: str
    service: str
    rating: int = Field(ge=1, le=5)
    comment: str
    date: datetime
    verified: bool = False
    image: Optional[str] = None


class CreateTestimonialRequest(BaseModel):
    """Customer-submitted review.

    Rating is range-checked by the testimonial service rather than here so
    an out-of-range value surfaces as a service-layer validation error.
    ``verified`` is accepted for form compatibility and always ignored.
    """
    customer_name: str
    customer_area: str = ""
    service: str = ""
    rating: int
    comment: str
    customer_phone: Optional[str] = None
    appointment_id: Optional[str] = None
    image: Optional[str] = None
    verified: Optional[bool] = None


class TestimonialFilters(BaseModel):
    rating: Optional[int] = None
    min_rating: Optional[int] = None
    service: Optional[str] = None
    area: Optional[str] = None
    verified: Optional[bool] = None
    date_from: Optional[str] = None
    date_to: Optional[str] = None


class GroupRating(BaseModel):
    name: str
    count: int
    average_rating: float


class TestimonialStats(BaseModel):
    total: int
    average_rating: float
    verified: int
    rating_distribution: dict[int, int]
    top_services: list[GroupRating]
    top_areas: list[GroupRating]
    recent_testimonials: list[Testimonial]
