from acservice.services.booking import BookingService
from acservice.services.catalog import CatalogService
from acservice.services.customer import CustomerService
from acservice.services.team import TeamService
from acservice.services.testimonial import TestimonialService

__all__ = [
    "BookingService",
    "CatalogService",
    "CustomerService",
    "TeamService",
    "TestimonialService",
]
