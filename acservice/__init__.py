"""In-memory booking and availability data layer for an AC service business in Patna."""

from acservice.database import MockDatabase
from acservice.data.store import DataStore
from acservice.errors import (
    ApiError,
    AuthenticationError,
    BusinessRuleError,
    ConflictError,
    InvalidRequestError,
    NotFoundError,
)

__version__ = "0.1.0"

__all__ = [
    "MockDatabase",
    "DataStore",
    "ApiError",
    "AuthenticationError",
    "BusinessRuleError",
    "ConflictError",
    "InvalidRequestError",
    "NotFoundError",
]
