"""
Centralized configuration with environment variable overrides.

Business constants, simulated-latency behaviour, booking placeholders,
pagination limits and cache staleness windows are all configurable here.
Nothing is hardcoded in the entity services.
"""

import logging
import os
from dataclasses import dataclass, field

from dotenv import load_dotenv

load_dotenv()

logger = logging.getLogger(__name__)

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


def _safe_int(env_var: str, default: str) -> int:
    """Parse an integer from an env var with a clear error on bad values."""
    raw = os.getenv(env_var, default)
    try:
        return int(raw)
    except (ValueError, TypeError):
        raise ValueError(
            f"Invalid integer for {env_var}: {raw!r}"
        ) from None


def _safe_float(env_var: str, default: str) -> float:
    """Parse a float from an env var with a clear error on bad values."""
    raw = os.getenv(env_var, default)
    try:
        return float(raw)
    except (ValueError, TypeError):
        raise ValueError(
            f"Invalid float for {env_var}: {raw!r}"
        ) from None


def _safe_bool(env_var: str, default: str) -> bool:
    """Parse a boolean flag (true/false, yes/no, 1/0, on/off)."""
    raw = os.getenv(env_var, default).strip().lower()
    if raw in _TRUE_VALUES:
        return True
    if raw in _FALSE_VALUES:
        return False
    raise ValueError(f"Invalid boolean for {env_var}: {raw!r}")


@dataclass(frozen=True)
class BusinessConfig:
    """Business-specific settings loaded from environment or defaults."""

    name: str = os.getenv("BUSINESS_NAME", "AC Servicing Pro")
    city: str = os.getenv("BUSINESS_CITY", "Patna")
    state: str = os.getenv("BUSINESS_STATE", "Bihar")
    support_phone: str = os.getenv("SUPPORT_PHONE", "+91-9876543210")
    currency: str = os.getenv("CURRENCY", "INR")


@dataclass(frozen=True)
class LatencyConfig:
    """Simulated network latency applied before every service call."""

    enabled: bool = _safe_bool("SIMULATE_LATENCY", "true")
    scale: float = _safe_float("LATENCY_SCALE", "1.0")


@dataclass(frozen=True)
class BookingConfig:
    """Booking placeholders and capacity limits."""

    placeholder_estimate: int = _safe_int("PLACEHOLDER_ESTIMATE", "999")
    default_duration_minutes: int = _safe_int("DEFAULT_DURATION_MINUTES", "90")
    max_bookings_per_slot: int = _safe_int("MAX_BOOKINGS_PER_SLOT", "5")
    placeholder_average_rating: float = _safe_float("PLACEHOLDER_AVERAGE_RATING", "4.6")
    urgent_surcharge: int = _safe_int("URGENT_SURCHARGE", "150")
    emergency_surcharge: int = _safe_int("EMERGENCY_SURCHARGE", "300")
    recommended_slot_count: int = _safe_int("RECOMMENDED_SLOT_COUNT", "3")


@dataclass(frozen=True)
class PaginationConfig:
    """Page size defaults for every list endpoint."""

    default_limit: int = _safe_int("DEFAULT_PAGE_SIZE", "10")
    max_limit: int = _safe_int("MAX_PAGE_SIZE", "100")


@dataclass(frozen=True)
class CacheConfig:
    """Staleness windows (seconds) per entity family for the query cache."""

    services_stale_seconds: int = _safe_int("CACHE_SERVICES_STALE", "900")
    bookings_stale_seconds: int = _safe_int("CACHE_BOOKINGS_STALE", "120")
    availability_stale_seconds: int = _safe_int("CACHE_AVAILABILITY_STALE", "60")
    customers_stale_seconds: int = _safe_int("CACHE_CUSTOMERS_STALE", "300")
    technicians_stale_seconds: int = _safe_int("CACHE_TECHNICIANS_STALE", "300")
    testimonials_stale_seconds: int = _safe_int("CACHE_TESTIMONIALS_STALE", "600")


@dataclass(frozen=True)
class AuthConfig:
    """Mock OTP login settings."""

    demo_otp: str = os.getenv("DEMO_OTP", "123456")


@dataclass(frozen=True)
class AppConfig:
    """Root configuration aggregating all sub-configs."""

    business: BusinessConfig = field(default_factory=BusinessConfig)
    latency: LatencyConfig = field(default_factory=LatencyConfig)
    booking: BookingConfig = field(default_factory=BookingConfig)
    pagination: PaginationConfig = field(default_factory=PaginationConfig)
    cache: CacheConfig = field(default_factory=CacheConfig)
    auth: AuthConfig = field(default_factory=AuthConfig)
    log_level: str = os.getenv("LOG_LEVEL", "INFO")


def _validate_config(config: AppConfig) -> None:
    """Validate configuration values are within acceptable ranges."""
    if config.latency.scale < 0:
        raise ValueError(f"LATENCY_SCALE must be >= 0, got {config.latency.scale}")
    if config.booking.placeholder_estimate < 0:
        raise ValueError(
            f"PLACEHOLDER_ESTIMATE must be >= 0, got {config.booking.placeholder_estimate}"
        )
    if config.booking.default_duration_minutes < 1:
        raise ValueError(
            "DEFAULT_DURATION_MINUTES must be >= 1, "
            f"got {config.booking.default_duration_minutes}"
        )
    if config.booking.max_bookings_per_slot < 1:
        raise ValueError(
            f"MAX_BOOKINGS_PER_SLOT must be >= 1, got {config.booking.max_bookings_per_slot}"
        )
    if not 0.0 <= config.booking.placeholder_average_rating <= 5.0:
        raise ValueError(
            "PLACEHOLDER_AVERAGE_RATING must be between 0.0 and 5.0, "
            f"got {config.booking.placeholder_average_rating}"
        )
    if config.booking.recommended_slot_count < 1:
        raise ValueError(
            f"RECOMMENDED_SLOT_COUNT must be >= 1, got {config.booking.recommended_slot_count}"
        )
    if config.pagination.default_limit < 1:
        raise ValueError(
            f"DEFAULT_PAGE_SIZE must be >= 1, got {config.pagination.default_limit}"
        )
    if config.pagination.max_limit < config.pagination.default_limit:
        raise ValueError(
            "MAX_PAGE_SIZE must be >= DEFAULT_PAGE_SIZE, "
            f"got {config.pagination.max_limit}"
        )

    for name, value in [
        ("URGENT_SURCHARGE", config.booking.urgent_surcharge),
        ("EMERGENCY_SURCHARGE", config.booking.emergency_surcharge),
        ("CACHE_SERVICES_STALE", config.cache.services_stale_seconds),
        ("CACHE_BOOKINGS_STALE", config.cache.bookings_stale_seconds),
        ("CACHE_AVAILABILITY_STALE", config.cache.availability_stale_seconds),
        ("CACHE_CUSTOMERS_STALE", config.cache.customers_stale_seconds),
        ("CACHE_TECHNICIANS_STALE", config.cache.technicians_stale_seconds),
        ("CACHE_TESTIMONIALS_STALE", config.cache.testimonials_stale_seconds),
    ]:
        if value < 0:
            raise ValueError(f"{name} must be >= 0, got {value}")

    if not config.auth.demo_otp.strip():
        raise ValueError("DEMO_OTP must not be empty")


def load_config() -> AppConfig:
    """Load and validate application configuration."""
    config = AppConfig()
    _validate_config(config)
    logging.basicConfig(
        level=getattr(logging, config.log_level.upper(), logging.INFO),
        format="%(asctime)s [%(name)s] %(levelname)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    logger.info("Configuration loaded for '%s'", config.business.name)
    return config


# Singleton instance
settings = load_config()
