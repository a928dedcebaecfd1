"""Shared utilities used across the AC service data layer."""

import re
import uuid
from datetime import date, datetime, time, timedelta, timezone
from typing import Optional

# Patna runs on Indian Standard Time; every timestamp in the store is IST-aware.
IST = timezone(timedelta(hours=5, minutes=30), name="IST")

NATIONAL_NUMBER_DIGITS = 10


def normalize_phone(value: str) -> str:
    """Normalize a phone number by stripping everything except digits and a leading +.

    Examples:
        >>> normalize_phone("98765 43201")
        '9876543201'
        >>> normalize_phone("+91-98765-43201")
        '+919876543201'
    """
    value = value.strip()
    if value.startswith("+"):
        return "+" + re.sub(r"[^\d]", "", value[1:])
    return re.sub(r"[^\d]", "", value)


def canonical_phone(value: str) -> str:
    """Reduce an Indian phone number to its 10-digit national form.

    Handles the +91 / 91 country prefix and the leading trunk 0, so
    "+91-9876543201", "09876543201" and "98765 43201" compare equal.
    Numbers that don't fit the pattern come back merely normalized.

    Examples:
        >>> canonical_phone("+91-9876543201")
        '9876543201'
        >>> canonical_phone("09876543201")
        '9876543201'
    """
    digits = normalize_phone(value).lstrip("+")
    if len(digits) == NATIONAL_NUMBER_DIGITS + 2 and digits.startswith("91"):
        return digits[2:]
    if len(digits) == NATIONAL_NUMBER_DIGITS + 1 and digits.startswith("0"):
        return digits[1:]
    return digits


def generate_id(prefix: str) -> str:
    """Return a short unique id such as ``apt_3f9c1a2b7d4e``."""
    return f"{prefix}_{uuid.uuid4().hex[:12]}"


def now_ist() -> datetime:
    """Current time in IST."""
    return datetime.now(IST)


def parse_date(value: str) -> date:
    """Parse a YYYY-MM-DD string. Raises ValueError on anything else."""
    return datetime.strptime(value.strip(), "%Y-%m-%d").date()


def parse_clock(value: str) -> time:
    """Parse an HH:MM string. Raises ValueError on anything else."""
    return datetime.strptime(value.strip(), "%H:%M").time()


def start_of_day(day: date) -> datetime:
    return datetime.combine(day, time.min, tzinfo=IST)


def end_of_day(day: date) -> datetime:
    return datetime.combine(day, time.max, tzinfo=IST)


def at_local_time(day: date, clock: str) -> datetime:
    """Combine a date with an HH:MM clock string into an IST datetime."""
    return datetime.combine(day, parse_clock(clock), tzinfo=IST)


def minutes_between(start: str, end: str) -> int:
    """Length of an HH:MM-HH:MM window in minutes; an end of 00:00 means midnight."""
    start_t = parse_clock(start)
    end_t = parse_clock(end)
    start_min = start_t.hour * 60 + start_t.minute
    end_min = end_t.hour * 60 + end_t.minute
    if end_min <= start_min:
        end_min += 24 * 60
    return end_min - start_min


def round1(value: float) -> float:
    """Round to one decimal place, the precision used for ratings."""
    return round(value * 10) / 10


def contains_ci(haystack: Optional[str], needle: str) -> bool:
    """Case-insensitive substring test that treats None as no match."""
    return haystack is not None and needle.lower() in haystack.lower()
