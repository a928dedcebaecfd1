"""Tests for shared utility functions."""

from datetime import date

import pytest

from acservice.utils import (
    IST,
    at_local_time,
    canonical_phone,
    contains_ci,
    generate_id,
    minutes_between,
    normalize_phone,
    parse_date,
    round1,
)


class TestNormalizePhone:
    def test_strips_spaces(self):
        assert normalize_phone("98765 43201") == "9876543201"

    def test_strips_dashes(self):
        assert normalize_phone("98765-43201") == "9876543201"

    def test_preserves_leading_plus(self):
        assert normalize_phone("+91 98765 43201") == "+919876543201"

    def test_strips_whitespace(self):
        assert normalize_phone("  9876543201  ") == "9876543201"

    def test_mixed_separators(self):
        assert normalize_phone("+91 (98765) 432-01") == "+919876543201"


class TestCanonicalPhone:
    @pytest.mark.parametrize(
        "raw",
        ["+91-9876543201", "919876543201", "09876543201", "98765 43201", "+91 98765 43201"],
    )
    def test_equivalent_forms(self, raw):
        assert canonical_phone(raw) == "9876543201"

    def test_unrecognised_number_only_normalized(self):
        assert canonical_phone("+44 20 7946 0958") == "442079460958"


class TestDates:
    def test_parse_date(self):
        assert parse_date("2024-03-05") == date(2024, 3, 5)

    @pytest.mark.parametrize("raw", ["05-03-2024", "2024-13-01", "tomorrow", ""])
    def test_parse_date_rejects(self, raw):
        with pytest.raises(ValueError):
            parse_date(raw)

    def test_at_local_time_is_ist(self):
        moment = at_local_time(date(2024, 3, 5), "15:00")
        assert moment.tzinfo is IST
        assert moment.hour == 15

    def test_minutes_between(self):
        assert minutes_between("09:00", "12:00") == 180

    def test_minutes_between_midnight_end(self):
        assert minutes_between("21:00", "00:00") == 180


class TestMisc:
    def test_generate_id_prefix(self):
        value = generate_id("apt")
        assert value.startswith("apt_")
        assert len(value) == len("apt_") + 12

    def test_generate_id_unique(self):
        assert generate_id("x") != generate_id("x")

    def test_round1(self):
        assert round1(4.716) == 4.7

    def test_contains_ci(self):
        assert contains_ci("Boring Road", "boring")
        assert not contains_ci(None, "boring")
