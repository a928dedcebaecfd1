"""Tests for testimonials and moderation."""

import pytest

from acservice.errors import InvalidRequestError, NotFoundError
from acservice.schemas import testimonial_schema as ts


def review(**overrides) -> ts.CreateTestimonialRequest:
    fields = dict(
        customer_name="Ritu Raj",
        customer_area="Kidwaipuri",
        service="AC Deep Cleaning",
        rating=5,
        comment="Spotless work.",
    )
    fields.update(overrides)
    return ts.CreateTestimonialRequest(**fields)


class TestListTestimonials:
    @pytest.mark.asyncio
    async def test_min_rating_matches_manual_filter(self, testimonials, store):
        page = await testimonials.list_testimonials(filters=ts.TestimonialFilters(min_rating=4))
        expected = [t for t in store.testimonials if t.rating >= 4]
        assert page.pagination.total == len(expected) == 8
        assert all(t.rating >= 4 for t in page.data)

    @pytest.mark.asyncio
    async def test_exact_rating(self, testimonials):
        page = await testimonials.list_testimonials(filters=ts.TestimonialFilters(rating=3))
        assert [t.id for t in page.data] == ["test-008"]

    @pytest.mark.asyncio
    async def test_newest_first_by_default(self, testimonials):
        page = await testimonials.list_testimonials(limit=2)
        assert [t.id for t in page.data] == ["test-010", "test-009"]

    @pytest.mark.asyncio
    async def test_unverified_filter(self, testimonials):
        page = await testimonials.list_testimonials(filters=ts.TestimonialFilters(verified=False))
        assert {t.id for t in page.data} == {"test-009", "test-010"}

    @pytest.mark.asyncio
    async def test_service_substring(self, testimonials):
        page = await testimonials.list_testimonials(filters=ts.TestimonialFilters(service="repair"))
        assert page.pagination.total == 4

    @pytest.mark.asyncio
    async def test_area_substring(self, testimonials):
        page = await testimonials.list_testimonials(filters=ts.TestimonialFilters(area="kankar"))
        assert {t.id for t in page.data} == {"test-002", "test-009"}

    @pytest.mark.asyncio
    async def test_date_range_inclusive(self, testimonials):
        page = await testimonials.list_testimonials(
            filters=ts.TestimonialFilters(date_from="2024-01-01", date_to="2024-01-10")
        )
        assert {t.id for t in page.data} == {"test-002", "test-003", "test-004", "test-005", "test-006"}

    @pytest.mark.asyncio
    async def test_bad_date(self, testimonials):
        with pytest.raises(InvalidRequestError):
            await testimonials.list_testimonials(filters=ts.TestimonialFilters(date_from="yesterday"))

    @pytest.mark.asyncio
    async def test_sort_by_customer_name(self, testimonials):
        page = await testimonials.list_testimonials(sort_by="customer_name", sort_order="asc", limit=1)
        assert page.data[0].customer_name == "Amit Sharma"


class TestCreateTestimonial:
    @pytest.mark.asyncio
    @pytest.mark.parametrize("rating", [0, 6, -1, 10])
    async def test_out_of_range_rating_rejected(self, testimonials, store, rating):
        with pytest.raises(InvalidRequestError, match="Rating"):
            await testimonials.create_testimonial(review(rating=rating))
        assert len(store.testimonials) == 10

    @pytest.mark.asyncio
    @pytest.mark.parametrize("rating", [1, 3, 5])
    async def test_valid_ratings_accepted(self, testimonials, rating):
        response = await testimonials.create_testimonial(review(rating=rating))
        assert response.data.rating == rating

    @pytest.mark.asyncio
    async def test_always_unverified(self, testimonials):
        response = await testimonials.create_testimonial(review(verified=True))
        assert response.data.verified is False

    @pytest.mark.asyncio
    async def test_blank_comment_rejected(self, testimonials):
        with pytest.raises(InvalidRequestError, match="Comment"):
            await testimonials.create_testimonial(review(comment=" "))

    @pytest.mark.asyncio
    async def test_blank_name_rejected(self, testimonials):
        with pytest.raises(InvalidRequestError, match="name"):
            await testimonials.create_testimonial(review(customer_name=""))

    @pytest.mark.asyncio
    async def test_new_testimonial_hidden_from_public_views(self, testimonials):
        await testimonials.create_testimonial(review(customer_area="Kidwaipuri"))
        response = await testimonials.get_testimonials_by_area("Kidwaipuri")
        assert response.data == []


class TestPublicViews:
    @pytest.mark.asyncio
    async def test_featured_order(self, testimonials):
        response = await testimonials.get_featured_testimonials()
        assert [t.id for t in response.data] == [
            "test-001",
            "test-002",
            "test-004",
            "test-005",
            "test-007",
            "test-003",
        ]

    @pytest.mark.asyncio
    async def test_by_service(self, testimonials):
        response = await testimonials.get_testimonials_by_service("AC Repair")
        assert [t.id for t in response.data] == ["test-002", "test-007"]

    @pytest.mark.asyncio
    async def test_by_area(self, testimonials):
        response = await testimonials.get_testimonials_by_area("boring road")
        assert [t.id for t in response.data] == ["test-001", "test-007"]

    @pytest.mark.asyncio
    async def test_recent(self, testimonials):
        response = await testimonials.get_recent_testimonials(limit=3)
        assert [t.id for t in response.data] == ["test-001", "test-002", "test-003"]

    @pytest.mark.asyncio
    async def test_high_rating(self, testimonials):
        response = await testimonials.get_high_rating_testimonials(min_rating=5)
        assert {t.id for t in response.data} == {"test-001", "test-002", "test-004", "test-005", "test-007"}

    @pytest.mark.asyncio
    async def test_search_verified_only(self, testimonials):
        response = await testimonials.search_testimonials("gas")
        assert [t.id for t in response.data] == ["test-005", "test-008"]


class TestStats:
    @pytest.mark.asyncio
    async def test_stats(self, testimonials):
        stats = (await testimonials.get_testimonial_stats()).data
        assert stats.total == 10
        assert stats.verified == 8
        assert stats.average_rating == 4.2
        assert stats.rating_distribution == {1: 0, 2: 1, 3: 1, 4: 3, 5: 5}
        assert stats.top_services[0].name == "AC Repair"
        assert stats.top_services[0].count == 3
        assert [t.id for t in stats.recent_testimonials] == ["test-010", "test-009", "test-001"]


class TestModeration:
    @pytest.mark.asyncio
    async def test_verify_is_idempotent(self, testimonials):
        first = await testimonials.verify_testimonial("test-009")
        second = await testimonials.verify_testimonial("test-009")
        assert first.data.verified is True
        assert second.data == first.data

    @pytest.mark.asyncio
    async def test_verified_entry_becomes_public(self, testimonials):
        await testimonials.verify_testimonial("test-009")
        response = await testimonials.get_testimonials_by_area("Kankarbagh")
        assert "test-009" in [t.id for t in response.data]

    @pytest.mark.asyncio
    async def test_delete(self, testimonials, store):
        await testimonials.delete_testimonial("test-010")
        assert store.find_testimonial("test-010") is None
        assert (await testimonials.get_testimonial("test-010")).data is None

    @pytest.mark.asyncio
    async def test_delete_twice_raises_without_further_change(self, testimonials, store):
        await testimonials.delete_testimonial("test-010")
        with pytest.raises(NotFoundError):
            await testimonials.delete_testimonial("test-010")
        assert len(store.testimonials) == 9

    @pytest.mark.asyncio
    async def test_verify_missing(self, testimonials):
        with pytest.raises(NotFoundError):
            await testimonials.verify_testimonial("test-999")
