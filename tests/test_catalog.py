"""Tests for the service catalog."""

import pytest

from acservice.errors import InvalidRequestError, NotFoundError
from acservice.schemas.booking_schema import Urgency
from acservice.schemas.service_schema import ACType, SearchIntent, ServiceCategory, ServiceFilters


class TestListServices:
    @pytest.mark.asyncio
    async def test_default_page(self, catalog):
        page = await catalog.list_services()
        assert page.pagination.total == 12
        assert len(page.data) == 10
        assert page.pagination.total_pages == 2
        assert page.pagination.has_next_page is True

    @pytest.mark.asyncio
    async def test_second_page_holds_the_rest(self, catalog):
        page = await catalog.list_services(page=2)
        assert len(page.data) == 2
        assert page.pagination.has_prev_page is True

    @pytest.mark.asyncio
    async def test_category_filter(self, catalog):
        page = await catalog.list_services(filters=ServiceFilters(category=ServiceCategory.REPAIR))
        assert {s.id for s in page.data} == {"ac-repair", "compressor-repair"}

    @pytest.mark.asyncio
    async def test_ac_type_filter_is_any_of(self, catalog):
        page = await catalog.list_services(filters=ServiceFilters(ac_types=[ACType.CENTRAL]))
        assert page.pagination.total == 5
        assert all(ACType.CENTRAL in s.available_for for s in page.data)

    @pytest.mark.asyncio
    async def test_price_range_uses_minimum_price(self, catalog):
        page = await catalog.list_services(filters=ServiceFilters(max_price=1000))
        assert page.pagination.total == 7
        assert all(s.price.min <= 1000 for s in page.data)

    @pytest.mark.asyncio
    async def test_search_covers_features(self, catalog):
        page = await catalog.list_services(filters=ServiceFilters(search="leak detection"))
        assert [s.id for s in page.data] == ["gas-refilling"]

    @pytest.mark.asyncio
    async def test_total_matches_independent_filter(self, catalog, store):
        filters = ServiceFilters(is_emergency=False, min_price=500)
        page = await catalog.list_services(filters=filters, limit=3)
        expected = [s for s in store.services if not s.is_emergency and s.price.min >= 500]
        assert page.pagination.total == len(expected)
        assert len(page.data) <= 3

    @pytest.mark.asyncio
    async def test_sort_by_price(self, catalog):
        page = await catalog.list_services(sort_by="price", limit=3)
        assert [s.id for s in page.data] == ["basic-ac-service", "ac-repair", "ac-maintenance"]

    @pytest.mark.asyncio
    async def test_sort_by_price_descending(self, catalog):
        page = await catalog.list_services(sort_by="price", sort_order="desc", limit=1)
        assert page.data[0].id == "amc-annual"

    @pytest.mark.asyncio
    async def test_popularity_follows_catalog_order(self, catalog):
        page = await catalog.list_services(sort_by="popularity", limit=2)
        assert [s.id for s in page.data] == ["ac-maintenance", "basic-ac-service"]

    @pytest.mark.asyncio
    async def test_unknown_sort_field(self, catalog):
        with pytest.raises(InvalidRequestError):
            await catalog.list_services(sort_by="rating")


class TestServiceLookups:
    @pytest.mark.asyncio
    async def test_get_existing(self, catalog):
        response = await catalog.get_service("ac-repair")
        assert response.success is True
        assert response.data.name == "AC Repair Service"

    @pytest.mark.asyncio
    async def test_get_missing_is_null_success(self, catalog):
        response = await catalog.get_service("does-not-exist")
        assert response.success is True
        assert response.data is None
        assert "not found" in response.message

    @pytest.mark.asyncio
    async def test_repeated_gets_are_equal(self, catalog):
        first = await catalog.get_service("ac-cleaning")
        second = await catalog.get_service("ac-cleaning")
        assert first.data == second.data

    @pytest.mark.asyncio
    async def test_results_are_detached_from_store(self, catalog, store):
        response = await catalog.get_service("ac-repair")
        response.data.name = "Changed"
        assert store.find_service("ac-repair").name == "AC Repair Service"

    @pytest.mark.asyncio
    async def test_by_category(self, catalog):
        response = await catalog.get_services_by_category(ServiceCategory.INSTALLATION)
        assert len(response.data) == 3

    @pytest.mark.asyncio
    async def test_emergency_services(self, catalog):
        response = await catalog.get_emergency_services()
        assert [s.id for s in response.data] == ["emergency-service"]

    @pytest.mark.asyncio
    async def test_categories_with_preview(self, catalog):
        response = await catalog.get_service_categories()
        summaries = {c.category: c for c in response.data}
        assert len(summaries) == 5
        assert summaries[ServiceCategory.MAINTENANCE].count == 4
        assert len(summaries[ServiceCategory.MAINTENANCE].services) == 3

    @pytest.mark.asyncio
    async def test_services_for_ac_type(self, catalog):
        response = await catalog.get_services_for_ac_type(ACType.PORTABLE)
        assert {s.id for s in response.data} == {
            "ac-maintenance",
            "basic-ac-service",
            "ac-repair",
            "emergency-service",
        }


class TestSearch:
    @pytest.mark.asyncio
    async def test_search_matches_category(self, catalog):
        response = await catalog.search_services("cleaning")
        ids = {s.id for s in response.data}
        assert {"ac-cleaning", "duct-cleaning"} <= ids

    @pytest.mark.asyncio
    async def test_search_limit(self, catalog):
        response = await catalog.search_services("ac", limit=2)
        assert len(response.data) == 2

    @pytest.mark.asyncio
    async def test_search_meta_reports_total_before_limit(self, catalog):
        full = await catalog.search_services("ac", limit=50)
        capped = await catalog.search_services("ac", limit=2)
        assert capped.meta.total == len(full.data)
        assert capped.meta.limit == 2

    @pytest.mark.asyncio
    async def test_empty_query(self, catalog):
        response = await catalog.search_services("  ")
        assert response.data == []

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "query,intent,confidence",
        [
            ("I want to book a visit", SearchIntent.BOOKING_INTENT, 0.9),
            ("compressor repair", SearchIntent.SERVICE_INQUIRY, 0.8),
            ("need help, there's a problem", SearchIntent.SUPPORT_REQUEST, 0.8),
            ("jet pump", SearchIntent.GENERAL, 0.7),
        ],
    )
    async def test_smart_search_intent(self, catalog, query, intent, confidence):
        result = (await catalog.smart_search(query)).data
        assert result.intent == intent
        assert result.confidence == confidence

    @pytest.mark.asyncio
    async def test_smart_search_services_and_suggestions(self, catalog):
        response = await catalog.smart_search("repair")
        result = response.data
        assert response.success is True
        assert response.meta.total >= len(result.services)
        assert len(result.services) <= 5
        assert "ac-repair" in {s.id for s in result.services}
        assert "Emergency AC repair" in result.suggestions


class TestPricingEstimate:
    @pytest.mark.asyncio
    async def test_area_and_urgency_surcharges(self, catalog):
        response = await catalog.get_pricing_estimate("ac-repair", area="Danapur", urgency=Urgency.URGENT)
        estimate = response.data
        assert estimate.base_price == 499
        assert estimate.area_charge == 150
        assert estimate.urgency_charge == 150
        assert estimate.total_estimate == 799

    @pytest.mark.asyncio
    async def test_central_area_has_no_surcharge(self, catalog):
        response = await catalog.get_pricing_estimate("ac-cleaning", area="Boring Road")
        assert response.data.total_estimate == 799

    @pytest.mark.asyncio
    async def test_unknown_area_adds_nothing(self, catalog):
        response = await catalog.get_pricing_estimate("ac-cleaning", area="Gaya")
        assert response.data.area_charge == 0

    @pytest.mark.asyncio
    async def test_missing_service_raises(self, catalog):
        with pytest.raises(NotFoundError):
            await catalog.get_pricing_estimate("nope")


class TestRecommendations:
    @pytest.mark.asyncio
    async def test_new_unit_gets_basic_service(self, catalog):
        response = await catalog.get_recommended_services(0, ACType.SPLIT, "LG")
        assert [s.id for s in response.data] == ["basic-ac-service"]

    @pytest.mark.asyncio
    async def test_mid_age_unit_skips_repairs(self, catalog):
        response = await catalog.get_recommended_services(2, ACType.SPLIT)
        categories = {s.category for s in response.data}
        assert categories <= {ServiceCategory.MAINTENANCE, ServiceCategory.CLEANING}
        assert all(ACType.SPLIT in s.available_for for s in response.data)

    @pytest.mark.asyncio
    async def test_old_unit_includes_repairs_capped_at_five(self, catalog):
        response = await catalog.get_recommended_services(5, ACType.WINDOW)
        assert len(response.data) == 5
        assert ServiceCategory.REPAIR in {s.category for s in response.data}
