"""
Service catalog: listing, lookup, search, pricing and recommendations.

Services are read-only after seeding, so nothing here mutates the store.
"""

import logging
from typing import Optional

from acservice.config import settings
from acservice.data.store import DataStore
from acservice.envelope import ApiResponse, PaginatedResponse, ResponseMeta, create_api_response
from acservice.errors import NotFoundError
from acservice.latency import LatencySimulator
from acservice.query import any_of, exact, in_range, text_search
from acservice.schemas.booking_schema import Urgency
from acservice.schemas.service_schema import (
    ACType,
    CategorySummary,
    PricingEstimate,
    SearchIntent,
    Service,
    ServiceCategory,
    ServiceFilters,
    SmartSearchResult,
)
from acservice.services.base import EntityService, snapshot

logger = logging.getLogger(__name__)

CATEGORY_PREVIEW_SIZE = 3
MAX_RECOMMENDATIONS = 5
MAX_SMART_RESULTS = 5

# Keyword groups checked in order; first hit wins.
INTENT_KEYWORDS: list[tuple[SearchIntent, tuple[str, ...], float]] = [
    (SearchIntent.BOOKING_INTENT, ("book", "appointment", "schedule"), 0.9),
    (SearchIntent.SERVICE_INQUIRY, ("repair", "service", "maintenance"), 0.8),
    (SearchIntent.SUPPORT_REQUEST, ("help", "support", "problem"), 0.8),
]
GENERAL_CONFIDENCE = 0.7

CANNED_SUGGESTIONS = [
    "AC not cooling properly",
    "Emergency AC repair",
    "Annual maintenance contract",
    "Split AC installation",
    "AC cleaning service",
]


def detect_intent(query: str) -> tuple[SearchIntent, float]:
    lowered = query.lower()
    for intent, keywords, confidence in INTENT_KEYWORDS:
        if any(k in lowered for k in keywords):
            return intent, confidence
    return SearchIntent.GENERAL, GENERAL_CONFIDENCE


def suggest(query: str) -> list[str]:
    """Canned suggestions sharing the query or any of its words."""
    lowered = query.lower().strip()
    words = [w for w in lowered.split() if w]
    return [
        s
        for s in CANNED_SUGGESTIONS
        if lowered in s.lower() or any(w in s.lower() for w in words)
    ]


class CatalogService(EntityService):
    sort_keys = {
        "name": lambda s: s.name.lower(),
        "price": lambda s: s.price.min,
        "duration": lambda s: s.duration,
        "category": lambda s: s.category.value,
    }

    def __init__(self, store: DataStore, latency: Optional[LatencySimulator] = None) -> None:
        super().__init__(store, latency)
        # Seed order doubles as popularity rank.
        self.sort_keys = {**self.sort_keys, "popularity": self._popularity}

    def _popularity(self, service: Service) -> int:
        ids = [s.id for s in self.store.services]
        return ids.index(service.id) if service.id in ids else len(ids)

    async def list_services(
        self,
        page: int = 1,
        limit: Optional[int] = None,
        filters: Optional[ServiceFilters] = None,
        sort_by: Optional[str] = None,
        sort_order: Optional[str] = None,
    ) -> PaginatedResponse[Service]:
        await self.latency.wait(300, 800)
        f = filters or ServiceFilters()
        predicates = [
            exact(lambda s: s.category, f.category),
            in_range(lambda s: s.price.min, f.min_price, f.max_price),
            any_of(lambda s: s.available_for, f.ac_types),
            exact(lambda s: s.is_emergency, f.is_emergency),
            text_search(f.search, lambda s: s.name, lambda s: s.description, lambda s: s.features),
        ]
        return self._list(self.store.services, predicates, page, limit, sort_by, sort_order)

    async def get_service(self, service_id: str) -> ApiResponse[Optional[Service]]:
        await self.latency.wait(200, 500)
        service = self.store.find_service(service_id)
        if service is None:
            logger.debug("Service %s not found", service_id)
            return create_api_response(None, f"Service with ID {service_id} not found")
        return create_api_response(snapshot(service), "Service retrieved successfully")

    async def get_services_by_category(self, category: ServiceCategory) -> ApiResponse[list[Service]]:
        await self.latency.wait(200, 600)
        found = [snapshot(s) for s in self.store.services if s.category == category]
        return create_api_response(found, f"Found {len(found)} {category.value} services")

    async def get_emergency_services(self) -> ApiResponse[list[Service]]:
        await self.latency.wait(200, 400)
        found = [
            snapshot(s)
            for s in self.store.services
            if s.is_emergency or s.category == ServiceCategory.EMERGENCY
        ]
        return create_api_response(found, f"Found {len(found)} emergency services")

    async def get_service_categories(self) -> ApiResponse[list[CategorySummary]]:
        await self.latency.wait(200, 500)
        summaries = []
        for category in ServiceCategory:
            members = [s for s in self.store.services if s.category == category]
            if not members:
                continue
            summaries.append(
                CategorySummary(
                    category=category,
                    count=len(members),
                    services=[snapshot(s) for s in members[:CATEGORY_PREVIEW_SIZE]],
                )
            )
        return create_api_response(summaries, f"Found {len(summaries)} service categories")

    async def get_services_for_ac_type(self, ac_type: ACType) -> ApiResponse[list[Service]]:
        await self.latency.wait(200, 500)
        found = [snapshot(s) for s in self.store.services if ac_type in s.available_for]
        return create_api_response(found, f"Found {len(found)} services for {ac_type.value} AC")

    async def search_services(self, query: str, limit: int = 10) -> ApiResponse[list[Service]]:
        await self.latency.wait(300, 700)
        if not query.strip():
            return create_api_response([], "Empty search query")
        match = text_search(
            query,
            lambda s: s.name,
            lambda s: s.description,
            lambda s: s.category.value,
            lambda s: s.features,
        )
        matched = [s for s in self.store.services if match(s)]
        found = [snapshot(s) for s in matched[:limit]]
        return create_api_response(
            found,
            f'Found {len(found)} services matching "{query}"',
            meta=ResponseMeta(total=len(matched), limit=limit),
        )

    async def get_pricing_estimate(
        self, service_id: str, area: Optional[str] = None, urgency: Urgency = Urgency.NORMAL
    ) -> ApiResponse[PricingEstimate]:
        """Base minimum price plus area and urgency surcharges."""
        await self.latency.wait(200, 400)
        service = self.store.find_service(service_id)
        if service is None:
            raise NotFoundError(f"Service with ID {service_id} not found")

        area_charge = 0
        if area:
            known = self.store.find_area(area)
            area_charge = known.additional_charge if known else 0

        urgency_charge = {
            Urgency.URGENT: settings.booking.urgent_surcharge,
            Urgency.EMERGENCY: settings.booking.emergency_surcharge,
        }.get(urgency, 0)

        base = service.price.min
        estimate = PricingEstimate(
            base_price=base,
            area_charge=area_charge,
            urgency_charge=urgency_charge,
            total_estimate=base + area_charge + urgency_charge,
            service=snapshot(service),
        )
        return create_api_response(estimate, "Pricing estimate calculated successfully")

    async def get_recommended_services(
        self, ac_age: int, ac_type: ACType, ac_brand: str = ""
    ) -> ApiResponse[list[Service]]:
        """Suggest services by unit age: new units get basic care, older ones repairs too."""
        await self.latency.wait(400, 600)
        if ac_age < 1:
            found = [
                s
                for s in self.store.services
                if s.category == ServiceCategory.MAINTENANCE and "basic" in s.name.lower()
            ]
        else:
            wanted = {ServiceCategory.MAINTENANCE, ServiceCategory.CLEANING}
            if ac_age > 3:
                wanted.add(ServiceCategory.REPAIR)
            found = [
                s
                for s in self.store.services
                if s.category in wanted and ac_type in s.available_for
            ]
        found = [snapshot(s) for s in found[:MAX_RECOMMENDATIONS]]
        label = f"{ac_brand} {ac_type.value}".strip()
        return create_api_response(
            found, f"Found {len(found)} recommended services for {ac_age}-year-old {label} AC"
        )

    async def smart_search(self, query: str) -> ApiResponse[SmartSearchResult]:
        await self.latency.wait(400, 600)
        intent, confidence = detect_intent(query)
        match = text_search(query, lambda s: s.name, lambda s: s.description, lambda s: s.features)
        services = [snapshot(s) for s in self.store.services if match is not None and match(s)]
        logger.debug("Smart search %r -> %s (%.1f), %d services", query, intent.value, confidence, len(services))
        result = SmartSearchResult(
            services=services[:MAX_SMART_RESULTS],
            suggestions=suggest(query),
            intent=intent,
            confidence=confidence,
        )
        return create_api_response(
            result,
            f"Detected {intent.value} with {len(services)} matching services",
            meta=ResponseMeta(total=len(services), limit=MAX_SMART_RESULTS),
        )
