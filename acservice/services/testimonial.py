"""
Customer testimonials and their moderation.

New testimonials always start unverified; only ``verify_testimonial``
flips the flag. Public views (featured, by service, by area, search) show
verified entries only.
"""

from collections import defaultdict
from typing import Callable, Optional

from acservice.envelope import ApiResponse, PaginatedResponse, create_api_response
from acservice.errors import InvalidRequestError, NotFoundError
from acservice.logging_context import get_request_logger
from acservice.query import at_least, exact, in_range, text_search
from acservice.schemas.testimonial_schema import (
    CreateTestimonialRequest,
    GroupRating,
    Testimonial,
    TestimonialFilters,
    TestimonialStats,
)
from acservice.services.base import EntityService, snapshot
from acservice.utils import contains_ci, end_of_day, generate_id, now_ist, parse_date, round1, start_of_day

logger = get_request_logger(__name__)

MIN_RATING = 1
MAX_RATING = 5
FEATURED_MIN_RATING = 4
TOP_GROUPS = 5
STATS_RECENT = 3


def _newest_first(items: list[Testimonial]) -> list[Testimonial]:
    return sorted(items, key=lambda t: t.date, reverse=True)


def _group_ratings(items: list[Testimonial], key: Callable[[Testimonial], str]) -> list[GroupRating]:
    groups: dict[str, list[int]] = defaultdict(list)
    for item in items:
        groups[key(item)].append(item.rating)
    ranked = sorted(groups.items(), key=lambda kv: len(kv[1]), reverse=True)
    return [
        GroupRating(name=name, count=len(ratings), average_rating=round1(sum(ratings) / len(ratings)))
        for name, ratings in ranked[:TOP_GROUPS]
    ]


class TestimonialService(EntityService):
    __test__ = False

    sort_keys = {
        "date": lambda t: t.date,
        "rating": lambda t: t.rating,
        "customer_name": lambda t: t.customer_name.lower(),
    }
    default_sort = "date"
    default_order = "desc"

    def _require(self, testimonial_id: str) -> Testimonial:
        testimonial = self.store.find_testimonial(testimonial_id)
        if testimonial is None:
            raise NotFoundError(f"Testimonial with ID {testimonial_id} not found")
        return testimonial

    def _verified(self) -> list[Testimonial]:
        return [t for t in self.store.testimonials if t.verified]

    async def list_testimonials(
        self,
        page: int = 1,
        limit: Optional[int] = None,
        filters: Optional[TestimonialFilters] = None,
        sort_by: Optional[str] = None,
        sort_order: Optional[str] = None,
    ) -> PaginatedResponse[Testimonial]:
        await self.latency.wait(300, 700)
        f = filters or TestimonialFilters()
        try:
            lower = start_of_day(parse_date(f.date_from)) if f.date_from else None
            upper = end_of_day(parse_date(f.date_to)) if f.date_to else None
        except ValueError:
            raise InvalidRequestError("date_from and date_to must be YYYY-MM-DD dates") from None
        predicates = [
            exact(lambda t: t.rating, f.rating),
            at_least(lambda t: t.rating, f.min_rating),
            text_search(f.service, lambda t: t.service),
            text_search(f.area, lambda t: t.customer_area),
            exact(lambda t: t.verified, f.verified),
            in_range(lambda t: t.date, lower, upper),
        ]
        return self._list(self.store.testimonials, predicates, page, limit, sort_by, sort_order)

    async def get_testimonial(self, testimonial_id: str) -> ApiResponse[Optional[Testimonial]]:
        await self.latency.wait(200, 400)
        testimonial = self.store.find_testimonial(testimonial_id)
        if testimonial is None:
            return create_api_response(None, f"Testimonial with ID {testimonial_id} not found")
        return create_api_response(snapshot(testimonial), "Testimonial retrieved successfully")

    async def create_testimonial(self, request: CreateTestimonialRequest) -> ApiResponse[Testimonial]:
        await self.latency.wait(500, 1000)
        if not request.customer_name.strip():
            raise InvalidRequestError("Customer name is required")
        if not request.comment.strip():
            raise InvalidRequestError("Comment is required")
        if not MIN_RATING <= request.rating <= MAX_RATING:
            raise InvalidRequestError(
                f"Rating must be between {MIN_RATING} and {MAX_RATING}, got {request.rating}"
            )

        testimonial = Testimonial(
            id=generate_id("test"),
            customer_name=request.customer_name.strip(),
            customer_area=request.customer_area,
            service=request.service,
            rating=request.rating,
            comment=request.comment.strip(),
            date=now_ist(),
            verified=False,
            image=request.image,
        )
        self.store.testimonials.append(testimonial)
        logger.info("Testimonial created: %s (%d stars, pending verification)", testimonial.id, testimonial.rating)
        return create_api_response(
            snapshot(testimonial),
            "Thank you for your testimonial! It will be reviewed and published soon.",
        )

    async def get_featured_testimonials(self, limit: int = 6) -> ApiResponse[list[Testimonial]]:
        """Verified, 4+ stars, best rated then newest."""
        await self.latency.wait(200, 500)
        candidates = [t for t in self._verified() if t.rating >= FEATURED_MIN_RATING]
        featured = sorted(_newest_first(candidates), key=lambda t: t.rating, reverse=True)[:limit]
        return create_api_response([snapshot(t) for t in featured], f"Found {len(featured)} featured testimonials")

    async def get_testimonials_by_service(self, service: str, limit: int = 10) -> ApiResponse[list[Testimonial]]:
        await self.latency.wait(200, 500)
        found = _newest_first([t for t in self._verified() if contains_ci(t.service, service)])[:limit]
        return create_api_response([snapshot(t) for t in found], f"Found {len(found)} testimonials for {service}")

    async def get_testimonials_by_area(self, area: str, limit: int = 10) -> ApiResponse[list[Testimonial]]:
        await self.latency.wait(200, 500)
        found = _newest_first([t for t in self._verified() if contains_ci(t.customer_area, area)])[:limit]
        return create_api_response([snapshot(t) for t in found], f"Found {len(found)} testimonials from {area}")

    async def get_recent_testimonials(self, limit: int = 5) -> ApiResponse[list[Testimonial]]:
        await self.latency.wait(200, 400)
        found = _newest_first(self._verified())[:limit]
        return create_api_response([snapshot(t) for t in found], f"Found {len(found)} recent testimonials")

    async def get_high_rating_testimonials(
        self, min_rating: int = FEATURED_MIN_RATING, limit: int = 10
    ) -> ApiResponse[list[Testimonial]]:
        await self.latency.wait(200, 400)
        found = sorted(
            _newest_first([t for t in self._verified() if t.rating >= min_rating]),
            key=lambda t: t.rating,
            reverse=True,
        )[:limit]
        return create_api_response(
            [snapshot(t) for t in found], f"Found {len(found)} testimonials rated {min_rating}+"
        )

    async def search_testimonials(self, query: str, limit: int = 10) -> ApiResponse[list[Testimonial]]:
        await self.latency.wait(300, 600)
        match = text_search(
            query,
            lambda t: t.customer_name,
            lambda t: t.comment,
            lambda t: t.service,
            lambda t: t.customer_area,
        )
        if match is None:
            return create_api_response([], "Empty search query")
        found = _newest_first([t for t in self._verified() if match(t)])[:limit]
        return create_api_response([snapshot(t) for t in found], f'Found {len(found)} testimonials matching "{query}"')

    async def get_testimonial_stats(self) -> ApiResponse[TestimonialStats]:
        await self.latency.wait(400, 700)
        items = self.store.testimonials
        distribution = {r: 0 for r in range(MIN_RATING, MAX_RATING + 1)}
        for t in items:
            distribution[t.rating] += 1
        stats = TestimonialStats(
            total=len(items),
            average_rating=round1(sum(t.rating for t in items) / len(items)) if items else 0.0,
            verified=sum(1 for t in items if t.verified),
            rating_distribution=distribution,
            top_services=_group_ratings(items, lambda t: t.service),
            top_areas=_group_ratings(items, lambda t: t.customer_area),
            recent_testimonials=[snapshot(t) for t in _newest_first(items)[:STATS_RECENT]],
        )
        return create_api_response(stats, "Testimonial statistics retrieved successfully")

    # ------------------------------------------------------------------ #
    # Moderation
    # ------------------------------------------------------------------ #

    async def verify_testimonial(self, testimonial_id: str) -> ApiResponse[Testimonial]:
        await self.latency.wait(200, 500)
        testimonial = self._require(testimonial_id)
        testimonial.verified = True
        logger.info("Testimonial verified: %s", testimonial_id)
        return create_api_response(snapshot(testimonial), "Testimonial verified successfully")

    async def delete_testimonial(self, testimonial_id: str) -> ApiResponse[None]:
        await self.latency.wait(200, 500)
        testimonial = self._require(testimonial_id)
        self.store.testimonials.remove(testimonial)
        logger.info("Testimonial deleted: %s", testimonial_id)
        return create_api_response(None, "Testimonial deleted successfully")
