"""Shared plumbing for the entity services."""

import logging
from typing import Any, Callable, Optional, Sequence, TypeVar

from pydantic import BaseModel

from acservice.data.store import DataStore
from acservice.envelope import PaginatedResponse, create_paginated_response
from acservice.latency import LatencySimulator
from acservice.query import Predicate, is_descending, resolve_sort_key, run_query

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=BaseModel)


def snapshot(entity: M) -> M:
    """Detached copy so callers can't mutate the store through a result."""
    return entity.model_copy(deep=True)


class EntityService:
    """Base for services that wrap one slice of the store.

    Subclasses declare ``sort_keys`` and, optionally, ``default_sort``.
    """

    sort_keys: dict[str, Callable[[Any], Any]] = {}
    default_sort: Optional[str] = None
    default_order: str = "asc"

    def __init__(self, store: DataStore, latency: Optional[LatencySimulator] = None) -> None:
        self.store = store
        self.latency = latency or LatencySimulator()

    def _list(
        self,
        items: Sequence[M],
        predicates: Sequence[Optional[Predicate]],
        page: int,
        limit: Optional[int],
        sort_by: Optional[str],
        sort_order: Optional[str],
    ) -> PaginatedResponse:
        if sort_by is None:
            sort_by = self.default_sort
            sort_order = sort_order or self.default_order
        key = resolve_sort_key(self.sort_keys, sort_by)
        result = run_query(
            items,
            predicates=predicates,
            sort_key=key,
            descending=is_descending(sort_order or "asc"),
            page=page,
            limit=limit,
        )
        return create_paginated_response([snapshot(i) for i in result.items], result.page_info)
