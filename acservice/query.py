"""
Generic filter -> sort -> paginate pipeline shared by every entity service.

Filters are plain predicates. Each builder returns ``None`` when the caller
did not supply a value for that field, and ``None`` predicates are skipped,
so an absent filter never constrains the result. Active predicates combine
with AND semantics.

Usage:
    result = run_query(
        technicians,
        predicates=[at_least(lambda t: t.rating, 4.5), any_of(lambda t: t.specializations, ["repair"])],
        sort_key=lambda t: t.rating,
        descending=True,
        page=1,
        limit=10,
    )
"""

import logging
import math
from dataclasses import dataclass
from typing import Any, Callable, Generic, Iterable, Optional, Sequence, TypeVar, Union

from acservice.config import settings
from acservice.errors import InvalidRequestError

logger = logging.getLogger(__name__)

T = TypeVar("T")

Predicate = Callable[[T], bool]
TextGetter = Callable[[Any], Union[str, Iterable[str], None]]


@dataclass(frozen=True)
class PageInfo:
    """Pagination metadata for one page of a query."""

    page: int
    limit: int
    total: int
    total_pages: int
    has_next_page: bool
    has_prev_page: bool


@dataclass(frozen=True)
class QueryResult(Generic[T]):
    items: list[T]
    page_info: PageInfo


# ------------------------------------------------------------------ #
# Predicate builders
# ------------------------------------------------------------------ #

def exact(getter: Callable[[T], Any], value: Any) -> Optional[Predicate]:
    """Field equals value."""
    if value is None:
        return None
    return lambda item: getter(item) == value


def at_least(getter: Callable[[T], Any], minimum: Any) -> Optional[Predicate]:
    """Field >= minimum."""
    if minimum is None:
        return None
    return lambda item: getter(item) >= minimum


def in_range(
    getter: Callable[[T], Any], minimum: Any = None, maximum: Any = None
) -> Optional[Predicate]:
    """Field within [minimum, maximum]; either bound may be open."""
    if minimum is None and maximum is None:
        return None

    def predicate(item: T) -> bool:
        value = getter(item)
        if minimum is not None and value < minimum:
            return False
        if maximum is not None and value > maximum:
            return False
        return True

    return predicate


def any_of(
    getter: Callable[[T], Iterable[Any]],
    values: Optional[Iterable[Any]],
    normalize: Optional[Callable[[Any], Any]] = None,
) -> Optional[Predicate]:
    """Entity's collection field shares at least one member with ``values``."""
    if values is None:
        return None
    norm = normalize or (lambda v: v)
    wanted = {norm(v) for v in values}
    if not wanted:
        return None
    return lambda item: any(norm(v) in wanted for v in getter(item))


def text_search(term: Optional[str], *getters: TextGetter) -> Optional[Predicate]:
    """Case-insensitive substring match against ANY of the given text fields.

    A getter may return a string, an iterable of strings, or None.
    """
    if term is None or not term.strip():
        return None
    needle = term.strip().lower()

    def predicate(item: Any) -> bool:
        for getter in getters:
            value = getter(item)
            if value is None:
                continue
            candidates = [value] if isinstance(value, str) else value
            if any(c is not None and needle in c.lower() for c in candidates):
                return True
        return False

    return predicate


# ------------------------------------------------------------------ #
# Pipeline stages
# ------------------------------------------------------------------ #

def apply_filters(items: Iterable[T], predicates: Sequence[Optional[Predicate]]) -> list[T]:
    """Keep items satisfying every active predicate."""
    active = [p for p in predicates if p is not None]
    return [item for item in items if all(p(item) for p in active)]


def sort_items(
    items: list[T], key: Optional[Callable[[T], Any]], descending: bool = False
) -> list[T]:
    """Stable single-key sort. ``key=None`` keeps the incoming order."""
    if key is None:
        return list(items)
    return sorted(items, key=key, reverse=descending)


def resolve_sort_key(
    sort_keys: dict[str, Callable[[T], Any]], sort_by: Optional[str]
) -> Optional[Callable[[T], Any]]:
    """Look up a named sort key, rejecting names the entity doesn't support."""
    if sort_by is None:
        return None
    try:
        return sort_keys[sort_by]
    except KeyError:
        raise InvalidRequestError(
            f"Unsupported sort field '{sort_by}'. Valid fields: {sorted(sort_keys)}"
        ) from None


def is_descending(sort_order: str) -> bool:
    order = sort_order.lower()
    if order not in ("asc", "desc"):
        raise InvalidRequestError(f"sort_order must be 'asc' or 'desc', got {sort_order!r}")
    return order == "desc"


def paginate(items: Sequence[T], page: int, limit: int) -> tuple[list[T], PageInfo]:
    """Offset pagination. Pages past the end yield an empty slice."""
    if page < 1:
        raise InvalidRequestError(f"page must be >= 1, got {page}")
    max_limit = settings.pagination.max_limit
    if not 1 <= limit <= max_limit:
        raise InvalidRequestError(f"limit must be between 1 and {max_limit}, got {limit}")

    total = len(items)
    start = (page - 1) * limit
    page_items = list(items[start:start + limit])
    info = PageInfo(
        page=page,
        limit=limit,
        total=total,
        total_pages=math.ceil(total / limit),
        has_next_page=start + limit < total,
        has_prev_page=page > 1,
    )
    return page_items, info


def run_query(
    items: Iterable[T],
    predicates: Sequence[Optional[Predicate]] = (),
    sort_key: Optional[Callable[[T], Any]] = None,
    descending: bool = False,
    page: int = 1,
    limit: Optional[int] = None,
) -> QueryResult[T]:
    """Filter, sort and paginate in one pass. Read-only."""
    limit = settings.pagination.default_limit if limit is None else limit
    filtered = apply_filters(items, predicates)
    ordered = sort_items(filtered, sort_key, descending)
    page_items, info = paginate(ordered, page, limit)
    logger.debug(
        "Query matched %d item(s); returning page %d/%d", info.total, info.page, info.total_pages
    )
    return QueryResult(items=page_items, page_info=info)
