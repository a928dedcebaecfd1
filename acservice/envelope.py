"""
Uniform response envelopes returned by every service call.

Two shapes exist: ``ApiResponse`` for single results (``data`` may be
``None`` for a read that found nothing) and ``PaginatedResponse`` for list
calls. Failures are raised as ``acservice.errors.ApiError`` subclasses, not
returned, except at the demo boundary where ``create_error_response`` wraps
them for display.

``meta`` is set by capped searches: ``total`` counts every match and
``limit`` is the cap that was applied.
"""

from typing import Any, Generic, Optional, TypeVar

from pydantic import BaseModel

from acservice.query import PageInfo

T = TypeVar("T")


class ResponseMeta(BaseModel):
    total: Optional[int] = None
    page: Optional[int] = None
    limit: Optional[int] = None


class ApiResponse(BaseModel, Generic[T]):
    data: T
    message: str
    success: bool = True
    meta: Optional[ResponseMeta] = None


class Pagination(BaseModel):
    page: int
    limit: int
    total: int
    total_pages: int
    has_next_page: bool = False
    has_prev_page: bool = False


class PaginatedResponse(BaseModel, Generic[T]):
    data: list[T]
    pagination: Pagination


def create_api_response(
    data: Any, message: str = "Success", meta: Optional[ResponseMeta] = None
) -> ApiResponse:
    """Wrap a result in a success envelope."""
    return ApiResponse(data=data, message=message, success=True, meta=meta)


def create_error_response(message: str) -> ApiResponse:
    """Failure envelope for callers that prefer values over exceptions."""
    return ApiResponse(data=None, message=message, success=False)


def create_paginated_response(items: list, page_info: PageInfo) -> PaginatedResponse:
    """Wrap a query page and its metadata."""
    return PaginatedResponse(
        data=items,
        pagination=Pagination(
            page=page_info.page,
            limit=page_info.limit,
            total=page_info.total,
            total_pages=page_info.total_pages,
            has_next_page=page_info.has_next_page,
            has_prev_page=page_info.has_prev_page,
        ),
    )
