from __future__ import annotations

from datetime import date
from math import ceil
from typing import Generic, List, Optional, Sequence, Tuple, TypeVar

from bookingboost.shared.base import BaseSchema


T = TypeVar("T")

# Bumped whenever a report formula changes so cached dashboards can tell.
CALCULATION_VERSION = "v1"


class Pagination(BaseSchema):
    page: int
    page_size: int
    total_items: int
    total_pages: int


class Meta(BaseSchema):
    as_of_date: str
    source: str
    time_window: str
    calculation_version: str = CALCULATION_VERSION
    currency: Optional[str] = None
    hotel_id: Optional[str] = None
    degraded: Optional[bool] = None


class ResponseEnvelope(BaseSchema, Generic[T]):
    data: T
    pagination: Optional[Pagination] = None
    meta: Optional[Meta] = None


def build_meta(
    source: str,
    time_window: str,
    currency: Optional[str] = None,
    hotel_id: Optional[str] = None,
    degraded: Optional[bool] = None,
) -> Meta:
    return Meta(
        as_of_date=date.today().isoformat(),
        source=source,
        time_window=time_window,
        currency=currency,
        hotel_id=hotel_id,
        degraded=degraded,
    )


def paginate_list(items: Sequence[T], page: int, page_size: int) -> Tuple[List[T], Pagination]:
    """Slice an already computed report; ``page`` is 1-based."""
    offset = (page - 1) * page_size
    pagination = Pagination(
        page=page,
        page_size=page_size,
        total_items=len(items),
        total_pages=ceil(len(items) / page_size),
    )
    return list(items[offset : offset + page_size]), pagination
