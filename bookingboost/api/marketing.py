from __future__ import annotations

from fastapi import APIRouter, Depends

from bookingboost.api.dependencies import get_marketing_service
from bookingboost.api.filters import get_analytics_filters
from bookingboost.schemas.analytics import AnalyticsFilters
from bookingboost.schemas.marketing import MarketingAnalysis
from bookingboost.services.marketing_service import MarketingService
from bookingboost.shared.response import ResponseEnvelope, build_meta


router = APIRouter(prefix="/hotels/{hotel_id}/marketing", tags=["marketing"])


@router.get("")
def marketing_analysis(
    hotel_id: str,
    filters: AnalyticsFilters = Depends(get_analytics_filters),
    service: MarketingService = Depends(get_marketing_service),
) -> ResponseEnvelope[MarketingAnalysis]:
    data, context = service.get_marketing_analysis(hotel_id, filters)
    meta = build_meta(
        source="marketing_metrics,bookings",
        time_window=context.time_window,
        currency=context.currency,
        hotel_id=context.hotel_id,
        degraded=context.degraded,
    )
    return ResponseEnvelope(data=data, pagination=None, meta=meta)
