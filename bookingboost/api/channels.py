from __future__ import annotations

from typing import List

from fastapi import APIRouter, Depends

from bookingboost.api.dependencies import get_channel_analytics_service
from bookingboost.api.filters import get_analytics_filters
from bookingboost.schemas.analytics import AnalyticsFilters, ChannelAnalysisReport, ChannelStat
from bookingboost.services.channel_analytics_service import ChannelAnalyticsService
from bookingboost.shared.response import ResponseEnvelope, build_meta, paginate_list


router = APIRouter(prefix="/hotels/{hotel_id}/channels", tags=["channels"])


@router.get("")
def channel_stats(
    hotel_id: str,
    filters: AnalyticsFilters = Depends(get_analytics_filters),
    service: ChannelAnalyticsService = Depends(get_channel_analytics_service),
) -> ResponseEnvelope[List[ChannelStat]]:
    data, context = service.get_channel_stats(hotel_id, filters)
    paged_data, pagination = paginate_list(data, filters.page, filters.page_size)
    meta = build_meta(
        source="bookings",
        time_window=context.time_window,
        currency=context.currency,
        hotel_id=context.hotel_id,
    )
    return ResponseEnvelope(data=paged_data, pagination=pagination, meta=meta)


@router.get("/analysis")
def channel_analysis(
    hotel_id: str,
    filters: AnalyticsFilters = Depends(get_analytics_filters),
    service: ChannelAnalyticsService = Depends(get_channel_analytics_service),
) -> ResponseEnvelope[ChannelAnalysisReport]:
    data, context = service.get_channel_analysis(hotel_id, filters)
    meta = build_meta(
        source="bookings,commission_rates",
        time_window=context.time_window,
        currency=context.currency,
        hotel_id=context.hotel_id,
        degraded=context.degraded,
    )
    return ResponseEnvelope(data=data, pagination=None, meta=meta)
