from __future__ import annotations

from typing import List

from fastapi import APIRouter, Depends

from bookingboost.api.dependencies import get_channel_analytics_service
from bookingboost.api.filters import get_analytics_filters, get_savings_filters, get_trend_filters
from bookingboost.schemas.analytics import (
    AnalyticsFilters,
    DashboardSummary,
    DirectSplit,
    MonthlyTrend,
    ProgressReport,
    SavingsFilters,
    SavingsProjection,
    TrendFilters,
)
from bookingboost.services.channel_analytics_service import ChannelAnalyticsService
from bookingboost.shared.response import ResponseEnvelope, build_meta


router = APIRouter(prefix="/hotels/{hotel_id}/performance", tags=["performance"])


@router.get("/dashboard")
def performance_dashboard(
    hotel_id: str,
    filters: AnalyticsFilters = Depends(get_analytics_filters),
    service: ChannelAnalyticsService = Depends(get_channel_analytics_service),
) -> ResponseEnvelope[DashboardSummary]:
    data, context = service.get_dashboard(hotel_id, filters)
    meta = build_meta(
        source="bookings",
        time_window=context.time_window,
        currency=context.currency,
        hotel_id=context.hotel_id,
    )
    return ResponseEnvelope(data=data, pagination=None, meta=meta)


@router.get("/direct-split")
def performance_direct_split(
    hotel_id: str,
    filters: AnalyticsFilters = Depends(get_analytics_filters),
    service: ChannelAnalyticsService = Depends(get_channel_analytics_service),
) -> ResponseEnvelope[DirectSplit]:
    data, context = service.get_direct_split(hotel_id, filters)
    meta = build_meta(
        source="bookings",
        time_window=context.time_window,
        currency=context.currency,
        hotel_id=context.hotel_id,
    )
    return ResponseEnvelope(data=data, pagination=None, meta=meta)


@router.get("/trends")
def performance_trends(
    hotel_id: str,
    filters: TrendFilters = Depends(get_trend_filters),
    service: ChannelAnalyticsService = Depends(get_channel_analytics_service),
) -> ResponseEnvelope[List[MonthlyTrend]]:
    data, context = service.get_monthly_trends(hotel_id, filters.months_back)
    meta = build_meta(
        source="bookings",
        time_window=context.time_window,
        currency=context.currency,
        hotel_id=context.hotel_id,
    )
    return ResponseEnvelope(data=data, pagination=None, meta=meta)


@router.get("/savings")
def performance_savings(
    hotel_id: str,
    filters: SavingsFilters = Depends(get_savings_filters),
    service: ChannelAnalyticsService = Depends(get_channel_analytics_service),
) -> ResponseEnvelope[SavingsProjection]:
    data, context = service.get_savings(hotel_id, filters)
    meta = build_meta(
        source="bookings",
        time_window=context.time_window,
        currency=context.currency,
        hotel_id=context.hotel_id,
    )
    return ResponseEnvelope(data=data, pagination=None, meta=meta)


@router.get("/progress")
def performance_progress(
    hotel_id: str,
    service: ChannelAnalyticsService = Depends(get_channel_analytics_service),
) -> ResponseEnvelope[ProgressReport]:
    data, context = service.get_progress(hotel_id)
    meta = build_meta(
        source="bookings",
        time_window=context.time_window,
        currency=context.currency,
        hotel_id=context.hotel_id,
    )
    return ResponseEnvelope(data=data, pagination=None, meta=meta)
