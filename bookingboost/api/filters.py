from __future__ import annotations

from datetime import date

from fastapi import Query

from bookingboost.schemas.analytics import AnalyticsFilters, SavingsFilters, TrendFilters


def get_analytics_filters(
    time_window: str = Query(default="90d", alias="time_window"),
    start_date: date | None = Query(default=None, alias="start_date"),
    end_date: date | None = Query(default=None, alias="end_date"),
    page: int = Query(default=1, ge=1),
    page_size: int = Query(default=50, alias="page_size", ge=1, le=500),
) -> AnalyticsFilters:
    return AnalyticsFilters(
        time_window=time_window,
        start_date=start_date,
        end_date=end_date,
        page=page,
        page_size=page_size,
    )


def get_trend_filters(
    months_back: int = Query(default=6, alias="months_back", ge=1, le=24),
) -> TrendFilters:
    return TrendFilters(months_back=months_back)


def get_savings_filters(
    time_window: str = Query(default="90d", alias="time_window"),
    start_date: date | None = Query(default=None, alias="start_date"),
    end_date: date | None = Query(default=None, alias="end_date"),
    target_direct_pct: float | None = Query(default=None, alias="target_direct_pct", ge=0, le=100),
) -> SavingsFilters:
    return SavingsFilters(
        time_window=time_window,
        start_date=start_date,
        end_date=end_date,
        target_direct_pct=target_direct_pct,
    )
