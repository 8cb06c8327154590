from __future__ import annotations

from collections import defaultdict
from datetime import date
from typing import Dict, Iterable, Tuple

from bookingboost.analytics.calculations import calculate_blended_roi
from bookingboost.models.bookings import MarketingMetricRecord
from bookingboost.schemas.marketing import (
    MarketingAnalysis,
    MarketingPlatform,
    MarketingSummary,
    MarketingTrendPoint,
)


DEFAULT_AVERAGE_BOOKING_VALUE = 120.0
DIRECT_ATTRIBUTION_SHARE = 0.3

PLATFORM_NAMES: Dict[str, str] = {
    "google_ads": "Google Ads",
    "meta_ads": "Meta Ads",
    "google_analytics": "Google Analytics",
}

TRACKED_METRICS = ("spend", "clicks", "impressions", "conversions")


def calculate_marketing_roi(
    spend: float, conversions: float, average_booking_value: float = DEFAULT_AVERAGE_BOOKING_VALUE
) -> float:
    if spend == 0:
        return 0.0
    return (conversions * average_booking_value) / spend


def process_marketing_metrics(
    metrics: Iterable[MarketingMetricRecord],
    direct_revenue: float = 0.0,
    average_booking_value: float = DEFAULT_AVERAGE_BOOKING_VALUE,
) -> MarketingAnalysis:
    """Roll daily per-source metric rows up into platform totals and a daily trend."""
    # One value per (day, source, metric); a later row for the same cell replaces the earlier one.
    cells: Dict[Tuple[date, str], Dict[str, float]] = defaultdict(
        lambda: {metric: 0.0 for metric in TRACKED_METRICS}
    )
    for metric in metrics:
        if metric.metric_type not in TRACKED_METRICS:
            continue
        cells[(metric.metric_date, metric.source)][metric.metric_type] = metric.value or 0.0

    if not cells:
        return MarketingAnalysis()

    platforms: Dict[str, MarketingPlatform] = {}
    trend: Dict[date, MarketingTrendPoint] = {}
    for (metric_date, source), values in cells.items():
        name = PLATFORM_NAMES.get(source, source)
        platform = platforms.setdefault(name, MarketingPlatform(platform=name))
        point = trend.setdefault(metric_date, MarketingTrendPoint(date=metric_date.isoformat()))
        for target in (platform, point):
            target.spend += values["spend"]
            target.clicks += values["clicks"]
            target.conversions += values["conversions"]
            target.impressions += values["impressions"]

    for platform in platforms.values():
        platform.cpc = platform.spend / platform.clicks if platform.clicks > 0 else 0.0
        platform.roi = calculate_marketing_roi(
            platform.spend, platform.conversions, average_booking_value
        )

    total_spend = sum(platform.spend for platform in platforms.values())
    total_clicks = sum(platform.clicks for platform in platforms.values())
    total_conversions = sum(platform.conversions for platform in platforms.values())
    summary = MarketingSummary(
        total_spend=total_spend,
        blended_roi=calculate_blended_roi(total_spend, direct_revenue),
        cost_per_booking=total_spend / total_conversions if total_conversions > 0 else 0.0,
        direct_bookings=round(total_conversions * DIRECT_ATTRIBUTION_SHARE),
        total_clicks=total_clicks,
        total_conversions=total_conversions,
    )
    return MarketingAnalysis(
        has_data=True,
        summary=summary,
        platforms=list(platforms.values()),
        trend_data=[trend[key] for key in sorted(trend)],
    )
