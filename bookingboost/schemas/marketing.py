from __future__ import annotations

from typing import List

from pydantic import Field

from bookingboost.shared.base import BaseSchema


class MarketingPlatform(BaseSchema):
    platform: str
    spend: float = 0.0
    clicks: float = 0.0
    cpc: float = 0.0
    conversions: float = 0.0
    roi: float = 0.0
    impressions: float = 0.0


class MarketingTrendPoint(BaseSchema):
    date: str
    spend: float = 0.0
    clicks: float = 0.0
    conversions: float = 0.0
    impressions: float = 0.0


class MarketingSummary(BaseSchema):
    total_spend: float = 0.0
    blended_roi: float = 0.0
    cost_per_booking: float = 0.0
    direct_bookings: int = 0
    total_clicks: float = 0.0
    total_conversions: float = 0.0


class MarketingAnalysis(BaseSchema):
    has_data: bool = False
    summary: MarketingSummary = Field(default_factory=MarketingSummary)
    platforms: List[MarketingPlatform] = Field(default_factory=list)
    trend_data: List[MarketingTrendPoint] = Field(default_factory=list)
