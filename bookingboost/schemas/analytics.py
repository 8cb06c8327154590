from __future__ import annotations

from datetime import date
from typing import List, Literal, Optional

from pydantic import Field

from bookingboost.shared.base import BaseSchema


HealthStatus = Literal["excellent", "good", "warning", "urgent"]


class ChannelStat(BaseSchema):
    channel: str
    bookings: int
    revenue: float
    commission_paid: float
    commission_rate: float
    is_direct: bool
    percentage: float
    emoji: str


class MonthlyTrend(BaseSchema):
    month: str
    date: str
    revenue: float
    bookings: int
    direct_bookings: int
    ota_bookings: int
    direct_revenue: float
    ota_revenue: float
    direct_percentage: float
    commissions_paid: float


class CommissionSavings(BaseSchema):
    monthly: float = 0.0
    annual: float = 0.0
    improvement: float = 0.0
    average_commission_rate: float = 0.0


class HealthStatusDetail(BaseSchema):
    status: HealthStatus
    message: str
    color: str


class RevenueSplit(BaseSchema):
    total_revenue: float
    direct_revenue: float
    ota_revenue: float


class DirectSplit(BaseSchema):
    total_bookings: int
    direct_bookings: int
    ota_bookings: int
    direct_percentage: float
    ota_commissions: float
    health: HealthStatusDetail


class SavingsProjection(BaseSchema):
    current_direct_percentage: float
    target_direct_percentage: float
    savings: CommissionSavings


class DashboardSummary(BaseSchema):
    total_bookings: int
    total_revenue: float
    direct_revenue: float
    ota_revenue: float
    direct_percentage: float
    ota_commissions: float
    average_booking_value: float
    previous_period_revenue: float
    revenue_change_percentage: float
    health: HealthStatusDetail
    direct_booking_goal: float
    savings: CommissionSavings
    channels: List[ChannelStat]


class ChannelAnalysisItem(BaseSchema):
    channel: str
    bookings_count: int
    total_revenue: float
    percentage_of_total: float
    commission_rate: float
    commission_paid: float
    net_revenue: float
    avg_booking_value: float


class ChannelAnalysisSummary(BaseSchema):
    total_bookings: int = 0
    total_revenue: float = 0.0
    total_commissions: float = 0.0
    total_net_revenue: float = 0.0
    avg_commission_rate: float = 0.0


class ChannelChartPoint(BaseSchema):
    channel: str
    gross_revenue: float
    commission: float
    net_revenue: float


class CommissionOffender(BaseSchema):
    channel: str
    amount: float
    percentage: float


class CommissionBleed(BaseSchema):
    total_lost: float = 0.0
    percentage_lost: float = 0.0
    biggest_offenders: List[CommissionOffender] = Field(default_factory=list)


class ChannelAnalysisReport(BaseSchema):
    channels: List[ChannelAnalysisItem] = Field(default_factory=list)
    summary: ChannelAnalysisSummary = Field(default_factory=ChannelAnalysisSummary)
    chart_data: List[ChannelChartPoint] = Field(default_factory=list)
    commission_bleed: CommissionBleed = Field(default_factory=CommissionBleed)


class PeriodMetrics(BaseSchema):
    revenue: float
    direct_percentage: int
    ota_commissions: float
    bookings: int


class ProgressHistoryPoint(BaseSchema):
    month: str
    direct_percentage: int


class ProgressReport(BaseSchema):
    has_data: bool
    three_months_ago: Optional[PeriodMetrics] = None
    last_month: Optional[PeriodMetrics] = None
    this_month: Optional[PeriodMetrics] = None
    historical_data: List[ProgressHistoryPoint] = Field(default_factory=list)


class AnalyticsFilters(BaseSchema):
    time_window: str = "90d"
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    page: int = Field(default=1, ge=1)
    page_size: int = Field(default=50, ge=1, le=500)


class TrendFilters(BaseSchema):
    months_back: int = Field(default=6, ge=1, le=24)


class SavingsFilters(BaseSchema):
    time_window: str = "90d"
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    target_direct_pct: Optional[float] = Field(default=None, ge=0.0, le=100.0)
