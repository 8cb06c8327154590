from __future__ import annotations

import os

os.environ.setdefault("SUPABASE_URL", "http://localhost:54321")
os.environ.setdefault("SUPABASE_ANON_KEY", "test-anon-key")

from datetime import date
from typing import List, Tuple

import pytest
from fastapi.testclient import TestClient

from bookingboost.api.dependencies import get_channel_analytics_service, get_marketing_service
from bookingboost.core.errors import NotFoundError
from bookingboost.main import create_app
from bookingboost.models.bookings import Booking
from bookingboost.schemas.analytics import (
    AnalyticsFilters,
    ChannelAnalysisItem,
    ChannelAnalysisReport,
    ChannelStat,
    CommissionSavings,
    DashboardSummary,
    DirectSplit,
    HealthStatusDetail,
    MonthlyTrend,
    ProgressReport,
    SavingsFilters,
    SavingsProjection,
)
from bookingboost.schemas.marketing import MarketingAnalysis, MarketingSummary
from bookingboost.services.hotel_data import ReportContext
from factories import make_booking


@pytest.fixture()
def sample_bookings() -> List[Booking]:
    """Six direct and four OTA bookings over four channels; OTA commissions total 1470."""
    return [
        make_booking("1", "Direct Website", 2500, date(2024, 1, 15), 0, True, 0),
        make_booking("2", "Direct Website", 3200, date(2024, 1, 20), 0, True, 0),
        make_booking("3", "Direct Website", 2800, date(2024, 2, 5), 0, True, 0),
        make_booking("4", "Booking.com", 2200, date(2024, 1, 10), 330, False, 0.15),
        make_booking("5", "Booking.com", 2600, date(2024, 2, 12), 390, False, 0.15),
        make_booking("6", "Airbnb", 1800, date(2024, 1, 25), 270, False, 0.15),
        make_booking("7", "Expedia", 2400, date(2024, 2, 18), 480, False, 0.20),
        make_booking("8", "Direct Website", 2900, date(2024, 2, 22), 0, True, 0),
        make_booking("9", "Direct Website", 3100, date(2024, 3, 5), 0, True, 0),
        make_booking("10", "Direct Website", 2700, date(2024, 3, 10), 0, True, 0),
    ]


def _context(time_window: str = "90d", degraded: bool = False) -> ReportContext:
    return ReportContext(hotel_id="hotel-1", currency="ZAR", time_window=time_window, degraded=degraded)


def _health() -> HealthStatusDetail:
    return HealthStatusDetail(
        status="good",
        message="Good performance! You're above industry average.",
        color="blue",
    )


def _channel_stats() -> List[ChannelStat]:
    return [
        ChannelStat(
            channel="Direct Website",
            bookings=6,
            revenue=17200,
            commission_paid=0,
            commission_rate=0,
            is_direct=True,
            percentage=65.65,
            emoji="🌐",
        ),
        ChannelStat(
            channel="Booking.com",
            bookings=2,
            revenue=4800,
            commission_paid=720,
            commission_rate=0.15,
            is_direct=False,
            percentage=18.32,
            emoji="🏨",
        ),
    ]


class FakeChannelAnalyticsService:
    def _check(self, hotel_id: str) -> None:
        if hotel_id == "missing":
            raise NotFoundError("Hotel not found")

    def get_channel_stats(
        self, hotel_id: str, filters: AnalyticsFilters
    ) -> Tuple[List[ChannelStat], ReportContext]:
        self._check(hotel_id)
        return _channel_stats(), _context(filters.time_window)

    def get_direct_split(self, hotel_id: str, filters: AnalyticsFilters) -> Tuple[DirectSplit, ReportContext]:
        self._check(hotel_id)
        split = DirectSplit(
            total_bookings=10,
            direct_bookings=6,
            ota_bookings=4,
            direct_percentage=60.0,
            ota_commissions=1470.0,
            health=_health(),
        )
        return split, _context(filters.time_window)

    def get_dashboard(self, hotel_id: str, filters: AnalyticsFilters) -> Tuple[DashboardSummary, ReportContext]:
        self._check(hotel_id)
        summary = DashboardSummary(
            total_bookings=10,
            total_revenue=26200,
            direct_revenue=17200,
            ota_revenue=9000,
            direct_percentage=60.0,
            ota_commissions=1470,
            average_booking_value=2620,
            previous_period_revenue=0,
            revenue_change_percentage=100.0,
            health=_health(),
            direct_booking_goal=70.0,
            savings=CommissionSavings(
                monthly=427.93, annual=5135.2, improvement=10.0, average_commission_rate=0.1633
            ),
            channels=_channel_stats(),
        )
        return summary, _context(filters.time_window)

    def get_monthly_trends(self, hotel_id: str, months_back: int) -> Tuple[List[MonthlyTrend], ReportContext]:
        self._check(hotel_id)
        trend = MonthlyTrend(
            month="Mar",
            date="2024-03",
            revenue=5800,
            bookings=2,
            direct_bookings=2,
            ota_bookings=0,
            direct_revenue=5800,
            ota_revenue=0,
            direct_percentage=100.0,
            commissions_paid=0,
        )
        return [trend], _context(f"{months_back}m")

    def get_savings(self, hotel_id: str, filters: SavingsFilters) -> Tuple[SavingsProjection, ReportContext]:
        self._check(hotel_id)
        target = filters.target_direct_pct if filters.target_direct_pct is not None else 70.0
        projection = SavingsProjection(
            current_direct_percentage=60.0,
            target_direct_percentage=target,
            savings=CommissionSavings(monthly=427.93, annual=5135.2, improvement=target - 60.0),
        )
        return projection, _context(filters.time_window)

    def get_progress(self, hotel_id: str) -> Tuple[ProgressReport, ReportContext]:
        self._check(hotel_id)
        return ProgressReport(has_data=False), _context("6m")

    def get_channel_analysis(
        self, hotel_id: str, filters: AnalyticsFilters
    ) -> Tuple[ChannelAnalysisReport, ReportContext]:
        self._check(hotel_id)
        report = ChannelAnalysisReport(
            channels=[
                ChannelAnalysisItem(
                    channel="Booking.com",
                    bookings_count=2,
                    total_revenue=4800,
                    percentage_of_total=100.0,
                    commission_rate=0.15,
                    commission_paid=720,
                    net_revenue=4080,
                    avg_booking_value=2400,
                )
            ]
        )
        return report, _context(filters.time_window, degraded=True)


class FakeMarketingService:
    def get_marketing_analysis(
        self, hotel_id: str, filters: AnalyticsFilters
    ) -> Tuple[MarketingAnalysis, ReportContext]:
        analysis = MarketingAnalysis(
            has_data=True,
            summary=MarketingSummary(total_spend=4500, blended_roi=3.82, total_conversions=70),
        )
        return analysis, _context(filters.time_window)


@pytest.fixture()
def client() -> TestClient:
    app = create_app()
    app.dependency_overrides[get_channel_analytics_service] = FakeChannelAnalyticsService
    app.dependency_overrides[get_marketing_service] = FakeMarketingService
    return TestClient(app)
