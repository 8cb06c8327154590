from __future__ import annotations

import logging
from datetime import date
from typing import Dict, List, Optional, Tuple

import httpx

from bookingboost.analytics.calculations import (
    calculate_average_booking_value,
    calculate_channel_stats,
    calculate_commission_savings,
    calculate_direct_percentage,
    calculate_ota_commissions,
    calculate_percentage_change,
    calculate_revenue_split,
    get_health_status_with_message,
    get_monthly_trends,
)
from bookingboost.analytics.channel_analysis import (
    DEFAULT_COMMISSION_RATES,
    analyze_channels,
    build_commission_rate_card,
)
from bookingboost.analytics.channels import is_direct_booking
from bookingboost.analytics.progress import HISTORY_MONTHS, build_progress_report
from bookingboost.repositories.commission_rates_repository import CommissionRatesRepository
from bookingboost.schemas.analytics import (
    AnalyticsFilters,
    ChannelAnalysisReport,
    ChannelStat,
    DashboardSummary,
    DirectSplit,
    MonthlyTrend,
    ProgressReport,
    SavingsFilters,
    SavingsProjection,
)
from bookingboost.services.hotel_data import HotelDataLoader, ReportContext
from bookingboost.shared.time import add_months, month_start, previous_period, resolve_date_range


logger = logging.getLogger(__name__)


class ChannelAnalyticsService:
    def __init__(
        self,
        loader: HotelDataLoader,
        commission_rates_repository: CommissionRatesRepository,
    ) -> None:
        self.loader = loader
        self.commission_rates_repository = commission_rates_repository
        self.settings = loader.settings

    def get_channel_stats(
        self, hotel_id: str, filters: AnalyticsFilters
    ) -> Tuple[List[ChannelStat], ReportContext]:
        hotel = self.loader.load_hotel(hotel_id)
        start_date, end_date, label = resolve_date_range(
            filters.time_window, filters.start_date, filters.end_date
        )
        bookings = self.loader.load_bookings(hotel.id, start_date, end_date)
        return calculate_channel_stats(bookings), self.loader.context(hotel, label)

    def get_direct_split(
        self, hotel_id: str, filters: AnalyticsFilters
    ) -> Tuple[DirectSplit, ReportContext]:
        hotel = self.loader.load_hotel(hotel_id)
        start_date, end_date, label = resolve_date_range(
            filters.time_window, filters.start_date, filters.end_date
        )
        bookings = self.loader.load_bookings(hotel.id, start_date, end_date)
        direct_count = sum(1 for booking in bookings if is_direct_booking(booking))
        direct_percentage = calculate_direct_percentage(bookings)
        split = DirectSplit(
            total_bookings=len(bookings),
            direct_bookings=direct_count,
            ota_bookings=len(bookings) - direct_count,
            direct_percentage=direct_percentage,
            ota_commissions=calculate_ota_commissions(bookings),
            health=get_health_status_with_message(direct_percentage),
        )
        return split, self.loader.context(hotel, label)

    def get_dashboard(
        self, hotel_id: str, filters: AnalyticsFilters
    ) -> Tuple[DashboardSummary, ReportContext]:
        hotel = self.loader.load_hotel(hotel_id)
        start_date, end_date, label = resolve_date_range(
            filters.time_window, filters.start_date, filters.end_date
        )
        previous_start, previous_end = previous_period(start_date, end_date)
        history = self.loader.load_bookings(hotel.id, previous_start, end_date)
        bookings = [booking for booking in history if booking.booking_date >= start_date]
        previous = [booking for booking in history if booking.booking_date <= previous_end]

        split = calculate_revenue_split(bookings)
        previous_revenue = calculate_revenue_split(previous).total_revenue
        direct_percentage = calculate_direct_percentage(bookings)
        goal = self.settings.direct_booking_goal
        summary = DashboardSummary(
            total_bookings=len(bookings),
            total_revenue=split.total_revenue,
            direct_revenue=split.direct_revenue,
            ota_revenue=split.ota_revenue,
            direct_percentage=direct_percentage,
            ota_commissions=calculate_ota_commissions(bookings),
            average_booking_value=calculate_average_booking_value(bookings),
            previous_period_revenue=previous_revenue,
            revenue_change_percentage=calculate_percentage_change(split.total_revenue, previous_revenue),
            health=get_health_status_with_message(direct_percentage),
            direct_booking_goal=goal,
            savings=calculate_commission_savings(bookings, direct_percentage, goal),
            channels=calculate_channel_stats(bookings),
        )
        return summary, self.loader.context(hotel, label)

    def get_monthly_trends(
        self, hotel_id: str, months_back: int, today: Optional[date] = None
    ) -> Tuple[List[MonthlyTrend], ReportContext]:
        today = today or date.today()
        hotel = self.loader.load_hotel(hotel_id)
        bookings = self.loader.load_bookings(hotel.id, add_months(today, -months_back), today)
        trends = get_monthly_trends(bookings, months_back=months_back, today=today)
        return trends, self.loader.context(hotel, f"{months_back}m")

    def get_savings(
        self, hotel_id: str, filters: SavingsFilters
    ) -> Tuple[SavingsProjection, ReportContext]:
        hotel = self.loader.load_hotel(hotel_id)
        start_date, end_date, label = resolve_date_range(
            filters.time_window, filters.start_date, filters.end_date
        )
        bookings = self.loader.load_bookings(hotel.id, start_date, end_date)
        target = (
            filters.target_direct_pct
            if filters.target_direct_pct is not None
            else self.settings.direct_booking_goal
        )
        current = calculate_direct_percentage(bookings)
        projection = SavingsProjection(
            current_direct_percentage=current,
            target_direct_percentage=target,
            savings=calculate_commission_savings(bookings, current, target),
        )
        return projection, self.loader.context(hotel, label)

    def get_progress(
        self, hotel_id: str, today: Optional[date] = None
    ) -> Tuple[ProgressReport, ReportContext]:
        today = today or date.today()
        hotel = self.loader.load_hotel(hotel_id)
        history_start = add_months(month_start(today), -(HISTORY_MONTHS - 1))
        bookings = self.loader.load_bookings(hotel.id, history_start, today)
        report = build_progress_report(bookings, today)
        return report, self.loader.context(hotel, f"{HISTORY_MONTHS}m")

    def get_channel_analysis(
        self, hotel_id: str, filters: AnalyticsFilters
    ) -> Tuple[ChannelAnalysisReport, ReportContext]:
        hotel = self.loader.load_hotel(hotel_id)
        start_date, end_date, label = resolve_date_range(
            filters.time_window, filters.start_date, filters.end_date
        )
        bookings = self.loader.load_bookings(hotel.id, start_date, end_date)
        rate_card, degraded = self._load_rate_card(hotel.id)
        report = analyze_channels(bookings, rate_card)
        return report, self.loader.context(hotel, label, degraded=degraded)

    def _load_rate_card(self, hotel_id: str) -> Tuple[Dict[str, float], bool]:
        try:
            overrides = self.commission_rates_repository.list_active_rates(hotel_id)
        except httpx.HTTPError as exc:
            logger.warning(
                "Commission rate overrides unavailable for hotel %s, using defaults: %s",
                hotel_id,
                exc,
            )
            return dict(DEFAULT_COMMISSION_RATES), True
        return build_commission_rate_card(overrides), False
