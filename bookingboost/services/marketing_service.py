from __future__ import annotations

import logging
from typing import List, Tuple

import httpx

from bookingboost.analytics.calculations import calculate_revenue_split
from bookingboost.analytics.marketing import process_marketing_metrics
from bookingboost.models.bookings import MarketingMetricRecord
from bookingboost.repositories.marketing_metrics_repository import MarketingMetricsRepository
from bookingboost.schemas.analytics import AnalyticsFilters
from bookingboost.schemas.marketing import MarketingAnalysis
from bookingboost.services.hotel_data import HotelDataLoader, ReportContext
from bookingboost.shared.time import resolve_date_range


logger = logging.getLogger(__name__)


class MarketingService:
    def __init__(
        self,
        loader: HotelDataLoader,
        marketing_repository: MarketingMetricsRepository,
    ) -> None:
        self.loader = loader
        self.marketing_repository = marketing_repository
        self.settings = loader.settings

    def get_marketing_analysis(
        self, hotel_id: str, filters: AnalyticsFilters
    ) -> Tuple[MarketingAnalysis, ReportContext]:
        hotel = self.loader.load_hotel(hotel_id)
        start_date, end_date, label = resolve_date_range(
            filters.time_window, filters.start_date, filters.end_date
        )
        degraded = False
        metrics: List[MarketingMetricRecord] = []
        try:
            metrics = self.marketing_repository.list_metrics(hotel.id, start_date, end_date)
        except httpx.HTTPError as exc:
            logger.warning("Marketing metrics unavailable for hotel %s: %s", hotel.id, exc)
            degraded = True

        bookings = self.loader.load_bookings(hotel.id, start_date, end_date)
        direct_revenue = calculate_revenue_split(bookings).direct_revenue
        analysis = process_marketing_metrics(
            metrics,
            direct_revenue=direct_revenue,
            average_booking_value=self.settings.average_booking_value,
        )
        return analysis, self.loader.context(hotel, label, degraded=degraded)
