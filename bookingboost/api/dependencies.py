from __future__ import annotations

from functools import lru_cache

from bookingboost.repositories.bookings_repository import BookingsRepository
from bookingboost.repositories.commission_rates_repository import CommissionRatesRepository
from bookingboost.repositories.hotels_repository import HotelsRepository
from bookingboost.repositories.marketing_metrics_repository import MarketingMetricsRepository
from bookingboost.services.channel_analytics_service import ChannelAnalyticsService
from bookingboost.services.hotel_data import HotelDataLoader
from bookingboost.services.marketing_service import MarketingService


@lru_cache
def get_hotels_repository() -> HotelsRepository:
    return HotelsRepository()


@lru_cache
def get_bookings_repository() -> BookingsRepository:
    return BookingsRepository()


@lru_cache
def get_commission_rates_repository() -> CommissionRatesRepository:
    return CommissionRatesRepository()


@lru_cache
def get_marketing_metrics_repository() -> MarketingMetricsRepository:
    return MarketingMetricsRepository()


def get_hotel_data_loader() -> HotelDataLoader:
    return HotelDataLoader(
        hotels_repository=get_hotels_repository(),
        bookings_repository=get_bookings_repository(),
    )


def get_channel_analytics_service() -> ChannelAnalyticsService:
    return ChannelAnalyticsService(
        loader=get_hotel_data_loader(),
        commission_rates_repository=get_commission_rates_repository(),
    )


def get_marketing_service() -> MarketingService:
    return MarketingService(
        loader=get_hotel_data_loader(),
        marketing_repository=get_marketing_metrics_repository(),
    )
