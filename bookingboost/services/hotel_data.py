from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from typing import List, Optional

import httpx

from bookingboost.core.config import get_settings
from bookingboost.core.errors import NotFoundError, UpstreamError
from bookingboost.models.bookings import Booking, HotelRecord
from bookingboost.repositories.bookings_repository import BookingsRepository
from bookingboost.repositories.hotels_repository import HotelsRepository


logger = logging.getLogger(__name__)


@dataclass
class ReportContext:
    hotel_id: str
    currency: str
    time_window: str
    degraded: bool = False


class HotelDataLoader:
    """Fetches the hotel and its bookings, the inputs every report starts from."""

    def __init__(
        self,
        hotels_repository: HotelsRepository,
        bookings_repository: BookingsRepository,
    ) -> None:
        self.hotels_repository = hotels_repository
        self.bookings_repository = bookings_repository
        self.settings = get_settings()

    def load_hotel(self, hotel_id: str) -> HotelRecord:
        try:
            hotel = self.hotels_repository.get_hotel(hotel_id)
        except httpx.HTTPError as exc:
            logger.error("Failed to load hotel %s: %s", hotel_id, exc)
            raise UpstreamError("Failed to load hotel", source="hotels") from exc
        if not hotel:
            raise NotFoundError("Hotel not found")
        return hotel

    def load_bookings(
        self, hotel_id: str, start_date: Optional[date], end_date: Optional[date]
    ) -> List[Booking]:
        try:
            bookings = self.bookings_repository.list_bookings(hotel_id, start_date, end_date)
        except httpx.HTTPError as exc:
            logger.error("Failed to load bookings for hotel %s: %s", hotel_id, exc)
            raise UpstreamError("Failed to load bookings", source="bookings") from exc
        logger.debug(
            "Loaded %d bookings for hotel %s between %s and %s",
            len(bookings),
            hotel_id,
            start_date,
            end_date,
        )
        return bookings

    def context(self, hotel: HotelRecord, time_window: str, degraded: bool = False) -> ReportContext:
        return ReportContext(
            hotel_id=hotel.id,
            currency=hotel.currency or self.settings.default_currency,
            time_window=time_window,
            degraded=degraded,
        )
