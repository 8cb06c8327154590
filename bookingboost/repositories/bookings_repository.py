from __future__ import annotations

from datetime import date
from typing import List, Optional, Tuple

from bookingboost.core.config import get_settings
from bookingboost.core.supabase import SupabaseClient
from bookingboost.models.bookings import Booking


class BookingsRepository:
    def __init__(self) -> None:
        self.client = SupabaseClient()
        self.page_size = get_settings().bookings_page_size

    def list_bookings(
        self,
        hotel_id: str,
        start_date: Optional[date],
        end_date: Optional[date],
    ) -> List[Booking]:
        filters: List[Tuple[str, str]] = [("hotel_id", f"eq.{hotel_id}")]
        if start_date:
            filters.append(("booking_date", f"gte.{start_date.isoformat()}"))
        if end_date:
            filters.append(("booking_date", f"lte.{end_date.isoformat()}"))
        rows = self.client.select_all(
            table="bookings",
            select="*",
            filters=filters,
            order="booking_date.asc,id.asc",
            page_size=self.page_size,
        )
        return [Booking.model_validate(row) for row in rows]
