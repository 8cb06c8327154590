from __future__ import annotations

from typing import Optional

from bookingboost.core.supabase import SupabaseClient
from bookingboost.models.bookings import HotelRecord


class HotelsRepository:
    def __init__(self) -> None:
        self.client = SupabaseClient()

    def get_hotel(self, hotel_id: str) -> Optional[HotelRecord]:
        rows, _ = self.client.select(
            table="hotels",
            select="id,name,currency",
            filters=[("id", f"eq.{hotel_id}")],
            limit=1,
        )
        if not rows:
            return None
        return HotelRecord.model_validate(rows[0])
