from __future__ import annotations

from typing import List

from bookingboost.core.supabase import SupabaseClient
from bookingboost.models.bookings import CommissionRateRecord


class CommissionRatesRepository:
    def __init__(self) -> None:
        self.client = SupabaseClient()

    def list_active_rates(self, hotel_id: str) -> List[CommissionRateRecord]:
        rows, _ = self.client.select(
            table="commission_rates",
            select="channel_name,commission_rate,is_active",
            filters=[("hotel_id", f"eq.{hotel_id}"), ("is_active", "eq.true")],
        )
        return [CommissionRateRecord.model_validate(row) for row in rows]
