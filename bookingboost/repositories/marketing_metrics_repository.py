from __future__ import annotations

from datetime import date
from typing import List

from bookingboost.core.supabase import SupabaseClient
from bookingboost.models.bookings import MarketingMetricRecord


class MarketingMetricsRepository:
    def __init__(self) -> None:
        self.client = SupabaseClient()

    def list_metrics(self, hotel_id: str, start_date: date, end_date: date) -> List[MarketingMetricRecord]:
        rows = self.client.select_all(
            table="marketing_metrics",
            select="date,source,metric_type,value",
            filters=[
                ("hotel_id", f"eq.{hotel_id}"),
                ("date", f"gte.{start_date.isoformat()}"),
                ("date", f"lte.{end_date.isoformat()}"),
            ],
            order="date.asc",
        )
        return [MarketingMetricRecord.model_validate(row) for row in rows]
