from __future__ import annotations

from datetime import date
from typing import Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field


class Booking(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str
    channel: Optional[str] = None
    revenue: Optional[float] = 0.0
    booking_date: date
    commission_rate: Optional[float] = None
    # Stored as commission_amount in the bookings table.
    commission_paid: Optional[float] = Field(
        default=None,
        validation_alias=AliasChoices("commission_paid", "commission_amount"),
    )
    is_direct: Optional[bool] = None


class HotelRecord(BaseModel):
    id: str
    name: Optional[str] = None
    currency: Optional[str] = None


class CommissionRateRecord(BaseModel):
    channel_name: str
    commission_rate: float
    is_active: Optional[bool] = None


class MarketingMetricRecord(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    metric_date: date = Field(alias="date")
    source: str
    metric_type: str
    value: Optional[float] = None
