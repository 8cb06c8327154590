from __future__ import annotations

from datetime import date
from typing import Optional

from bookingboost.models.bookings import Booking


def make_booking(
    booking_id: str,
    channel: Optional[str],
    revenue: float,
    booking_date: date,
    commission_paid: Optional[float] = None,
    is_direct: Optional[bool] = None,
    commission_rate: Optional[float] = None,
) -> Booking:
    return Booking(
        id=booking_id,
        channel=channel,
        revenue=revenue,
        booking_date=booking_date,
        commission_paid=commission_paid,
        commission_rate=commission_rate,
        is_direct=is_direct,
    )
