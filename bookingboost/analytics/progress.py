from __future__ import annotations

import calendar
import math
from datetime import date
from typing import List, Sequence

from bookingboost.analytics.calculations import (
    calculate_direct_percentage,
    calculate_ota_commissions,
)
from bookingboost.models.bookings import Booking
from bookingboost.schemas.analytics import PeriodMetrics, ProgressHistoryPoint, ProgressReport
from bookingboost.shared.time import add_months, month_end, month_start


HISTORY_MONTHS = 6


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def calculate_period_metrics(bookings: Sequence[Booking], start: date, end: date) -> PeriodMetrics:
    """Totals for bookings dated ``start``..``end`` inclusive.

    ``direct_percentage`` is the share of direct bookings by count, like every
    other report, not a revenue-weighted share; recorded commissions only.
    """
    period = [booking for booking in bookings if start <= booking.booking_date <= end]
    return PeriodMetrics(
        revenue=sum(booking.revenue or 0.0 for booking in period),
        direct_percentage=_round_half_up(calculate_direct_percentage(period)),
        ota_commissions=calculate_ota_commissions(period, estimate_if_missing=False),
        bookings=len(period),
    )


def build_progress_report(bookings: Sequence[Booking], today: date) -> ProgressReport:
    """Direct-booking progress: this month, last month, three months ago and a six-month history."""
    if not bookings:
        return ProgressReport(has_data=False)

    last_month = add_months(month_start(today), -1)
    three_months_ago = add_months(month_start(today), -3)

    history: List[ProgressHistoryPoint] = []
    for offset in range(HISTORY_MONTHS - 1, -1, -1):
        start = add_months(month_start(today), -offset)
        end = today if offset == 0 else month_end(start)
        metrics = calculate_period_metrics(bookings, start, end)
        history.append(
            ProgressHistoryPoint(
                month=calendar.month_abbr[start.month],
                direct_percentage=metrics.direct_percentage,
            )
        )

    return ProgressReport(
        has_data=True,
        three_months_ago=calculate_period_metrics(
            bookings, three_months_ago, month_end(three_months_ago)
        ),
        last_month=calculate_period_metrics(bookings, last_month, month_end(last_month)),
        this_month=calculate_period_metrics(bookings, month_start(today), today),
        historical_data=history,
    )
