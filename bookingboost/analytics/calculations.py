"""Booking analytics calculations.

Pure functions over an in-memory list of bookings: channel performance,
direct-vs-OTA split, commission totals, marketing ROI, savings projections,
monthly trends and health status. Every function is total over its input:
empty lists and zero denominators produce 0 rather than raising.
"""

from __future__ import annotations

import calendar
from collections import defaultdict
from datetime import date
from typing import Dict, List, Optional, Sequence

from bookingboost.analytics.channels import (
    DEFAULT_OTA_COMMISSION_RATE,
    MissingCommissionPolicy,
    channel_label,
    get_channel_emoji,
    is_direct_booking,
    resolve_commission,
)
from bookingboost.models.bookings import Booking
from bookingboost.schemas.analytics import (
    ChannelStat,
    CommissionSavings,
    HealthStatus,
    HealthStatusDetail,
    MonthlyTrend,
    RevenueSplit,
)
from bookingboost.shared.time import add_months


HEALTH_THRESHOLDS: Sequence[tuple[float, HealthStatus]] = (
    (70.0, "excellent"),
    (60.0, "good"),
    (50.0, "warning"),
)

HEALTH_MESSAGES: Dict[str, tuple[str, str]] = {
    "excellent": ("Excellent! You're maximizing revenue and minimizing commissions.", "green"),
    "good": ("Good performance! You're above industry average.", "blue"),
    "warning": ("Room for improvement. Focus on increasing direct bookings.", "yellow"),
    "urgent": ("High OTA dependency. Prioritize direct booking strategies.", "red"),
}


def _total_revenue(bookings: Sequence[Booking]) -> float:
    return sum(booking.revenue or 0.0 for booking in bookings)


def calculate_channel_stats(bookings: Sequence[Booking]) -> List[ChannelStat]:
    """Aggregate bookings per channel, sorted by revenue (highest first).

    Channels are grouped by their exact label. Missing commissions count as
    zero here, and ``is_direct`` comes from the first booking seen for the
    channel.
    """
    if not bookings:
        return []

    groups: Dict[str, Dict[str, float]] = {}
    directness: Dict[str, bool] = {}
    total_revenue = 0.0
    for booking in bookings:
        channel = channel_label(booking.channel)
        if channel not in groups:
            groups[channel] = {"bookings": 0, "revenue": 0.0, "commission": 0.0}
            directness[channel] = is_direct_booking(booking)
        group = groups[channel]
        revenue = booking.revenue or 0.0
        group["bookings"] += 1
        group["revenue"] += revenue
        group["commission"] += resolve_commission(booking, MissingCommissionPolicy.ZERO_FILL)
        total_revenue += revenue

    stats = [
        ChannelStat(
            channel=channel,
            bookings=int(group["bookings"]),
            revenue=group["revenue"],
            commission_paid=group["commission"],
            commission_rate=group["commission"] / group["revenue"] if group["revenue"] > 0 else 0.0,
            is_direct=directness[channel],
            percentage=(group["revenue"] / total_revenue) * 100 if total_revenue > 0 else 0.0,
            emoji=get_channel_emoji(channel),
        )
        for channel, group in groups.items()
    ]
    # sorted() is stable, so equal revenues keep first-seen order.
    return sorted(stats, key=lambda stat: stat.revenue, reverse=True)


def calculate_direct_percentage(bookings: Sequence[Booking]) -> float:
    if not bookings:
        return 0.0
    direct_count = sum(1 for booking in bookings if is_direct_booking(booking))
    return (direct_count / len(bookings)) * 100


def calculate_ota_commissions(bookings: Sequence[Booking], estimate_if_missing: bool = True) -> float:
    """Total commission paid to OTAs.

    With ``estimate_if_missing`` unrecorded commissions are estimated from the
    channel's standard rate; otherwise they count as zero.
    """
    policy = (
        MissingCommissionPolicy.ESTIMATE if estimate_if_missing else MissingCommissionPolicy.ZERO_FILL
    )
    return sum(
        resolve_commission(booking, policy)
        for booking in bookings
        if not is_direct_booking(booking)
    )


def calculate_revenue_split(bookings: Sequence[Booking]) -> RevenueSplit:
    direct_revenue = 0.0
    ota_revenue = 0.0
    for booking in bookings:
        if is_direct_booking(booking):
            direct_revenue += booking.revenue or 0.0
        else:
            ota_revenue += booking.revenue or 0.0
    return RevenueSplit(
        total_revenue=direct_revenue + ota_revenue,
        direct_revenue=direct_revenue,
        ota_revenue=ota_revenue,
    )


def calculate_blended_roi(marketing_spend: float, direct_revenue: float) -> float:
    """Direct revenue earned per unit of marketing spend."""
    if marketing_spend == 0:
        return 0.0
    return direct_revenue / marketing_spend


def calculate_commission_savings(
    bookings: Sequence[Booking],
    current_direct_pct: float,
    target_direct_pct: float,
) -> CommissionSavings:
    """Linear projection of commission saved by moving to a higher direct share."""
    if not bookings:
        return CommissionSavings()

    improvement = target_direct_pct - current_direct_pct
    if improvement <= 0:
        return CommissionSavings()

    total_revenue = _total_revenue(bookings)
    ota_revenue = _total_revenue([booking for booking in bookings if not is_direct_booking(booking)])
    ota_commissions = calculate_ota_commissions(bookings)
    average_rate = ota_commissions / ota_revenue if ota_revenue > 0 else DEFAULT_OTA_COMMISSION_RATE

    monthly = (improvement / 100) * total_revenue * average_rate
    return CommissionSavings(
        monthly=monthly,
        annual=monthly * 12,
        improvement=improvement,
        average_commission_rate=average_rate,
    )


def get_monthly_trends(
    bookings: Sequence[Booking],
    months_back: int = 6,
    today: Optional[date] = None,
) -> List[MonthlyTrend]:
    """Monthly buckets for bookings dated within the last ``months_back`` months.

    Only months with at least one booking get a bucket.
    """
    if not bookings:
        return []

    end_date = today or date.today()
    start_date = add_months(end_date, -months_back)

    months: Dict[str, List[Booking]] = defaultdict(list)
    for booking in bookings:
        if start_date <= booking.booking_date <= end_date:
            months[booking.booking_date.strftime("%Y-%m")].append(booking)

    trends: List[MonthlyTrend] = []
    for month_key in sorted(months):
        month_bookings = months[month_key]
        direct = [booking for booking in month_bookings if is_direct_booking(booking)]
        ota = [booking for booking in month_bookings if not is_direct_booking(booking)]
        trends.append(
            MonthlyTrend(
                month=calendar.month_abbr[int(month_key[5:])],
                date=month_key,
                revenue=_total_revenue(month_bookings),
                bookings=len(month_bookings),
                direct_bookings=len(direct),
                ota_bookings=len(ota),
                direct_revenue=_total_revenue(direct),
                ota_revenue=_total_revenue(ota),
                direct_percentage=(len(direct) / len(month_bookings)) * 100,
                commissions_paid=calculate_ota_commissions(ota),
            )
        )
    return trends


def determine_health_status(direct_percentage: float) -> HealthStatus:
    for threshold, status in HEALTH_THRESHOLDS:
        if direct_percentage >= threshold:
            return status
    return "urgent"


def get_health_status_with_message(direct_percentage: float) -> HealthStatusDetail:
    status = determine_health_status(direct_percentage)
    message, color = HEALTH_MESSAGES[status]
    return HealthStatusDetail(status=status, message=message, color=color)


def calculate_average_booking_value(bookings: Sequence[Booking]) -> float:
    if not bookings:
        return 0.0
    return _total_revenue(bookings) / len(bookings)


def calculate_conversion_rate(bookings: int, clicks: int) -> float:
    if clicks == 0:
        return 0.0
    return (bookings / clicks) * 100


def calculate_percentage_change(current: float, previous: float) -> float:
    if previous == 0:
        return 100.0 if current > 0 else 0.0
    return ((current - previous) / previous) * 100
