from __future__ import annotations

from typing import Dict, Iterable, List, Mapping, Sequence

from bookingboost.analytics.channels import channel_label
from bookingboost.models.bookings import Booking, CommissionRateRecord
from bookingboost.schemas.analytics import (
    ChannelAnalysisItem,
    ChannelAnalysisReport,
    ChannelAnalysisSummary,
    ChannelChartPoint,
    CommissionBleed,
    CommissionOffender,
)


DEFAULT_COMMISSION_RATES: Mapping[str, float] = {
    "Booking.com": 0.15,
    "Expedia": 0.18,
    "Direct Booking": 0.00,
    "Hotelbeds": 0.20,
    "followme2AFRICA": 0.10,
    "Tourplan": 0.10,
    "Thompsons Holidays": 0.15,
    "Holiday Travel Group": 0.15,
    "Thompsons Africa (New)": 0.15,
    "Airbnb": 0.15,
    "Agoda": 0.16,
    "Hotels.com": 0.18,
    "Sabre": 0.12,
    "Amadeus": 0.12,
    "Other": 0.10,
}

CHART_LABEL_MAX_LENGTH = 15
CHART_LABEL_KEEP = 12
MAX_COMMISSION_OFFENDERS = 3


def build_commission_rate_card(overrides: Iterable[CommissionRateRecord]) -> Dict[str, float]:
    rate_card = dict(DEFAULT_COMMISSION_RATES)
    for override in overrides:
        if override.is_active is False:
            continue
        rate_card[override.channel_name] = override.commission_rate
    return rate_card


def _rate_card_commission(booking: Booking, rate_card: Mapping[str, float]) -> float:
    # A recorded commission of 0 falls through to the rate card, as does a 0 booking rate.
    if booking.commission_paid:
        return booking.commission_paid
    rate = booking.commission_rate or rate_card.get(channel_label(booking.channel)) or 0.0
    return (booking.revenue or 0.0) * rate


def _chart_label(channel: str) -> str:
    if len(channel) > CHART_LABEL_MAX_LENGTH:
        return channel[:CHART_LABEL_KEEP] + "..."
    return channel


def analyze_channels(
    bookings: Sequence[Booking], rate_card: Mapping[str, float] = DEFAULT_COMMISSION_RATES
) -> ChannelAnalysisReport:
    """Gross revenue, commission and net revenue per channel using the hotel's rate card."""
    if not bookings:
        return ChannelAnalysisReport()

    groups: Dict[str, Dict[str, float]] = {}
    total_revenue = 0.0
    total_commissions = 0.0
    for booking in bookings:
        channel = channel_label(booking.channel)
        group = groups.setdefault(channel, {"count": 0, "revenue": 0.0, "commission": 0.0})
        revenue = booking.revenue or 0.0
        commission = _rate_card_commission(booking, rate_card)
        group["count"] += 1
        group["revenue"] += revenue
        group["commission"] += commission
        total_revenue += revenue
        total_commissions += commission

    channels: List[ChannelAnalysisItem] = []
    for channel, group in groups.items():
        count = int(group["count"])
        channels.append(
            ChannelAnalysisItem(
                channel=channel,
                bookings_count=count,
                total_revenue=group["revenue"],
                percentage_of_total=(group["revenue"] / total_revenue) * 100 if total_revenue > 0 else 0.0,
                commission_rate=rate_card.get(channel) or 0.0,
                commission_paid=group["commission"],
                net_revenue=group["revenue"] - group["commission"],
                avg_booking_value=group["revenue"] / count if count else 0.0,
            )
        )
    channels.sort(key=lambda item: item.total_revenue, reverse=True)

    summary = ChannelAnalysisSummary(
        total_bookings=len(bookings),
        total_revenue=total_revenue,
        total_commissions=total_commissions,
        total_net_revenue=total_revenue - total_commissions,
        avg_commission_rate=(total_commissions / total_revenue) * 100 if total_revenue > 0 else 0.0,
    )
    chart_data = [
        ChannelChartPoint(
            channel=_chart_label(item.channel),
            gross_revenue=item.total_revenue,
            commission=item.commission_paid,
            net_revenue=item.net_revenue,
        )
        for item in channels
    ]
    return ChannelAnalysisReport(
        channels=channels,
        summary=summary,
        chart_data=chart_data,
        commission_bleed=calculate_commission_bleed(channels),
    )


def calculate_commission_bleed(channels: Sequence[ChannelAnalysisItem]) -> CommissionBleed:
    """Revenue lost to commissions and the channels costing the most."""
    total_revenue = sum(item.total_revenue for item in channels)
    total_commissions = sum(item.commission_paid for item in channels)
    offenders = sorted(
        (
            CommissionOffender(
                channel=item.channel,
                amount=item.commission_paid,
                percentage=item.commission_rate * 100,
            )
            for item in channels
            if item.commission_paid > 0
        ),
        key=lambda offender: offender.amount,
        reverse=True,
    )
    return CommissionBleed(
        total_lost=total_commissions,
        percentage_lost=(total_commissions / total_revenue) * 100 if total_revenue > 0 else 0.0,
        biggest_offenders=offenders[:MAX_COMMISSION_OFFENDERS],
    )
